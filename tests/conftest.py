import copy
import pytest

from analytics_viewer.services import ReportFormatter


def _hourly_profile(key="graph_data", peak_hour=14, peak_value=120.0):
    points = [
        {"hour": h, "average_load": 50.0 + h, "min_range": 20.0 + h, "max_range": 80.0 + h}
        for h in range(24)
    ]
    return {
        key: points,
        "peak_event": {"hour": peak_hour, "value": peak_value, "formatted_hour": f"{peak_hour}:00"},
    }


def _operating_hours(day_kwh=700.0, night_kwh=300.0):
    return {
        "daytime": {
            "label": "Daytime (06:00 - 18:00)", "percentage": "70%", "energy_consumption": day_kwh,
            "avg_kva": 55.4, "min_kva": 20.2, "max_kva": 120.6,
        },
        "nighttime": {
            "label": "Nighttime (18:00 - 06:00)", "percentage": "30%", "energy_consumption": night_kwh,
            "avg_kva": 25.0, "min_kva": 10.0, "max_kva": 60.0,
        },
    }


FACILITY = {"company_name": "Acme Foods", "facility_name": "Ikeja Plant", "address": "12 Allen Ave, Lagos"}

QUALITY = {
    "total_values": 2880,
    "total_missing": 12,
    "percentage_missing": "0.42%",
    "measurment_interval_minutes": 15,
}

SUMMARY_TOTALS = {
    "total_energy_consumed": 1500000.0,
    "peak_load": 120.4,
    "total_energy_cost": 123456.789,
    "load_factor": 0.65,
}

PERIOD_CARDS = {
    "total_energy_consumption": 7000.5,
    "peak_kva": 130.2,
    "energy_cost": 55000.0,
    "daily_avg_energy": 1000.07,
    "weekday_avg_energy": 1100.0,
    "weekend_avg_energy": 750.5,
}

LOAD_ANALYSIS = {
    "weekday": {"average": 60.2, "min": 20.0, "max": 130.2},
    "weekend": {"average": 40.0, "min": 15.5, "max": 90.0},
}


@pytest.fixture
def day_payload():
    return {
        "period": "day",
        "facility_info": dict(FACILITY),
        "data_quality_indicators": dict(QUALITY),
        "energy_load_summary": {
            **SUMMARY_TOTALS,
            "consumption_summary": {
                "daily_consumption": [
                    {"formatted_date": "Mon, Jan 6", "consumption_kwh": 1000.0},
                    {"formatted_date": "Tue, Jan 7", "consumption_kwh": 500.0},
                ]
            },
            "typical_day_profile": _hourly_profile(key="hourly_data", peak_value=130.0),
        },
        "performance_reviews": [
            {
                "formatted_date": "Mon, Jan 6",
                "summary_cards": {"total_energy_consumption": 1000, "peak_kva": 110.0, "energy_cost": 85000.0},
                "operating_hours": _operating_hours(day_kwh=700, night_kwh=300),
                "hourly_load_profile": _hourly_profile(),
            }
        ],
    }


@pytest.fixture
def week_payload():
    return {
        "period": "week",
        "facility_info": dict(FACILITY),
        "data_quality_indicators": dict(QUALITY),
        "energy_load_summary": {
            **SUMMARY_TOTALS,
            "consumption_summary": {
                "weekly_consumption": [
                    {"week_label": "W1", "total_consumption_kwh": 40.0},
                    {"week_label": "W2", "total_consumption_kwh": 100.0},
                    {"week_label": "W3", "total_consumption_kwh": 10.0},
                ]
            },
        },
        "performance_reviews": [
            {
                "week_label": "W1",
                "full_week_label": "Week 1 (Jan 1 - Jan 7)",
                "summary_cards": dict(PERIOD_CARDS),
                "daily_consumption_chart": [{"day": "Mon", "consumption_kwh": 1000.0}],
                "week_comparison_list": [
                    {"label": "W1", "value_kwh": 40.0},
                    {"label": "W2", "value_kwh": 100.0},
                    {"label": "W3", "value_kwh": 10.0},
                ],
                "hourly_load_profile": _hourly_profile(),
                "consumption_pattern_table": {"Mon": {"9": 5.0, "14": 10.0}},
                "load_profile_analysis": copy.deepcopy(LOAD_ANALYSIS),
                "operating_hours": _operating_hours(),
            },
            {
                "week_label": "W2",
                "full_week_label": "Week 2 (Jan 8 - Jan 14)",
                "comparison_with_previous": {"direction": "increase", "percentage": "150%"},
                "summary_cards": dict(PERIOD_CARDS),
                "daily_consumption_chart": [{"day": "Mon", "consumption_kwh": 900.0}],
                "week_comparison_list": [
                    {"label": "W1", "value_kwh": 0.0},
                    {"label": "W2", "value_kwh": 0.0},
                ],
                "hourly_load_profile": _hourly_profile(),
                "consumption_pattern_table": {},
                "load_profile_analysis": copy.deepcopy(LOAD_ANALYSIS),
                "operating_hours": _operating_hours(),
            },
        ],
    }


@pytest.fixture
def month_payload():
    return {
        "period": "month",
        "facility_info": dict(FACILITY),
        "data_quality_indicators": dict(QUALITY),
        "energy_load_summary": {
            **SUMMARY_TOTALS,
            "consumption_summary": {
                "monthly_consumption": [
                    {"month_label": "Jan 2025", "total_consumption_kwh": 30000.0},
                    {"month_label": "Feb 2025", "total_consumption_kwh": 15000.0},
                ]
            },
        },
        "performance_reviews": [
            {
                "month_label": "Jan 2025",
                "summary_cards": dict(PERIOD_CARDS),
                "daily_consumption_chart": [
                    {"date": "01", "full_date": "Wed, Jan 1 2025", "consumption_kwh": 950.0},
                ],
                "week_comparison_list": [
                    {"label": "Wk 1", "value_kwh": 200.0},
                    {"label": "Wk 2", "value_kwh": 50.0},
                ],
                "hourly_load_profile": _hourly_profile(),
                "load_profile_analysis": copy.deepcopy(LOAD_ANALYSIS),
                "operating_hours": _operating_hours(),
            },
            {
                "month_label": "Feb 2025",
                "comparison_with_previous": {"direction": "decrease", "percentage": "50%"},
                "summary_cards": dict(PERIOD_CARDS),
                "daily_consumption_chart": [],
                "week_comparison_list": [
                    {"label": "Wk 1", "value_kwh": 10.0},
                    {"label": "Wk 2", "value_kwh": 40.0},
                ],
                "hourly_load_profile": _hourly_profile(),
                "load_profile_analysis": copy.deepcopy(LOAD_ANALYSIS),
                "operating_hours": _operating_hours(),
            },
        ],
    }


@pytest.fixture
def fmt():
    return ReportFormatter("NGN")
