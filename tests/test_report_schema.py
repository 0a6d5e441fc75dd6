"""Validation of the analytics payload at the deserialization boundary."""
import pytest
from pydantic import ValidationError

from analytics_viewer.schemas import DayReport, MonthReport, UnrecognizedReport, WeekReport, parse_report


def test_parse_selects_model_by_period(day_payload, week_payload, month_payload):
    assert isinstance(parse_report(day_payload), DayReport)
    assert isinstance(parse_report(week_payload), WeekReport)
    assert isinstance(parse_report(month_payload), MonthReport)


def test_misspelled_interval_key_is_accepted(day_payload):
    report = parse_report(day_payload)
    assert report.data_quality_indicators.measurement_interval_minutes == 15


def test_correct_interval_key_is_accepted(day_payload):
    quality = day_payload["data_quality_indicators"]
    quality["measurement_interval_minutes"] = quality.pop("measurment_interval_minutes")
    report = parse_report(day_payload)
    assert report.data_quality_indicators.measurement_interval_minutes == 15


def test_typical_day_profile_reads_hourly_data(day_payload):
    profile = parse_report(day_payload).energy_load_summary.typical_day_profile
    assert len(profile.graph_data) == 24
    assert profile.peak_event.value == 130.0


def test_heatmap_hour_keys_become_integers(week_payload):
    report = parse_report(week_payload)
    assert report.performance_reviews[0].consumption_pattern_table == {"Mon": {9: 5.0, 14: 10.0}}


def test_unknown_period_keeps_only_header(day_payload):
    day_payload["period"] = "year"
    report = parse_report(day_payload)
    assert isinstance(report, UnrecognizedReport)
    assert report.period == "year"
    assert report.facility_info.facility_name == "Ikeja Plant"


def test_missing_period_is_unrecognized():
    report = parse_report({"facility_info": {"facility_name": "X"}})
    assert isinstance(report, UnrecognizedReport)
    assert report.period is None


def test_missing_required_structure_raises(day_payload):
    del day_payload["energy_load_summary"]
    with pytest.raises(ValidationError):
        parse_report(day_payload)


def test_non_mapping_payload_raises():
    with pytest.raises(ValidationError):
        parse_report(None)


def test_review_order_is_preserved(week_payload):
    report = parse_report(week_payload)
    assert [w.week_label for w in report.performance_reviews] == ["W1", "W2"]


def test_reports_are_immutable(day_payload):
    report = parse_report(day_payload)
    with pytest.raises(ValidationError):
        report.period = "week"
