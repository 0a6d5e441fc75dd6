# analytics_viewer/services/render_service.py

"""
Renderizado del reporte por periodo.

Cada renderer es una función pura (reporte, formatter) -> ReportView.
Los bloques de revisión se arman con una sola plantilla parametrizada
por ReviewCapabilities en lugar de tres copias casi iguales.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from analytics_viewer.schemas import (
    DayReport, WeekReport, MonthReport, HourlyProfile,
    StatCard, DetailCard, ComparisonBadge, BarChartView, LoadProfileChartView,
    ReviewBlock, ReportView, FacilityHeaderView
)
from analytics_viewer.core import logger
from .formatting_service import ReportFormatter
from .comparison_service import build_comparison_panel
from .heatmap_service import build_heatmap


@dataclass(frozen=True)
class ReviewCapabilities:
    comparison_panel: bool = False
    heatmap: bool = False
    load_profile_analysis: bool = False
    extended_cards: bool = False
    integer_total: bool = False


@dataclass(frozen=True)
class PeriodTheme:
    trend_color: str
    daily_bar_color: str
    profile_line_color: str
    profile_band_color: str
    highlight_color: str
    neutral_color: str
    accent_color: Optional[str] = None
    header_color: Optional[str] = None


DAY_CAPABILITIES = ReviewCapabilities()
WEEK_CAPABILITIES = ReviewCapabilities(comparison_panel=True, heatmap=True, load_profile_analysis=True, extended_cards=True)
MONTH_CAPABILITIES = ReviewCapabilities(
    comparison_panel=True, load_profile_analysis=True, extended_cards=True, integer_total=True
)

DAY_THEME = PeriodTheme(
    trend_color="#4caf50",
    daily_bar_color="#4caf50",
    profile_line_color="#4caf50",
    profile_band_color="#c8e6c9",
    highlight_color="#4caf50",
    neutral_color="#bdbdbd",
)
WEEK_THEME = PeriodTheme(
    trend_color="#2196f3",
    daily_bar_color="#4caf50",
    profile_line_color="#2e7d32",
    profile_band_color="#c8e6c9",
    highlight_color="#4caf50",
    neutral_color="#bdbdbd",
    accent_color="#2196f3",
    header_color="#1976d2",
)
MONTH_THEME = PeriodTheme(
    trend_color="#9c27b0",
    daily_bar_color="#7b1fa2",
    profile_line_color="#7b1fa2",
    profile_band_color="#f3e5f5",
    highlight_color="#4a148c",
    neutral_color="#7b1fa2",
    accent_color="#9c27b0",
    header_color="#7b1fa2",
)

# Perfil típico del día: banda roja clara para máximos, verde para mínimos
TYPICAL_MAX_BAND = "#ffebee"
TYPICAL_MIN_BAND = "#e8f5e9"
TYPICAL_LINE = "#2e7d32"


# =========================================================================
# Piezas compartidas
# =========================================================================

def build_facility_header(report) -> Optional[FacilityHeaderView]:
    info = getattr(report, "facility_info", None)
    if info is None:
        return None
    period = getattr(report, "period", None)
    badge = f"{period} Report" if period else "Report"
    return FacilityHeaderView(
        facility_name=info.facility_name,
        company_name=info.company_name,
        address=info.address,
        badge=badge
    )


def _quality_line(report, fmt: ReportFormatter, prefix: str = "") -> str:
    dq = report.data_quality_indicators
    return (
        f"{prefix}"
        f"Total Values: {fmt.verbatim(dq.total_values)} readings | "
        f"Missing Values: {fmt.verbatim(dq.total_missing)} readings | "
        f"Percentage Missing: {fmt.verbatim(dq.percentage_missing)} | "
        f"Interval: {fmt.verbatim(dq.measurement_interval_minutes)} mins"
    )


def _executive_cards(report, fmt: ReportFormatter, total_label: str, total_value: str,
                     cost_label: str = "Total Cost") -> List[StatCard]:
    summary = report.energy_load_summary
    return [
        StatCard(label=total_label, value=total_value),
        StatCard(label="Peak Load", value=f"{fmt.number(summary.peak_load)} kVA"),
        StatCard(label=cost_label, value=fmt.currency(summary.total_energy_cost)),
        StatCard(label="Load Factor", value=fmt.verbatim(summary.load_factor)),
    ]


def _bar_chart(title: str, labels, values, hover_labels, format_value: Callable, color: str,
               series_name: str = "", height: int = 400) -> BarChartView:
    return BarChartView(
        title=title,
        x_labels=list(labels),
        values=list(values),
        hover_text=[f"{label}: {format_value(value)} kWh" for label, value in zip(hover_labels, values)],
        color=color,
        series_name=series_name,
        height=height
    )


def _peak_caption(prefix: str, profile: HourlyProfile, fmt: ReportFormatter) -> str:
    peak = profile.peak_event
    return f"{prefix}: {fmt.number(peak.value)} kVA at {peak.formatted_hour}"


def _profile_chart(profile: HourlyProfile, fmt: ReportFormatter, title: str, caption_prefix: str,
                   line_color: str, max_band_color: Optional[str] = None, min_band_color: Optional[str] = None,
                   area_fill_color: Optional[str] = None, average_name: str = "Average",
                   height: int = 400) -> LoadProfileChartView:
    points = profile.graph_data
    return LoadProfileChartView(
        title=title,
        hours=[p.hour for p in points],
        average=[p.average_load for p in points],
        min_range=[p.min_range for p in points],
        max_range=[p.max_range for p in points],
        peak_hour=profile.peak_event.hour,
        peak_value=profile.peak_event.value,
        peak_caption=_peak_caption(caption_prefix, profile, fmt),
        line_color=line_color,
        max_band_color=max_band_color,
        min_band_color=min_band_color,
        area_fill_color=area_fill_color,
        average_name=average_name,
        height=height
    )


def _kva_details(avg, low, high, fmt: ReportFormatter) -> str:
    return f"Avg: {fmt.number(avg)} | Min: {fmt.number(low)} | Max: {fmt.number(high)} kVA"


def _operating_hours_cards(operating_hours, fmt: ReportFormatter, format_consumption: Callable) -> List[DetailCard]:
    cards = []
    for bucket, is_night in ((operating_hours.daytime, False), (operating_hours.nighttime, True)):
        cards.append(DetailCard(
            label=bucket.label,
            percentage=fmt.verbatim(bucket.percentage),
            consumption=f"Consumption: {format_consumption(bucket.energy_consumption)} kWh",
            details=_kva_details(bucket.avg_kva, bucket.min_kva, bucket.max_kva, fmt),
            is_night=is_night
        ))
    return cards


def _load_profile_cards(analysis, fmt: ReportFormatter) -> List[DetailCard]:
    return [
        DetailCard(label="Weekdays", details=_kva_details(analysis.weekday.average, analysis.weekday.min, analysis.weekday.max, fmt)),
        DetailCard(label="Weekends", details=_kva_details(analysis.weekend.average, analysis.weekend.min, analysis.weekend.max, fmt)),
    ]


def _comparison_badge(review, fmt: ReportFormatter) -> Optional[ComparisonBadge]:
    comparison = review.comparison_with_previous
    if comparison is None:
        return None
    arrow = "▲" if comparison.direction == "increase" else "▼"
    return ComparisonBadge(arrow=arrow, text=f"{fmt.verbatim(comparison.percentage)} vs prev")


def _summary_cards(cards, fmt: ReportFormatter, caps: ReviewCapabilities, labels: List[str]) -> List[StatCard]:
    if not caps.extended_cards:
        return [
            StatCard(label=labels[0], value=f"{fmt.number(cards.total_energy_consumption)} kWh"),
            StatCard(label=labels[1], value=f"{fmt.number(cards.peak_kva)} kVA"),
            StatCard(label=labels[2], value=fmt.currency(cards.energy_cost)),
        ]
    format_total = fmt.number if caps.integer_total else fmt.decimal
    return [
        StatCard(label=labels[0], value=format_total(cards.total_energy_consumption)),
        StatCard(label=labels[1], value=fmt.number(cards.peak_kva)),
        StatCard(label=labels[2], value=fmt.currency(cards.energy_cost)),
        StatCard(label=labels[3], value=fmt.decimal(cards.daily_avg_energy)),
        StatCard(label=labels[4], value=fmt.decimal(cards.weekday_avg_energy)),
        StatCard(label=labels[5], value=fmt.decimal(cards.weekend_avg_energy)),
    ]


def build_review_block(review, fmt: ReportFormatter, caps: ReviewCapabilities, theme: PeriodTheme, *,
                       title: str, card_labels: List[str], load_profile: LoadProfileChartView,
                       format_consumption: Callable, daily_chart: Optional[BarChartView] = None,
                       comparison_title: str = "", current_label: Optional[str] = None) -> ReviewBlock:
    """
    Plantilla común de un bloque de revisión.
    Lo que cambia por periodo entra como argumentos ya construidos.
    """
    comparison = None
    if caps.comparison_panel:
        comparison = build_comparison_panel(
            title=comparison_title,
            items=[(item.label, item.value_kwh) for item in review.week_comparison_list],
            format_value=fmt.number,
            highlight_color=theme.highlight_color,
            neutral_color=theme.neutral_color,
            current_label=current_label
        )

    heatmap = build_heatmap(review.consumption_pattern_table) if caps.heatmap else None
    profile_cards = _load_profile_cards(review.load_profile_analysis, fmt) if caps.load_profile_analysis else []

    return ReviewBlock(
        title=title,
        accent_color=theme.accent_color,
        header_color=theme.header_color,
        badge=_comparison_badge(review, fmt),
        summary_cards=_summary_cards(review.summary_cards, fmt, caps, card_labels),
        daily_chart=daily_chart,
        comparison=comparison,
        load_profile=load_profile,
        heatmap=heatmap,
        load_profile_cards=profile_cards,
        operating_hours=_operating_hours_cards(review.operating_hours, fmt, format_consumption)
    )


# =========================================================================
# 1. DÍA
# =========================================================================

def render_day_report(report: DayReport, fmt: ReportFormatter) -> ReportView:
    summary = report.energy_load_summary
    daily = summary.consumption_summary.daily_consumption

    trend_chart = _bar_chart(
        "Daily Energy Consumption Trend",
        labels=[d.formatted_date.split(",")[0] for d in daily],
        values=[d.consumption_kwh for d in daily],
        hover_labels=[d.formatted_date for d in daily],
        format_value=fmt.number,
        color=DAY_THEME.trend_color,
        series_name="Energy (kWh)"
    )

    typical_profile = _profile_chart(
        summary.typical_day_profile, fmt,
        title="Typical 24-Hour Load Profile",
        caption_prefix="Peak Event (Max Range)",
        line_color=TYPICAL_LINE,
        max_band_color=TYPICAL_MAX_BAND,
        min_band_color=TYPICAL_MIN_BAND,
        average_name="Average Load"
    )

    reviews = [
        build_review_block(
            day, fmt, DAY_CAPABILITIES, DAY_THEME,
            title=f"{day.formatted_date} Analysis",
            card_labels=["Daily Total", "Daily Peak", "Daily Cost"],
            load_profile=_profile_chart(
                day.hourly_load_profile, fmt,
                title=f"Hourly Load Profile - {day.formatted_date}",
                caption_prefix="Peak Load",
                line_color=DAY_THEME.profile_line_color,
                area_fill_color=DAY_THEME.profile_band_color,
                average_name="Load (kVA)",
                height=300
            ),
            format_consumption=fmt.number
        )
        for day in report.performance_reviews
    ]

    return ReportView(
        period=report.period,
        section_title="Executive Summary (Global)",
        quality_line=_quality_line(report, fmt),
        # El total global llega en Wh
        executive_cards=_executive_cards(report, fmt, "Total Energy Consumed",
                                         f"{fmt.number(summary.total_energy_consumed / 1000)} KWh",
                                         cost_label="Total Energy Cost"),
        trend_chart=trend_chart,
        typical_profile=typical_profile,
        reviews_title="Daily Performance Reviews",
        reviews=reviews
    )


# =========================================================================
# 2. SEMANA
# =========================================================================

def render_week_report(report: WeekReport, fmt: ReportFormatter) -> ReportView:
    summary = report.energy_load_summary
    weekly = summary.consumption_summary.weekly_consumption
    labels = [w.week_label for w in weekly]
    values = [w.total_consumption_kwh for w in weekly]

    trend_chart = _bar_chart(
        "Weekly Consumption Trend", labels=labels, values=values, hover_labels=labels,
        format_value=fmt.decimal, color=WEEK_THEME.trend_color, series_name="Energy (kWh)"
    )
    comparison = build_comparison_panel(
        title="Week-on-Week (kWh)",
        items=zip(labels, values),
        format_value=fmt.number,
        highlight_color=WEEK_THEME.highlight_color,
        neutral_color=WEEK_THEME.trend_color
    )

    reviews = []
    for week in report.performance_reviews:
        days = week.daily_consumption_chart
        reviews.append(build_review_block(
            week, fmt, WEEK_CAPABILITIES, WEEK_THEME,
            title=week.full_week_label or week.week_label,
            card_labels=["Total kWh", "Peak kVA", "Cost", "Daily Avg", "Weekday Avg", "Weekend Avg"],
            daily_chart=_bar_chart(
                "Daily Consumption (kWh)",
                labels=[d.day for d in days],
                values=[d.consumption_kwh for d in days],
                hover_labels=[d.day for d in days],
                format_value=fmt.number,
                color=WEEK_THEME.daily_bar_color,
                height=300
            ),
            comparison_title="Comparison (kWh)",
            current_label=week.week_label,
            load_profile=_profile_chart(
                week.hourly_load_profile, fmt,
                title="Weekly 24-Hour Load Profile",
                caption_prefix="Peak Event",
                line_color=WEEK_THEME.profile_line_color,
                max_band_color=WEEK_THEME.profile_band_color,
                min_band_color="#fff"
            ),
            format_consumption=fmt.decimal
        ))

    return ReportView(
        period=report.period,
        section_title="Executive Summary (Weekly Overview)",
        quality_line=_quality_line(report, fmt, prefix=f"Total Weeks: {len(report.performance_reviews)} weeks | "),
        executive_cards=_executive_cards(report, fmt, "Total Energy (kWh)", fmt.decimal(summary.total_energy_consumed)),
        trend_chart=trend_chart,
        comparison=comparison,
        reviews_title="Weekly Performance Reviews",
        reviews=reviews
    )


# =========================================================================
# 3. MES
# =========================================================================

def render_month_report(report: MonthReport, fmt: ReportFormatter) -> ReportView:
    summary = report.energy_load_summary
    monthly = summary.consumption_summary.monthly_consumption
    labels = [m.month_label for m in monthly]
    values = [m.total_consumption_kwh for m in monthly]

    trend_chart = _bar_chart(
        "Monthly Consumption Trend", labels=labels, values=values, hover_labels=labels,
        format_value=fmt.number, color=MONTH_THEME.trend_color, series_name="Energy (KWh)"
    )
    # Primer nivel: mes contra mes
    comparison = build_comparison_panel(
        title="Month-on-Month (KWh)",
        items=zip(labels, values),
        format_value=fmt.number,
        highlight_color=MONTH_THEME.highlight_color,
        neutral_color=MONTH_THEME.trend_color
    )

    reviews = []
    for month in report.performance_reviews:
        days = month.daily_consumption_chart
        # Segundo nivel: semanas dentro del mes
        reviews.append(build_review_block(
            month, fmt, MONTH_CAPABILITIES, MONTH_THEME,
            title=month.month_label,
            card_labels=["Total KWh", "Peak kVA", "Cost", "Daily Avg KWh", "Weekday Avg KWh", "Weekend Avg KWh"],
            daily_chart=_bar_chart(
                "Daily Consumption (kWh)",
                labels=[d.date for d in days],
                values=[d.consumption_kwh for d in days],
                hover_labels=[d.full_date or d.date for d in days],
                format_value=fmt.number,
                color=MONTH_THEME.daily_bar_color,
                height=300
            ),
            comparison_title="Week-on-Week (KWh)",
            load_profile=_profile_chart(
                month.hourly_load_profile, fmt,
                title="Monthly 24-Hour Load Profile (Range & Average)",
                caption_prefix="Peak Event",
                line_color=MONTH_THEME.profile_line_color,
                max_band_color=MONTH_THEME.profile_band_color,
                min_band_color="#fff"
            ),
            format_consumption=fmt.number
        ))

    return ReportView(
        period=report.period,
        section_title="Executive Summary (Monthly Overview)",
        quality_line=_quality_line(report, fmt),
        executive_cards=_executive_cards(report, fmt, "Total Energy (KWh)", fmt.number(summary.total_energy_consumed)),
        trend_chart=trend_chart,
        comparison=comparison,
        reviews_title="Monthly Performance Reviews",
        reviews=reviews
    )


# =========================================================================
# Despachador por periodo
# =========================================================================

_RENDERERS = {
    DayReport: render_day_report,
    WeekReport: render_week_report,
    MonthReport: render_month_report,
}


def dispatch_report_view(report, fmt: ReportFormatter) -> Optional[ReportView]:
    """
    Elige exactamente un renderer según el periodo.
    Periodo desconocido: None (solo se muestra el encabezado).
    """
    renderer = _RENDERERS.get(type(report))
    if renderer is None:
        logger.warning(f"⚠️ Periodo de reporte no reconocido: {getattr(report, 'period', None)!r}")
        return None
    return renderer(report, fmt)
