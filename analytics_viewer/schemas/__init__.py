# Report Schemas
from .report_schema import (
    ReportPeriod, Report, DayReport, WeekReport, MonthReport, UnrecognizedReport,
    HourlyProfile, ComparisonItem, parse_report
)

# Request Schemas
from .request_schema import ReportRequest, ReportOutcome

# View Schemas
from .view_schema import (
    StatCard, ComparisonBar, ComparisonPanel, HeatmapCell, HeatmapRow, HeatmapGrid,
    BarChartView, LoadProfileChartView, ComparisonBadge, DetailCard, ReviewBlock,
    FacilityHeaderView, ReportView
)
