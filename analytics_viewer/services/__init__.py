# analytics_viewer/services/__init__.py

# Formatting Service
from .formatting_service import ReportFormatter, get_report_formatter, format_number, format_decimal, format_currency

# Derived metrics
from .comparison_service import normalize_comparison, build_comparison_panel
from .heatmap_service import build_heatmap

# Render Service
from .render_service import (
    dispatch_report_view,
    build_facility_header,
    render_day_report,
    render_week_report,
    render_month_report
)

from .page_service import render_page, render_report_fragment

# Report Request Service
from .report_request_service import generate_report_service, request_energy_report, ReportRequestError
