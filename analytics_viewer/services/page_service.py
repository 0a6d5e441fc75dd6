# analytics_viewer/services/page_service.py

from itertools import count
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from analytics_viewer.schemas import ReportOutcome
from .chart_service import build_figure, figure_to_html
from .formatting_service import ReportFormatter, get_report_formatter
from .render_service import build_facility_header, dispatch_report_view

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Campos del formulario en el orden en que se muestran
FORM_FIELDS = [
    ("data_id", "Data ID (UUID)", "text"),
    ("company_name", "Company Name", "text"),
    ("facility_name", "Facility Name", "text"),
    ("address", "Address", "text"),
    ("filename", "Filename", "text"),
    ("tariff_rate", "Tariff Rate", "number"),
]


def _template_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html", "xml")),
        trim_blocks=True,
        lstrip_blocks=True,
    )


_env = _template_env()


def _chart_renderer():
    # ids deterministas para que el mismo reporte produzca el mismo HTML
    ids = count(1)

    def render_chart(chart) -> Markup:
        return Markup(figure_to_html(build_figure(chart), div_id=f"chart-{next(ids)}"))

    return render_chart


def render_report_fragment(report, fmt: Optional[ReportFormatter] = None) -> str:
    """Encabezado de la instalación + cuerpo del periodo (si es reconocido)."""
    fmt = fmt or get_report_formatter()
    template = _env.get_template("report.html")
    return template.render(
        header=build_facility_header(report),
        view=dispatch_report_view(report, fmt),
        render_chart=_chart_renderer(),
    )


def render_page(form: Optional[dict] = None, outcome: Optional[ReportOutcome] = None,
                loading: bool = False, fmt: Optional[ReportFormatter] = None) -> str:
    outcome = outcome or ReportOutcome()
    form = form or {}
    report_html = None
    if outcome.report is not None:
        report_html = Markup(render_report_fragment(outcome.report, fmt))

    template = _env.get_template("page.html")
    return template.render(
        fields=[(name, label, kind, form.get(name, 0 if kind == "number" else "")) for name, label, kind in FORM_FIELDS],
        error=outcome.error,
        loading=loading,
        report_html=report_html,
    )
