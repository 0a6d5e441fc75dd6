# analytics_viewer/routers/report_router.py

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ValidationError

from analytics_viewer.core import ReportStateSlot, get_report_state
from analytics_viewer.schemas import ReportRequest, ReportOutcome, ReportView, FacilityHeaderView, parse_report
from analytics_viewer.services import (
    ReportFormatter,
    get_report_formatter,
    generate_report_service,
    dispatch_report_view,
    build_facility_header,
    render_page,
    render_report_fragment
)

# Páginas HTML (formulario + reporte)
page_router = APIRouter(tags=["Report Pages"])

# API de renderizado sin estado
router = APIRouter(prefix="/reports", tags=["Reports"])


class ReportViewResponse(BaseModel):
    facility_header: Optional[FacilityHeaderView] = None
    view: Optional[ReportView] = None


def _parse_or_422(payload: Any):
    try:
        return parse_report(payload)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors(include_url=False, include_context=False)
        )


@page_router.get("/", response_class=HTMLResponse)
def report_page_route(slot: ReportStateSlot = Depends(get_report_state),
                      fmt: ReportFormatter = Depends(get_report_formatter)):
    return render_page(outcome=slot.outcome, loading=slot.is_loading, fmt=fmt)


@page_router.post("/reports", response_class=HTMLResponse)
def generate_report_route(
    data_id: str = Form(""),
    company_name: str = Form(""),
    facility_name: str = Form(""),
    address: str = Form(""),
    filename: str = Form(""),
    tariff_rate: float = Form(0),
    slot: ReportStateSlot = Depends(get_report_state),
    fmt: ReportFormatter = Depends(get_report_formatter)
):
    form = {
        "data_id": data_id,
        "company_name": company_name,
        "facility_name": facility_name,
        "address": address,
        "filename": filename,
        "tariff_rate": tariff_rate,
    }

    try:
        report_request = ReportRequest(**form)
    except ValidationError:
        html = render_page(form=form, outcome=ReportOutcome(error="Data ID is required."), fmt=fmt)
        return HTMLResponse(html, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

    outcome = generate_report_service(slot, report_request)
    return render_page(form=form, outcome=outcome, loading=slot.is_loading, fmt=fmt)


@router.post("/render", response_class=HTMLResponse)
def render_report_route(payload: Dict[str, Any] = Body(...),
                        fmt: ReportFormatter = Depends(get_report_formatter)):
    """
    Recibe el payload del servicio de analítica y devuelve el fragmento HTML
    (encabezado + vista del periodo).
    """
    report = _parse_or_422(payload)
    return render_report_fragment(report, fmt)


@router.post("/view", response_model=ReportViewResponse)
def report_view_route(payload: Dict[str, Any] = Body(...),
                      fmt: ReportFormatter = Depends(get_report_formatter)):
    """Métricas derivadas (barras normalizadas, mapa de calor) en JSON."""
    report = _parse_or_422(payload)
    return ReportViewResponse(
        facility_header=build_facility_header(report),
        view=dispatch_report_view(report, fmt)
    )
