# analytics_viewer/services/report_request_service.py

from urllib.parse import quote

import requests
from pydantic import ValidationError

from analytics_viewer.core import logger, settings, log_critical_error, ReportStateSlot
from analytics_viewer.schemas import ReportRequest, ReportOutcome, Report, parse_report

DEFAULT_FAILURE_MESSAGE = "Failed to generate report"
TRANSPORT_FAILURE_MESSAGE = "Could not reach the analytics service. Please try again."
INVALID_RESPONSE_MESSAGE = "The analytics service returned an invalid response."


class ReportRequestError(Exception):
    """Error legible para el usuario al pedir un reporte."""


def build_report_url(data_id: str) -> str:
    base_url = settings.ANALYTICS_API_BASE_URL.rstrip("/")
    # el id va como un único segmento de ruta
    return f"{base_url}/api/v1/data/{quote(data_id, safe='')}/energy-analytics-reports"


def request_energy_report(report_request: ReportRequest) -> Report:
    """
    Hace la única petición al servicio de analítica.
    Devuelve el reporte validado o lanza ReportRequestError.
    """
    url = build_report_url(report_request.data_id)
    logger.info(f"📡 Solicitando reporte para dataset {report_request.data_id}")

    try:
        response = requests.post(
            url,
            json=report_request.request_body(),
            timeout=settings.REQUEST_TIMEOUT_SECONDS
        )
    except requests.RequestException as e:
        log_critical_error(f"❌ Error de red pidiendo reporte: {e}", data_id=report_request.data_id)
        raise ReportRequestError(TRANSPORT_FAILURE_MESSAGE) from e

    try:
        result = response.json()
    except ValueError as e:
        logger.error(f"❌ Respuesta no JSON (HTTP {response.status_code}) para {report_request.data_id}")
        raise ReportRequestError(INVALID_RESPONSE_MESSAGE) from e

    if not isinstance(result, dict):
        logger.error(f"❌ Respuesta inesperada para {report_request.data_id}: {type(result).__name__}")
        raise ReportRequestError(INVALID_RESPONSE_MESSAGE)

    if not response.ok or result.get("status") != "success":
        message = result.get("message") or DEFAULT_FAILURE_MESSAGE
        logger.warning(f"⚠️ El servicio rechazó el reporte (HTTP {response.status_code}): {message}")
        raise ReportRequestError(str(message))

    try:
        report = parse_report(result.get("data"))
    except ValidationError as e:
        log_critical_error(
            f"❌ Reporte con estructura inválida: {e.error_count()} errores", data_id=report_request.data_id
        )
        raise ReportRequestError(INVALID_RESPONSE_MESSAGE) from e

    logger.info(f"✅ Reporte recibido (periodo: {getattr(report, 'period', None)})")
    return report


def generate_report_service(slot: ReportStateSlot, report_request: ReportRequest) -> ReportOutcome:
    """
    Lanza la petición dentro de una nueva generación del slot.
    Si otra petición empezó mientras tanto, esta respuesta se descarta.
    """
    generation = slot.begin_request()

    try:
        outcome = ReportOutcome(report=request_energy_report(report_request))
    except ReportRequestError as e:
        outcome = ReportOutcome(error=str(e))

    slot.settle(generation, outcome)
    return slot.outcome
