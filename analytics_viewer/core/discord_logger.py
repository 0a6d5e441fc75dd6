# analytics_viewer/core/discord_logger.py

import logging
import time
from typing import Dict, Optional, Tuple

import requests

from .settings import settings

ALERT_COLORS = {
    "INFO": 0x2196F3,
    "WARN": 0xFFC107,
    "ERROR": 0xF44336,
    "CRITICAL": 0x4A148C,
}
FLOOD_INTERVAL = 20  # segundos

# (nivel, origen) -> última alerta enviada
_last_alert_time: Dict[Tuple[str, str], float] = {}


def build_alert_payload(message: str, level: str, context: Optional[Dict[str, str]] = None) -> dict:
    """Embed de Discord con el contexto del reporte (dataset, ruta...)."""
    embed = {
        "title": f"[{level}] Energy Analytics Viewer",
        "description": message[:2000],
        "color": ALERT_COLORS.get(level, ALERT_COLORS["INFO"]),
        "fields": [
            {"name": key, "value": str(value), "inline": True}
            for key, value in (context or {}).items()
        ],
    }
    return {"embeds": [embed]}


def send_discord_alert(message: str, level: str = "INFO", context: Optional[Dict[str, str]] = None) -> bool:
    """
    Envía una alerta a Discord.
    Se limita a una por nivel y origen dentro de FLOOD_INTERVAL, así el fallo
    de un dataset no silencia los de otro. Devuelve True si se envió.
    """
    if not settings.DISCORD_WEBHOOK_URL:
        return False

    source = (context or {}).get("data_id") or (context or {}).get("path") or ""
    key = (level, source)
    now = time.time()
    if now - _last_alert_time.get(key, 0) < FLOOD_INTERVAL:
        return False
    _last_alert_time[key] = now

    try:
        requests.post(
            settings.DISCORD_WEBHOOK_URL,
            json=build_alert_payload(message, level, context),
            timeout=2
        )
    except requests.RequestException as e:
        # sin el logger del paquete: logger.py importa este módulo
        logging.getLogger("analytics_viewer").warning(f"No se pudo enviar alerta a Discord: {e}")
        return False
    return True
