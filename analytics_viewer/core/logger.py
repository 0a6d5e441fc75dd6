# analytics_viewer/core/logger.py

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Dict, Optional

from .discord_logger import send_discord_alert
from .settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = os.path.join(settings.LOG_DIR, "viewer.log")


def _configure_logger(name: str) -> logging.Logger:
    configured = logging.getLogger(name)
    configured.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    if configured.hasHandlers():
        return configured

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S")
    for handler in (RotatingFileHandler(LOG_FILE, maxBytes=10_000_000, backupCount=5), logging.StreamHandler()):
        handler.setFormatter(formatter)
        configured.addHandler(handler)
    return configured


logger = _configure_logger("analytics_viewer")


def log_critical_error(msg: str, level: str = "ERROR", **context: str):
    """Registra el fallo y lo reporta a Discord con el contexto (data_id, path)."""
    details: Optional[Dict[str, str]] = context or None
    logger.error(f"{msg} {details}" if details else msg)
    send_discord_alert(msg, level=level, context=details)
