"""Discord alerts for request and render failures."""
from unittest.mock import patch

import pytest
import requests

from analytics_viewer.core import discord_logger
from analytics_viewer.core.discord_logger import build_alert_payload, send_discord_alert

POST_PATH = "analytics_viewer.core.discord_logger.requests.post"


@pytest.fixture(autouse=True)
def webhook(monkeypatch):
    monkeypatch.setattr(discord_logger.settings, "DISCORD_WEBHOOK_URL", "https://discord.test/hook")
    monkeypatch.setattr(discord_logger, "_last_alert_time", {})


def test_payload_is_embed_with_report_context():
    payload = build_alert_payload("Reporte inválido", "ERROR", {"data_id": "3f1c"})
    embed = payload["embeds"][0]
    assert embed["title"] == "[ERROR] Energy Analytics Viewer"
    assert embed["description"] == "Reporte inválido"
    assert embed["color"] == discord_logger.ALERT_COLORS["ERROR"]
    assert embed["fields"] == [{"name": "data_id", "value": "3f1c", "inline": True}]


def test_no_webhook_sends_nothing(monkeypatch):
    monkeypatch.setattr(discord_logger.settings, "DISCORD_WEBHOOK_URL", "")
    with patch(POST_PATH) as post:
        assert send_discord_alert("boom", "ERROR") is False
    post.assert_not_called()


def test_flood_window_is_per_dataset():
    with patch(POST_PATH) as post:
        assert send_discord_alert("fallo", "ERROR", {"data_id": "a"}) is True
        assert send_discord_alert("fallo", "ERROR", {"data_id": "a"}) is False
        assert send_discord_alert("fallo", "ERROR", {"data_id": "b"}) is True
    assert post.call_count == 2
    assert post.call_args.kwargs["timeout"] == 2


def test_webhook_failure_is_logged_not_raised(caplog):
    with patch(POST_PATH, side_effect=requests.ConnectionError("down")):
        assert send_discord_alert("fallo", "CRITICAL", {"path": "/reports"}) is False
    assert "No se pudo enviar alerta a Discord" in caplog.text
