"""Tests for AlertManager (dependency inversion example)."""
import io

import pytest
from rich.console import Console

from adapters.senders import EmailSender, SmsSender
from core.services import ALERT_PREFIX, AlertManager


class RecordingSender:
    """Structural MessageSender: no inheritance, only `send`."""

    def __init__(self):
        self.sent = []

    def send(self, message):
        self.sent.append(message)


def _output(action):
    buffer = io.StringIO()
    action(Console(file=buffer, width=200, color_system=None))
    return buffer.getvalue()


class TestAlertManager:
    """Tests for AlertManager."""

    def test_prefixes_alert_marker(self):
        sender = RecordingSender()
        AlertManager(sender).raise_alert("Disco lleno")
        assert sender.sent == ["[ALERTA] Disco lleno"]

    def test_sends_exactly_once_per_alert(self):
        sender = RecordingSender()
        manager = AlertManager(sender)
        manager.raise_alert("uno")
        manager.raise_alert("dos")
        assert sender.sent == ["[ALERTA] uno", "[ALERTA] dos"]

    def test_exposes_injected_sender(self):
        sender = RecordingSender()
        manager = AlertManager(sender)
        assert manager.sender is sender

    def test_sender_is_read_only(self):
        manager = AlertManager(RecordingSender())
        with pytest.raises(AttributeError):
            manager.sender = RecordingSender()

    @pytest.mark.parametrize("sender_cls", [EmailSender, SmsSender])
    @pytest.mark.parametrize("message", ["Servidor sobrecargado", "", "ñandú 100%"])
    def test_output_matches_direct_send(self, sender_cls, message):
        via_manager = _output(lambda c: AlertManager(sender_cls(console=c)).raise_alert(message))
        direct = _output(lambda c: sender_cls(console=c).send(ALERT_PREFIX + message))
        assert via_manager == direct


class TestAlertManagerMisuse:
    """Construction fails fast without a valid sender."""

    def test_rejects_none(self):
        with pytest.raises(TypeError):
            AlertManager(None)

    def test_rejects_object_without_send(self):
        with pytest.raises(TypeError, match="MessageSender"):
            AlertManager(object())
