"""Entry points de los dos demos.

Por qué aquí y no en la CLI:
- Son callables sin argumentos obligatorios: sirven como console scripts
  (`demo-notificaciones`, `demo-reporte`) y como comandos de la CLI.
- La consola es inyectable para poder testear la salida exacta.

Los dos flujos no comparten estado: cada llamada arma sus objetos y termina.
"""

from __future__ import annotations

import logging

from rich.console import Console

from adapters.console_output import build_plain_console, print_plain
from adapters.senders import EmailSender, SmsSender
from core.domain.builders import ReportBuilder
from core.domain.models import Report
from core.services.alert_manager import AlertManager

logger = logging.getLogger(__name__)


def build_sample_report() -> Report:
    """Reporte de ejemplo usado por el demo del Builder."""

    return (
        ReportBuilder()
        .title("Informe de Ventas Q1 2025")
        .author("Ana López")
        .date("04/11/2025")
        .body("Se registró un incremento del 15% respecto al trimestre anterior.")
        .build()
    )


def run_notification_demo(console: Console | None = None) -> None:
    """Conecta un `AlertManager` a cada sender y dispara una alerta."""

    if console is None:
        console = build_plain_console()

    email_alerts = AlertManager(EmailSender(console=console))
    email_alerts.raise_alert("Servidor sobrecargado")

    sms_alerts = AlertManager(SmsSender(console=console))
    sms_alerts.raise_alert("Temperatura del CPU alta")

    logger.debug("Demo de notificaciones finalizado")


def show_report(report: Report, console: Console | None = None) -> None:
    """Imprime la representación textual de `report`."""

    if console is None:
        console = build_plain_console()
    print_plain(console, report.render())


def run_report_demo(console: Console | None = None) -> None:
    """Construye el reporte de ejemplo e imprime su representación."""

    show_report(build_sample_report(), console)
