"""Comando `doctor`: diagnóstico de configuración y contratos."""

from __future__ import annotations

from typing import Iterable

import typer
from rich.console import Console
from rich.table import Table

from adapters.senders import AVAILABLE_SENDERS
from cli.ui_components import build_settings_table
from core.config import AppSettings
from core.interfaces.message_sender import MessageSender


def _implements_send(cls: type) -> bool:
    send = getattr(cls, "send", None)
    return callable(send) and send is not MessageSender.send


def check_senders(senders: Iterable[type] | None = None) -> list[tuple[str, bool]]:
    """Verifica que cada sender registrado implemente `send(message)`.

    Heredar de `MessageSender` no basta: el método del Protocol es solo un stub.
    """

    if senders is None:
        senders = AVAILABLE_SENDERS
    return [(cls.__name__, _implements_send(cls)) for cls in senders]


def run_doctor(
    console: Console,
    settings: AppSettings,
    senders: Iterable[type] | None = None,
) -> None:
    console.print(build_settings_table(settings))

    table = Table(title="Senders")
    table.add_column("Sender", style="bright_green", no_wrap=True)
    table.add_column("MessageSender", style="white")
    results = check_senders(senders)
    for name, ok in results:
        table.add_row(name, "OK" if ok else "FAIL")
    console.print(table)

    if not all(ok for _, ok in results):
        console.print("\n[yellow]Nota:[/yellow] hay senders que no implementan `send(message)`.")
        raise typer.Exit(code=1)
