"""Sender: Email (simulado por consola)."""

from __future__ import annotations

import logging

from rich.console import Console

from adapters.console_output import build_plain_console, print_plain
from core.interfaces.message_sender import MessageSender

logger = logging.getLogger(__name__)


class EmailSender(MessageSender):
    """Imprime el mensaje con la etiqueta de email."""

    label = "Enviando EMAIL: "

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else build_plain_console()

    def send(self, message: str) -> None:
        logger.debug("EMAIL (%d caracteres)", len(message))
        print_plain(self._console, self.label + message)
