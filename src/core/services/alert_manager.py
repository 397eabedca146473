"""Gestor de alertas (ejemplo de Inversión de Dependencias).

`AlertManager` es la política de alto nivel. Solo conoce el contrato
`MessageSender`; qué canal se usa (email, SMS, ...) lo decide quien lo construye.
"""

from __future__ import annotations

import logging

from core.interfaces.message_sender import MessageSender

logger = logging.getLogger(__name__)

ALERT_PREFIX = "[ALERTA] "


class AlertManager:
    """Antepone el marcador de alerta y delega en el sender inyectado."""

    def __init__(self, sender: MessageSender) -> None:
        if not isinstance(sender, MessageSender):
            raise TypeError(
                f"AlertManager requiere un MessageSender, recibido: {type(sender).__name__}"
            )
        self._sender = sender

    @property
    def sender(self) -> MessageSender:
        return self._sender

    def raise_alert(self, message: str) -> None:
        logger.debug("Alerta vía %s", type(self._sender).__name__)
        self._sender.send(ALERT_PREFIX + message)
