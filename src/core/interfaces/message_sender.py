"""Contrato de envío de mensajes.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- `AlertManager` depende de esta abstracción y no de Email/SMS concretos:
  es el ejemplo de Inversión de Dependencias (la "D" de SOLID).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageSender(Protocol):
    """Capacidad mínima: enviar un mensaje de texto.

    Reglas de diseño:
    - Un solo método; las variantes no comparten estado.
    - `send` no falla para ningún `str`.
    """

    def send(self, message: str) -> None:
        """Emite `message` por el canal propio de la implementación."""

        ...
