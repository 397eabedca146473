"""Senders concretos.

Por qué un paquete:
- Cada módulo implementa `core.interfaces.message_sender.MessageSender`.
- `AVAILABLE_SENDERS` lo usa la CLI (`doctor`) para verificar el contrato.
"""

from adapters.senders.email_sender import EmailSender
from adapters.senders.sms_sender import SmsSender

AVAILABLE_SENDERS = (EmailSender, SmsSender)

__all__ = [
	"AVAILABLE_SENDERS",
	"EmailSender",
	"SmsSender",
]
