"""Servicios del Core: políticas y entry points de los demos."""

from core.services.alert_manager import ALERT_PREFIX, AlertManager

__all__ = ["ALERT_PREFIX", "AlertManager"]
