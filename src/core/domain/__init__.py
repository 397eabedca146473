"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los valores puros (Pydantic v2) y sus constructores.
- El dominio no conoce la consola ni la CLI: solo conceptos del problema.
"""

from core.domain.builders import ReportBuilder
from core.domain.models import Report

__all__ = ["Report", "ReportBuilder"]
