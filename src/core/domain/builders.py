"""Builder de reportes.

Por qué un builder:
- Separa la construcción (mutable, paso a paso) del valor final (inmutable).
- Cada setter devuelve el propio builder para encadenar llamadas en cualquier
  orden; la última escritura de cada campo gana.

Reutilización:
- Tras `build()` el builder sigue siendo válido. Se puede seguir modificando y
  volver a construir; cada `build()` entrega una copia independiente.
"""

from __future__ import annotations

import logging

from core.domain.models import Report

logger = logging.getLogger(__name__)


class ReportBuilder:
    """Acumula los campos de un `Report` y lo produce con `build()`."""

    def __init__(self) -> None:
        self._title: str | None = None
        self._body: str | None = None
        self._author: str | None = None
        self._date: str | None = None

    @classmethod
    def from_report(cls, report: Report) -> "ReportBuilder":
        """Crea un builder precargado con los valores de `report`."""

        builder = cls()
        builder._title = report.title
        builder._body = report.body
        builder._author = report.author
        builder._date = report.date
        return builder

    def title(self, title: str) -> "ReportBuilder":
        self._title = title
        return self

    def body(self, body: str) -> "ReportBuilder":
        self._body = body
        return self

    def author(self, author: str) -> "ReportBuilder":
        self._author = author
        return self

    def date(self, date: str) -> "ReportBuilder":
        self._date = date
        return self

    def build(self) -> Report:
        """Devuelve un `Report` con los valores actuales del builder."""

        report = Report(
            title=self._title,
            body=self._body,
            author=self._author,
            date=self._date,
        )
        logger.debug("Reporte construido: title=%r author=%r", report.title, report.author)
        return report
