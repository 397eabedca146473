"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- `frozen=True` nos da inmutabilidad real: asignar un campo lanza
  `ValidationError`.
- Facilita la serialización (JSON) sin acoplar el Core a librerías de I/O.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se construye.
  La construcción documentada pasa por `core.domain.builders.ReportBuilder`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


REPORT_HEADER = "Reporte generado:"


class Report(BaseModel):
    """Reporte inmutable con cuatro campos de texto opcionales.

    Por qué existe:
    - Es el producto del ejemplo Builder: se arma paso a paso con
      `ReportBuilder` y, una vez construido, no cambia.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str | None = Field(
        default=None,
        description="Título del reporte.",
    )
    body: str | None = Field(
        default=None,
        description="Contenido principal (texto libre).",
    )
    author: str | None = Field(
        default=None,
        description="Autor del reporte.",
    )
    date: str | None = Field(
        default=None,
        description="Fecha como texto; no se interpreta ni valida.",
    )

    def render(self) -> str:
        """Formatea el reporte en el layout fijo de varias líneas.

        Los campos ausentes se muestran vacíos.
        """

        return "\n".join(
            [
                REPORT_HEADER,
                f"Título: {self.title or ''}",
                f"Autor: {self.author or ''}",
                f"Fecha: {self.date or ''}",
                "Contenido:",
                self.body or "",
            ]
        )

    def to_dict(self) -> dict[str, str | None]:
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        return self.render()
