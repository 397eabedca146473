"""Exportación JSON de reportes.

Por qué JSON:
- Interoperabilidad: el reporte construido puede consumirse fuera de la demo.
- `Report` es un modelo Pydantic, la serialización es directa.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.models import Report

logger = logging.getLogger(__name__)


def export_report_json(*, report: Report, output_path: Path) -> Path:
    """Exporta `Report` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.to_dict()
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    logger.debug("Reporte exportado a %s", output_path)
    return output_path
