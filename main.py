"""Lanzador de la CLI de los demos sin instalar el paquete.

Uso desde la raíz del repo:
- `python -m main notificaciones`  alerta por EMAIL y por SMS (AlertManager)
- `python -m main reporte`         reporte armado con ReportBuilder
- `python -m main todo`            ambos demos, en orden

Instalado (`pip install -e .`) lo mismo está disponible como `solid-demo`.
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parent / "src"


if __name__ == "__main__":
    if str(_SRC) not in sys.path:
        sys.path.insert(0, str(_SRC))

    from cli.main import run  # noqa: PLC0415

    run()
