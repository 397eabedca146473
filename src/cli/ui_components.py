"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La salida de los demos NO pasa por aquí: se imprime como texto plano.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar con `--no-banner` o `SOLID_DEMO_SHOW_BANNER=false`.
    """

    title = Text("SOLID + Builder", style="bold cyan")
    subtitle = Text("Inversión de dependencias • Builder de reportes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración activa."""

    table = Table(title="Configuración")
    table.add_column("Clave", style="cyan", no_wrap=True)
    table.add_column("Valor", style="white")
    table.add_row("log_level", settings.log_level)
    table.add_row("show_banner", str(settings.show_banner))
    table.add_row("reports_dir", str(settings.reports_dir))
    return table
