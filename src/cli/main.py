"""CLI principal (Typer).

Comandos:
- `notificaciones`: demo de Inversión de Dependencias.
- `reporte`: demo del patrón Builder (opcionalmente exporta JSON).
- `todo`: ambos demos, en orden.
- `doctor`: configuración activa y verificación de contratos.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_report_json
from cli.doctor import run_doctor
from cli.ui_components import print_banner
from core.config import AppSettings
from core.log import configure_logging
from core.services.demos import (
    build_sample_report,
    run_notification_demo,
    run_report_demo,
    show_report,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Ejemplos de principios SOLID y del patrón Builder.",
)

_console = Console()


def _settings(ctx: typer.Context) -> AppSettings:
    settings = ctx.obj
    if not isinstance(settings, AppSettings):
        settings = AppSettings()
    return settings


@app.callback()
def main(
    ctx: typer.Context,
    banner: bool | None = typer.Option(
        None,
        "--banner/--no-banner",
        help="Mostrar el banner (por defecto según configuración).",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    overrides: dict[str, object] = {}
    if log_level is not None:
        overrides["log_level"] = log_level
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.log_level)
    ctx.obj = settings

    if banner is None:
        banner = settings.show_banner
    if banner:
        print_banner(_console)


@app.command()
def notificaciones() -> None:
    """Envía una alerta por EMAIL y otra por SMS con el mismo AlertManager."""

    run_notification_demo()


@app.command()
def reporte(
    ctx: typer.Context,
    json_path: Path | None = typer.Option(
        None,
        "--json",
        help="Además de imprimirlo, exporta el reporte a este archivo JSON.",
    ),
) -> None:
    """Construye el reporte de ejemplo con ReportBuilder y lo imprime."""

    if json_path is None:
        run_report_demo()
        return

    settings = _settings(ctx)
    report = build_sample_report()
    show_report(report)

    output_path = json_path if json_path.is_absolute() else settings.reports_dir / json_path
    written = export_report_json(report=report, output_path=output_path)
    _console.print(f"[green]Reporte exportado:[/green] {escape(str(written))}")


@app.command()
def todo() -> None:
    """Ejecuta ambos demos."""

    run_notification_demo()
    run_report_demo()


@app.command()
def doctor(ctx: typer.Context) -> None:
    """Muestra la configuración activa y verifica los senders."""

    run_doctor(_console, _settings(ctx))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
