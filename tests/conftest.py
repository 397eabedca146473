"""Pytest fixtures for the SOLID/Builder demos."""

import io
import logging
import os

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test in an empty directory without SOLID_DEMO_* variables."""
    for name in list(os.environ):
        if name.upper().startswith("SOLID_DEMO_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    """A console writing to an in-memory buffer."""
    return Console(file=buffer, width=200, color_system=None)


@pytest.fixture
def sample_fields():
    return {
        "title": "Informe de Ventas Q1 2025",
        "author": "Ana López",
        "date": "04/11/2025",
        "body": "Se registró un incremento del 15% respecto al trimestre anterior.",
    }


@pytest.fixture
def notification_output():
    return (
        "Enviando EMAIL: [ALERTA] Servidor sobrecargado\n"
        "Enviando SMS: [ALERTA] Temperatura del CPU alta\n"
    )


@pytest.fixture
def report_output():
    return (
        "Reporte generado:\n"
        "Título: Informe de Ventas Q1 2025\n"
        "Autor: Ana López\n"
        "Fecha: 04/11/2025\n"
        "Contenido:\n"
        "Se registró un incremento del 15% respecto al trimestre anterior.\n"
    )


@pytest.fixture
def restore_root_logger():
    """Undo handler/level changes made by `configure_logging`."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
