"""Salida de texto plano por consola.

Por qué un helper:
- Los mensajes de los demos se escriben tal cual: `Console.print` reinterpreta
  el texto (markup, tabs, `\r`), así que se escribe directo en `console.file`.
- La consola sigue siendo inyectable: los tests pasan una con buffer en memoria.
"""

from __future__ import annotations

from rich.console import Console


def build_plain_console() -> Console:
    """Consola por defecto ligada a stdout."""

    return Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_plain(console: Console, text: str) -> None:
    """Escribe `text` literalmente y termina la línea."""

    file = console.file
    file.write(text + "\n")
    file.flush()
