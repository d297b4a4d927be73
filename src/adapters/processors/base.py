"""Salida común de los procesadores.

Los procesadores solo difieren en la plantilla; escribir la línea en la
consola es igual para todos.
"""

from __future__ import annotations

from rich.console import Console


class ConsoleWriter:
    """Escribe líneas tal cual en el fichero de una consola Rich (stdout por defecto)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    @property
    def console(self) -> Console:
        return self._console

    def write_line(self, line: str) -> None:
        # Directo al fichero: `Console.print` expande tabs y elimina caracteres de control.
        file = self._console.file
        file.write(line + "\n")
        file.flush()
