"""CLI principal (Typer).

Sin argumentos procesa los tres pedidos de muestra y escribe una línea por
pedido en stdout. Banner y logs van siempre a stderr.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import typer
from rich.console import Console

from cli.ui_components import print_banner, render_sample_orders
from core.config import AppSettings
from core.log_config import configure_logging
from core.services import dispatch

app = typer.Typer(
    add_completion=False,
    help="Generic dispatch of digital, physical and subscription orders.",
)

_console = Console()
_err_console = Console(stderr=True)


def _package_version() -> str:
    try:
        return version("order-dispatch")
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"order-dispatch {_package_version()}", highlight=False)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level (stderr)."),
    version_: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Process the sample orders (default) or run a subcommand."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    if settings.show_banner:
        print_banner(_err_console)

    if ctx.invoked_subcommand is None:
        dispatch.run()


@app.command()
def samples() -> None:
    """Show the sample orders as a table."""

    _console.print(render_sample_orders(dispatch.sample_orders()))


def run() -> None:
    app()
