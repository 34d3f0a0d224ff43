"""
loxpy CLI utilities.

Shared consoles and output helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Iterable
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from loxpy._version import get_version
from loxpy.core.errors import Diagnostic, ExitCode

# Results go to stdout, diagnostics to stderr
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def set_color(enabled: bool) -> None:
    console.no_color = not enabled
    err_console.no_color = not enabled


def print_value(text: str) -> None:
    console.print(Text(text), soft_wrap=True)


def print_error(message: str) -> None:
    err_console.print(Text(message, style="red"), soft_wrap=True)


def print_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        err_console.print(Text(diagnostic.format(), style="bold red"), soft_wrap=True)


def read_source(script: Path | None, expr: str | None) -> str:
    """Source text from ``--expr`` or a script file.

    Exits with USAGE if neither or both are given, NOINPUT if the file is
    missing or unreadable, DATAERR if it is not valid UTF-8.
    """
    if script is None:
        if expr is None:
            print_error("Provide either a script path or --expr.")
            raise typer.Exit(code=ExitCode.USAGE)
        return expr
    if expr is not None:
        print_error("Provide either a script path or --expr, not both.")
        raise typer.Exit(code=ExitCode.USAGE)

    if not script.is_file():
        print_error(f"Error: File not found: {script}")
        raise typer.Exit(code=ExitCode.NOINPUT)
    try:
        return script.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print_error(f"Error: {script} is not valid UTF-8: {e.reason} at byte {e.start}")
        raise typer.Exit(code=ExitCode.DATAERR)
    except OSError as e:
        print_error(f"Error: Cannot read {script}: {e.strerror or e}")
        raise typer.Exit(code=ExitCode.NOINPUT)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"loxpy version {get_version()}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()
