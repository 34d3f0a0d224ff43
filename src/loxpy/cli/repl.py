"""
Interactive read-eval-print loop.

Each line is a separate submission: it is scanned, parsed and evaluated on
its own, and the reporter is reset before the next one.
"""

from __future__ import annotations

import logging

from rich.text import Text

from loxpy.cli.utils import console, print_diagnostics, print_value
from loxpy.core.errors import ErrorReporter
from loxpy.core.pipeline import run_source

logger = logging.getLogger(__name__)


def run_prompt(prompt: str = "> ") -> None:
    """Read lines until EOF (Ctrl-D) or Ctrl-C, printing each result."""
    reporter = ErrorReporter()

    while True:
        try:
            line = console.input(Text(prompt))
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line.strip():
            continue

        result = run_source(line, reporter)
        if result.ok:
            print_value(result.render())
        else:
            print_diagnostics(result.diagnostics)
        reporter.reset()

    logger.debug("REPL session ended")
