"""
The scan -> parse -> evaluate pipeline.

Each stage runs only if the previous one reported nothing. The result
carries either the value or the diagnostics; nothing is printed here.

Usage:
    from loxpy.core.pipeline import run_source

    result = run_source("1 + 2 * 3")
    if result.ok:
        print(result.render())  # 7
    else:
        for diagnostic in result.diagnostics:
            print(diagnostic.format())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from loxpy.core.errors import Diagnostic, ErrorReporter, ExitCode, LoxRuntimeError
from loxpy.core.expression_lang.evaluator import evaluate
from loxpy.core.expression_lang.parser import Parser
from loxpy.core.expression_lang.scanner import Scanner
from loxpy.core.ir.values import Value, format_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Outcome of one pipeline run."""

    value: Value = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    exit_code: ExitCode = ExitCode.OK

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def render(self) -> str:
        """The value as the REPL would print it."""
        return format_value(self.value)


def run_source(source: str, reporter: ErrorReporter | None = None) -> RunResult:
    """Scan, parse and evaluate one piece of source text.

    Args:
        source: Lox source text.
        reporter: Accumulator for this run. Pass a reset reporter to reuse one.

    Returns:
        RunResult with the value on success, or the diagnostics and exit code.
    """
    if reporter is None:
        reporter = ErrorReporter()

    tokens = Scanner(source, reporter).scan_tokens()
    if reporter.had_error:
        logger.debug("Scan reported %d error(s)", len(reporter.diagnostics))
        return _failed(reporter)

    expr = Parser(tokens, reporter).parse()
    if expr is None:
        return _failed(reporter)

    try:
        value = evaluate(expr)
    except LoxRuntimeError as e:
        reporter.runtime_error(e)
        return _failed(reporter)

    return RunResult(value=value)


def _failed(reporter: ErrorReporter) -> RunResult:
    return RunResult(
        diagnostics=list(reporter.diagnostics),
        exit_code=reporter.exit_code or ExitCode.DATAERR,
    )
