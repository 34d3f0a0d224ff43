"""
Error types and diagnostic reporting for the loxpy pipeline.

Scanning, parsing and evaluation all report problems the same way: a source
line, an optional location ("at end" or "at 'lexeme'") and a message. The
ErrorReporter collects those diagnostics for one pipeline run; the harness
decides how to print them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

from loxpy.core.ir.tokens import Token, TokenKind


class ErrorKind(StrEnum):
    """The pipeline stage a diagnostic came from."""

    SCAN = "scan"
    PARSE = "parse"
    RUNTIME = "runtime"


class ExitCode(IntEnum):
    """Process exit classifications (sysexits.h values)."""

    OK = 0
    USAGE = 64
    DATAERR = 65
    NOINPUT = 66


class LoxError(Exception):
    """Base exception for all loxpy errors."""

    kind: ErrorKind = ErrorKind.RUNTIME

    def __init__(self, message: str, line: int | None = None):
        self.message = message
        self.line = line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.line is not None:
            return f"[line {self.line}] {self.message}"
        return self.message


class ScanError(LoxError):
    """
    Raised for lexical problems.

    Examples:
    - Unrecognized character
    - Unterminated string
    - Unterminated block comment
    """

    kind = ErrorKind.SCAN


class ParseError(LoxError):
    """
    Raised when the token stream does not match the grammar.

    The parser raises this internally and converts it into a diagnostic,
    so callers of ``parse()`` only ever see ``None``.
    """

    kind = ErrorKind.PARSE

    def __init__(self, message: str, line: int | None = None, where: str = ""):
        self.where = where
        super().__init__(message, line)


class LoxRuntimeError(LoxError):
    """
    Raised when an operator is applied to operands of the wrong type.

    Examples:
    - ``-"a"``
    - ``true + 1``
    - ``"a" == 1``
    """

    kind = ErrorKind.RUNTIME


@dataclass(frozen=True)
class Diagnostic:
    """
    A single reported problem.

    Attributes:
        kind: Stage that produced the diagnostic
        line: Source line (1-indexed)
        message: Error description
        where: Location suffix: "", " at end" or " at 'lexeme'"
    """

    kind: ErrorKind
    line: int
    message: str
    where: str = ""

    def format(self) -> str:
        """
        Format as a single user-facing line.

        Returns:
            Formatted string like: "[line 1] Error at end: Expected ')'."
        """
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def __str__(self) -> str:
        return self.format()


def location_of(token: Token) -> str:
    """Describe where in the token stream an error occurred."""
    if token.kind == TokenKind.EOF:
        return " at end"
    return f" at '{token.lexeme}'"


@dataclass
class ErrorReporter:
    """
    Accumulates diagnostics for one run of the scan -> parse -> evaluate pipeline.

    A reporter is owned by a single run. Interactive sessions call ``reset()``
    between submissions.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)
    exit_code: ExitCode | None = None

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def error(
        self,
        line: int,
        message: str,
        kind: ErrorKind = ErrorKind.SCAN,
        exit_code: ExitCode = ExitCode.DATAERR,
    ) -> Diagnostic:
        """Record an error that has no token location."""
        return self.report(line, "", message, kind, exit_code)

    def scan_error(self, err: ScanError) -> Diagnostic:
        return self.error(err.line or 0, err.message, err.kind)

    def parse_error(self, err: ParseError) -> Diagnostic:
        return self.report(err.line or 0, err.where, err.message, err.kind)

    def runtime_error(self, err: LoxRuntimeError) -> Diagnostic:
        return self.error(err.line or 0, err.message, err.kind)

    def report(
        self,
        line: int,
        where: str,
        message: str,
        kind: ErrorKind,
        exit_code: ExitCode = ExitCode.DATAERR,
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, line=line, message=message, where=where)
        self.diagnostics.append(diagnostic)
        self.exit_code = exit_code
        return diagnostic

    def reset(self) -> None:
        """Clear the failure state before the next submission."""
        self.diagnostics.clear()
        self.exit_code = None
