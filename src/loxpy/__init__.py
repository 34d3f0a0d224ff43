"""
loxpy - a scanner, parser and tree-walking evaluator for Lox expressions.

    >>> from loxpy import run_source
    >>> run_source("(1 + 2) * 3").render()
    '9'
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    Diagnostic,
    ErrorReporter,
    ExitCode,
    LoxError,
    LoxRuntimeError,
    ParseError,
    ScanError,
)
from .core.pipeline import RunResult, run_source

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "Diagnostic",
    "ErrorReporter",
    "ExitCode",
    "LoxError",
    "LoxRuntimeError",
    "ParseError",
    "ScanError",
    "RunResult",
    "run_source",
]
