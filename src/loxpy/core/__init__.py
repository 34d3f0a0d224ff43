"""Core loxpy functionality: IR, scanner, parser, evaluator and the pipeline tying them together."""

from . import ir
from .errors import (
    Diagnostic,
    ErrorKind,
    ErrorReporter,
    ExitCode,
    LoxError,
    LoxRuntimeError,
    ParseError,
    ScanError,
)
from .pipeline import RunResult, run_source
from .settings import LoxSettings, load_settings

__all__ = [
    "ir",
    "Diagnostic",
    "ErrorKind",
    "ErrorReporter",
    "ExitCode",
    "LoxError",
    "LoxRuntimeError",
    "ParseError",
    "ScanError",
    "RunResult",
    "run_source",
    "LoxSettings",
    "load_settings",
]
