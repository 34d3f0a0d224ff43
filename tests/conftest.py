"""Shared pytest fixtures for loxpy tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from loxpy.core.errors import ErrorReporter


@pytest.fixture
def reporter() -> ErrorReporter:
    """Return a fresh error reporter."""
    return ErrorReporter()


@pytest.fixture
def lox_script(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory that writes source text to a .lox file."""

    def _write(source: str, name: str = "script.lox") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
