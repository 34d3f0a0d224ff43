"""
Configuration for the loxpy command line.

Settings are resolved in order, later sources winning:

1. Defaults
2. The ``[repl]`` table of ``lox.toml`` in the working directory
3. Environment variables: LOX_PROMPT, LOX_LOG_LEVEL, LOX_COLOR

Example lox.toml:

    [repl]
    prompt = "lox> "
    log_level = "DEBUG"
    color = false
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "lox.toml"

PROMPT_ENV_VAR = "LOX_PROMPT"
LOG_LEVEL_ENV_VAR = "LOX_LOG_LEVEL"
COLOR_ENV_VAR = "LOX_COLOR"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_FALSE_VALUES = ("0", "false", "no", "off")

# Keys accepted in the [repl] table and the TOML type each must have
_REPL_KEYS: dict[str, type] = {"prompt": str, "log_level": str, "color": bool}


@dataclass
class LoxSettings:
    """Interpreter front-end settings."""

    prompt: str = "> "
    log_level: str = "WARNING"
    color: bool = True

    def __post_init__(self) -> None:
        self.log_level = normalize_log_level(self.log_level)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def normalize_log_level(level: str) -> str:
    """Upper-case and validate a log level name.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    name = level.strip().upper()
    if name not in _LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level!r} (expected one of {', '.join(_LOG_LEVELS)})")
    return name


def load_settings(path: Path | None = None) -> LoxSettings:
    """Load settings from lox.toml and the environment.

    Args:
        path: Config file to read. Defaults to ./lox.toml, which may be absent.

    Returns:
        Resolved LoxSettings.

    Raises:
        ValueError: If a log level is invalid or the config file is malformed
            or holds a value of the wrong type.
    """
    values: dict[str, Any] = {}

    config_path = path if path is not None else Path.cwd() / CONFIG_FILENAME
    if config_path.exists():
        with open(config_path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid {config_path}: {e}") from e
        values.update(_repl_table(data, config_path))

    if prompt := os.environ.get(PROMPT_ENV_VAR):
        values["prompt"] = prompt
    if log_level := os.environ.get(LOG_LEVEL_ENV_VAR):
        values["log_level"] = log_level
    if color := os.environ.get(COLOR_ENV_VAR):
        values["color"] = color.strip().lower() not in _FALSE_VALUES

    return LoxSettings(**values)


def _repl_table(data: dict[str, Any], config_path: Path) -> dict[str, Any]:
    """Pull the known keys out of the [repl] table, checking their types.

    Raises:
        ValueError: If ``repl`` is not a table or a key has the wrong type.
    """
    repl = data.get("repl", {})
    if not isinstance(repl, dict):
        raise ValueError(f"Invalid {config_path}: 'repl' must be a table, got {type(repl).__name__}")

    values: dict[str, Any] = {}
    for key, expected in _REPL_KEYS.items():
        if key not in repl:
            continue
        value = repl[key]
        if not isinstance(value, expected):
            raise ValueError(
                f"Invalid {config_path}: repl.{key} must be a {expected.__name__}, "
                f"got {type(value).__name__} {value!r}"
            )
        values[key] = value
    return values
