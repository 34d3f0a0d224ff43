"""Version lookup for loxpy."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DIST_NAME = "loxpy"
UNKNOWN_VERSION = "0.0.0"

# src/loxpy/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version() -> str | None:
    """[project].version from pyproject.toml when running from a source checkout."""
    if not _PYPROJECT.is_file():
        return None
    with open(_PYPROJECT, "rb") as f:
        try:
            project = tomllib.load(f).get("project", {})
        except tomllib.TOMLDecodeError:
            return None
    if project.get("name") != DIST_NAME:
        return None
    version = project.get("version")
    return version if isinstance(version, str) else None


def get_version() -> str:
    """The checkout's version if there is one, else the installed distribution's."""
    if version := _checkout_version():
        return version
    try:
        return _metadata_version(DIST_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
