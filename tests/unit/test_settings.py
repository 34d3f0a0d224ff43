"""Tests for lox.toml / environment configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from loxpy.core.settings import LoxSettings, load_settings, normalize_log_level


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for var in ("LOX_PROMPT", "LOX_LOG_LEVEL", "LOX_COLOR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    """No config file, no environment."""

    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings == LoxSettings()
        assert settings.prompt == "> "
        assert settings.log_level == "WARNING"
        assert settings.log_level_value == logging.WARNING
        assert settings.color is True


class TestConfigFile:
    """The [repl] table of lox.toml."""

    def test_reads_cwd_config(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text('[repl]\nprompt = "lox> "\nlog_level = "debug"\ncolor = false\n')
        settings = load_settings()
        assert settings.prompt == "lox> "
        assert settings.log_level == "DEBUG"
        assert settings.color is False

    def test_explicit_path(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[repl]\nprompt = ">>> "\n')
        assert load_settings(config).prompt == ">>> "

    def test_other_tables_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text('[project]\nname = "x"\n')
        assert load_settings() == LoxSettings()

    def test_malformed_file(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text("[repl\n")
        with pytest.raises(ValueError, match="Invalid"):
            load_settings()

    def test_string_color_is_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text('[repl]\ncolor = "false"\n')
        with pytest.raises(ValueError, match="repl.color must be a bool"):
            load_settings()

    def test_repl_must_be_a_table(self, tmp_path: Path) -> None:
        (tmp_path / "lox.toml").write_text("repl = 1\n")
        with pytest.raises(ValueError, match="'repl' must be a table"):
            load_settings()

    @pytest.mark.parametrize(
        "line",
        ["prompt = 5", "log_level = 10", "color = 1"],
    )
    def test_wrong_value_types(self, tmp_path: Path, line: str) -> None:
        (tmp_path / "lox.toml").write_text(f"[repl]\n{line}\n")
        with pytest.raises(ValueError, match="Invalid"):
            load_settings()


class TestEnvironment:
    """LOX_* variables override the file."""

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "lox.toml").write_text('[repl]\nprompt = "file> "\n')
        monkeypatch.setenv("LOX_PROMPT", "env> ")
        monkeypatch.setenv("LOX_LOG_LEVEL", "info")
        monkeypatch.setenv("LOX_COLOR", "off")
        settings = load_settings()
        assert settings.prompt == "env> "
        assert settings.log_level == "INFO"
        assert settings.color is False

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOX_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="Invalid log level"):
            load_settings()


class TestNormalizeLogLevel:
    def test_normalizes_case_and_whitespace(self) -> None:
        assert normalize_log_level(" error ") == "ERROR"

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            normalize_log_level("TRACE")
