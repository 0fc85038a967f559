"""Tests for lexpath.config - environment-backed settings."""

from __future__ import annotations

import importlib
import os

import pytest

from lexpath import config


@pytest.fixture
def reload_config_after():
    """Reload the config module with a clean environment after the test."""
    yield
    for name in list(os.environ):
        if name.startswith("LEXPATH_"):
            os.environ.pop(name, None)
    importlib.reload(config)


class TestEnvHelpers:
    def test_prefix_enforced(self):
        with pytest.raises(ValueError):
            config._env("LX_LOG_DIR", "")

    def test_bool(self, monkeypatch):
        monkeypatch.setenv("LEXPATH_LOG_CONSOLE", "yes")
        assert config._env_bool("LEXPATH_LOG_CONSOLE", False) is True
        monkeypatch.setenv("LEXPATH_LOG_CONSOLE", "0")
        assert config._env_bool("LEXPATH_LOG_CONSOLE", True) is False

    @pytest.mark.parametrize("raw,expected", [("0o755", 0o755), ("493", 493), ("0x1ff", 0o777)])
    def test_int_literals(self, monkeypatch, raw, expected):
        monkeypatch.setenv("LEXPATH_MKDIR_MODE", raw)
        assert config._env_int("LEXPATH_MKDIR_MODE", 0) == expected

    def test_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("LEXPATH_MKDIR_MODE", "rwx")
        assert config._env_int("LEXPATH_MKDIR_MODE", 0o777) == 0o777

    def test_choice_falls_back(self, monkeypatch):
        monkeypatch.setenv("LEXPATH_DEFAULT_PLATFORM", "beos")
        assert config._env_choice("LEXPATH_DEFAULT_PLATFORM", "auto", ("auto", "unix")) == "auto"


class TestSettings:
    def test_defaults(self):
        settings = config.settings
        assert settings.default_platform == "auto"
        assert settings.log_dir is None
        assert settings.log_console is False
        assert settings.log_max_files == 5
        assert settings.scan_with_symlinks is False
        assert settings.mkdir_mode == 0o777

    def test_frozen(self):
        with pytest.raises(Exception):  # FrozenInstanceError
            config.settings.mkdir_mode = 0o700  # type: ignore[misc]

    def test_env_override(self, monkeypatch, reload_config_after):  # noqa: ARG002
        monkeypatch.setenv("LEXPATH_DEFAULT_PLATFORM", "Windows")
        monkeypatch.setenv("LEXPATH_LOG_DIR", "/var/log/lexpath")
        monkeypatch.setenv("LEXPATH_LOG_MAX_SIZE_MB", "10")
        monkeypatch.setenv("LEXPATH_SCAN_WITH_SYMLINKS", "true")
        monkeypatch.setenv("LEXPATH_MKDIR_MODE", "0o700")

        importlib.reload(config)

        assert config.settings.default_platform == "windows"
        assert config.settings.log_dir == "/var/log/lexpath"
        assert config.settings.log_max_size_mb == 10
        assert config.settings.scan_with_symlinks is True
        assert config.settings.mkdir_mode == 0o700
