# tests/conftest.py
# Isolate LEXPATH_* settings so the host environment never leaks into tests.

from __future__ import annotations

import os

import pytest

from lexpath import config


def make_settings(**overrides) -> config.Settings:
    """Settings with documented defaults, independent of the import-time environment."""
    values = dict(
        default_platform="auto",
        log_dir=None,
        log_console=False,
        log_max_size_mb=None,
        log_max_files=5,
        scan_with_symlinks=False,
        mkdir_mode=0o777,
    )
    values.update(overrides)
    return config.Settings(**values)


@pytest.fixture(autouse=True)
def _isolate_lexpath_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("LEXPATH_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "settings", make_settings())
    yield


@pytest.fixture
def use_settings(monkeypatch):
    """Replace lexpath settings for one test: ``use_settings(default_platform="windows")``."""

    def _apply(**overrides) -> config.Settings:
        settings = make_settings(**overrides)
        monkeypatch.setattr(config, "settings", settings)
        return settings

    return _apply
