"""
Unit tests for settings.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import pytest

from cheatsheets.common import settings as settings_module


def test_load_settings_success() -> None:
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME == "test-project"
    assert settings.NOTES_STRICT is True
    assert settings.NOTES_RANDOM_SEED is None


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTES_REPORT_DIR", "   ")
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = settings_module.load_settings(load_env=False)
    assert settings.NOTES_REPORT_DIR == "reports/notes"
    assert settings.LOG_FORMAT == "text"


def test_environment_overrides_are_coerced(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTES_RANDOM_SEED", "42")
    monkeypatch.setenv("NOTES_STRICT", "false")
    settings = settings_module.load_settings(load_env=False)
    assert settings.NOTES_RANDOM_SEED == 42
    assert settings.NOTES_STRICT is False


def test_load_settings_invalid_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)


def test_get_settings_is_cached() -> None:
    assert settings_module.get_settings() is settings_module.get_settings()
