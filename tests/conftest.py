"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from cheatsheets.common import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin settings-related environment variables so a local `.env` cannot leak into tests."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
        "LOG_FORMAT": "text",
        "NOTES_CATALOG_PATH": "configs/notes_catalog.yaml",
        "NOTES_REPORT_DIR": "reports/notes",
        "NOTES_STRICT": "true",
    }
    for key, value in defaults.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("NOTES_RANDOM_SEED", raising=False)

    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
