from __future__ import annotations

import sys
from pathlib import Path

import pytest

SETTINGS_ENV = ("CURL_TRANSPILER_TARGET", "CURL_TRANSPILER_SAMPLES", "CURL_TRANSPILER_LOG_LEVEL")


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values a .env file loaded later.
    for key in SETTINGS_ENV:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
