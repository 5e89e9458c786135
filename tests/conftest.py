"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest
import structlog

from asciimoji.config import get_settings
from asciimoji.services.dataset import DatasetProvider

from tests.fakes import SCENARIO, RecordingNotifier


@pytest.fixture
def scenario_provider() -> DatasetProvider:
    return DatasetProvider(SCENARIO)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def recorded_states():
    return []


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    for name in list(os.environ):
        if name.startswith("ASCIIMOJI_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
