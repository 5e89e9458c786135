"""Settings loading from environment variables."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from asciimoji.config import LookupSettings, get_settings


def test_defaults():
    settings = LookupSettings()

    assert settings.environment == "dev"
    assert settings.dataset_path is None
    assert settings.search.delay_seconds == 0.0
    assert settings.ui.default_action == "paste"
    assert settings.ui.close_on_select is True
    assert settings.log_level_value == logging.INFO


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ASCIIMOJI_DATASET_PATH", "/tmp/faces.json")
    monkeypatch.setenv("ASCIIMOJI_SEARCH__DELAY_SECONDS", "0.25")
    monkeypatch.setenv("ASCIIMOJI_UI__DEFAULT_ACTION", "copy")
    monkeypatch.setenv("ASCIIMOJI_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.dataset_path == Path("/tmp/faces.json")
    assert settings.search.delay_seconds == 0.25
    assert settings.ui.default_action == "copy"
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG
    assert get_settings() is settings


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("ASCIIMOJI_ENVIRONMENT=prod\n", encoding="utf-8")
    assert LookupSettings().environment == "prod"


@pytest.mark.parametrize(
    "env, value",
    [
        ("ASCIIMOJI_LOG_LEVEL", "chatty"),
        ("ASCIIMOJI_SEARCH__DELAY_SECONDS", "5"),
        ("ASCIIMOJI_UI__DEFAULT_ACTION", "print"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, env, value):
    monkeypatch.setenv(env, value)
    with pytest.raises(ValidationError):
        LookupSettings()
