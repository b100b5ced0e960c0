"""Tests for presentation settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jsexplain.config.settings import Settings


def test_default_settings():
    s = Settings()
    assert s.color is True
    assert s.output_format == "text"
    assert s.log_level == "WARNING"


def test_settings_override():
    s = Settings(color=False, output_format="json", log_level="debug")
    assert s.color is False
    assert s.output_format == "json"
    assert s.log_level == "DEBUG"


def test_environment_is_not_read(monkeypatch: pytest.MonkeyPatch):
    for key, value in {
        "COLOR": "false",
        "OUTPUT_FORMAT": "json",
        "LOG_LEVEL": "loud",
        "EXPLAIN_ERROR_COLOR": "false",
        "EXPLAIN_ERROR_OUTPUT_FORMAT": "json",
        "EXPLAIN_ERROR_LOG_LEVEL": "loud",
    }.items():
        monkeypatch.setenv(key, value)
    s = Settings()
    assert s.color is True
    assert s.output_format == "text"
    assert s.log_level == "WARNING"


def test_dotenv_file_is_not_read(tmp_path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / ".env").write_text("COLOR=false\nLOG_LEVEL=loud\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    s = Settings()
    assert s.color is True
    assert s.log_level == "WARNING"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="loud")


def test_invalid_output_format_rejected():
    with pytest.raises(ValidationError):
        Settings(output_format="yaml")
