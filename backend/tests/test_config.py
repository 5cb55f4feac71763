"""Tests for Settings defaults and validation."""

import pytest
from pydantic import ValidationError

from svckit.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.backend_port == 7070
    assert s.strict_book_lookup is False


def test_log_level_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_port_range_enforced():
    with pytest.raises(ValidationError):
        Settings(backend_port=80)


def test_env_override(monkeypatch):
    monkeypatch.setenv("STRICT_BOOK_LOOKUP", "true")
    monkeypatch.setenv("BACKEND_PORT", "9090")
    s = Settings()
    assert s.strict_book_lookup is True
    assert s.backend_port == 9090
