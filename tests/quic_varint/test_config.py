"""Tests for environment-driven configuration."""

from __future__ import annotations

import importlib
from collections.abc import Iterator

import pytest

from quic_varint import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Reload the config module after the test so later tests see the defaults."""
    yield monkeypatch
    monkeypatch.delenv("QUIC_VARINT_LOG_LEVEL", raising=False)
    importlib.reload(config)


def test_level_from_environment(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.setenv("QUIC_VARINT_LOG_LEVEL", "warning")
    assert importlib.reload(config).LOG_LEVEL == "WARNING"


def test_invalid_level_rejected(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.setenv("QUIC_VARINT_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="Invalid QUIC_VARINT_LOG_LEVEL"):
        importlib.reload(config)
