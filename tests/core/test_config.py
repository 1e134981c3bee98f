"""Unit tests for src/core/config.py"""

import logging

import pytest

from src.chess.fen import STARTING_FEN
from src.core.config import Settings, configure_logging, get_settings


def test_default_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHESS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHESS_STARTING_FEN", raising=False)
    settings = get_settings()
    assert settings == Settings()
    assert settings.log_level == "INFO"
    assert settings.starting_fen == STARTING_FEN


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_LOG_LEVEL", "debug")
    monkeypatch.setenv("CHESS_STARTING_FEN", "8/8/8/8/8/8/8/4K3 w - -")
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.starting_fen == "8/8/8/8/8/8/8/4K3 w - -"


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """basicConfig is a no-op when the root logger already has handlers (pytest installs some), so only check the call"""
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(Settings(log_level="WARNING"))
    assert calls[0]["level"] == "WARNING"
