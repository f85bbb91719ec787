"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from connectfour.core.config import Settings, get_settings, reset_settings


def test_defaults():
    settings = Settings()
    assert settings.game.width == 7
    assert settings.game.height == 6
    assert settings.players.first_name == "Player 1"
    assert settings.players.second_color == "yellow"
    assert settings.log.level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GAME_WIDTH", "9")
    monkeypatch.setenv("GAME_HEIGHT", "8")
    monkeypatch.setenv("PLAYERS_FIRST_NAME", "Ada")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = get_settings()
    assert settings.game.width == 9
    assert settings.game.height == 8
    assert settings.players.first_name == "Ada"
    assert settings.log.level == "DEBUG"


def test_singleton_and_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("GAME_WIDTH", "10")
    assert get_settings().game.width == 7

    reset_settings()
    assert get_settings().game.width == 10


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()
