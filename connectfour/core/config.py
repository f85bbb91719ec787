"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Only the CLI reads these; the engine takes explicit arguments.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class GameSettings(BaseSettings):
    """Grid dimensions for new games."""

    model_config = SettingsConfigDict(env_prefix="GAME_")

    width: int = Field(default=7, description="Number of columns")
    height: int = Field(default=6, description="Number of rows")


class PlayerSettings(BaseSettings):
    """Default player names and colors."""

    model_config = SettingsConfigDict(env_prefix="PLAYERS_")

    first_name: str = "Player 1"
    first_color: str = "red"
    second_name: str = "Player 2"
    second_color: str = "yellow"


class LogSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    game: GameSettings = Field(default_factory=GameSettings)
    players: PlayerSettings = Field(default_factory=PlayerSettings)
    log: LogSettings = Field(default_factory=LogSettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
