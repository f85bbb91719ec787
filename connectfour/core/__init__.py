"""Core types, errors, events and configuration for Connect Four."""

from .bus import EventBus
from .config import (
    GameSettings,
    LogSettings,
    PlayerSettings,
    Settings,
    get_settings,
    reset_settings,
)
from .errors import ConnectFourError, InvalidColumn, InvalidDimension
from .events import Event, EventType
from .types import (
    Continue,
    GamePhase,
    GameState,
    Grid,
    Ignored,
    IgnoreReason,
    Move,
    Outcome,
    Player,
    Position,
    Tie,
    Win,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "GameSettings",
    "PlayerSettings",
    "LogSettings",
    # Errors
    "ConnectFourError",
    "InvalidColumn",
    "InvalidDimension",
    # Types
    "Player",
    "GamePhase",
    "IgnoreReason",
    "Position",
    "Grid",
    "Move",
    "Ignored",
    "Win",
    "Tie",
    "Continue",
    "Outcome",
    "GameState",
    # Events
    "Event",
    "EventType",
    "EventBus",
]
