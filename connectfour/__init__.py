"""Connect Four rules engine and turn state machine."""

from .core.errors import ConnectFourError, InvalidColumn, InvalidDimension
from .core.types import (
    Continue,
    GamePhase,
    GameState,
    Ignored,
    IgnoreReason,
    Outcome,
    Player,
    Position,
    Tie,
    Win,
)
from .game import Connect4Rules, GameEngine


__all__ = [
    "Connect4Rules",
    "ConnectFourError",
    "Continue",
    "GameEngine",
    "GamePhase",
    "GameState",
    "IgnoreReason",
    "Ignored",
    "InvalidColumn",
    "InvalidDimension",
    "Outcome",
    "Player",
    "Position",
    "Tie",
    "Win",
]
