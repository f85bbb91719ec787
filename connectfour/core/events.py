"""
Event definitions for the Connect Four engine.

The engine publishes these so presentation code can react to moves
without the engine knowing who is listening.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    """Types of events in the system.

    Payload keys per type:
        GAME_STARTED: width, height, first_player
        MOVE_MADE: move, row, column, player
        MOVE_IGNORED: column, reason
        TURN_CHANGED: player, turn
        GAME_WON: winner, positions
        GAME_DRAW: moves
    """

    GAME_STARTED = auto()
    TURN_CHANGED = auto()
    MOVE_MADE = auto()
    MOVE_IGNORED = auto()
    GAME_WON = auto()
    GAME_DRAW = auto()


@dataclass(frozen=True)
class Event:
    """Something that happened in one game.

    ``data`` is keyed by field name as listed on EventType; ``source`` names
    the publisher.
    """

    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)
    source: str = "game_engine"

    def __str__(self) -> str:
        fields = ", ".join(f"{key}={value}" for key, value in self.data.items())
        return f"{self.type.name}({fields})"
