"""Shared fixtures for Connect Four tests."""

import pytest

from connectfour.core.bus import EventBus
from connectfour.core.config import reset_settings
from connectfour.core.types import Player
from connectfour.game.engine import GameEngine


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; drop them around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def alice() -> Player:
    return Player("Alice", "red")


@pytest.fixture
def bob() -> Player:
    return Player("Bob", "yellow")


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def engine(alice, bob, bus) -> GameEngine:
    """Standard 7x6 game with Alice to move."""
    return GameEngine(7, 6, alice, bob, bus=bus)


@pytest.fixture
def play():
    """Apply a list of columns and return the outcomes."""

    def _play(game: GameEngine, columns: list[int]) -> list:
        return [game.apply_move(col) for col in columns]

    return _play


@pytest.fixture
def tie_moves() -> list[int]:
    """Move order that fills a 7x6 grid without any four-in-a-row.

    Final layout (bottom row first) alternates AABBAAB / BBAABBA, so runs
    never exceed two in any direction. Column 5 is filled first, then each
    A-bottomed column is paired with a B-bottomed one to keep turns
    alternating under gravity.
    """

    def pair(a: int, b: int) -> list[int]:
        return [a, b, b, a] * 3

    return [5] * 6 + pair(0, 2) + pair(1, 3) + pair(4, 6)
