"""
Shared data types for the Connect Four engine.

These types are the contracts between the engine and its collaborators.
Outcome values are returned from every move; GameState is a read-only
snapshot handed out to whoever renders the game.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np


# ─────────────────────────────────────────────────────────────
# PLAYER & GAME PHASE
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Player:
    """Player token.

    The engine only compares players for equality; ``color`` is a display
    attribute for presentation collaborators.
    """

    name: str
    color: str = "white"

    def __str__(self) -> str:
        return self.name


class GamePhase(Enum):
    """Current phase of the game."""

    IN_PROGRESS = auto()
    WON = auto()  # Terminal
    TIED = auto()  # Terminal


class IgnoreReason(Enum):
    """Why a requested move did not place a piece."""

    GAME_OVER = "game already over"
    COLUMN_FULL = "column full"
    INVALID_COLUMN = "column out of range"

    def __str__(self) -> str:
        return self.value


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top
    col: int  # 0 = left

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


Cell = Player | None


class Grid:
    """
    Fixed-size grid of cells.

    ``cells[row][col]`` holds ``None`` for an empty cell or the Player
    occupying it. Row 0 is the top row. Occupied cells are never cleared
    or reassigned.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells: list[list[Cell]] = [[None] * width for _ in range(height)]

    def __getitem__(self, position: Position) -> Cell:
        return self._cells[position.row][position.col]

    def in_bounds(self, row: int, col: int) -> bool:
        """Check a coordinate without relying on negative indexing."""
        return 0 <= row < self.height and 0 <= col < self.width

    def place(self, position: Position, player: Player) -> None:
        """Occupy an empty cell.

        Raises:
            ValueError: If the cell is out of bounds or already occupied
        """
        if not self.in_bounds(position.row, position.col):
            raise ValueError(f"Position {position} is outside the grid")
        if self._cells[position.row][position.col] is not None:
            raise ValueError(f"Position {position} is already occupied")
        self._cells[position.row][position.col] = player

    def is_full(self) -> bool:
        """True when no empty cell remains."""
        return all(cell is not None for row in self._cells for cell in row)

    @property
    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Immutable copy of the cells, top row first."""
        return tuple(tuple(row) for row in self._cells)

    def as_matrix(self, first: Player, second: Player) -> np.ndarray:
        """Convert to numpy matrix for analysis or alternative renderers.

        Returns:
            int8 array where first=1, second=-1, empty=0
        """
        mapping = {first: 1, second: -1, None: 0}
        return np.array(
            [[mapping[cell] for cell in row] for row in self._cells], dtype=np.int8
        )

    def copy(self) -> "Grid":
        """Create a deep copy of the grid."""
        clone = Grid(self.width, self.height)
        clone._cells = [list(row) for row in self._cells]
        return clone


# ─────────────────────────────────────────────────────────────
# MOVES & OUTCOMES
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Move:
    """A piece that landed on the grid."""

    player: Player
    position: Position

    @property
    def column(self) -> int:
        return self.position.col

    def __str__(self) -> str:
        return f"{self.player.name} → Column {self.column}"


@dataclass(frozen=True)
class Ignored:
    """The move was rejected and nothing changed."""

    reason: IgnoreReason
    position: None = None


@dataclass(frozen=True)
class Win:
    """The mover completed four in a row."""

    player: Player
    position: Position
    winning_positions: tuple[Position, ...] = ()


@dataclass(frozen=True)
class Tie:
    """The move filled the last cell without a win."""

    position: Position


@dataclass(frozen=True)
class Continue:
    """The piece landed and play passes to ``next_player``."""

    next_player: Player
    position: Position


Outcome = Ignored | Win | Tie | Continue


# ─────────────────────────────────────────────────────────────
# GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GameState:
    """Complete game state snapshot."""

    grid: tuple[tuple[Cell, ...], ...]
    players: tuple[Player, Player]
    active_player: Player
    phase: GamePhase
    winner: Player | None = None
    winning_positions: tuple[Position, ...] = ()
    move_history: tuple[Move, ...] = field(default_factory=tuple)
    legal_moves: tuple[int, ...] = field(default_factory=tuple)

    @property
    def game_over(self) -> bool:
        return self.phase is not GamePhase.IN_PROGRESS

    @property
    def turn_number(self) -> int:
        """1-based number of the turn being played (or last played if over)."""
        return len(self.move_history) + (0 if self.game_over else 1)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)
