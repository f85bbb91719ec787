"""Game engine for Connect Four state management."""

import logging

from ..core.bus import EventBus
from ..core.errors import InvalidColumn, InvalidDimension
from ..core.events import Event, EventType
from ..core.types import (
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
from .rules import Connect4Rules


logger = logging.getLogger(__name__)

MIN_DIMENSION = 4


class GameEngine:
    """Owns one game: grid, turn and terminal state.

    Stateful engine that:
    - Validates and applies moves
    - Alternates the active player
    - Detects wins/ties
    - Emits events for state changes

    ``apply_move`` is the only method that mutates the game. Once the game
    is won or tied every further move is ignored.
    """

    def __init__(
        self,
        width: int,
        height: int,
        first: Player,
        second: Player,
        *,
        rules: Connect4Rules | None = None,
        bus: EventBus | None = None,
    ):
        """Start a new game with ``first`` to move.

        Args:
            width: Number of columns (at least 4)
            height: Number of rows (at least 4)
            first: Player who moves first
            second: The other player
            rules: Game rules (uses defaults if None)
            bus: Event bus (a private bus is created if None)

        Raises:
            InvalidDimension: If width or height is less than 4
        """
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise InvalidDimension(width, height, MIN_DIMENSION)

        self.rules = rules or Connect4Rules()
        self.bus = bus or EventBus()
        self._grid = Grid(width, height)
        self._players = (first, second)
        self._active = first
        self._phase = GamePhase.IN_PROGRESS
        self._winner: Player | None = None
        self._winning_positions: tuple[Position, ...] = ()
        self._history: list[Move] = []

        logger.info("New %dx%d game: %s vs %s", width, height, first, second)
        self.bus.publish(Event(
            type=EventType.GAME_STARTED,
            data={"width": width, "height": height, "first_player": first},
            source="game_engine"
        ))

    def find_landing_row(self, column: int) -> int | None:
        """Lowest empty row in ``column``, or None if the column is full.

        Raises:
            InvalidColumn: If column is outside the grid
        """
        return self.rules.find_landing_row(self._grid, column)

    def apply_move(self, column: int) -> Outcome:
        """Drop the active player's piece into ``column``.

        Args:
            column: Column to drop piece into

        Returns:
            ``Ignored`` if nothing landed, otherwise ``Win``, ``Tie`` or
            ``Continue`` carrying the landing position
        """
        if self.game_over:
            return self._ignore(column, IgnoreReason.GAME_OVER)

        try:
            row = self.find_landing_row(column)
        except InvalidColumn:
            return self._ignore(column, IgnoreReason.INVALID_COLUMN)
        if row is None:
            return self._ignore(column, IgnoreReason.COLUMN_FULL)

        player = self._active
        position = Position(row, column)
        self._grid.place(position, player)
        move = Move(player=player, position=position)
        self._history.append(move)
        logger.debug("%s landed at %s", player, position)

        self.bus.publish(Event(
            type=EventType.MOVE_MADE,
            data={"move": move, "row": row, "column": column, "player": player},
            source="game_engine"
        ))

        winning = self.rules.winning_run(self._grid, player)
        if winning:
            self._phase = GamePhase.WON
            self._winner = player
            self._winning_positions = tuple(winning)
            logger.info("%s won after %d moves", player, len(self._history))
            self.bus.publish(Event(
                type=EventType.GAME_WON,
                data={"winner": player, "positions": self._winning_positions},
                source="game_engine"
            ))
            return Win(player=player, position=position, winning_positions=self._winning_positions)

        if self.rules.is_full(self._grid):
            self._phase = GamePhase.TIED
            logger.info("Tie after %d moves", len(self._history))
            self.bus.publish(Event(
                type=EventType.GAME_DRAW,
                data={"moves": len(self._history)},
                source="game_engine"
            ))
            return Tie(position=position)

        self._active = self._other(player)
        self.bus.publish(Event(
            type=EventType.TURN_CHANGED,
            data={"player": self._active, "turn": len(self._history) + 1},
            source="game_engine"
        ))
        return Continue(next_player=self._active, position=position)

    def _ignore(self, column: int, reason: IgnoreReason) -> Ignored:
        logger.debug("Ignored move in column %s: %s", column, reason)
        self.bus.publish(Event(
            type=EventType.MOVE_IGNORED,
            data={"column": column, "reason": reason},
            source="game_engine"
        ))
        return Ignored(reason=reason)

    def _other(self, player: Player) -> Player:
        first, second = self._players
        return second if player == first else first

    @property
    def state(self) -> GameState:
        """Snapshot of the current game state."""
        return GameState(
            grid=self._grid.rows,
            players=self._players,
            active_player=self._active,
            phase=self._phase,
            winner=self._winner,
            winning_positions=self._winning_positions,
            move_history=tuple(self._history),
            legal_moves=tuple(self.legal_moves),
        )

    @property
    def grid(self) -> Grid:
        """Copy of the grid (mutating it does not affect the game)."""
        return self._grid.copy()

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    @property
    def active_player(self) -> Player:
        """Player whose move is being solicited (the winner once won)."""
        return self._active

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def game_over(self) -> bool:
        """Check if game is over."""
        return self._phase is not GamePhase.IN_PROGRESS

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def legal_moves(self) -> list[int]:
        """Columns that accept a piece (empty once the game is over)."""
        if self.game_over:
            return []
        return self.rules.legal_moves(self._grid)

    @property
    def move_history(self) -> list[Move]:
        return list(self._history)
