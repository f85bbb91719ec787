"""Terminal presentation for Connect Four.

Listens to engine events and keeps its own picture of the board, the same
way a browser table would: one piece appended per MOVE_MADE.
"""

from collections.abc import Callable, Sequence

import typer

from ..core.events import Event, EventType
from ..core.types import Player
from ..game.engine import GameEngine


# Colors typer.style understands
COLORS = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "bright_black", "bright_red", "bright_green", "bright_yellow",
    "bright_blue", "bright_magenta", "bright_cyan", "bright_white",
)

FALLBACK_SYMBOLS = ("X", "O")

Row = list[Player | None]


def piece_symbols(players: tuple[Player, Player]) -> dict[Player, str]:
    """One marker per player slot.

    Uses name initials when they tell the players apart, X and O otherwise.
    """
    initials = tuple((p.name.strip()[:1] or "?").upper() for p in players)
    if initials[0] == initials[1]:
        initials = FALLBACK_SYMBOLS
    return dict(zip(players, initials))


def board_to_ascii(
    rows: Sequence[Sequence[Player | None]],
    players: tuple[Player, Player],
    color: bool = True,
) -> str:
    """Convert board rows to ASCII display."""
    symbols = piece_symbols(players)
    width = len(rows[0]) if rows else 0
    lines = []
    lines.append("\n  " + "   ".join(str(col % 10) for col in range(width)))
    lines.append("+" + "---+" * width)

    for row in rows:
        cells = [_piece(cell, symbols, color) for cell in row]
        lines.append("|" + "|".join(f" {cell} " for cell in cells) + "|")
        lines.append("+" + "---+" * width)

    return "\n".join(lines)


def _piece(cell: Player | None, symbols: dict[Player, str], color: bool) -> str:
    if cell is None:
        return " "
    if color and cell.color in COLORS:
        return typer.style(symbols[cell], fg=cell.color, bold=True)
    return symbols[cell]


class TerminalPresenter:
    """Renders a game's events to a text stream.

    The board is sized and seeded from the engine's current state, so the
    presenter can be attached at any point of a game.
    """

    def __init__(
        self,
        engine: GameEngine,
        echo: Callable[[str], object] = typer.echo,
        color: bool = True,
    ):
        self.echo = echo
        self.color = color
        state = engine.state
        self.players = state.players
        self._rows: list[Row] = [list(row) for row in state.grid]
        handlers = {
            EventType.MOVE_MADE: self._on_move,
            EventType.MOVE_IGNORED: self._on_ignored,
            EventType.TURN_CHANGED: self._on_turn,
            EventType.GAME_WON: self._on_won,
            EventType.GAME_DRAW: self._on_draw,
        }
        for event_type, handler in handlers.items():
            engine.bus.subscribe(event_type, handler)

        self.echo(self.render())
        if not state.game_over:
            self.echo(f"Current player: {self._name(state.active_player)}")

    def render(self) -> str:
        return board_to_ascii(self._rows, self.players, color=self.color)

    def _name(self, player: Player) -> str:
        if self.color and player.color in COLORS:
            return typer.style(player.name, fg=player.color, bold=True)
        return player.name

    def _on_move(self, event: Event) -> None:
        self._rows[event.data["row"]][event.data["column"]] = event.data["player"]
        self.echo(self.render())

    def _on_ignored(self, event: Event) -> None:
        self.echo(f"Column {event.data['column']} ignored: {event.data['reason']}")

    def _on_turn(self, event: Event) -> None:
        self.echo(f"Current player: {self._name(event.data['player'])}")

    def _on_won(self, event: Event) -> None:
        self.echo(f"\n🎉 {self._name(event.data['winner'])} won! 🎉")

    def _on_draw(self, event: Event) -> None:
        self.echo("\n🤝 Tie!")
