"""
CLI for Connect Four.

Usage:
    python -m connectfour.cli.main --help
    python -m connectfour.cli.main play
    python -m connectfour.cli.main play --width 8 --player1 Alice --player2 Bob
    python -m connectfour.cli.main --log-level DEBUG replay 3,3,4,4,5,5,6
"""

import logging
from typing import Annotated

import typer

from ..core.config import get_settings
from ..core.errors import InvalidDimension
from ..core.types import Ignored, Player, Tie, Win
from ..game.engine import GameEngine
from ..ui.terminal import COLORS, TerminalPresenter, board_to_ascii


app = typer.Typer(
    name="connect4",
    help="Two-player Connect Four in the terminal.",
    add_completion=False,
)

WidthOption = Annotated[int | None, typer.Option("--width", "-w", help="Number of columns (min 4)")]
HeightOption = Annotated[int | None, typer.Option("--height", "-H", help="Number of rows (min 4)")]
Player1Option = Annotated[str | None, typer.Option("--player1", help="First player's name")]
Player2Option = Annotated[str | None, typer.Option("--player2", help="Second player's name")]
Color1Option = Annotated[str | None, typer.Option("--color1", help="First player's color")]
Color2Option = Annotated[str | None, typer.Option("--color2", help="Second player's color")]


@app.callback()
def main_callback(
    log_level: Annotated[str | None, typer.Option("--log-level", help="Logging level (default from LOG_LEVEL)")] = None,
):
    """Configure logging before any command runs."""
    level = (log_level or get_settings().log.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def make_players(
    player1: str | None,
    player2: str | None,
    color1: str | None,
    color2: str | None,
) -> tuple[Player, Player]:
    """Build the two players, filling gaps from settings.

    Raises:
        typer.BadParameter: If a name is empty, both names match, or a
            color is unknown
    """
    defaults = get_settings().players
    name1 = (player1 if player1 is not None else defaults.first_name).strip()
    name2 = (player2 if player2 is not None else defaults.second_name).strip()
    color1 = (color1 or defaults.first_color).lower()
    color2 = (color2 or defaults.second_color).lower()

    if not name1 or not name2:
        raise typer.BadParameter("Enter player names...")
    if name1 == name2:
        raise typer.BadParameter(f"Players need different names (both are '{name1}')")
    for color in (color1, color2):
        if color not in COLORS:
            raise typer.BadParameter(f"Unknown color '{color}'. Choose from: {', '.join(COLORS)}")

    return Player(name1, color1), Player(name2, color2)


def new_engine(
    width: int | None,
    height: int | None,
    players: tuple[Player, Player],
) -> GameEngine:
    """Create an engine, exiting with code 1 on a bad grid size."""
    game = get_settings().game
    try:
        return GameEngine(
            width if width is not None else game.width,
            height if height is not None else game.height,
            *players,
        )
    except InvalidDimension as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def parse_moves(moves: str) -> list[int]:
    """Parse a comma-separated column list like ``3,3,4``."""
    try:
        return [int(part) for part in moves.split(",") if part.strip()]
    except ValueError as e:
        raise typer.BadParameter(f"Moves must be comma-separated integers (got '{moves}')") from e


def describe(engine: GameEngine) -> str:
    """One-line summary of where the game stands."""
    state = engine.state
    if state.winner is not None:
        return f"{state.winner.name} won!"
    if state.game_over:
        return "Tie!"
    return f"In progress: {state.active_player.name} to move"


@app.command()
def play(
    width: WidthOption = None,
    height: HeightOption = None,
    player1: Player1Option = None,
    player2: Player2Option = None,
    color1: Color1Option = None,
    color2: Color2Option = None,
):
    """
    Play hot-seat games: both players share this terminal.

    Enter a column number on your turn, 'q' to quit. After a win or tie a
    fresh board can be started with the same players.
    """
    players = make_players(player1, player2, color1, color2)

    while True:
        typer.echo("\n" + "=" * 50)
        typer.echo("  CONNECT 4")
        typer.echo("=" * 50)

        engine = new_engine(width, height, players)
        TerminalPresenter(engine)

        if not _play_game(engine):
            typer.echo("\nGame quit.")
            return

        try:
            again = typer.confirm("\nPlay again?", default=False)
        except (KeyboardInterrupt, typer.Abort):
            again = False
        if not again:
            return


def _play_game(engine: GameEngine) -> bool:
    """Prompt for moves until the game ends. False if the players quit."""
    typer.echo(f"\nEnter column number (0-{engine.width - 1}) to play, 'q' to quit\n")

    while not engine.game_over:
        try:
            user_input = typer.prompt(f"\n{engine.active_player.name}, your move")
        except (KeyboardInterrupt, typer.Abort):
            return False

        if user_input.strip().lower() == "q":
            return False

        try:
            col = int(user_input)
        except ValueError:
            typer.echo(f"Enter a number 0-{engine.width - 1}")
            continue

        engine.apply_move(col)

    return True


@app.command()
def replay(
    moves: Annotated[str, typer.Argument(help="Comma-separated columns, e.g. 3,3,4,4")],
    width: WidthOption = None,
    height: HeightOption = None,
    player1: Player1Option = None,
    player2: Player2Option = None,
    color1: Color1Option = None,
    color2: Color2Option = None,
    matrix: Annotated[bool, typer.Option("--matrix", help="Also print the numeric board matrix")] = False,
):
    """Play a fixed list of moves and show the final board."""
    columns = parse_moves(moves)
    players = make_players(player1, player2, color1, color2)
    engine = new_engine(width, height, players)

    for col in columns:
        outcome = engine.apply_move(col)
        if isinstance(outcome, Ignored):
            typer.echo(f"Column {col} ignored: {outcome.reason}")
        elif isinstance(outcome, (Win, Tie)):
            typer.echo(f"Game over at {outcome.position} after {len(engine.move_history)} moves")

    typer.echo(board_to_ascii(engine.state.grid, engine.players))
    if matrix:
        typer.echo(str(engine.grid.as_matrix(*engine.players)))
    typer.echo(describe(engine))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
