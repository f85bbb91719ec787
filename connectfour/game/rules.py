"""Connect Four rules: gravity, four-in-a-row detection, full board."""


from ..core.errors import InvalidColumn
from ..core.types import Grid, Player, Position


class Connect4Rules:
    """Stateless Connect Four rules.

    Win condition: 4 in a row (horizontal, vertical, or diagonal)
    """

    win_length = 4

    # (row step, col step) for each run anchored at a cell
    directions = (
        (0, 1),   # Horizontal (right)
        (1, 0),   # Vertical (down)
        (1, 1),   # Diagonal down-right
        (1, -1),  # Diagonal down-left
    )

    def find_landing_row(self, grid: Grid, column: int) -> int | None:
        """Get the row where a piece would land in given column.

        Args:
            grid: Current grid
            column: Column to drop piece in

        Returns:
            Lowest empty row index, or None if the column is full

        Raises:
            InvalidColumn: If column is outside the grid
        """
        if not 0 <= column < grid.width:
            raise InvalidColumn(column, grid.width)

        for row in range(grid.height - 1, -1, -1):
            if grid[Position(row, column)] is None:
                return row
        return None

    def legal_moves(self, grid: Grid) -> list[int]:
        """Columns that can still accept a piece."""
        return [col for col in range(grid.width) if grid[Position(0, col)] is None]

    def candidate_runs(self, row: int, col: int) -> list[list[tuple[int, int]]]:
        """The four runs anchored at (row, col), possibly leaving the grid."""
        return [
            [(row + i * dr, col + i * dc) for i in range(self.win_length)]
            for dr, dc in self.directions
        ]

    def winning_run(self, grid: Grid, player: Player) -> list[Position]:
        """Find the first run of four owned by ``player``.

        Scans every cell of the grid as an anchor, not just the neighborhood
        of the last move.

        Returns:
            Positions of the winning run, or empty list if no win
        """
        for row in range(grid.height):
            for col in range(grid.width):
                for run in self.candidate_runs(row, col):
                    if self._is_win(grid, run, player):
                        return [Position(r, c) for r, c in run]
        return []

    def check_for_win(self, grid: Grid, player: Player) -> bool:
        """True if ``player`` owns any complete run of four."""
        return bool(self.winning_run(grid, player))

    def is_full(self, grid: Grid) -> bool:
        """Check if every cell is occupied."""
        return grid.is_full()

    def _is_win(self, grid: Grid, run: list[tuple[int, int]], player: Player) -> bool:
        # Bounds first so negative indices never wrap around
        return all(
            grid.in_bounds(r, c) and grid[Position(r, c)] == player for r, c in run
        )
