"""Exceptions raised by the Connect Four engine."""


class ConnectFourError(Exception):
    """Base class for engine errors."""


class InvalidDimension(ConnectFourError, ValueError):
    """Grid is too small for a four-in-a-row to fit."""

    def __init__(self, width: int, height: int, minimum: int = 4):
        self.width = width
        self.height = height
        self.minimum = minimum
        super().__init__(
            f"Grid must be at least {minimum}x{minimum} (got {width}x{height})"
        )


class InvalidColumn(ConnectFourError, ValueError):
    """Column index outside the grid."""

    def __init__(self, column: int, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column} is outside 0-{width - 1}")
