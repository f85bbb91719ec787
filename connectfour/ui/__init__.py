"""Presentation collaborators for Connect Four."""

from .terminal import COLORS, TerminalPresenter, board_to_ascii, piece_symbols


__all__ = [
    "COLORS",
    "TerminalPresenter",
    "board_to_ascii",
    "piece_symbols",
]
