"""
Errors raised by the TicTacToe engine.

Move errors come from the board (the move is well-formed but not legal),
input errors come from the coordinate parser (the text is not a move at all).
Both are recoverable: the console loop reports them and asks again.
"""

from typing import Optional

from .config import GameConfig


class TicTacToeError(Exception):
    """Base class for every recoverable game error."""

    default_message = "Invalid move"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class MoveError(TicTacToeError):
    """A move was rejected by the board."""


class OutOfBounds(MoveError):
    default_message = GameConfig.OUT_OF_BOUNDS_MESSAGE


class CellOccupied(MoveError):
    default_message = GameConfig.CELL_OCCUPIED_MESSAGE


class InputError(TicTacToeError):
    """The player's text could not be read as coordinates."""

    default_message = "Invalid input"


class MalformedInput(InputError):
    default_message = GameConfig.MALFORMED_INPUT_MESSAGE


class NotANumber(InputError):
    default_message = GameConfig.NOT_A_NUMBER_MESSAGE
