"""
Cell marks and turn alternation for TicTacToe.
"""

from enum import Enum

from .config import GameConfig


class Mark(Enum):
    """The three values a cell can hold."""
    X = GameConfig.X_SYMBOL
    O = GameConfig.O_SYMBOL
    EMPTY = GameConfig.EMPTY_SYMBOL

    @property
    def symbol(self) -> str:
        """Character used when the board is printed."""
        return self.value

    @property
    def is_player(self) -> bool:
        return self is not Mark.EMPTY

    def opposite(self) -> "Mark":
        """Get the opposite player."""
        return next_turn(self)

    def __str__(self) -> str:
        return self.symbol


# Players in the order they are checked for a win
PLAYERS = (Mark.X, Mark.O)


def next_turn(mark: Mark) -> Mark:
    """
    Get the player who moves after `mark`.

    Only X and O take turns. Anything else means the caller lost track
    of the turn marker, so this aborts instead of returning a value.
    """
    if mark is Mark.X:
        return Mark.O
    if mark is Mark.O:
        return Mark.X
    raise AssertionError(f"Invalid turn: {mark!r}")


def parse_mark(symbol: str) -> Mark:
    """
    Look up a player mark by its symbol (case-insensitive).

    Raises:
        ValueError: if the symbol is not X or O.
    """
    mark = Mark(symbol.strip().upper())
    if not mark.is_player:
        raise ValueError(f"{symbol!r} is not a player mark")
    return mark
