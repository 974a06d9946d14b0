"""
Game outcomes and win checking for TicTacToe.
Classifies a board as in progress, won, or drawn.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import GameConfig
from .marks import Mark, PLAYERS

Line = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]


class Outcome(ABC):
    """Base class for the three possible outcomes."""

    is_terminal = True

    @abstractmethod
    def summary(self) -> str:
        """Human-readable result line."""


@dataclass(frozen=True)
class InProgress(Outcome):
    """Nobody has won and there are empty cells left."""

    is_terminal = False

    def summary(self) -> str:
        raise AssertionError("Game should still be in progress")


@dataclass(frozen=True)
class Draw(Outcome):
    """Board is full and nobody has three in a row."""

    def summary(self) -> str:
        return GameConfig.DRAW_MESSAGE


@dataclass(frozen=True)
class Winner(Outcome):
    """A player has completed a line."""

    mark: Mark

    def __post_init__(self):
        if not self.mark.is_player:
            raise AssertionError(f"Winner must be a player, got {self.mark!r}")

    def summary(self) -> str:
        return GameConfig.WINNER_MESSAGE.format(player=self.mark)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    X is checked before O, and for each player the lines are checked in
    the order below. The order only shows on boards no legal game can
    reach, where both players own a line: X is reported.
    """

    # All possible winning lines (as (row, col) tuples)
    WINNING_LINES: List[Line] = [
        # Rows
        ((0, 0), (0, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((2, 0), (2, 1), (2, 2)),
        # Columns
        ((0, 0), (1, 0), (2, 0)),
        ((0, 1), (1, 1), (2, 1)),
        ((0, 2), (1, 2), (2, 2)),
        # Main diagonal
        ((0, 0), (1, 1), (2, 2)),
        # Anti-diagonal
        ((0, 2), (1, 1), (2, 0)),
    ]

    def check_winner(self, grid: Sequence[Sequence[Mark]]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            grid: 3x3 rows of marks.

        Returns:
            The winning mark, or None if no winner yet.
        """
        for player in PLAYERS:
            if self._find_line(grid, player) is not None:
                return player
        return None

    def get_winning_line(self, grid: Sequence[Sequence[Mark]]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line of the winner, or None.
        """
        for player in PLAYERS:
            line = self._find_line(grid, player)
            if line is not None:
                return line
        return None

    def evaluate(self, grid: Sequence[Sequence[Mark]]) -> Outcome:
        """
        Classify the position.

        Never modifies the grid, and always returns exactly one outcome.
        """
        winner = self.check_winner(grid)
        if winner is not None:
            return Winner(winner)

        if any(cell is Mark.EMPTY for row in grid for cell in row):
            return InProgress()

        return Draw()

    def _find_line(
        self,
        grid: Sequence[Sequence[Mark]],
        player: Mark
    ) -> Optional[Line]:
        for line in self.WINNING_LINES:
            if all(grid[row][col] is player for row, col in line):
                return line
        return None
