"""
Board state for TicTacToe.
Owns the 3x3 grid, prints it, applies moves and evaluates the position.
"""

from typing import List, Tuple

from .config import GameConfig
from .marks import Mark
from .move_validator import MoveValidator
from .outcome import Outcome, WinChecker


class Board:
    """
    The 3x3 TicTacToe grid, row-major, rows and columns indexed 0-2.

    The grid is only ever changed through apply_move(), one cell at a
    time. A rejected move leaves every cell as it was.
    """

    def __init__(self):
        size = GameConfig.BOARD_SIZE
        self._grid: List[List[Mark]] = [
            [Mark.EMPTY for _ in range(size)] for _ in range(size)
        ]
        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    @classmethod
    def create(cls) -> "Board":
        """Create a board with all nine cells empty."""
        return cls()

    @property
    def rows(self) -> Tuple[Tuple[Mark, ...], ...]:
        """Read-only snapshot of the grid."""
        return tuple(tuple(row) for row in self._grid)

    def get(self, row: int, col: int) -> Mark:
        """Mark at (row, col). Indices must be on the board."""
        return self._grid[row][col]

    def apply_move(self, row: int, col: int, mark: Mark):
        """
        Place a mark on the board.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: Player placing the mark (X or O).

        Raises:
            OutOfBounds: if row or col is off the board.
            CellOccupied: if the cell already holds a mark.
        """
        if not mark.is_player:
            raise AssertionError(f"Cannot place {mark!r} on the board")

        result = self._validator.validate_move(self, row, col)
        if not result.is_valid:
            raise result.error

        self._grid[row][col] = mark

    def evaluate(self) -> Outcome:
        """Compute the current outcome (InProgress, Draw or Winner)."""
        return self._win_checker.evaluate(self._grid)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                if cell is Mark.EMPTY:
                    empty.append((row, col))
        return empty

    def is_full(self) -> bool:
        return not self.get_empty_cells()

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._grid = [list(row) for row in self._grid]
        return new_board

    def to_text(self) -> str:
        """The board as printed by render(), without the final newline."""
        size = GameConfig.BOARD_SIZE
        lines = ["  " + " ".join(str(col) for col in range(size))]
        for index, row in enumerate(self._grid):
            cells = "".join(f"{cell.symbol} " for cell in row)
            lines.append(f"{index} {cells}")
        return "\n".join(lines)

    def render(self):
        """Print the board to console."""
        print(self.to_text())

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows = "/".join("".join(cell.symbol for cell in row) for row in self._grid)
        return f"Board({rows})"
