"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass

from .config import GameConfig
from .errors import CellOccupied, MoveError, OutOfBounds
from .marks import Mark

if TYPE_CHECKING:
    from .board import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must both be on the board (0-2)
    2. Can only place on empty cells
    """

    def validate_move(self, board: "Board", row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place mark (0-2).
            col: Column to place mark (0-2).

        Returns:
            ValidationResult with is_valid and the error that rejected it.
        """
        size = GameConfig.BOARD_SIZE

        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(is_valid=False, error=OutOfBounds())

        if board.get(row, col) is not Mark.EMPTY:
            return ValidationResult(is_valid=False, error=CellOccupied())

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: "Board") -> List[Tuple[int, int]]:
        """
        Get all valid moves, in row-major order.

        Returns:
            List of (row, col) valid move positions.
        """
        return board.get_empty_cells()
