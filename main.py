"""
Main console loop for TicTacToe.

This script ties together:
- The board (rendering, moves, win/draw detection)
- Coordinate parsing of what the players type
- Turn alternation between X and O

Run this script to play TicTacToe with two players at one keyboard!
"""

import sys
from typing import Callable, Optional, Tuple

from tictactoe.config import GameConfig
from tictactoe.board import Board
from tictactoe.errors import InputError, MoveError
from tictactoe.marks import Mark, next_turn, parse_mark
from tictactoe.move_parser import parse_coordinates
from tictactoe.outcome import Outcome


class ConsoleGame:
    """
    Main controller for a console TicTacToe game.

    Game flow:
    1. Check whether the game is over
    2. Show the board and ask the current player for "row,col"
    3. Re-ask until the text parses as two numbers
    4. Apply the move; on a rejected move start the turn over
    5. Hand the turn to the other player and repeat
    """

    def __init__(
        self,
        first_player: Mark = Mark.O,
        input_func: Optional[Callable[[], str]] = None
    ):
        """
        Initialize the game.

        Args:
            first_player: Which player moves first (X or O).
            input_func: Reads one line from the players (default: input).
        """
        if not first_player.is_player:
            raise ValueError(f"First player must be X or O, got {first_player!r}")

        self.board = Board.create()
        self.current_player = first_player
        self._read_line = input_func or input
        self.outcome: Optional[Outcome] = None

    def start(self) -> Outcome:
        """Play until somebody wins or the board is full."""
        self.outcome = self._game_loop()
        self._show_game_result()
        return self.outcome

    def _game_loop(self) -> Outcome:
        """Main game loop."""
        while True:
            outcome = self.board.evaluate()
            if outcome.is_terminal:
                return outcome

            self.board.render()
            print(GameConfig.PROMPT.format(player=self.current_player))

            row, col = self._read_move()

            try:
                self.board.apply_move(row, col, self.current_player)
            except MoveError as e:
                print(e)
                continue

            self.current_player = next_turn(self.current_player)

    def _read_move(self) -> Tuple[int, int]:
        """Read lines until one parses as coordinates."""
        while True:
            text = self._read_line()
            try:
                return parse_coordinates(text)
            except InputError as e:
                print(e)

    def _show_game_result(self):
        """Show the final board and result."""
        self.board.render()
        print(self.outcome.summary())


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--first",
        type=parse_mark,
        default=GameConfig.FIRST_PLAYER,
        metavar="{X,O}",
        help=f"Player that moves first (default: {GameConfig.FIRST_PLAYER})"
    )

    args = parser.parse_args(argv)

    game = ConsoleGame(first_player=args.first)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n" + GameConfig.INTERRUPTED_MESSAGE)
        print(GameConfig.GOODBYE_MESSAGE)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
