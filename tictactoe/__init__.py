"""
Console TicTacToe
=================
Two players take turns at one keyboard, entering "row,col" coordinates
on a 3x3 board until someone gets three in a row or the board fills up.

This package is the game engine: board state, move validation, coordinate
parsing and win/draw detection. The console loop lives in main.py.
"""

from .config import GameConfig
from .marks import Mark, next_turn, parse_mark
from .board import Board
from .outcome import Outcome, InProgress, Draw, Winner, WinChecker
from .move_validator import MoveValidator, ValidationResult
from .move_parser import parse_coordinates
from .errors import (
    TicTacToeError,
    MoveError,
    OutOfBounds,
    CellOccupied,
    InputError,
    MalformedInput,
    NotANumber,
)

__version__ = "1.0.0"
