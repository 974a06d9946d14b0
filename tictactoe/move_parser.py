"""
Parses a player's "row,col" text into board coordinates.

Only the syntax is checked here. Whether the coordinates are on the
board is up to the board itself.
"""

import re
from typing import Tuple

from .config import GameConfig
from .errors import MalformedInput, NotANumber

# Unsigned decimal integer, optional leading "+"
_NUMBER = re.compile(r"\+?[0-9]+")
_MAX_DIGITS = len(str(GameConfig.MAX_COORDINATE))


def parse_coordinates(text: str) -> Tuple[int, int]:
    """
    Split "row,col" into a (row, col) pair.

    Whitespace around each field is ignored.

    Raises:
        MalformedInput: if there aren't exactly two fields.
        NotANumber: if a field is not a non-negative integer, or is
            larger than GameConfig.MAX_COORDINATE.
    """
    fields = text.split(GameConfig.COORDINATE_SEPARATOR)
    if len(fields) != 2:
        raise MalformedInput()

    row, col = (_parse_field(field) for field in fields)
    return row, col


def _parse_field(field: str) -> int:
    field = field.strip()
    if not _NUMBER.fullmatch(field):
        raise NotANumber()

    digits = field.lstrip("+").lstrip("0")
    if len(digits) > _MAX_DIGITS:
        raise NotANumber()

    value = int(digits or "0")
    if value > GameConfig.MAX_COORDINATE:
        raise NotANumber()
    return value
