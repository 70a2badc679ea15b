"""Barragoon notation module.

Position text (FEN-style) and algebraic move text.
"""

from barragoon.notation.algebraic import (
    coordinate_to_algebraic,
    move_to_algebraic,
    parse_coordinate,
    parse_move,
)
from barragoon.notation.fen import (
    EMPTY_FEN,
    INITIAL_FEN,
    board_from_fen,
    board_to_fen,
)

__all__ = [
    "EMPTY_FEN",
    "INITIAL_FEN",
    "board_from_fen",
    "board_to_fen",
    "coordinate_to_algebraic",
    "move_to_algebraic",
    "parse_coordinate",
    "parse_move",
]
