"""FEN-style position text.

Ranks are listed from the top of the board (rank 9) down to rank 1 and
separated by ``/``. Within a rank a digit 1-7 stands for that many empty
squares and every other character is one occupied square.
"""

from __future__ import annotations

import logging

from ..board import Board
from ..errors import (
    InvalidCharError,
    OverfullLineError,
    TooManyLinesError,
    UnderfullLineError,
)
from ..geometry import BOARD_HEIGHT, BOARD_WIDTH, Coordinate, Direction
from ..models import (
    Alignment,
    BlockingFace,
    ForceTurnFace,
    OneWayFace,
    OneWayTurnLeftFace,
    OneWayTurnRightFace,
    Player,
    SquareContent,
    StraightFace,
    Tile,
    TileType,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CHAR_TO_CONTENT",
    "CONTENT_TO_CHAR",
    "EMPTY_FEN",
    "INITIAL_FEN",
    "board_from_fen",
    "board_to_fen",
    "content_to_char",
]

INITIAL_FEN = "1vd1dv1/2zdz2/7/1x3x1/x1x1x1x/1x3x1/7/2ZDZ2/1VD1DV1"
EMPTY_FEN = "7/7/7/7/7/7/7/7/7"

RANK_SEPARATOR = "/"

CHAR_TO_CONTENT: dict[str, SquareContent] = {
    "Z": Tile(tile_type=TileType.TWO, player=Player.LIGHT),
    "z": Tile(tile_type=TileType.TWO, player=Player.DARK),
    "D": Tile(tile_type=TileType.THREE, player=Player.LIGHT),
    "d": Tile(tile_type=TileType.THREE, player=Player.DARK),
    "V": Tile(tile_type=TileType.FOUR, player=Player.LIGHT),
    "v": Tile(tile_type=TileType.FOUR, player=Player.DARK),
    "+": ForceTurnFace(),
    "|": StraightFace(alignment=Alignment.VERTICAL),
    "-": StraightFace(alignment=Alignment.HORIZONTAL),
    "Y": OneWayFace(direction=Direction.SOUTH),
    "^": OneWayFace(direction=Direction.NORTH),
    "<": OneWayFace(direction=Direction.WEST),
    ">": OneWayFace(direction=Direction.EAST),
    "x": BlockingFace(),
    "S": OneWayTurnLeftFace(direction=Direction.SOUTH),
    "N": OneWayTurnLeftFace(direction=Direction.NORTH),
    "E": OneWayTurnLeftFace(direction=Direction.EAST),
    "W": OneWayTurnLeftFace(direction=Direction.WEST),
    "s": OneWayTurnRightFace(direction=Direction.SOUTH),
    "n": OneWayTurnRightFace(direction=Direction.NORTH),
    "e": OneWayTurnRightFace(direction=Direction.EAST),
    "w": OneWayTurnRightFace(direction=Direction.WEST),
}

CONTENT_TO_CHAR: dict[SquareContent, str] = {
    content: char for char, content in CHAR_TO_CONTENT.items()
}

_EMPTY_RUN_DIGITS = frozenset(str(n) for n in range(1, BOARD_WIDTH + 1))


def content_to_char(content: SquareContent) -> str:
    """Single character for ``content``; an empty square renders as a space."""
    return CONTENT_TO_CHAR.get(content, " ")


def board_from_fen(fen: str) -> Board:
    """Decode position text into a :class:`Board`.

    Raises:
        UnderfullLineError: a rank (or the text) ends before all files are set,
            or fewer than nine ranks are given.
        OverfullLineError: a rank describes more than seven squares.
        TooManyLinesError: more than nine ranks.
        InvalidCharError: a character outside the position alphabet.
    """
    board = Board()
    rank = BOARD_HEIGHT - 1
    file = 0

    for index, char in enumerate(fen):
        if char == RANK_SEPARATOR:
            if file != BOARD_WIDTH:
                raise UnderfullLineError(index)
            rank -= 1
            file = 0
            if rank < 0:
                raise TooManyLinesError(index)
        elif char in _EMPTY_RUN_DIGITS:
            file += int(char)
            if file > BOARD_WIDTH:
                raise OverfullLineError(index)
        elif char in CHAR_TO_CONTENT:
            if file >= BOARD_WIDTH:
                raise OverfullLineError(index)
            board.set_content(Coordinate(rank=rank, file=file), CHAR_TO_CONTENT[char])
            file += 1
        else:
            raise InvalidCharError(index, context={"char": char})

    if file != BOARD_WIDTH or rank != 0:
        raise UnderfullLineError(
            len(fen), message="Position text ends before the last rank is complete"
        )

    logger.debug("Decoded position %s", fen)
    return board


def board_to_fen(board: Board) -> str:
    """Encode ``board``; exact inverse of :func:`board_from_fen`."""
    ranks = []
    for row in reversed(board.rows()):
        encoded = []
        empty_run = 0
        for content in row:
            char = CONTENT_TO_CHAR.get(content)
            if char is None:
                empty_run += 1
                continue
            if empty_run:
                encoded.append(str(empty_run))
                empty_run = 0
            encoded.append(char)
        if empty_run:
            encoded.append(str(empty_run))
        ranks.append("".join(encoded))
    return RANK_SEPARATOR.join(ranks)
