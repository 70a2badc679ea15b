"""Algebraic notation for squares and moves.

Squares are written ``<file a-g><rank 1-9>``. Moves are written as

- ``Zc2c4``           straight move (tile, origin, destination)
- ``Dd2xzd5``         tile capture (``x`` then victim tile and square)
- ``Zd5oxd3!+d5``     barragoon capture (``o`` then captured face and
                      square, ``!`` then the new face and where it goes)
- ``!+d5``            bare placement
"""

from __future__ import annotations

from typing import NoReturn, assert_never

from ..errors import MoveNotationError
from ..geometry import FILE_NAMES, RANK_NAMES, Coordinate
from ..models import (
    FACE_TYPES,
    BarragoonCaptureMove,
    BarragoonFace,
    BarragoonPlacementMove,
    Move,
    StraightMove,
    Tile,
    TileCaptureMove,
)
from .fen import CHAR_TO_CONTENT, content_to_char

__all__ = [
    "coordinate_to_algebraic",
    "move_to_algebraic",
    "parse_coordinate",
    "parse_move",
]

TILE_CAPTURE_MARK = "x"
BARRAGOON_CAPTURE_MARK = "o"
PLACEMENT_MARK = "!"


def coordinate_to_algebraic(coordinate: Coordinate) -> str:
    return str(coordinate)


def parse_coordinate(text: str) -> Coordinate:
    """Inverse of :func:`coordinate_to_algebraic`."""
    reader = _MoveReader(text)
    coordinate = reader.coordinate()
    reader.finish()
    return coordinate


def move_to_algebraic(move: Move) -> str:
    if isinstance(move, StraightMove):
        return (
            f"{content_to_char(move.tile)}"
            f"{coordinate_to_algebraic(move.start)}"
            f"{coordinate_to_algebraic(move.stop)}"
        )
    if isinstance(move, TileCaptureMove):
        return (
            f"{content_to_char(move.tile)}"
            f"{coordinate_to_algebraic(move.start)}"
            f"{TILE_CAPTURE_MARK}{content_to_char(move.victim)}"
            f"{coordinate_to_algebraic(move.stop)}"
        )
    if isinstance(move, BarragoonCaptureMove):
        return (
            f"{content_to_char(move.tile)}"
            f"{coordinate_to_algebraic(move.start)}"
            f"{BARRAGOON_CAPTURE_MARK}{content_to_char(move.victim)}"
            f"{coordinate_to_algebraic(move.stop)}"
            f"{PLACEMENT_MARK}{content_to_char(move.new_face)}"
            f"{coordinate_to_algebraic(move.target)}"
        )
    if isinstance(move, BarragoonPlacementMove):
        return (
            f"{PLACEMENT_MARK}{content_to_char(move.new_face)}"
            f"{coordinate_to_algebraic(move.target)}"
        )
    assert_never(move)


def parse_move(text: str) -> Move:
    """Read a move written by :func:`move_to_algebraic`.

    The result is only a value; whether it is legal is for the game to decide.

    Raises:
        MoveNotationError: if ``text`` does not spell a move.
    """
    reader = _MoveReader(text.strip())

    if reader.peek() == PLACEMENT_MARK:
        reader.advance()
        new_face = reader.face()
        target = reader.coordinate()
        reader.finish()
        return BarragoonPlacementMove(target=target, new_face=new_face)

    tile = reader.tile()
    start = reader.coordinate()

    mark = reader.peek()
    if mark == TILE_CAPTURE_MARK:
        reader.advance()
        victim = reader.tile()
        stop = reader.coordinate()
        reader.finish()
        return TileCaptureMove(start=start, stop=stop, tile=tile, victim=victim)

    if mark == BARRAGOON_CAPTURE_MARK:
        reader.advance()
        captured = reader.face()
        stop = reader.coordinate()
        reader.expect(PLACEMENT_MARK)
        new_face = reader.face()
        target = reader.coordinate()
        reader.finish()
        return BarragoonCaptureMove(
            start=start,
            stop=stop,
            tile=tile,
            victim=captured,
            target=target,
            new_face=new_face,
        )

    stop = reader.coordinate()
    reader.finish()
    return StraightMove(start=start, stop=stop, tile=tile)


class _MoveReader:
    """Cursor over move text that reports the index of the first bad char."""

    def __init__(self, text: str):
        self.text = text
        self.index = 0

    def peek(self) -> str | None:
        if self.index < len(self.text):
            return self.text[self.index]
        return None

    def advance(self) -> str:
        char = self.peek()
        if char is None:
            self.fail("Move text ends early")
        self.index += 1
        return char

    def expect(self, char: str) -> None:
        if self.peek() != char:
            self.fail(f"Expected {char!r}")
        self.index += 1

    def tile(self) -> Tile:
        content = CHAR_TO_CONTENT.get(self.peek() or "")
        if not isinstance(content, Tile):
            self.fail("Expected a tile character")
        self.index += 1
        return content

    def face(self) -> BarragoonFace:
        content = CHAR_TO_CONTENT.get(self.peek() or "")
        if not isinstance(content, FACE_TYPES):
            self.fail("Expected a barragoon face character")
        self.index += 1
        return content

    def coordinate(self) -> Coordinate:
        file_char = self.peek()
        if file_char is None or file_char not in FILE_NAMES:
            self.fail("Expected a file letter a-g")
        self.index += 1
        rank_char = self.peek()
        if rank_char is None or rank_char not in RANK_NAMES:
            self.fail("Expected a rank digit 1-9")
        self.index += 1
        return Coordinate(rank=RANK_NAMES.index(rank_char), file=FILE_NAMES.index(file_char))

    def finish(self) -> None:
        if self.index != len(self.text):
            self.fail("Unexpected trailing characters")

    def fail(self, message: str) -> NoReturn:
        raise MoveNotationError(
            message,
            char_index=self.index,
            context={"text": self.text},
        )
