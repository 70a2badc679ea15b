"""Direction and coordinate arithmetic for the Barragoon board.

Ranks grow towards North and files grow towards East. Nothing in this module
checks board bounds; callers use :meth:`barragoon.board.Board.contains_coordinate`
before trusting a computed coordinate.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "FILE_NAMES",
    "RANK_NAMES",
    "Coordinate",
    "Direction",
    "PositionDelta",
]

BOARD_WIDTH = 7
BOARD_HEIGHT = 9

FILE_NAMES = "abcdefg"
RANK_NAMES = "123456789"


class Direction(str, Enum):
    """Compass direction of travel."""
    NORTH = "north"
    WEST = "west"
    SOUTH = "south"
    EAST = "east"

    def turn_left(self) -> Direction:
        return _LEFT_OF[self]

    def turn_right(self) -> Direction:
        return _RIGHT_OF[self]

    def reverse(self) -> Direction:
        return _LEFT_OF[_LEFT_OF[self]]

    def as_delta(self) -> PositionDelta:
        """Unit displacement for one step in this direction."""
        rank_delta, file_delta = _UNIT_STEPS[self]
        return PositionDelta(rank_delta=rank_delta, file_delta=file_delta)


_LEFT_OF: dict[Direction, Direction] = {
    Direction.NORTH: Direction.WEST,
    Direction.WEST: Direction.SOUTH,
    Direction.SOUTH: Direction.EAST,
    Direction.EAST: Direction.NORTH,
}

_RIGHT_OF: dict[Direction, Direction] = {
    after: before for before, after in _LEFT_OF.items()
}

_UNIT_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (-1, 0),
    Direction.WEST: (0, -1),
}


class PositionDelta(BaseModel):
    """Signed displacement in (rank, file) terms."""
    model_config = ConfigDict(frozen=True)

    rank_delta: int = 0
    file_delta: int = 0

    def __add__(self, other: PositionDelta) -> PositionDelta:
        if not isinstance(other, PositionDelta):
            return NotImplemented
        return PositionDelta(
            rank_delta=self.rank_delta + other.rank_delta,
            file_delta=self.file_delta + other.file_delta,
        )

    def __sub__(self, other: PositionDelta) -> PositionDelta:
        if not isinstance(other, PositionDelta):
            return NotImplemented
        return PositionDelta(
            rank_delta=self.rank_delta - other.rank_delta,
            file_delta=self.file_delta - other.file_delta,
        )

    def __mul__(self, factor: int) -> PositionDelta:
        if not isinstance(factor, int):
            return NotImplemented
        return PositionDelta(
            rank_delta=self.rank_delta * factor,
            file_delta=self.file_delta * factor,
        )

    __rmul__ = __mul__

    def __neg__(self) -> PositionDelta:
        return self * -1


class Coordinate(BaseModel):
    """A square of the board, addressed by rank index and file index.

    Arithmetic may produce coordinates with negative or oversized components;
    such coordinates are simply "off board" and never wrap around.
    """
    model_config = ConfigDict(frozen=True)

    rank: int
    file: int

    @classmethod
    def new(cls, rank: int, file: int) -> Coordinate:
        return cls(rank=rank, file=file)

    def __add__(self, delta: PositionDelta) -> Coordinate:
        if not isinstance(delta, PositionDelta):
            return NotImplemented
        return Coordinate(
            rank=self.rank + delta.rank_delta,
            file=self.file + delta.file_delta,
        )

    def __sub__(self, other):
        if isinstance(other, Coordinate):
            return PositionDelta(
                rank_delta=self.rank - other.rank,
                file_delta=self.file - other.file,
            )
        if isinstance(other, PositionDelta):
            return self + (-other)
        return NotImplemented

    def __str__(self) -> str:
        """Algebraic name such as ``c2``."""
        if 0 <= self.file < BOARD_WIDTH and 0 <= self.rank < BOARD_HEIGHT:
            return f"{FILE_NAMES[self.file]}{RANK_NAMES[self.rank]}"
        return f"({self.rank},{self.file})"
