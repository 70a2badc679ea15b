"""Board-level helpers for the Barragoon engine.

The board is a fixed 9x7 grid of square contents, indexed ``[rank][file]``
with rank 0 at the bottom (Light's home rank). Every square always holds
exactly one content value; :data:`~barragoon.models.EMPTY` is the zero value.
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from .geometry import BOARD_HEIGHT, BOARD_WIDTH, Coordinate
from .models import EMPTY, Empty, SquareContent

__all__ = ["Board", "SquareView"]


class SquareView(NamedTuple):
    coordinate: Coordinate
    content: SquareContent


class Board:
    """Mutable grid of square contents.

    Contents are immutable values, so copying the grid rows is enough to get
    an independent board.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[SquareContent]] = [
            [EMPTY] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)
        ]

    @staticmethod
    def contains_coordinate(coordinate: Coordinate) -> bool:
        """Return True if ``coordinate`` names a square of the board."""
        return 0 <= coordinate.rank < BOARD_HEIGHT and 0 <= coordinate.file < BOARD_WIDTH

    def get_content(self, coordinate: Coordinate) -> SquareContent:
        self._check(coordinate)
        return self._grid[coordinate.rank][coordinate.file]

    def set_content(self, coordinate: Coordinate, content: SquareContent) -> None:
        self._check(coordinate)
        self._grid[coordinate.rank][coordinate.file] = content

    def move_content(self, start: Coordinate, stop: Coordinate) -> None:
        """Relocate whatever is on ``start`` to ``stop``, leaving ``start`` empty."""
        content = self.get_content(start)
        self.set_content(stop, content)
        self.set_content(start, EMPTY)

    def squares(self) -> Iterator[SquareView]:
        """Yield every square in row-major order, rank 0 first.

        Each call starts a fresh walk over the current contents.
        """
        for rank in range(BOARD_HEIGHT):
            row = self._grid[rank]
            for file in range(BOARD_WIDTH):
                yield SquareView(Coordinate(rank=rank, file=file), row[file])

    def empty_squares(self) -> Iterator[Coordinate]:
        for square in self.squares():
            if isinstance(square.content, Empty):
                yield square.coordinate

    def rows(self) -> list[tuple[SquareContent, ...]]:
        """Snapshot of the grid, rank 0 first."""
        return [tuple(row) for row in self._grid]

    def copy(self) -> Board:
        board = Board()
        board._grid = [list(row) for row in self._grid]
        return board

    def __iter__(self) -> Iterator[SquareView]:
        return self.squares()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # mutable

    def _check(self, coordinate: Coordinate) -> None:
        if not self.contains_coordinate(coordinate):
            raise IndexError(f"coordinate off board: {coordinate!r}")
