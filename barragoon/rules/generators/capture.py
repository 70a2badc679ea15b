"""Barragoon capture relocation.

Capturing a barragoon is only complete once a replacement face has been put
down. The replacement may go on every square that is empty before the move,
and on the captured barragoon's own square, so a single capture expands into
``targets x 16`` distinct moves.

Effects are applied in order (tile moves, then the face is written), so a
replacement put on the captured square lands on the capturing tile and
removes it from the board.
"""

from __future__ import annotations

from ...board import Board
from ...geometry import Coordinate
from ...models import (
    ALL_FACES,
    BarragoonCaptureMove,
    BarragoonFace,
    Empty,
    Move,
    Tile,
)

__all__ = ["BarragoonRelocationExpander"]


class BarragoonRelocationExpander:
    """Turns one legal barragoon capture into all of its placements."""

    def expand(
        self,
        board: Board,
        start: Coordinate,
        tile: Tile,
        stop: Coordinate,
        victim: BarragoonFace,
    ) -> list[Move]:
        """Return every capture of ``victim`` on ``stop`` by ``tile`` from ``start``.

        Args:
            board: Board before the capture
            start: Square the capturing tile leaves
            tile: The capturing tile
            stop: Square of the captured barragoon
            victim: The captured face

        Returns:
            One :class:`BarragoonCaptureMove` per (target square, new face).
        """
        return [
            BarragoonCaptureMove(
                start=start,
                stop=stop,
                tile=tile,
                victim=victim,
                target=target,
                new_face=new_face,
            )
            for target in self.placement_targets(board, stop)
            for new_face in ALL_FACES
        ]

    @staticmethod
    def placement_targets(board: Board, stop: Coordinate) -> list[Coordinate]:
        """Currently empty squares plus the captured barragoon's square."""
        return [
            square.coordinate
            for square in board.squares()
            if isinstance(square.content, Empty) or square.coordinate == stop
        ]
