"""Tile movement generator.

Walks every stride of every tile owned by the player, cell by cell, and
decides at each cell whether the walk continues, ends in a move, or is
blocked.

Per origin square a set of already reached destinations is kept; a stride
whose destination is already covered is not walked at all, since a second
path to the same square can only reproduce a move that already exists.
"""

from __future__ import annotations

import logging
from typing import assert_never

from ...board import Board
from ...geometry import Coordinate
from ...models import (
    FACE_TYPES,
    Empty,
    Move,
    Player,
    StraightMove,
    Tile,
    TileCaptureMove,
)
from ..faces import can_be_captured_by, can_be_captured_from, can_be_traversed
from ..interfaces import Generator
from ..strides import Stride
from .capture import BarragoonRelocationExpander

logger = logging.getLogger(__name__)

__all__ = ["MovementGenerator"]


class MovementGenerator(Generator):
    """Generator for all tile moves: straight moves and both kinds of capture.

    - A tile may pass through empty squares and through barragoons whose face
      admits the way it enters and leaves.
    - Only the final cell of a full stride may hold something to capture: an
      opposing tile, or a barragoon the tile is allowed to take from the
      direction it arrives.
    - Anything else in the way blocks the stride.
    """

    def __init__(self, relocation: BarragoonRelocationExpander | None = None):
        self.relocation = relocation or BarragoonRelocationExpander()

    def generate(self, board: Board, player: Player) -> list[Move]:
        moves: list[Move] = []
        for square in board.squares():
            content = square.content
            if not isinstance(content, Tile) or content.player != player:
                continue
            moves.extend(self.generate_from(board, square.coordinate, content))
        return moves

    def generate_from(self, board: Board, origin: Coordinate, tile: Tile) -> list[Move]:
        """Moves of the single ``tile`` standing on ``origin``."""
        moves: list[Move] = []
        covered: set[Coordinate] = set()

        for stride in tile.tile_type.all_strides():
            destination = origin + stride.full_delta()
            if not board.contains_coordinate(destination):
                continue
            if destination in covered:
                continue

            reached = self._walk(board, origin, tile, stride, moves)
            if reached is not None:
                covered.add(reached)

        return moves

    def _walk(
        self,
        board: Board,
        origin: Coordinate,
        tile: Tile,
        stride: Stride,
        moves: list[Move],
    ) -> Coordinate | None:
        """Walk ``stride`` from ``origin``, appending the move it ends in.

        Returns the destination if the stride produced moves, else ``None``.
        """
        for step in stride.steps():
            coordinate = origin + step.position_delta
            if not board.contains_coordinate(coordinate):
                return None

            content = board.get_content(coordinate)

            if isinstance(content, Empty):
                if step.is_last:
                    moves.append(StraightMove(start=origin, stop=coordinate, tile=tile))
                    return coordinate
                continue

            if isinstance(content, Tile):
                if (
                    content.player == tile.player
                    or not step.is_last
                    or not stride.can_capture()
                ):
                    return None
                moves.append(
                    TileCaptureMove(start=origin, stop=coordinate, tile=tile, victim=content)
                )
                return coordinate

            if isinstance(content, FACE_TYPES):
                if step.leave_direction is not None:
                    if not can_be_traversed(
                        content, step.enter_direction, step.leave_direction
                    ):
                        return None
                    continue

                if not (
                    stride.can_capture()
                    and can_be_captured_by(content, tile.tile_type)
                    and can_be_captured_from(content, step.enter_direction)
                ):
                    return None
                moves.extend(
                    self.relocation.expand(board, origin, tile, coordinate, content)
                )
                logger.debug("%s on %s can capture %s on %s", tile, origin, content, coordinate)
                return coordinate

            assert_never(content)

        return None
