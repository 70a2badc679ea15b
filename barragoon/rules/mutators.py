"""Board mutation for already validated moves.

Applying a move only relocates and writes square contents; legality is the
caller's concern (see :meth:`barragoon.game.Game.make_move`).
"""

from __future__ import annotations

from typing import assert_never

from ..board import Board
from ..models import (
    EMPTY,
    BarragoonCaptureMove,
    BarragoonPlacementMove,
    Move,
    StraightMove,
    TileCaptureMove,
)

__all__ = ["apply_move"]


def apply_move(board: Board, move: Move) -> None:
    """Write the effect of ``move`` onto ``board``.

    Straight moves and captures move the tile from ``start`` to ``stop``,
    overwriting whatever was captured there. A barragoon capture then writes
    the new face onto ``target``; when ``target`` is ``stop`` the face
    overwrites the tile that just arrived there.
    """
    if isinstance(move, (StraightMove, TileCaptureMove)):
        board.set_content(move.stop, move.tile)
        board.set_content(move.start, EMPTY)
    elif isinstance(move, BarragoonCaptureMove):
        board.set_content(move.stop, move.tile)
        board.set_content(move.start, EMPTY)
        board.set_content(move.target, move.new_face)
    elif isinstance(move, BarragoonPlacementMove):
        board.set_content(move.target, move.new_face)
    else:
        assert_never(move)
