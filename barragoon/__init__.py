"""Barragoon rules engine.

Board representation, legal move generation and move application for the
two-player abstract game Barragoon, plus a line-based engine protocol.
"""

__version__ = "0.1.0"

from barragoon.errors import (  # noqa: E402
    BarragoonError,
    IllegalMoveError,
    InvalidCharError,
    MoveNotationError,
    OverfullLineError,
    PositionError,
    TooManyLinesError,
    UnderfullLineError,
)
from barragoon.game import Game  # noqa: E402
from barragoon.geometry import Coordinate, Direction, PositionDelta  # noqa: E402
from barragoon.models import (  # noqa: E402
    ALL_FACES,
    EMPTY,
    Alignment,
    BarragoonCaptureMove,
    BarragoonFace,
    BarragoonPlacementMove,
    BlockingFace,
    Empty,
    ForceTurnFace,
    Move,
    OneWayFace,
    OneWayTurnLeftFace,
    OneWayTurnRightFace,
    Player,
    SquareContent,
    StraightFace,
    StraightMove,
    Tile,
    TileCaptureMove,
    TileType,
)

__all__ = [
    "ALL_FACES",
    "EMPTY",
    "Alignment",
    "BarragoonCaptureMove",
    "BarragoonError",
    "BarragoonFace",
    "BarragoonPlacementMove",
    "BlockingFace",
    "Coordinate",
    "Direction",
    "Empty",
    "ForceTurnFace",
    "Game",
    "IllegalMoveError",
    "InvalidCharError",
    "Move",
    "MoveNotationError",
    "OneWayFace",
    "OneWayTurnLeftFace",
    "OneWayTurnRightFace",
    "OverfullLineError",
    "Player",
    "PositionDelta",
    "PositionError",
    "SquareContent",
    "StraightFace",
    "StraightMove",
    "Tile",
    "TileCaptureMove",
    "TileType",
    "TooManyLinesError",
    "UnderfullLineError",
    "__version__",
]
