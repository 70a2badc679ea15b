"""
Pydantic models for Barragoon positions and moves.

Barrier faces, square contents and moves are closed unions discriminated on
their ``kind`` field. Every model is frozen, so values hash and compare by
all of their fields and can be collected into sets.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .geometry import Coordinate, Direction

if TYPE_CHECKING:
    from .rules.strides import Stride

__all__ = [
    "ALL_FACES",
    "EMPTY",
    "FACE_TYPES",
    "Alignment",
    "BarragoonCaptureMove",
    "BarragoonFace",
    "BarragoonPlacementMove",
    "BlockingFace",
    "Empty",
    "ForceTurnFace",
    "Move",
    "OneWayFace",
    "OneWayTurnLeftFace",
    "OneWayTurnRightFace",
    "Player",
    "SquareContent",
    "StraightFace",
    "StraightMove",
    "Tile",
    "TileCaptureMove",
    "TileType",
]


class Player(str, Enum):
    """Player enumeration"""
    LIGHT = "light"
    DARK = "dark"

    @property
    def opponent(self) -> Player:
        return Player.DARK if self is Player.LIGHT else Player.LIGHT


class TileType(str, Enum):
    """Tile size; the number is how far a full stride reaches."""
    TWO = "two"
    THREE = "three"
    FOUR = "four"

    def full_stride_length(self) -> int:
        return _FULL_STRIDE_LENGTHS[self]

    def short_stride_length(self) -> int:
        return _FULL_STRIDE_LENGTHS[self] - 1

    def full_strides(self) -> tuple[Stride, ...]:
        from .rules.strides import full_strides
        return full_strides(self)

    def short_strides(self) -> tuple[Stride, ...]:
        from .rules.strides import short_strides
        return short_strides(self)

    def all_strides(self) -> tuple[Stride, ...]:
        from .rules.strides import all_strides
        return all_strides(self)


_FULL_STRIDE_LENGTHS: dict[TileType, int] = {
    TileType.TWO: 2,
    TileType.THREE: 3,
    TileType.FOUR: 4,
}


class Alignment(str, Enum):
    """Axis of a straight barragoon face"""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Barragoon faces
# ---------------------------------------------------------------------------


class BlockingFace(_Frozen):
    """Cannot be passed in any way; capturable from everywhere."""
    kind: Literal["blocking"] = "blocking"


class StraightFace(_Frozen):
    """May only be passed straight along its alignment."""
    kind: Literal["straight"] = "straight"
    alignment: Alignment


class OneWayFace(_Frozen):
    """May only be passed straight while travelling in ``direction``."""
    kind: Literal["one_way"] = "one_way"
    direction: Direction


class OneWayTurnLeftFace(_Frozen):
    """Forces a left turn that leaves towards ``direction``."""
    kind: Literal["one_way_turn_left"] = "one_way_turn_left"
    direction: Direction


class OneWayTurnRightFace(_Frozen):
    """Forces a right turn that leaves towards ``direction``."""
    kind: Literal["one_way_turn_right"] = "one_way_turn_right"
    direction: Direction


class ForceTurnFace(_Frozen):
    """May be passed by turning either way, never straight."""
    kind: Literal["force_turn"] = "force_turn"


BarragoonFace = Annotated[
    Union[
        BlockingFace,
        StraightFace,
        OneWayFace,
        OneWayTurnLeftFace,
        OneWayTurnRightFace,
        ForceTurnFace,
    ],
    Field(discriminator="kind"),
]

FACE_TYPES = (
    BlockingFace,
    StraightFace,
    OneWayFace,
    OneWayTurnLeftFace,
    OneWayTurnRightFace,
    ForceTurnFace,
)

_CARDINALS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)

ALL_FACES: tuple[BarragoonFace, ...] = (
    BlockingFace(),
    StraightFace(alignment=Alignment.HORIZONTAL),
    StraightFace(alignment=Alignment.VERTICAL),
    *(OneWayFace(direction=d) for d in _CARDINALS),
    *(OneWayTurnLeftFace(direction=d) for d in _CARDINALS),
    *(OneWayTurnRightFace(direction=d) for d in _CARDINALS),
    ForceTurnFace(),
)


# ---------------------------------------------------------------------------
# Square contents
# ---------------------------------------------------------------------------


class Empty(_Frozen):
    kind: Literal["empty"] = "empty"


class Tile(_Frozen):
    """A movable tile owned by a player"""
    kind: Literal["tile"] = "tile"
    tile_type: TileType
    player: Player


EMPTY = Empty()

SquareContent = Annotated[
    Union[
        Empty,
        Tile,
        BlockingFace,
        StraightFace,
        OneWayFace,
        OneWayTurnLeftFace,
        OneWayTurnRightFace,
        ForceTurnFace,
    ],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Moves
# ---------------------------------------------------------------------------


class _MoveBase(_Frozen):
    def __str__(self) -> str:
        from .notation.algebraic import move_to_algebraic
        return move_to_algebraic(self)


class StraightMove(_MoveBase):
    """A tile travels to an empty square."""
    kind: Literal["straight"] = "straight"
    start: Coordinate
    stop: Coordinate
    tile: Tile


class TileCaptureMove(_MoveBase):
    """A tile ends its full stride on an opposing tile and removes it."""
    kind: Literal["tile_capture"] = "tile_capture"
    start: Coordinate
    stop: Coordinate
    tile: Tile
    victim: Tile


class BarragoonCaptureMove(_MoveBase):
    """A tile captures a barragoon and places ``new_face`` on ``target``.

    ``target`` is any square that is empty before the move, or ``stop``
    itself, in which case the new face replaces the capturing tile.
    """
    kind: Literal["barragoon_capture"] = "barragoon_capture"
    start: Coordinate
    stop: Coordinate
    tile: Tile
    victim: BarragoonFace
    target: Coordinate
    new_face: BarragoonFace


class BarragoonPlacementMove(_MoveBase):
    """Bare placement of a face; only ever the effect of a capture."""
    kind: Literal["barragoon_placement"] = "barragoon_placement"
    target: Coordinate
    new_face: BarragoonFace


Move = Annotated[
    Union[
        StraightMove,
        TileCaptureMove,
        BarragoonCaptureMove,
        BarragoonPlacementMove,
    ],
    Field(discriminator="kind"),
]
