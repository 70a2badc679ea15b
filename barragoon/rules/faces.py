"""Barragoon face rules: traversal, capture direction and capturing tile size.

All three checks are pure functions of a face and directions of travel. A tile
entering a square travelling ``enter_direction`` and leaving it travelling
``leave_direction`` either passes straight through (both equal) or turns 90
degrees; a reversal is never a legal way through a square.
"""

from __future__ import annotations

from enum import Enum
from typing import assert_never

from ..geometry import Direction
from ..models import (
    Alignment,
    BarragoonFace,
    BlockingFace,
    ForceTurnFace,
    OneWayFace,
    OneWayTurnLeftFace,
    OneWayTurnRightFace,
    StraightFace,
    TileType,
)

__all__ = [
    "Passage",
    "can_be_captured_by",
    "can_be_captured_from",
    "can_be_traversed",
    "classify_passage",
]

_HORIZONTAL = frozenset({Direction.EAST, Direction.WEST})
_VERTICAL = frozenset({Direction.NORTH, Direction.SOUTH})


class Passage(Enum):
    """How a tile passes through a square."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    LEFT_TURN = "left_turn"
    RIGHT_TURN = "right_turn"


def classify_passage(
    enter_direction: Direction, leave_direction: Direction
) -> Passage | None:
    """Return the single passage kind of the pair, or ``None`` if there is none."""
    matches = []
    if enter_direction == leave_direction and enter_direction in _HORIZONTAL:
        matches.append(Passage.HORIZONTAL)
    if enter_direction == leave_direction and enter_direction in _VERTICAL:
        matches.append(Passage.VERTICAL)
    if leave_direction == enter_direction.turn_left():
        matches.append(Passage.LEFT_TURN)
    if leave_direction == enter_direction.turn_right():
        matches.append(Passage.RIGHT_TURN)

    if len(matches) != 1:
        return None
    return matches[0]


# A one-way turn can only be taken on from the direction of travel that it
# would deflect into its exit.
_TURN_FACE_CAPTURE_DIRECTION: dict[tuple[type, Direction], Direction] = {
    (OneWayTurnLeftFace, Direction.SOUTH): Direction.WEST,
    (OneWayTurnRightFace, Direction.NORTH): Direction.WEST,
    (OneWayTurnLeftFace, Direction.NORTH): Direction.EAST,
    (OneWayTurnRightFace, Direction.SOUTH): Direction.EAST,
    (OneWayTurnLeftFace, Direction.EAST): Direction.SOUTH,
    (OneWayTurnRightFace, Direction.WEST): Direction.SOUTH,
    (OneWayTurnLeftFace, Direction.WEST): Direction.NORTH,
    (OneWayTurnRightFace, Direction.EAST): Direction.NORTH,
}


def can_be_captured_from(face: BarragoonFace, enter_direction: Direction) -> bool:
    """Whether a tile arriving travelling ``enter_direction`` may capture ``face``."""
    if isinstance(face, (BlockingFace, ForceTurnFace)):
        return True
    if isinstance(face, StraightFace):
        if face.alignment == Alignment.VERTICAL:
            return enter_direction in _VERTICAL
        return enter_direction in _HORIZONTAL
    if isinstance(face, OneWayFace):
        return face.direction == enter_direction
    if isinstance(face, (OneWayTurnLeftFace, OneWayTurnRightFace)):
        return _TURN_FACE_CAPTURE_DIRECTION[type(face), face.direction] == enter_direction
    assert_never(face)


def can_be_captured_by(face: BarragoonFace, tile_type: TileType) -> bool:
    """The smallest tile cannot capture a force-turn face; all else goes."""
    return tile_type != TileType.TWO or not isinstance(face, ForceTurnFace)


def can_be_traversed(
    face: BarragoonFace,
    enter_direction: Direction,
    leave_direction: Direction,
) -> bool:
    """Whether a tile may pass through ``face`` without stopping on it."""
    passage = classify_passage(enter_direction, leave_direction)
    if passage is None:
        return False

    is_turn = passage in (Passage.LEFT_TURN, Passage.RIGHT_TURN)

    if isinstance(face, BlockingFace):
        return False
    if isinstance(face, ForceTurnFace):
        return is_turn
    if isinstance(face, StraightFace):
        if face.alignment == Alignment.VERTICAL:
            return passage == Passage.VERTICAL
        return passage == Passage.HORIZONTAL
    if isinstance(face, OneWayFace):
        return not is_turn and enter_direction == face.direction
    if isinstance(face, OneWayTurnLeftFace):
        return passage == Passage.LEFT_TURN and leave_direction == face.direction
    if isinstance(face, OneWayTurnRightFace):
        return passage == Passage.RIGHT_TURN and leave_direction == face.direction
    assert_never(face)
