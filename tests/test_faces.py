"""Barragoon face rules: passage classification, traversal and capture."""

import pytest

from barragoon.geometry import Direction
from barragoon.models import (
    ALL_FACES,
    Alignment,
    BlockingFace,
    ForceTurnFace,
    OneWayFace,
    OneWayTurnLeftFace,
    OneWayTurnRightFace,
    StraightFace,
    TileType,
)
from barragoon.rules.faces import (
    Passage,
    can_be_captured_by,
    can_be_captured_from,
    can_be_traversed,
    classify_passage,
)

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


class TestClassifyPassage:
    @pytest.mark.parametrize(
        "enter,leave,expected",
        [
            (N, N, Passage.VERTICAL),
            (S, S, Passage.VERTICAL),
            (E, E, Passage.HORIZONTAL),
            (W, W, Passage.HORIZONTAL),
            (N, W, Passage.LEFT_TURN),
            (N, E, Passage.RIGHT_TURN),
            (E, N, Passage.LEFT_TURN),
            (S, W, Passage.RIGHT_TURN),
        ],
    )
    def test_passages(self, enter, leave, expected):
        assert classify_passage(enter, leave) == expected

    @pytest.mark.parametrize("direction", list(Direction))
    def test_reversal_is_not_a_passage(self, direction):
        assert classify_passage(direction, direction.reverse()) is None


class TestTraversal:
    @pytest.mark.parametrize("enter", list(Direction))
    @pytest.mark.parametrize("leave", list(Direction))
    def test_blocking_never_passes(self, enter, leave):
        assert not can_be_traversed(BlockingFace(), enter, leave)

    def test_force_turn_only_passes_on_turns(self):
        face = ForceTurnFace()
        assert can_be_traversed(face, N, E)
        assert can_be_traversed(face, N, W)
        assert not can_be_traversed(face, N, N)
        assert not can_be_traversed(face, N, S)

    def test_straight_face_follows_alignment(self):
        vertical = StraightFace(alignment=Alignment.VERTICAL)
        horizontal = StraightFace(alignment=Alignment.HORIZONTAL)

        assert can_be_traversed(vertical, N, N)
        assert can_be_traversed(vertical, S, S)
        assert not can_be_traversed(vertical, E, E)
        assert not can_be_traversed(vertical, N, E)

        assert can_be_traversed(horizontal, W, W)
        assert not can_be_traversed(horizontal, N, N)

    def test_one_way_passes_only_in_its_direction(self):
        face = OneWayFace(direction=N)
        assert can_be_traversed(face, N, N)
        assert not can_be_traversed(face, S, S)
        assert not can_be_traversed(face, N, E)

    def test_turn_left_face(self):
        face = OneWayTurnLeftFace(direction=S)
        assert can_be_traversed(face, W, S)
        # right turn into the same exit
        assert not can_be_traversed(face, E, S)
        assert not can_be_traversed(face, S, S)

    def test_turn_right_face(self):
        face = OneWayTurnRightFace(direction=N)
        assert can_be_traversed(face, W, N)
        assert not can_be_traversed(face, E, N)
        assert not can_be_traversed(face, W, S)


class TestCapture:
    @pytest.mark.parametrize("enter", list(Direction))
    def test_blocking_and_force_turn_capturable_from_anywhere(self, enter):
        assert can_be_captured_from(BlockingFace(), enter)
        assert can_be_captured_from(ForceTurnFace(), enter)

    def test_straight_face_captured_along_alignment(self):
        vertical = StraightFace(alignment=Alignment.VERTICAL)
        assert can_be_captured_from(vertical, N)
        assert can_be_captured_from(vertical, S)
        assert not can_be_captured_from(vertical, E)

    def test_one_way_captured_travelling_its_way(self):
        face = OneWayFace(direction=E)
        assert can_be_captured_from(face, E)
        assert not can_be_captured_from(face, W)
        assert not can_be_captured_from(face, N)

    @pytest.mark.parametrize(
        "face,enter",
        [
            (OneWayTurnLeftFace(direction=S), W),
            (OneWayTurnRightFace(direction=N), W),
            (OneWayTurnLeftFace(direction=N), E),
            (OneWayTurnRightFace(direction=S), E),
            (OneWayTurnLeftFace(direction=E), S),
            (OneWayTurnRightFace(direction=W), S),
            (OneWayTurnLeftFace(direction=W), N),
            (OneWayTurnRightFace(direction=E), N),
        ],
    )
    def test_turn_faces_captured_from_single_direction(self, face, enter):
        capturing = [d for d in Direction if can_be_captured_from(face, d)]
        assert capturing == [enter]

    @pytest.mark.parametrize(
        "face",
        [f for f in ALL_FACES if isinstance(f, (OneWayTurnLeftFace, OneWayTurnRightFace))],
    )
    def test_turn_face_capture_direction_is_its_entry(self, face):
        (enter,) = [d for d in Direction if can_be_captured_from(face, d)]
        assert any(can_be_traversed(face, enter, leave) for leave in Direction)

    def test_two_cannot_capture_force_turn(self):
        assert not can_be_captured_by(ForceTurnFace(), TileType.TWO)
        assert can_be_captured_by(ForceTurnFace(), TileType.THREE)
        assert can_be_captured_by(ForceTurnFace(), TileType.FOUR)

    @pytest.mark.parametrize("face", [f for f in ALL_FACES if not isinstance(f, ForceTurnFace)])
    def test_two_captures_every_other_face(self, face):
        assert can_be_captured_by(face, TileType.TWO)


def test_sixteen_distinct_faces():
    assert len(ALL_FACES) == 16
    assert len(set(ALL_FACES)) == 16
