"""Direction, delta and coordinate arithmetic."""

import pytest

from barragoon.board import Board
from barragoon.geometry import Coordinate, Direction, PositionDelta
from tests.helpers import at


class TestDirection:
    def test_left_of_north_is_west(self):
        assert Direction.NORTH.turn_left() == Direction.WEST
        assert Direction.NORTH.turn_right() == Direction.EAST

    @pytest.mark.parametrize("direction", list(Direction))
    def test_turns_are_inverse(self, direction):
        assert direction.turn_left().turn_right() == direction
        assert direction.turn_right().turn_left() == direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_four_left_turns_return_home(self, direction):
        turned = direction
        for _ in range(4):
            turned = turned.turn_left()
        assert turned == direction

    @pytest.mark.parametrize("direction", list(Direction))
    def test_reverse_cancels_delta(self, direction):
        assert direction.as_delta() + direction.reverse().as_delta() == PositionDelta()

    def test_unit_deltas(self):
        assert Direction.NORTH.as_delta() == PositionDelta(rank_delta=1)
        assert Direction.EAST.as_delta() == PositionDelta(file_delta=1)
        assert Direction.SOUTH.as_delta() == PositionDelta(rank_delta=-1)
        assert Direction.WEST.as_delta() == PositionDelta(file_delta=-1)


class TestPositionDelta:
    def test_scaling(self):
        delta = PositionDelta(rank_delta=1, file_delta=-2)
        assert delta * 3 == PositionDelta(rank_delta=3, file_delta=-6)
        assert 3 * delta == delta * 3

    def test_negation_and_subtraction(self):
        delta = PositionDelta(rank_delta=2, file_delta=1)
        assert -delta == PositionDelta(rank_delta=-2, file_delta=-1)
        assert delta - delta == PositionDelta()


class TestCoordinate:
    def test_add_delta(self):
        assert at(4, 3) + Direction.NORTH.as_delta() * 2 == at(6, 3)

    def test_difference_is_delta(self):
        assert at(6, 4) - at(4, 3) == PositionDelta(rank_delta=2, file_delta=1)
        assert at(6, 4) - PositionDelta(rank_delta=2, file_delta=1) == at(4, 3)

    def test_algebraic_name(self):
        assert str(Coordinate.new(1, 2)) == "c2"
        assert str(at(0, 0)) == "a1"
        assert str(at(8, 6)) == "g9"

    def test_off_board_coordinates_do_not_wrap(self):
        coordinate = at(0, 0) + Direction.WEST.as_delta()
        assert coordinate == at(0, -1)
        assert not Board.contains_coordinate(coordinate)
        assert str(coordinate) == "(0,-1)"

    def test_coordinates_are_hashable_values(self):
        assert len({at(1, 1), Coordinate.new(1, 1), at(1, 2)}) == 2


class TestBoardBounds:
    @pytest.mark.parametrize(
        "rank,file,expected",
        [
            (0, 0, True),
            (8, 6, True),
            (9, 0, False),
            (0, 7, False),
            (-1, 3, False),
            (4, -1, False),
        ],
    )
    def test_contains_coordinate(self, rank, file, expected):
        assert Board.contains_coordinate(at(rank, file)) is expected

    def test_access_off_board_raises(self):
        board = Board()
        with pytest.raises(IndexError):
            board.get_content(at(9, 0))
