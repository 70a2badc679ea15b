"""Stride enumeration and step walks."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from barragoon.geometry import Direction
from barragoon.models import TileType
from barragoon.rules.strides import Stride, all_strides, full_strides, short_strides


class TestStrideCounts:
    @pytest.mark.parametrize(
        "tile_type,expected",
        [(TileType.TWO, 12), (TileType.THREE, 20), (TileType.FOUR, 28)],
    )
    def test_full_stride_count(self, tile_type, expected):
        assert len(tile_type.full_strides()) == expected

    @pytest.mark.parametrize(
        "tile_type,expected",
        [(TileType.TWO, 4), (TileType.THREE, 12), (TileType.FOUR, 20)],
    )
    def test_short_stride_count(self, tile_type, expected):
        assert len(short_strides(tile_type)) == expected

    @pytest.mark.parametrize("tile_type", list(TileType))
    def test_strides_are_pairwise_distinct(self, tile_type):
        strides = all_strides(tile_type)
        assert len(set(strides)) == len(strides)

    @pytest.mark.parametrize("tile_type", list(TileType))
    def test_full_strides_come_first(self, tile_type):
        strides = tile_type.all_strides()
        full = full_strides(tile_type)
        assert strides[: len(full)] == full
        assert all(not stride.can_capture() for stride in strides[len(full):])


class TestStrideShape:
    def test_straight_stride(self):
        stride = Stride.straight(Direction.NORTH, 3, is_full_stride=True)
        assert stride.bend_direction == Direction.NORTH
        assert stride.bend_length == 0
        assert stride.length == 3
        assert stride.can_capture()

    def test_bend_must_turn(self):
        with pytest.raises(ValueError):
            Stride.bend(Direction.NORTH, 1, Direction.SOUTH, 1, is_full_stride=True)
        with pytest.raises(ValueError):
            Stride.bend(Direction.NORTH, 1, Direction.NORTH, 1, is_full_stride=True)

    def test_bend_walk(self):
        stride = Stride.bend(Direction.NORTH, 1, Direction.EAST, 2, is_full_stride=True)
        steps = list(stride.steps())

        assert [step.enter_direction for step in steps] == [
            Direction.NORTH,
            Direction.EAST,
            Direction.EAST,
        ]
        assert [step.leave_direction for step in steps] == [
            Direction.EAST,
            Direction.EAST,
            None,
        ]
        assert [(s.position_delta.rank_delta, s.position_delta.file_delta) for s in steps] == [
            (1, 0),
            (1, 1),
            (1, 2),
        ]
        assert steps[-1].is_last
        assert not steps[0].is_last


stride_cases = st.sampled_from(list(TileType)).flatmap(
    lambda tile_type: st.tuples(st.just(tile_type), st.sampled_from(full_strides(tile_type)))
)


class TestStrideProperties:
    @given(stride_cases)
    def test_full_stride_steps_match_tile_length(self, case):
        tile_type, stride = case
        steps = list(stride.steps())
        assert len(steps) == tile_type.full_stride_length()

    @given(stride_cases)
    def test_walk_ends_on_full_delta(self, case):
        _, stride = case
        steps = list(stride.steps())
        assert steps[-1].position_delta == stride.full_delta()
        assert all(step.leave_direction is not None for step in steps[:-1])

    @given(stride_cases)
    def test_leave_direction_is_next_enter_direction(self, case):
        _, stride = case
        steps = list(stride.steps())
        for current, following in zip(steps, steps[1:]):
            assert current.leave_direction == following.enter_direction

    @given(stride_cases)
    def test_destination_is_stride_length_away(self, case):
        _, stride = case
        delta = stride.full_delta()
        assert abs(delta.rank_delta) + abs(delta.file_delta) == stride.length
