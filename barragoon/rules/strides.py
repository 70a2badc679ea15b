"""Stride and step model.

A stride is a travel pattern independent of board content: a straight line,
or an L that travels ``start_length`` cells one way and ``bend_length`` cells
after a single 90 degree turn. Walking a stride yields one :class:`Step` per
cell, each knowing the direction it was entered with and, unless it is the
last cell, the direction it will be left with.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from ..geometry import Direction, PositionDelta
from ..models import TileType

__all__ = [
    "Step",
    "Stride",
    "all_strides",
    "full_strides",
    "short_strides",
]


class Step(BaseModel):
    """One cell of a stride walk.

    ``position_delta`` is cumulative from the stride's origin square.
    ``leave_direction`` is ``None`` exactly on the final step.
    """
    model_config = ConfigDict(frozen=True)

    enter_direction: Direction
    leave_direction: Direction | None
    position_delta: PositionDelta

    @property
    def is_last(self) -> bool:
        return self.leave_direction is None


class Stride(BaseModel):
    """Straight or single-bend travel pattern."""
    model_config = ConfigDict(frozen=True)

    start_direction: Direction
    start_length: int
    bend_direction: Direction
    bend_length: int
    is_full_stride: bool

    @classmethod
    def straight(
        cls, direction: Direction, length: int, *, is_full_stride: bool
    ) -> Stride:
        return cls(
            start_direction=direction,
            start_length=length,
            bend_direction=direction,
            bend_length=0,
            is_full_stride=is_full_stride,
        )

    @classmethod
    def bend(
        cls,
        start_direction: Direction,
        start_length: int,
        bend_direction: Direction,
        bend_length: int,
        *,
        is_full_stride: bool,
    ) -> Stride:
        if bend_direction not in (
            start_direction.turn_left(),
            start_direction.turn_right(),
        ):
            raise ValueError(
                f"bend must turn 90 degrees: {start_direction} -> {bend_direction}"
            )
        return cls(
            start_direction=start_direction,
            start_length=start_length,
            bend_direction=bend_direction,
            bend_length=bend_length,
            is_full_stride=is_full_stride,
        )

    @property
    def length(self) -> int:
        return self.start_length + self.bend_length

    def can_capture(self) -> bool:
        return self.is_full_stride

    def full_delta(self) -> PositionDelta:
        """Net displacement of the whole stride, without walking it."""
        return (
            self.start_direction.as_delta() * self.start_length
            + self.bend_direction.as_delta() * self.bend_length
        )

    def steps(self) -> Iterator[Step]:
        directions = [self.start_direction] * self.start_length
        directions += [self.bend_direction] * self.bend_length

        position_delta = PositionDelta()
        for index, enter_direction in enumerate(directions):
            position_delta = position_delta + enter_direction.as_delta()
            is_last = index == len(directions) - 1
            yield Step(
                enter_direction=enter_direction,
                leave_direction=None if is_last else directions[index + 1],
                position_delta=position_delta,
            )


def _strides_of_length(length: int, *, is_full_stride: bool) -> tuple[Stride, ...]:
    strides: list[Stride] = []
    for start_direction in Direction:
        for bend_point in range(length):
            if bend_point == 0:
                strides.append(
                    Stride.straight(
                        start_direction, length, is_full_stride=is_full_stride
                    )
                )
                continue
            for bend_direction in (
                start_direction.turn_left(),
                start_direction.turn_right(),
            ):
                strides.append(
                    Stride.bend(
                        start_direction,
                        bend_point,
                        bend_direction,
                        length - bend_point,
                        is_full_stride=is_full_stride,
                    )
                )
    return tuple(strides)


@lru_cache(maxsize=None)
def full_strides(tile_type: TileType) -> tuple[Stride, ...]:
    """Capturing strides: 4 directions x (1 straight + 2 per bend point)."""
    return _strides_of_length(tile_type.full_stride_length(), is_full_stride=True)


@lru_cache(maxsize=None)
def short_strides(tile_type: TileType) -> tuple[Stride, ...]:
    """Non-capturing strides one cell shorter than the full ones."""
    return _strides_of_length(tile_type.short_stride_length(), is_full_stride=False)


def all_strides(tile_type: TileType) -> tuple[Stride, ...]:
    """Every stride the move generator walks, full strides first."""
    return full_strides(tile_type) + short_strides(tile_type)
