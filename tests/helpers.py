"""Shared builders for engine tests."""

from __future__ import annotations

from prometheus_client import REGISTRY

from barragoon.geometry import Coordinate
from barragoon.models import Player, Tile, TileType


def at(rank: int, file: int) -> Coordinate:
    return Coordinate(rank=rank, file=file)


def light(tile_type: TileType) -> Tile:
    return Tile(tile_type=tile_type, player=Player.LIGHT)


def dark(tile_type: TileType) -> Tile:
    return Tile(tile_type=tile_type, player=Player.DARK)


def sample_value(name: str, labels: dict[str, str]) -> float:
    """Current value of a registered metric sample, 0.0 if never observed."""
    value = REGISTRY.get_sample_value(name, labels)
    return float(value) if value is not None else 0.0
