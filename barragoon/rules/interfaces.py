"""Interfaces shared by the rules layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..board import Board
    from ..models import Move, Player


class Generator(ABC):
    """Enumerates candidate moves for one player on a board.

    Generators never mutate the board and may return the same move more than
    once; callers collect the result into a set.
    """

    @abstractmethod
    def generate(self, board: Board, player: Player) -> list[Move]:
        ...
