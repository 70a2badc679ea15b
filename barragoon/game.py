"""Barragoon position: board contents plus the player to move.

This is the engine's public surface. A :class:`Game` is constructed from
position text, reports its legal moves and changes only through
:meth:`Game.make_move`, which either applies a legal move completely or
rejects it before touching the board.

Turn order is left to the caller: ``make_move`` returns the player who just
moved, and hosts that alternate turns set ``current_player`` to that
player's opponent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .board import Board, SquareView
from .errors import IllegalMoveError
from .geometry import BOARD_WIDTH, FILE_NAMES, RANK_NAMES, Coordinate
from .metrics import MOVE_GENERATION_LATENCY, MOVES_APPLIED, MOVES_GENERATED
from .models import Move, Player, SquareContent
from .notation.fen import EMPTY_FEN, INITIAL_FEN, board_from_fen, board_to_fen, content_to_char
from .rules.generators import MovementGenerator
from .rules.mutators import apply_move

logger = logging.getLogger(__name__)

__all__ = ["Game"]

_generator = MovementGenerator()


class Game:
    """A mutable position.

    Attributes:
        board: The 9x7 grid of square contents
        current_player: Player whose tiles move next
    """

    def __init__(self, board: Board | None = None, current_player: Player = Player.LIGHT):
        self.board = board if board is not None else Board()
        self.current_player = current_player

    @classmethod
    def new(cls) -> Game:
        """The canonical start position, Light to move."""
        return cls.from_fen(INITIAL_FEN)

    @classmethod
    def empty(cls) -> Game:
        return cls.from_fen(EMPTY_FEN)

    @classmethod
    def from_fen(cls, fen: str) -> Game:
        """Build a position from its text; Light is always to move.

        Raises:
            PositionError: if ``fen`` is not valid position text.
        """
        return cls(board_from_fen(fen), Player.LIGHT)

    def as_fen(self) -> str:
        return board_to_fen(self.board)

    @staticmethod
    def contains_coordinate(coordinate: Coordinate) -> bool:
        return Board.contains_coordinate(coordinate)

    def get_content(self, coordinate: Coordinate) -> SquareContent:
        return self.board.get_content(coordinate)

    def set_content(self, coordinate: Coordinate, content: SquareContent) -> None:
        """Put ``content`` on a square directly, bypassing the rules.

        Meant for setting up positions; play goes through :meth:`make_move`.
        """
        self.board.set_content(coordinate, content)

    def squares(self) -> Iterator[SquareView]:
        return self.board.squares()

    def valid_moves(self) -> set[Move]:
        """Every legal move of ``current_player``.

        The set is recomputed on each call; it is empty when the player has
        no tiles or every tile is boxed in.
        """
        moves = self._generate_moves()

        per_kind: dict[str, int] = {}
        for move in moves:
            per_kind[move.kind] = per_kind.get(move.kind, 0) + 1
        for kind, count in per_kind.items():
            MOVES_GENERATED.labels(kind=kind).inc(count)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Generated %d moves for %s in %s %s",
                len(moves),
                self.current_player.value,
                self.as_fen(),
                per_kind,
            )
        return moves

    def _generate_moves(self) -> set[Move]:
        with MOVE_GENERATION_LATENCY.time():
            return set(_generator.generate(self.board, self.current_player))

    def make_move(self, move: Move) -> Player:
        """Apply ``move`` if it is legal in this position.

        Returns:
            The player who made the move. ``current_player`` is not changed.

        Raises:
            IllegalMoveError: if ``move`` is not among :meth:`valid_moves`;
                the position is left exactly as it was.
        """
        if move not in self._generate_moves():
            MOVES_APPLIED.labels(outcome="rejected").inc()
            logger.warning("Rejected move %s in %s", move, self.as_fen())
            raise IllegalMoveError(
                "Move is not legal in this position",
                move=move,
                context={"fen": self.as_fen()},
            )

        apply_move(self.board, move)
        MOVES_APPLIED.labels(outcome="applied").inc()
        return self.current_player

    def copy(self) -> Game:
        return Game(self.board.copy(), self.current_player)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self.board == other.board and self.current_player == other.current_player

    __hash__ = None

    def __repr__(self) -> str:
        return f"Game(fen={self.as_fen()!r}, current_player={self.current_player.value!r})"

    def __str__(self) -> str:
        """ASCII diagram with rank 9 at the top."""
        separator = "  " + "+---" * BOARD_WIDTH + "+"
        lines = [separator]
        for rank, row in reversed(list(enumerate(self.board.rows()))):
            cells = "".join(f"| {content_to_char(content)} " for content in row)
            lines.append(f"{RANK_NAMES[rank]} {cells}|")
            lines.append(separator)
        lines.append("  " + "".join(f"  {name} " for name in FILE_NAMES))
        return "\n".join(lines)
