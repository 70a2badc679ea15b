"""Line-based engine protocol (UBI).

A host drives the engine by writing one command per line and reading the
reply lines:

    ubi                              -> id name ... / ubiok
    isready                          -> readyok
    position startpos [moves ...]
    position fen <text> [moves ...]
    moves                            -> info string moves <n> / one move per line
    d                                -> board diagram and position text
    quit | exit

Rules errors are reported to the host as ``info string error ...`` and never
end the loop.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TextIO

from .config import EngineConfig
from .errors import BarragoonError
from .game import Game
from .notation.algebraic import move_to_algebraic, parse_move

logger = logging.getLogger(__name__)

__all__ = ["UbiHandler", "UbiState", "run_loop"]

UNKNOWN_COMMAND = "Unknown command"
MOVES_KEYWORD = "moves"


class UbiState(str, Enum):
    UNINITIALIZED = "uninitialized"
    WAITING_FOR_READY = "waiting_for_ready"
    READY = "ready"
    POSITION_SET = "position_set"


class UbiHandler:
    """Protocol state machine around a single :class:`Game`."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.state = UbiState.UNINITIALIZED
        self.game = Game.empty()
        self.finished = False

    def handle(self, line: str) -> list[str]:
        """Process one command line and return the reply lines."""
        args = line.split()
        if not args:
            return []

        command, rest = args[0], args[1:]
        if command == "ubi":
            return self.ubi()
        if command == "isready":
            return self.isready()
        if command == "position":
            return self.position(rest)
        if command == "moves":
            return self.moves()
        if command == "d":
            return self.display()
        if command in ("quit", "exit"):
            self.finished = True
            return []
        return [UNKNOWN_COMMAND]

    def ubi(self) -> list[str]:
        if self.state is not UbiState.UNINITIALIZED:
            return []
        self.state = UbiState.WAITING_FOR_READY
        return [
            f"id name {self.config.name} {self.config.version_string} "
            f"author {self.config.author}",
            "ubiok",
        ]

    def isready(self) -> list[str]:
        if self.state is UbiState.UNINITIALIZED:
            return []
        if self.state is UbiState.WAITING_FOR_READY:
            self.state = UbiState.READY
        return ["readyok"]

    def position(self, args: list[str]) -> list[str]:
        """Set up a position and replay the listed moves on it.

        The current position is replaced only if the whole command succeeds.
        """
        try:
            game = self._build_position(args)
        except BarragoonError as e:
            logger.warning("Rejected position command %s: %s", args, e)
            return [f"info string error {e}"]

        self.game = game
        self.state = UbiState.POSITION_SET
        return []

    def moves(self) -> list[str]:
        texts = sorted(move_to_algebraic(move) for move in self.game.valid_moves())
        return [f"info string moves {len(texts)}", *texts]

    def display(self) -> list[str]:
        return [*str(self.game).splitlines(), f"Fen: {self.game.as_fen()}"]

    def _build_position(self, args: list[str]) -> Game:
        if not args:
            raise BarragoonError("position needs 'startpos' or 'fen'", code="BAD_POSITION_COMMAND")

        mode, rest = args[0], args[1:]
        if MOVES_KEYWORD in rest:
            split = rest.index(MOVES_KEYWORD)
            position_args, move_texts = rest[:split], rest[split + 1:]
        else:
            position_args, move_texts = rest, []

        if mode == "startpos":
            game = Game.new()
        elif mode == "fen":
            game = Game.from_fen("".join(position_args))
        else:
            raise BarragoonError(
                f"Unknown position mode {mode!r}",
                code="BAD_POSITION_COMMAND",
            )

        for text in move_texts:
            mover = game.make_move(parse_move(text))
            game.current_player = mover.opponent
        return game


def run_loop(input: TextIO, output: TextIO, config: EngineConfig | None = None) -> None:
    """Serve commands from ``input`` until ``quit``/``exit`` or end of input."""
    handler = UbiHandler(config)
    for line in input:
        for reply in handler.handle(line):
            output.write(reply + "\n")
        output.flush()
        if handler.finished:
            break
