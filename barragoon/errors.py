"""
Barragoon error hierarchy.

Two families of failure exist: text that cannot be read (position text or
move text, both pointing at the offending character) and moves that can be
read but are not legal. Everything derives from BarragoonError, which is the
only exception the protocol loop catches.

Usage:
    from barragoon.errors import BarragoonError

    try:
        game.make_move(parse_move(text))
    except BarragoonError as e:
        reply(f"info string error {e}")
"""

from typing import Any

__all__ = [
    "BarragoonError",
    "IllegalMoveError",
    "InvalidCharError",
    "MoveNotationError",
    "OverfullLineError",
    "PositionError",
    "TooManyLinesError",
    "UnderfullLineError",
]


class BarragoonError(Exception):
    """Base exception for all Barragoon errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        char_index: Offending character for text errors, else None
        context: Extra key/value details
    """
    code: str = "BARRAGOON_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
        char_index: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.char_index = char_index
        self.context = context or {}

    def location(self) -> str:
        """``" at char N"`` for text errors, empty otherwise."""
        return "" if self.char_index is None else f" at char {self.char_index}"

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}{self.location()}"
        if self.context:
            details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.context.items()))
            text += f" ({details})"
        return text

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.char_index is not None:
            data["char_index"] = self.char_index
        if self.context:
            data["context"] = dict(self.context)
        return data


# =============================================================================
# Position Text Errors
# =============================================================================


class PositionError(BarragoonError):
    """Position text could not be decoded at ``char_index``."""
    code: str = "POSITION_ERROR"
    default_message: str = "Invalid position text"

    def __init__(
        self,
        char_index: int,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            message or self.default_message,
            context=context,
            char_index=char_index,
        )


class UnderfullLineError(PositionError):
    """A rank ended before covering all files."""
    code: str = "UNDERFULL_LINE"
    default_message: str = "Rank does not fill the board width"


class OverfullLineError(PositionError):
    """A rank describes more squares than the board is wide."""
    code: str = "OVERFULL_LINE"
    default_message: str = "Rank exceeds the board width"


class TooManyLinesError(PositionError):
    """More ranks than the board has."""
    code: str = "TOO_MANY_LINES"
    default_message: str = "Too many ranks"


class InvalidCharError(PositionError):
    """A character outside the position alphabet."""
    code: str = "INVALID_CHAR"
    default_message: str = "Invalid character"


# =============================================================================
# Move Errors
# =============================================================================


class MoveNotationError(BarragoonError):
    """Text that does not spell a move; ``char_index`` is the first unread char."""
    code: str = "MOVE_NOTATION"

    def __init__(
        self,
        message: str,
        char_index: int,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context, char_index=char_index)


class IllegalMoveError(BarragoonError):
    """Move that is not legal in the current position.

    Raised by :meth:`barragoon.game.Game.make_move` when the move is not a
    member of the freshly generated legal move set. The position is left
    untouched.
    """
    code: str = "ILLEGAL_MOVE"

    def __init__(
        self,
        message: str,
        move: Any = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.move = move
        if move is not None:
            self.context["move"] = str(move)
