"""Error hierarchy shape."""

import pytest

from barragoon.errors import (
    BarragoonError,
    IllegalMoveError,
    InvalidCharError,
    MoveNotationError,
    OverfullLineError,
    PositionError,
    TooManyLinesError,
    UnderfullLineError,
)


class TestBarragoonError:
    def test_str_without_context(self):
        assert str(BarragoonError("boom")) == "[BARRAGOON_ERROR] boom"

    def test_str_with_context(self):
        error = BarragoonError("boom", code="CUSTOM", context={"b": 2, "a": "x"})
        assert str(error) == "[CUSTOM] boom (a='x', b=2)"

    def test_str_folds_in_char_index(self):
        error = OverfullLineError(3, context={"char": "4"})
        assert str(error) == "[OVERFULL_LINE] Rank exceeds the board width at char 3 (char='4')"
        assert error.location() == " at char 3"

    def test_location_empty_without_index(self):
        assert BarragoonError("boom").location() == ""

    def test_to_dict(self):
        error = OverfullLineError(3)
        assert error.to_dict() == {
            "code": "OVERFULL_LINE",
            "message": "Rank exceeds the board width",
            "char_index": 3,
        }

    def test_to_dict_without_index(self):
        error = BarragoonError("boom", context={"a": 1})
        assert error.to_dict() == {
            "code": "BARRAGOON_ERROR",
            "message": "boom",
            "context": {"a": 1},
        }


class TestPositionErrors:
    @pytest.mark.parametrize(
        "error_class,code",
        [
            (UnderfullLineError, "UNDERFULL_LINE"),
            (OverfullLineError, "OVERFULL_LINE"),
            (TooManyLinesError, "TOO_MANY_LINES"),
            (InvalidCharError, "INVALID_CHAR"),
        ],
    )
    def test_subclasses(self, error_class, code):
        error = error_class(7)
        assert isinstance(error, PositionError)
        assert isinstance(error, BarragoonError)
        assert error.code == code
        assert error.char_index == 7

    def test_custom_message(self):
        error = UnderfullLineError(0, message="too short")
        assert error.message == "too short"


class TestMoveErrors:
    def test_notation_error_carries_index(self):
        error = MoveNotationError("bad", char_index=2, context={"text": "Zq"})
        assert error.char_index == 2
        assert error.context == {"text": "Zq"}
        assert str(error) == "[MOVE_NOTATION] bad at char 2 (text='Zq')"

    def test_illegal_move_without_move(self):
        error = IllegalMoveError("nope")
        assert error.move is None
        assert "move" not in error.context
