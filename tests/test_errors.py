import pytest

from contracts import ErrorCode, ErrorKind
from errors import (
    ERROR_KINDS,
    ERROR_MESSAGES,
    CompileError,
    ExprSemanticError,
    ExprSyntaxError,
    raise_for,
)


def test_raise_for_picks_subclass_by_kind():
    with pytest.raises(ExprSyntaxError):
        raise_for(ErrorCode.MISSING_CLOSING_PAREN)
    with pytest.raises(ExprSemanticError):
        raise_for(ErrorCode.DIVISION_BY_ZERO)


def test_message_carries_offending_fragment():
    err = CompileError(ErrorCode.INVALID_COEFFICIENT, fragment="2yx")

    assert err.message == "Invalid coefficient in term: '2yx'"
    assert str(err) == err.message


def test_message_without_fragment_drops_separator():
    err = CompileError(ErrorCode.UNEXPECTED_CHARACTER)

    assert err.message == "Invalid character in input"


def test_to_failure_is_tagged():
    failure = ExprSyntaxError(ErrorCode.TRAILING_CHARACTERS, fragment=")", position=5).to_failure()

    assert failure.kind == ErrorKind.SYNTAX
    assert failure.code == ErrorCode.TRAILING_CHARACTERS
    assert failure.fragment == ")"
    assert failure.position == 5


def test_every_code_has_kind_and_message():
    for code in ErrorCode:
        assert code in ERROR_KINDS
        assert code in ERROR_MESSAGES


def test_added_codes_are_tagged():
    assert ERROR_KINDS[ErrorCode.NESTING_TOO_DEEP] is ErrorKind.SYNTAX
    assert ERROR_KINDS[ErrorCode.INVALID_EVALUATION_POINT] is ErrorKind.SEMANTIC
