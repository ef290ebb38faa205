"""
errors.py — hierarchia wyjątków kompilatorów.

Wyjątki żyją tylko wewnątrz komponentu. Publiczne punkty wejścia
(compile_arithmetic, evaluate_polynomial) zamieniają je na CompileFailure
przez to_failure(), więc wywołujący sprawdzają result.error.
"""
from __future__ import annotations

from typing import NoReturn, Optional

from contracts import CompileFailure, ErrorCode, ErrorKind


# Kod błędu → rodzaj (składniowy / semantyczny)
ERROR_KINDS: dict[ErrorCode, ErrorKind] = {
    ErrorCode.UNEXPECTED_CHARACTER: ErrorKind.SYNTAX,
    ErrorCode.MISSING_CLOSING_PAREN: ErrorKind.SYNTAX,
    ErrorCode.TRAILING_CHARACTERS: ErrorKind.SYNTAX,
    ErrorCode.INVALID_NUMBER: ErrorKind.SYNTAX,
    ErrorCode.INVALID_EXPONENT: ErrorKind.SYNTAX,
    ErrorCode.NESTING_TOO_DEEP: ErrorKind.SYNTAX,
    ErrorCode.DIVISION_BY_ZERO: ErrorKind.SEMANTIC,
    ErrorCode.INVALID_CONSTANT: ErrorKind.SEMANTIC,
    ErrorCode.INVALID_COEFFICIENT: ErrorKind.SEMANTIC,
    ErrorCode.EMPTY_INPUT: ErrorKind.SEMANTIC,
    ErrorCode.NUMERIC_OVERFLOW: ErrorKind.SEMANTIC,
    ErrorCode.INVALID_EVALUATION_POINT: ErrorKind.SEMANTIC,
}


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNEXPECTED_CHARACTER: "Invalid character in input: ",      # + znak
    ErrorCode.MISSING_CLOSING_PAREN: "Missing closing parenthesis",
    ErrorCode.TRAILING_CHARACTERS: "Unexpected characters at the end of input: ",  # + reszta
    ErrorCode.INVALID_NUMBER: "Malformed number: ",                    # + literał
    ErrorCode.INVALID_EXPONENT: "Invalid exponent in term: ",          # + wyraz
    ErrorCode.NESTING_TOO_DEEP: "Parentheses nested too deeply",
    ErrorCode.DIVISION_BY_ZERO: "Division by zero",
    ErrorCode.INVALID_CONSTANT: "Invalid constant: ",                  # + wyraz
    ErrorCode.INVALID_COEFFICIENT: "Invalid coefficient in term: ",    # + wyraz
    ErrorCode.EMPTY_INPUT: "Empty input",
    ErrorCode.NUMERIC_OVERFLOW: "Numeric overflow: ",                  # + operacja
    ErrorCode.INVALID_EVALUATION_POINT: "x must be a finite number: ",  # + x
}


class CompileError(Exception):
    """Bazowy błąd kompilacji / parsowania."""

    def __init__(
        self,
        code: ErrorCode,
        fragment: Optional[str] = None,
        position: Optional[int] = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = ERROR_MESSAGES[code]
            if message.endswith(": "):
                message = f"{message}{fragment!r}" if fragment is not None else message[:-2]
        super().__init__(message)
        self.message = message
        self.code = code
        self.fragment = fragment
        self.position = position

    @property
    def kind(self) -> ErrorKind:
        return ERROR_KINDS[self.code]

    def to_failure(self) -> CompileFailure:
        return CompileFailure(
            kind=self.kind,
            code=self.code,
            message=self.message,
            fragment=self.fragment,
            position=self.position,
        )


class ExprSyntaxError(CompileError):
    pass


class ExprSemanticError(CompileError):
    pass


def raise_for(
    code: ErrorCode,
    fragment: Optional[str] = None,
    position: Optional[int] = None,
    message: Optional[str] = None,
) -> NoReturn:
    """Rzuca podklasę zgodną z rodzajem kodu."""
    cls = ExprSyntaxError if ERROR_KINDS[code] is ErrorKind.SYNTAX else ExprSemanticError
    raise cls(code, fragment=fragment, position=position, message=message)
