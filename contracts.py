"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w TraceComp.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tryby kompilatora ───────────────────────────

class CompilerMode(str, Enum):
    POLYNOMIAL = "1"   # numer w menu
    ARITHMETIC = "2"


# ─────────────────────────── Instrukcje ──────────────────────────────────

class OpCode(str, Enum):
    LOAD = "LOAD"
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    POW = "POW"   # tylko w śladzie wielomianu


class Instruction(BaseModel):
    """Jedna skompilowana operacja: op operand1 [operand2] -> result."""
    op: Literal[OpCode.LOAD, OpCode.ADD, OpCode.SUB, OpCode.MUL, OpCode.DIV]
    operand1: str                    # nazwa temp albo literał
    operand2: Optional[str] = None   # brak dla LOAD
    result: str                      # nazwa temp (tempN)

    model_config = {"frozen": True}


class TraceStep(BaseModel):
    """Krok śladu ewaluacji wielomianu (LOAD / POW / MUL)."""
    op: Literal[OpCode.LOAD, OpCode.POW, OpCode.MUL]
    operand1: str
    operand2: Optional[str] = None
    value: float
    result: str

    model_config = {"frozen": True}


# ─────────────────────────── Wielomiany ──────────────────────────────────

class Term(BaseModel):
    coefficient: float = Field(allow_inf_nan=False)
    exponent: int = Field(ge=0)

    model_config = {"frozen": True}


class CanonicalPolynomial(BaseModel):
    """Posortowane malejąco po wykładniku, bez zer, wykładniki unikalne."""
    terms: list[Term] = Field(default_factory=list)
    source: str = ""   # tylko do diagnostyki / echo

    @field_validator("terms")
    @classmethod
    def _check_canonical(cls, v: list[Term]) -> list[Term]:
        exponents = [t.exponent for t in v]
        if any(a <= b for a, b in zip(exponents, exponents[1:])):
            raise ValueError("terms must be sorted by strictly descending exponent")
        if any(t.coefficient == 0 for t in v):
            raise ValueError("canonical terms cannot have a zero coefficient")
        return v


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorKind(str, Enum):
    SYNTAX = "syntax"
    SEMANTIC = "semantic"


class ErrorCode(str, Enum):
    # składniowe
    UNEXPECTED_CHARACTER = "UNEXPECTED_CHARACTER"
    MISSING_CLOSING_PAREN = "MISSING_CLOSING_PAREN"
    TRAILING_CHARACTERS = "TRAILING_CHARACTERS"
    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_EXPONENT = "INVALID_EXPONENT"
    NESTING_TOO_DEEP = "NESTING_TOO_DEEP"
    # semantyczne
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INVALID_CONSTANT = "INVALID_CONSTANT"
    INVALID_COEFFICIENT = "INVALID_COEFFICIENT"
    EMPTY_INPUT = "EMPTY_INPUT"
    NUMERIC_OVERFLOW = "NUMERIC_OVERFLOW"
    INVALID_EVALUATION_POINT = "INVALID_EVALUATION_POINT"


class CompileFailure(BaseModel):
    """Otagowany błąd zwracany przez punkty wejścia zamiast wyjątku."""
    kind: ErrorKind
    code: ErrorCode
    message: str
    fragment: Optional[str] = None   # fragment wejścia, który spowodował błąd
    position: Optional[int] = None


# ─────────────────────────── Wyniki ──────────────────────────────────────

class ArithmeticResult(BaseModel):
    source: str
    instructions: list[Instruction] = Field(default_factory=list)
    environment: dict[str, float] = Field(default_factory=dict)
    result_name: Optional[str] = None
    value: Optional[float] = None
    # Przy błędzie instructions/environment to częściowy, niezatwierdzony ślad
    error: Optional[CompileFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PolynomialResult(BaseModel):
    source: str
    polynomial: Optional[CanonicalPolynomial] = None
    canonical: Optional[str] = None
    x: Optional[float] = None
    steps: list[TraceStep] = Field(default_factory=list)
    value: Optional[float] = None
    error: Optional[CompileFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None
