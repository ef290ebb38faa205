"""
terms.py — podział wielomianu na jednomiany i parsowanie pojedynczego wyrazu.

split_terms("-3x^2+5x-2") -> ["-3x^2", "+5x", "-2"]
parse_term("-3x^2")       -> Term(coefficient=-3.0, exponent=2)
"""
from __future__ import annotations

import math
import re
from typing import Optional

from contracts import ErrorCode, Term
from errors import raise_for

# Znak poprzedzony przez te znaki nie zaczyna nowego wyrazu (x^-…, 1e-7)
_SIGN_GLUE = ("^", "e", "E")

_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_EXPONENT_RE = re.compile(r"\+?[0-9]+")
# Biały znak znika tylko za znakiem wyrazu i wokół 'x' / '^';
# spacja między cyframi ("1 2") zostaje i psuje walidację liczby
_SIGN_SPACE_RE = re.compile(r"^([+-])\s+")
_SYMBOL_SPACE_RE = re.compile(r"\s*([x^])\s*")


def _last_significant(chars: list[str]) -> Optional[str]:
    for ch in reversed(chars):
        if not ch.isspace():
            return ch
    return None


def split_terms(text: str) -> list[str]:
    """
    Dzieli wielomian na wyrazy ze znakiem. Nowy wyraz zaczyna się od '+'/'-',
    chyba że znak stoi zaraz po '^' albo 'e'/'E' (biały znak pomiędzy
    się nie liczy). Znak na samym początku należy do pierwszego wyrazu.
    Pozostałe znaki przechodzą bez interpretacji; walidacja jest w parse_term.
    """
    terms: list[str] = []
    buf: list[str] = []
    for ch in text:
        if ch in "+-":
            last = _last_significant(buf)
            if last is not None and last not in _SIGN_GLUE:
                terms.append("".join(buf))
                buf = []
        buf.append(ch)
    if buf:
        terms.append("".join(buf))
    return [t.strip() for t in terms if t.strip()]


def _parse_float(literal: str, code: ErrorCode, term: str) -> float:
    if not _FLOAT_RE.fullmatch(literal):
        raise_for(code, fragment=term)
    value = float(literal)
    if not math.isfinite(value):
        raise_for(ErrorCode.NUMERIC_OVERFLOW, fragment=term)
    return value


def _parse_exponent(digits: str, term: str) -> int:
    try:
        return int(digits)
    except ValueError:
        # limit długości int <-> str w CPythonie
        raise_for(ErrorCode.INVALID_EXPONENT, fragment=term)


def parse_term(term: str) -> Optional[Term]:
    """
    Parsuje jeden jednomian. Pusty wyraz -> None (wyraz zerowy, pomijany).
      "x"      -> (1, 1)
      "7"      -> (7, 0)
      "-x^3"   -> (-1, 3)
      "+2.5x"  -> (2.5, 1)
      "x^+2"   -> (1, 2)
    Spacja wolno tylko za znakiem i wokół 'x' / '^'; "1 2" to błąd.
    """
    compact = _SYMBOL_SPACE_RE.sub(r"\1", _SIGN_SPACE_RE.sub(r"\1", term.strip()))
    if not compact:
        return None
    if compact == "x":
        return Term(coefficient=1.0, exponent=1)

    x_pos = compact.find("x")
    if x_pos == -1:
        return Term(
            coefficient=_parse_float(compact, ErrorCode.INVALID_CONSTANT, compact),
            exponent=0,
        )

    coeff_str = compact[:x_pos]
    if coeff_str in ("", "+"):
        coefficient = 1.0
    elif coeff_str == "-":
        coefficient = -1.0
    else:
        coefficient = _parse_float(coeff_str, ErrorCode.INVALID_COEFFICIENT, compact)

    tail = compact[x_pos + 1:]
    if not tail:
        exponent = 1
    elif tail.startswith("^") and _EXPONENT_RE.fullmatch(tail[1:]):
        exponent = _parse_exponent(tail[1:], compact)
    else:
        raise_for(ErrorCode.INVALID_EXPONENT, fragment=compact)

    return Term(coefficient=coefficient, exponent=exponent)
