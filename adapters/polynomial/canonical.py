"""
canonical.py — postać kanoniczna: łączenie wyrazów i renderowanie.

Postać kanoniczna: wykładniki unikalne, brak współczynników 0,
sortowanie malejąco po wykładniku.
"""
from __future__ import annotations

import math
from typing import Iterable

from contracts import ErrorCode, Term
from errors import raise_for


def combine_terms(terms: Iterable[Term]) -> list[Term]:
    """
    Sumuje współczynniki po wykładniku, odrzuca zera, sortuje malejąco.
    Suma skończonych współczynników może wyjść poza float: NUMERIC_OVERFLOW.
    """
    sums: dict[int, float] = {}
    for term in terms:
        sums[term.exponent] = sums.get(term.exponent, 0.0) + term.coefficient

    for exponent, coefficient in sums.items():
        if not math.isfinite(coefficient):
            raise_for(ErrorCode.NUMERIC_OVERFLOW, fragment=f"x^{exponent}")

    # Jawne sortowanie; kolejność dict nie jest tu kontraktem
    return [
        Term(coefficient=coefficient, exponent=exponent)
        for exponent, coefficient in sorted(sums.items(), key=lambda kv: kv[0], reverse=True)
        if coefficient != 0
    ]


def format_number(value: float) -> str:
    """3.0 -> "3", 2.5 -> "2.5"; repr zachowuje round-trip."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _render_body(term: Term) -> str:
    magnitude = abs(term.coefficient)
    if term.exponent == 0:
        return format_number(magnitude)
    body = "" if magnitude == 1 else format_number(magnitude)
    return body + ("x" if term.exponent == 1 else f"x^{term.exponent}")


def polynomial_string(terms: list[Term]) -> str:
    """Renderuje np. [(3,2),(-2,1),(1,0)] -> "3x^2 - 2x + 1"; pusta lista -> "0"."""
    if not terms:
        return "0"
    parts: list[str] = []
    for i, term in enumerate(terms):
        negative = term.coefficient < 0
        if i == 0:
            sign = "-" if negative else ""
        else:
            sign = " - " if negative else " + "
        parts.append(sign + _render_body(term))
    return "".join(parts)
