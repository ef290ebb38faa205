"""
Adapter: PolynomialParser
Implementuje port PolynomialEvaluator.

Pipeline:
  split_terms -> parse_term (każdy wyraz) -> odrzucenie zer
  -> combine_terms -> {polynomial_string, evaluate}

Ślad ewaluacji: stała -> [LOAD], x^n -> [POW] + [MUL]. Suma wkładów jest
liczona zwykłym dodawaniem i raportowana raz na końcu; w śladzie nie ma
kroków ADD (inaczej niż w kompilatorze wyrażeń).
"""
from __future__ import annotations

import logging
import math

from adapters.polynomial.canonical import combine_terms, format_number, polynomial_string
from adapters.polynomial.terms import parse_term, split_terms
from contracts import (
    CanonicalPolynomial,
    ErrorCode,
    OpCode,
    PolynomialResult,
    Term,
    TraceStep,
)
from errors import CompileError, raise_for

logger = logging.getLogger("trace_comp.polynomial")


def evaluate_terms(terms: list[Term], x: float) -> tuple[list[TraceStep], float]:
    """Zwraca (kroki śladu, suma). Temp numerowane po kolei od temp0."""
    steps: list[TraceStep] = []
    total = 0.0
    temp = 0

    for term in terms:
        coefficient = format_number(term.coefficient)
        if term.exponent == 0:
            steps.append(TraceStep(
                op=OpCode.LOAD, operand1=coefficient,
                value=term.coefficient, result=f"temp{temp}",
            ))
            total += term.coefficient
            temp += 1
            continue

        try:
            power = math.pow(x, term.exponent)
        except OverflowError:
            raise_for(ErrorCode.NUMERIC_OVERFLOW, fragment=f"x^{term.exponent}")
        product = term.coefficient * power
        if not (math.isfinite(power) and math.isfinite(product)):
            raise_for(ErrorCode.NUMERIC_OVERFLOW, fragment=f"{coefficient}x^{term.exponent}")

        steps.append(TraceStep(
            op=OpCode.POW, operand1="x", operand2=str(term.exponent),
            value=power, result=f"temp{temp}",
        ))
        steps.append(TraceStep(
            op=OpCode.MUL, operand1=coefficient, operand2=f"temp{temp}",
            value=product, result=f"temp{temp + 1}",
        ))
        total += product
        temp += 2

    if not math.isfinite(total):
        raise_for(ErrorCode.NUMERIC_OVERFLOW, fragment="sum")
    return steps, total


class PolynomialParser:
    """Wielomian jednej zmiennej x: postać kanoniczna + ewaluacja ze śladem."""

    # -- PolynomialEvaluator protocol ----------------------------------------

    def parse(self, text: str) -> CanonicalPolynomial:
        source = text.strip()
        if not source:
            raise_for(ErrorCode.EMPTY_INPUT)

        parsed = [parse_term(t) for t in split_terms(source)]
        nonzero = [t for t in parsed if t is not None and t.coefficient != 0]
        terms = combine_terms(nonzero)
        logger.debug("Canonical terms for %r: %s", source, terms)
        return CanonicalPolynomial(terms=terms, source=source)

    def canonicalize(self, text: str) -> PolynomialResult:
        try:
            polynomial = self.parse(text)
        except CompileError as exc:
            return self._failure(text, exc)
        return PolynomialResult(
            source=polynomial.source,
            polynomial=polynomial,
            canonical=polynomial_string(polynomial.terms),
        )

    def evaluate(self, text: str, x: float) -> PolynomialResult:
        try:
            if not math.isfinite(x):
                raise_for(ErrorCode.INVALID_EVALUATION_POINT, fragment=str(x))
            polynomial = self.parse(text)
            steps, value = evaluate_terms(polynomial.terms, x)
        except CompileError as exc:
            return self._failure(text, exc, x=x)
        return PolynomialResult(
            source=polynomial.source,
            polynomial=polynomial,
            canonical=polynomial_string(polynomial.terms),
            x=x,
            steps=steps,
            value=value,
        )

    # -- Prywatne -----------------------------------------------------------

    def _failure(self, text: str, exc: CompileError, x: float | None = None) -> PolynomialResult:
        logger.info("Polynomial parse failed [%s]: %s", exc.code.value, exc.message)
        return PolynomialResult(source=text.strip(), x=x, error=exc.to_failure())


def evaluate_polynomial(text: str, x: float) -> PolynomialResult:
    """Oblicza wielomian w x: postać kanoniczna, kroki, wynik albo błąd."""
    return PolynomialParser().evaluate(text, x)
