"""
Port: PolynomialEvaluator
Odpowiedzialność: postać kanoniczna wielomianu jednej zmiennej oraz
ewaluacja w punkcie z zapisem kroków (LOAD / POW / MUL).
"""
from typing import Protocol, runtime_checkable

from contracts import CanonicalPolynomial, PolynomialResult


@runtime_checkable
class PolynomialEvaluator(Protocol):
    def parse(self, text: str) -> CanonicalPolynomial:
        """
        Splits, parses and combines the polynomial into canonical form.
        Raises CompileError (ExprSyntaxError / ExprSemanticError) on bad input.
        """
        ...

    def canonicalize(self, text: str) -> PolynomialResult:
        """
        Like parse(), but never raises: returns PolynomialResult with
        polynomial + canonical string, or error set.
        """
        ...

    def evaluate(self, text: str, x: float) -> PolynomialResult:
        """
        Canonicalizes the polynomial and evaluates it at x.
        Returns PolynomialResult with:
          - canonical: rendered canonical form
          - steps: one LOAD per constant term, POW + MUL per x-term
          - value: plain sum of every term contribution (no ADD steps)
        Never raises for bad input; failures are encoded in result.error.
        """
        ...
