"""
Polynomial adapter package.

Public import:
    from adapters.polynomial import PolynomialParser, evaluate_polynomial
"""

from adapters.polynomial.canonical import combine_terms, polynomial_string
from adapters.polynomial.parser import PolynomialParser, evaluate_polynomial, evaluate_terms
from adapters.polynomial.terms import parse_term, split_terms

__all__ = [
    "PolynomialParser",
    "combine_terms",
    "evaluate_polynomial",
    "evaluate_terms",
    "parse_term",
    "polynomial_string",
    "split_terms",
]
