"""
Port: ExpressionCompiler
Odpowiedzialność: kompilacja wyrażeń arytmetycznych do listy instrukcji
z jednoczesnym (zachłannym) obliczaniem wartości tymczasowych.
"""
from typing import Protocol, runtime_checkable

from contracts import ArithmeticResult


@runtime_checkable
class ExpressionCompiler(Protocol):
    def compile(self, text: str) -> ArithmeticResult:
        """
        Compiles an arithmetic expression ('+ - * /', parentheses, literals).

        Returns ArithmeticResult with:
          - instructions: LOAD/ADD/SUB/MUL/DIV in emission order
          - environment: temp-name -> value, each name bound exactly once
          - result_name / value: the temp holding the final answer

        Never raises for bad input; the first syntax or semantic fault is
        encoded in result.error and the partial instruction list is kept
        for inspection.
        """
        ...
