"""
Adapter: RecursiveDescentCompiler
Implementuje port ExpressionCompiler.

Gramatyka (bez minusa unarnego; '-' przed czynnikiem to błąd składni):
  expression = term (('+'|'-') term)*
  term       = factor (('*'|'/') factor)*
  factor     = '(' expression ')' | number
  number     = digit+ ('.' digit+)?

Każdy poziom jest od razu kompilowany: number emituje LOAD literal -> tempN,
operator binarny emituje ADD/SUB/MUL/DIV na już związanych tempach i od razu
liczy wartość do środowiska. Kompilator jest więc jednocześnie ewaluatorem.

Dzielenie sprawdza *obliczoną* wartość dzielnika, więc 1/(2-2) też jest
wykrywane.
"""
from __future__ import annotations

import logging
import math
import re
from typing import Optional

from adapters.expression_compiler.cursor import Cursor
from contracts import ArithmeticResult, ErrorCode, Instruction, OpCode
from errors import CompileError, ExprSyntaxError, raise_for

logger = logging.getLogger("trace_comp.expression_compiler")

_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_NUMBER_CHARS = "0123456789."
# Każdy poziom nawiasów to trzy ramki stosu (_factor -> _expression -> _term)
MAX_NESTING = 100

_ADDITIVE = {"+": OpCode.ADD, "-": OpCode.SUB}
_MULTIPLICATIVE = {"*": OpCode.MUL, "/": OpCode.DIV}

_OP_FUNCS = {
    OpCode.ADD: lambda a, b: a + b,
    OpCode.SUB: lambda a, b: a - b,
    OpCode.MUL: lambda a, b: a * b,
    OpCode.DIV: lambda a, b: a / b,
}


class _Emitter:
    """Licznik tempów + środowisko + lista instrukcji jednego wywołania."""

    def __init__(self) -> None:
        self.instructions: list[Instruction] = []
        self.environment: dict[str, float] = {}
        self._temp_count = 0

    def _new_temp(self) -> str:
        name = f"temp{self._temp_count}"
        self._temp_count += 1
        return name

    def _bind(self, name: str, value: float, origin: str) -> None:
        if name in self.environment:
            raise RuntimeError(f"Temp {name!r} is already bound")
        if not math.isfinite(value):
            raise_for(ErrorCode.NUMERIC_OVERFLOW, fragment=origin)
        self.environment[name] = value

    def load(self, literal: str) -> str:
        temp = self._new_temp()
        self._bind(temp, float(literal), literal)
        self.instructions.append(Instruction(op=OpCode.LOAD, operand1=literal, result=temp))
        logger.debug("LOAD %s -> %s", literal, temp)
        return temp

    def binary(self, op: OpCode, left: str, right: str) -> str:
        temp = self._new_temp()
        value = _OP_FUNCS[op](self.environment[left], self.environment[right])
        self._bind(temp, value, f"{left} {op.value} {right}")
        self.instructions.append(
            Instruction(op=op, operand1=left, operand2=right, result=temp)
        )
        logger.debug("%s %s %s -> %s = %r", op.value, left, right, temp, value)
        return temp


class _Compilation:
    """Stan jednej kompilacji: kursor + emiter. Nie współdzielony."""

    def __init__(self, text: str) -> None:
        self._text = text
        self.cursor = Cursor(text)
        self.emitter = _Emitter()
        self._depth = 0

    def parse(self) -> str:
        result = self._expression()
        self.cursor.skip_whitespace()
        if not self.cursor.at_end():
            raise_for(
                ErrorCode.TRAILING_CHARACTERS,
                fragment=self.cursor.rest(),
                position=self.cursor.position,
            )
        return result

    def _expression(self) -> str:
        left = self._term()
        while True:
            self.cursor.skip_whitespace()
            op = _ADDITIVE.get(self.cursor.peek())
            if op is None:
                return left
            self.cursor.advance()
            right = self._term()
            left = self.emitter.binary(op, left, right)

    def _term(self) -> str:
        left = self._factor()
        while True:
            self.cursor.skip_whitespace()
            op = _MULTIPLICATIVE.get(self.cursor.peek())
            if op is None:
                return left
            self.cursor.advance()
            self.cursor.skip_whitespace()
            start = self.cursor.position
            right = self._factor()
            if op is OpCode.DIV and self.emitter.environment[right] == 0:
                raise_for(
                    ErrorCode.DIVISION_BY_ZERO,
                    fragment=self._text[start:self.cursor.position].strip(),
                    position=start,
                )
            left = self.emitter.binary(op, left, right)

    def _factor(self) -> str:
        self.cursor.skip_whitespace()
        ch = self.cursor.peek()
        if ch == "(":
            if self._depth >= MAX_NESTING:
                raise_for(ErrorCode.NESTING_TOO_DEEP, position=self.cursor.position)
            self._depth += 1
            self.cursor.advance()
            result = self._expression()
            self.cursor.skip_whitespace()
            if self.cursor.peek() != ")":
                raise_for(ErrorCode.MISSING_CLOSING_PAREN, position=self.cursor.position)
            self.cursor.advance()
            self._depth -= 1
            return result
        if ch is not None and ch in _NUMBER_CHARS:
            return self._number()
        if ch is None:
            raise_for(
                ErrorCode.UNEXPECTED_CHARACTER,
                position=self.cursor.position,
                message="Unexpected end of input",
            )
        raise_for(ErrorCode.UNEXPECTED_CHARACTER, fragment=ch, position=self.cursor.position)

    def _number(self) -> str:
        start = self.cursor.position
        chars = []
        while self.cursor.peek() is not None and self.cursor.peek() in _NUMBER_CHARS:
            chars.append(self.cursor.peek())
            self.cursor.advance()
        literal = "".join(chars)
        if not _NUMBER_RE.fullmatch(literal):
            raise_for(ErrorCode.INVALID_NUMBER, fragment=literal, position=start)
        return self.emitter.load(literal)


class RecursiveDescentCompiler:
    """
    Kompilator wyrażeń arytmetycznych.
    Nigdy nie rzuca dla złego wejścia; błąd trafia do ArithmeticResult.error.
    """

    # -- ExpressionCompiler protocol ----------------------------------------

    def compile(self, text: str) -> ArithmeticResult:
        source = text.strip()
        compilation: Optional[_Compilation] = None
        try:
            if not source:
                raise_for(ErrorCode.EMPTY_INPUT)
            compilation = _Compilation(source)
            result_name = compilation.parse()
        except CompileError as exc:
            return self._failure(source, compilation, exc)
        except RecursionError:
            # Stos wyczerpany mimo MAX_NESTING (np. wywołanie z głębokiego kontekstu)
            return self._failure(source, compilation, ExprSyntaxError(ErrorCode.NESTING_TOO_DEEP))

        env = compilation.emitter.environment
        return ArithmeticResult(
            source=source,
            instructions=list(compilation.emitter.instructions),
            environment=dict(env),
            result_name=result_name,
            value=env[result_name],
        )

    # -- Prywatne -----------------------------------------------------------

    def _failure(
        self, source: str, compilation: Optional[_Compilation], exc: CompileError
    ) -> ArithmeticResult:
        logger.info("Arithmetic compile failed [%s]: %s", exc.code.value, exc.message)
        partial = compilation.emitter if compilation is not None else _Emitter()
        return ArithmeticResult(
            source=source,
            instructions=list(partial.instructions),
            environment=dict(partial.environment),
            error=exc.to_failure(),
        )


def compile_arithmetic(text: str) -> ArithmeticResult:
    """Kompiluje wyrażenie: instrukcje, środowisko, temp wyniku albo błąd."""
    return RecursiveDescentCompiler().compile(text)
