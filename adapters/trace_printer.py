"""
trace_printer.py — linie śladu [LOAD]/[ADD]/[SUB]/[MUL]/[DIV]/[POW].

Słownik tagów i kolejność kroków są częścią kontraktu; format liczb
jest konfigurowalny (Settings.trace_float_format).
"""
from __future__ import annotations

from contracts import ArithmeticResult, Instruction, OpCode, PolynomialResult, TraceStep

_BAR = "-" * 17

_SYMBOLS = {
    OpCode.ADD: "+",
    OpCode.SUB: "-",
    OpCode.MUL: "*",
    OpCode.DIV: "/",
}


def _tag(op: OpCode) -> str:
    return f"[{op.value}]"


def format_instruction(
    instr: Instruction,
    environment: dict[str, float],
    float_format: str = "g",
) -> str:
    if instr.op == OpCode.LOAD:
        return f"{_tag(instr.op)} {instr.operand1} -> {instr.result}"
    value = format(environment[instr.result], float_format)
    symbol = _SYMBOLS[instr.op]
    return (
        f"{_tag(instr.op)} {instr.operand1} {symbol} {instr.operand2} "
        f"= {value} -> {instr.result}"
    )


def format_listing(instr: Instruction) -> str:
    """Surowy listing: 'MUL temp1 temp2 -> temp3'."""
    operands = instr.operand1 if instr.operand2 is None else f"{instr.operand1} {instr.operand2}"
    return f"{instr.op.value} {operands} -> {instr.result}"


def format_step(step: TraceStep, float_format: str = "g") -> str:
    value = format(step.value, float_format)
    if step.op == OpCode.LOAD:
        return f"{_tag(step.op)} {step.operand1} -> {step.result}"
    if step.op == OpCode.POW:
        return f"{_tag(step.op)} {step.operand1}^{step.operand2} = {value} -> {step.result}"
    return f"{_tag(step.op)} {step.operand1} * {step.operand2} = {value} -> {step.result}"


def arithmetic_trace_lines(result: ArithmeticResult, float_format: str = "g") -> list[str]:
    return [
        format_instruction(instr, result.environment, float_format)
        for instr in result.instructions
    ]


def polynomial_trace_lines(result: PolynomialResult, float_format: str = "g") -> list[str]:
    return [format_step(step, float_format) for step in result.steps]


def print_trace(lines: list[str], final_value: float | None = None, float_format: str = "g") -> None:
    """Drukuje blok 'Computation Steps' na stdout."""
    print("\nComputation Steps:")
    print(_BAR)
    for line in lines:
        print(line)
    print(_BAR)
    if final_value is not None:
        print(f"Final result: {format(final_value, float_format)}\n")
