#!/usr/bin/env python3
"""
tracecomp.py — CLI narzędzie TraceComp.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem TRACE_COMP_
lub plik .env (np. TRACE_COMP_TRACE_FLOAT_FORMAT=.4f).

Podkomendy:
    arith  — skompiluj wyrażenie arytmetyczne i pokaż instrukcje + ślad
    poly   — postać kanoniczna wielomianu i ewaluacja w punkcie x
    menu   — interaktywny wybór trybu (1 = wielomian, 2 = wyrażenie)

Użycie:
    python tracecomp.py arith --text "2 + 3 * 4"
    python tracecomp.py poly --text "3x^2 + 2x + 1" --x 2
    echo "(1 + 2) / 3" | python tracecomp.py arith
    python tracecomp.py menu
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.expression_compiler import RecursiveDescentCompiler
from adapters.polynomial import PolynomialParser
from adapters.trace_printer import (
    arithmetic_trace_lines,
    polynomial_trace_lines,
    print_trace,
)
from config import Settings
from contracts import ArithmeticResult, CompileFailure, CompilerMode, PolynomialResult


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _fmt(value: Any, settings: Settings) -> str:
    return format(value, settings.trace_float_format)


def _print_instructions_table(result: ArithmeticResult, settings: Settings, title: str) -> None:
    table = Table(title=f"{title} [{len(result.instructions)}]", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Op", no_wrap=True, style="bold cyan")
    table.add_column("Operand 1")
    table.add_column("Operand 2")
    table.add_column("Result", no_wrap=True)
    table.add_column("Value", justify="right")
    for i, instr in enumerate(result.instructions, 1):
        table.add_row(
            str(i),
            instr.op.value,
            instr.operand1,
            instr.operand2 or "",
            instr.result,
            _fmt(result.environment[instr.result], settings),
        )
    _console().print(table)


def _print_failure(error: CompileFailure) -> None:
    print(f"Error [{error.kind.value}/{error.code.value}]: {error.message}", file=sys.stderr)


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Error: provide input via --text or stdin", file=sys.stderr)
        sys.exit(1)
    return text


# -- podkomendy ------------------------------------------------------------

def _report_arithmetic(result: ArithmeticResult, settings: Settings) -> None:
    if not result.ok:
        _print_failure(result.error)
        if settings.show_partial_trace and result.instructions:
            _print_instructions_table(result, settings, "Partial instructions (not committed)")
        sys.exit(1)

    _print_instructions_table(result, settings, "Generated Instructions")
    print_trace(
        arithmetic_trace_lines(result, settings.trace_float_format),
        result.value,
        settings.trace_float_format,
    )
    print(f"Result: {result.result_name} = {_fmt(result.value, settings)}")


def _report_polynomial(result: PolynomialResult, settings: Settings) -> None:
    if not result.ok:
        _print_failure(result.error)
        sys.exit(1)

    print(f"Canonical form: {result.canonical}")
    print_trace(
        polynomial_trace_lines(result, settings.trace_float_format),
        result.value,
        settings.trace_float_format,
    )
    print(f"Result: {_fmt(result.value, settings)}")


def _arith(args: argparse.Namespace, settings: Settings) -> None:
    text = _read_text(args)
    _report_arithmetic(RecursiveDescentCompiler().compile(text), settings)


def _poly(args: argparse.Namespace, settings: Settings) -> None:
    text = _read_text(args)
    _report_polynomial(PolynomialParser().evaluate(text, args.x), settings)


def _menu(args: argparse.Namespace, settings: Settings) -> None:
    choice = input("Enter '1' for polynomial evaluation or '2' for arithmetic expressions: ").strip()

    if choice == CompilerMode.POLYNOMIAL.value:
        text = input("Enter polynomial (e.g. 3x^2 + 2x + 1): ")
        raw_x = input("Enter value of x: ").strip()
        try:
            x = float(raw_x)
        except ValueError:
            print(f"Error: invalid value of x: {raw_x!r}", file=sys.stderr)
            sys.exit(1)
        _report_polynomial(PolynomialParser().evaluate(text, x), settings)
    elif choice == CompilerMode.ARITHMETIC.value:
        text = input("Enter an arithmetic expression: ")
        _report_arithmetic(RecursiveDescentCompiler().compile(text), settings)
    else:
        print("Invalid choice")


# -- main ------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="tracecomp",
        description="TraceComp — kompilacja wyrażeń i wielomianów krok po kroku",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # arith
    p = sub.add_parser("arith", help="Skompiluj wyrażenie arytmetyczne")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")

    # poly
    p = sub.add_parser("poly", help="Oblicz wielomian w punkcie x")
    p.add_argument("--text", "-t", help="Wielomian (lub stdin)")
    p.add_argument("--x", "-x", type=float, required=True, help="Wartość zmiennej x")

    # menu
    sub.add_parser("menu", help="Interaktywny wybór trybu (1/2)")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    cmds = {
        "arith": _arith,
        "poly":  _poly,
        "menu":  _menu,
    }
    cmds[args.command](args, settings)


if __name__ == "__main__":
    main()
