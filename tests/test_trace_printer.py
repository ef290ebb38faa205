from adapters.expression_compiler import compile_arithmetic
from adapters.polynomial import evaluate_polynomial
from adapters.trace_printer import (
    arithmetic_trace_lines,
    format_listing,
    polynomial_trace_lines,
    print_trace,
)


def test_arithmetic_trace_lines_use_fixed_tags():
    result = compile_arithmetic("2+3*4")

    assert arithmetic_trace_lines(result) == [
        "[LOAD] 2 -> temp0",
        "[LOAD] 3 -> temp1",
        "[LOAD] 4 -> temp2",
        "[MUL] temp1 * temp2 = 12 -> temp3",
        "[ADD] temp0 + temp3 = 14 -> temp4",
    ]


def test_arithmetic_trace_lines_for_sub_and_div():
    result = compile_arithmetic("(9 - 4) / 2")

    lines = arithmetic_trace_lines(result)

    assert lines[2] == "[SUB] temp0 - temp1 = 5 -> temp2"
    assert lines[4] == "[DIV] temp2 / temp3 = 2.5 -> temp4"


def test_listing_matches_generated_instructions_format():
    result = compile_arithmetic("2+3*4")

    assert [format_listing(i) for i in result.instructions] == [
        "LOAD 2 -> temp0",
        "LOAD 3 -> temp1",
        "LOAD 4 -> temp2",
        "MUL temp1 temp2 -> temp3",
        "ADD temp0 temp3 -> temp4",
    ]


def test_polynomial_trace_lines():
    result = evaluate_polynomial("3x^2 + 2x + 1", 2)

    assert polynomial_trace_lines(result) == [
        "[POW] x^2 = 4 -> temp0",
        "[MUL] 3 * temp0 = 12 -> temp1",
        "[POW] x^1 = 2 -> temp2",
        "[MUL] 2 * temp2 = 4 -> temp3",
        "[LOAD] 1 -> temp4",
    ]


def test_trace_number_format_is_configurable():
    result = compile_arithmetic("1/3")

    assert arithmetic_trace_lines(result, ".3f")[-1] == "[DIV] temp0 / temp1 = 0.333 -> temp2"


def test_print_trace_reports_final_result(capsys):
    print_trace(["[LOAD] 1 -> temp0"], 1.0)

    out = capsys.readouterr().out
    assert "Computation Steps:" in out
    assert "[LOAD] 1 -> temp0" in out
    assert "Final result: 1" in out
