from __future__ import annotations

import io

import pytest

import tracecomp


def test_cli_arith_prints_trace_and_result(capsys):
    tracecomp.main(["arith", "--text", "2+3*4"])

    out = capsys.readouterr().out
    assert "Generated Instructions" in out
    assert "[MUL] temp1 * temp2 = 12 -> temp3" in out
    assert "Result: temp4 = 14" in out


def test_cli_arith_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(1 + 2) * 3\n"))

    tracecomp.main(["arith"])

    assert "Result: temp4 = 9" in capsys.readouterr().out


def test_cli_arith_failure_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc:
        tracecomp.main(["arith", "-t", "(2+3"])

    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "syntax/MISSING_CLOSING_PAREN" in err


def test_cli_poly_prints_canonical_form_and_result(capsys):
    tracecomp.main(["poly", "-t", "1 + 2x + 3x^2", "--x", "2"])

    out = capsys.readouterr().out
    assert "Canonical form: 3x^2 + 2x + 1" in out
    assert "[POW] x^2 = 4 -> temp0" in out
    assert "Result: 17" in out


def test_cli_menu_polynomial_mode(monkeypatch, capsys):
    answers = iter(["1", "x^2 - 1", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    tracecomp.main(["menu"])

    assert "Result: 8" in capsys.readouterr().out


def test_cli_menu_arithmetic_mode(monkeypatch, capsys):
    answers = iter(["2", "8 / 4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    tracecomp.main(["menu"])

    assert "[DIV] temp0 / temp1 = 2 -> temp2" in capsys.readouterr().out


def test_cli_menu_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "3")

    tracecomp.main(["menu"])

    assert "Invalid choice" in capsys.readouterr().out


def test_cli_poly_rejects_nan_x(capsys):
    with pytest.raises(SystemExit) as exc:
        tracecomp.main(["poly", "-t", "x^2", "--x", "nan"])

    assert exc.value.code == 1
    assert "semantic/INVALID_EVALUATION_POINT" in capsys.readouterr().err
