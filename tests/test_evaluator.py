import math

import pytest

from scicalc.display import format_result
from scicalc.environment import AngleMode
from scicalc.errors import (
    DomainError,
    EvalError,
    ExpressionSyntaxError,
    InvalidFactorialError,
    UnknownNameError,
)
from scicalc.evaluator import evaluate


@pytest.mark.parametrize("expr, expected", [
    ("2+3*4", 14),
    ("(2+3)*4", 20),
    ("2^3^2", 512),
    ("2**-1", 0.5),
    ("-2^2", 4),
    ("--3", 3),
    ("10-4-3", 3),
    ("100/10/5", 2),
    ("50%", 0.5),
    ("200%", 2),
    ("5!", 120),
    ("0!", 1),
    ("3!×2", 12),
    ("9÷3", 3),
    ("7–2", 5),
    ("sqrt(16)+abs(-2)", 6),
    ("pow(2, 10)", 1024),
    ("max(1, 7, 3) - min(4, 2)", 5),
    ("log(1000)", 3),
    ("ln(e)", 1),
    ("exp(0)", 1),
    ("floor(2.7)+ceil(2.1)", 5),
    ("round(2.5)", 3),
    ("PI2/pi", 2),
    ("1e3+1", 1001),
])
def test_arithmetic(expr, expected):
    assert evaluate(expr) == pytest.approx(expected)


def test_result_is_float():
    assert isinstance(evaluate("2+2"), float)


def test_empty_input_passes_through():
    assert evaluate("") is None
    assert evaluate(None) is None
    assert evaluate("   ") is None
    assert evaluate("\t\n") is None


def test_sin_in_degrees():
    assert evaluate("sin(90)", "deg") == pytest.approx(1, abs=1e-12)
    assert evaluate("cos(60)", AngleMode.DEGREES) == pytest.approx(0.5, abs=1e-12)
    assert evaluate("asin(1)", "deg") == pytest.approx(90)


def test_sin_in_radians():
    assert evaluate("sin(PI/2)", "rad") == pytest.approx(1, abs=1e-12)
    assert evaluate("asin(1)", AngleMode.RADIANS) == pytest.approx(math.pi / 2)


def test_angle_mode_only_touches_trig():
    assert evaluate("sqrt(2)*ln(3)", "deg") == evaluate("sqrt(2)*ln(3)", "rad")


@pytest.mark.parametrize("expr", [
    "asin(2)",
    "acos(-1.5)",
    "1/0",
    "5/(2-2)",
    "sqrt(-1)",
    "ln(0)",
    "log(-1)",
    "(-8)^(1/3)",
    "10^400",
    "exp(1000)",
    "1e999",
    "171!",
    "max()",
    "sqrt(1, 2)",
])
def test_domain_errors(expr):
    with pytest.raises(DomainError):
        evaluate(expr)


@pytest.mark.parametrize("expr", ["2.5!", "factorial(-1)", "factorial(2.5)", "factorial(1/3)"])
def test_invalid_factorial(expr):
    with pytest.raises(InvalidFactorialError, match="invalid factorial argument"):
        evaluate(expr)


@pytest.mark.parametrize("expr", ["foo", "foo(1)", "x+1", "PI(2)", "sin", "Error"])
def test_name_errors(expr):
    with pytest.raises(UnknownNameError):
        evaluate(expr)


@pytest.mark.parametrize("expr", ["(1+2", "2*", "2 # 3", "(1+2)%", "5 5", ".", "2e"])
def test_syntax_errors(expr):
    with pytest.raises(ExpressionSyntaxError):
        evaluate(expr)


def test_deep_nesting_is_a_syntax_error():
    with pytest.raises(ExpressionSyntaxError):
        evaluate("(" * 5000 + "1" + ")" * 5000)


@pytest.mark.parametrize("expr", ["", "1/0", "%%", "sin(", "))", "2^^2", "factorial(1e10)"])
def test_never_raises_anything_but_eval_error(expr):
    try:
        evaluate(expr)
    except EvalError:
        pass


@pytest.mark.parametrize("expr", [
    "0.1+0.2", "1/3", "2/3*3", "sin(30)", "sqrt(2)", "PI", "-7.25*4",
    "8470.145501101517", "8202.110912365077", "5000.5+1/3", "-6543.21/7", "12345.6789*7", "10^15/3",
])
def test_format_of_evaluate_is_stable(expr):
    once = format_result(evaluate(expr))
    assert format_result(evaluate(once)) == once
