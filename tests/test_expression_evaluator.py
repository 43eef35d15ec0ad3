import math
import warnings

import pytest

import evaluator
from evaluator import (
    ExpressionEvaluator, ErrorKind, ExpressionError, InvalidCharacterError,
    InsufficientOperandsError, DivisionByZeroError, MalformedResultError,
    UnmatchedParenthesisError
)


@pytest.mark.parametrize("expression, expected", [
    ("2 + 3", 5.0),
    ("2+3*4", 14.0),
    ("(2+3)*4", 20.0),
    ("2^3^2", 512.0),
    ("10/2-3", 2.0),
    ("10-2-3", 5.0),
    ("7%2", 1.0),
    ("7.5+2.25", 9.75),
    ("((1+2)*(3+4))/7", 3.0),
    ("2^0.5^2", 2 ** 0.25),
    ("100", 100.0),
])
def test_evaluate(expression, expected):
    assert evaluator.evaluate(expression) == pytest.approx(expected)


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError) as excinfo:
        evaluator.evaluate("5/0")
    assert excinfo.value.kind == ErrorKind.DIVISION_BY_ZERO
    assert isinstance(excinfo.value, ZeroDivisionError)


def test_insufficient_operands():
    with pytest.raises(InsufficientOperandsError):
        evaluator.evaluate("2+")


def test_invalid_character_names_offender():
    with pytest.raises(InvalidCharacterError) as excinfo:
        evaluator.evaluate("2+a")
    assert excinfo.value.detail == 'a'
    assert "'a'" in str(excinfo.value)


def test_unmatched_parenthesis():
    with pytest.raises(UnmatchedParenthesisError):
        evaluator.evaluate("(2+3")


def test_stray_close_parenthesis_is_ignored():
    assert evaluator.evaluate("2+3)") == 5.0


@pytest.mark.parametrize("expression", ["", "   ", "1 2"])
def test_malformed_result(expression):
    with pytest.raises(MalformedResultError):
        evaluator.evaluate(expression)


def test_all_errors_share_base_class():
    for expression in ["5/0", "2+", "2+a", "(1", "", "1..2+1"]:
        with pytest.raises(ExpressionError):
            evaluator.evaluate(expression)


def test_try_evaluate_does_not_raise():
    result = evaluator.try_evaluate("5/0")
    assert not result.is_ok
    assert result.error == ErrorKind.DIVISION_BY_ZERO
    assert evaluator.try_evaluate("1+1").value == 2.0


def test_repeated_evaluation_is_identical():
    calc = ExpressionEvaluator()
    results = {calc.evaluate("3.3*(2-0.7)^2%5") for _ in range(20)}
    assert len(results) == 1


def test_to_postfix():
    assert ExpressionEvaluator().to_postfix("(2+3)*4") == "2 3 + 4 *"
    assert ExpressionEvaluator(separator="\t").to_postfix("1+2") == "1\t2\t+"


def test_overflow_yields_inf_without_warnings():
    big = "1" + "0" * 308
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isinf(evaluator.evaluate(big + "*10"))
        assert math.isnan(evaluator.evaluate(f"{big}*10-{big}*10"))
