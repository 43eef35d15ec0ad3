import pytest

from evaluator.converter import Tokenizer, infix_to_postfix, to_postfix_string
from evaluator.errors import ErrorKind, InvalidCharacterError, UnmatchedParenthesisError


@pytest.mark.parametrize("infix, postfix", [
    ("2 + 3", "2 3 +"),
    ("2+3*4", "2 3 4 * +"),
    ("(2+3)*4", "2 3 + 4 *"),
    ("2^3^2", "2 3 2 ^ ^"),
    ("10-2-3", "10 2 - 3 -"),
    ("10/2-3", "10 2 / 3 -"),
    ("8/4*2", "8 4 / 2 *"),
    ("7.5+2.25", "7.5 2.25 +"),
    ("12.75", "12.75"),
    ("  42  ", "42"),
    ("2*(3+4)^2", "2 3 4 + 2 ^ *"),
    ("1+2)*3", "1 2 + 3 *"),
    ("", ""),
])
def test_to_postfix_string(infix, postfix):
    assert to_postfix_string(infix) == postfix


def test_numbers_flush_at_boundary():
    result = infix_to_postfix("123+45")
    assert result.value == ["123", "45", "+"]


def test_whitespace_splits_numbers():
    # each run of digits is its own literal
    assert infix_to_postfix("1 2").value == ["1", "2"]


def test_malformed_literal_is_kept_verbatim():
    assert infix_to_postfix("1.2.3").value == ["1.2.3"]


def test_invalid_character():
    result = infix_to_postfix("2+a")
    assert result.error == ErrorKind.INVALID_CHARACTER
    assert result.detail == 'a'
    assert "'a'" in result.message

    with pytest.raises(InvalidCharacterError):
        to_postfix_string("3 , 4")


def test_unmatched_open_parenthesis():
    result = infix_to_postfix("(2+3")
    assert result.error == ErrorKind.UNMATCHED_PARENTHESIS

    with pytest.raises(UnmatchedParenthesisError):
        to_postfix_string("((1)")


def test_tokenizer_lookahead():
    cursor = Tokenizer("ab")
    assert cursor.peek() == 'a'
    assert next(cursor) == 'a'
    assert cursor.peek() == 'b'
    assert next(cursor) == 'b'
    assert cursor.peek() is None
    assert list(cursor) == []


def test_none_input_is_empty():
    assert infix_to_postfix(None).value == []
