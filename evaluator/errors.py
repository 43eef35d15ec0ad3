"""evaluator/errors.py - 错误分类与带标签的求值结果"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_CHARACTER = "invalid_character"
    INVALID_OPERATOR = "invalid_operator"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    INVALID_NUMBER_FORMAT = "invalid_number_format"
    DIVISION_BY_ZERO = "division_by_zero"
    MALFORMED_RESULT = "malformed_result"
    UNMATCHED_PARENTHESIS = "unmatched_parenthesis"


class ExpressionError(Exception):
    """所有求值错误的基类"""
    kind = None

    def __init__(self, message, detail=None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidCharacterError(ExpressionError):
    kind = ErrorKind.INVALID_CHARACTER


class InvalidOperatorError(ExpressionError):
    kind = ErrorKind.INVALID_OPERATOR


class InsufficientOperandsError(ExpressionError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS


class InvalidNumberFormatError(ExpressionError):
    kind = ErrorKind.INVALID_NUMBER_FORMAT


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


class MalformedResultError(ExpressionError):
    kind = ErrorKind.MALFORMED_RESULT


class UnmatchedParenthesisError(ExpressionError):
    kind = ErrorKind.UNMATCHED_PARENTHESIS


ERROR_CLASSES = {cls.kind: cls for cls in (
    InvalidCharacterError,
    InvalidOperatorError,
    InsufficientOperandsError,
    InvalidNumberFormatError,
    DivisionByZeroError,
    MalformedResultError,
    UnmatchedParenthesisError,
)}


class EvalResult:
    """
    成功值或错误类型二选一
    Args:
        value: 成功时的值（后缀Token列表或浮点数）
        error: 失败时的ErrorKind
        message: 人类可读的错误信息
        detail: 出错的字符或Token
    """

    __slots__ = ('value', 'error', 'message', 'detail')

    def __init__(self, value=None, error=None, message=None, detail=None):
        self.value = value
        self.error = error
        self.message = message
        self.detail = detail

    @classmethod
    def ok(cls, value):
        return cls(value=value)

    @classmethod
    def fail(cls, error, message, detail=None):
        return cls(error=error, message=message, detail=detail)

    @property
    def is_ok(self):
        return self.error is None

    def to_exception(self):
        if self.is_ok:
            return None
        return ERROR_CLASSES[self.error](self.message, self.detail)

    def unwrap(self):
        """成功时返回值，失败时抛出对应的ExpressionError子类"""
        if not self.is_ok:
            raise self.to_exception()
        return self.value

    def __repr__(self):
        if self.is_ok:
            return f"EvalResult.ok({self.value!r})"
        return f"EvalResult.fail({self.error.name}, {self.message!r})"
