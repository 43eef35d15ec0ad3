"""核心模块 - Token系统、中缀转后缀、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_CHARS,
    priority_infix, priority_stack
)
from .errors import (
    ErrorKind, EvalResult, ExpressionError, InvalidCharacterError,
    InvalidOperatorError, InsufficientOperandsError, InvalidNumberFormatError,
    DivisionByZeroError, MalformedResultError, UnmatchedParenthesisError
)
from .operators import Operators
from .converter import infix_to_postfix, to_postfix_string
from .rpn_evaluator import RPNEvaluator
from .expression_evaluator import ExpressionEvaluator, evaluate, try_evaluate

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_CHARS',
    'priority_infix', 'priority_stack',
    'ErrorKind', 'EvalResult', 'ExpressionError', 'InvalidCharacterError',
    'InvalidOperatorError', 'InsufficientOperandsError', 'InvalidNumberFormatError',
    'DivisionByZeroError', 'MalformedResultError', 'UnmatchedParenthesisError',
    'Operators', 'infix_to_postfix', 'to_postfix_string',
    'RPNEvaluator', 'ExpressionEvaluator', 'evaluate', 'try_evaluate'
]
