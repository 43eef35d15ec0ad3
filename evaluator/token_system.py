"""evaluator/token_system.py"""
from enum import Enum
import string

from config.config import EVALUATOR_CONFIG


class TokenType(Enum):
    OPERATOR = "operator"  # 二元操作符
    PAREN = "paren"        # 括号


class Token:
    def __init__(self, token_type, name, arity=0, priority_infix=None, priority_stack=None):
        self.type = token_type
        self.name = name
        self.arity = arity
        # 两张优先级表: 进栈时(infix)与栈内(stack)，二者的差值决定结合性
        self.priority_infix = priority_infix
        self.priority_stack = priority_stack


# Token定义字典
TOKEN_DEFINITIONS = {
    # ^ 进栈优先级高于栈内优先级 -> 右结合
    '^': Token(TokenType.OPERATOR, '^', arity=2, priority_infix=4, priority_stack=3),

    # 乘除模，左结合
    '*': Token(TokenType.OPERATOR, '*', arity=2, priority_infix=2, priority_stack=2),
    '/': Token(TokenType.OPERATOR, '/', arity=2, priority_infix=2, priority_stack=2),
    '%': Token(TokenType.OPERATOR, '%', arity=2, priority_infix=2, priority_stack=2),

    # 加减，左结合
    '+': Token(TokenType.OPERATOR, '+', arity=2, priority_infix=1, priority_stack=1),
    '-': Token(TokenType.OPERATOR, '-', arity=2, priority_infix=1, priority_stack=1),

    # 括号
    '(': Token(TokenType.PAREN, '(', priority_infix=5, priority_stack=0),
    ')': Token(TokenType.PAREN, ')'),
}

OPERATOR_CHARS = frozenset(TOKEN_DEFINITIONS)
BINARY_OPERATORS = frozenset(
    name for name, token in TOKEN_DEFINITIONS.items() if token.type == TokenType.OPERATOR
)
DIGITS = frozenset(string.digits)
DECIMAL_POINT = EVALUATOR_CONFIG["decimal_point"]


def is_operator(char):
    """操作符或括号字符"""
    return char in OPERATOR_CHARS


def is_number_char(char):
    """数字字面量的组成字符: ASCII数字或小数点"""
    return char in DIGITS or char == DECIMAL_POINT


def priority_infix(op):
    """新读入操作符的优先级，未知字符返回None"""
    token = TOKEN_DEFINITIONS.get(op)
    if token is None:
        return None
    return token.priority_infix


def priority_stack(op):
    """栈顶操作符的优先级，未知字符返回None"""
    token = TOKEN_DEFINITIONS.get(op)
    if token is None:
        return None
    return token.priority_stack
