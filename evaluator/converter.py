"""中缀表达式 -> 后缀(RPN)Token序列，调度场算法"""
import logging

from config.config import EVALUATOR_CONFIG
from evaluator.errors import ErrorKind, EvalResult
from evaluator.token_system import (
    is_operator, is_number_char, priority_infix, priority_stack
)

logger = logging.getLogger(__name__)


class Tokenizer:
    """逐字符游标，支持向前看一个字符"""

    def __init__(self, text):
        self.text = text or ""
        self.position = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.position >= len(self.text):
            raise StopIteration
        char = self.text[self.position]
        self.position += 1
        return char

    def peek(self):
        """下一个字符，已到末尾返回None"""
        if self.position < len(self.text):
            return self.text[self.position]
        return None


def _invalid_operator(op):
    logger.debug(f"Priority lookup failed for {op!r}")
    return EvalResult.fail(ErrorKind.INVALID_OPERATOR, f"Invalid operator: {op!r}", op)


def infix_to_postfix(infix):
    """
    单次从左到右扫描，把中缀表达式转换为后缀Token列表
    Args:
        infix: 中缀表达式字符串
    Returns:
        EvalResult，成功时value为Token字符串列表
    """
    stack = []
    output = []
    number_buffer = []
    cursor = Tokenizer(infix)

    for char in cursor:
        if is_number_char(char):
            number_buffer.append(char)
            # 数字串在边界处立即输出，末尾字符也在这里输出
            lookahead = cursor.peek()
            if lookahead is None or not is_number_char(lookahead):
                output.append(''.join(number_buffer))
                number_buffer.clear()

        elif is_operator(char):
            if char == ')':
                while stack and stack[-1] != '(':
                    output.append(stack.pop())
                # 多余的 ')' 静默忽略
                if stack:
                    stack.pop()
            elif char == '(':
                stack.append(char)
            else:
                incoming = priority_infix(char)
                if incoming is None:
                    return _invalid_operator(char)
                while stack and stack[-1] != '(':
                    resident = priority_stack(stack[-1])
                    if resident is None:
                        return _invalid_operator(stack[-1])
                    if incoming > resident:
                        break
                    output.append(stack.pop())
                stack.append(char)

        elif char.isspace():
            continue

        else:
            logger.debug(f"Invalid character {char!r} at position {cursor.position - 1}")
            return EvalResult.fail(
                ErrorKind.INVALID_CHARACTER, f"Invalid character: {char!r}", char
            )

    while stack:
        top = stack.pop()
        if top == '(':
            logger.debug(f"Unmatched '(' in {infix!r}")
            return EvalResult.fail(
                ErrorKind.UNMATCHED_PARENTHESIS, "Unmatched parenthesis: '('", top
            )
        output.append(top)

    logger.debug(f"Postfix: {' '.join(output)}")
    return EvalResult.ok(output)


def to_postfix_string(infix, separator=EVALUATOR_CONFIG["token_separator"]):
    """后缀表达式的字符串形式，失败时抛出ExpressionError"""
    return separator.join(infix_to_postfix(infix).unwrap())
