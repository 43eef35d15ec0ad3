"""RPN表达式求值器 - 调用统一的Operators类"""
import re
import logging

from evaluator.errors import ErrorKind, EvalResult
from evaluator.operators import Operators
from evaluator.token_system import is_operator

logger = logging.getLogger(__name__)

# 固定的十进制格式: 只接受ASCII数字，不接受下划线、千分位、inf/nan
NUMBER_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def parse_number(token):
    """按固定小数点格式解析数字，失败返回None"""
    if not NUMBER_PATTERN.fullmatch(token):
        return None
    return float(token)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀表达式
        Args:
            token_sequence: Token字符串列表，或以空白分隔的后缀字符串
        Returns:
            EvalResult，成功时value为float
        """
        if isinstance(token_sequence, str):
            token_sequence = token_sequence.split()
        else:
            token_sequence = [t for t in token_sequence if t and not t.isspace()]

        stack = []

        for token in token_sequence:
            if len(token) == 1 and is_operator(token):
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token}")
                    return EvalResult.fail(
                        ErrorKind.INSUFFICIENT_OPERANDS,
                        "Invalid expression: insufficient operands", token
                    )
                # 后弹出的是左操作数
                operand2 = stack.pop()
                operand1 = stack.pop()

                result = Operators.apply(operand1, token, operand2)
                if not result.is_ok:
                    return result
                stack.append(result.value)
            else:
                number = parse_number(token)
                if number is None:
                    logger.debug(f"Invalid number format: {token!r}")
                    return EvalResult.fail(
                        ErrorKind.INVALID_NUMBER_FORMAT,
                        f"Invalid number format: {token!r}", token
                    )
                stack.append(number)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            return EvalResult.fail(ErrorKind.MALFORMED_RESULT, "Invalid expression")

        return EvalResult.ok(stack[0])
