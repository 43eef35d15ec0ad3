"""对外入口: 文本 -> 浮点数"""
import logging

from config.config import EVALUATOR_CONFIG
from evaluator.converter import infix_to_postfix
from evaluator.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """中缀转后缀，再用值栈求值；无跨调用状态"""

    def __init__(self, separator=None):
        self.separator = separator or EVALUATOR_CONFIG["token_separator"]
        self.rpn_evaluator = RPNEvaluator

    def try_evaluate(self, expression):
        """两阶段求值，返回EvalResult，不抛异常"""
        postfix = infix_to_postfix(expression)
        if not postfix.is_ok:
            return postfix
        return self.rpn_evaluator.evaluate(postfix.value)

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀算术表达式
        Returns:
            计算结果
        Raises:
            ExpressionError: 对应错误类型的子类
        """
        result = self.try_evaluate(expression)
        if not result.is_ok:
            logger.debug(f"Evaluation of {expression!r} failed: {result.message}")
        return result.unwrap()

    def to_postfix(self, expression: str) -> str:
        return self.separator.join(infix_to_postfix(expression).unwrap())


_default_evaluator = ExpressionEvaluator()


def evaluate(expression: str) -> float:
    return _default_evaluator.evaluate(expression)


def try_evaluate(expression):
    return _default_evaluator.try_evaluate(expression)
