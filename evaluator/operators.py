"""evaluator/operators.py"""
import numpy as np
import logging

from evaluator.errors import ErrorKind, EvalResult
from evaluator.token_system import BINARY_OPERATORS

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合（float64语义，溢出/无效值按IEEE返回inf/nan，不告警）"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return float(np.add(operand1, operand2, dtype=np.float64))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return float(np.subtract(operand1, operand2, dtype=np.float64))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return float(np.multiply(operand1, operand2, dtype=np.float64))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数为零由apply拦截"""
        with np.errstate(all='ignore'):
            return float(np.divide(operand1, operand2, dtype=np.float64))

    @staticmethod
    def pow(operand1, operand2):
        """
        幂运算，按IEEE pow:
        负底数的分数次幂为nan，溢出为inf，不抛异常
        """
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，符号跟随被除数（截断除法余数）"""
        with np.errstate(all='ignore'):
            return float(np.fmod(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def apply(operand1, symbol, operand2):
        """计算 operand1 <symbol> operand2，返回EvalResult"""
        if symbol not in BINARY_OPERATORS:
            logger.debug(f"Unknown binary operator: {symbol!r}")
            return EvalResult.fail(ErrorKind.INVALID_OPERATOR, f"Invalid operator: {symbol!r}", symbol)

        if symbol == '/' and operand2 == 0:
            logger.debug(f"Division by zero: {operand1} / {operand2}")
            return EvalResult.fail(ErrorKind.DIVISION_BY_ZERO, "Division by zero")

        return EvalResult.ok(OPERATOR_METHODS[symbol](operand1, operand2))


OPERATOR_METHODS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
    '%': Operators.mod,
}
