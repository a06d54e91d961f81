"""core/operators.py"""
import logging
from enum import Enum
from types import MappingProxyType

import numpy as np

from core.errors import ErrorKind, EvaluationError

logger = logging.getLogger(__name__)


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorSymbol(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EXP = "^"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"

    @property
    def char(self):
        return self.value


class OperatorSpec:
    def __init__(self, symbol, precedence, associativity, func=None):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.func = func  # 括号没有求值函数

    def __repr__(self):
        return (f"OperatorSpec({self.symbol.name}, precedence={self.precedence}, "
                f"associativity={self.associativity.name})")


class Operators:
    """操作符表和二元运算的静态方法集合"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """
        除法操作符
        只有除数恰好为 0.0（含 -0.0）时报错；极小除数按 IEEE 规则得到 inf
        """
        if operand2 == 0.0:
            raise EvaluationError(ErrorKind.DIVISION_BY_ZERO)
        return operand1 / operand2

    @staticmethod
    def exp(operand1, operand2):
        """
        幂运算，与 C 的 pow 一致:
        0^0 = 1, 0^-1 = inf, 负数的非整数次幂 = nan
        """
        return np.power(operand1, operand2)

    # 查表========================================
    @staticmethod
    def from_char(c):
        """字符 -> OperatorSymbol；不是操作符时返回 None"""
        spec = OPERATOR_DEFINITIONS.get(c)
        return spec.symbol if spec is not None else None

    @staticmethod
    def spec(symbol):
        return OPERATOR_DEFINITIONS[symbol.char]

    @staticmethod
    def precedence(symbol):
        return Operators.spec(symbol).precedence

    @staticmethod
    def associativity(symbol):
        return Operators.spec(symbol).associativity

    @staticmethod
    def apply(symbol, operand1, operand2):
        """
        对两个操作数应用二元操作符
        Args:
            symbol: OperatorSymbol
            operand1: 左操作数
            operand2: 右操作数
        Returns:
            np.float64（溢出/NaN 不做检测，直接传播）
        """
        func = Operators.spec(symbol).func
        if func is None:
            logger.debug(f"Cannot evaluate non-binary symbol {symbol.name}")
            raise EvaluationError(ErrorKind.SYNTAX_ERROR, symbol.char)
        with np.errstate(all='ignore'):
            return np.float64(func(np.float64(operand1), np.float64(operand2)))


# 操作符定义字典（只读）
OPERATOR_DEFINITIONS = MappingProxyType({
    '+': OperatorSpec(OperatorSymbol.ADD, 2, Associativity.LEFT, Operators.add),
    '-': OperatorSpec(OperatorSymbol.SUB, 2, Associativity.LEFT, Operators.sub),
    '*': OperatorSpec(OperatorSymbol.MUL, 3, Associativity.LEFT, Operators.mul),
    '/': OperatorSpec(OperatorSymbol.DIV, 3, Associativity.LEFT, Operators.div),
    '^': OperatorSpec(OperatorSymbol.EXP, 4, Associativity.RIGHT, Operators.exp),
    '(': OperatorSpec(OperatorSymbol.LEFT_PAREN, 0, Associativity.RIGHT),
    ')': OperatorSpec(OperatorSymbol.RIGHT_PAREN, 0, Associativity.RIGHT),
})

OPERATOR_CHARS = frozenset(OPERATOR_DEFINITIONS)
