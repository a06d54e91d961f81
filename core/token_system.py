"""core/token_system.py"""
import logging
from enum import Enum

import numpy as np

from core.errors import ErrorKind, EvaluationError
from core.operators import Associativity, Operators, OperatorSymbol, OPERATOR_CHARS

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')
NUMBER_CHARS = DIGITS | {'.'}


class TokenType(Enum):
    NUMBER = "number"  # 操作数
    OPERATOR = "operator"  # 操作符


class Token:
    __slots__ = ('type', 'value')

    def __init__(self, token_type, value):
        self.type = token_type
        self.value = value

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, np.float64(value))

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.is_number:
            return f"Number({float(self.value)!r})"
        return f"Operator({self.value.name})"


# str.isspace 还包括 U+001C..U+001F（信息分隔符），它们不属于 Unicode White_Space
INFO_SEPARATORS = frozenset('\x1c\x1d\x1e\x1f')


def is_whitespace(c):
    return c.isspace() and c not in INFO_SEPARATORS


def sanitize(expression):
    """字母直接拒绝，然后去掉所有空白"""
    for c in expression:
        if c.isascii() and c.isalpha():
            logger.debug(f"Rejected alphabetic character {c!r} in {expression!r}")
            raise EvaluationError(ErrorKind.INVALID_INPUT, c)
    return ''.join(c for c in expression if not is_whitespace(c))


class UnaryMinusRule:
    """
    判断一个字符是否属于当前数字串。

    '-' 出现在输入开头，或紧跟在操作符/左括号之后时视为负号，
    并入数字字面量；跟在数字或 ')' 之后时是减法。
    """

    def __init__(self):
        self.prev = None  # None 表示输入开头

    def absorbs(self, c):
        if c in NUMBER_CHARS:
            return True
        if c != '-':
            return False
        return self.prev is None or (self.prev in OPERATOR_CHARS and self.prev != ')')

    def consume(self, c):
        self.prev = c


class ShuntingYardConverter:
    """把去空白后的中缀表达式转换为后缀 Token 序列"""

    def __init__(self, sanitized):
        self.text = sanitized
        self.output = []
        self.op_stack = []
        self.offset = 0  # 当前数字串的起点

    @staticmethod
    def parse_number(text):
        try:
            return Token.number(float(text))
        except ValueError:
            logger.debug(f"Malformed number {text!r}")
            raise EvaluationError(ErrorKind.MALFORMED_NUMBER, text) from None

    def _flush_number(self, index):
        if self.offset != index:
            self.output.append(self.parse_number(self.text[self.offset:index]))

    def _push_operator(self, op1):
        prec1 = Operators.precedence(op1)
        left1 = Operators.associativity(op1) == Associativity.LEFT
        while self.op_stack:
            op2 = self.op_stack[-1]
            if op2 == OperatorSymbol.LEFT_PAREN:
                break
            prec2 = Operators.precedence(op2)
            if prec2 > prec1 or (prec2 == prec1 and left1):
                self.output.append(Token.operator(self.op_stack.pop()))
            else:
                break
        self.op_stack.append(op1)

    def _close_paren(self):
        while self.op_stack:
            op2 = self.op_stack.pop()
            if op2 == OperatorSymbol.LEFT_PAREN:
                return
            self.output.append(Token.operator(op2))
        logger.debug(f"Unmatched ')' in {self.text!r}")
        raise EvaluationError(ErrorKind.MISMATCHED_PARENS)

    def convert(self):
        """
        Returns:
            后缀顺序的 Token 列表（长度为奇数）
        """
        rule = UnaryMinusRule()

        for index, c in enumerate(self.text):
            if rule.absorbs(c):
                rule.consume(c)
                continue

            # 数字边界
            self._flush_number(index)

            op1 = Operators.from_char(c)
            if op1 is None:
                logger.debug(f"Invalid symbol {c!r} in {self.text!r}")
                raise EvaluationError(ErrorKind.INVALID_SYMBOL, c)

            if op1 == OperatorSymbol.LEFT_PAREN:
                self.op_stack.append(op1)
            elif op1 == OperatorSymbol.RIGHT_PAREN:
                self._close_paren()
            else:
                self._push_operator(op1)

            rule.consume(c)
            self.offset = index + 1

        self._flush_number(len(self.text))

        while self.op_stack:
            op = self.op_stack.pop()
            if op == OperatorSymbol.LEFT_PAREN:
                logger.debug(f"Unclosed '(' in {self.text!r}")
                raise EvaluationError(ErrorKind.UNCLOSED_PAREN)
            self.output.append(Token.operator(op))

        # 只有二元操作符时合法序列长度必为奇数；引入一元操作符后此检查失效
        if len(self.output) % 2 == 0:
            logger.debug(f"Even token count {len(self.output)} for {self.text!r}")
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION)

        return self.output


def infix_to_postfix(sanitized):
    return ShuntingYardConverter(sanitized).convert()


def tokenize(expression):
    """原始表达式 -> 后缀 Token 列表"""
    return infix_to_postfix(sanitize(expression))


def format_postfix(tokens):
    """后缀序列的可读形式，例如 '2 3 +'"""
    parts = []
    for token in tokens:
        if token.is_number:
            parts.append(repr(float(token.value)))
        else:
            parts.append(token.value.char)
    return ' '.join(parts)
