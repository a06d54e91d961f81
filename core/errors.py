"""core/errors.py"""
from enum import Enum


class ErrorKind(Enum):
    """求值失败的类型（封闭枚举，调用方按 kind 分支而不是按文本）"""
    INVALID_INPUT = "Found invalid input"
    MALFORMED_NUMBER = "Found symbol, expected number"
    INVALID_SYMBOL = "Found invalid symbol"
    MISMATCHED_PARENS = "Found mismatched ()"
    UNCLOSED_PAREN = "Found unclosed ("
    INVALID_EXPRESSION = "Invalid expression"
    EMPTY_EXPRESSION = "Empty expression"
    SYNTAX_ERROR = "Found operator, expected number"
    DIVISION_BY_ZERO = "Can't divide by 0"

    @property
    def message(self):
        return self.value


class EvaluationError(Exception):
    """
    表达式求值错误
    Args:
        kind: ErrorKind
        detail: 出错的子串或字符（可选）
    """

    def __init__(self, kind, detail=None):
        self.kind = kind
        self.detail = detail
        super().__init__(str(self))

    def __str__(self):
        if self.detail is None:
            return self.kind.message
        return f"{self.kind.message}: {self.detail}"

    def __repr__(self):
        return f"EvaluationError({self.kind.name}, detail={self.detail!r})"
