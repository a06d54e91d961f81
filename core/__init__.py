"""核心模块 - 操作符表、Token系统、RPN评估器"""
from .errors import ErrorKind, EvaluationError
from .operators import (
    Associativity, OperatorSymbol, OperatorSpec, OPERATOR_DEFINITIONS, Operators
)
from .token_system import (
    TokenType, Token, UnaryMinusRule, ShuntingYardConverter,
    sanitize, infix_to_postfix, tokenize
)
from .rpn_evaluator import RPNEvaluator
from .calculator import evaluate

__all__ = [
    'ErrorKind', 'EvaluationError',
    'Associativity', 'OperatorSymbol', 'OperatorSpec', 'OPERATOR_DEFINITIONS', 'Operators',
    'TokenType', 'Token', 'UnaryMinusRule', 'ShuntingYardConverter',
    'sanitize', 'infix_to_postfix', 'tokenize',
    'RPNEvaluator', 'evaluate'
]
