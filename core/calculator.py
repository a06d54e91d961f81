"""core/calculator.py - 表达式求值入口"""
import logging

from config.config import CALCULATOR_CONFIG
from core.errors import EvaluationError
from core.rpn_evaluator import RPNEvaluator
from core.token_system import infix_to_postfix, sanitize

logger = logging.getLogger(__name__)


def evaluate(expression, strategy=None):
    """
    计算中缀算术表达式
    Args:
        expression: 表达式字符串，例如 "2*(1+3)^2"
        strategy: 后缀求值策略，默认取 CALCULATOR_CONFIG['evaluation_strategy']
    Returns:
        float
    Raises:
        EvaluationError: 任何解析或计算错误
    """
    if strategy is None:
        strategy = CALCULATOR_CONFIG['evaluation_strategy']

    try:
        tokens = infix_to_postfix(sanitize(expression))
        result = RPNEvaluator.evaluate(tokens, strategy=strategy)
    except EvaluationError as e:
        logger.debug(f"Failed to evaluate {expression!r}: {e.kind.name}")
        raise

    return float(result)
