"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import ErrorKind, EvaluationError
from core.operators import Operators
from core.token_system import Token, format_postfix

logger = logging.getLogger(__name__)

STRATEGIES = ('splice', 'stack')


class RPNEvaluator:
    """评估后缀Token序列的值"""

    @staticmethod
    def evaluate(token_sequence, strategy='splice'):
        """
        评估后缀表达式
        Args:
            token_sequence: 后缀顺序的Token列表（会被消耗）
            strategy: 'splice' 逐次替换最左侧操作符窗口；'stack' 单遍操作数栈
        Returns:
            np.float64
        """
        if strategy == 'splice':
            return RPNEvaluator.evaluate_splice(token_sequence)
        elif strategy == 'stack':
            return RPNEvaluator.evaluate_stack(token_sequence)
        raise ValueError(f"Unknown evaluation strategy: {strategy!r}")

    @staticmethod
    def _first_operator(tokens):
        for index, token in enumerate(tokens):
            if token.is_operator:
                return index
        return None

    @staticmethod
    def evaluate_splice(tokens):
        """
        找到第一个操作符，用它前面的两个数字求值，
        把 (数字, 数字, 操作符) 三元组替换成结果后从头重新扫描。
        """
        if not tokens:
            raise EvaluationError(ErrorKind.EMPTY_EXPRESSION)

        while len(tokens) > 1:
            index = RPNEvaluator._first_operator(tokens)
            if index is None:
                logger.debug(f"No operator left in {format_postfix(tokens)}")
                raise EvaluationError(ErrorKind.SYNTAX_ERROR)
            if index < 2 or not (tokens[index - 2].is_number and tokens[index - 1].is_number):
                logger.debug(f"Insufficient operands at position {index} in {format_postfix(tokens)}")
                raise EvaluationError(ErrorKind.SYNTAX_ERROR, tokens[index].value.char)

            operand1 = tokens[index - 2].value
            operand2 = tokens[index - 1].value
            result = Operators.apply(tokens[index].value, operand1, operand2)
            tokens[index - 2:index + 1] = [Token.number(result)]

        last = tokens[0]
        if not last.is_number:
            raise EvaluationError(ErrorKind.SYNTAX_ERROR, last.value.char)
        return last.value

    @staticmethod
    def evaluate_stack(tokens):
        """单遍操作数栈求值，结果与 evaluate_splice 逐位一致"""
        if not tokens:
            raise EvaluationError(ErrorKind.EMPTY_EXPRESSION)

        stack = []
        for token in tokens:
            if token.is_number:
                stack.append(token.value)
                continue
            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token.value.name}")
                raise EvaluationError(ErrorKind.SYNTAX_ERROR, token.value.char)
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(Operators.apply(token.value, operand1, operand2))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvaluationError(ErrorKind.SYNTAX_ERROR)
        tokens.clear()
        return stack[0]
