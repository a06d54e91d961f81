import math

import numpy as np
import pytest

from core.errors import ErrorKind, EvaluationError
from core.operators import (
    Associativity, OperatorSymbol, Operators, OPERATOR_DEFINITIONS
)


@pytest.mark.parametrize("char, symbol", [
    ('+', OperatorSymbol.ADD),
    ('-', OperatorSymbol.SUB),
    ('*', OperatorSymbol.MUL),
    ('/', OperatorSymbol.DIV),
    ('^', OperatorSymbol.EXP),
    ('(', OperatorSymbol.LEFT_PAREN),
    (')', OperatorSymbol.RIGHT_PAREN),
])
def test_from_char(char, symbol):
    assert Operators.from_char(char) is symbol


@pytest.mark.parametrize("char", ['%', '@', '7', '.', 'x', ' '])
def test_from_char_not_an_operator(char):
    assert Operators.from_char(char) is None


@pytest.mark.parametrize("symbol, precedence, associativity", [
    (OperatorSymbol.ADD, 2, Associativity.LEFT),
    (OperatorSymbol.SUB, 2, Associativity.LEFT),
    (OperatorSymbol.MUL, 3, Associativity.LEFT),
    (OperatorSymbol.DIV, 3, Associativity.LEFT),
    (OperatorSymbol.EXP, 4, Associativity.RIGHT),
    (OperatorSymbol.LEFT_PAREN, 0, Associativity.RIGHT),
    (OperatorSymbol.RIGHT_PAREN, 0, Associativity.RIGHT),
])
def test_precedence_and_associativity(symbol, precedence, associativity):
    assert Operators.precedence(symbol) == precedence
    assert Operators.associativity(symbol) is associativity


def test_table_is_read_only():
    with pytest.raises(TypeError):
        OPERATOR_DEFINITIONS['%'] = OPERATOR_DEFINITIONS['+']


@pytest.mark.parametrize("symbol, a, b, expected", [
    (OperatorSymbol.ADD, 2.0, 3.0, 5.0),
    (OperatorSymbol.SUB, 2.0, 3.0, -1.0),
    (OperatorSymbol.MUL, 2.5, 4.0, 10.0),
    (OperatorSymbol.DIV, 7.0, 2.0, 3.5),
    (OperatorSymbol.EXP, 2.0, 10.0, 1024.0),
    (OperatorSymbol.EXP, 0.0, 0.0, 1.0),
    (OperatorSymbol.EXP, 4.0, 0.5, 2.0),
])
def test_apply(symbol, a, b, expected):
    result = Operators.apply(symbol, a, b)
    assert isinstance(result, np.float64)
    assert result == expected


@pytest.mark.parametrize("divisor", [0.0, -0.0])
def test_divide_by_zero(divisor):
    with pytest.raises(EvaluationError) as excinfo:
        Operators.apply(OperatorSymbol.DIV, 5.0, divisor)
    assert excinfo.value.kind is ErrorKind.DIVISION_BY_ZERO


def test_divide_by_tiny_number_overflows_to_infinity():
    assert Operators.apply(OperatorSymbol.DIV, 1.0, 1e-320) == math.inf


def test_ieee_results_propagate():
    assert Operators.apply(OperatorSymbol.EXP, 0.0, -1.0) == math.inf
    assert Operators.apply(OperatorSymbol.MUL, 1e308, 10.0) == math.inf
    assert math.isnan(Operators.apply(OperatorSymbol.EXP, -8.0, 1.0 / 3.0))
    assert math.isnan(Operators.apply(OperatorSymbol.SUB, math.inf, math.inf))


@pytest.mark.parametrize("symbol", [OperatorSymbol.LEFT_PAREN, OperatorSymbol.RIGHT_PAREN])
def test_parens_cannot_be_applied(symbol):
    with pytest.raises(EvaluationError) as excinfo:
        Operators.apply(symbol, 1.0, 2.0)
    assert excinfo.value.kind is ErrorKind.SYNTAX_ERROR
