"""utils/formatting.py"""
import numpy as np


def format_result(value):
    """
    结果的输出形式：最短可还原的定点表示，整数不带 '.0'
    例如 4.0 -> '4', 0.5 -> '0.5', inf -> 'inf', nan -> 'NaN'
    """
    value = np.float64(value)
    if np.isnan(value):
        return 'NaN'
    if np.isinf(value):
        return 'inf' if value > 0 else '-inf'
    return np.format_float_positional(value, trim='-')
