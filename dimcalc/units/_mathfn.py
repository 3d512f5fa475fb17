"""
Unary math functions available to the calculator and to the 'math'
category.  All are evaluated with NumPy so that out-of-domain arguments
give IEEE NaN / ±inf instead of raising.
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np

# ======================================================================


def _round_half_up(x):
    # Halves round towards +inf, i.e. round(-3.5) == -3.
    return np.floor(x + 0.5)


# Function id -> implementation.
MATH_FUNCTIONS: dict[str, Callable] = {
    'sin': np.sin, 'cos': np.cos, 'tan': np.tan,
    'asin': np.arcsin, 'acos': np.arccos, 'atan': np.arctan,
    'sqrt': np.sqrt, 'cbrt': np.cbrt, 'root4': lambda x: np.power(x, 0.25),
    'log10': np.log10, 'log2': np.log2, 'ln': np.log, 'exp': np.exp,
    'abs': np.abs,
    'sinh': np.sinh, 'cosh': np.cosh, 'tanh': np.tanh,
    'asinh': np.arcsinh, 'acosh': np.arccosh, 'atanh': np.arctanh,
    'floor': np.floor, 'ceil': np.ceil, 'round': _round_half_up,
    'trunc': np.trunc, 'sign': np.sign,
    'square': np.square, 'cube': lambda x: np.power(x, 3),
    'pow4': lambda x: np.power(x, 4),
}

# Inverse functions where they exist.
MATH_INVERSES: dict[str, Callable] = {
    'sin': np.arcsin, 'cos': np.arccos, 'tan': np.arctan,
    'asin': np.sin, 'acos': np.cos, 'atan': np.tan,
    'sqrt': np.square, 'cbrt': lambda x: np.power(x, 3),
    'root4': lambda x: np.power(x, 4),
    'log10': lambda x: np.power(10.0, x), 'log2': np.exp2,
    'ln': np.exp, 'exp': np.log,
    'sinh': np.arcsinh, 'cosh': np.arccosh, 'tanh': np.arctanh,
    'asinh': np.sinh, 'acosh': np.cosh, 'atanh': np.tanh,
    'square': np.sqrt, 'cube': np.cbrt,
    'pow4': lambda x: np.power(x, 0.25),
}

# Power applied to dimension exponents by the calculator.
DIMENSION_POWERS = {'sqrt': (1, 2), 'cbrt': (1, 3), 'root4': (1, 4),
                    'square': (2, 1), 'cube': (3, 1), 'pow4': (4, 1)}

FORWARD_TRIG = ('sin', 'cos', 'tan')
INVERSE_TRIG = ('asin', 'acos', 'atan')


# ----------------------------------------------------------------------

def evaluate(fn: Callable, value: float) -> float:
    """Evaluate `fn` at `value` as a Python float, silencing NumPy
    floating point warnings."""
    with np.errstate(all='ignore'):
        return float(fn(np.float64(value)))
