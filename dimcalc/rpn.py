"""
=====================================
RPN Stack (:mod:`dimcalc.rpn`)
=====================================

.. currentmodule:: dimcalc.rpn

A four register (X, Y, Z, T) stack machine for dimensioned values with
single level undo.

.. autosummary::
    :toctree:

    RpnStack
"""
from __future__ import annotations

import math
from collections.abc import Callable
from fractions import Fraction
from numbers import Real

from dimcalc.units import (CalcValue, DimensionalFormula, DIMENSIONLESS,
                           MATH_FUNCTIONS, divide, equal, is_dimensionless,
                           multiply)
from dimcalc.units._mathfn import (DIMENSION_POWERS, FORWARD_TRIG,
                                   INVERSE_TRIG, evaluate)

# ======================================================================

_ANGLE = DimensionalFormula(angle=1)

_Registers = tuple[CalcValue | None, CalcValue | None,
                   CalcValue | None, CalcValue | None]


# ----------------------------------------------------------------------

def _ceil_exponents(d: DimensionalFormula) -> DimensionalFormula:
    return DimensionalFormula(*(math.ceil(p) for p in d))


def _add(y: CalcValue, x: CalcValue) -> CalcValue | None:
    if not equal(y.dimensions, x.dimensions):
        return None
    return CalcValue(y.value + x.value, y.dimensions)


def _subtract(y: CalcValue, x: CalcValue) -> CalcValue | None:
    if not equal(y.dimensions, x.dimensions):
        return None
    return CalcValue(y.value - x.value, y.dimensions)


def _multiply(y: CalcValue, x: CalcValue) -> CalcValue:
    return CalcValue(y.value * x.value, multiply(y.dimensions, x.dimensions))


def _divide(y: CalcValue, x: CalcValue) -> CalcValue | None:
    if x.value == 0:
        return None
    return CalcValue(y.value / x.value, divide(y.dimensions, x.dimensions))


_BINARY_OPS: dict[str, Callable] = {
    '+': _add, '-': _subtract, '−': _subtract,
    '×': _multiply, '*': _multiply, '÷': _divide, '/': _divide}


# ======================================================================

class RpnStack:
    """
    Session-owned RPN stack of ``CalcValue`` registers.

    Register X (index 0) is the top of the stack, followed by Y, Z and
    T.  An empty register is ``None``.  Before each change the prior
    registers are kept as a snapshot for ``undo``.  Binary operators
    also keep the X operand as 'last X' for ``recall_last_x``.

    Every operation returns `True` if it was applied.  Operations that
    are refused (e.g. adding a length to a time, dividing by zero) or
    that have nothing to act on return `False` and leave the stack,
    snapshot and last X unchanged.

    Examples
    --------
    >>> from dimcalc.units import parse_quantity
    >>> stack = RpnStack()
    >>> stack.push(parse_quantity('3 m').to_calc_value())
    True
    >>> stack.push(parse_quantity('2 s').to_calc_value())
    True
    >>> stack.add()  # Length + time is refused.
    False
    >>> stack.divide()
    True
    >>> stack.x.value, str(stack.x.dimensions)
    (1.5, 'm⋅s⁻¹')
    """

    def __init__(self):
        self._regs: list[CalcValue | None] = [None] * 4
        self._snapshot: _Registers | None = None
        self._last_x: CalcValue | None = None

        # Display state, reset whenever the stack shape changes.
        self.result_prefix = 'none'
        self.selected_alternative = 0

        # Entry of a new X value in progress.
        self.x_editing = False
        self.x_edit_value = ''

    def __repr__(self):
        regs = ', '.join(f"{n}={r!r}" for n, r in zip('xyzt', self._regs))
        return f"RpnStack({regs})"

    # -- Registers -----------------------------------------------------

    @property
    def x(self) -> CalcValue | None:
        return self._regs[0]

    @property
    def y(self) -> CalcValue | None:
        return self._regs[1]

    @property
    def z(self) -> CalcValue | None:
        return self._regs[2]

    @property
    def t(self) -> CalcValue | None:
        return self._regs[3]

    @property
    def registers(self) -> _Registers:
        """Registers in order X, Y, Z, T."""
        return tuple(self._regs)

    @property
    def last_x(self) -> CalcValue | None:
        return self._last_x

    @property
    def snapshot(self) -> _Registers | None:
        """Registers as they were before the last change, if any."""
        return self._snapshot

    # -- Stack Operations ----------------------------------------------

    def push(self, value: CalcValue | Real) -> bool:
        """
        Push `value` onto X, lifting the other registers (the prior T
        is lost).  A plain number is pushed as a dimensionless value.
        """
        if not isinstance(value, CalcValue):
            value = CalcValue(float(value))

        self._save()
        self._regs = [value] + self._regs[:3]
        return True

    def drop(self) -> bool:
        """
        Remove X, dropping the other registers down.  T is repeated
        into Z.  Returns `False` if the stack is empty.
        """
        if not any(r is not None for r in self._regs):
            return False

        self._save()
        self._regs = self._regs[1:] + [self._regs[3]]
        return True

    def swap_xy(self) -> bool:
        """Exchange X and Y.  Both must be present."""
        if self._regs[0] is None or self._regs[1] is None:
            return False

        self._save()
        self._regs[0], self._regs[1] = self._regs[1], self._regs[0]
        return True

    def clear(self) -> bool:
        """
        Empty all registers, last X and any value entry in progress.
        The prior registers remain available to ``undo``.
        """
        self._save()
        self._regs = [None] * 4
        self._last_x = None
        self.x_editing = False
        self.x_edit_value = ''
        return True

    def undo(self) -> bool:
        """
        Restore the registers as they were before the last change.  Only
        one level is kept, so a second ``undo`` reverses the first.
        Returns `False` if there is nothing to undo.
        """
        if self._snapshot is None:
            return False

        current = tuple(self._regs)
        self._regs = list(self._snapshot)
        self._snapshot = current
        self._reset_display()
        return True

    def recall_last_x(self) -> bool:
        """Push the last X operand again, if there is one."""
        if self._last_x is None:
            return False
        return self.push(self._last_x)

    # -- Binary Operators ----------------------------------------------

    def add(self) -> bool:
        """Y + X.  The dimensions of X and Y must be equal."""
        return self._apply_binary(_add)

    def subtract(self) -> bool:
        """Y - X.  The dimensions of X and Y must be equal."""
        return self._apply_binary(_subtract)

    def multiply(self) -> bool:
        return self._apply_binary(_multiply)

    def divide(self) -> bool:
        """Y / X.  Refused if X is zero."""
        return self._apply_binary(_divide)

    def apply_binary(self, symbol: str) -> bool:
        """
        Apply the binary operator given by `symbol`, one of ``+``,
        ``-`` (or ``−``), ``×`` (or ``*``) and ``÷`` (or ``/``).  An
        unknown symbol returns `False`.
        """
        try:
            op = _BINARY_OPS[symbol]
        except KeyError:
            return False
        return self._apply_binary(op)

    # -- Unary Operators -----------------------------------------------

    def square(self) -> bool:
        return self._apply_unary(lambda x: CalcValue(
            x.value * x.value, multiply(x.dimensions, x.dimensions)))

    def cube(self) -> bool:
        return self._apply_unary(lambda x: CalcValue(
            x.value * x.value * x.value, x.dimensions ** 3))

    def sqrt(self, ceil_exponents: bool = False) -> bool:
        """
        Square root of X, halving each dimension exponent.  Refused if
        X is negative.  Odd exponents give fractional results (e.g.
        m³ -> m^1.5) unless `ceil_exponents` is `True`, in which case
        each exponent is rounded up to a whole number.
        """
        def op(x: CalcValue) -> CalcValue | None:
            if x.value < 0:
                return None
            dims = x.dimensions ** Fraction(1, 2)
            if ceil_exponents:
                dims = _ceil_exponents(dims)
            return CalcValue(math.sqrt(x.value), dims)

        return self._apply_unary(op)

    def cbrt(self, ceil_exponents: bool = False) -> bool:
        """
        Cube root of X, dividing each dimension exponent by three.
        Negative values are allowed.  See ``sqrt`` for `ceil_exponents`.
        """
        def op(x: CalcValue) -> CalcValue:
            dims = x.dimensions ** Fraction(1, 3)
            if ceil_exponents:
                dims = _ceil_exponents(dims)
            return CalcValue(evaluate(MATH_FUNCTIONS['cbrt'], x.value), dims)

        return self._apply_unary(op)

    def apply_function(self, fn_id: str) -> bool:
        """
        Apply a named math function (see ``MATH_FUNCTIONS``) to X.

        The resulting dimensions are:

            - ``sin``, ``cos``, ``tan``:  Dimensionless if X is a plane
              angle, otherwise unchanged.
            - ``asin``, ``acos``, ``atan``:  A plane angle if X is
              dimensionless, otherwise unchanged.
            - ``square``, ``cube``, ``pow4``, ``sqrt``, ``cbrt``,
              ``root4``:  Exponents scaled by the matching power.
            - Any other function:  Unchanged.

        Out of domain values are not refused and give ``nan`` or
        ``±inf``, e.g. ``ln`` of zero.  An unknown `fn_id` returns
        `False`.
        """
        try:
            fn = MATH_FUNCTIONS[fn_id]
        except KeyError:
            return False

        def op(x: CalcValue) -> CalcValue:
            dims = x.dimensions
            if fn_id in FORWARD_TRIG:
                if dims == _ANGLE:
                    dims = DIMENSIONLESS
            elif fn_id in INVERSE_TRIG:
                if is_dimensionless(dims):
                    dims = _ANGLE
            elif fn_id in DIMENSION_POWERS:
                dims = dims ** Fraction(*DIMENSION_POWERS[fn_id])
            return CalcValue(evaluate(fn, x.value), dims)

        return self._apply_unary(op)

    def multiply_plain(self, factor: float) -> bool:
        """Scale X by a plain number, keeping its dimensions."""
        return self._apply_unary(lambda x: x._replace(
            value=x.value * factor))

    def divide_plain(self, divisor: float) -> bool:
        """Divide X by a plain number, keeping its dimensions.  Refused
        if `divisor` is zero."""
        if divisor == 0:
            return False
        return self._apply_unary(lambda x: x._replace(
            value=x.value / divisor))

    # -- Private Methods -----------------------------------------------

    def _apply_binary(self, op: Callable[[CalcValue, CalcValue],
                                         CalcValue | None]) -> bool:
        # Result replaces X and Y, then Z and T drop with T repeated.
        x, y = self._regs[0], self._regs[1]
        if x is None or y is None:
            return False

        res = op(y, x)
        if res is None:
            return False

        self._save()
        self._last_x = x
        self._regs = [res, self._regs[2], self._regs[3], self._regs[3]]
        return True

    def _apply_unary(self, op: Callable[[CalcValue],
                                        CalcValue | None]) -> bool:
        x = self._regs[0]
        if x is None:
            return False

        res = op(x)
        if res is None:
            return False

        self._save()
        self._regs[0] = res
        return True

    def _reset_display(self):
        self.result_prefix = 'none'
        self.selected_alternative = 0

    def _save(self):
        self._snapshot = tuple(self._regs)
        self._reset_display()
