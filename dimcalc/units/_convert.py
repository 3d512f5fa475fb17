from __future__ import annotations

import math
import warnings

from ._catalog import Affine, get_catalog
from ._mathfn import MATH_FUNCTIONS, evaluate
from ._opts import get_unit_options


# ======================================================================

class AffinePrefixWarning(UserWarning):
    """
    Issued when a prefix factor is applied to a unit with an offset
    scale (e.g. 'milli-°C'), which has no clear physical meaning.
    """
    pass


# ----------------------------------------------------------------------

def convert(value: float, from_unit: str, to_unit: str, category: str,
            from_prefix_factor: float = 1,
            to_prefix_factor: float = 1) -> float:
    """
    Convert `value` between two units of the same category.

    The value is scaled by `from_prefix_factor`, converted to the base
    unit of the category by the source unit's conversion rule, converted
    from the base unit by the target unit's rule and finally divided by
    `to_prefix_factor`.  For linear units this gives::

        result = value * from_pf * from_factor / (to_factor * to_pf)

    and for affine (offset) units::

        base = (value * from_pf + from_offset) * from_factor
        result = (base / to_factor - to_offset) / to_pf

    Functional units (e.g. photon wavelength) apply their forward
    function and the target's inverse function in the same positions.

    Parameters
    ----------
    value : float
        Value to convert.
    from_unit, to_unit : str
        Unit ids within `category`.
    category : str
        Category id.
    from_prefix_factor, to_prefix_factor : float, default = 1
        Multipliers of any prefixes attached to the units.

    Returns
    -------
    result : float
        Converted value, or ``0`` if `category`, `from_unit` or
        `to_unit` are not in the catalog.

    Examples
    --------
    >>> round(convert(0, 'c', 'f', 'temperature'), 6)
    32.0
    >>> convert(5, 'm', 'm', 'length', from_prefix_factor=1000)
    5000.0
    """
    catalog = get_catalog()
    src = catalog.unit(category, from_unit)
    dst = catalog.unit(category, to_unit)
    if src is None or dst is None:
        return 0

    if get_unit_options().warn_affine_prefix:
        for unit, pf in ((src, from_prefix_factor), (dst, to_prefix_factor)):
            if (pf != 1 and isinstance(unit.rule, Affine) and
                    unit.rule.offset != 0):
                warnings.warn(f"Prefix factor {pf} applied to offset "
                              f"scale unit '{unit.symbol}'.",
                              AffinePrefixWarning, stacklevel=2)

    base = src.rule.to_base(value * from_prefix_factor)
    return dst.rule.from_base(base) / to_prefix_factor


def to_base(value: float, unit: str, category: str,
            prefix_factor: float = 1) -> float:
    """
    Convert `value` in a unit (with optional prefix) to the base unit of
    its category.  Returns ``NaN`` if the unit is unknown.
    """
    catalog = get_catalog()
    cat = catalog.category(category)
    if cat is None or cat.unit(unit) is None:
        return math.nan
    return convert(value, unit, cat.base_unit, category,
                   from_prefix_factor=prefix_factor)


def apply_math_function(value: float, fn_id: str) -> float:
    """
    Evaluate a unary math function by id.  See ``MATH_FUNCTIONS`` for
    the available functions.

    Out of domain arguments give IEEE results rather than errors, e.g.
    ``sqrt(-1)`` is ``nan`` and ``ln(0)`` is ``-inf``.  ``round`` rounds
    halves upwards (``round(-3.5) == -3``).  An unknown `fn_id` gives
    ``nan``.

    >>> apply_math_function(-3.5, 'round')
    -3.0
    """
    try:
        fn = MATH_FUNCTIONS[fn_id]
    except KeyError:
        return math.nan
    return evaluate(fn, value)
