"""
Function for moving numeric values between types without losing
information.  Used to keep dimension exponents as plain integers
wherever they are whole.
"""

import numbers


# ======================================================================


def coax_type(x, *types, default=None):
    """
    Try converting `x` into a series of types, returning first result
    which passes test:  next_type(`x`) - x == 0.

    Examples
    --------
    >>> from fractions import Fraction
    >>> coax_type(Fraction(3, 2), int, default=Fraction(3, 2))
    Fraction(3, 2)
    >>> coax_type(Fraction(4, 2), int)  # Whole exponent, int result.
    2
    >>> coax_type(3.0, int, str)  # int result.
    3
    >>> coax_type("3.0", int, float)  # Error: 3.0 != "3.0".
    Traceback (most recent call last):
    ...
    ValueError: Couldn't coax '3.0' to <class 'int'> or <class 'float'>.

    Parameters
    ----------
    x :
        Argument to be converted.
    types : list_like
        Target types to use when trying conversion.
    default :
        Value to return if conversion was unsuccessful.

    Returns
    -------
    x_converted :
        `x` converted to the first successful type (if possible) or
        default.

    Raises
    ------
    ValueError
        If default is None and conversion was unsuccessful.
    """
    for this_type in types:
        try:
            res = this_type(x)
            if isinstance(x, numbers.Number):
                # Equality test applies to numeric values.
                if res - x == 0:  # More robust when 'x' is a Fraction.
                    return res

        except (TypeError, ValueError, OverflowError):
            pass

    if default is not None:
        return default
    else:
        raise ValueError(f"Couldn't coax {repr(x)} to "
                         f"{' or '.join(str(t) for t in types)}.")
