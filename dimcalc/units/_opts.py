from __future__ import annotations

from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Immutable set of process-wide flags controlling how dimensioned
    values are rendered and checked.  Use `get_unit_options` to read
    the current set and `set_unit_options` to change it.
    """
    unicode_str: bool
    symbol_separator: str
    display_precision: int
    warn_affine_prefix: bool

    def __post_init__(self):
        """Reject out of range values."""
        if self.display_precision < 0:
            raise ValueError("Require 'display_precision' >= 0.")
        if not self.symbol_separator:
            raise ValueError("Require a non-empty 'symbol_separator'.")


# Current options, starting from the defaults.
_unit_options = UnitOptions(
    unicode_str=True,
    symbol_separator='⋅',
    display_precision=8,
    warn_affine_prefix=True
)


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        Copy of the options currently in force.  Each option is
        described under `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Replace one or more of the current unit options.

    Parameters
    ----------
    unicode_str : bool, default = True
        Generate unicode characters for superscripts when compound unit
        symbols are rendered from a dimensional formula.  If `False` the
        caret '^' is used instead, e.g. ``m^2`` or ``s^-1``.

    symbol_separator : str, default = '⋅'
        String placed between the individual terms of a rendered
        compound symbol.

    display_precision : int, default = 8
        Number of decimal digits used when checking whether a value
        scaled by a prefix would display as zero (see
        `find_optimal_prefix`).

    warn_affine_prefix : bool, default = True
        Issue an ``AffinePrefixWarning`` if a prefix factor is applied
        to a unit with an offset scale (e.g. "milli-°C").  The
        arithmetic is applied regardless.

    Raises
    ------
    ValueError
        If an option has an illegal value.

    See Also
    --------
    get_unit_options

    Examples
    --------
    Powers are rendered as Unicode superscripts by default:
    >>> from dimcalc.units import render_symbol, DimensionalFormula
    >>> render_symbol(DimensionalFormula(length=2))
    'm²'

    Plain ASCII carets can be requested instead:
    >>> set_unit_options(unicode_str=False)
    >>> render_symbol(DimensionalFormula(length=2))
    'm^2'
    >>> set_unit_options(unicode_str=True)  # Restore default.
    """
    global _unit_options
    _unit_options = replace(_unit_options, **kwargs)
