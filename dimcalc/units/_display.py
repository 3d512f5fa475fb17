"""
Helpers for presenting calculated values: choosing a prefix, offering
alternative compound symbols and sexagesimal formats.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real

from ._catalog import Prefix, NO_PREFIX, get_catalog
from ._defs import SI_DERIVED_UNITS
from ._dim import (DimensionalFormula, BASE_SYMBOLS, _as_formula,
                   _from_ucode_super, is_dimensionless, render_symbol)
from ._opts import get_unit_options


# ======================================================================

def find_optimal_prefix(value: float, unit_symbol: str = '',
                        precision: int = None) -> tuple[Prefix, float]:
    """
    Choose the decimal prefix giving the most readable display of
    `value`.

    Parameters
    ----------
    value : float
        Value in the unprefixed unit.
    unit_symbol : str, default = ''
        Symbol of the unit.  If it contains ``kg`` the value is first
        taken as grams so that e.g. 1000 kg becomes 1 Mg.
    precision : int, optional
        Decimal digits shown.  If the best prefix would display the
        value as zero at this precision, a smaller prefix is used.
        Default is the ``display_precision`` unit option.

    Returns
    -------
    prefix, adjusted : Prefix, float
        The prefix (``NO_PREFIX`` for none) and the value scaled by it.
        Zero, infinite or NaN values give ``NO_PREFIX`` and the value
        unchanged.

    Examples
    --------
    >>> p, v = find_optimal_prefix(5000)
    >>> p.id, v
    ('kilo', 5.0)
    """
    if precision is None:
        precision = get_unit_options().display_precision

    eff_value = value * 1000 if 'kg' in unit_symbol else value
    abs_value = abs(eff_value)
    if abs_value == 0 or not math.isfinite(abs_value):
        return NO_PREFIX, value

    prefixes = get_catalog().prefixes(binary=False)

    # Smallest |log10| of the adjusted value in [1, 1000) wins.
    best, best_score = NO_PREFIX, abs(math.log10(abs_value))
    for prefix in prefixes:
        adjusted = abs_value / prefix.factor
        if 1 <= adjusted < 1000:
            score = abs(math.log10(adjusted))
            if score < best_score:
                best, best_score = prefix, score

    if round(eff_value / best.factor, precision) == 0:
        for prefix in prefixes:
            if prefix.factor >= best.factor:
                continue
            if round(abs_value / prefix.factor, precision) != 0:
                best = prefix
                break

    return best, eff_value / best.factor


# ----------------------------------------------------------------------

def _can_factor_out(d: DimensionalFormula,
                    derived: DimensionalFormula) -> bool:
    # Each exponent of the derived unit must have the same sign as that
    # of `d` and be no larger in magnitude.
    for p_derived, p_d in zip(derived, d):
        if p_derived > 0 and p_d < p_derived:
            return False
        if p_derived < 0 and p_d > p_derived:
            return False
    return True


def alternative_representations(d: DimensionalFormula | Mapping[str, Real]
                                ) -> list[str]:
    """
    Candidate display symbols for a formula.

    The first entry is always the compound SI symbol from
    ``render_symbol``.  If the formula matches an SI derived unit
    exactly, that unit's symbol follows and nothing else is offered.
    Otherwise each derived unit that can be factored out of the formula
    gives a hybrid symbol ``<remainder>⋅<derived>``, provided something
    remains and the remainder uses only dimensions present in `d`.

    Examples
    --------
    >>> alternative_representations({'mass': 1, 'length': 2, 'time': -2})
    ['kg⋅m²⋅s⁻²', 'J']
    """
    d = _as_formula(d)
    alts = [render_symbol(d)]
    if is_dimensionless(d):
        return alts

    catalog = get_catalog()
    derived = [(sym, catalog.category(cat_id).dimensions)
               for sym, (cat_id, _) in SI_DERIVED_UNITS.items()]

    for sym, dims in derived:
        if dims == d:
            alts.append(sym)
            return alts

    sep = get_unit_options().symbol_separator
    for sym, dims in derived:
        if not _can_factor_out(d, dims):
            continue

        remaining = d / dims
        if is_dimensionless(remaining):
            continue
        if any(p_rem != 0 and p_d == 0 for p_rem, p_d in zip(remaining, d)):
            continue

        alts.append(f"{render_symbol(remaining)}{sep}{sym}")

    return alts


def count_units(symbol: str) -> int:
    """Number of terms in a compound symbol; ``''`` and ``'1'`` have
    none."""
    if not symbol or symbol == '1':
        return 0
    return len(symbol.split(get_unit_options().symbol_separator))


def is_valid_symbol_representation(symbol: str) -> bool:
    """
    Returns `False` if the compound `symbol` names any SI base unit
    more than once (e.g. ``m⋅J⋅m``), otherwise `True`.
    """
    if not symbol or symbol == '1':
        return True

    seen = set()
    base_syms = set(BASE_SYMBOLS.values())
    for part in symbol.split(get_unit_options().symbol_separator):
        # Strip any power.
        base = _from_ucode_super(part).rstrip('+-.0123456789').rstrip('^')
        if base in base_syms:
            if base in seen:
                return False
            seen.add(base)
    return True


# == Sexagesimal Formats ===============================================

def format_dms(degrees: float, precision: int = 2) -> str:
    """
    Format decimal degrees as ``D:MM:SS.ss`` with `precision` decimal
    places on the seconds.

    >>> format_dms(-12.51)
    '-12:30:36.00'
    """
    sign = '-' if degrees < 0 else ''
    # Round on total seconds so that 59.999.. carries into minutes.
    total_s = round(abs(degrees) * 3600, precision)
    d, rem = divmod(total_s, 3600)
    m, s = divmod(rem, 60)
    d, m = int(d), int(m)

    s_int, _, s_dec = f"{s:.{precision}f}".partition('.')
    s_str = s_int.zfill(2) + (f".{s_dec}" if s_dec else '')
    return f"{sign}{d}:{m:02d}:{s_str}"


def format_ft_in(feet: float, precision: int = 2) -> str:
    """
    Format decimal feet as ``F'I.ii"`` with `precision` decimal places
    on the inches.

    >>> format_ft_in(5.5)
    '5\\'6.00"'
    """
    sign = '-' if feet < 0 else ''
    ft, inches = divmod(round(abs(feet) * 12, precision), 12)
    ft = int(ft)
    return f"{sign}{ft}'{inches:.{precision}f}\""
