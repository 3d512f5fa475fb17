from __future__ import annotations

import math
import re
from typing import NamedTuple

from ._catalog import CatalogIndex, get_catalog
from ._dim import (DimensionalFormula, DIMENSIONLESS, CalcValue,
                   _from_ucode_super)

# ======================================================================

# Characters folded before parsing: no-break, narrow no-break and thin
# spaces become ASCII spaces; Greek mu becomes the micro sign.
_FOLD_CHARS = str.maketrans({'\u00a0': ' ', '\u202f': ' ', '\u2009': ' ',
                             '\u03bc': '\u00b5'})

_SS_DIGITS = '⁰¹²³⁴⁵⁶⁷⁸⁹'
_MUL_OPS = '·⋅×*'

# noinspection RegExpUnnecessaryNonCapturingGroup
_number_rx = re.compile(r'''
    \s*
    (?P<sign>[-−+])?
    (?:
        (?P<digits>\d[\d.,]*|[.,]\d[\d.,]*)     # Digits with separators.
        (?P<exp>[eE][+-]?\d+)?                  # Exponent.
    )?
''', flags=re.VERBOSE)

# noinspection RegExpUnnecessaryNonCapturingGroup
_term_rx = re.compile(fr'''
    (?P<sym>[^\s{_MUL_OPS}/^{_SS_DIGITS}⁺⁻ᐧ()]+)           # Unit.
    (?:\^(?P<pow>[-−+]?\d+)|(?P<upow>[⁺⁻]?[{_SS_DIGITS}]+))?  # Power.
''', flags=re.VERBOSE)

_leading_number_rx = re.compile(r'\d*\.?\d*')


# ----------------------------------------------------------------------

class ParsedQuantity(NamedTuple):
    """
    Result of ``parse_quantity``.

    Attributes
    ----------
    original_value : float
        The number as typed (``1`` if absent).
    value : float
        The quantity in the base unit of its category, including any
        prefix factor.  Equal to `original_value` when no unit was
        recognised.
    dimensions : DimensionalFormula
        Formula of the quantity (dimensionless if no unit).
    category_id, unit_id, prefix_id : str or None
        Catalog identification where available.  Compound expressions
        have no `unit_id` and the category is found by formula.
    """
    original_value: float
    value: float
    dimensions: DimensionalFormula = DIMENSIONLESS
    category_id: str | None = None
    unit_id: str | None = None
    prefix_id: str | None = None

    def to_calc_value(self) -> CalcValue:
        return CalcValue(self.value, self.dimensions,
                         self.prefix_id or 'none')


# ======================================================================

def parse_quantity(text: str) -> ParsedQuantity:
    """
    Read a quantity pasted as free text, e.g. ``'15 min'``,
    ``'2,5 kN'``, ``'9.81 m·s⁻²'`` or ``'1.5e3 µs'``.

    The text is a number followed by a unit.  Either may be missing:
    an absent number counts as ``1`` and an absent or unrecognised unit
    leaves the catalog fields as ``None``.  Parsing never raises.

    Number rules:

        - Optional sign (``-``, ``−`` or ``+``) and exponent (``e3``).
        - A single comma with no dot is a decimal comma.  Where both
          appear, the later one is the decimal separator and the other
          is digit grouping.  Several commas alone are digit grouping.
        - Extra decimal points are ignored from the second one on.

    Unit rules, in order of preference:

        1. A catalog symbol or alias, e.g. ``min``, ``Po``, ``°C``.
        2. A prefix followed by a unit that allows prefixes, e.g.
           ``kN``, ``µs``, ``MiB``.
        3. A compound expression of linear units joined by ``·``,
           ``⋅``, ``×``, ``*`` or ``/`` with optional ``^n`` or
           superscript powers, reduced left to right, e.g.
           ``kg⋅m⁻³``.  A leading ``1/`` or ``/`` inverts the first
           term.

    Examples
    --------
    >>> q = parse_quantity('15 min')
    >>> q.original_value, q.value, q.category_id, q.unit_id
    (15.0, 900.0, 'time', 'min')
    >>> parse_quantity('10 P').unit_id is None  # Bare Peta prefix.
    True
    """
    text = text.translate(_FOLD_CHARS)
    number, unit_text = _split_number(text)
    orig_value = 1.0 if number is None else number
    unit_text = unit_text.strip()

    if unit_text:
        res = _resolve_unit(unit_text, orig_value, get_catalog())
        if res is not None:
            return res

    return ParsedQuantity(orig_value, orig_value)


# ----------------------------------------------------------------------

def _read_digits(digits: str) -> str:
    """
    Convert a run of digits and separators into a string suitable for
    ``float``, keeping only the longest valid leading part.
    """
    if '.' in digits and ',' in digits:
        if digits.rfind('.') > digits.rfind(','):
            digits = digits.replace(',', '')
        else:
            digits = digits.replace('.', '').replace(',', '.')

    elif ',' in digits:
        if digits.count(',') == 1:
            digits = digits.replace(',', '.')
        else:
            digits = digits.replace(',', '')

    return _leading_number_rx.match(digits).group()


def _split_number(text: str) -> tuple[float | None, str]:
    """
    Returns the leading number of `text` (or ``None``) and the remaining
    text.
    """
    m = _number_rx.match(text)
    if not m['digits']:
        return None, text

    num_str = _read_digits(m['digits'])
    if not any(c.isdigit() for c in num_str):
        return None, text

    value = float(num_str + (m['exp'] or ''))
    if m['sign'] in ('-', '−'):
        value = -value
    return value, text[m.end():]


def _resolve_unit(unit_text: str, value: float,
                  catalog: CatalogIndex) -> ParsedQuantity | None:
    # Single symbol, with or without a prefix.
    res = catalog.resolve_symbol(unit_text)
    if res is None:
        res = catalog.resolve_prefixed(unit_text)

    if res is not None:
        cat = catalog.category(res.category_id)
        unit = cat.unit(res.unit_id)
        pf = catalog.prefix(res.prefix_id).factor if res.prefix_id else 1
        return ParsedQuantity(value, unit.rule.to_base(value * pf),
                              cat.dimensions, cat.id, unit.id,
                              res.prefix_id)

    # Compound expression.
    reduced = _reduce_expression(''.join(unit_text.split()), catalog)
    if reduced is None:
        return None

    factor, dims = reduced
    cat = catalog.find_category(dims)
    return ParsedQuantity(value, value * factor, dims,
                          cat.id if cat else None)


def _resolve_term(sym: str, catalog: CatalogIndex
                  ) -> tuple[float, DimensionalFormula] | None:
    """
    Returns the factor to SI-coherent units and formula of a single
    (possibly prefixed) term of a compound expression.  Only linear
    units are accepted.
    """
    res = catalog.resolve_symbol(sym) or catalog.resolve_prefixed(sym)
    if res is None:
        return None

    cat = catalog.category(res.category_id)
    factor = cat.unit(res.unit_id).rule.linear_factor
    if factor is None:
        return None
    if res.prefix_id:
        factor *= catalog.prefix(res.prefix_id).factor
    return factor, cat.dimensions


def _reduce_expression(expr: str, catalog: CatalogIndex
                       ) -> tuple[float, DimensionalFormula] | None:
    """
    Reduce a compound unit expression left to right, returning the
    overall factor to SI-coherent units and the formula, or ``None`` if
    any part is not understood.
    """
    if expr.startswith('1/'):
        expr = expr[1:]

    pos, op = 0, '*'
    if expr.startswith('/'):
        pos, op = 1, '/'

    factor, dims = 1.0, DIMENSIONLESS
    while True:
        m = _term_rx.match(expr, pos)
        if not m:
            return None

        term = _resolve_term(m['sym'], catalog)
        if term is None:
            return None
        t_factor, t_dims = term

        try:
            if m['pow']:
                pwr = int(m['pow'].replace('−', '-'))
            elif m['upow']:
                pwr = int(_from_ucode_super(m['upow']))
            else:
                pwr = 1
            if op == '/':
                pwr = -pwr

            factor *= t_factor ** pwr
        except (OverflowError, ValueError):
            # Power too large to represent.
            return None
        dims *= t_dims ** pwr

        pos = m.end()
        if pos == len(expr):
            return factor, dims

        if expr[pos] in _MUL_OPS:
            op = '*'
        elif expr[pos] == '/':
            op = '/'
        else:
            return None
        pos += 1


# == Sexagesimal Formats ===============================================

def _plain_number(text: str) -> float:
    """Number occupying all of `text`, otherwise ``nan``."""
    value, rest = _split_number(text.translate(_FOLD_CHARS))
    if value is None or rest.strip():
        return math.nan
    return value


def _mixed_radix(parts: list[str], radices: tuple[int, ...]) -> float:
    values = [_plain_number(p) for p in parts]
    if not values or len(values) > len(radices) + 1:
        return math.nan

    # The sign of the leading part applies to every part.
    sign = math.copysign(1, values[0])
    res, scale = values[0], 1
    for v, radix in zip(values[1:], radices):
        scale *= radix
        res += sign * v / scale
    return res


def parse_dms(text: str) -> float:
    """
    Read an angle in degrees written as ``D:M:S`` (any trailing parts
    may be omitted), e.g. ``'-12:30:36'`` -> ``-12.51``.  A plain number
    is read as decimal degrees.  Returns ``nan`` if unreadable.
    """
    return _mixed_radix(text.strip().split(':'), (60, 60))


def parse_ft_in(text: str) -> float:
    """
    Read a length in feet written as ``F'I"`` or ``F:I``, e.g.
    ``5'6"`` -> ``5.5``.  A plain number is read as decimal feet.
    Returns ``nan`` if unreadable.
    """
    text = re.sub('[\'"′″]', ':', text.strip()).rstrip(':')
    return _mixed_radix(text.split(':'), (12,))
