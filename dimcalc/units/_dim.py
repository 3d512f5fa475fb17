from __future__ import annotations

from collections import namedtuple
from collections.abc import Mapping
from fractions import Fraction
from numbers import Rational, Real
from typing import NamedTuple

from dimcalc.util.type_ops import coax_type
from ._opts import get_unit_options

# ======================================================================

# Storage order of the base dimensions.
BASE_DIMENSIONS = ('length', 'mass', 'time', 'current', 'temperature',
                   'amount', 'intensity', 'angle', 'solid_angle')

# Order used when rendering compound symbols.
RENDER_ORDER = ('mass', 'length', 'time', 'current', 'temperature',
                'amount', 'intensity', 'angle', 'solid_angle')

BASE_SYMBOLS = {'length': 'm', 'mass': 'kg', 'time': 's', 'current': 'A',
                'temperature': 'K', 'amount': 'mol', 'intensity': 'cd',
                'angle': 'rad', 'solid_angle': 'sr'}

_UCODE_SS_CHARS = ('⁺⁻ᐧ⁰¹²³⁴⁵⁶⁷⁸⁹', '+-.0123456789')

Exponent = int | Fraction


# ----------------------------------------------------------------------

def _tidy_exp(p) -> Exponent:
    """
    Return exponent `p` as an ``int`` where it is whole, otherwise as a
    ``Fraction``.  Floats are taken as the nearest simple fraction
    (e.g. 1.5 -> 3/2).
    """
    if isinstance(p, bool) or not isinstance(p, Real):
        raise TypeError(f"Dimension exponent must be a real number, got "
                        f"{p!r}.")
    if not isinstance(p, Rational):
        p = Fraction(p).limit_denominator(1000)
    p = Fraction(p)
    return coax_type(p, int, default=p)


# ======================================================================

class DimensionalFormula(namedtuple('DimensionalFormula', BASE_DIMENSIONS,
                                    defaults=(0,) * len(BASE_DIMENSIONS))):
    """
    Exponents of the nine base dimensions describing the 'shape' of a
    physical quantity, independent of any units.  Fields in order:

        - length, mass, time, current, temperature, amount, intensity,
          angle, solid_angle.

    Being a fixed-size namedtuple an absent dimension is simply a zero
    field, so every ``DimensionalFormula`` is already normalised; two
    formulas are equal (and hash identically) exactly when all nine
    exponents match.  Exponents are stored as ``int`` where whole and as
    ``Fraction`` otherwise (``sqrt`` can produce half-integers).

    The ``*``, ``/`` and ``**`` operators are overridden to give the
    algebra of formulas (sum, difference and scaling of exponents) in
    place of the usual tuple behaviour.

    Examples
    --------
    >>> energy = DimensionalFormula(mass=1, length=2, time=-2)
    >>> energy / DimensionalFormula(time=-2)
    DimensionalFormula(length=2, mass=1)
    >>> DimensionalFormula(length=3) ** Fraction(1, 2)
    DimensionalFormula(length=Fraction(3, 2))
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs) -> DimensionalFormula:
        res = super().__new__(cls, *args, **kwargs)
        return super().__new__(cls, *(_tidy_exp(p) for p in res))

    @classmethod
    def from_mapping(cls, dims: Mapping[str, Real]) -> DimensionalFormula:
        """
        Build a formula from a mapping of dimension name to exponent.
        Missing names and zero exponents are equivalent.

        Raises
        ------
        ValueError
            If `dims` contains a name that is not a base dimension.
        """
        unknown = set(dims) - set(BASE_DIMENSIONS)
        if unknown:
            raise ValueError(f"Unknown base dimension(s): "
                             f"{', '.join(sorted(unknown))}.")
        return cls(**dims)

    # -- Mapping-like Access -------------------------------------------

    def as_dict(self) -> dict[str, Exponent]:
        """Returns only the non-zero exponents, in storage order."""
        return {k: p for k, p in zip(self._fields, self) if p != 0}

    def get(self, name: str, default: Exponent = 0) -> Exponent:
        if name in self._fields:
            return getattr(self, name)
        return default

    # -- Binary Operators ----------------------------------------------

    def __mul__(self, rhs: DimensionalFormula) -> DimensionalFormula:
        """Combine formulas of a product (exponents add)."""
        if not isinstance(rhs, DimensionalFormula):
            return NotImplemented
        return DimensionalFormula(*(l + r for l, r in zip(self, rhs)))

    def __truediv__(self, rhs: DimensionalFormula) -> DimensionalFormula:
        """Combine formulas of a quotient (exponents subtract)."""
        if not isinstance(rhs, DimensionalFormula):
            return NotImplemented
        return DimensionalFormula(*(l - r for l, r in zip(self, rhs)))

    def __pow__(self, pwr: Real) -> DimensionalFormula:
        """Scale each exponent by `pwr`."""
        pwr = _tidy_exp(pwr)
        return DimensionalFormula(*(p * pwr for p in self))

    def __neg__(self) -> DimensionalFormula:
        return self ** -1

    # -- String Magic Methods ------------------------------------------

    def __repr__(self):
        terms = ', '.join(f"{k}={p!r}" for k, p in self.as_dict().items())
        return f"DimensionalFormula({terms})"

    def __str__(self):
        return render_symbol(self)


DIMENSIONLESS = DimensionalFormula()


# ----------------------------------------------------------------------

class CalcValue(NamedTuple):
    """
    A dimensioned quantity passed between the parser, conversion engine
    and RPN stack.  `value` is always expressed in the SI-coherent base
    unit of its dimensions; no unit identity is carried.  `prefix` is a
    display hint only (a prefix id, ``'none'`` by default).
    """
    value: float
    dimensions: DimensionalFormula = DIMENSIONLESS
    prefix: str = 'none'


# == Dimensional Algebra ===============================================

def _as_formula(d: DimensionalFormula | Mapping[str, Real]
                ) -> DimensionalFormula:
    if isinstance(d, DimensionalFormula):
        return d
    return DimensionalFormula.from_mapping(d)


def normalize(d: DimensionalFormula | Mapping[str, Real]
              ) -> DimensionalFormula:
    """
    Return `d` as a ``DimensionalFormula``.  Mappings may contain zero
    entries, which are dropped.
    """
    return _as_formula(d)


def equal(d1: DimensionalFormula | Mapping[str, Real],
          d2: DimensionalFormula | Mapping[str, Real]) -> bool:
    """
    Returns `True` if the formulas have the same non-zero exponents,
    irrespective of the ordering of any mapping arguments.

    >>> equal({'mass': 1, 'length': 2, 'time': -2},
    ...       {'length': 2, 'time': -2, 'mass': 1, 'angle': 0})
    True
    """
    return _as_formula(d1) == _as_formula(d2)


def is_dimensionless(d: DimensionalFormula | Mapping[str, Real]) -> bool:
    return not any(_as_formula(d))


def multiply(d1: DimensionalFormula | Mapping[str, Real],
             d2: DimensionalFormula | Mapping[str, Real]
             ) -> DimensionalFormula:
    """Formula of the product of quantities with formulas `d1`, `d2`."""
    return _as_formula(d1) * _as_formula(d2)


def divide(d1: DimensionalFormula | Mapping[str, Real],
           d2: DimensionalFormula | Mapping[str, Real]
           ) -> DimensionalFormula:
    """Formula of the quotient `d1` / `d2`."""
    return _as_formula(d1) / _as_formula(d2)


def _exp_str(p: Exponent) -> str:
    if isinstance(p, int):
        return str(p)
    return format(float(p), '.4g')


def signature(d: DimensionalFormula | Mapping[str, Real]) -> str:
    """
    Canonical string key for a formula: non-zero ``name:exponent``
    pairs sorted by name and joined by commas.  A dimensionless formula
    gives an empty string.

    >>> signature({'time': -2, 'mass': 1, 'length': 2})
    'length:2,mass:1,time:-2'
    """
    terms = sorted(_as_formula(d).as_dict().items())
    return ','.join(f"{k}:{_exp_str(p)}" for k, p in terms)


def _to_ucode_super(ss: str) -> str:
    """
    Convert numeric characters in the string ``ss`` to unicode
    superscript.
    """
    result = ''
    for c in ss:
        idx = _UCODE_SS_CHARS[1].find(c)
        if idx >= 0:
            result += _UCODE_SS_CHARS[0][idx]
        else:
            result += c
    return result


def _from_ucode_super(ss: str) -> str:
    """
    Convert any unicode numeric superscript characters in the string
    ``ss`` to normal ascii text.
    """
    result = ''
    for c in ss:
        idx = _UCODE_SS_CHARS[0].find(c)
        if idx >= 0:
            result += _UCODE_SS_CHARS[1][idx]
        else:
            result += c
    return result


def render_symbol(d: DimensionalFormula | Mapping[str, Real]) -> str:
    """
    Build a compound SI symbol for a formula, e.g. ``kg⋅m²⋅s⁻²``.

    Terms with positive exponents come first, then negative ones, each
    group in the order mass, length, time, current, temperature,
    amount, intensity, angle, solid angle.  An exponent of one is
    omitted.  Superscripts and the separator are set by the unit
    options ``unicode_str`` and ``symbol_separator``.  A dimensionless
    formula gives an empty string.
    """
    d = _as_formula(d)
    opts = get_unit_options()

    def term(name: str) -> str:
        p = d.get(name)
        if p == 1:
            return BASE_SYMBOLS[name]
        if opts.unicode_str:
            return BASE_SYMBOLS[name] + _to_ucode_super(_exp_str(p))
        return f"{BASE_SYMBOLS[name]}^{_exp_str(p)}"

    pos = [term(k) for k in RENDER_ORDER if d.get(k) > 0]
    neg = [term(k) for k in RENDER_ORDER if d.get(k) < 0]
    return opts.symbol_separator.join(pos + neg)


def cross_domain_matches(d: DimensionalFormula | Mapping[str, Real],
                         exclude_category: str | None = None
                         ) -> list[str]:
    """
    Names of other derived categories sharing the formula `d`, e.g.
    'Torque' for an energy formula.

    Base categories, `exclude_category`, dimensionless categories and
    the specialty categories listed in ``CROSS_DOMAIN_DENYLIST`` are
    never returned.  A dimensionless `d` gives an empty list.
    """
    from ._catalog import get_catalog

    d = _as_formula(d)
    if is_dimensionless(d):
        return []

    return [cat.name for cat in get_catalog().cross_domain_candidates()
            if cat.id != exclude_category and cat.dimensions == d]
