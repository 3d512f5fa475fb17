from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from ._dim import DimensionalFormula, DIMENSIONLESS, is_dimensionless


# ======================================================================

class CatalogError(ValueError):
    """
    Raised when the unit catalog data is inconsistent, e.g. a unit
    symbol collides with a reserved prefix symbol or an id is repeated.
    Additional information (optional) is included to allow the offending
    entry to be found.
    """

    def __init__(self, *args, details: str = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `ValueError`.
        details : str, default = None
            Additional text relating to the specific problem.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments (e.g. ``symbol='P'``).
        """
        super().__init__(*args)
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class Prefix(NamedTuple):
    """
    A multiplier applicable to units that allow prefixes.  Binary
    prefixes (powers of 1024) only apply to categories that permit them.
    """
    id: str
    name: str
    symbol: str
    factor: float
    binary: bool = False


NO_PREFIX = Prefix('none', '', '', 1)


# == Conversion Rules ==================================================

class ConversionRule(ABC):
    """
    How values of a unit relate to the base unit of its category.
    """

    @abstractmethod
    def to_base(self, value: float) -> float:
        """Convert `value` in this unit to the category base unit."""
        raise NotImplementedError

    @abstractmethod
    def from_base(self, base: float) -> float:
        """Convert `base` in the category base unit to this unit."""
        raise NotImplementedError

    @property
    def linear_factor(self) -> float | None:
        """Scale factor to the base unit if this is a pure scaling,
        otherwise ``None``."""
        return None


@dataclass(frozen=True)
class Linear(ConversionRule):
    """``base = value * factor``."""
    factor: float

    def to_base(self, value: float) -> float:
        return value * self.factor

    def from_base(self, base: float) -> float:
        return base / self.factor

    @property
    def linear_factor(self) -> float:
        return self.factor


@dataclass(frozen=True)
class Affine(ConversionRule):
    """
    Offset scales such as °C:  ``base = (value + offset) * factor``.
    """
    factor: float
    offset: float

    def to_base(self, value: float) -> float:
        return (value + self.offset) * self.factor

    def from_base(self, base: float) -> float:
        return base / self.factor - self.offset


@dataclass(frozen=True)
class Functional(ConversionRule):
    """
    Units related to the base unit by an explicit function and its
    inverse, e.g. photon wavelength (E = hc/λ) or half-life
    (λ = ln2/t½).
    """
    forward: Callable[[float], float]  # Unit -> base.
    inverse: Callable[[float], float]  # Base -> unit.

    def to_base(self, value: float) -> float:
        return self.forward(value)

    def from_base(self, base: float) -> float:
        return self.inverse(base)


# == Units and Categories ==============================================

@dataclass(frozen=True)
class UnitDefinition:
    id: str
    name: str
    symbol: str
    rule: ConversionRule
    allow_prefixes: bool = False
    aliases: tuple[str, ...] = ()

    @property
    def symbols(self) -> tuple[str, ...]:
        return (self.symbol,) + self.aliases


@dataclass(frozen=True)
class CategoryDefinition:
    """
    A physical (or specialty) quantity with its canonical formula and
    ordered units.

    Parameters
    ----------
    is_base : bool, default = False
        `True` for the nine SI base quantities.
    binary_prefixes : bool, default = False
        Units of this category may take binary prefixes (Ki, Mi, ...).
    indexed : bool, default = True
        Unit symbols are entered into the symbol lookup table.
    """
    id: str
    name: str
    base_unit: str
    dimensions: DimensionalFormula
    units: tuple[UnitDefinition, ...]
    is_base: bool = False
    binary_prefixes: bool = False
    indexed: bool = True
    _unit_map: dict[str, UnitDefinition] = field(
        init=False, repr=False, compare=False)

    def __post_init__(self):
        unit_map = {}
        for u in self.units:
            if u.id in unit_map:
                raise CatalogError("Duplicate unit id.", category=self.id,
                                   unit=u.id)
            unit_map[u.id] = u

        if self.base_unit not in unit_map:
            raise CatalogError("Base unit is not a unit of the category.",
                               category=self.id, unit=self.base_unit)

        object.__setattr__(self, '_unit_map', unit_map)

    def unit(self, unit_id: str) -> UnitDefinition | None:
        return self._unit_map.get(unit_id)


class Resolution(NamedTuple):
    """Result of looking up a unit symbol (optionally with a prefix)."""
    category_id: str
    unit_id: str
    prefix_id: str | None = None


# ======================================================================

class CatalogIndex:
    """
    Read-only view of the unit catalog built once from the static
    category and prefix tables.

    Unit symbols are mapped to their category and unit on a first-wins
    basis:  categories earlier in catalog order take precedence, so
    ambiguous symbols resolve to the primary SI / physical meaning
    (e.g. ``rad`` is the plane angle, not the radiation dose unit).
    Prefixed symbols are not stored; see ``resolve_prefixed``.

    Raises
    ------
    CatalogError
        If category ids repeat or if a unit symbol (or alias) is also a
        prefix symbol and is not listed in `shared_symbols`.
    """

    def __init__(self, categories: Iterable[CategoryDefinition],
                 prefixes: Iterable[Prefix],
                 prefix_aliases: dict[str, str] = None,
                 shared_symbols: Iterable[str] = (),
                 cross_domain_denylist: Iterable[str] = ()):
        """
        Parameters
        ----------
        categories : Iterable[CategoryDefinition]
            All categories, in precedence order.
        prefixes : Iterable[Prefix]
            All decimal and binary prefixes, excluding 'none'.
        prefix_aliases : dict[str, str], optional
            Extra symbol -> prefix id entries (e.g. Greek 'μ' for the
            micro sign 'µ').
        shared_symbols : Iterable[str]
            Unit symbols which are knowingly also prefix symbols (e.g.
            'm' for metre, 'T' for tesla).  Bare, these resolve to the
            unit.
        cross_domain_denylist : Iterable[str]
            Ids of categories never offered as equivalent quantities
            by ``cross_domain_candidates``.
        """
        self._categories: dict[str, CategoryDefinition] = {}
        for cat in categories:
            if cat.id in self._categories:
                raise CatalogError("Duplicate category id.", category=cat.id)
            self._categories[cat.id] = cat
        self._denylist = frozenset(cross_domain_denylist)

        self._prefixes: dict[str, Prefix] = {NO_PREFIX.id: NO_PREFIX}
        self._prefix_syms: dict[str, Prefix] = {}
        for p in prefixes:
            self._prefixes[p.id] = p
            self._prefix_syms[p.symbol] = p
        for sym, pid in (prefix_aliases or {}).items():
            self._prefix_syms[sym] = self._prefixes[pid]

        # Longest first so that 'Ki' is tried before 'K'.
        self._split_order = sorted(self._prefix_syms.items(),
                                   key=lambda kv: -len(kv[0]))

        shared_symbols = frozenset(shared_symbols)
        self._symbols: dict[str, Resolution] = {}
        for cat in self._categories.values():
            if not cat.indexed:
                continue

            for u in cat.units:
                for sym in u.symbols:
                    if sym in self._prefix_syms and sym not in shared_symbols:
                        raise CatalogError(
                            "Unit symbol collides with a prefix symbol.",
                            details="Register the unit under a distinct "
                                    "symbol (e.g. 'Po' for poise).",
                            symbol=sym, category=cat.id, unit=u.id)

                    # First registration wins.
                    self._symbols.setdefault(sym, Resolution(cat.id, u.id))

    # -- Catalog Access ------------------------------------------------

    @property
    def categories(self) -> tuple[CategoryDefinition, ...]:
        return tuple(self._categories.values())

    def category(self, category_id: str) -> CategoryDefinition | None:
        return self._categories.get(category_id)

    def unit(self, category_id: str, unit_id: str) -> UnitDefinition | None:
        try:
            return self._categories[category_id].unit(unit_id)
        except KeyError:
            return None

    def prefix(self, prefix_id: str) -> Prefix | None:
        return self._prefixes.get(prefix_id)

    def prefix_for_symbol(self, symbol: str) -> Prefix | None:
        return self._prefix_syms.get(symbol)

    def prefixes(self, binary: bool = None) -> list[Prefix]:
        """
        Returns prefixes (excluding 'none') in descending order of
        factor.  If `binary` is given, only that kind is returned.
        """
        res = [p for p in self._prefixes.values()
               if p is not NO_PREFIX and (binary is None or
                                          p.binary == binary)]
        return sorted(res, key=lambda p: -p.factor)

    def symbols(self) -> dict[str, Resolution]:
        return dict(self._symbols)

    # -- Lookup --------------------------------------------------------

    def resolve_symbol(self, symbol: str) -> Resolution | None:
        """Look up a bare (unprefixed) unit symbol or alias."""
        return self._symbols.get(symbol)

    def resolve_prefixed(self, symbol: str) -> Resolution | None:
        """
        Split `symbol` into a prefix and a unit symbol, e.g. ``kN`` ->
        kilo + newton.  The unit must allow prefixes and binary
        prefixes only apply to categories that permit them.  Longer
        prefix symbols are tried first.  A bare prefix symbol (e.g.
        ``k``) never resolves.
        """
        for p_sym, prefix in self._split_order:
            if len(symbol) <= len(p_sym) or not symbol.startswith(p_sym):
                continue

            res = self._symbols.get(symbol[len(p_sym):])
            if res is None:
                continue

            cat = self._categories[res.category_id]
            if not cat.unit(res.unit_id).allow_prefixes:
                continue
            if prefix.binary and not cat.binary_prefixes:
                continue

            return res._replace(prefix_id=prefix.id)

        return None

    def find_category(self, d: DimensionalFormula
                      ) -> CategoryDefinition | None:
        """
        First indexed category in catalog order whose canonical formula
        equals `d`.  Dimensionless formulas do not identify a category
        and give ``None``.
        """
        if is_dimensionless(d):
            return None
        for cat in self._categories.values():
            if cat.indexed and cat.dimensions == d:
                return cat
        return None

    def cross_domain_candidates(self) -> list[CategoryDefinition]:
        """Derived, dimensioned categories eligible as equivalents."""
        return [cat for cat in self._categories.values()
                if not cat.is_base and cat.id not in self._denylist and
                cat.dimensions != DIMENSIONLESS]


# ----------------------------------------------------------------------

_CATALOG: CatalogIndex | None = None


def get_catalog() -> CatalogIndex:
    """
    Returns the process-wide ``CatalogIndex``, building it from the
    static tables on first use.
    """
    global _CATALOG
    if _CATALOG is None:
        from ._defs import (CATEGORIES, PREFIXES, BINARY_PREFIXES,
                            PREFIX_ALIASES, SHARED_SYMBOLS,
                            CROSS_DOMAIN_DENYLIST)
        _CATALOG = CatalogIndex(
            CATEGORIES, PREFIXES + BINARY_PREFIXES,
            prefix_aliases=PREFIX_ALIASES, shared_symbols=SHARED_SYMBOLS,
            cross_domain_denylist=CROSS_DOMAIN_DENYLIST)
    return _CATALOG


def make_category(cat_id: str, name: str, dims: dict[str, int],
                  units: Sequence[UnitDefinition], *,
                  base_unit: str = None, **kwargs) -> CategoryDefinition:
    """
    Convenience constructor used by the static tables.  The base unit
    defaults to the first unit given.
    """
    return CategoryDefinition(
        cat_id, name, base_unit or units[0].id,
        DimensionalFormula.from_mapping(dims), tuple(units), **kwargs)
