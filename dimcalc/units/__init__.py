"""
Units (:mod:`dimcalc.units`)
============================

.. currentmodule:: dimcalc.units

Dimensional algebra, the unit catalog, conversion and free-text
quantity parsing.

Examples
--------

A ``DimensionalFormula`` holds the exponents of the nine base
dimensions.  The usual operators combine formulas:

>>> force = DimensionalFormula(mass=1, length=1, time=-2)
>>> force * DimensionalFormula(length=1)
DimensionalFormula(length=2, mass=1, time=-2)
>>> render_symbol(force / DimensionalFormula(length=2))
'kg⋅m⁻¹⋅s⁻²'

Plain mappings are accepted by the module level functions, and absent
or zero exponents are equivalent:

>>> equal({'mass': 1, 'length': 2, 'time': -2},
...       {'time': -2, 'length': 2, 'mass': 1, 'angle': 0})
True
>>> signature({'time': -2, 'mass': 1, 'length': 2})
'length:2,mass:1,time:-2'

Other physical quantities sharing a formula can be found:

>>> cross_domain_matches({'mass': 1, 'length': 2, 'time': -2}, 'energy')
['Torque', 'Photon Energy']

Values are converted between units of one category by unit id.  Prefix
factors can be supplied for either side:

>>> round(convert(1, 'mi', 'ft', 'length'), 6)
5280.0
>>> round(convert(2.5, 'g', 'g', 'mass', from_prefix_factor=1000), 9)
2500.0

Temperature units with an offset scale are converted through kelvin:

>>> round(convert(-273.15, 'c', 'k', 'temperature'), 9)
0.0

Free text (e.g. pasted from a data sheet) is read by
``parse_quantity``.  The number as typed is kept along with the value in
the SI-coherent base unit of the category:

>>> q = parse_quantity('5 km')
>>> q.original_value, q.value, q.category_id, q.prefix_id
(5.0, 5000.0, 'length', 'kilo')

Compound expressions are reduced to a formula and matched to a category
where one exists:

>>> q = parse_quantity('1000 kg⋅m⁻³')
>>> q.category_id, q.value
('density', 1000.0)

Unresolvable input never raises, it just leaves the catalog fields
empty:

>>> parse_quantity('5 xyz').category_id is None
True
"""

from ._opts import UnitOptions, get_unit_options, set_unit_options
from ._dim import (BASE_DIMENSIONS, BASE_SYMBOLS, CalcValue,
                   DimensionalFormula, DIMENSIONLESS, cross_domain_matches,
                   divide, equal, is_dimensionless, multiply, normalize,
                   render_symbol, signature)
from ._catalog import (Affine, CatalogError, CatalogIndex, CategoryDefinition,
                       ConversionRule, Functional, Linear, NO_PREFIX, Prefix,
                       Resolution, UnitDefinition, get_catalog)
from ._defs import CROSS_DOMAIN_DENYLIST, SI_DERIVED_UNITS
from ._mathfn import MATH_FUNCTIONS
from ._convert import (AffinePrefixWarning, apply_math_function, convert,
                       to_base)
from ._parse import ParsedQuantity, parse_dms, parse_ft_in, parse_quantity
from ._display import (alternative_representations, count_units,
                       find_optimal_prefix, format_dms, format_ft_in,
                       is_valid_symbol_representation)
