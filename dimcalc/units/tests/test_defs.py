import math
from unittest import TestCase


# ======================================================================

class TestConversionHelpers(TestCase):
    def test_reciprocal(self):
        from dimcalc.units._defs import _reciprocal

        f = _reciprocal(1e8)
        self.assertEqual(f(5), 2e7)
        self.assertEqual(f(f(5)), 5)
        self.assertEqual(f(0.0), math.inf)
        self.assertEqual(f(-0.0), -math.inf)
        self.assertTrue(math.isnan(_reciprocal(0)(0)))

    def test_sound_pressure_level(self):
        from dimcalc.units._defs import _spl_forward, _spl_inverse

        self.assertAlmostEqual(_spl_forward(0), 20e-6)
        self.assertAlmostEqual(_spl_inverse(_spl_forward(94)), 94)
        self.assertEqual(_spl_inverse(0), -math.inf)
        self.assertTrue(math.isnan(_spl_inverse(-1)))
        self.assertEqual(_spl_forward(1e6), math.inf)


# ----------------------------------------------------------------------

class TestCatalogTables(TestCase):
    def test_math_category(self):
        from dimcalc.units import get_catalog, convert, MATH_FUNCTIONS

        cat = get_catalog().category('math')
        self.assertFalse(cat.indexed)
        self.assertEqual(len(cat.units), len(MATH_FUNCTIONS) + 1)

        # Not offered for symbol lookup.
        self.assertIsNone(get_catalog().resolve_symbol('sqrt(x)'))

        self.assertAlmostEqual(convert(16, 'x', 'sqrt', 'math'), 4)
        self.assertAlmostEqual(convert(4, 'sqrt', 'x', 'math'), 16)
        self.assertAlmostEqual(convert(100, 'x', 'log10', 'math'), 2)
        self.assertEqual(convert(2.5, 'x', 'floor', 'math'), 2)

    def test_si_derived_units(self):
        from dimcalc.units import get_catalog
        from dimcalc.units._defs import SI_DERIVED_UNITS

        catalog = get_catalog()
        for sym, (cat_id, unit_id) in SI_DERIVED_UNITS.items():
            unit = catalog.unit(cat_id, unit_id)
            self.assertIsNotNone(unit, msg=sym)
            self.assertEqual(unit.rule.linear_factor, 1, msg=sym)

    def test_denylist(self):
        from dimcalc.units import get_catalog
        from dimcalc.units._defs import CROSS_DOMAIN_DENYLIST

        catalog = get_catalog()
        for cat_id in CROSS_DOMAIN_DENYLIST:
            self.assertIsNotNone(catalog.category(cat_id), msg=cat_id)

        candidates = {cat.id for cat in catalog.cross_domain_candidates()}
        self.assertFalse(candidates & set(CROSS_DOMAIN_DENYLIST))
        self.assertNotIn('length', candidates)
        self.assertIn('torque', candidates)
