from unittest import TestCase


# ======================================================================

class TestDimensionalFormula(TestCase):
    def test_construction(self):
        from fractions import Fraction
        from dimcalc.units import DimensionalFormula

        d = DimensionalFormula(mass=1, length=2, time=-2)
        self.assertEqual(d.as_dict(), {'length': 2, 'mass': 1, 'time': -2})
        self.assertEqual(d.get('angle'), 0)
        self.assertEqual(d.get('colour', 7), 7)

        # Whole floats become ints, others simple fractions.
        d = DimensionalFormula(length=2.0, time=1.5)
        self.assertIsInstance(d.length, int)
        self.assertEqual(d.time, Fraction(3, 2))

        with self.assertRaises(TypeError):
            DimensionalFormula(length='2')
        with self.assertRaises(TypeError):
            DimensionalFormula(length=True)

    def test_from_mapping(self):
        from dimcalc.units import DimensionalFormula

        d = DimensionalFormula.from_mapping({'time': -1, 'angle': 0})
        self.assertEqual(d, DimensionalFormula(time=-1))

        with self.assertRaises(ValueError):
            DimensionalFormula.from_mapping({'colour': 1})

    def test_operators(self):
        from fractions import Fraction
        from dimcalc.units import DimensionalFormula, DIMENSIONLESS

        force = DimensionalFormula(mass=1, length=1, time=-2)
        length = DimensionalFormula(length=1)
        self.assertEqual(force * length,
                         DimensionalFormula(mass=1, length=2, time=-2))
        self.assertEqual(force / force, DIMENSIONLESS)
        self.assertEqual(-length, DimensionalFormula(length=-1))
        self.assertEqual(DimensionalFormula(length=3) ** Fraction(1, 2),
                         DimensionalFormula(length=Fraction(3, 2)))

    def test_repr(self):
        from dimcalc.units import DimensionalFormula, DIMENSIONLESS

        self.assertEqual(repr(DimensionalFormula(time=-1, length=1)),
                         "DimensionalFormula(length=1, time=-1)")
        self.assertEqual(repr(DIMENSIONLESS), "DimensionalFormula()")


# ----------------------------------------------------------------------

class TestAlgebra(TestCase):
    def test_equal(self):
        from dimcalc.units import equal, DimensionalFormula

        # Order of keys and explicit zeros are ignored.
        self.assertTrue(equal({'mass': 1, 'length': 2, 'time': -2},
                              {'length': 2, 'time': -2, 'mass': 1}))
        self.assertTrue(equal({'length': 1, 'angle': 0},
                              DimensionalFormula(length=1)))
        self.assertFalse(equal({'length': 1}, {'length': 2}))
        self.assertFalse(equal({'length': 1}, {'time': 1}))

    def test_normalize(self):
        from dimcalc.units import normalize, is_dimensionless

        d = normalize({'length': 0, 'time': 0})
        self.assertTrue(is_dimensionless(d))
        self.assertEqual(normalize({'mass': 1, 'time': 0}).as_dict(),
                         {'mass': 1})

    def test_multiply_divide(self):
        from dimcalc.units import multiply, divide, equal, is_dimensionless

        d1 = {'mass': 1, 'length': 2, 'time': -2}
        d2 = {'length': 1, 'time': -1, 'current': 1}
        formulas = [d1, d2, {}, {'angle': 1}, {'length': -3, 'amount': 2}]

        for a in formulas:
            for b in formulas:
                self.assertTrue(equal(divide(multiply(a, b), b), a))

        # Keys summing to zero are dropped.
        self.assertTrue(is_dimensionless(multiply({'time': 1},
                                                  {'time': -1})))
        self.assertEqual(divide({'length': 1}, {'time': 1}).as_dict(),
                         {'length': 1, 'time': -1})

    def test_signature(self):
        from fractions import Fraction
        from dimcalc.units import signature

        self.assertEqual(signature({'time': -2, 'mass': 1, 'length': 2}),
                         'length:2,mass:1,time:-2')
        self.assertEqual(signature({}), '')
        self.assertEqual(signature({'length': Fraction(3, 2)}),
                         'length:1.5')

    def test_render_symbol(self):
        from fractions import Fraction
        from dimcalc.units import (render_symbol, get_unit_options,
                                   set_unit_options)

        self.assertEqual(render_symbol({'mass': 1, 'length': 2,
                                        'time': -2}), 'kg⋅m²⋅s⁻²')
        self.assertEqual(render_symbol({'time': -1}), 's⁻¹')
        self.assertEqual(render_symbol({'current': -1, 'mass': 1}),
                         'kg⋅A⁻¹')
        self.assertEqual(render_symbol({'length': Fraction(3, 2)}),
                         'm¹ᐧ⁵')
        self.assertEqual(render_symbol({}), '')

        saved = get_unit_options()
        try:
            set_unit_options(unicode_str=False, symbol_separator='.')
            self.assertEqual(render_symbol({'length': 1, 'time': -2}),
                             'm.s^-2')
        finally:
            set_unit_options(unicode_str=saved.unicode_str,
                             symbol_separator=saved.symbol_separator)

    def test_cross_domain_matches(self):
        from dimcalc.units import cross_domain_matches

        energy = {'mass': 1, 'length': 2, 'time': -2}
        names = cross_domain_matches(energy, 'energy')
        self.assertIn('Torque', names)
        self.assertNotIn('Energy', names)

        # Base quantities are never offered.
        self.assertEqual(cross_domain_matches({'length': 1}), [])
        self.assertEqual(cross_domain_matches({}), [])

        # Specialty categories are never offered.
        names = cross_domain_matches({'length': 3}, 'volume')
        self.assertNotIn('Cooking Measures', names)
        self.assertNotIn('Archaic Volume', names)


# ----------------------------------------------------------------------

class TestUnitOptions(TestCase):
    def test_set_unit_options(self):
        from dimcalc.units import get_unit_options, set_unit_options

        opts = get_unit_options()
        self.assertTrue(opts.unicode_str)
        self.assertEqual(opts.display_precision, 8)

        with self.assertRaises(ValueError):
            set_unit_options(display_precision=-1)
        with self.assertRaises(ValueError):
            set_unit_options(symbol_separator='')

        # Failed updates leave the options unchanged.
        self.assertEqual(get_unit_options(), opts)
