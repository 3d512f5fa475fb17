import math
from unittest import TestCase


# ======================================================================

class TestParseQuantity(TestCase):
    def test_original_and_base_value(self):
        from dimcalc.units import parse_quantity

        q = parse_quantity('15 min')
        self.assertEqual(q.original_value, 15)
        self.assertAlmostEqual(q.value, 900)
        self.assertEqual((q.category_id, q.unit_id), ('time', 'min'))
        self.assertIsNone(q.prefix_id)

        q = parse_quantity('5 km')
        self.assertEqual(q.original_value, 5)
        self.assertAlmostEqual(q.value, 5000)
        self.assertEqual((q.category_id, q.unit_id, q.prefix_id),
                         ('length', 'm', 'kilo'))

        q = parse_quantity('2.4 MHz')
        self.assertAlmostEqual(q.value, 2.4e6)
        self.assertEqual((q.category_id, q.prefix_id),
                         ('frequency', 'mega'))

        q = parse_quantity('250 mg')
        self.assertAlmostEqual(q.value, 250e-6)
        self.assertEqual((q.unit_id, q.prefix_id), ('g', 'milli'))

    def test_symbol_disambiguation(self):
        from dimcalc.units import parse_quantity, DimensionalFormula

        q = parse_quantity('3 s')
        self.assertEqual((q.category_id, q.unit_id), ('time', 's'))
        self.assertEqual(q.dimensions, DimensionalFormula(time=1))

        q = parse_quantity('10 Po')
        self.assertEqual((q.category_id, q.unit_id), ('viscosity', 'poise'))
        self.assertAlmostEqual(q.value, 1)

        # 'P' is the Peta prefix, not a unit.
        q = parse_quantity('10 P')
        self.assertEqual(q.original_value, 10)
        self.assertEqual(q.value, 10)
        self.assertIsNone(q.category_id)
        self.assertIsNone(q.unit_id)
        self.assertIsNone(q.prefix_id)

        self.assertEqual(parse_quantity('5 cP').unit_id, 'cp')
        self.assertEqual(parse_quantity('5 minim').category_id,
                         'archaic_volume')
        self.assertEqual(parse_quantity('2 rad').category_id, 'angle')
        self.assertEqual(parse_quantity('2 yd').category_id, 'length')

    def test_numbers(self):
        from dimcalc.units import parse_quantity

        cases = {'1.5e3 s': 1500, '2E-3 m': 0.002, '-4 m': -4,
                 '−4 m': -4, '+4 m': 4, '.5 m': 0.5,
                 '2,5 m': 2.5,  # Decimal comma.
                 '1,234.5 m': 1234.5, '1.234,5 m': 1234.5,
                 '1,234,567 m': 1234567,
                 '5.5.5 m': 5.5}
        for text, value in cases.items():
            q = parse_quantity(text)
            self.assertAlmostEqual(q.original_value, value, msg=text)
            self.assertEqual(q.category_id, 'length' if 'm' in text
                             else 'time', msg=text)

    def test_missing_parts(self):
        from dimcalc.units import parse_quantity, DIMENSIONLESS

        for text in ('', '   '):
            q = parse_quantity(text)
            self.assertEqual((q.original_value, q.value), (1, 1))
            self.assertEqual(q.dimensions, DIMENSIONLESS)
            self.assertIsNone(q.category_id)

        q = parse_quantity('kg')
        self.assertEqual(q.original_value, 1)
        self.assertEqual(q.category_id, 'mass')

        q = parse_quantity('42')
        self.assertEqual(q.value, 42)
        self.assertIsNone(q.unit_id)

        q = parse_quantity('5 xyz')
        self.assertEqual(q.value, 5)
        self.assertIsNone(q.category_id)

    def test_spaces_and_micro(self):
        from dimcalc.units import parse_quantity

        for sep in (' ', ' ', ' ', ' ', ''):
            q = parse_quantity(f'3{sep}kg')
            self.assertEqual(q.category_id, 'mass', msg=repr(sep))

        q = parse_quantity('5 μs')  # Greek mu.
        self.assertEqual(q.prefix_id, 'micro')
        self.assertAlmostEqual(q.value, 5e-6)

    def test_special_units(self):
        from dimcalc.units import parse_quantity

        q = parse_quantity('90°')
        self.assertEqual(q.category_id, 'angle')
        self.assertAlmostEqual(q.value, math.pi / 2)

        q = parse_quantity('25 °C')
        self.assertEqual(q.category_id, 'temperature')
        self.assertAlmostEqual(q.value, 298.15)

        q = parse_quantity('5 t½(s)')
        self.assertEqual(q.category_id, 'radioactive_decay')
        self.assertAlmostEqual(q.value, math.log(2) / 5)

    def test_compound(self):
        from dimcalc.units import parse_quantity, DimensionalFormula

        q = parse_quantity('1000 kg⋅m⁻³')
        self.assertEqual(q.category_id, 'density')
        self.assertIsNone(q.unit_id)
        self.assertAlmostEqual(q.value, 1000)

        q = parse_quantity('9.81 m·s^-2')
        self.assertEqual(q.category_id, 'acceleration')

        q = parse_quantity('3 kg*m/s²')
        self.assertEqual(q.dimensions,
                         DimensionalFormula(mass=1, length=1, time=-2))
        self.assertEqual(q.category_id, 'force')

        # Prefixed terms are raised to the power.
        q = parse_quantity('2 mm²')
        self.assertAlmostEqual(q.value, 2e-6)
        self.assertEqual(q.category_id, 'area')

        q = parse_quantity('3 N×mm')
        self.assertAlmostEqual(q.value, 3e-3)
        self.assertEqual(q.category_id, 'energy')

        # Zero powers drop out.
        q = parse_quantity('4 m⁰')
        self.assertEqual(q.value, 4)
        self.assertIsNone(q.category_id)

    def test_inversion(self):
        from dimcalc.units import parse_quantity, DimensionalFormula

        q = parse_quantity('50 s⁻¹')
        self.assertEqual(q.dimensions, DimensionalFormula(time=-1))
        self.assertAlmostEqual(q.value, 50)

        q = parse_quantity('50 1/s')
        self.assertEqual(q.dimensions, DimensionalFormula(time=-1))
        self.assertAlmostEqual(q.value, 50)
        self.assertEqual(q.category_id, 'frequency')

        # Unicode minus after a caret.
        q = parse_quantity('50 s^−1')
        self.assertEqual(q.dimensions, DimensionalFormula(time=-1))
        self.assertEqual(q.category_id, 'frequency')

        q = parse_quantity('2 /min')
        self.assertEqual(q.dimensions, DimensionalFormula(time=-1))
        self.assertAlmostEqual(q.value, 2 / 60)

        # No matching category.
        q = parse_quantity('2 mol^-1')
        self.assertEqual(q.dimensions, DimensionalFormula(amount=-1))
        self.assertIsNone(q.category_id)

    def test_compound_rejects(self):
        from dimcalc.units import parse_quantity

        # Offset units are not allowed in compounds.
        self.assertIsNone(parse_quantity('5 °C/s').category_id)
        self.assertIsNone(parse_quantity('5 m//s').category_id)
        self.assertIsNone(parse_quantity('5 m/xyz').category_id)
        self.assertIsNone(parse_quantity('5 m/').category_id)

        # Powers too large to represent leave the text unresolved.
        for text in ('5 km^200', '5 ly²⁰', '5 m^' + '1' * 5000):
            q = parse_quantity(text)
            self.assertEqual((q.original_value, q.value), (5, 5))
            self.assertIsNone(q.category_id)
            self.assertIsNone(q.unit_id)

    def test_to_calc_value(self):
        from dimcalc.units import parse_quantity, CalcValue

        cv = parse_quantity('5 km').to_calc_value()
        self.assertIsInstance(cv, CalcValue)
        self.assertAlmostEqual(cv.value, 5000)
        self.assertEqual(cv.prefix, 'kilo')
        self.assertEqual(parse_quantity('5 m').to_calc_value().prefix,
                         'none')


# ----------------------------------------------------------------------

class TestSexagesimal(TestCase):
    def test_parse_dms(self):
        from dimcalc.units import parse_dms

        self.assertAlmostEqual(parse_dms('12:30:36'), 12.51)
        self.assertAlmostEqual(parse_dms('-12:30:36'), -12.51)
        self.assertAlmostEqual(parse_dms('12:30'), 12.5)
        self.assertAlmostEqual(parse_dms('45.25'), 45.25)
        self.assertTrue(math.isnan(parse_dms('12:xx')))
        self.assertTrue(math.isnan(parse_dms('1:2:3:4')))

    def test_parse_ft_in(self):
        from dimcalc.units import parse_ft_in

        self.assertAlmostEqual(parse_ft_in('5\'6"'), 5.5)
        self.assertAlmostEqual(parse_ft_in('-5\'6"'), -5.5)
        self.assertAlmostEqual(parse_ft_in("5'"), 5)
        self.assertAlmostEqual(parse_ft_in('5:3'), 5.25)
        self.assertTrue(math.isnan(parse_ft_in('five')))
