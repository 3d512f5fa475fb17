import math
from unittest import TestCase


# ======================================================================

class TestFindOptimalPrefix(TestCase):
    def test_standard_values(self):
        from dimcalc.units import find_optimal_prefix

        for value, prefix_id, adjusted in ((500, 'none', 500),
                                           (5000, 'kilo', 5),
                                           (5e6, 'mega', 5),
                                           (0.005, 'milli', 5),
                                           (5e-6, 'micro', 5),
                                           (-5000, 'kilo', -5)):
            prefix, res = find_optimal_prefix(value)
            self.assertEqual(prefix.id, prefix_id, msg=value)
            self.assertAlmostEqual(res, adjusted, places=10, msg=value)

    def test_kilogram(self):
        from dimcalc.units import find_optimal_prefix

        prefix, res = find_optimal_prefix(0.001, 'kg')
        self.assertEqual(prefix.id, 'none')
        self.assertAlmostEqual(res, 1)

        prefix, res = find_optimal_prefix(1000, 'kg')
        self.assertEqual(prefix.id, 'mega')
        self.assertAlmostEqual(res, 1)

    def test_edge_cases(self):
        from dimcalc.units import find_optimal_prefix

        for value in (0, math.inf, -math.inf):
            prefix, res = find_optimal_prefix(value)
            self.assertEqual(prefix.id, 'none')
            self.assertEqual(res, value)

        prefix, res = find_optimal_prefix(math.nan)
        self.assertEqual(prefix.id, 'none')
        self.assertTrue(math.isnan(res))

    def test_precision(self):
        from dimcalc.units import find_optimal_prefix

        # No prefix puts 1e-30 in range, but unprefixed it would display
        # as zero.
        prefix, res = find_optimal_prefix(1e-30)
        self.assertEqual(prefix.id, 'yocto')
        self.assertAlmostEqual(res, 1e-6)

        # Nothing displays at zero digits.
        prefix, res = find_optimal_prefix(1e-30, precision=0)
        self.assertEqual(prefix.id, 'none')


# ----------------------------------------------------------------------

class TestAlternativeRepresentations(TestCase):
    def test_exact_match(self):
        from dimcalc.units import alternative_representations

        self.assertEqual(alternative_representations(
            {'mass': 1, 'length': 2, 'time': -2}), ['kg⋅m²⋅s⁻²', 'J'])
        self.assertEqual(alternative_representations({'time': -1}),
                         ['s⁻¹', 'Hz'])
        self.assertEqual(alternative_representations({}), [''])

    def test_hybrid(self):
        from dimcalc.units import alternative_representations

        alts = alternative_representations({'mass': 1, 'length': 3,
                                            'time': -2})
        self.assertEqual(alts[0], 'kg⋅m³⋅s⁻²')
        self.assertIn('m²⋅N', alts)
        self.assertIn('m⋅J', alts)

        # Pascal would leave m⁴, introducing no new dimension but with
        # the wrong sign on length.
        self.assertNotIn('m⁴⋅Pa', alts)

        # No SI derived unit fits plain length.
        self.assertEqual(alternative_representations({'length': 1}), ['m'])

    def test_symbol_checks(self):
        from dimcalc.units import count_units, is_valid_symbol_representation

        self.assertEqual(count_units('kg⋅m²⋅s⁻²'), 3)
        self.assertEqual(count_units('m'), 1)
        self.assertEqual(count_units(''), 0)
        self.assertEqual(count_units('1'), 0)

        self.assertTrue(is_valid_symbol_representation('m²⋅N'))
        self.assertTrue(is_valid_symbol_representation('kg⋅m²⋅s⁻²'))
        self.assertFalse(is_valid_symbol_representation('m⋅J⋅m²'))
        self.assertTrue(is_valid_symbol_representation(''))


# ----------------------------------------------------------------------

class TestSexagesimalFormat(TestCase):
    def test_format_dms(self):
        from dimcalc.units import format_dms

        self.assertEqual(format_dms(12.5), '12:30:00.00')
        self.assertEqual(format_dms(-12.51), '-12:30:36.00')
        self.assertEqual(format_dms(0.001, precision=3), '0:00:03.600')
        self.assertEqual(format_dms(45, precision=0), '45:00:00')

        # Rounded seconds carry into minutes and degrees.
        self.assertEqual(format_dms(1.9999999), '2:00:00.00')
        self.assertEqual(format_dms(-0.9999999), '-1:00:00.00')

    def test_format_ft_in(self):
        from dimcalc.units import format_ft_in

        self.assertEqual(format_ft_in(5.5), '5\'6.00"')
        self.assertEqual(format_ft_in(-5.25, precision=1), '-5\'3.0"')
        self.assertEqual(format_ft_in(0), '0\'0.00"')

        # Rounded inches carry into feet.
        self.assertEqual(format_ft_in(5.9999), '6\'0.00"')
        self.assertEqual(format_ft_in(-5.9999, precision=1), '-6\'0.0"')
