from unittest import TestCase


# ======================================================================

class TestCoaxType(TestCase):
    def test_numeric(self):
        from dimcalc.util.type_ops import coax_type

        x = coax_type(3.5, int, float)
        self.assertIsInstance(x, float)  # Because int(3.5) != 3.5
        self.assertEqual(x, 3.5)

        x = coax_type(-2.0, int)
        self.assertIsInstance(x, int)
        self.assertEqual(x, -2)

        # Infinite values fail the equality test.
        with self.assertRaises(ValueError):
            coax_type(float('inf'), int, float)

    def test_failure(self):
        from dimcalc.util.type_ops import coax_type

        with self.assertRaises(ValueError):
            coax_type("3.0", int, float)  # Strings are never equal.

        self.assertEqual(coax_type(2.5, int, default=0.5), 0.5)

    def test_exponents(self):
        from fractions import Fraction
        from dimcalc.util.type_ops import coax_type

        # Whole fractions collapse to int.
        x = coax_type(Fraction(6, 2), int, default=Fraction(6, 2))
        self.assertIsInstance(x, int)
        self.assertEqual(x, 3)

        # Half-integers are kept.
        half = Fraction(3, 2)
        x = coax_type(half, int, default=half)
        self.assertIsInstance(x, Fraction)
        self.assertEqual(x, half)
