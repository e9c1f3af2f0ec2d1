import math
import unittest

from fields.normalization import (
    coerce_number,
    coerce_percent_fraction,
    first_present,
    first_truthy,
    normalize_text,
    round_half_up,
)


class TestCoerceNumber(unittest.TestCase):
    def test_native_numbers_pass_through(self):
        self.assertEqual(coerce_number(42), 42)
        self.assertEqual(coerce_number(-3.5), -3.5)

    def test_nan_and_bool_rejected(self):
        self.assertIsNone(coerce_number(math.nan))
        self.assertIsNone(coerce_number(True))

    def test_strings_with_separators_and_units(self):
        self.assertEqual(coerce_number("1,234.56 USD"), 1234.56)
        self.assertEqual(coerce_number("60 days"), 60)
        self.assertEqual(coerce_number("net -15"), -15)

    def test_unparseable(self):
        self.assertIsNone(coerce_number("abc"))
        self.assertIsNone(coerce_number(None))
        self.assertIsNone(coerce_number(""))


class TestCoercePercentFraction(unittest.TestCase):
    def test_fraction_and_percent_scales(self):
        self.assertEqual(coerce_percent_fraction(0.42), 0.42)
        self.assertAlmostEqual(coerce_percent_fraction(42), 0.42)
        self.assertEqual(coerce_percent_fraction(100), 1.0)
        self.assertAlmostEqual(coerce_percent_fraction("85%"), 0.85)

    def test_exactly_one_means_hundred_percent(self):
        self.assertEqual(coerce_percent_fraction(1), 1)
        self.assertEqual(coerce_percent_fraction(1.00001), 1.00001)

    def test_negative_and_missing(self):
        self.assertIsNone(coerce_percent_fraction(-5))
        self.assertIsNone(coerce_percent_fraction(None))
        self.assertIsNone(coerce_percent_fraction("n/a"))


class TestTextAndLookup(unittest.TestCase):
    def test_normalize_text(self):
        self.assertEqual(normalize_text("  Active "), "active")
        self.assertEqual(normalize_text(None), "")

    def test_round_half_up(self):
        self.assertEqual(round_half_up(12.5), 13)
        self.assertEqual(round_half_up(85.3), 85)
        self.assertEqual(round_half_up(0.5), 1)

    def test_first_present_stops_at_existing_empty_cell(self):
        row = {"B": None, "C": 3}
        self.assertIsNone(first_present(row, ("A", "B", "C")))
        self.assertEqual(first_present(row, ("A", "C")), 3)

    def test_first_truthy_skips_empty_cells(self):
        row = {"B": "", "C": "x"}
        self.assertEqual(first_truthy(row, ("A", "B", "C")), "x")
        self.assertEqual(first_truthy(row, ("A",), default="Unknown"), "Unknown")


if __name__ == "__main__":
    unittest.main()
