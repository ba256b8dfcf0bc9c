import unittest

from mausam.formatting import as_number, format_reading, round_half_up


class FormattingTest(unittest.TestCase):
    def test_format_reading(self):
        self.assertEqual(format_reading(31.6, "°C"), "32 °C")
        self.assertEqual(format_reading(0, "%"), "0 %")
        self.assertEqual(format_reading(None, "%"), "-- %")
        self.assertEqual(format_reading("--", "°C"), "-- °C")

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(67.5), 68)
        self.assertEqual(round_half_up(-0.4), 0)
        self.assertEqual(round_half_up(-2.5), -2)

    def test_as_number(self):
        self.assertEqual(as_number(5), 5.0)
        self.assertIsNone(as_number(False))
        self.assertIsNone(as_number(float("nan")))
        self.assertIsNone(as_number("12"))


if __name__ == "__main__":
    unittest.main()
