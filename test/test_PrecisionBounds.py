import unittest

from scaled_decimal.DecimalError import DecimalError, InvalidScale, MalformedDecimal, PrecisionExceeded
from scaled_decimal.Parse import parse
from scaled_decimal.PrecisionBounds import PrecisionBounds
from scaled_decimal.ScaledValue import ScaledValue


class TestPrecisionBounds(unittest.TestCase):

    def test_within_bounds(self):
        bounds = PrecisionBounds(5, 2)

        self.assertEqual(ScaledValue(12345, 2), bounds.parse('123.45'))
        self.assertEqual(ScaledValue(-5, 1), bounds.parse('-0.5'))
        self.assertEqual(ScaledValue(0, 2), bounds.parse('0.00'))

    def test_precision_exceeded(self):
        bounds = PrecisionBounds(5, 2)

        with self.assertRaises(PrecisionExceeded) as context:
            bounds.parse('1234.56')
        self.assertEqual(ScaledValue(123456, 2), context.exception.value)

        with self.assertRaises(PrecisionExceeded):
            bounds.parse('1.234')

    def test_unbounded_scale(self):
        bounds = PrecisionBounds(4)

        self.assertEqual(ScaledValue(1234, 4), bounds.parse('0.1234'))
        with self.assertRaises(PrecisionExceeded):
            bounds.parse('0.12345')

    def test_arithmetic(self):
        a = parse('12.34')
        b = parse('5.678')

        self.assertEqual(ScaledValue(18018, 3), PrecisionBounds(5, 3).add(a, b))
        self.assertEqual(ScaledValue(6662, 3), PrecisionBounds(4, 3).subtract(a, b))
        self.assertEqual(ScaledValue(7006652, 5), PrecisionBounds(10, 5).multiply(a, b))

        with self.assertRaises(PrecisionExceeded):
            PrecisionBounds(6).multiply(a, b)
        with self.assertRaises(PrecisionExceeded):
            PrecisionBounds(10, 4).multiply(a, b)
        with self.assertRaises(PrecisionExceeded):
            PrecisionBounds(4, 2).add(a, b)

    def test_check(self):
        value = ScaledValue(999, 0)
        self.assertIs(value, PrecisionBounds(3).check(value))

        with self.assertRaises(PrecisionExceeded):
            PrecisionBounds(3).check(ScaledValue(-1000, 0))

    def test_parse_errors_pass_through(self):
        with self.assertRaises(MalformedDecimal):
            PrecisionBounds(5).parse('1.2.3')

    def test_invalid_bounds(self):
        for precision in [0, -1, 2.5, True, None]:
            with self.subTest(precision=precision):
                with self.assertRaises(DecimalError):
                    PrecisionBounds(precision)

        for scale in [-1, 1.5, False]:
            with self.subTest(scale=scale):
                with self.assertRaises(InvalidScale):
                    PrecisionBounds(5, scale)

        with self.assertRaises(InvalidScale):
            PrecisionBounds(2, 3)

    def test_from_dict(self):
        self.assertEqual(PrecisionBounds(18, 6), PrecisionBounds.from_dict({'precision': 18, 'scale': 6}))
        self.assertEqual(PrecisionBounds(18), PrecisionBounds.from_dict({'precision': 18}))

        with self.assertRaises(DecimalError):
            PrecisionBounds.from_dict({'scale': 2})
        with self.assertRaises(DecimalError):
            PrecisionBounds.from_dict({'precision': 5, 'rounding': 'half_even'})

    def test_exceeded_is_logged(self):
        with self.assertLogs('scaled_decimal.PrecisionBounds', level='DEBUG'):
            with self.assertRaises(PrecisionExceeded):
                PrecisionBounds(1).parse('10')


if __name__ == '__main__':
    unittest.main()
