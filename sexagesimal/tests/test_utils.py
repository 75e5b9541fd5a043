import unittest

import numpy as np

from sexagesimal import utils
from sexagesimal.exceptions import DimensionMismatch


class IsSequenceTests(unittest.TestCase):

    def test_numbers(self):
        for value in (1, 1., -0., np.float64(2.), np.array(3.), float('nan')):
            self.assertFalse(utils.is_sequence(value))

    def test_sequences(self):
        for value in ([], [1.], (1., 2.), np.array([1., 2., 3.]), range(3)):
            self.assertTrue(utils.is_sequence(value))

    def test_strings(self):
        self.assertFalse(utils.is_sequence('12 30 00'))
        self.assertFalse(utils.is_sequence(b'12 30 00'))


class CheckSameLengthTests(unittest.TestCase):

    def test_numbers(self):
        self.assertFalse(utils.check_same_length(1., 2.))

    def test_sequences(self):
        self.assertTrue(utils.check_same_length([1., 2.], (3., 4.)))
        self.assertTrue(utils.check_same_length([], []))

    def test_mismatch(self):
        self.assertRaises(DimensionMismatch, utils.check_same_length, [1., 2.], [1.])
        self.assertRaises(DimensionMismatch, utils.check_same_length, [1., 2.], 1.)
        self.assertRaises(DimensionMismatch, utils.check_same_length, 1., [1.])


class PrecisionTests(unittest.TestCase):

    def test_round(self):
        self.assertEqual(utils.round_to_precision(35.97, 1), 36.)
        self.assertEqual(utils.round_to_precision(35.94, 1), 35.9)
        self.assertEqual(utils.round_to_precision(7.6, 0), 8.)

    def test_round_half_to_even(self):
        """Halfway values are rounded to the even neighbour"""

        self.assertEqual(utils.round_to_precision(0.5, 0), 0.)
        self.assertEqual(utils.round_to_precision(1.5, 0), 2.)
        self.assertEqual(utils.round_to_precision(2.5, 0), 2.)
        self.assertEqual(utils.round_to_precision(0.25, 1), 0.2)

    def test_truncate(self):
        self.assertEqual(utils.truncate_to_precision(35.97, 1), 35.9)
        self.assertEqual(utils.truncate_to_precision(7.6, 0), 7.)
        self.assertEqual(utils.truncate_to_precision(59.9996, 2), 59.99)
        self.assertEqual(utils.truncate_to_precision(-7.6, 0), -7.)

    def test_truncate_exact_decimals(self):
        """Decimals stored slightly too small are not truncated down"""

        self.assertEqual(utils.truncate_to_precision(0.29, 2), 0.29)
        self.assertEqual(utils.truncate_to_precision(4.35, 2), 4.35)
        self.assertEqual(utils.truncate_to_precision(0., 2), 0.)
        self.assertEqual(utils.truncate_to_precision(35.99999999999, 1), 35.9)

    def test_finite(self):
        self.assertTrue(utils.is_finite(1.))
        self.assertFalse(utils.is_finite(float('nan')))
        self.assertFalse(utils.is_finite(float('-inf')))


if __name__ == '__main__':
    unittest.main()
