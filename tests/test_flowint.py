#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import unittest

import numpy as np

from pynat.errors import DivisionByZero, InvalidArgument
from pynat.flowint import UFlow, UFlow32


class FlowIntTestCase(unittest.TestCase):

    def test_uflow_cmp(self):
        self.assertTrue(UFlow(0) == UFlow(0))
        self.assertTrue(UFlow(3) == UFlow(3))

        self.assertTrue(UFlow(1) > UFlow(0))
        self.assertTrue(UFlow(2) > UFlow(1))

        self.assertTrue(UFlow(0) < UFlow(1))
        self.assertTrue(UFlow(1) < UFlow(2))

        self.assertTrue(UFlow(1) >= UFlow(0))
        self.assertTrue(UFlow(2) >= UFlow(1))
        self.assertTrue(UFlow(2) >= UFlow(2))

        self.assertTrue(UFlow(0) <= UFlow(1))
        self.assertTrue(UFlow(1) <= UFlow(2))
        self.assertTrue(UFlow(2) <= UFlow(2))

        self.assertTrue(UFlow32(7) == 7)
        self.assertTrue(UFlow32(7) < np.uint32(8))

    def test_uflow_math(self):
        self.assertEqual(UFlow(123) + UFlow(123), UFlow(123 + 123))
        self.assertEqual(UFlow(123) - UFlow(42), UFlow(123 - 42))
        self.assertEqual(UFlow(32) * UFlow(3), UFlow(32 * 3))
        self.assertEqual(UFlow(255) + UFlow(42), UFlow(41), 'overflow')
        self.assertEqual(UFlow(42) - UFlow(123), UFlow(256 - (123 - 42)), '(integer) underflow')
        self.assertEqual(UFlow(150) * UFlow(3), UFlow((150 * 3) - 256), 'overflow')
        self.assertEqual((UFlow(42) * UFlow(42)) / UFlow(3), UFlow(((42 * 42) / 3) % 256), 'overflow')
        self.assertEqual(UFlow(200) % UFlow(7), UFlow(200 % 7))

    def test_uflow32_math(self):
        max_uint32 = 4294967295
        self.assertEqual(UFlow32(max_uint32) + UFlow32(1), UFlow32(0), 'overflow')
        self.assertEqual(UFlow32(0) - UFlow32(1), UFlow32(max_uint32), '(integer) underflow')
        self.assertEqual(UFlow32(65536) * UFlow32(65536), UFlow32(0), 'overflow')
        self.assertEqual(UFlow32(100) // UFlow32(7), UFlow32(14))
        self.assertEqual(UFlow32(100) + 5, UFlow32(105))

    def test_uflow32_bits(self):
        self.assertEqual(UFlow32(0x80000001) << 1, UFlow32(2), 'top bit shifted out')
        self.assertEqual(UFlow32(0x80000001) >> 31, UFlow32(1))
        self.assertEqual(UFlow32(0b1100) | UFlow32(0b0011), UFlow32(0b1111))
        self.assertEqual(UFlow32(0b1100) & UFlow32(0b0110), UFlow32(0b0100))
        self.assertEqual(UFlow32(0b1100) ^ UFlow32(0b0110), UFlow32(0b1010))
        with self.assertRaises(InvalidArgument):
            UFlow32(1) << -1

    def test_uflow32_range(self):
        UFlow32(0)
        UFlow32(4294967295)
        with self.assertRaises(InvalidArgument):
            UFlow32(4294967296)
        with self.assertRaises(InvalidArgument):
            UFlow32(-1)
        with self.assertRaises(InvalidArgument):
            UFlow(256)
        self.assertEqual(UFlow32(np.uint64(12)).num, 12)
        self.assertEqual(UFlow32(5).num_bits, 32)

    def test_uflow32_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            UFlow32(5) // UFlow32(0)
        with pytest.raises(ZeroDivisionError):
            UFlow32(5) % UFlow32(0)

    def test_uflow32_conversions(self):
        self.assertEqual(int(UFlow32(42)), 42)
        self.assertEqual(f"{UFlow32(255):x}", 'ff')
        self.assertEqual(repr(UFlow32(5)), 'uflow5')
        self.assertEqual(hash(UFlow32(5)), hash(5))
        self.assertFalse(UFlow32(0))


if __name__ == '__main__':
    unittest.main()
