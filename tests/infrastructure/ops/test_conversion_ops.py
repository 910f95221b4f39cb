import unittest
from unittest import TestCase

import numpy as np

from tensorguard.domain._errors import IncompatibleShape
from tensorguard.domain._format import Format
from tensorguard.domain._result import Err, Ok
from tensorguard.infrastructure.ops import _conversion as ops
from tensorguard.infrastructure.ops._creation import tensor

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


def _t(values, format=None, shape=None):
    return tensor(values, format, shape).unwrap()


class TestToNumber(TestCase):
    def test_native_scalars_pass_through(self):
        self.assertEqual(ops.to_number(3), 3)
        self.assertIs(ops.to_number(True), True)

    def test_single_element_tensor(self):
        self.assertEqual(ops.to_number(_t(2.5)), 2.5)
        self.assertEqual(ops.to_number(_t([7], shape=[1, 1])), 7)

    def test_rejects_everything_else(self):
        with self.assertRaises(IncompatibleShape):
            ops.to_number(_t([1, 2]))
        with self.assertRaises(IncompatibleShape):
            ops.to_number(float("inf"))
        with self.assertRaises(IncompatibleShape):
            ops.to_number("3")


class TestScalarConversion(TestCase):
    def test_to_float(self):
        self.assertEqual(ops.to_float(_t(2.5)), Ok(2.5))
        self.assertEqual(ops.to_float(_t(3, Format.INT32)), Ok(3.0))

    def test_to_int_truncates(self):
        self.assertEqual(ops.to_int(_t([3.9])), Ok(3))
        self.assertEqual(ops.to_int(_t([-3.9])), Ok(-3))

    def test_to_int_saturates(self):
        self.assertEqual(ops.to_int(_t(1e20, Format.FLOAT32)), Ok(INT32_MAX))
        self.assertEqual(ops.to_int(_t(-1e20, Format.FLOAT32)), Ok(INT32_MIN))

    def test_non_scalar_is_incompatible(self):
        self.assertEqual(ops.to_int(_t([1, 2])), Err(IncompatibleShape()))
        self.assertEqual(ops.to_float(_t([1.0, 2.0])), Err(IncompatibleShape()))


class TestListConversion(TestCase):
    def test_to_flat_list_is_row_major_copy(self):
        x = _t([1, 2, 3, 4], Format.INT32, [2, 2])
        values = ops.to_flat_list(x)
        self.assertEqual(values, [1, 2, 3, 4])
        values.append(5)
        self.assertEqual(ops.to_flat_list(x), [1, 2, 3, 4])

    def test_float_list_round_trip_is_close(self):
        values = [0.1, 1e-7, 123456.789, -2.5, 3.4e38]
        x = _t(values, Format.FLOAT32)
        np.testing.assert_allclose(ops.to_flat_list(x), values, rtol=1e-6)
        np.testing.assert_allclose(ops.to_floats(x).unwrap(), values, rtol=1e-6)

    def test_to_ints_saturates_and_truncates(self):
        x = _t([1e10, -1e10, 2.7], Format.FLOAT32)
        self.assertEqual(ops.to_ints(x), Ok([INT32_MAX, INT32_MIN, 2]))

    def test_to_floats(self):
        self.assertEqual(ops.to_floats(_t([1, 2], Format.INT32)), Ok([1.0, 2.0]))
        self.assertEqual(ops.to_floats(_t([True, False])), Ok([1.0, 0.0]))


if __name__ == "__main__":
    unittest.main()
