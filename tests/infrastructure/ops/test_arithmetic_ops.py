import unittest
from unittest import TestCase

import numpy as np

from tensorguard.domain._errors import CannotBroadcast, InvalidData
from tensorguard.domain._format import Format
from tensorguard.domain._result import Err
from tensorguard.infrastructure.ops import _arithmetic as ops
from tensorguard.infrastructure.ops._creation import tensor

INT32_MAX = 2**31 - 1
INT32_MIN = -(2**31)


def _t(values, format=None, shape=None):
    return tensor(values, format, shape).unwrap()


class TestArithmeticBasics(TestCase):
    def setUp(self) -> None:
        self.a = _t([1, 2, 3, 4, 5, 6], Format.INT32, [2, 3])
        self.b = _t([10, 20, 30], Format.INT32)

    def test_broadcast_add(self):
        out = ops.add(self.a, self.b).unwrap()
        self.assertIs(out.format, Format.INT32)
        np.testing.assert_array_equal(out.to_numpy(), [[11, 22, 33], [14, 25, 36]])

    def test_subtract_multiply(self):
        np.testing.assert_array_equal(
            ops.subtract(self.b, self.a).unwrap().to_numpy(),
            [[9, 18, 27], [6, 15, 24]],
        )
        np.testing.assert_array_equal(
            ops.multiply(self.a, self.b).unwrap().to_numpy(),
            [[10, 40, 90], [40, 100, 180]],
        )

    def test_incompatible_shapes_cannot_broadcast(self):
        c = _t([1, 2, 3, 4], Format.INT32)
        for op in (ops.add, ops.subtract, ops.multiply, ops.divide, ops.modulo,
                   ops.power, ops.max, ops.min):
            with self.subTest(op=op.__name__):
                self.assertEqual(op(self.a, c), Err(CannotBroadcast()))

    def test_mixed_formats_give_float32(self):
        out = ops.add(_t([1], Format.INT32), _t([0.5], Format.FLOAT32)).unwrap()
        self.assertIs(out.format, Format.FLOAT32)
        np.testing.assert_allclose(out.to_numpy(), [1.5])

    def test_bool_operands_act_as_integers(self):
        out = ops.subtract(_t([True, False]), _t([True, True])).unwrap()
        self.assertIs(out.format, Format.INT32)
        np.testing.assert_array_equal(out.to_numpy(), [0, -1])

    def test_max_min(self):
        a = _t([1.0, 5.0], Format.FLOAT32)
        b = _t([3.0, 2.0], Format.FLOAT32)
        np.testing.assert_array_equal(ops.max(a, b).unwrap().to_numpy(), [3.0, 5.0])
        np.testing.assert_array_equal(ops.min(a, b).unwrap().to_numpy(), [1.0, 2.0])


class TestArithmeticBounds(TestCase):
    def test_integer_add_does_not_wrap(self):
        out = ops.add(_t([INT32_MAX], Format.INT32), _t([1], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [INT32_MAX])

    def test_integer_multiply_saturates_low(self):
        out = ops.multiply(_t([INT32_MIN], Format.INT32), _t([2], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [INT32_MIN])

    def test_float_overflow_left_unclipped(self):
        big = float(np.finfo(np.float32).max)
        out = ops.add(_t([big], Format.FLOAT32), _t([big], Format.FLOAT32)).unwrap()
        self.assertTrue(np.isposinf(out.data[0]))

    def test_inf_minus_inf_is_invalid(self):
        big = float(np.finfo(np.float32).max)
        inf = ops.add(_t([big], Format.FLOAT32), _t([big], Format.FLOAT32)).unwrap()
        self.assertEqual(ops.subtract(inf, inf), Err(InvalidData()))


class TestDivide(TestCase):
    def test_int_by_int_division_floors(self):
        out = ops.divide(_t([7, -7, 6], Format.INT32), _t([2], Format.INT32)).unwrap()
        self.assertIs(out.format, Format.INT32)
        self.assertEqual(out.to_numpy().tolist(), [3, -4, 3])

    def test_int_by_negative_int_division_floors(self):
        out = ops.divide(_t([7], Format.INT32), _t([-2], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [-4])

    def test_int_by_float_division_truncates(self):
        out = ops.divide(_t([7, -7], Format.INT32), _t([2.0], Format.FLOAT32)).unwrap()
        self.assertIs(out.format, Format.INT32)
        self.assertEqual(out.to_numpy().tolist(), [3, -3])

    def test_int_zero_by_zero_is_invalid(self):
        self.assertEqual(
            ops.divide(_t([0], Format.INT32), _t([0], Format.INT32)),
            Err(InvalidData()),
        )

    def test_quotient_above_int32_max_saturates(self):
        a = _t([2_000_000_000], Format.INT32)
        b = _t([0.25], Format.FLOAT32)
        out = ops.divide(a, b).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [INT32_MAX])

    def test_quotient_below_int32_min_saturates(self):
        a = _t([-2_000_000_000], Format.INT32)
        out = ops.divide(a, _t([0.5], Format.FLOAT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [INT32_MIN])

    def test_large_int_quotient_is_exact(self):
        out = ops.divide(_t([2_147_483_645], Format.INT32), _t([1], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [2_147_483_645])

    def test_divide_by_zero_saturates(self):
        out = ops.divide(_t([7, -7], Format.INT32), _t([0], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [INT32_MAX, INT32_MIN])

    def test_zero_by_zero_is_invalid(self):
        self.assertEqual(
            ops.divide(_t([0.0], Format.FLOAT32), _t([0.0], Format.FLOAT32)),
            Err(InvalidData()),
        )

    def test_float_division(self):
        out = ops.divide(_t([1.0], Format.FLOAT32), _t([4.0], Format.FLOAT32)).unwrap()
        self.assertIs(out.format, Format.FLOAT32)
        self.assertEqual(out.to_numpy().tolist(), [0.25])


class TestModuloPower(TestCase):
    def test_modulo_follows_divisor_sign(self):
        out = ops.modulo(_t([7, -7], Format.INT32), _t([3], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [1, 2])

    def test_float_modulo_by_zero_is_invalid(self):
        self.assertEqual(
            ops.modulo(_t([1.0], Format.FLOAT32), _t([0.0], Format.FLOAT32)),
            Err(InvalidData()),
        )

    def test_int_modulo_by_zero_is_invalid(self):
        self.assertEqual(
            ops.modulo(_t([7], Format.INT32), _t([0], Format.INT32)),
            Err(InvalidData()),
        )
        self.assertEqual(
            ops.modulo(_t([7, 8], Format.INT32), _t([3, 0], Format.INT32)),
            Err(InvalidData()),
        )
        self.assertEqual(
            ops.modulo(_t([True]), _t([False])),
            Err(InvalidData()),
        )

    def test_int_modulo_with_nonzero_divisors_stays_int(self):
        out = ops.modulo(_t([7, 8], Format.INT32), _t([3, -3], Format.INT32)).unwrap()
        self.assertIs(out.format, Format.INT32)
        self.assertEqual(out.to_numpy().tolist(), [1, -1])

    def test_integer_power(self):
        out = ops.power(_t([2, 3], Format.INT32), _t([10, 2], Format.INT32)).unwrap()
        self.assertIs(out.format, Format.INT32)
        self.assertEqual(out.to_numpy().tolist(), [1024, 9])

    def test_integer_power_saturates(self):
        out = ops.power(_t([3], Format.INT32), _t([40], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [INT32_MAX])

    def test_integer_negative_exponent(self):
        out = ops.power(_t([2], Format.INT32), _t([-1], Format.INT32)).unwrap()
        self.assertEqual(out.to_numpy().tolist(), [0])

    def test_negative_base_fractional_exponent_is_invalid(self):
        self.assertEqual(
            ops.power(_t([-8.0], Format.FLOAT32), _t([0.5], Format.FLOAT32)),
            Err(InvalidData()),
        )


if __name__ == "__main__":
    unittest.main()
