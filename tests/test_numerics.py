# tests/test_numerics.py

import math

import jax.numpy as jnp
import numpy as np
import pytest

import nestnum
from nestnum.core import numerics as nm
from nestnum.core.errors import (
    DivideByZeroError, DomainError, ShapeMismatchError, UndefinedResultError
)
from nestnum.core.kernels import to_int32
from nestnum.core.values import shape


class TestRounding:
    """Test the magnitude-rounding kernel and its broadcasting."""

    def test_default_precision(self):
        """Precision 1 rounds to the nearest integer."""
        assert nm.round_(5.2) == 5
        assert nm.round_(5.7) == 6

    def test_ties_away_from_zero(self):
        """Half-way values move away from zero."""
        assert nm.round_(2.5) == 3
        assert nm.round_(-2.5) == -3
        assert nm.round_(0.5) == 1

    def test_list_with_precision(self):
        """Rounding to one decimal keeps the sign of each value."""
        result = nm.round_([4.12, 4.67, -5.8, -5.21], 10)
        assert result == pytest.approx([4.1, 4.7, -5.8, -5.2])

    def test_precision_tree(self):
        """Precision is itself a value that broadcasts against the input."""
        result = nm.round_([1.234, [5.678, 9.8765]], [10, 100])
        assert result[0] == pytest.approx(1.2)
        assert result[1] == pytest.approx([5.68, 9.88])

    def test_precision_shape_mismatch(self):
        """Independent shapes must still agree in length."""
        with pytest.raises(ShapeMismatchError):
            nm.round_([1.0, 2.0, 3.0], [10, 100])

    def test_invalid_precision(self):
        """Zero and negative precisions are rejected."""
        with pytest.raises(DivideByZeroError):
            nm.round_(1.5, 0)
        with pytest.raises(DomainError):
            nm.round_(1.5, -10)

    def test_floor_ceil_trunc(self):
        """Integer-valued rounding functions."""
        assert nm.floor([1.7, -1.2]) == [1.0, -2.0]
        assert nm.ceil([1.2, -1.5]) == [2.0, -1.0]
        assert nm.trunc([1.7, -1.7]) == [1.0, -1.0]


class TestElementwise:
    """Test elementwise kernels dispatched through the engine."""

    def test_abs_and_sign(self):
        """Absolute value and sign keep the nesting."""
        assert nm.absolute([-1, [2.5, -3]]) == [1, [2.5, 3]]
        assert nm.sign([-2, [0, 3.5]]) == [-1, [0, 1]]

    def test_booleans_are_integers(self):
        """Python, NumPy and JAX booleans all act as 0 and 1."""
        for true in (True, np.bool_(True), jnp.array(True)):
            assert nm.absolute(true) == 1
            assert type(nm.absolute(true)) is int
            assert nm.sign(true) == 1
            assert nm.add(true, [1, 2]) == [2, 3]
        assert nm.negative([True, False]) == [-1, 0]
        assert nm.sum_([True, [True, np.bool_(False)]]) == 2

    def test_core_namespace_is_clean(self):
        """Only the declared API is re-exported from nestnum.core."""
        for leaked in ("K", "math", "jr", "jnp", "os", "time", "LOGGER", "np", "tree_util"):
            assert not hasattr(nestnum.core, leaked)
        for name in nestnum.core.__all__:
            assert hasattr(nestnum.core, name)

    def test_builtin_style_aliases(self):
        """NumPy-style aliases point at the underscored functions."""
        assert nestnum.abs is nm.absolute
        assert nestnum.round is nm.round_
        assert nestnum.sum is nm.sum_
        assert nestnum.min is nm.min_
        assert nestnum.max is nm.max_

    def test_arithmetic_broadcast(self):
        """Binary arithmetic broadcasts scalars into ragged values."""
        assert nm.add([1, [2, 3]], 1) == [2, [3, 4]]
        assert nm.subtract(10, [1, [2]]) == [9, [8]]
        assert nm.multiply([1, 2], [3, 4]) == [3, 8]
        assert nm.divide([1, 3], 2) == [0.5, 1.5]
        assert nm.negative([1, [-2]]) == [-1, [2]]

    def test_divide_by_zero(self):
        """A zero divisor fails rather than producing inf."""
        with pytest.raises(DivideByZeroError):
            nm.divide([1, 2], [1, 0])

    def test_mod_and_remainder(self):
        """mod follows the divisor's sign, remainder the dividend's."""
        assert nm.mod(-7, 3) == pytest.approx(2.0)
        assert nm.remainder(-7, 3) == pytest.approx(-1.0)
        assert nm.mod([7, 8, 9], 4) == pytest.approx([3.0, 0.0, 1.0])

    def test_mod_by_zero(self):
        """Zero divisors raise DivideByZeroError, which is a ZeroDivisionError."""
        with pytest.raises(DivideByZeroError):
            nm.mod(9, 0)
        with pytest.raises(ZeroDivisionError):
            nm.remainder([1, [2, 3]], [1, [2, 0]])

    def test_minimum_maximum_clip(self):
        """Pairwise extremes and clipping with broadcast bounds."""
        assert nm.minimum([1, 5], 3) == [1, 3]
        assert nm.maximum([1, 5], 3) == [3, 5]
        assert nm.clip([-5, 0.5, [5]], 0, 1) == [0, 0.5, [1]]

    def test_power(self):
        """Integral exponents accept negative bases."""
        assert nm.power(2, [0, 1, 10]) == [1.0, 2.0, 1024.0]
        assert nm.power(-2, 3) == pytest.approx(-8.0)
        assert nm.power(4, 0.5) == pytest.approx(2.0)

    def test_power_errors(self):
        """Each invalid power input has its own error kind."""
        with pytest.raises(DomainError):
            nm.power(-8, 1.0 / 3.0)
        with pytest.raises(DivideByZeroError):
            nm.power(0, -1)
        with pytest.raises(UndefinedResultError):
            nm.power(0, 0)
        with pytest.raises(UndefinedResultError):
            nm.power([1, [0]], 0)

    def test_logs_and_roots(self):
        """Logarithms and roots on valid input."""
        assert nm.log(math.e) == pytest.approx(1.0)
        assert nm.log10([10, 1000]) == pytest.approx([1.0, 3.0])
        assert nm.log2(8) == pytest.approx(3.0)
        assert nm.exp(0) == pytest.approx(1.0)
        assert nm.sqrt([4, [9]])[1] == pytest.approx([3.0])
        assert nm.cbrt(-27) == pytest.approx(-3.0)
        assert nm.hypot(3, 4) == pytest.approx(5.0)

    def test_log_sqrt_domain(self):
        """Non-positive log input and negative sqrt input are domain errors."""
        with pytest.raises(DomainError):
            nm.log(0)
        with pytest.raises(DomainError):
            nm.log10([1, -1])
        with pytest.raises(DomainError):
            nm.sqrt(-1)

    def test_trig(self):
        """Trigonometric kernels and conversions."""
        assert nm.sin(0) == pytest.approx(0.0)
        assert nm.cos(nm.PI) == pytest.approx(-1.0)
        assert nm.tan(nm.PI / 4) == pytest.approx(1.0)
        assert nm.arctan2(1, 1) == pytest.approx(nm.PI / 4)
        assert nm.degrees(nm.PI) == pytest.approx(180.0)
        assert nm.radians(180) == pytest.approx(nm.PI)
        assert nm.tanh(0) == pytest.approx(0.0)
        assert nm.cosh(0) == pytest.approx(1.0)

    def test_tan_poles(self):
        """Tangent is undefined at odd multiples of pi/2."""
        with pytest.raises(DomainError):
            nm.tan(nm.PI / 2)
        with pytest.raises(DomainError):
            nm.tan([0, -3 * nm.PI / 2])

    def test_tan_large_and_non_finite(self):
        """Huge finite angles evaluate; NaN passes through and infinity is undefined."""
        for x in (1e17, 1e20, 1.2345678901234568e17):
            assert nm.tan(x) == pytest.approx(math.tan(x))
        assert math.isnan(nm.tan(math.nan))
        with pytest.raises(DomainError):
            nm.tan(math.inf)
        with pytest.raises(DomainError):
            nm.tan([0.0, -math.inf])
        assert nm.tan(1e10) == pytest.approx(math.tan(1e10))

    def test_inverse_trig_domain(self):
        """arcsin/arccos only accept [-1, 1]."""
        with pytest.raises(DomainError):
            nm.arcsin(1.5)
        with pytest.raises(DomainError):
            nm.arccos([0.5, -1.01])
        assert nm.arccos(1) == pytest.approx(0.0)

    @pytest.mark.parametrize("x", [-1.0, -0.75, -0.123456, 0.0, 0.3, 0.999999, 1.0])
    def test_arcsin_round_trip(self, x):
        """sin(arcsin(x)) rounds back to x."""
        assert nm.round_(nm.sin(nm.arcsin(x)), 1_000_000) == pytest.approx(
            nm.round_(x, 1_000_000)
        )

    def test_shape_preserved(self):
        """Unary kernels keep the exact nesting of their input."""
        value = [0.1, [0.2, [0.3], []], [[0.4]]]
        for fn in (nm.sin, nm.exp, nm.floor, nm.sign, nm.arcsin):
            assert shape(fn(value)) == shape(value)


class TestBitwise:
    """Test 32-bit bitwise kernels."""

    def test_int32_wrapping(self):
        """Scalars are truncated and wrapped into signed 32-bit patterns."""
        assert to_int32(2 ** 32 + 5) == 5
        assert to_int32(2 ** 31) == -2 ** 31
        assert to_int32(-1.9) == -1

    def test_logical_ops(self):
        """and/or/xor/not on 32-bit patterns."""
        assert nm.bit_and(12, 10) == 8
        assert nm.bit_or([1, 2], 4) == [5, 6]
        assert nm.bit_xor(5, 1) == 4
        assert nm.bit_not([0, -1]) == [-1, 0]
        assert nm.bit_and(5.9, 7) == 5

    def test_shifts(self):
        """Shifts wrap at 32 bits and use the low five bits of the count."""
        assert nm.left_shift(1, 31) == -2 ** 31
        assert nm.left_shift(1, 33) == 2
        assert nm.right_shift(-8, 1) == -4
        assert nm.unsigned_right_shift(-1, 28) == 15
        assert nm.right_shift([16, 32], [2, 3]) == [4, 4]


class TestReductions:
    """Test folds over every scalar of a value."""

    def test_sum(self):
        """Sum walks into ragged nesting."""
        assert nm.sum_([10, [11.2], 8.1]) == pytest.approx(29.3, abs=1e-9)
        assert nm.sum_([]) == 0

    def test_product(self):
        """Product is seeded with the first element, not zero."""
        assert nm.product([10, 20, 30]) == 6000
        assert nm.product([[2], [3, [4]]]) == 24
        assert nm.product([]) == 1

    def test_min_max(self):
        """Extremes of all scalars."""
        assert nm.min_([10, 15.4, 3]) == 3
        assert nm.max_([10, 15.4, 3]) == 15.4
        assert nm.min_([]) == math.inf
        assert nm.max_([]) == -math.inf

    def test_mean_and_count(self):
        """Mean divides the sum by the scalar count."""
        assert nm.count([1, [2, [3]], []]) == 3
        assert nm.mean([1, [2, 3]]) == pytest.approx(2.0)
        with pytest.raises(DomainError):
            nm.mean([[], []])

    def test_bitwise_folds(self):
        """or_all/and_all fold 32-bit patterns."""
        assert nm.or_all([1, [2, 4]]) == 7
        assert nm.or_all([]) == 0
        assert nm.and_all([7, [3]]) == 3
        assert nm.and_all([]) == -1


if __name__ == "__main__":
    pytest.main([__file__])
