"""
Tests for FixedPointMath

Checks:
1. Exact arithmetic delegates to the variant
2. Transcendental functions within the variant's resolution
3. Rounding to whole numbers / digits
4. Domain errors re-quantize per the overflow mode
5. Operand type checks
"""

import math

import pytest

from velentr.core.math.fixed_point import (
    FP2,
    FP4,
    FP8,
    FixedPoint,
    FixedPointDivisionByZeroError,
    FixedPointMath,
    FixedPointNotFiniteError,
    OverflowMode,
    override_settings,
)

fp2_math = FixedPointMath(FP2)
fp8_math = FixedPointMath(FP8)


def fp2(value: float) -> FP2:
    return FP2.from_double(value)


class TestArithmetic:
    """Exact arithmetic through the facade"""

    def test_add(self) -> None:
        assert fp2_math.add(fp2(1.23), fp2(4.56)).to_double() == pytest.approx(5.79, abs=0.01)

    def test_subtract(self) -> None:
        assert fp2_math.subtract(fp2(5.79), fp2(1.23)).to_double() == pytest.approx(4.56, abs=0.01)

    def test_multiply(self) -> None:
        assert fp2_math.multiply(fp2(1.23), fp2(4.56)).to_double() == pytest.approx(5.60, abs=0.01)

    def test_divide(self) -> None:
        """Truncating division keeps 5.60 / 1.23 within 0.01 of 4.56"""
        assert fp2_math.divide(fp2(5.60), fp2(1.23)).to_double() == pytest.approx(4.56, abs=0.01)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(FixedPointDivisionByZeroError):
            fp2_math.divide(FP2.ONE, FP2.ZERO)

    def test_abs(self) -> None:
        assert fp2_math.abs(fp2(-1.23)).to_double() == pytest.approx(1.23, abs=0.01)

    def test_square_and_cube(self) -> None:
        assert fp2_math.square(fp2(3)).to_double() == pytest.approx(9.0)
        assert fp2_math.cube(fp2(-2)).to_double() == pytest.approx(-8.0)

    def test_predicates(self) -> None:
        assert fp2_math.is_zero(fp2(0.0))
        assert fp2_math.is_positive(fp2(1.23))
        assert fp2_math.is_negative(fp2(-1.23))
        assert not fp2_math.is_positive(FP2.ZERO)


class TestSelection:
    """max / min / aggregates"""

    def test_max_min(self) -> None:
        a, b = fp2(1.23), fp2(4.56)
        assert fp2_math.max(a, b) == b
        assert fp2_math.min(a, b) == a

    def test_maximum_minimum(self) -> None:
        values = [fp2(v) for v in (1, 5, 10, 3)]
        assert fp2_math.maximum(*values) == fp2(10)
        assert fp2_math.minimum(*values) == fp2(1)

    def test_maximum_requires_values(self) -> None:
        with pytest.raises(ValueError):
            fp2_math.maximum()
        with pytest.raises(ValueError):
            fp2_math.minimum()

    def test_sum(self) -> None:
        assert fp2_math.sum(fp2(1.5), fp2(2.5), fp2(-1)) == fp2(3)
        assert fp2_math.sum() == FP2.ZERO

    def test_magnitude(self) -> None:
        assert fp2_math.max_magnitude(fp2(-5), fp2(3)) == fp2(-5)
        assert fp2_math.min_magnitude(fp2(-5), fp2(3)) == fp2(3)


class TestTranscendental:
    """Double-precision evaluation, re-quantized"""

    @pytest.mark.parametrize(
        "method,args,expected",
        [
            ("sqrt", (4.0,), 2.0),
            ("pow", (2.0, 3.0), 8.0),
            ("log", (math.e,), 1.0),
            ("exp", (1.0,), math.e),
            ("sin", (math.pi / 2,), 1.0),
            ("cos", (0.0,), 1.0),
            ("tan", (math.pi / 4,), 1.0),
            ("asin", (1.0,), math.pi / 2),
            ("acos", (1.0,), 0.0),
            ("atan", (1.0,), math.pi / 4),
            ("atan2", (1.0, 1.0), math.pi / 4),
            ("log10", (100.0,), 2.0),
            ("log2", (8.0,), 3.0),
            ("log1p", (1.0,), math.log(2.0)),
            ("pow10", (2.0,), 100.0),
            ("pow_pi", (1.0,), math.pi),
            ("sinh", (1.0,), math.sinh(1.0)),
            ("cosh", (1.0,), math.cosh(1.0)),
            ("tanh", (1.0,), math.tanh(1.0)),
        ],
    )
    def test_fp2_within_resolution(self, method: str, args: tuple, expected: float) -> None:
        """Results within 0.01 at two digits"""
        result = getattr(fp2_math, method)(*(fp2(a) for a in args))

        assert type(result) is FP2
        assert result.to_double() == pytest.approx(expected, abs=0.01)

    def test_log_with_base(self) -> None:
        assert fp2_math.log(fp2(8), fp2(2)).to_double() == pytest.approx(3.0, abs=0.01)

    def test_log1p_is_log_of_one_plus(self) -> None:
        """ln(1 + x), not ln(1) + x"""
        result = fp8_math.log1p(FP8.from_double(0.5))
        assert result.to_double() == pytest.approx(math.log(1.5), abs=1e-7)

    def test_fp8_precision(self) -> None:
        """Higher precision variants keep more digits"""
        result = fp8_math.sqrt(FP8.from_int(2))
        assert result.to_double() == pytest.approx(math.sqrt(2.0), abs=1e-8)


class TestRounding:
    """round / floor / ceiling"""

    def test_round_floor_ceiling(self) -> None:
        value = fp2(1.234)
        assert fp2_math.round(value).to_double() == pytest.approx(1.0)
        assert fp2_math.floor(value).to_double() == pytest.approx(1.0)
        assert fp2_math.ceiling(value).to_double() == pytest.approx(2.0)

    def test_round_half_even(self) -> None:
        assert fp2_math.round(fp2(2.5)) == fp2(2)
        assert fp2_math.round(fp2(3.5)) == fp2(4)
        assert fp2_math.round(fp2(-2.5)) == fp2(-2)

    def test_round_digits(self) -> None:
        result = FixedPointMath(FP4).round(FP4.from_double(1.2345), 2)
        assert result.to_double() == pytest.approx(1.23, abs=1e-4)

    def test_negative_floor(self) -> None:
        assert fp2_math.floor(fp2(-1.5)) == fp2(-2)
        assert fp2_math.ceiling(fp2(-1.5)) == fp2(-1)


class TestDomainErrors:
    """NaN / inf results follow the overflow mode"""

    def test_sqrt_negative_wraps_to_min(self) -> None:
        """Default WRAP: NaN becomes MIN_RAW"""
        assert fp2_math.sqrt(fp2(-1)) == FP2.MIN_VALUE

    def test_log_zero_saturates(self) -> None:
        with override_settings(overflow_mode=OverflowMode.SATURATE):
            assert fp2_math.log(FP2.ZERO) == FP2.MIN_VALUE
            assert fp2_math.exp(fp2(1000)) == FP2.MAX_VALUE

    def test_asin_out_of_domain_raises(self) -> None:
        with override_settings(overflow_mode=OverflowMode.RAISE):
            with pytest.raises(FixedPointNotFiniteError):
                fp2_math.asin(fp2(2))


class TestTypeChecks:
    """A facade serves exactly one variant"""

    def test_rejects_other_variant(self) -> None:
        with pytest.raises(TypeError):
            fp2_math.add(FP2.ONE, FP4.ONE)
        with pytest.raises(TypeError):
            fp2_math.sqrt(FP8.ONE)

    def test_rejects_plain_numbers(self) -> None:
        with pytest.raises(TypeError):
            fp2_math.sqrt(4.0)

    def test_rejects_non_fixed_point_kind(self) -> None:
        with pytest.raises(TypeError):
            FixedPointMath(float)
        with pytest.raises(TypeError):
            FixedPointMath(FixedPoint)

    def test_repr(self) -> None:
        assert repr(fp8_math) == "FixedPointMath(FP8)"
