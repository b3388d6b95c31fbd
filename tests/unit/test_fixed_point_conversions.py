"""
Tests for conversions between fixed-point variants

Checks:
1. Every variant pair preserves the value within the coarser resolution
2. Widening is exact, narrowing rounds half-even
3. The to_fixed_point_precision_* helpers and the Precision aliases
"""

import itertools

import pytest

from velentr.core.math.fixed_point import (
    FP2,
    FP2I,
    FP4,
    FP6,
    FP8,
    VARIANTS,
    FixedPointPrecision2,
    FixedPointPrecision2I,
    FixedPointPrecision4,
    FixedPointPrecision6,
    FixedPointPrecision8,
    convert,
    rescale_raw,
)

SAMPLE_VALUES = [0.0, 1.23, -4.56, 100.99, 1.2345, -4.5678, 100.9999, 1.234567, -4.56789, 100.999999]


class TestPairwiseConversion:
    """Each variant converted into each other variant"""

    @pytest.mark.parametrize(
        "source,target", list(itertools.permutations(VARIANTS, 2))
    )
    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_value_preserved(self, source, target, value: float) -> None:
        """Converted value stays within 0.01 of the original"""
        converted = source.from_double(value).convert_to(target)

        assert type(converted) is target
        assert converted.to_double() == pytest.approx(value, abs=0.01)

    def test_same_variant_returns_same_object(self) -> None:
        """No-op conversion"""
        value = FP4.from_double(1.5)
        assert convert(value, FP4) is value


class TestRescale:
    """Raw rescaling"""

    def test_widening_is_exact(self) -> None:
        """FP2 -> FP8 shifts left by 20"""
        assert rescale_raw(457, 7, 27) == 457 << 20
        assert FP2(457).convert_to(FP8).raw_value == 457 << 20

    def test_narrowing_rounds_half_even(self) -> None:
        """Exactly halfway raw values round to even"""
        # 3 / 2 -> 2, 5 / 2 -> 2, -3 / 2 -> -2
        assert rescale_raw(3, 8, 7) == 2
        assert rescale_raw(5, 8, 7) == 2
        assert rescale_raw(-3, 8, 7) == -2

    def test_narrowing_matches_from_double(self) -> None:
        """convert(x, T) == T.from_double(x.to_double())"""
        for value in (3.00572341, -7 / 3, 100.999999):
            fp8 = FP8.from_double(value)
            assert fp8.convert_to(FP2) == FP2.from_double(fp8.to_double())

    def test_chain_preserves_value(self) -> None:
        """FP2 -> FP4 -> FP6 -> FP8 -> FP2 is lossless"""
        start = FP2.from_double(61.38)
        result = start.convert_to(FP4).convert_to(FP6).convert_to(FP8).convert_to(FP2)
        assert result == start

    def test_narrowing_into_32_bits_wraps(self) -> None:
        """FP8 values beyond the FP2I range wrap by default"""
        big = FP8.from_int(20_000_000)
        assert big.convert_to(FP2I).raw_value == 20_000_000 * 128 - 2**32


class TestPrecisionHelpers:
    """to_fixed_point_precision_* methods"""

    def test_helpers_return_target_types(self) -> None:
        value = FP6.from_double(1.234567)
        assert type(value.to_fixed_point_precision_2()) is FP2
        assert type(value.to_fixed_point_precision_2i()) is FP2I
        assert type(value.to_fixed_point_precision_4()) is FP4
        assert type(value.to_fixed_point_precision_6()) is FP6
        assert type(value.to_fixed_point_precision_8()) is FP8

    def test_helper_values(self) -> None:
        value = FP4.from_double(1.2345)
        assert value.to_fixed_point_precision_2().to_double() == pytest.approx(1.2345, abs=0.01)
        assert value.to_fixed_point_precision_8().to_double() == pytest.approx(1.2345, abs=0.0001)


class TestPrecisionAliases:
    """FixedPointPrecisionN is FPN"""

    def test_aliases(self) -> None:
        assert FixedPointPrecision2 is FP2
        assert FixedPointPrecision2I is FP2I
        assert FixedPointPrecision4 is FP4
        assert FixedPointPrecision6 is FP6
        assert FixedPointPrecision8 is FP8

    def test_alias_behaviour(self) -> None:
        """Aliases share fixtures with the short names"""
        assert FixedPointPrecision4(12345).to_string() == "0.7535"
        assert FixedPointPrecision2I.from_double(3.57).raw_value == 457
