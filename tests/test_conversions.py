"""
Tests for conversions between the three complex types

Covers:
1. Lossless upward conversions
2. Rounding downward conversions (half away from zero, exact)
3. Best rational approximation with a denominator bound
"""

import math
from fractions import Fraction

import pytest

from complexalgebra import (
    FloatComplex,
    GaussianComplex,
    InvalidApproximationBoundError,
    NullOperandError,
    RationalComplex,
    configure,
    float_to_gaussian,
    float_to_rational,
    gaussian_to_float,
    gaussian_to_rational,
    rational_to_float,
    rational_to_gaussian,
)


class TestUpward:
    """Gaussian -> Rational -> Float"""

    def test_gaussian_to_rational(self) -> None:
        af = gaussian_to_rational(GaussianComplex(3, 4))
        assert isinstance(af, RationalComplex)
        assert af.is_gaussian_int()
        assert af.real == 3
        assert af.imag == 4

    def test_gaussian_to_float(self) -> None:
        ad = gaussian_to_float(GaussianComplex(3, 4))
        assert ad.real == 3.0
        assert ad.imag == 4.0

    def test_gaussian_to_float_saturates(self) -> None:
        ad = GaussianComplex(10**400, -(10**400)).to_float()
        assert ad.real == math.inf
        assert ad.imag == -math.inf

    def test_rational_to_float(self) -> None:
        fd = rational_to_float(RationalComplex.from_ints(1, 2, 3, 4))
        assert fd.real == 0.5
        assert fd.imag == 0.75

    def test_rational_to_float_rounds_correctly(self) -> None:
        fd = RationalComplex((1, 3), (-2, 3)).to_float()
        assert fd.real == 1 / 3
        assert fd.imag == -2 / 3

    def test_rational_to_float_saturates(self) -> None:
        fd = RationalComplex(Fraction(10**400, 3), 0).to_float()
        assert fd.real == math.inf


class TestDownward:
    """Rounding to the nearest Gaussian integer"""

    def test_float_to_gaussian(self) -> None:
        di = float_to_gaussian(FloatComplex(3.7, 4.3))
        assert di.real == 4
        assert di.imag == 4

    @pytest.mark.parametrize("real, imag, expected", [
        (2.5, -2.5, (3, -3)),
        (0.5, -0.5, (1, -1)),
        (1.49, -1.51, (1, -2)),
        (-0.0, 0.0, (0, 0)),
    ])
    def test_float_ties_away_from_zero(self, real, imag, expected) -> None:
        di = FloatComplex(real, imag).to_gaussian()
        assert (di.real, di.imag) == expected

    def test_float_special_values(self) -> None:
        with pytest.raises(ValueError):
            FloatComplex(math.nan, 0.0).to_gaussian()
        with pytest.raises(OverflowError):
            FloatComplex(0.0, math.inf).to_gaussian()

    def test_rational_to_gaussian(self) -> None:
        di = rational_to_gaussian(RationalComplex((5, 2), (-7, 2)))
        assert di.eq(GaussianComplex(3, -4))
        di = RationalComplex((1, 3), (-2, 3)).to_gaussian()
        assert di.eq(GaussianComplex(0, -1))

    def test_rational_to_gaussian_is_exact_for_large_values(self) -> None:
        half_above = RationalComplex((2**60 + 1, 2), 0)
        assert half_above.to_gaussian().real == 2**59 + 1

    @pytest.mark.parametrize("real, imag", [
        (0, 0), (3, -4), (-7, 12), (10**30, -(10**30) + 1),
    ])
    def test_round_trip_through_rational(self, real, imag) -> None:
        g = GaussianComplex(real, imag)
        assert rational_to_gaussian(gaussian_to_rational(g)).eq(g)


class TestApproximation:
    """Best rational approximation under a denominator bound"""

    def test_simple_fractions(self) -> None:
        q = float_to_rational(FloatComplex(0.5, 1 / 3), 1000)
        assert q.eq(RationalComplex((1, 2), (1, 3)))

    def test_bound_limits_denominator(self) -> None:
        q = FloatComplex(math.pi, -math.pi).to_rational(7)
        assert q.real == Fraction(22, 7)
        assert q.imag == Fraction(-22, 7)

    def test_larger_bound_is_tighter(self) -> None:
        coarse = FloatComplex(math.pi, 0.0).to_rational(10)
        fine = FloatComplex(math.pi, 0.0).to_rational(10**6)
        assert abs(fine.real - Fraction(math.pi)) < abs(coarse.real - Fraction(math.pi))
        assert fine.real.denominator <= 10**6

    def test_default_bound_from_config(self) -> None:
        configure(default_max_denominator=10)
        assert FloatComplex(math.pi, 0.0).to_rational().real == Fraction(22, 7)

    @pytest.mark.parametrize("bound", [0, -5, 2.5, True, "7"])
    def test_invalid_bound(self, bound) -> None:
        with pytest.raises(InvalidApproximationBoundError):
            float_to_rational(FloatComplex(1.0, 1.0), bound)

    def test_invalid_bound_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            float_to_rational(FloatComplex(1.0, 1.0), 0)


class TestOperandChecks:
    """Conversions validate their input"""

    def test_none(self) -> None:
        with pytest.raises(NullOperandError):
            gaussian_to_rational(None)

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError):
            gaussian_to_rational(RationalComplex(1, 1))
        with pytest.raises(TypeError):
            float_to_rational(GaussianComplex(1, 1), 10)
