"""
Conversions between the three complex types.

Going up (Gaussian -> Rational -> Float) loses nothing beyond ordinary double
rounding.  Going down rounds to the nearest integer, half away from zero, or
approximates by the closest fraction under a denominator bound.  Rounding is
done exactly on the integer and rational components, never through an
intermediate double.
"""

import fractions
import math
import numbers

from .config import get_config
from .exceptions import InvalidApproximationBoundError
from .floating import FloatComplex
from .gaussian import GaussianComplex
from .lifecycle import check_operands
from .rational import RationalComplex

__all__ = [
    'gaussian_to_rational',
    'gaussian_to_float',
    'rational_to_float',
    'rational_to_gaussian',
    'float_to_gaussian',
    'float_to_rational',
    'lift',
    'coerce_pair',
]

# Lowest to highest; any value converts losslessly to a later type.
_TOWER = (GaussianComplex, RationalComplex, FloatComplex)


def _expect(operation, value, cls):
    check_operands(operation, value)
    if not isinstance(value, cls):
        raise TypeError("{}: expected {}, got {}".format(
            operation, cls.__name__, type(value).__name__))


def _saturating_float(value):
    """Nearest double to an int or Fraction, with overflow giving +-inf."""
    try:
        return float(value)
    except OverflowError:
        return -math.inf if value < 0 else math.inf


def _round_half_away(value):
    """Round a Fraction to the nearest int, ties away from zero."""
    whole, rest = divmod(abs(value.numerator), value.denominator)
    if 2*rest >= value.denominator:
        whole += 1
    return -whole if value < 0 else whole


def gaussian_to_rational(c):
    """Each integer component n becomes n/1."""
    _expect('gaussian_to_rational', c, GaussianComplex)
    return RationalComplex(c.real, c.imag)


def gaussian_to_float(c):
    """
    Nearest double for each component.  Integers beyond 2**53 lose precision
    silently and integers beyond the double range become infinities.
    """
    _expect('gaussian_to_float', c, GaussianComplex)
    return FloatComplex(_saturating_float(c.real), _saturating_float(c.imag))


def rational_to_float(c):
    """Each reduced fraction divided out with correct rounding."""
    _expect('rational_to_float', c, RationalComplex)
    return FloatComplex(_saturating_float(c.real), _saturating_float(c.imag))


def rational_to_gaussian(c):
    """
    Nearest Gaussian integer, rounding each component half away from zero.
    Check `is_gaussian_int` first when the conversion must be exact.
    """
    _expect('rational_to_gaussian', c, RationalComplex)
    return GaussianComplex(_round_half_away(c.real), _round_half_away(c.imag))


def float_to_gaussian(c):
    """
    Nearest Gaussian integer, rounding each component half away from zero.
    NaN and infinite components have no integer value: they raise the
    `ValueError` or `OverflowError` of `fractions.Fraction`.
    """
    _expect('float_to_gaussian', c, FloatComplex)
    return GaussianComplex(_round_half_away(fractions.Fraction(c.real)),
                           _round_half_away(fractions.Fraction(c.imag)))


def float_to_rational(c, max_denominator=None):
    """
    Closest fraction to each component with a denominator of at most
    `max_denominator`, found independently per component.  Larger bounds give
    tighter approximations.  Defaults to the configured bound.
    """
    _expect('float_to_rational', c, FloatComplex)
    if max_denominator is None:
        max_denominator = get_config().default_max_denominator
    if (isinstance(max_denominator, bool)
            or not isinstance(max_denominator, numbers.Integral)
            or max_denominator <= 0):
        raise InvalidApproximationBoundError(
            "max_denominator must be a positive integer", 'float_to_rational',
            {'max_denominator': max_denominator})
    bound = int(max_denominator)
    return RationalComplex(
        fractions.Fraction(c.real).limit_denominator(bound),
        fractions.Fraction(c.imag).limit_denominator(bound),
    )


# Keyed by (from, to) positions in _TOWER.
_UPWARD = {
    (0, 1): gaussian_to_rational,
    (0, 2): gaussian_to_float,
    (1, 2): rational_to_float,
}


def _rank(value):
    for rank, cls in enumerate(_TOWER):
        if isinstance(value, cls):
            return rank
    return None


def lift(value):
    """
    Convert a plain Python number into the lowest complex type holding it
    exactly: integers to Gaussian, other rationals to Rational, anything
    else numeric to Float.  Values of the three types pass through; None is
    returned for non-numbers.
    """
    if isinstance(value, _TOWER):
        return value
    if isinstance(value, numbers.Integral):
        return GaussianComplex(value, 0)
    if isinstance(value, numbers.Rational):
        return RationalComplex(value, 0)
    if isinstance(value, numbers.Complex):
        value = complex(value)
        return FloatComplex(value.real, value.imag)
    return None


def coerce_pair(a, b):
    """
    Bring `a` and `b` to the same complex type, promoting the lower of the two
    up the tower.  Returns None when either is not a number.
    """
    check_operands('coerce', a, b)
    a, b = lift(a), lift(b)
    if a is None or b is None:
        return None
    rank_a, rank_b = _rank(a), _rank(b)
    if rank_a < rank_b:
        a = _UPWARD[rank_a, rank_b](a)
    elif rank_b < rank_a:
        b = _UPWARD[rank_b, rank_a](b)
    return a, b
