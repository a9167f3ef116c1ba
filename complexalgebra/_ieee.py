"""
Complex elementary functions with IEEE-754 results instead of exceptions.

`cmath` raises `OverflowError` where C99 Annex G overflows to an infinity and
`ValueError` where it signals invalid and returns a NaN.  Each function here
tries `cmath` first and, when it raises, rebuilds the Annex G value from the
real-valued formulas.  Plain float arithmetic never raises, so only the
`math` calls need guarding.
"""

import cmath
import math

__all__ = ['exp', 'sin', 'cos', 'tan', 'sinh', 'cosh', 'tanh', 'power']

_NAN_PAIR = complex(math.nan, math.nan)


def _rexp(x):
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _rsinh(x):
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def _rcosh(x):
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def _rsin(y):
    try:
        return math.sin(y)
    except ValueError:
        return math.nan


def _rcos(y):
    try:
        return math.cos(y)
    except ValueError:
        return math.nan


def _exp(x, y):
    scale = _rexp(x)
    if y == 0:
        return complex(scale, y)
    if math.isinf(scale) and not math.isfinite(y):
        return complex(scale, math.nan)
    return complex(scale*_rcos(y), scale*_rsin(y))


def _sinh(x, y):
    if y == 0:
        return complex(_rsinh(x), y)
    return complex(_rsinh(x)*_rcos(y), _rcosh(x)*_rsin(y))


def _cosh(x, y):
    if y == 0:
        sign = math.copysign(1.0, x) * math.copysign(1.0, y)
        return complex(_rcosh(x), math.copysign(0.0, sign))
    return complex(_rcosh(x)*_rcos(y), _rsinh(x)*_rsin(y))


def _tanh(x, y):
    if math.isinf(x):
        return complex(math.copysign(1.0, x), math.copysign(0.0, y))
    return _NAN_PAIR


def _guarded(func, fallback):
    def wrapped(z):
        try:
            return func(z)
        except (OverflowError, ValueError):
            return fallback(z.real, z.imag)
    wrapped.__name__ = func.__name__
    return wrapped


exp = _guarded(cmath.exp, _exp)
sinh = _guarded(cmath.sinh, _sinh)
cosh = _guarded(cmath.cosh, _cosh)
tanh = _guarded(cmath.tanh, _tanh)


# sin(z) = -i*sinh(iz), cos(z) = cosh(iz) and tan(z) = -i*tanh(iz), worked
# on components so no infinity meets a zero in a complex product.

def _sin(x, y):
    w = _sinh(-y, x)
    return complex(w.imag, -w.real)


def _cos(x, y):
    return _cosh(-y, x)


def _tan(x, y):
    w = _tanh(-y, x)
    return complex(w.imag, -w.real)


sin = _guarded(cmath.sin, _sin)
cos = _guarded(cmath.cos, _cos)
tan = _guarded(cmath.tan, _tan)


def power(base, exponent):
    """
    `base ** exponent`, overflowing to infinities.  A zero base with a
    negative or complex exponent still raises `ZeroDivisionError`.
    """
    try:
        return base ** exponent
    except (OverflowError, ValueError):
        w = exponent * cmath.log(base)
        return _exp(w.real, w.imag)
