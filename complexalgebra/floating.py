"""
Double precision complex numbers with the usual transcendental functions.

Values follow IEEE-754: NaN and infinities are ordinary values, checked with
`is_nan` and `is_inf`.  The zero, real and imaginary predicates compare
exactly against 0.0; there is no tolerance.
"""

import cmath
import math
import numbers

from . import _ieee
from ._format import format_complex
from ._operators import complex_hash, generate_operators
from .exceptions import DivisionByZeroError, LogOfZeroError
from .lifecycle import RefCounted, SingletonTable, check_operands

__all__ = ['FloatComplex']


def _to_double(arg, operation):
    check_operands(operation, arg)
    if isinstance(arg, numbers.Real):
        return float(arg)
    if isinstance(arg, numbers.Complex):
        raise TypeError("{}: component must not be complex".format(operation))
    raise TypeError("{}: unknown type passed: {!r}".format(operation, arg))


def _str_double(x):
    """Shortest round-trip text of `x`, without a trailing '.0'."""
    out = repr(x)
    return out[:-2] if out.endswith('.0') else out


def _unary(name, func, doc):
    def method(self):
        check_operands(name, self)
        return FloatComplex._wrap(func(self._value))
    method.__name__ = name
    method.__doc__ = doc
    return method


class FloatComplex(RefCounted, numbers.Complex):
    """
    Implements complex numbers `a + b*i` where `a` and `b` are Python floats.
    """

    __slots__ = ('_value',)

    def __init__(self, real=0.0, imag=0.0):
        self._value = complex(_to_double(real, 'FloatComplex'),
                              _to_double(imag, 'FloatComplex'))
        self._init_refcount()

    @classmethod
    def _wrap(cls, value):
        return cls(value.real, value.imag)

    @classmethod
    def from_doubles(cls, real, imag):
        return cls(real, imag)

    @classmethod
    def from_polar(cls, magnitude, angle):
        """`magnitude * (cos(angle) + i*sin(angle))`"""
        magnitude = _to_double(magnitude, 'from_polar')
        angle = _to_double(angle, 'from_polar')
        return cls(magnitude*math.cos(angle), magnitude*math.sin(angle))

    @classmethod
    def zero(cls):
        return _singletons.get('zero')

    @classmethod
    def one(cls):
        return _singletons.get('one')

    @classmethod
    def i(cls):
        return _singletons.get('i')

    @classmethod
    def neg_one(cls):
        return _singletons.get('neg_one')

    @classmethod
    def neg_i(cls):
        return _singletons.get('neg_i')

    def copy(self):
        check_operands('copy', self)
        return FloatComplex._wrap(self._value)

    def _free(self):
        self._value = None

    @property
    def real(self):
        check_operands('real', self)
        return self._value.real

    @property
    def imag(self):
        check_operands('imag', self)
        return self._value.imag

    def abs(self):
        """Modulus, `sqrt(real**2 + imag**2)` without intermediate overflow."""
        check_operands('abs', self)
        return abs(self._value)

    def arg(self):
        """Argument `atan2(imag, real)`, in the range (-pi, pi]."""
        check_operands('arg', self)
        return cmath.phase(self._value)

    def add(self, other):
        _check_pair('add', self, other)
        return FloatComplex._wrap(self._value + other._value)

    def sub(self, other):
        _check_pair('sub', self, other)
        return FloatComplex._wrap(self._value - other._value)

    def mul(self, other):
        _check_pair('mul', self, other)
        return FloatComplex._wrap(self._value * other._value)

    def div(self, other):
        _check_pair('div', self, other)
        if other._value == 0:
            raise DivisionByZeroError("division by zero", 'div')
        return FloatComplex._wrap(self._value / other._value)

    def negate(self):
        check_operands('negate', self)
        return FloatComplex._wrap(-self._value)

    def conj(self):
        check_operands('conj', self)
        return FloatComplex._wrap(self._value.conjugate())

    exp = _unary('exp', _ieee.exp, "e raised to this value.")
    sqrt = _unary('sqrt', cmath.sqrt,
                  "Principal square root; the result has a non-negative real part.")
    sin = _unary('sin', _ieee.sin, None)
    cos = _unary('cos', _ieee.cos, None)
    tan = _unary('tan', _ieee.tan, None)
    sinh = _unary('sinh', _ieee.sinh, None)
    cosh = _unary('cosh', _ieee.cosh, None)
    tanh = _unary('tanh', _ieee.tanh, None)

    def log(self):
        """Principal natural logarithm.  Undefined, and raising, at zero."""
        check_operands('log', self)
        if self._value == 0:
            raise LogOfZeroError("logarithm of zero", 'log')
        return FloatComplex._wrap(cmath.log(self._value))

    def pow(self, other):
        """Principal value of `self ** other`, `exp(other * log(self))`."""
        _check_pair('pow', self, other)
        try:
            value = _ieee.power(self._value, other._value)
        except ZeroDivisionError:
            raise DivisionByZeroError(
                "0 cannot be raised to a negative or complex power", 'pow',
                {'exponent': other.to_string()}) from None
        return FloatComplex._wrap(value)

    def eq(self, other):
        _check_pair('eq', self, other)
        return self._value == other._value

    def is_zero(self):
        check_operands('is_zero', self)
        return self._value == 0

    def is_real(self):
        check_operands('is_real', self)
        return self._value.imag == 0.0

    def is_imag(self):
        check_operands('is_imag', self)
        return self._value.real == 0.0

    def is_nan(self):
        check_operands('is_nan', self)
        return cmath.isnan(self._value)

    def is_inf(self):
        check_operands('is_inf', self)
        return cmath.isinf(self._value)

    def to_gaussian(self):
        from .conversions import float_to_gaussian
        return float_to_gaussian(self)

    def to_rational(self, max_denominator=None):
        from .conversions import float_to_rational
        return float_to_rational(self, max_denominator)

    def to_string(self):
        check_operands('to_string', self)
        return format_complex(self._value.real, self._value.imag, _str_double)

    def conjugate(self):
        return self.conj()

    def __bool__(self):
        return not self.is_zero()

    def __complex__(self):
        check_operands('complex', self)
        return self._value

    def __abs__(self):
        return self.abs()

    def __repr__(self):
        if self._released:
            return "<released {}>".format(self.__class__.__name__)
        return "{}({!r}, {!r})".format(self.__class__.__name__,
                                       self._value.real, self._value.imag)

    def __str__(self):
        return self.to_string()

    __add__, __radd__ = generate_operators('add')
    __sub__, __rsub__ = generate_operators('sub')
    __mul__, __rmul__ = generate_operators('mul')
    __truediv__, __rtruediv__ = generate_operators('div')
    __pow__, __rpow__ = generate_operators('pow')

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self.retain()

    def __eq__(self, other):
        """a == b"""
        if isinstance(other, FloatComplex):
            return self.eq(other)
        if isinstance(other, numbers.Complex):
            return self.real == other.real and self.imag == other.imag
        return NotImplemented

    def __hash__(self):
        check_operands('hash', self)
        return complex_hash(self._value.real, self._value.imag)

    # Support for pickling and copying operations.

    def __reduce__(self):
        check_operands('pickle', self)
        return self.__class__, (self._value.real, self._value.imag)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()


def _check_pair(operation, a, b):
    check_operands(operation, a, b)
    if not isinstance(b, FloatComplex):
        raise TypeError("{}: expected FloatComplex, got {}"
                        .format(operation, type(b).__name__))


_singletons = SingletonTable('FloatComplex', {
    'zero': lambda: FloatComplex(0.0, 0.0),
    'one': lambda: FloatComplex(1.0, 0.0),
    'i': lambda: FloatComplex(0.0, 1.0),
    'neg_one': lambda: FloatComplex(-1.0, 0.0),
    'neg_i': lambda: FloatComplex(0.0, -1.0),
})
