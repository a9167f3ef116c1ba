"""
Gaussian integers: complex numbers whose real and imaginary parts are both
arbitrary precision integers.
"""

import math
import numbers

from ._format import format_complex
from ._operators import complex_hash, generate_operators
from .lifecycle import RefCounted, SingletonTable, check_operands

__all__ = ['GaussianComplex']


def _to_integer(arg, operation):
    """Validate one component as an exact integer."""
    check_operands(operation, arg)
    if isinstance(arg, numbers.Integral):
        return int(arg)
    raise TypeError("{}: Gaussian components must be integers, got {!r}"
                    .format(operation, arg))


class GaussianComplex(RefCounted, numbers.Complex):
    """
    Implements complex numbers `a + b*i` where `a` and `b` are both Python
    integers.  Addition, subtraction and multiplication stay exact and
    Gaussian; division returns a `RationalComplex`.
    """

    __slots__ = ('_real', '_imag')

    def __init__(self, real=0, imag=0):
        self._real = _to_integer(real, 'GaussianComplex')
        self._imag = _to_integer(imag, 'GaussianComplex')
        self._init_refcount()

    @classmethod
    def from_ints(cls, real, imag):
        return cls(real, imag)

    # Constants.  Each is created once and never freed.

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
        """Return an independent value equal to this one, with one owner."""
        check_operands('copy', self)
        return GaussianComplex(self._real, self._imag)

    def _free(self):
        self._real = self._imag = None

    # Components.

    @property
    def real(self):
        check_operands('real', self)
        return self._real

    @property
    def imag(self):
        check_operands('imag', self)
        return self._imag

    # Arithmetic.  Operands must be GaussianComplex; the Python operators
    # below accept any number.

    def add(self, other):
        """a + b"""
        _check_pair('add', self, other)
        return GaussianComplex(self._real + other._real, self._imag + other._imag)

    def sub(self, other):
        """a - b"""
        _check_pair('sub', self, other)
        return GaussianComplex(self._real - other._real, self._imag - other._imag)

    def mul(self, other):
        """a * b"""
        _check_pair('mul', self, other)
        return GaussianComplex(self._real*other._real - self._imag*other._imag,
                               self._real*other._imag + self._imag*other._real)

    def div(self, other):
        """
        a / b, as a `RationalComplex`.  Use `is_gaussian_int` on the result to
        find out whether the quotient is itself a Gaussian integer.
        """
        _check_pair('div', self, other)
        from .conversions import gaussian_to_rational
        return gaussian_to_rational(self).div(gaussian_to_rational(other))

    def negate(self):
        check_operands('negate', self)
        return GaussianComplex(-self._real, -self._imag)

    def conj(self):
        check_operands('conj', self)
        return GaussianComplex(self._real, -self._imag)

    def norm(self):
        """Exact squared modulus, `a**2 + b**2`."""
        check_operands('norm', self)
        return self._real*self._real + self._imag*self._imag

    # Predicates.

    def eq(self, other):
        _check_pair('eq', self, other)
        return self._real == other._real and self._imag == other._imag

    def is_zero(self):
        check_operands('is_zero', self)
        return self._real == 0 and self._imag == 0

    def is_real(self):
        check_operands('is_real', self)
        return self._imag == 0

    def is_imag(self):
        check_operands('is_imag', self)
        return self._real == 0

    # Conversions.

    def to_rational(self):
        from .conversions import gaussian_to_rational
        return gaussian_to_rational(self)

    def to_float(self):
        from .conversions import gaussian_to_float
        return gaussian_to_float(self)

    def to_string(self):
        check_operands('to_string', self)
        return format_complex(self._real, self._imag, str)

    # Python number protocol.

    def conjugate(self):
        return self.conj()

    def __bool__(self):
        return not self.is_zero()

    def __complex__(self):
        check_operands('complex', self)
        return complex(self._real, self._imag)

    def __abs__(self):
        return math.sqrt(self.norm())

    def __repr__(self):
        if self._released:
            return "<released {}>".format(self.__class__.__name__)
        return "{}({!r}, {!r})".format(self.__class__.__name__,
                                       self._real, self._imag)

    def __str__(self):
        return self.to_string()

    __add__, __radd__ = generate_operators('add')
    __sub__, __rsub__ = generate_operators('sub')
    __mul__, __rmul__ = generate_operators('mul')
    __truediv__, __rtruediv__ = generate_operators('div')

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self.retain()

    def __pow__(self, other):
        check_operands('pow', self, other)
        if not isinstance(other, numbers.Complex):
            return NotImplemented
        if not isinstance(other, numbers.Real):
            if other.imag == 0:
                other = other.real
        if isinstance(other, numbers.Rational) and other.denominator == 1:
            other = int(other.numerator)
        if not isinstance(other, numbers.Integral):
            # Decays to the rational or floating power as appropriate.
            return self.to_rational() ** other
        if other < 0:
            return self.to_rational() ** other
        out_re, out_im = 1, 0
        pow_re, pow_im = self._real, self._imag
        exp = int(other)
        while exp:
            if exp % 2 == 1:
                out_re, out_im = (
                    out_re*pow_re - out_im*pow_im,
                    out_re*pow_im + out_im*pow_re,
                )
            pow_re, pow_im = pow_re*pow_re - pow_im*pow_im, 2*pow_re*pow_im
            exp //= 2
        return GaussianComplex(out_re, out_im)

    def __rpow__(self, other):
        from .conversions import lift
        base = lift(other)
        if base is None:
            return NotImplemented
        return base ** self

    def __eq__(self, other):
        """a == b"""
        if isinstance(other, GaussianComplex):
            return self.eq(other)
        if isinstance(other, numbers.Complex):
            return self.real == other.real and self.imag == other.imag
        return NotImplemented

    def __hash__(self):
        check_operands('hash', self)
        return complex_hash(self._real, self._imag)

    # Support for pickling and copying operations.

    def __reduce__(self):
        check_operands('pickle', self)
        return self.__class__, (self._real, self._imag)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()


def _check_pair(operation, a, b):
    check_operands(operation, a, b)
    if not isinstance(b, GaussianComplex):
        raise TypeError("{}: expected GaussianComplex, got {}"
                        .format(operation, type(b).__name__))


_singletons = SingletonTable('GaussianComplex', {
    'zero': lambda: GaussianComplex(0, 0),
    'one': lambda: GaussianComplex(1, 0),
    'i': lambda: GaussianComplex(0, 1),
    'neg_one': lambda: GaussianComplex(-1, 0),
    'neg_i': lambda: GaussianComplex(0, -1),
})
