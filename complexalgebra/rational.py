"""
Exact complex numbers over the rationals.

Both components are kept as reduced `Fraction`s, so equal values always have
equal components.  Values are reference counted like the other two types, and
integer powers are computed exactly.
"""

import fractions
import math
import numbers

from ._format import format_complex
from ._operators import complex_hash, generate_operators
from .exceptions import DivisionByZeroError
from .lifecycle import RefCounted, SingletonTable, check_operands

__all__ = ['RationalComplex']


def _to_fraction(arg, operation):
    """
    Convert arg into a reduced `fractions.Fraction`.  Accepts integers,
    fractions, `(numerator, denominator)` pairs and real numbers, which are
    converted exactly.
    """
    check_operands(operation, arg)
    if isinstance(arg, tuple) and len(arg) == 2:
        check_operands(operation, *arg)
        try:
            return fractions.Fraction(arg[0], arg[1])
        except ZeroDivisionError:
            raise DivisionByZeroError("zero denominator", operation,
                                      {'component': arg}) from None
    if isinstance(arg, fractions.Fraction):
        return arg
    if isinstance(arg, numbers.Rational):
        return fractions.Fraction(arg.numerator, arg.denominator)
    if isinstance(arg, numbers.Real):
        return fractions.Fraction(arg)
    if isinstance(arg, numbers.Complex):
        raise TypeError("{}: component must not be complex".format(operation))
    raise TypeError("{}: unknown type passed: {!r}".format(operation, arg))


class RationalComplex(RefCounted, numbers.Complex):
    """
    Implements complex numbers in the form `a + b*i` where `a` and `b` are both
    rational numbers, represented by the standard library `fractions.Fraction`
    class.  Both components are always in lowest terms with a positive
    denominator.
    """

    __slots__ = ('_real', '_imag')

    def __init__(self, real=0, imag=0):
        self._real = _to_fraction(real, 'RationalComplex')
        self._imag = _to_fraction(imag, 'RationalComplex')
        self._init_refcount()

    @classmethod
    def from_ints(cls, real_num, real_den, imag_num, imag_den):
        """Build `real_num/real_den + (imag_num/imag_den)*i`."""
        return cls((real_num, real_den), (imag_num, imag_den))

    @classmethod
    def from_fractions(cls, real, imag):
        return cls(real, imag)

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
        return RationalComplex(self._real, self._imag)

    def _free(self):
        self._real = self._imag = None

    @property
    def real(self):
        check_operands('real', self)
        return self._real

    @property
    def imag(self):
        check_operands('imag', self)
        return self._imag

    def add(self, other):
        """a + b"""
        _check_pair('add', self, other)
        return RationalComplex(self._real + other._real, self._imag + other._imag)

    def sub(self, other):
        """a - b"""
        _check_pair('sub', self, other)
        return RationalComplex(self._real - other._real, self._imag - other._imag)

    def mul(self, other):
        """a * b"""
        _check_pair('mul', self, other)
        return RationalComplex(self._real*other._real - self._imag*other._imag,
                               self._real*other._imag + self._imag*other._real)

    def div(self, other):
        """a / b"""
        _check_pair('div', self, other)
        denom = other.norm()
        if denom == 0:
            raise DivisionByZeroError("division by zero", 'div',
                                      {'divisor': str(other)})
        real = (self._real*other._real + self._imag*other._imag) / denom
        imag = (self._imag*other._real - self._real*other._imag) / denom
        return RationalComplex(real, imag)

    def negate(self):
        check_operands('negate', self)
        return RationalComplex(-self._real, -self._imag)

    def conj(self):
        check_operands('conj', self)
        return RationalComplex(self._real, -self._imag)

    def reciprocal(self):
        """1 / c, computed by `div` so both agree exactly."""
        check_operands('reciprocal', self)
        return RationalComplex.one().div(self)

    def norm(self):
        """Exact squared modulus, as a Fraction."""
        check_operands('norm', self)
        return self._real*self._real + self._imag*self._imag

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

    def is_gaussian_int(self):
        """True iff both reduced components have denominator 1."""
        check_operands('is_gaussian_int', self)
        return self._real.denominator == 1 and self._imag.denominator == 1

    def to_gaussian(self):
        from .conversions import rational_to_gaussian
        return rational_to_gaussian(self)

    def to_float(self):
        from .conversions import rational_to_float
        return rational_to_float(self)

    def to_string(self):
        check_operands('to_string', self)
        return format_complex(self._real, self._imag, str)

    def conjugate(self):
        return self.conj()

    def __bool__(self):
        return not self.is_zero()

    def __complex__(self):
        check_operands('complex', self)
        return complex(float(self._real), float(self._imag))

    def __abs__(self):
        return math.sqrt(self.norm())

    def __repr__(self):
        if self._released:
            return "<released {}>".format(self.__class__.__name__)
        return "{}({}, {})".format(self.__class__.__name__,
                                   repr(self._real),
                                   repr(self._imag))

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
        if not isinstance(other, numbers.Real) and other.imag == 0:
            other = other.real
        if isinstance(other, numbers.Rational) and other.denominator == 1:
            other = int(other.numerator)
        if not isinstance(other, numbers.Integral):
            # Decays to inexact powers if we've not ended up with an integer.
            from .conversions import lift
            return self.to_float().pow(lift(complex(other)))
        if other == 0:
            # 0**0 == 1, matching Python.
            return RationalComplex(1, 0)
        if other < 0:
            if self.is_zero():
                raise DivisionByZeroError(
                    "0 cannot be raised to a negative power", 'pow')
            base, exp = self.reciprocal(), -other
        else:
            base, exp = self, other
        # Use a divide-and-conquer power expansion rather than the binomial
        # expansion; requires O(log(n)) operations instead of O(n).  We avoid
        # using `Fraction` for intermediate calculations to avoid many
        # expensive calls to math.gcd.
        re, im = base._real, base._imag
        lcm = (
            re.denominator*im.denominator
            // math.gcd(re.denominator, im.denominator)
        )
        lcm_pow = lcm**exp
        pow_re, pow_im = (re*lcm).numerator, (im*lcm).numerator
        out_re, out_im = (pow_re, pow_im) if exp % 2 == 1 else (1, 0)
        exp //= 2
        while exp:
            pow_re, pow_im = pow_re*pow_re - pow_im*pow_im, 2*pow_re*pow_im
            if exp % 2 == 1:
                out_re, out_im = (
                    out_re*pow_re - out_im*pow_im,
                    out_re*pow_im + out_im*pow_re,
                )
            exp //= 2
        return RationalComplex(
            fractions.Fraction(out_re, lcm_pow),
            fractions.Fraction(out_im, lcm_pow),
        )

    def __rpow__(self, other):
        from .conversions import lift
        base = lift(other)
        if base is None:
            return NotImplemented
        return base ** self

    def __eq__(self, other):
        """a == b"""
        if isinstance(other, RationalComplex):
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
    if not isinstance(b, RationalComplex):
        raise TypeError("{}: expected RationalComplex, got {}"
                        .format(operation, type(b).__name__))


_singletons = SingletonTable('RationalComplex', {
    'zero': lambda: RationalComplex(0, 0),
    'one': lambda: RationalComplex(1, 0),
    'i': lambda: RationalComplex(0, 1),
    'neg_one': lambda: RationalComplex(-1, 0),
    'neg_i': lambda: RationalComplex(0, -1),
})
