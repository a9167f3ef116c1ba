"""
Python operator support shared by the complex types: mixed-type dunders
that promote both operands to a common type, and a hash that agrees with
the builtin `complex`.
"""

import sys

__all__ = ['generate_operators', 'complex_hash']

_HASH_BITS = sys.hash_info.width
_HASH_MASK = (1 << _HASH_BITS) - 1


def complex_hash(real, imag):
    """
    Hash a complex value from its components the way CPython hashes `complex`,
    so equal values hash equally across int, Fraction, float and complex.
    """
    combined = (hash(real) + sys.hash_info.imag * hash(imag)) & _HASH_MASK
    if combined >= 1 << (_HASH_BITS - 1):
        combined -= 1 << _HASH_BITS
    return -2 if combined == -1 else combined


def generate_operators(name):
    """
    Generate a pair of forwards and backwards operators for the arithmetic
    method `name` ('add', 'sub', 'mul' or 'div').  Both operands are brought
    to a common complex type first, plain Python numbers included, and the
    named method of that type does the work.  `name` also gives the dunder
    names, with 'div' mapping to '__truediv__'.
    """
    dunder = 'truediv' if name == 'div' else name

    def forwards(a, b):
        # a is guaranteed to be one of the complex types.
        from .conversions import coerce_pair
        pair = coerce_pair(a, b)
        if pair is None:
            return NotImplemented
        a, b = pair
        return getattr(a, name)(b)
    forwards.__name__ = '__' + dunder + '__'

    def backwards(b, a):
        # b is guaranteed to be one of the complex types.
        from .conversions import coerce_pair
        pair = coerce_pair(a, b)
        if pair is None:
            return NotImplemented
        a, b = pair
        return getattr(a, name)(b)
    backwards.__name__ = '__r' + dunder + '__'
    return forwards, backwards
