"""
Exact and approximate complex number algebra.

Three interchangeable representations: Gaussian integers (`GaussianComplex`),
exact rationals (`RationalComplex`) and IEEE doubles (`FloatComplex`), with
explicit reference counting, immortal constants and a shared canonical text
form.
"""

import logging

from .config import EngineConfig, configure, get_config
from .conversions import (
    float_to_gaussian,
    float_to_rational,
    gaussian_to_float,
    gaussian_to_rational,
    rational_to_float,
    rational_to_gaussian,
)
from .exceptions import (
    ComplexAlgebraError,
    DivisionByZeroError,
    InvalidApproximationBoundError,
    LogOfZeroError,
    NullOperandError,
    UseAfterReleaseError,
)
from .floating import FloatComplex
from .gaussian import GaussianComplex
from .lifecycle import IMMORTAL_REFCOUNT, initialize_singletons, release, retain
from .rational import RationalComplex

__all__ = [
    'GaussianComplex', 'RationalComplex', 'FloatComplex',
    'gaussian_to_rational', 'gaussian_to_float', 'rational_to_float',
    'rational_to_gaussian', 'float_to_gaussian', 'float_to_rational',
    'ComplexAlgebraError', 'NullOperandError', 'UseAfterReleaseError',
    'DivisionByZeroError', 'InvalidApproximationBoundError', 'LogOfZeroError',
    'EngineConfig', 'configure', 'get_config',
    'IMMORTAL_REFCOUNT', 'initialize_singletons', 'retain', 'release',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
