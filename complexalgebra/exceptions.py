"""
Exception hierarchy for the complex algebra engine.

Every precondition violation raises immediately; there are no error codes.
Each class also derives from the builtin a host would naturally catch, so
`except ZeroDivisionError` keeps working for code that does not know about
this package.

    ComplexAlgebraError
    ├── NullOperandError (TypeError)
    │   └── UseAfterReleaseError
    ├── DivisionByZeroError (ZeroDivisionError)
    ├── InvalidApproximationBoundError (ValueError)
    └── LogOfZeroError (ValueError)

NaN and infinity are ordinary FloatComplex values and never raise.
"""

__all__ = [
    'ComplexAlgebraError',
    'NullOperandError',
    'UseAfterReleaseError',
    'DivisionByZeroError',
    'InvalidApproximationBoundError',
    'LogOfZeroError',
]


class ComplexAlgebraError(Exception):
    """
    Base class for all engine errors.  Carries the failing operation's name
    and any extra context as a dict, which is appended to the message.
    """

    def __init__(self, message, operation=None, context=None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.context = context or {}

    def __str__(self):
        out = self.message
        if self.operation is not None:
            out = "{}: {}".format(self.operation, out)
        if self.context:
            out += " | " + ", ".join(
                "{}={!r}".format(k, v) for k, v in self.context.items())
        return out


class NullOperandError(ComplexAlgebraError, TypeError):
    """An operand was None where a value is required."""


class UseAfterReleaseError(NullOperandError):
    """An operand was used after its last reference was released."""


class DivisionByZeroError(ComplexAlgebraError, ZeroDivisionError):
    """Division by an exact or floating zero."""


class InvalidApproximationBoundError(ComplexAlgebraError, ValueError):
    """The maximum denominator for a rational approximation was not positive."""


class LogOfZeroError(ComplexAlgebraError, ValueError):
    """The logarithm of zero was requested."""
