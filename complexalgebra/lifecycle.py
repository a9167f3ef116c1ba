"""
Ownership discipline shared by the three complex types.

Every value starts with one owner.  `retain` adds an owner, `release` drops
one and frees the value when the last owner goes away; a freed value refuses
all further use.  The five constants of each type live in a `SingletonTable`:
they are immortal, so retaining or releasing them is a no-op.
"""

import logging
import sys
import threading

from .config import get_config
from .exceptions import NullOperandError, UseAfterReleaseError

__all__ = [
    'IMMORTAL_REFCOUNT', 'RefCounted', 'SingletonTable', 'check_operands',
    'initialize_singletons', 'retain', 'release',
]

logger = logging.getLogger(__name__)

# Reported by `ref_count` for singletons, which are never counted.
IMMORTAL_REFCOUNT = sys.maxsize


class _Counter:
    __slots__ = ('value',)

    def __init__(self):
        self.value = 1

    def increment(self):
        self.value += 1
        return self.value

    def decrement(self):
        self.value -= 1
        return self.value


class _AtomicCounter(_Counter):
    __slots__ = ('_lock',)

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()

    def increment(self):
        with self._lock:
            return super().increment()

    def decrement(self):
        with self._lock:
            return super().decrement()


def _new_counter():
    if get_config().atomic_refcount:
        return _AtomicCounter()
    return _Counter()


class RefCounted:
    """
    Mixin giving a value an owner count.  Subclasses implement `_free` to drop
    their components once the count reaches zero.
    """

    __slots__ = ('_refs', '_released')

    def _init_refcount(self):
        self._refs = _new_counter()
        self._released = False

    @property
    def ref_count(self):
        """Number of live owners, or `IMMORTAL_REFCOUNT` for a singleton."""
        if self._refs is None:
            return IMMORTAL_REFCOUNT
        return self._refs.value

    @property
    def is_singleton(self):
        return self._refs is None

    @property
    def released(self):
        return self._released

    def retain(self):
        """Add an owner and return the same value."""
        check_operands('retain', self)
        if self._refs is not None:
            self._refs.increment()
        return self

    def release(self):
        """
        Drop an owner, freeing the value when none remain.  Always returns
        None, so `x = x.release()` clears the caller's handle.
        """
        check_operands('release', self)
        if self._refs is not None and self._refs.decrement() == 0:
            self._released = True
            self._free()
            logger.debug("freed %s instance %#x", type(self).__name__, id(self))
        return None

    def _make_immortal(self):
        self._refs = None

    def _free(self):
        raise NotImplementedError


def check_operands(operation, *operands):
    """
    Raise if any operand is None or has been released.  `operation` names the
    public call for the error message.
    """
    for position, operand in enumerate(operands):
        if operand is None:
            raise NullOperandError("operand cannot be None", operation,
                                   {'position': position})
        if isinstance(operand, RefCounted) and operand._released:
            raise UseAfterReleaseError(
                "{} operand was already released".format(type(operand).__name__),
                operation, {'position': position})


def retain(value):
    """Retain `value`, passing None through unchanged."""
    if value is None:
        return None
    return value.retain()


def release(value):
    """Release `value` if it is not None.  Always returns None."""
    if value is not None:
        value.release()
    return None


_tables = []


class SingletonTable:
    """
    Lazily created immortal constants for one type.  Each slot is built at
    most once, under a lock, the first time it is requested.
    """

    def __init__(self, owner, factories):
        self.owner = owner
        self._factories = dict(factories)
        self._slots = {}
        self._lock = threading.Lock()
        _tables.append(self)

    def get(self, name):
        value = self._slots.get(name)
        if value is None:
            with self._lock:
                value = self._slots.get(name)
                if value is None:
                    value = self._factories[name]()
                    value._make_immortal()
                    self._slots[name] = value
                    logger.debug("created %s singleton %r", self.owner, name)
        return value

    def initialize(self):
        for name in self._factories:
            self.get(name)


def initialize_singletons():
    """Create every singleton of every type now rather than on first use."""
    for table in _tables:
        table.initialize()
