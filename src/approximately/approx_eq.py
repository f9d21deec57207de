"""
The approximate equality contract.

Two ways to take part:
    - subclass :class:`ApproxEq` and implement :meth:`ApproxEq.approx` (you get :meth:`ApproxEq.assert_approx` for free)
    - register a rule for a type you don't own with ``approx.register(SomeType)``, and optionally a custom failure
      message with ``assert_approx.register(SomeType)``

Built-in rules are registered by :mod:`approximately.scalars` and :mod:`approximately.composites`, and the 4-lane
vector types only exist once :mod:`approximately.simd` has been imported.
"""

import logging
from abc import ABC, abstractmethod
from functools import singledispatch
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any
    from typing_extensions import Self


log = logging.getLogger(__name__)


class ApproxEq(ABC):
    """
    Base class for types which define their own approximate equality.

    Subclasses only need to implement :meth:`approx`. Their ``__repr__`` is used as the debug representation in
    failure messages, so it should be something a human can read.
    """

    @abstractmethod
    def approx(self: 'Self', other: 'Any') -> 'bool':
        """Returns True if `self` and `other` are approximately equal under this type's policy

        Must not mutate either operand, and should never raise.

        Args:
            other (Any): the value to compare against. Anything that can be viewed as this type.
        """
        raise NotImplementedError

    def assert_approx(self: 'Self', other: 'Any') -> 'None':
        """Raises an :class:`ApproxEqualityError` if `self` is not approximately equal to `other`"""
        if not self.approx(other):
            raise ApproxEqualityError(self, other)


@singledispatch
def approx(a: 'Any', b: 'Any') -> 'bool':
    """
    Determines whether `a` and `b` are approximately equal, using the rule registered for the type of `a`.

    This is a pure check: it never mutates `a` or `b`, and always returns a bool for any type that has a rule. None is
    an absent optional value: it is only approximately equal to None, and every built-in rule compares a present value
    against None as False. Comparands that can't be viewed as the type of `a` also compare False.

    New rules are added with ``approx.register(SomeType)``.

    Args:
        a (Any): the value whose type decides the comparison policy
        b (Any): the value to compare against. Anything that can be viewed as the type of `a`

    Returns:
        bool: True if the values are approximately equal, False otherwise

    Raises:
        ApproxEqualityCheckingError: if no rule exists for the type of `a`, whatever `b` is
    """
    log.debug("No approximate equality rule for type %s", repr(type(a).__name__))
    raise ApproxEqualityCheckingError("No approximate equality is defined for objects of type %s" % repr(type(a).__name__))


@approx.register(ApproxEq)
def _approx_user_defined(a, b):
    # An absent comparand only matches an absent value
    if b is None:
        return False
    return a.approx(b)


@singledispatch
def assert_approx(a: 'Any', b: 'Any') -> 'None':
    """
    Raises an :class:`ApproxEqualityError` if `a` and `b` are not approximately equal, otherwise does nothing.

    The message is ``"<repr(a)> != <repr(b)>"``. Types wanting a different representation (eg: limiting the decimal
    places of floats) can register their own version with ``assert_approx.register(SomeType)``.

    Callers who want to keep going on a mismatch should use :func:`approx` and branch on the result instead.
    """
    if not approx(a, b):
        raise ApproxEqualityError(a, b)


@assert_approx.register(ApproxEq)
def _assert_approx_user_defined(a, b):
    a.assert_approx(b)


class ApproxEqualityError(AssertionError):
    """Error raised whenever an :func:`assert_approx` check fails"""

    def __init__(self, a: 'Any', b: 'Any', message: 'str' = None):
        self.a, self.b = a, b
        message = "%r != %r" % (a, b) if message is None else message
        log.debug("Approximate equality assertion failed: %s", message)
        super().__init__(message)


class ApproxEqualityCheckingError(TypeError):
    """Error raised whenever approximate equality is asked of a type that has no rule for it"""
