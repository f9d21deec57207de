"""
Approximate equality for floating point scalars.

Handled types:
    - np.float32, with an absolute tolerance of 1e-3 (computed in float32)
    - float and np.float64 (np.float64 subclasses float), with an absolute tolerance of 1e-6

The comparand is converted to the width of the receiver, so ``approx(np.float32(1), 1.0001)`` uses the float32 rule.

NaN is never approximately equal to anything, itself included, and neither are two equal infinities since their
difference is NaN.
"""

import numbers
import numpy as np
from .approx_eq import ApproxEqualityError, approx, assert_approx
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any


F32_TOLERANCE = 1e-3
F64_TOLERANCE = 1e-6

# Number of decimal places shown in failure messages, matching the order of magnitude of each tolerance
_F32_PLACES = 3
_F64_PLACES = 6


def is_real_number(value: 'Any') -> 'bool':
    """Returns True if `value` can be viewed as a real scalar: a real number, a real numpy scalar or a 0-d real array"""
    if isinstance(value, np.ndarray):
        return value.ndim == 0 and value.dtype.kind in 'fiub'
    return isinstance(value, (numbers.Real, np.floating, np.integer))


def within_tolerance(a: 'Any', b: 'Any', dtype: 'type', tolerance: 'float') -> 'bool':
    """Returns True if |a - b| <= tolerance, with everything converted to (and computed in) the given numpy dtype"""
    # Strings, complex numbers, sequences and None are not viewable as a real scalar
    if not is_real_number(b):
        return False

    # inf - inf and overflowing differences only need to come out as False, not warn
    with np.errstate(invalid='ignore', over='ignore'):
        return bool(np.abs(dtype(a) - dtype(b)) <= dtype(tolerance))


@approx.register(np.float32)
def _approx_f32(a, b):
    return within_tolerance(a, b, np.float32, F32_TOLERANCE)


@approx.register(float)
def _approx_f64(a, b):
    return within_tolerance(a, b, np.float64, F64_TOLERANCE)


def _format_float(value: 'Any', dtype: 'type', places: 'int') -> 'str':
    if not is_real_number(value):
        return repr(value)
    return '%.*f' % (places, dtype(value))


@assert_approx.register(np.float32)
def _assert_approx_f32(a, b):
    if not approx(a, b):
        raise ApproxEqualityError(a, b, "%s != %s" % (_format_float(a, np.float32, _F32_PLACES),
            _format_float(b, np.float32, _F32_PLACES)))


@assert_approx.register(float)
def _assert_approx_f64(a, b):
    if not approx(a, b):
        raise ApproxEqualityError(a, b, "%s != %s" % (_format_float(a, np.float64, _F64_PLACES),
            _format_float(b, np.float64, _F64_PLACES)))
