"""
Approximate equality lifted over containers, using the rules of their elements.

Handled types:
    - list, tuple (ordered, element-wise, lengths must match)
    - None (an absent optional value: only approximately equal to None)
    - numpy ndarray (shapes must match. Float arrays are compared vectorised, everything else element-wise)
"""

import numpy as np
from collections.abc import Sequence
from .approx_eq import approx
from .scalars import F32_TOLERANCE, F64_TOLERANCE


@approx.register(list)
@approx.register(tuple)
def _approx_sequence(a, b):
    # Check that b is something that can be viewed as a sequence at all
    if isinstance(b, np.ndarray):
        if b.ndim == 0:
            return False
    elif not isinstance(b, Sequence) or isinstance(b, (str, bytes, bytearray)):
        return False

    if len(a) != len(b):
        return False

    return all(approx(_a, _b) for _a, _b in zip(a, b))


@approx.register(type(None))
def _approx_optional(a, b):
    return b is None


@approx.register(np.ndarray)
def _approx_array(a, b):
    # 0-d arrays act like the scalar they hold
    if a.ndim == 0:
        return approx(a[()], b)

    # Complex values are never viewable as real ones
    if isinstance(b, np.ndarray) and b.dtype.kind == 'c':
        return False

    # Non-float arrays, or comparands that aren't arrays, use the element rules
    if not isinstance(b, np.ndarray) or a.dtype.kind != 'f' or b.dtype.kind not in 'fiu':
        return _approx_sequence(list(a), b)

    if a.shape != b.shape:
        return False

    with np.errstate(invalid='ignore', over='ignore'):
        if a.dtype == np.float32:
            diff = np.abs(a - b.astype(np.float32))
            return bool(np.all(diff <= np.float32(F32_TOLERANCE)))
        diff = np.abs(a.astype(np.float64) - b.astype(np.float64))
        return bool(np.all(diff <= F64_TOLERANCE))
