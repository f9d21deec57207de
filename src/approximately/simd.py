"""
4-lane packed float vectors with lane-wise approximate equality.

This module is opt-in: ``import approximately`` does not load it, so ``F32x4`` and ``F64x4`` only take part in
approximate equality once a consumer runs ``import approximately.simd``.

Each vector uses the tolerance of its lane type, applied to every lane at once. Two vectors are approximately equal when
all 4 lanes are, which is the same answer as comparing the 4 scalars one by one.
"""

import numpy as np
from .approx_eq import ApproxEq
from .scalars import F32_TOLERANCE, F64_TOLERANCE
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from typing import Any
    from typing_extensions import Self


LANES = 4


class _Vector4(ApproxEq):
    """
    A read-only vector of 4 float lanes.

    Subclasses set ``dtype`` (the numpy lane type) and ``tolerance`` (the per-lane absolute tolerance).
    """
    dtype = None
    tolerance = None

    __slots__ = ('lanes',)

    def __init__(self: 'Self', x0: 'float', x1: 'float', x2: 'float', x3: 'float') -> 'None':
        self.lanes = self._to_lanes((x0, x1, x2, x3))

    @classmethod
    def splat(cls, value: 'float') -> 'Self':
        """Builds a vector with every lane set to `value`"""
        return cls(*([value] * LANES))

    @classmethod
    def from_array(cls, values: 'Any') -> 'Self':
        """Builds a vector from any 4-element array-like"""
        return cls(*cls._to_lanes(values))

    @classmethod
    def _to_lanes(cls, values: 'Any') -> 'np.ndarray':
        lanes = np.array(values, dtype=cls.dtype)
        if lanes.shape != (LANES,):
            raise ValueError("%s needs exactly %d lanes, got an array of shape %s" % (cls.__name__, LANES, lanes.shape))
        lanes.flags.writeable = False
        return lanes

    def approx(self: 'Self', other: 'Any') -> 'bool':
        # View the comparand as lanes of our own type
        if isinstance(other, _Vector4):
            other = other.lanes.astype(self.dtype)
        else:
            other = np.asarray(other, dtype=self.dtype)
            if other.shape != (LANES,):
                return False

        with np.errstate(invalid='ignore', over='ignore'):
            return bool(np.all(np.abs(self.lanes - other) <= type(self).splat(self.tolerance).lanes))

    def __getitem__(self: 'Self', index: 'int') -> 'Any':
        return self.lanes[index]

    def __len__(self: 'Self') -> 'int':
        return LANES

    def __repr__(self: 'Self') -> 'str':
        return "%s(%s)" % (type(self).__name__, ', '.join(str(x) for x in self.lanes))


class F32x4(_Vector4):
    """4 lanes of float32, compared with a tolerance of 1e-3 per lane"""
    dtype = np.float32
    tolerance = F32_TOLERANCE

    __slots__ = ()


class F64x4(_Vector4):
    """4 lanes of float64, compared with a tolerance of 1e-6 per lane"""
    dtype = np.float64
    tolerance = F64_TOLERANCE

    __slots__ = ()
