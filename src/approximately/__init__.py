from .approx_eq import ApproxEq, ApproxEqualityError, ApproxEqualityCheckingError, approx, assert_approx
from .scalars import F32_TOLERANCE, F64_TOLERANCE
# Registers the built-in rules
from . import scalars, composites

__version__ = '0.1.0'

__all__ = ['ApproxEq', 'ApproxEqualityError', 'ApproxEqualityCheckingError', 'approx', 'assert_approx',
    'F32_TOLERANCE', 'F64_TOLERANCE']
