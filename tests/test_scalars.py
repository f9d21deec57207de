"""
Tests for the approximately.scalars file.
"""

import math
import pytest
import numpy as np
from approximately import ApproxEqualityError, approx, assert_approx, F32_TOLERANCE, F64_TOLERANCE


_FINITE_VALUES = [0.0, -0.0, 1.0, -1.0, 1e-12, 123456.789, -98765.4321, 3.4e38, 1.7e308, 5e-324]


def _check_approx(a, b, expected_value=True):
    val = approx(a, b)
    if val is not False and val is not True:
        raise TypeError("Approximate equality check returned a non-boolean result: %s" % val)
    assert val == expected_value, "approx(%r, %r) returned %s, expected %s" % (a, b, val, expected_value)


def test_tolerances():
    assert F32_TOLERANCE == 1e-3
    assert F64_TOLERANCE == 1e-6


def test_f32():
    """Tests float32 values around the 1e-3 tolerance"""
    _check_approx(np.float32(1.0000), np.float32(1.0001))
    _check_approx(np.float32(1.000), np.float32(1.001), expected_value=False)

    # The band is inclusive
    _check_approx(np.float32(0.0), np.float32(1e-3))
    _check_approx(np.float32(0.0), np.float32(-1e-3))
    _check_approx(np.float32(0.0), np.float32(1.1e-3), expected_value=False)

    # Things too small for float64's tolerance are fine for float32's
    _check_approx(np.float32(5.0), np.float32(5.0005))


def test_f64():
    """Tests float (and np.float64) values around the 1e-6 tolerance"""
    _check_approx(1.000000, 1.000001)
    _check_approx(1.00000, 1.00001, expected_value=False)

    _check_approx(0.0, 1e-6)
    _check_approx(0.0, -1e-6)
    _check_approx(0.0, 1.1e-6, expected_value=False)

    _check_approx(np.float64(1.000000), np.float64(1.000001))
    _check_approx(np.float64(1.00000), np.float64(1.00001), expected_value=False)
    _check_approx(5.0, 5.0005, expected_value=False)


def test_comparand_views():
    """The comparand is converted to the width of the receiver"""
    _check_approx(np.float32(1.0), 1.0005)
    _check_approx(np.float32(1.0), np.float64(1.0005))
    _check_approx(np.float32(1.0), np.array(1.0005))
    _check_approx(1.0, np.float32(1.0))
    _check_approx(1.0, np.array(1.0000001))
    _check_approx(1.0, 1)
    _check_approx(1.0, np.float32(1.0005), expected_value=False)

    # Anything that isn't a real scalar compares False instead of being converted
    for b in ['1.0', 'abc', b'1.0', object(), [1.0], [1.0, 2.0], (1.0,), np.array([1.0]), np.array([1.0, 2.0]),
            1 + 0j, np.complex128(1.0), np.array(1 + 0j), None]:
        _check_approx(1.0, b, expected_value=False)
        _check_approx(np.float32(1.0), b, expected_value=False)


def test_reflexive():
    """Every finite value is approximately equal to itself"""
    for v in _FINITE_VALUES:
        _check_approx(v, v)
        _check_approx(np.float64(v), np.float64(v))
    for v in _FINITE_VALUES[:-2]:
        _check_approx(np.float32(v), np.float32(v))


def test_symmetric():
    pairs = [(1.0, 1.000001), (1.0, 1.00001), (-3.0, -3.0000005), (0.0, 2e-6)]
    for a, b in pairs:
        assert approx(a, b) == approx(b, a)
        assert approx(np.float32(a), np.float32(b)) == approx(np.float32(b), np.float32(a))


def test_nan_and_inf():
    """NaN is never approximately equal, not even to itself. Neither are equal infinities, as inf - inf is NaN"""
    nan, inf = float('nan'), float('inf')
    for a in [nan, np.float64(nan)]:
        _check_approx(a, a, expected_value=False)
        _check_approx(a, 1.0, expected_value=False)
        _check_approx(1.0, a, expected_value=False)
    _check_approx(np.float32(nan), np.float32(nan), expected_value=False)

    _check_approx(inf, inf, expected_value=False)
    _check_approx(-inf, -inf, expected_value=False)
    _check_approx(inf, 1.0, expected_value=False)
    _check_approx(np.float32(inf), np.float32(inf), expected_value=False)

    # Differences that overflow are just not equal
    _check_approx(1.7e308, -1.7e308, expected_value=False)
    _check_approx(np.float32(3.4e38), np.float32(-3.4e38), expected_value=False)


def test_operands_unchanged():
    a, b = np.float32(1.0), np.float32(1.0001)
    approx(a, b)
    assert a == np.float32(1.0) and b == np.float32(1.0001)
    assert not math.isnan(a)


def test_assert_approx():
    """Passing assertions do nothing, failing ones raise with the decimal places of the tolerance"""
    assert assert_approx(np.float32(1.0000), np.float32(1.0001)) is None
    assert assert_approx(1.000000, 1.000001) is None

    with pytest.raises(ApproxEqualityError) as info:
        assert_approx(np.float32(1.000), np.float32(1.001))
    assert str(info.value) == "1.000 != 1.001"

    with pytest.raises(ApproxEqualityError) as info:
        assert_approx(1.00000, 1.00001)
    assert str(info.value) == "1.000000 != 1.000010"

    with pytest.raises(ApproxEqualityError) as info:
        assert_approx(np.float64(2.5), 3)
    assert str(info.value) == "2.500000 != 3.000000"

    with pytest.raises(ApproxEqualityError) as info:
        assert_approx(1.0, None)
    assert str(info.value) == "1.000000 != None"
    assert info.value.a == 1.0 and info.value.b is None

    with pytest.raises(ApproxEqualityError) as info:
        assert_approx(np.float32(1.0), 'abc')
    assert str(info.value) == "1.000 != 'abc'"

    with pytest.raises(ApproxEqualityError) as info:
        assert_approx(1.0, [1.0, 2.0])
    assert str(info.value) == "1.000000 != [1.0, 2.0]"
