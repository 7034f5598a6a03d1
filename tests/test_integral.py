import numpy as np
import pytest
from integral import absolute, check_integral, gcd, is_unsigned, lcm


def test_absolute_signed():
    assert absolute(-3) == 3
    assert absolute(4) == 4
    assert absolute(np.int64(-7)) == 7


def test_absolute_unsigned_is_identity():
    value = np.uint32(5)
    assert absolute(value) is value
    assert is_unsigned(value)
    assert not is_unsigned(5)
    assert not is_unsigned(np.int64(5))


@pytest.mark.parametrize(
    "m, n, expected",
    [(0, 0, 0), (0, -5, 5), (-5, 0, 5), (12, 18, 6), (12, -18, 6), (-12, 18, 6), (-12, -18, 6), (7, 13, 1)],
)
def test_gcd(m, n, expected):
    assert gcd(m, n) == expected
    assert gcd(np.int64(m), np.int64(n)) == expected


def test_gcd_unsigned():
    assert gcd(np.uint32(12), np.uint32(18)) == 6
    assert gcd(np.uint32(0), np.uint32(9)) == 9


@pytest.mark.parametrize("m, n, expected", [(0, 5, 0), (5, 0, 0), (4, 6, 12), (-4, 6, 12), (4, -6, 12), (3, 7, 21)])
def test_lcm(m, n, expected):
    assert lcm(m, n) == expected


def test_lcm_keeps_representation():
    assert isinstance(lcm(np.int64(0), np.int64(3)), np.int64)
    assert isinstance(lcm(np.int64(4), np.int64(6)), np.int64)


def test_check_integral():
    check_integral(3)
    check_integral(np.int8(3))
    check_integral(np.uint64(3))
    with pytest.raises(TypeError):
        check_integral(1.5)
    with pytest.raises(TypeError):
        check_integral("3")
    with pytest.raises(TypeError):
        check_integral(np.float64(2.0))
