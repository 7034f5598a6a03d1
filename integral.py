from __future__ import annotations
from numbers import Integral
from typing import Any, TypeVar
import numpy as np

Z = TypeVar("Z", bound=Integral)


def is_unsigned(a: Any) -> bool:
    return isinstance(a, np.unsignedinteger)


def check_integral(value: Any) -> None:
    """Reject representations that cannot carry exact integer arithmetic.

    Python ints, numpy integer scalars and anything else registered as
    numbers.Integral are accepted.
    """
    if not isinstance(value, Integral):
        raise TypeError(
            f"unsupported representation type {type(value).__name__}"
        )


def absolute(a: Z) -> Z:
    if is_unsigned(a):
        return a
    return a if a >= 0 else -a


def gcd(m: Z, n: Z) -> Z:
    """Non-negative greatest common divisor, gcd(0, 0) == 0."""
    if m == 0:
        return absolute(n)
    while n != 0:
        m, n = n, m % n
    return absolute(m)


def lcm(m: Z, n: Z) -> Z:
    if m == 0 or n == 0:
        return type(m)(0)
    return (absolute(m) // gcd(m, n)) * absolute(n)
