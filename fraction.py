from __future__ import annotations
from numbers import Integral
from typing import Any, Tuple, Union
import logging
from integral import absolute, check_integral, gcd

LOG = logging.getLogger(__name__)

Operand = Union["Fraction", int]


def _cancel(x: Any, y: Any) -> Tuple[Any, Any]:
    # divide both by their gcd unless it is 0 or 1
    g = gcd(x, y)
    if g == 0 or g == 1:
        return x, y
    return x // g, y // g


def _signed(num: Any, den: Any) -> Tuple[Any, Any]:
    if den < 0:
        return -num, -den
    return num, den


class Fraction:
    """Exact num/den over any integral representation.

    The pair is kept canonical: den >= 0 and gcd(|num|, den) in {0, 1}.
    A zero denominator is an undefined value, carried along instead of raised.
    """

    __slots__ = ("_num", "_den")
    # let numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, num: Any = 0, den: Any = None) -> None:
        if isinstance(num, Fraction) and den is None:
            self._num, self._den = num._num, num._den
            return
        check_integral(num)
        if den is None:
            den = type(num)(1)
        else:
            check_integral(den)
        self._num, self._den = _cancel(*_signed(num, den))

    @classmethod
    def _raw(cls, num: Any, den: Any) -> Fraction:
        obj = cls.__new__(cls)
        obj._num = num
        obj._den = den
        return obj

    @classmethod
    def checked(cls, num: Any, den: Any = None) -> Fraction:
        """Like the constructor, but a zero denominator raises ZeroDivisionError."""
        return cls(num, den).ensure_defined()

    def ensure_defined(self) -> Fraction:
        if self._den == 0:
            raise ZeroDivisionError("division by zero")
        return self

    @property
    def numerator(self) -> Any:
        return self._num

    @property
    def denominator(self) -> Any:
        return self._den

    def copy(self) -> Fraction:
        return type(self)._raw(self._num, self._den)

    __copy__ = copy

    def _reduce(self) -> None:
        self._num, self._den = _cancel(self._num, self._den)

    def is_zero(self) -> bool:
        return bool(self._num == 0 and self._den != 0)

    def is_integral(self) -> bool:
        return bool(self._den == 1)

    def to_int(self) -> Any:
        self.ensure_defined()
        return self._num // self._den

    def __bool__(self) -> bool:
        return bool(self._num != 0)

    def cross(self, other: Fraction) -> Any:
        return self._num * other._den - self._den * other._num

    # -----------------
    # Comparison
    # -----------------
    def _eq(self, other: Any) -> Any:
        if isinstance(other, Fraction):
            if self._den == other._den:
                return bool(self._num == other._num)
            a, c = _cancel(self._num, other._num)
            b, d = _cancel(self._den, other._den)
            return bool(a * d == b * c)
        if isinstance(other, Integral):
            if self._den == 1 or other == 0:
                return bool(self._num == other)
            a, z = _cancel(self._num, other)
            return bool(a == z * self._den)
        return NotImplemented

    def _lt(self, other: Any) -> Any:
        if isinstance(other, Fraction):
            if self._den == other._den:
                return bool(self._num < other._num)
            a, c = _cancel(self._num, other._num)
            b, d = _cancel(self._den, other._den)
            return bool(a * d < b * c)
        if isinstance(other, Integral):
            if self._den == 1 or other == 0:
                return bool(self._num < other)
            a, z = _cancel(self._num, other)
            return bool(a < z * self._den)
        return NotImplemented

    def _rlt(self, z: Any) -> bool:
        # z < self
        if self._den == 1 or z == 0:
            return bool(z < self._num)
        z, a = _cancel(z, self._num)
        return bool(z * self._den < a)

    def __eq__(self, other: object) -> bool:
        return self._eq(other)

    def __ne__(self, other: object) -> bool:
        res = self._eq(other)
        return res if res is NotImplemented else not res

    def __lt__(self, other: Operand) -> bool:
        return self._lt(other)

    def __gt__(self, other: Operand) -> bool:
        if isinstance(other, Fraction):
            return other._lt(self)
        if isinstance(other, Integral):
            return self._rlt(other)
        return NotImplemented

    def __le__(self, other: Operand) -> bool:
        res = self.__gt__(other)
        return res if res is NotImplemented else not res

    def __ge__(self, other: Operand) -> bool:
        res = self._lt(other)
        return res if res is NotImplemented else not res

    # -----------------
    # Arithmetic
    # -----------------
    def _accumulate(self, other: Any, subtract: bool) -> Fraction:
        if isinstance(other, Fraction):
            a, b = self._num, self._den
            c, d = other._num, other._den
            if b == d:
                self._num = a - c if subtract else a + c
                self._reduce()
                return self
            g = gcd(b, d)
            if g == 0:
                self._num = d * a - b * c if subtract else d * a + b * c
                self._den = g
                LOG.debug("sum over zero denominators left undefined: %s", self)
                return self
            l, r = b // g, d // g
            self._num = r * a - l * c if subtract else r * a + l * c
            self._den = b * r
            self._reduce()
            return self
        if isinstance(other, Integral):
            # (a ± z*b)/b stays coprime when a/b is
            step = other * self._den
            self._num = self._num - step if subtract else self._num + step
            return self
        return NotImplemented

    def __iadd__(self, other: Operand) -> Fraction:
        return self._accumulate(other, False)

    def __isub__(self, other: Operand) -> Fraction:
        return self._accumulate(other, True)

    def __imul__(self, other: Operand) -> Fraction:
        """Cancel across the factors first so the products stay small."""
        if isinstance(other, Fraction):
            c, b = _cancel(other._num, self._den)
            a, d = _cancel(self._num, other._den)
            self._num, self._den = a * c, b * d
            return self
        if isinstance(other, Integral):
            z, b = _cancel(other, self._den)
            self._num, self._den = self._num * z, b
            return self
        return NotImplemented

    def __itruediv__(self, other: Operand) -> Fraction:
        if isinstance(other, Fraction):
            a, c = _cancel(*_signed(self._num, other._num))
            d, b = _cancel(other._den, self._den)
            self._num, self._den = a * d, c * b
        elif isinstance(other, Integral):
            a, z = _cancel(*_signed(self._num, other))
            self._num, self._den = a, z * self._den
        else:
            return NotImplemented
        if self._den == 0:
            LOG.debug("division by zero left undefined: %s", self)
        return self

    def __add__(self, other: Operand) -> Fraction:
        return self.copy().__iadd__(other)

    def __radd__(self, other: int) -> Fraction:
        return self.copy().__iadd__(other)

    def __sub__(self, other: Operand) -> Fraction:
        return self.copy().__isub__(other)

    def __rsub__(self, other: int) -> Fraction:
        return (-self).__iadd__(other)

    def __mul__(self, other: Operand) -> Fraction:
        return self.copy().__imul__(other)

    def __rmul__(self, other: int) -> Fraction:
        return self.copy().__imul__(other)

    def __truediv__(self, other: Operand) -> Fraction:
        return self.copy().__itruediv__(other)

    def __rtruediv__(self, other: int) -> Fraction:
        if not isinstance(other, Integral):
            return NotImplemented
        return self.reciprocal().__imul__(other)

    def __neg__(self) -> Fraction:
        return type(self)._raw(-self._num, self._den)

    def __pos__(self) -> Fraction:
        return self.copy()

    def __abs__(self) -> Fraction:
        return type(self)._raw(absolute(self._num), self._den)

    def reciprocal(self) -> Fraction:
        num, den = _signed(self._den, self._num)
        return type(self)._raw(num, den)

    def __pow__(self, exp: int) -> Fraction:
        if not isinstance(exp, Integral):
            return NotImplemented
        if exp == 0:
            return type(self)._raw(type(self._num)(1), type(self._den)(1))
        base = self if exp > 0 else self.reciprocal()
        exp = abs(exp)
        # powers of a coprime pair are coprime
        return type(self)._raw(base._num ** exp, base._den ** exp)

    def to_string(self) -> str:
        return f"({self._num}/{self._den})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self._num}, {self._den})"
