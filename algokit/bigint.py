"""Arbitrary-precision signed integers stored as base-10000 digits."""

from __future__ import annotations

import re
from enum import Enum
from itertools import zip_longest

from algokit.multiply import fft_multiply, karatsuba_multiply

_DECIMAL = re.compile(r"([+-]?)(\d+)")


class MultiplyMethod(Enum):
    """Algorithm used to multiply two digit sequences."""

    KARATSUBA = "karatsuba"
    FFT = "fft"


def _compare_abs(a: list[int], b: list[int]) -> int:
    """Return -1, 0 or 1 as ``|a|`` is less than, equal to or greater than ``|b|``."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    ra, rb = a[::-1], b[::-1]
    if ra == rb:
        return 0
    return -1 if ra < rb else 1


def _add_abs(a: list[int], b: list[int], base: int) -> list[int]:
    result = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, digit = divmod(x + y + carry, base)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, base)
        result.append(digit)
    return result


def _sub_abs(a: list[int], b: list[int], base: int) -> list[int]:
    """Return ``|a| - |b|``; requires ``|a| >= |b|``."""
    result = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        value = x - y - borrow
        borrow = 1 if value < 0 else 0
        result.append(value + base if borrow else value)
    while result and result[-1] == 0:
        result.pop()
    return result


class BigInt:
    """A signed integer held as little-endian digits in base 10000.

    Zero has no digits and a positive sign.
    """

    BASE = 10_000
    BASE_DIGITS = 4

    __slots__ = ("_digits", "_sign")

    def __init__(self, value: "int | BigInt" = 0) -> None:
        if isinstance(value, BigInt):
            self._digits = list(value._digits)
            self._sign = value._sign
            return
        if not isinstance(value, int):
            raise TypeError(f"cannot build a BigInt from {type(value).__name__}")
        self._sign = -1 if value < 0 else 1
        magnitude = abs(value)
        digits = []
        while magnitude:
            magnitude, digit = divmod(magnitude, self.BASE)
            digits.append(digit)
        self._digits = digits

    @classmethod
    def _from_parts(cls, digits: list[int], sign: int) -> "BigInt":
        result = cls.__new__(cls)
        digits = list(digits)
        while digits and digits[-1] == 0:
            digits.pop()
        result._digits = digits
        result._sign = sign if digits else 1
        return result

    @classmethod
    def parse(cls, text: str) -> "BigInt":
        """Parse a decimal integer with an optional sign."""
        match = _DECIMAL.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"invalid integer literal: {text!r}")
        sign_text, body = match.groups()
        width = cls.BASE_DIGITS
        digits = [
            int(body[max(0, end - width):end])
            for end in range(len(body), 0, -width)
        ]
        return cls._from_parts(digits, -1 if sign_text == "-" else 1)

    @property
    def digits(self) -> tuple[int, ...]:
        """Little-endian base-10000 digits of the magnitude."""
        return tuple(self._digits)

    @property
    def sign(self) -> int:
        """1 for zero and positive values, -1 for negative ones."""
        return self._sign

    def __len__(self) -> int:
        return len(self._digits)

    def __str__(self) -> str:
        if not self._digits:
            return "0"
        head = str(self._digits[-1])
        tail = "".join(
            str(digit).zfill(self.BASE_DIGITS) for digit in reversed(self._digits[:-1])
        )
        return ("-" if self._sign < 0 else "") + head + tail

    def __repr__(self) -> str:
        return f"BigInt({self})"

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self._digits):
            value = value * self.BASE + digit
        return self._sign * value

    @staticmethod
    def _coerce(other: object) -> "BigInt | None":
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int):
            return BigInt(other)
        return None

    def _compare(self, other: "BigInt") -> int:
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        return _compare_abs(self._digits, other._digits) * self._sign

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sign == rhs._sign and self._digits == rhs._digits

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __neg__(self) -> "BigInt":
        return self._from_parts(self._digits, -self._sign)

    def _add(self, other: "BigInt") -> "BigInt":
        if self._sign == other._sign:
            return self._from_parts(
                _add_abs(self._digits, other._digits, self.BASE), self._sign
            )
        order = _compare_abs(self._digits, other._digits)
        if order == 0:
            return BigInt(0)
        if order > 0:
            return self._from_parts(
                _sub_abs(self._digits, other._digits, self.BASE), self._sign
            )
        return self._from_parts(
            _sub_abs(other._digits, self._digits, self.BASE), other._sign
        )

    def __add__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(rhs)

    def __radd__(self, other: object) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(-rhs)

    def __rsub__(self, other: object) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(-self)

    def multiply(
        self, other: "int | BigInt", method: "MultiplyMethod | str" = MultiplyMethod.FFT
    ) -> "BigInt":
        """Multiply by ``other`` using the chosen algorithm."""
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"cannot multiply a BigInt by {type(other).__name__}")
        method = MultiplyMethod(method)
        if method is MultiplyMethod.KARATSUBA:
            digits = karatsuba_multiply(self._digits, rhs._digits, self.BASE)
        else:
            digits = fft_multiply(self._digits, rhs._digits, self.BASE)
        return self._from_parts(digits, self._sign * rhs._sign)

    def __mul__(self, other: object) -> "BigInt":
        if self._coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> "BigInt":
        return self.__mul__(other)