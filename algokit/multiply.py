"""Multiplication of little-endian digit sequences in an arbitrary base."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence


def next_power_of_two(m: int) -> int:
    """Return the smallest power of two that is at least ``m`` (1 for ``m <= 1``)."""
    if m < 0:
        raise ValueError("size must be non-negative")
    if m <= 1:
        return 1
    return 1 << (m - 1).bit_length()


def _transform(values: list[complex], sign: int) -> list[complex]:
    size = len(values)
    if size == 1:
        return [values[0]]
    even = _transform(values[0::2], sign)
    odd = _transform(values[1::2], sign)
    half = size // 2
    twiddled = [
        cmath.exp(sign * 2j * math.pi * i / size) * value
        for i, value in enumerate(odd)
    ]
    return [e + t for e, t in zip(even, twiddled)] + [
        e - t for e, t in zip(even, twiddled)
    ][:half]


def fft(values: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Discrete Fourier transform of a sequence whose length is a power of two.

    The forward transform uses the root ``exp(2*pi*i/n)``; the inverse uses the
    conjugate root and divides by ``n``, so ``fft(fft(v), inverse=True)`` gives
    back ``v``.
    """
    data = [complex(v) for v in values]
    size = len(data)
    if size == 0 or size & (size - 1):
        raise ValueError("length must be a positive power of two")
    result = _transform(data, -1 if inverse else 1)
    if inverse:
        result = [value / size for value in result]
    return result


def _check_base(base: int) -> None:
    if base < 2:
        raise ValueError("base must be at least 2")


def _normalize(coefficients: Sequence[int], base: int) -> list[int]:
    """Propagate carries and drop the high zero digits."""
    digits: list[int] = []
    carry = 0
    for coefficient in coefficients:
        carry, digit = divmod(carry + coefficient, base)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, base)
        digits.append(digit)
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def fft_multiply(x: Sequence[int], y: Sequence[int], base: int) -> list[int]:
    """Multiply two little-endian digit sequences using the FFT."""
    _check_base(base)
    if not x or not y:
        return []
    size = next_power_of_two(len(x) + len(y))
    fx = fft(list(x) + [0] * (size - len(x)))
    fy = fft(list(y) + [0] * (size - len(y)))
    product = fft([a * b for a, b in zip(fx, fy)], inverse=True)
    return _normalize([round(value.real) for value in product], base)


def karatsuba_multiply(x: Sequence[int], y: Sequence[int], base: int) -> list[int]:
    """Multiply two little-endian digit sequences by recursive splitting.

    Both operands are cut in two at half the longer length and the four
    partial products are accumulated at their digit offsets.
    """
    _check_base(base)
    if not x or not y:
        return []
    accumulator = [0] * (len(x) + len(y))

    def split(x_lo: int, x_hi: int, y_lo: int, y_hi: int) -> None:
        if x_hi < x_lo or y_hi < y_lo:
            return
        if x_lo == x_hi:
            factor = x[x_lo]
            for j in range(y_lo, y_hi + 1):
                accumulator[x_lo + j] += factor * y[j]
            return
        half = max(x_hi - x_lo + 1, y_hi - y_lo + 1) >> 1
        x_mid = min(x_lo + half - 1, x_hi)
        y_mid = min(y_lo + half - 1, y_hi)
        split(x_lo, x_mid, y_lo, y_mid)
        split(x_lo, x_mid, y_mid + 1, y_hi)
        split(x_mid + 1, x_hi, y_lo, y_mid)
        split(x_mid + 1, x_hi, y_mid + 1, y_hi)

    split(0, len(x) - 1, 0, len(y) - 1)
    return _normalize(accumulator, base)