"""Bounded palindrome counting by palindrome centres, using Manacher's algorithm.

Every palindrome is attributed to a centre position ``p`` (1-based): odd ones
to their middle character, even ones to the right character of their middle
pair.  Each centre owns at most ``k`` palindromes of length at most ``k``
(``ceil(k/2)`` odd and ``floor(k/2)`` even), and a range-assign sum segment
tree keeps the count per centre.  A fill sets every centre whose whole
neighbourhood lies inside the painted range to ``k`` and recomputes the
centres near its edges; a count sums the centres deep inside the range and
recomputes those near its edges with palindromes clipped to the range.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class SumSegmentTree:
    """Range assignment and range sum over positions ``1..size``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._sums = [0] * (4 * size + 1)
        self._lazy: list[int | None] = [None] * (4 * size + 1)

    def _check_range(self, l: int, r: int) -> None:
        if not 1 <= l <= r <= self.size:
            raise ValueError(f"range {l}..{r} is outside 1..{self.size}")

    def _apply(self, node: int, lo: int, hi: int, value: int) -> None:
        self._sums[node] = value * (hi - lo + 1)
        if lo != hi:
            self._lazy[node] = value

    def _push(self, node: int, lo: int, hi: int) -> None:
        value = self._lazy[node]
        if value is None:
            return
        mid = (lo + hi) // 2
        self._apply(2 * node, lo, mid, value)
        self._apply(2 * node + 1, mid + 1, hi, value)
        self._lazy[node] = None

    def _load(self, values: Sequence[int]) -> None:
        """Set position ``i + 1`` to ``values[i]`` for every position."""
        if len(values) != self.size:
            raise ValueError("one value per position is required")

        def build(node: int, lo: int, hi: int) -> None:
            self._lazy[node] = None
            if lo == hi:
                self._sums[node] = values[lo - 1]
                return
            mid = (lo + hi) // 2
            build(2 * node, lo, mid)
            build(2 * node + 1, mid + 1, hi)
            self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

        build(1, 1, self.size)

    def assign(self, l: int, r: int, value: int) -> None:
        """Set every position in ``l..r`` to ``value``."""
        self._check_range(l, r)
        self._assign(1, 1, self.size, l, r, value)

    def _assign(self, node: int, lo: int, hi: int, l: int, r: int, value: int) -> None:
        if r < lo or hi < l:
            return
        if l <= lo and hi <= r:
            self._apply(node, lo, hi, value)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._assign(2 * node, lo, mid, l, r, value)
        self._assign(2 * node + 1, mid + 1, hi, l, r, value)
        self._sums[node] = self._sums[2 * node] + self._sums[2 * node + 1]

    def query(self, l: int, r: int) -> int:
        """Sum of the positions ``l..r``."""
        self._check_range(l, r)
        return self._query(1, 1, self.size, l, r)

    def _query(self, node: int, lo: int, hi: int, l: int, r: int) -> int:
        if r < lo or hi < l:
            return 0
        if l <= lo and hi <= r:
            return self._sums[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, l, r) + self._query(
            2 * node + 1, mid + 1, hi, l, r
        )

    def get(self, pos: int) -> int:
        """Value at position ``pos``."""
        if not 1 <= pos <= self.size:
            raise IndexError(f"position {pos} is outside 1..{self.size}")
        return self._query(1, 1, self.size, pos, pos)


def _manacher(chars: Iterable[str]) -> list[int]:
    """Palindrome radii over the characters interleaved with separators.

    The interleaved sequence has a separator before, between and after the
    characters; character ``j`` sits at index ``2j + 1``.
    """
    interleaved: list[str | None] = [None]
    for ch in chars:
        interleaved.extend((ch, None))
    size = len(interleaved)
    radii = [0] * size
    centre = right = 0
    for i in range(size):
        radius = min(radii[2 * centre - i], right - i) if i < right else 0
        while (
            i - radius - 1 >= 0
            and i + radius + 1 < size
            and interleaved[i - radius - 1] == interleaved[i + radius + 1]
        ):
            radius += 1
        radii[i] = radius
        if i + radius > right:
            centre, right = i, i + radius
    return radii


class ManacherPalindromeCounter:
    """Answers fill and count queries from per-centre palindrome counts."""

    def __init__(self, text: str, k: int) -> None:
        if not text:
            raise ValueError("text must not be empty")
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._k_even = k >> 1
        self._k_odd = k - self._k_even
        self._n = len(text)
        self._chars = list(text)
        self._dp = SumSegmentTree(self._n)
        self._dp._load(self._centre_counts(1, self._n, 1, self._n))

    def _check_range(self, l: int, r: int) -> None:
        if not 1 <= l <= r <= self._n:
            raise ValueError(f"range {l}..{r} is outside 1..{self._n}")

    def char_at(self, pos: int) -> str:
        """The current character at 1-based position ``pos``."""
        if not 1 <= pos <= self._n:
            raise IndexError(f"position {pos} is outside 1..{self._n}")
        return self._chars[pos - 1]

    @property
    def text(self) -> str:
        """The current text."""
        return "".join(self._chars)

    def _inner_bounds(self, l: int, r: int) -> tuple[int, int]:
        """Centres whose every bounded palindrome lies inside ``l..r``."""
        lower = max(l + self._k_even, l + self._k_odd - 1)
        upper = min(r - self._k_even + 1, r - self._k_odd + 1)
        return lower, upper

    def _centre_counts(self, lo: int, hi: int, clip_l: int, clip_r: int) -> list[int]:
        """Bounded palindromes of each centre ``lo..hi`` that stay inside ``clip_l..clip_r``."""
        if lo > hi:
            return []
        start = max(clip_l, lo - self._k_even)
        stop = min(clip_r, hi + self._k_odd - 1)
        radii = _manacher(self._chars[start - 1:stop])
        counts = []
        for centre in range(lo, hi + 1):
            j = centre - start
            even = min(radii[2 * j] // 2, self._k_even)
            odd = min((radii[2 * j + 1] + 1) // 2, self._k_odd)
            counts.append(even + odd)
        return counts

    def _recompute(self, lo: int, hi: int) -> None:
        for centre, value in enumerate(self._centre_counts(lo, hi, 1, self._n), start=lo):
            self._dp.assign(centre, centre, value)

    def fill(self, l: int, r: int, ch: str) -> None:
        """Paint positions ``l..r`` with ``ch``."""
        self._check_range(l, r)
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"fill value must be a single character, got {ch!r}")
        self._chars[l - 1:r] = ch * (r - l + 1)
        first = max(1, min(l - self._k_even + 1, l - self._k_odd + 1))
        last = min(self._n, max(r + self._k_odd - 1, r + self._k_even))
        lower, upper = self._inner_bounds(l, r)
        if lower <= upper:
            self._dp.assign(lower, upper, self.k)
            self._recompute(first, lower - 1)
            self._recompute(upper + 1, last)
        else:
            self._recompute(first, last)

    def count(self, l: int, r: int) -> int:
        """Count palindromic substrings of length at most ``k`` inside ``l..r``."""
        self._check_range(l, r)
        lower, upper = self._inner_bounds(l, r)
        if lower > upper:
            return sum(self._centre_counts(l, r, l, r))
        return (
            self._dp.query(lower, upper)
            + sum(self._centre_counts(l, lower - 1, l, r))
            + sum(self._centre_counts(upper + 1, r, l, r))
        )