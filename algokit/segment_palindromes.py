"""Bounded palindrome counting on a segment tree of timestamped range fills."""

from __future__ import annotations

from algokit.palindromes import is_palindrome


class SegmentPalindromeCounter:
    """Answers fill and count queries with a segment tree.

    Each fill stamps the covering tree nodes with an increasing time; the
    character at a position is the one from the newest stamp on its
    root-to-leaf path, or the original character if there is none.  Counts
    add the answers of both halves of a node to the palindromes that cross
    its middle, and whole-node answers are cached until the next fill.
    """

    def __init__(self, text: str, k: int) -> None:
        if not text:
            raise ValueError("text must not be empty")
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self._base = text
        self._n = len(text)
        nodes = 4 * self._n + 1
        self._fill_time = [0] * nodes
        self._fill_char = [""] * nodes
        self._version = 0
        self._char_memo: dict[int, str] = {}
        self._answers: dict[int, int] = {}

    def _check_range(self, l: int, r: int) -> None:
        if not 1 <= l <= r <= self._n:
            raise ValueError(f"range {l}..{r} is outside 1..{self._n}")

    def char_at(self, pos: int) -> str:
        """The current character at 1-based position ``pos``."""
        if not 1 <= pos <= self._n:
            raise IndexError(f"position {pos} is outside 1..{self._n}")
        cached = self._char_memo.get(pos)
        if cached is not None:
            return cached
        node, lo, hi = 1, 1, self._n
        newest, ch = 0, self._base[pos - 1]
        while True:
            stamp = self._fill_time[node]
            if stamp > newest:
                newest, ch = stamp, self._fill_char[node]
            if stamp == self._version or lo == hi:
                break
            mid = (lo + hi) // 2
            if pos <= mid:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        self._char_memo[pos] = ch
        return ch

    @property
    def text(self) -> str:
        """The current text."""
        return "".join(self.char_at(pos) for pos in range(1, self._n + 1))

    def fill(self, l: int, r: int, ch: str) -> None:
        """Paint positions ``l..r`` with ``ch``."""
        self._check_range(l, r)
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"fill value must be a single character, got {ch!r}")
        self._version += 1
        self._char_memo.clear()
        self._answers.clear()
        self._fill(1, 1, self._n, l, r, ch)

    def _fill(self, node: int, lo: int, hi: int, l: int, r: int, ch: str) -> None:
        if hi < l or r < lo:
            return
        if l <= lo and hi <= r:
            self._fill_time[node] = self._version
            self._fill_char[node] = ch
            return
        mid = (lo + hi) // 2
        self._fill(2 * node, lo, mid, l, r, ch)
        self._fill(2 * node + 1, mid + 1, hi, l, r, ch)

    def count(self, l: int, r: int) -> int:
        """Count palindromic substrings of length at most ``k`` inside ``l..r``."""
        self._check_range(l, r)
        return self._query(1, 1, self._n, l, r)

    def _query(self, node: int, lo: int, hi: int, l: int, r: int) -> int:
        if hi < l or r < lo:
            return 0
        if lo == hi:
            return 1
        whole = l <= lo and hi <= r
        if whole and node in self._answers:
            return self._answers[node]
        mid = (lo + hi) // 2
        total = self._query(2 * node, lo, mid, l, r) + self._query(
            2 * node + 1, mid + 1, hi, l, r
        )
        if l <= mid < r:
            total += self._crossing(max(l, lo), mid, min(r, hi))
        if whole:
            self._answers[node] = total
        return total

    def _crossing(self, leftmost: int, mid: int, rightmost: int) -> int:
        """Palindromes with left end in ``leftmost..mid`` and right end in ``mid+1..rightmost``."""
        k = self.k
        if k < 2:
            return 0
        start = max(leftmost, mid - k + 2)
        stop = min(rightmost, mid + k - 1)
        window = "".join(self.char_at(pos) for pos in range(start, stop + 1))
        left_mid = mid - start
        right_mid = left_mid + 1
        last = len(window) - 1
        total = 0
        # Every crossing palindrome shrinks, symmetrically, to a unique one
        # that ends at the left middle or starts at the right middle.
        for length in range(2, k + 1):
            seeds = {(right_mid - length + 1, right_mid), (left_mid, left_mid + length - 1)}
            for a, b in seeds:
                if a < 0 or b > last or not is_palindrome(window, a, b):
                    continue
                while True:
                    total += 1
                    a, b = a - 1, b + 1
                    if a < 0 or b > last or b - a + 1 > k or window[a] != window[b]:
                        break
        return total