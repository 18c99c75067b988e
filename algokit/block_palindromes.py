"""Bounded palindrome counting over square-root blocks with lazy range fills."""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence
from dataclasses import dataclass

from algokit.palindromes import filled_segment_count


@dataclass
class Block:
    """A run of positions ``l..r`` (1-based), possibly painted with one character.

    ``ans`` caches the palindrome count of the whole block while
    ``calculated`` is set.
    """

    l: int
    r: int
    index: int
    filled: bool = False
    fill_ch: str = ""
    calculated: bool = False
    ans: int = 0

    def size(self) -> int:
        """Number of positions in the block."""
        return self.r - self.l + 1

    def char_at(self, pos: int, base: Sequence[str]) -> str:
        """Character at ``pos``, read from ``base`` (0-based) unless the block is painted.

        Positions outside the block give an empty string.
        """
        if pos < self.l or pos > self.r:
            return ""
        if self.filled:
            return self.fill_ch
        return base[pos - 1]

    def _paint(self, ch: str) -> None:
        self.filled = True
        self.fill_ch = ch
        self._invalidate()

    def _invalidate(self) -> None:
        self.calculated = False
        self.ans = 0


def _palindromes(window: Sequence[str], k: int, split: int | None = None) -> int:
    """Count palindromes of length at most ``k`` in ``window``.

    With ``split`` given, only those starting before ``split`` and ending at
    or after it are counted.
    """
    size = len(window)
    total = 0
    for doubled in range(2 * size - 1):
        a = doubled // 2
        b = a + doubled % 2
        while a >= 0 and b < size and b - a + 1 <= k and window[a] == window[b]:
            if split is None or a < split <= b:
                total += 1
            a -= 1
            b += 1
    return total


class BlockPalindromeCounter:
    """Answers fill and count queries by splitting the text into blocks.

    Blocks are at least ``k`` long, so a bounded palindrome touches at most
    two neighbouring blocks.  A fill that covers a whole block only marks it;
    a partial fill rewrites the affected characters.
    """

    def __init__(self, text: str, k: int) -> None:
        if not text:
            raise ValueError("text must not be empty")
        if k < 1:
            raise ValueError("k must be at least 1")
        self._n = len(text)
        self.k = min(self._n, k)
        self._chars = list(text)
        block_size = max(self.k, math.isqrt(self._n))
        self.blocks: list[Block] = [
            Block(start, min(self._n, start + block_size - 1), index)
            for index, start in enumerate(range(1, self._n + 1, block_size))
        ]
        self._right_ends = [block.r for block in self.blocks]

    def _check_range(self, l: int, r: int) -> None:
        if not 1 <= l <= r <= self._n:
            raise ValueError(f"range {l}..{r} is outside 1..{self._n}")

    def block_of(self, pos: int) -> int:
        """Index of the block holding 1-based position ``pos``."""
        if not 1 <= pos <= self._n:
            raise IndexError(f"position {pos} is outside 1..{self._n}")
        return bisect.bisect_left(self._right_ends, pos)

    def char_at(self, pos: int) -> str:
        """The current character at 1-based position ``pos``."""
        return self.blocks[self.block_of(pos)].char_at(pos, self._chars)

    @property
    def text(self) -> str:
        """The current text."""
        return "".join(self.char_at(pos) for pos in range(1, self._n + 1))

    def _paint_part(self, block: Block, l: int, r: int, ch: str) -> None:
        block._invalidate()
        if block.filled:
            block.filled = False
            self._chars[block.l - 1:block.r] = block.fill_ch * block.size()
        lo, hi = max(l, block.l), min(r, block.r)
        self._chars[lo - 1:hi] = ch * (hi - lo + 1)

    def fill(self, l: int, r: int, ch: str) -> None:
        """Paint positions ``l..r`` with ``ch``."""
        self._check_range(l, r)
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"fill value must be a single character, got {ch!r}")
        left, right = self.block_of(l), self.block_of(r)
        for block in self.blocks[left + 1:right]:
            block._paint(ch)
        for index in {left, right}:
            block = self.blocks[index]
            if l <= block.l and block.r <= r:
                block._paint(ch)
            else:
                self._paint_part(block, l, r, ch)

    def _window(self, lo: int, hi: int) -> list[str]:
        return [self.char_at(pos) for pos in range(lo, hi + 1)]

    def _count_block(self, block: Block, lo: int, hi: int) -> int:
        if block.filled:
            return filled_segment_count(hi - lo + 1, self.k)
        whole = lo == block.l and hi == block.r
        if whole and block.calculated:
            return block.ans
        result = _palindromes(self._chars[lo - 1:hi], self.k)
        if whole:
            block.calculated = True
            block.ans = result
        return result

    def _count_crossing(self, left: Block, right: Block, l: int, r: int) -> int:
        k = self.k
        if k < 2:
            return 0
        leftmost = max(left.l, l)
        rightmost = min(right.r, r)
        if left.filled and right.filled:
            if left.fill_ch != right.fill_ch:
                return 0
            length1 = left.r - leftmost + 1
            length2 = rightmost - right.l + 1
            return sum(
                min(length2, k - partial) for partial in range(1, min(k - 1, length1) + 1)
            )
        start = max(leftmost, left.r - k + 2)
        stop = min(rightmost, right.l + k - 2)
        return _palindromes(self._window(start, stop), k, split=right.l - start)

    def count(self, l: int, r: int) -> int:
        """Count palindromic substrings of length at most ``k`` inside ``l..r``."""
        self._check_range(l, r)
        left, right = self.block_of(l), self.block_of(r)
        total = 0
        for block in self.blocks[left:right + 1]:
            total += self._count_block(block, max(l, block.l), min(r, block.r))
        for first, second in zip(self.blocks[left:right], self.blocks[left + 1:right + 1]):
            total += self._count_crossing(first, second, l, r)
        return total