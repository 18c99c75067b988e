"""Counting palindromic substrings of bounded length under range fills.

A problem is a text, a length bound ``k`` and a list of queries.  A fill
query paints positions ``l..r`` (1-based, inclusive) with one character.  A
count query asks how many substrings inside ``l..r`` of length at most ``k``
are palindromes.
"""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, Union

MAX_N = 100_000
MAX_M = 100_000
MAX_K = 50
FILL_TYPE = 1
COUNT_TYPE = 2


@dataclass(frozen=True)
class FillQuery:
    """Paint positions ``l..r`` with ``ch``."""

    l: int
    r: int
    ch: str


@dataclass(frozen=True)
class CountQuery:
    """Count bounded palindromes lying inside ``l..r``."""

    l: int
    r: int


Query = Union[FillQuery, CountQuery]


@dataclass
class Problem:
    """A text, the palindrome length bound and the queries to run on it."""

    text: str
    k: int
    queries: list[Query] = field(default_factory=list)


class PalindromeCounter(Protocol):
    def fill(self, l: int, r: int, ch: str) -> None: ...

    def count(self, l: int, r: int) -> int: ...


def _check_range(l: int, r: int, n: int) -> None:
    if not 1 <= l <= r <= n:
        raise ValueError(f"range {l}..{r} is outside 1..{n}")


def _check_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"fill value must be a single character, got {ch!r}")


def is_palindrome(text: Sequence[str], start: int, end: int) -> bool:
    """Whether ``text[start..end]`` (0-based, inclusive) reads the same backwards."""
    if start > end:
        return True
    segment = text[start:end + 1]
    return segment == segment[::-1]


def count_bounded_palindromes(text: Sequence[str], k: int, l: int, r: int) -> int:
    """Count palindromic substrings of length at most ``k`` inside ``l..r`` (1-based)."""
    if k < 1:
        raise ValueError("k must be at least 1")
    _check_range(l, r, len(text))
    return sum(
        1
        for i in range(l - 1, r)
        for j in range(i, min(r, i + k))
        if is_palindrome(text, i, j)
    )


def filled_segment_count(size: int, k: int) -> int:
    """Number of substrings of length at most ``k`` in a block of ``size`` equal characters."""
    if size < 0 or k < 0:
        raise ValueError("size and k must be non-negative")
    longest = min(k, size)
    return size * longest + longest - (1 + longest) * longest // 2


class NaivePalindromeCounter:
    """Direct reference implementation: fills rewrite the text, counts check every substring."""

    def __init__(self, text: str, k: int) -> None:
        if not text:
            raise ValueError("text must not be empty")
        if k < 1:
            raise ValueError("k must be at least 1")
        self._chars = list(text)
        self.k = k

    def fill(self, l: int, r: int, ch: str) -> None:
        """Paint positions ``l..r`` with ``ch``."""
        _check_range(l, r, len(self._chars))
        _check_char(ch)
        self._chars[l - 1:r] = ch * (r - l + 1)

    def count(self, l: int, r: int) -> int:
        """Count bounded palindromes inside ``l..r``."""
        return count_bounded_palindromes(self._chars, self.k, l, r)

    @property
    def text(self) -> str:
        """The current text."""
        return "".join(self._chars)


def parse_problem(data: str) -> Problem:
    """Parse ``text k``, the query count and the queries from whitespace-separated input."""
    tokens = iter(data.split())

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    text = take()
    k = int(take())
    total = int(take())
    if total < 0:
        raise ValueError("query count must be non-negative")
    queries: list[Query] = []
    for _ in range(total):
        kind = int(take())
        l, r = int(take()), int(take())
        if kind == FILL_TYPE:
            ch = take()
            _check_char(ch)
            queries.append(FillQuery(l, r, ch))
        elif kind == COUNT_TYPE:
            queries.append(CountQuery(l, r))
        else:
            raise ValueError(f"unknown query type {kind}")
    return Problem(text, k, queries)


def format_problem(problem: Problem) -> str:
    """Write a problem in the form that ``parse_problem`` reads."""
    lines = [f"{problem.text} {problem.k}", str(len(problem.queries))]
    for query in problem.queries:
        if isinstance(query, FillQuery):
            lines.append(f"{FILL_TYPE} {query.l} {query.r} {query.ch}")
        else:
            lines.append(f"{COUNT_TYPE} {query.l} {query.r}")
    return "\n".join(lines) + "\n"


def _random_letter(rng: random.Random) -> str:
    return chr(rng.randint(ord("a"), ord("z")))


def generate_problem(
    rng: random.Random,
    n: int | None = None,
    m: int | None = None,
    k: int | None = None,
) -> Problem:
    """Build a random problem; about a quarter of the queries are fills."""
    if m is None:
        m = rng.randint(1, MAX_M)
    if n is None:
        n = rng.randint(1, MAX_N)
    if n < 1:
        raise ValueError("n must be at least 1")
    if m < 0:
        raise ValueError("m must be non-negative")
    if k is None:
        k = rng.randint(1, min(MAX_K, n))
    if k < 1:
        raise ValueError("k must be at least 1")
    text = "".join(_random_letter(rng) for _ in range(n))
    queries: list[Query] = []
    for _ in range(m):
        is_fill = rng.randint(1, 40) > 30
        if is_fill:
            ch = _random_letter(rng)
            l = rng.randint(1, n)
            queries.append(FillQuery(l, rng.randint(l, n), ch))
        else:
            l = rng.randint(1, n)
            queries.append(CountQuery(l, rng.randint(l, n)))
    return Problem(text, k, queries)


def solve(
    problem: Problem,
    counter_factory: Callable[[str, int], PalindromeCounter] = NaivePalindromeCounter,
) -> list[int]:
    """Run every query and return the answers of the count queries in order."""
    counter = counter_factory(problem.text, problem.k)
    answers = []
    for query in problem.queries:
        if isinstance(query, FillQuery):
            counter.fill(query.l, query.r, query.ch)
        else:
            answers.append(counter.count(query.l, query.r))
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Answer the queries of a problem, or generate a random one."""
    parser = argparse.ArgumentParser(
        prog="algokit-palindromes",
        description="Count bounded-length palindromes under range fills.",
    )
    parser.add_argument("input", nargs="?", help="problem file (default: standard input)")
    parser.add_argument("--generate", action="store_true", help="print a random problem")
    parser.add_argument("--seed", type=int, help="random seed for --generate")
    parser.add_argument("-n", type=int, help="text length for --generate")
    parser.add_argument("-m", type=int, help="query count for --generate")
    parser.add_argument("-k", type=int, help="length bound for --generate")
    args = parser.parse_args(argv)

    if args.generate:
        rng = random.Random(args.seed)
        sys.stdout.write(format_problem(generate_problem(rng, args.n, args.m, args.k)))
        return 0

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            data = handle.read()
    else:
        data = sys.stdin.read()
    for answer in solve(parse_problem(data)):
        print(answer)
    return 0