# algokit

A small collection of classic algorithms and data structures in pure Python,
with no runtime dependencies.

## Contents

### Big integers: `algokit.bigint`

`BigInt` is a signed integer of any size, held as little-endian digits in
base 10 000 (`BigInt.BASE`). Zero has no digits and a positive sign.

- Build one from an `int` or another `BigInt`: `BigInt(123)`, or parse a
  decimal string with an optional sign: `BigInt.parse("-42")`.
- `digits` (a tuple) and `sign` (`1` or `-1`) are read-only properties;
  `len()` gives the number of base-10 000 digits.
- `str()`, `repr()`, `int()` and `hash()` work as expected.
- Comparison (`==`, `<`, `<=`, `>`, `>=`), negation, `+`, `-` and `*`,
  with `BigInt` or plain `int` on either side.
- `a * b` multiplies with the FFT. `a.multiply(b, method)` lets you choose the
  algorithm with a `MultiplyMethod` (`MultiplyMethod.FFT` or
  `MultiplyMethod.KARATSUBA`) or its string value (`"fft"`, `"karatsuba"`).

`BigInt` has no division, remainder or power operations.

### Multiplication: `algokit.multiply`

These functions work on little-endian digit lists in any base of at least 2:

- `fft_multiply(x, y, base)` multiplies two digit lists with the FFT.
- `karatsuba_multiply(x, y, base)` multiplies them by recursive splitting.

Both return a normalized list of digits, with no high zeros. An empty list
stands for zero.

Helpers:

- `fft(values, inverse=False)` is a discrete Fourier transform for lengths
  that are powers of two. With `inverse=True` it scales by `1/n`, so it
  undoes the forward transform.
- `next_power_of_two(m)` returns the smallest power of two that is at least
  `m`.

### Heap: `algokit.heap`

`Heap(comparator=None)` is a binary heap. `comparator(a, b)` returns `True`
when `a` belongs above `b`. The default is `a > b`, which gives a max-heap.

- `insert` adds an element.
- `top` returns the top element without removing it.
- `pop` removes and returns the top element.
- `len()` and truth testing report the size.

`top` and `pop` raise `IndexError` on an empty heap.

### Bounded palindrome counting

These counters work on a string that changes under range fills. They count
the palindromic substrings of length at most `k` that lie inside a range.
Positions are 1-based and inclusive.

There are four counters with the same interface:

| Class | Module | Approach |
| --- | --- | --- |
| `NaivePalindromeCounter` | `algokit.palindromes` | Direct reference: checks every substring |
| `SegmentPalindromeCounter` | `algokit.segment_palindromes` | Segment tree of timestamped fills |
| `BlockPalindromeCounter` | `algokit.block_palindromes` | Square-root blocks with lazy fills |
| `ManacherPalindromeCounter` | `algokit.manacher_palindromes` | Per-centre counts from Manacher's algorithm in a `SumSegmentTree` |

Each counter is built as `Counter(text, k)` and offers:

- `fill(l, r, ch)` paints positions `l..r` with the single character `ch`.
- `count(l, r)` returns the number of palindromic substrings inside `l..r`
  whose length is at most `k`.
- `text` is a property holding the current string.

The segment, block and Manacher counters also have `char_at(pos)`, which
returns the character at one position. `BlockPalindromeCounter` caps `k` at
the length of the text. It also exposes its `blocks` (`Block` objects) and
`block_of(pos)`.

Out-of-range positions raise `ValueError`, or `IndexError` for single
positions. Calling `fill` with anything other than one character also raises
`ValueError`.

`algokit.manacher_palindromes.SumSegmentTree(size)` is available on its own.
It supports range assignment with `assign(l, r, value)`, range sums with
`query(l, r)` and single values with `get(pos)`.

`algokit.palindromes` also provides these functions:

- `is_palindrome(text, start, end)` uses 0-based inclusive bounds.
- `count_bounded_palindromes(text, k, l, r)` counts the bounded palindromes
  inside `l..r`.
- `filled_segment_count(size, k)` returns the count for a run of `size`
  equal characters.

## Examples

```python
from algokit.bigint import BigInt, MultiplyMethod

a = BigInt(20080000004100)
b = BigInt.parse("30040000000007000")
print(a * b)
print(a.multiply(b, MultiplyMethod.KARATSUBA) == a * b)   # True
print(a - b, a + 1, 5 - a)
```

```python
from algokit.heap import Heap

heap = Heap()                        # larger values come out first
heap.insert("A")
heap.insert("Z")
print(heap.pop(), heap.pop())        # Z A

smallest_first = Heap(lambda a, b: a < b)
```

```python
from algokit.palindromes import NaivePalindromeCounter
from algokit.block_palindromes import BlockPalindromeCounter

counter = BlockPalindromeCounter("abacaba", 3)
print(counter.count(1, 7))
counter.fill(2, 4, "z")
print(counter.text, counter.count(1, 7))   # text is now "azzzaba"

reference = NaivePalindromeCounter("abacaba", 3)
reference.fill(2, 4, "z")
assert reference.count(1, 7) == counter.count(1, 7)
```

## Problem files

A problem is written as whitespace-separated tokens:

1. The initial string and `k`.
2. The number of queries.
3. One entry per query:
   - `1 l r c` fills positions `l..r` with the character `c`.
   - `2 l r` asks for the count over `l..r`.

The module `algokit.palindromes` handles these files:

- `parse_problem(data)` reads the format into a `Problem` holding `text`, `k`
  and a list of `FillQuery` and `CountQuery` objects. Malformed input raises
  `ValueError`.
- `format_problem(problem)` writes a `Problem` back out in the same format.
- `generate_problem(rng, n=None, m=None, k=None)` builds a random problem
  from a `random.Random`. It uses lowercase letters, and about a quarter of
  the queries are fills.
- `solve(problem, counter_factory=NaivePalindromeCounter)` runs the queries
  with any of the counter classes. It returns the answers to the count
  queries in order.

## Command line

```
algokit-palindromes problem.txt
algokit-palindromes < problem.txt
```

The command reads a problem from the named file, or from standard input if
no file is given. It prints one answer per count query, using the naive
counter.

```
algokit-palindromes --generate --seed 1 -n 20 -m 10 -k 4
```

This prints a random problem instead. Any of `--seed`, `-n`, `-m` and `-k`
that you leave out are chosen at random.

## Running the tests

```
pip install -e ".[test]"
pytest
```