import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.block_palindromes import Block, BlockPalindromeCounter
from algokit.palindromes import (
    CountQuery,
    FillQuery,
    NaivePalindromeCounter,
    count_bounded_palindromes,
    filled_segment_count,
    generate_problem,
    solve,
)


def test_block_size_and_char_at():
    block = Block(3, 5, 0)
    base = list("abcdefg")
    assert block.size() == 3
    assert block.char_at(4, base) == "d"
    assert block.char_at(1, base) == ""
    block.filled = True
    block.fill_ch = "z"
    assert block.char_at(4, base) == "z"


def test_single_character_text():
    counter = BlockPalindromeCounter("a", 5)
    assert counter.count(1, 1) == 1


def test_uniform_text_matches_filled_formula():
    counter = BlockPalindromeCounter("a" * 30, 4)
    assert counter.count(1, 30) == filled_segment_count(30, 4)


def test_fill_updates_text():
    counter = BlockPalindromeCounter("abcdefghij", 3)
    counter.fill(2, 8, "x")
    assert counter.text == "axxxxxxxij"
    counter.fill(5, 10, "q")
    assert counter.text == "axxxqqqqqq"


def test_count_after_fill_matches_reference():
    text = "abacabadabacaba"
    block = BlockPalindromeCounter(text, 4)
    naive = NaivePalindromeCounter(text, 4)
    for counter in (block, naive):
        counter.fill(3, 11, "b")
    assert block.text == naive.text
    for l, r in [(1, 15), (2, 9), (5, 5), (10, 15)]:
        assert block.count(l, r) == naive.count(l, r)


def test_repeated_count_uses_cache_consistently():
    counter = BlockPalindromeCounter("abbaabbaab" * 3, 5)
    first = counter.count(1, 30)
    assert counter.count(1, 30) == first
    assert first == count_bounded_palindromes("abbaabbaab" * 3, 5, 1, 30)


def test_k_larger_than_text_is_clamped():
    counter = BlockPalindromeCounter("abba", 100)
    assert counter.count(1, 4) == count_bounded_palindromes("abba", 4, 1, 4)


def test_block_of_covers_every_position():
    counter = BlockPalindromeCounter("abcdefghijklmnopqrstu", 2)
    for pos in range(1, 22):
        block = counter.blocks[counter.block_of(pos)]
        assert block.l <= pos <= block.r


@pytest.mark.parametrize(
    "args",
    [("", 2), ("abc", 0)],
)
def test_invalid_construction(args):
    with pytest.raises(ValueError):
        BlockPalindromeCounter(*args)


def test_invalid_ranges_and_characters():
    counter = BlockPalindromeCounter("abcdef", 2)
    with pytest.raises(ValueError):
        counter.count(0, 3)
    with pytest.raises(ValueError):
        counter.count(4, 2)
    with pytest.raises(ValueError):
        counter.fill(1, 7, "a")
    with pytest.raises(ValueError):
        counter.fill(1, 2, "ab")
    with pytest.raises(IndexError):
        counter.char_at(7)


@pytest.mark.parametrize("seed", range(8))
def test_random_problems_match_reference(seed):
    rng = random.Random(seed)
    problem = generate_problem(rng, n=rng.randint(1, 60), m=80, k=rng.randint(1, 7))
    assert solve(problem, BlockPalindromeCounter) == solve(problem)


@settings(max_examples=60, deadline=None)
@given(
    text=st.text(alphabet="ab", min_size=1, max_size=25),
    k=st.integers(min_value=1, max_value=8),
    ops=st.lists(
        st.tuples(
            st.booleans(),
            st.integers(min_value=1, max_value=25),
            st.integers(min_value=1, max_value=25),
            st.sampled_from("abc"),
        ),
        max_size=15,
    ),
)
def test_agrees_with_naive_counter(text, k, ops):
    n = len(text)
    block = BlockPalindromeCounter(text, k)
    naive = NaivePalindromeCounter(text, k)
    for is_fill, a, b, ch in ops:
        l, r = sorted((min(a, n), min(b, n)))
        if is_fill:
            block.fill(l, r, ch)
            naive.fill(l, r, ch)
            assert block.text == naive.text
        else:
            assert block.count(l, r) == naive.count(l, r)
    assert block.count(1, n) == naive.count(1, n)


def test_solve_with_explicit_queries():
    from algokit.palindromes import Problem

    problem = Problem(
        "abcabcabca",
        3,
        [CountQuery(1, 10), FillQuery(2, 9, "z"), CountQuery(1, 10), CountQuery(4, 6)],
    )
    assert solve(problem, BlockPalindromeCounter) == solve(problem)