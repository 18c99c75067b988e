import pytest
from hypothesis import given, strategies as st

from algokit.heap import Heap


def drain(heap):
    result = []
    while heap:
        result.append(heap.pop())
    return result


def test_strings_come_out_largest_first():
    heap = Heap()
    heap.insert("A")
    heap.insert("Z")
    assert heap.pop() == "Z"
    assert heap.pop() == "A"


def test_top_does_not_remove():
    heap = Heap()
    for value in (3, 9, 1):
        heap.insert(value)
    assert heap.top() == 9
    assert len(heap) == 3
    assert heap.top() == 9


def test_empty_heap_is_falsy_and_sized_zero():
    heap = Heap()
    assert len(heap) == 0
    assert not heap
    heap.insert(5)
    assert len(heap) == 1
    assert heap


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Heap().pop()


def test_top_empty_raises():
    with pytest.raises(IndexError):
        Heap().top()


def test_pop_after_draining_raises():
    heap = Heap()
    heap.insert(1)
    assert heap.pop() == 1
    with pytest.raises(IndexError):
        heap.pop()


@given(st.lists(st.integers()))
def test_default_heap_sorts_descending(values):
    heap = Heap()
    for value in values:
        heap.insert(value)
    assert len(heap) == len(values)
    assert drain(heap) == sorted(values, reverse=True)


@given(st.lists(st.integers()))
def test_custom_comparator_gives_min_heap(values):
    heap = Heap(lambda a, b: a < b)
    for value in values:
        heap.insert(value)
    assert drain(heap) == sorted(values)


@given(
    st.integers(min_value=0, max_value=100),
    st.lists(st.tuples(st.booleans(), st.integers(min_value=0, max_value=100))),
)
def test_interleaved_operations_track_maximum(first, operations):
    heap = Heap()
    heap.insert(first)
    reference = [first]
    for is_pop, value in operations:
        if is_pop and len(reference) > 1:
            expected = max(reference)
            reference.remove(expected)
            assert heap.pop() == expected
        else:
            heap.insert(value)
            reference.append(value)
        assert len(heap) == len(reference)
        assert heap.top() == max(reference)