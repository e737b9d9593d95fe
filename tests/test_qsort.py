from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from eposlib.qsort import qsort


def ascending(a, b):
    return (a > b) - (a < b)


def descending(a, b):
    return (a < b) - (a > b)


@given(st.lists(st.integers()))
def test_matches_sorted(values):
    data = list(values)
    qsort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.integers(min_value=0, max_value=3), min_size=0, max_size=300))
def test_many_duplicates(values):
    data = list(values)
    qsort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.integers(), min_size=41, max_size=500))
def test_large_inputs(values):
    data = list(values)
    qsort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.integers()))
def test_descending_comparator(values):
    data = list(values)
    qsort(data, descending)
    assert data == sorted(values, reverse=True)


def test_returns_same_list():
    data = [3, 1, 2]
    result = qsort(data, ascending)
    assert result is data
    assert data == [1, 2, 3]


def test_already_sorted_and_reversed():
    forward = list(range(100))
    backward = list(range(99, -1, -1))
    qsort(forward, ascending)
    qsort(backward, ascending)
    assert forward == list(range(100))
    assert backward == list(range(100))


@given(st.lists(st.tuples(st.integers(0, 5), st.text(max_size=3)), max_size=100))
def test_sort_by_key_keeps_multiset(records):
    data = list(records)
    qsort(data, lambda a, b: ascending(a[0], b[0]))
    keys = [key for key, _ in data]
    assert keys == sorted(keys)
    assert Counter(data) == Counter(records)


def test_empty_and_single():
    empty = []
    single = ["x"]
    qsort(empty, ascending)
    qsort(single, ascending)
    assert empty == []
    assert single == ["x"]