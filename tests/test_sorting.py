from collections import Counter

from hypothesis import given, strategies as st

from lavutil.sorting import merge_sort, quicksort


def ascending(a, b):
    return (a > b) - (a < b)


def descending(a, b):
    return (a < b) - (a > b)


def by_key(a, b):
    return (a[0] > b[0]) - (a[0] < b[0])


def test_quicksort_empty_and_single():
    empty = []
    quicksort(empty, ascending)
    assert empty == []
    single = [7]
    quicksort(single, ascending)
    assert single == [7]


def test_quicksort_small_example():
    data = [3, 1, 2]
    quicksort(data, ascending)
    assert data == [1, 2, 3]


def test_merge_sort_is_stable():
    data = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    merge_sort(data, by_key)
    assert data == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_quicksort_sorts_ascending(values):
    data = list(values)
    quicksort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.integers(min_value=-50, max_value=50), max_size=200))
def test_quicksort_sorts_descending(values):
    data = list(values)
    quicksort(data, descending)
    assert data == sorted(values, reverse=True)


@given(st.lists(st.integers()))
def test_quicksort_keeps_elements(values):
    data = list(values)
    quicksort(data, ascending)
    assert Counter(data) == Counter(values)


@given(st.lists(st.integers()))
def test_quicksort_on_sorted_input(values):
    data = sorted(values)
    quicksort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.integers()))
def test_merge_sort_sorts(values):
    data = list(values)
    merge_sort(data, ascending)
    assert data == sorted(values)


@given(st.lists(st.tuples(st.integers(min_value=0, max_value=5), st.integers())))
def test_merge_sort_preserves_order_of_equal_keys(pairs):
    data = list(pairs)
    merge_sort(data, by_key)
    assert [p[0] for p in data] == sorted(p[0] for p in pairs)
    for key in {p[0] for p in pairs}:
        assert [p for p in data if p[0] == key] == [p for p in pairs if p[0] == key]