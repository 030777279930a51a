import functools

import pytest

from jsonc.arraylist import DEFAULT_SIZE, ArrayList


@pytest.fixture
def freed():
    return []


@pytest.fixture
def arr(freed):
    return ArrayList(freed.append, DEFAULT_SIZE)


def test_default_capacity():
    assert ArrayList().capacity == DEFAULT_SIZE
    assert DEFAULT_SIZE == 32


def test_negative_initial_size_rejected():
    with pytest.raises(ValueError):
        ArrayList(None, -1)


def test_append_and_get(arr):
    for word in ("a", "b", "c"):
        arr.append(word)
    assert len(arr) == 3
    assert [arr.get(i) for i in range(3)] == ["a", "b", "c"]
    assert list(arr) == ["a", "b", "c"]


def test_get_out_of_range_returns_none(arr):
    arr.append("x")
    assert arr.get(1) is None
    assert arr.get(-1) is None


def test_put_beyond_length_pads_with_none(arr):
    arr.append("a")
    arr.put(4, "e")
    assert len(arr) == 5
    assert list(arr) == ["a", None, None, None, "e"]


def test_put_replaces_and_releases_old(arr, freed):
    arr.append("old")
    arr.put(0, "new")
    assert arr.get(0) == "new"
    assert freed == ["old"]


def test_put_negative_index_raises(arr):
    with pytest.raises(IndexError):
        arr.put(-1, "x")


def test_capacity_grows_with_content():
    small = ArrayList(None, 1)
    for i in range(10):
        small.append(i)
    assert small.capacity >= len(small)


def test_delete_releases_and_shifts(arr, freed):
    for word in ("a", "b", "c", "d"):
        arr.append(word)
    arr.delete(1, 2)
    assert list(arr) == ["a", "d"]
    assert freed == ["b", "c"]


def test_delete_skips_empty_slots(arr, freed):
    arr.put(2, "c")
    arr.delete(0, 2)
    assert list(arr) == ["c"]
    assert freed == []


@pytest.mark.parametrize("index,count", [(3, 1), (1, 3), (0, 5), (-1, 1)])
def test_delete_out_of_range_raises(arr, index, count):
    for word in ("a", "b", "c"):
        arr.append(word)
    with pytest.raises(IndexError):
        arr.delete(index, count)
    assert len(arr) == 3


def test_shrink_to_length_plus_slots(arr):
    for word in ("a", "b", "c"):
        arr.append(word)
    arr.shrink(2)
    assert arr.capacity == len(arr) + 2


def test_shrink_empty_keeps_one_slot(arr):
    arr.shrink(0)
    assert arr.capacity == 1


def test_shrink_can_expand():
    small = ArrayList(None, 2)
    small.append(1)
    small.shrink(10)
    assert small.capacity >= 11


def test_shrink_negative_raises(arr):
    with pytest.raises(ValueError):
        arr.shrink(-1)


def test_sort_with_key(arr):
    for n in (3, 1, 2):
        arr.append(n)
    arr.sort(key=lambda n: -n)
    assert list(arr) == [3, 2, 1]


def test_sort_with_comparator(arr):
    for n in (3, 1, 2):
        arr.append(n)
    arr.sort(key=functools.cmp_to_key(lambda a, b: a - b))
    assert list(arr) == [1, 2, 3]


def test_bsearch_finds_and_misses(arr):
    for n in (1, 3, 5, 7, 9):
        arr.append(n)

    def cmp(a, b):
        return (a > b) - (a < b)

    assert arr.bsearch(7, cmp) == 7
    assert arr.bsearch(1, cmp) == 1
    assert arr.bsearch(4, cmp) is None


def test_free_releases_all_non_empty(arr, freed):
    arr.append("a")
    arr.put(3, "d")
    arr.free()
    assert freed == ["a", "d"]
    assert len(arr) == 0


def test_no_free_fn_is_allowed():
    plain = ArrayList(None, 4)
    plain.append("a")
    plain.put(0, "b")
    plain.delete(0, 1)
    assert len(plain) == 0