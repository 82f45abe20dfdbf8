import pytest

from applab.dynamic_array import GROWTH_AMOUNT, MAX_STR_LEN, DynamicArray


def test_push_returns_consecutive_indices():
    arr = DynamicArray(2)
    assert [arr.push(w) for w in ["a", "b", "c"]] == [0, 1, 2]
    assert list(arr) == ["a", "b", "c"]
    assert len(arr) == 3


def test_initial_capacity_kept_until_full():
    arr = DynamicArray(1000)
    for i in range(1000):
        arr.push(str(i))
    assert arr.capacity == 1000
    arr.push("more")
    assert arr.capacity == 1000 + GROWTH_AMOUNT


def test_zero_initial_size_grows_on_first_push():
    arr = DynamicArray(0)
    assert arr.capacity == 0
    arr.push("x")
    assert arr.capacity == GROWTH_AMOUNT


def test_capacity_never_below_length():
    arr = DynamicArray(3)
    for i in range(250):
        arr.push(i)
        assert arr.capacity >= len(arr)


def test_negative_initial_size_rejected():
    with pytest.raises(ValueError):
        DynamicArray(-1)


def test_search_finds_first_match():
    arr = DynamicArray(4)
    for w in ["apple", "pear", "apple"]:
        arr.push(w)
    assert arr.search("pear") == "pear"
    assert arr.search("plum") is None


def test_search_compares_only_max_length_prefix():
    arr = DynamicArray()
    stored = "a" * MAX_STR_LEN
    arr.push(stored)
    assert arr.search("a" * (MAX_STR_LEN + 5)) == stored
    assert arr.search("a" * (MAX_STR_LEN - 1)) is None


def test_clear_resets_state():
    arr = DynamicArray(10)
    arr.push("x")
    arr.clear()
    assert len(arr) == 0
    assert arr.capacity == 0
    assert arr.search("x") is None


def test_getitem_and_index_error():
    arr = DynamicArray()
    arr.push("first")
    arr.push("second")
    assert arr[1] == "second"
    assert arr[-1] == "second"
    with pytest.raises(IndexError):
        arr[2]