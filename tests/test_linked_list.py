import pytest

from applab.linked_list import MAX_BUFF_LEN, LinkedList


@pytest.fixture
def words():
    lst = LinkedList()
    for word in ("alpha", "beta", "gamma"):
        lst.append(word)
    return lst


def test_new_list_is_empty():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_pop_front_on_empty_returns_none():
    assert LinkedList().pop_front() is None


def test_append_keeps_order(words):
    assert list(words) == ["alpha", "beta", "gamma"]
    assert len(words) == 3


def test_pop_front_is_fifo(words):
    assert words.pop_front() == "alpha"
    assert words.pop_front() == "beta"
    assert len(words) == 1
    assert words.pop_front() == "gamma"
    assert words.pop_front() is None
    assert len(words) == 0


def test_append_after_emptying(words):
    while words.pop_front() is not None:
        pass
    words.append("delta")
    assert list(words) == ["delta"]


def test_clear_resets(words):
    words.clear()
    assert len(words) == 0
    assert words.pop_front() is None


def test_search_found_and_missing(words):
    assert words.search("beta") is True
    assert words.search("omega") is False


def test_contains(words):
    assert "gamma" in words
    assert "gam" not in words
    assert 5 not in words


def test_long_text_is_truncated():
    lst = LinkedList()
    lst.append("x" * (MAX_BUFF_LEN + 10))
    stored = lst.pop_front()
    assert stored == "x" * (MAX_BUFF_LEN - 1)