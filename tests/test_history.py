import pytest

from imagex.history import History


def test_undo_on_empty_raises():
    with pytest.raises(IndexError):
        History().undo("current")


def test_redo_on_empty_raises():
    with pytest.raises(IndexError):
        History().redo("current")


def test_undo_returns_last_pushed():
    history = History()
    history.push("a")
    history.push("b")
    assert history.undo("c") == "b"
    assert history.undo("b") == "a"
    assert not history.can_undo()


def test_redo_returns_what_undo_replaced():
    history = History()
    history.push("a")
    restored = history.undo("b")
    assert restored == "a"
    assert history.can_redo()
    assert history.redo(restored) == "b"
    assert not history.can_redo()
    assert history.undo("b") == "a"


def test_push_clears_redo():
    history = History()
    history.push("a")
    history.undo("b")
    history.push("c")
    assert not history.can_redo()


def test_push_none_is_ignored():
    history = History()
    history.push(None)
    assert not history.can_undo()