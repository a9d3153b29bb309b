import pytest

from snapedit.buffer import HistoryStore, Snapshot


def test_save_pushes_and_clears_redo() -> None:
    history = HistoryStore()
    history.push_redo(b"old", 3, 10)

    snapshot = history.save(b"hello", 5, 10, label="append")

    assert history.undo_depth == 1
    assert history.redo_depth == 0
    assert snapshot == Snapshot(data=b"hello", length=5, capacity=10, label="append")


def test_push_undo_keeps_redo() -> None:
    history = HistoryStore()
    history.push_redo(b"r", 1, 10)

    history.push_undo(b"u", 1, 10)

    assert history.undo_depth == 1
    assert history.redo_depth == 1


def test_pop_is_lifo() -> None:
    history = HistoryStore()
    history.save(b"a", 1, 10)
    history.save(b"ab", 2, 10)

    assert history.pop_undo().data == b"ab"
    assert history.pop_undo().data == b"a"
    assert history.pop_undo() is None


def test_pop_redo_on_empty_returns_none() -> None:
    history = HistoryStore()

    assert history.pop_redo() is None
    assert history.can_redo() is False


def test_snapshot_copies_only_length_bytes() -> None:
    history = HistoryStore()
    storage = bytearray(b"abcdef\x00\x00")

    snapshot = history.save(storage, 3, len(storage))
    storage[0:3] = b"xyz"

    assert snapshot.data == b"abc"
    assert snapshot.capacity == 8
    assert history.peek_undo() is snapshot


def test_stacks_never_share_instances() -> None:
    history = HistoryStore()

    first = history.push_undo(b"same", 4, 10)
    second = history.push_redo(b"same", 4, 10)

    assert first == second
    assert first is not second


@pytest.mark.parametrize(
    ("data", "length", "capacity"),
    [(b"abc", 4, 10), (b"abc", 3, 2), (b"abc", -1, 10)],
)
def test_invalid_capture_arguments(data: bytes, length: int, capacity: int) -> None:
    history = HistoryStore()

    with pytest.raises(ValueError):
        history.save(data, length, capacity)


def test_clear_drops_both_stacks() -> None:
    history = HistoryStore()
    history.save(b"a", 1, 10)
    history.push_redo(b"b", 1, 10)

    history.clear()

    assert (history.undo_depth, history.redo_depth) == (0, 0)
