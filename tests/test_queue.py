import pytest

from thawable import Collection, Queue


def test_empty_queue() -> None:
    queue: Queue[str] = Queue()

    assert len(queue) == 0
    assert queue.empty
    assert queue.first() is None
    assert queue.last() is None
    assert queue.shift() is None
    assert queue.unshift() is None


def test_seeded_queue_size() -> None:
    assert len(Queue(["a", "b", "c"])) == 3


def test_seed_from_mapping_uses_values() -> None:
    assert Queue({"x": 1, "y": 2}).to_list() == [1, 2]


def test_unsupported_seed_raises_type_error() -> None:
    with pytest.raises(TypeError, match="received int"):
        Queue(3)  # pyright: ignore[reportArgumentType]

    with pytest.raises(TypeError, match="received str"):
        Queue("abc")


def test_seed_from_other_queue_and_iterables() -> None:
    source = Queue(["a", "b"])

    copied = Queue(source)
    copied.add("c")

    assert copied.to_list() == ["a", "b", "c"]
    assert source.to_list() == ["a", "b"]
    assert Queue(element * 2 for element in range(3)).to_list() == [0, 2, 4]


def test_add_then_tick_drains_in_order() -> None:
    queue = Queue(["a", "b", "c"])

    queue.add("d")
    assert len(queue) == 4
    assert queue.get(3) == "d"

    collected: list[str] = []
    queue.tick(collected.append)

    assert collected == ["a", "b", "c", "d"]
    assert len(queue) == 0


def test_tick_calls_back_once_per_element() -> None:
    queue = Queue(["a", "a", "b"])
    calls: list[str] = []

    queue.tick(calls.append)

    assert calls == ["a", "a", "b"]
    assert queue.empty


def test_get_never_raises() -> None:
    queue = Queue(["a", "b", "c"])

    assert queue.get(1) == "b"
    assert queue.get(3) is None
    assert queue.get(-1) is None


def test_first_and_last() -> None:
    queue = Queue(["a", "b", "c"])

    assert queue.first() == "a"
    assert queue.last() == "c"


def test_shift_and_unshift_remove_ends() -> None:
    queue = Queue(["a", "b", "c"])

    assert queue.shift() == "a"
    assert queue.unshift() == "c"
    assert queue.to_list() == ["b"]


def test_remove_by_value_removes_first_occurrence() -> None:
    queue = Queue(["a", "b", "a"])

    assert queue.remove("a")
    assert queue.to_list() == ["b", "a"]
    assert not queue.remove("z")


def test_remove_by_index() -> None:
    queue = Queue(["a", "b", "c"])

    assert queue.remove(1)
    assert queue.to_list() == ["a", "c"]


def test_remove_missing_index_raises() -> None:
    queue = Queue(["a"])

    with pytest.raises(IndexError):
        queue.remove(5)


def test_includes() -> None:
    queue = Queue(["a", "b", "5"])

    assert queue.includes("5")
    assert "5" in queue
    assert "c" not in queue


def test_iteration_is_restartable_snapshot() -> None:
    queue = Queue(["a", "b", "c", "d", "e"])

    assert sum(1 for _ in queue) == 5
    assert list(queue) == ["a", "b", "c", "d", "e"]

    seen: list[str] = []
    for element in queue:
        seen.append(element)
        if element == "a":
            queue.add("f")

    assert seen == ["a", "b", "c", "d", "e"]
    assert len(queue) == 6


def test_to_collection_keys_by_position() -> None:
    collection = Queue(["a", "b"]).to_collection()

    assert isinstance(collection, Collection)
    assert collection.to_dict() == {0: "a", 1: "b"}


def test_to_list_is_snapshot() -> None:
    queue = Queue(["a"])
    snapshot = queue.to_list()

    snapshot.append("b")

    assert len(queue) == 1


def test_describes_kinds() -> None:
    assert str(Queue(["item", "item", "item"])) == "Queue[str]"
    assert str(Queue(["item", 1])) == "Queue[str | int]"
