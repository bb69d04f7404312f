import pytest

from thawable import ImmutabilityError, Pair


def test_accessors() -> None:
    pair = Pair("a", "b")

    assert pair.first == "a"
    assert pair.second == "b"
    assert pair.to_tuple() == ("a", "b")


def test_unpacks_like_tuple() -> None:
    first, second = Pair(1, "x")

    assert first == 1
    assert second == "x"


def test_slots_are_assignable_while_mutable() -> None:
    pair = Pair("a", "b")

    pair.first = "c"
    pair.second = "d"

    assert pair.to_tuple() == ("c", "d")


def test_frozen_pair_rejects_assignment() -> None:
    pair = Pair("a", "b").freeze()

    with pytest.raises(ImmutabilityError) as excinfo:
        pair.first = "c"

    assert excinfo.value.kind == "pair"
    assert excinfo.value.operation == "first"
    assert pair.first == "a"


def test_deprecated_accessors_delegate_and_warn(deprecations: list[str]) -> None:
    pair = Pair("right", "left")

    assert pair.get_right() == "right"
    assert pair.get_left() == "left"
    assert len(deprecations) == 2
    assert "Pair.get_right" in deprecations[0]
    assert "Pair.first" in deprecations[0]


def test_describes_kinds() -> None:
    assert str(Pair("item", "item")) == "Pair[str, str]"
    assert str(Pair(1, None)) == "Pair[int, None]"


def test_equality() -> None:
    assert Pair("a", 1) == Pair("a", 1)
    assert Pair("a", 1) != Pair("a", 2)
