import logging

import pytest

from thawable import (
    Collection,
    deprecate,
    deprecated,
    describe_kinds,
    getenv_float,
    getenv_int,
    is_iterable_like,
    is_mapping_like,
    is_sequence_like,
    kind_of,
    remove_item,
)


class Sample:
    pass


def test_kind_of() -> None:
    assert kind_of(None) == "None"
    assert kind_of("text") == "str"
    assert kind_of([1]) == "list"
    assert kind_of(Sample()) == "Sample"
    assert kind_of(Sample) == "Sample"
    assert kind_of(lambda: None) == "function"


def test_describe_kinds_keeps_first_appearance_order() -> None:
    assert describe_kinds([1, "a", 2, None]) == "int | str | None"
    assert describe_kinds([]) == "Any"


def test_seed_checks() -> None:
    assert is_mapping_like({"a": 1})
    assert is_mapping_like(Collection())
    assert not is_mapping_like([1])
    assert is_sequence_like([1])
    assert is_sequence_like((1,))
    assert not is_sequence_like("text")
    assert not is_sequence_like(b"bytes")
    assert not is_sequence_like({"a": 1})
    assert is_iterable_like(iter([1]))
    assert is_iterable_like({1})
    assert not is_iterable_like("text")
    assert not is_iterable_like(3)


def test_remove_item_by_value_and_index() -> None:
    items = ["a", "b", "a"]

    assert remove_item(items, "a")
    assert items == ["b", "a"]
    assert remove_item(items, 1)
    assert items == ["b"]
    assert not remove_item(items, "z")


def test_remove_item_treats_bool_as_value() -> None:
    items = [True, False]

    assert remove_item(items, False)
    assert items == [True]


def test_remove_item_missing_index_raises() -> None:
    with pytest.raises(IndexError, match="index 2"):
        remove_item(["a"], 2)


def test_deprecated_wrapper_delegates_to_custom_log() -> None:
    messages: list[str] = []

    @deprecated("old", ["new", "newer"], log=messages.append)
    def old(value: int) -> int:
        return value + 1

    assert old(1) == 2
    assert old.__name__ == "old"
    assert messages == [
        "DeprecationWarning: Method 'old' is deprecated and will be removed"
        " in a future release, please use functions new, newer."
    ]


def test_deprecate_uses_library_logger_by_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="thawable.deprecation"):
        deprecate("old", "new")

    assert "please use function new" in caplog.text


def test_deprecate_uses_injected_sink(deprecations: list[str]) -> None:
    deprecate("old", "new")

    assert len(deprecations) == 1


def test_getenv_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THAWABLE_TEST_INT", "7")
    monkeypatch.setenv("THAWABLE_TEST_FLOAT", "0.5")
    monkeypatch.delenv("THAWABLE_TEST_MISSING", raising=False)

    assert getenv_int("THAWABLE_TEST_INT") == 7
    assert getenv_float("THAWABLE_TEST_FLOAT") == 0.5
    assert getenv_int("THAWABLE_TEST_MISSING", 3) == 3
    assert getenv_int("THAWABLE_TEST_MISSING") is None

    with pytest.raises(ValueError, match="is missing"):
        getenv_int("THAWABLE_TEST_MISSING", required=True)


def test_getenv_int_rejects_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("THAWABLE_TEST_INT", "seven")

    with pytest.raises(ValueError, match="not a valid int"):
        getenv_int("THAWABLE_TEST_INT")
