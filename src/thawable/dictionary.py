from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any, Literal, overload

from thawable.utils.checks import is_mapping_like, is_sequence_like

__all__ = ("Dictionary",)

type DictionaryKey = str | int


class Dictionary[Value]:
    """
    Plain key/value store keyed by strings or integers.

    Unlike ``Collection`` it never overwrites, ``set`` refuses keys which are
    already present. It is not freezable.
    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        source: Sequence[Value] | Mapping[DictionaryKey, Value] | None = None,
        /,
    ) -> None:
        self._entries: dict[DictionaryKey, Value] = {}
        if source is None:
            return

        elif is_mapping_like(source):
            for key, value in source.items():
                self.set(key, value)

        elif is_sequence_like(source):
            for value in source:
                self.set(len(self._entries), value)

        else:
            raise TypeError(
                f"Dictionary source must be a sequence or a mapping, received {type(source).__name__}"
            )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(
        self,
        key: object,
    ) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[DictionaryKey]:
        return iter(tuple(self._entries))

    @property
    def empty(self) -> bool:
        return not self._entries

    def contains(
        self,
        key: DictionaryKey,
    ) -> bool:
        return key in self._entries

    def get(
        self,
        key: DictionaryKey,
    ) -> Value | None:
        return self._entries.get(key)

    def set(
        self,
        key: DictionaryKey,
        value: Value,
    ) -> bool:
        """Insert a new entry, returning False without changes when ``key`` exists."""
        if key in self._entries:
            return False

        self._entries[key] = value
        return True

    def delete(
        self,
        key: DictionaryKey,
    ) -> bool:
        if key not in self._entries:
            return False

        del self._entries[key]
        return True

    def to_key_list(self) -> list[DictionaryKey]:
        return list(self._entries)

    def to_list(self) -> list[Value]:
        return list(self._entries.values())

    def entries(self) -> list[tuple[DictionaryKey, Value]]:
        return list(self._entries.items())

    @overload
    def map[Mapped](
        self,
        kind: Literal["key"],
        transform: Callable[[DictionaryKey], Mapped],
    ) -> list[Mapped]: ...

    @overload
    def map[Mapped](
        self,
        kind: Literal["value"],
        transform: Callable[[Value], Mapped],
    ) -> list[Mapped]: ...

    def map(
        self,
        kind: Literal["key", "value"],
        transform: Callable[[Any], Any],
    ) -> list[Any]:
        """
        Transform either the keys or the values, in insertion order.

        Raises
        ------
        ValueError
            If ``kind`` is neither ``"key"`` nor ``"value"``.
        """
        return [transform(element) for element in self._select(kind, "map")]

    @overload
    def filter(
        self,
        kind: Literal["key"],
        predicate: Callable[[DictionaryKey], bool],
    ) -> list[DictionaryKey]: ...

    @overload
    def filter(
        self,
        kind: Literal["value"],
        predicate: Callable[[Value], bool],
    ) -> list[Value]: ...

    def filter(
        self,
        kind: Literal["key", "value"],
        predicate: Callable[[Any], bool],
    ) -> list[Any]:
        return [element for element in self._select(kind, "filter") if predicate(element)]

    def _select(
        self,
        kind: str,
        operation: str,
    ) -> list[Any]:
        match kind:
            case "key":
                return self.to_key_list()

            case "value":
                return self.to_list()

            case other:
                raise ValueError(
                    f"Invalid kind for Dictionary.{operation}, expected 'key' or 'value',"
                    f" received '{other}'"
                )

    def __repr__(self) -> str:
        return f"Dictionary({self._entries!r})"
