import json
from collections.abc import Callable, Iterator, Mapping, Sequence
from functools import reduce as fold
from random import choice
from typing import Any, Self, cast, overload

from thawable.errors import MergeConflictError
from thawable.freezable import Freezable
from thawable.types.missing import MISSING, Missing
from thawable.utils.checks import is_mapping_like, is_sequence_like
from thawable.utils.kinds import describe_kinds

__all__ = ("Collection",)


class Collection[Key, Value](Freezable, Mapping[Key, Value]):
    """
    Insertion ordered key/value container with array-like helpers.

    Reads follow the ``Mapping`` protocol (``collection[key]``, ``get``, ``in``,
    ``len``, iteration over keys), while mutation is only available through
    the guarded operations of this class. Insertion order is significant, it
    drives ``first``/``last`` and every derived operation.

    Lookups which find nothing return ``None``. Predicates and transforms of
    ``filter``, ``filter_keys``, ``map``, ``find``, ``find_key``, ``partition`` and
    ``sweep`` are called with ``(value, key)``, those of ``some``, ``every`` and
    ``reduce`` with values only.

    Parameters
    ----------
    source : Sequence[Value] | Mapping[Key, Value] | None
        Seed entries. Sequences become index keyed entries, mappings keep
        their keys and enumeration order.

    Raises
    ------
    TypeError
        If ``source`` is neither a sequence nor a mapping.
    """

    __slots__ = ("_entries",)

    _kind = "collection"

    def __init__(
        self,
        source: Sequence[Value] | Mapping[Key, Value] | None = None,
        /,
    ) -> None:
        super().__init__()
        self._entries: dict[Key, Value]
        if source is None:
            self._entries = {}

        elif is_mapping_like(source):
            self._entries = dict(cast(Mapping[Key, Value], source))

        elif is_sequence_like(source):
            self._entries = {cast(Key, index): value for index, value in enumerate(source)}

        else:
            raise TypeError(
                f"Collection source must be a sequence or a mapping, received {type(source).__name__}"
            )

    @classmethod
    def from_source(
        cls,
        source: Sequence[Value] | Mapping[Key, Value],
        /,
    ) -> Self:
        return cls(source)

    # reading

    def __getitem__(
        self,
        key: Key,
    ) -> Value:
        return self._entries[key]

    def __iter__(self) -> Iterator[Key]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(
        self,
        key: object,
    ) -> bool:
        return key in self._entries

    @property
    def empty(self) -> bool:
        return not self._entries

    # mutation

    def set(
        self,
        key: Key,
        value: Value,
    ) -> Self:
        """
        Insert or overwrite an entry, returning the collection.

        Overwriting keeps the original position of the key.
        """
        self._ensure_mutable("set")
        self._entries[key] = value
        return self

    def add(
        self,
        value: Value,
    ) -> Self:
        """
        Insert ``value`` keyed with the current size of the collection.

        The key is ``len(collection)`` at the time of the call, it is not a running
        counter. After a deletion that key may already be taken, in which case
        its value is overwritten in place.
        """
        self._ensure_mutable("add")
        self._entries[cast(Key, len(self._entries))] = value
        return self

    def delete(
        self,
        key: Key,
    ) -> bool:
        self._ensure_mutable("delete")
        if key not in self._entries:
            return False

        del self._entries[key]
        return True

    def delete_all(self) -> None:
        self._ensure_mutable("delete_all")
        self._entries.clear()

    def emplace(
        self,
        key: Key,
        value: Value | Callable[[], Value],
    ) -> Value:
        """
        Return the value under ``key``, inserting it first when absent.

        Callable values are treated as factories and are only invoked when the
        key is missing. Mutability is required only when inserting.
        """
        if key in self._entries:
            return self._entries[key]

        self._ensure_mutable("emplace")
        inserted: Value = cast(Callable[[], Value], value)() if callable(value) else value
        self._entries[key] = inserted
        return inserted

    def sweep(
        self,
        predicate: Callable[[Value, Key], bool],
    ) -> int:
        """Delete every entry satisfying ``predicate(value, key)``, returning the count."""
        self._ensure_mutable("sweep")
        swept: list[Key] = [key for key, value in self._entries.items() if predicate(value, key)]
        for key in swept:
            del self._entries[key]

        return len(swept)

    def shift(
        self,
        remove: bool = False,
    ) -> Value | None:
        return self._take(next(iter(self._entries), MISSING), remove=remove, operation="shift")

    def unshift(
        self,
        remove: bool = False,
    ) -> Value | None:
        return self._take(
            next(reversed(self._entries), MISSING),
            remove=remove,
            operation="unshift",
        )

    def _take(
        self,
        key: Key | Missing,
        *,
        remove: bool,
        operation: str,
    ) -> Value | None:
        if key is MISSING:
            return None

        if remove:
            self._ensure_mutable(operation)
            return self._entries.pop(cast(Key, key))

        return self._entries[cast(Key, key)]

    # transformations

    def filter(
        self,
        predicate: Callable[[Value, Key], bool],
    ) -> list[Value]:
        return [value for key, value in self._entries.items() if predicate(value, key)]

    def filter_keys(
        self,
        predicate: Callable[[Value, Key], bool],
    ) -> list[Key]:
        return [key for key, value in self._entries.items() if predicate(value, key)]

    def map[Mapped](
        self,
        transform: Callable[[Value, Key], Mapped],
    ) -> list[Mapped]:
        return [transform(value, key) for key, value in self._entries.items()]

    def find(
        self,
        predicate: Callable[[Value, Key], bool],
    ) -> Value | None:
        """First value satisfying ``predicate`` in insertion order, or ``None``."""
        return next(
            (value for key, value in self._entries.items() if predicate(value, key)),
            None,
        )

    def find_key(
        self,
        predicate: Callable[[Value, Key], bool],
    ) -> Key | None:
        """Key of the first value satisfying ``predicate``, or ``None``."""
        return next(
            (key for key, value in self._entries.items() if predicate(value, key)),
            None,
        )

    def partition(
        self,
        predicate: Callable[[Value, Key], bool],
    ) -> tuple[Self, Self]:
        """
        Split into two new collections, matching entries and the rest.

        Keys stay paired with their values and relative order is kept on both
        sides. The source collection is left untouched.
        """
        matching: Self = self.__class__()
        rest: Self = self.__class__()
        for key, value in self._entries.items():
            if predicate(value, key):
                matching._entries[key] = value

            else:
                rest._entries[key] = value

        return (matching, rest)

    @overload
    def reduce[Accumulated](
        self,
        function: Callable[[Accumulated, Value], Accumulated],
        initial: Accumulated,
        /,
    ) -> Accumulated: ...

    @overload
    def reduce(
        self,
        function: Callable[[Value, Value], Value],
        /,
    ) -> Value: ...

    def reduce(
        self,
        function: Callable[[Any, Value], Any],
        initial: Any | Missing = MISSING,
        /,
    ) -> Any:
        """
        Fold the values in insertion order.

        Without ``initial`` the first value seeds the fold, which then starts
        from the second value.

        Raises
        ------
        TypeError
            If the collection is empty and no initial value was given.
        """
        if initial is MISSING:
            if not self._entries:
                raise TypeError("reduce of an empty Collection with no initial value")

            return fold(function, self._entries.values())

        return fold(function, self._entries.values(), initial)

    def some(
        self,
        predicate: Callable[[Value], bool],
    ) -> bool:
        return any(predicate(value) for value in self._entries.values())

    def some_keys(
        self,
        predicate: Callable[[Key], bool],
    ) -> bool:
        return any(predicate(key) for key in self._entries)

    def every(
        self,
        predicate: Callable[[Value], bool],
    ) -> bool:
        return all(predicate(value) for value in self._entries.values())

    def sort(
        self,
        *,
        key: Callable[[Value], Any] | None = None,
        reverse: bool = False,
    ) -> list[Value]:
        return sorted(self._entries.values(), key=key, reverse=reverse)  # pyright: ignore[reportCallIssue, reportArgumentType]

    def sort_keys(
        self,
        *,
        key: Callable[[Key], Any] | None = None,
        reverse: bool = False,
    ) -> list[Key]:
        return sorted(self._entries, key=key, reverse=reverse)  # pyright: ignore[reportCallIssue, reportArgumentType]

    def random(self) -> Value | None:
        if not self._entries:
            return None

        return choice(tuple(self._entries.values()))  # nosec: B311

    def merge(
        self,
        *others: "Collection[Key, Value]",
    ) -> Self:
        """
        Combine this collection with others into a new collection.

        Entries of this collection come first, followed by each argument in
        order. A key present in several collections takes the latest value.

        Raises
        ------
        MergeConflictError
            If any of the arguments is frozen. Nothing is merged in that case.
        """
        frozen: int = sum(1 for other in others if not other.mutable)
        if frozen:
            raise MergeConflictError(frozen)

        merged: Self = self.__class__(self._entries)
        for other in others:
            merged._entries.update(other._entries)

        return merged

    # ends

    @overload
    def first(self) -> Value | None: ...

    @overload
    def first(
        self,
        amount: int,
    ) -> list[Value]: ...

    def first(
        self,
        amount: int | Missing = MISSING,
    ) -> Value | list[Value] | None:
        """
        Value at the front, or up to ``amount`` values from the front.

        A negative ``amount`` takes from the back instead.
        """
        return _pick(list(self._entries.values()), amount, front=True)

    @overload
    def last(self) -> Value | None: ...

    @overload
    def last(
        self,
        amount: int,
    ) -> list[Value]: ...

    def last(
        self,
        amount: int | Missing = MISSING,
    ) -> Value | list[Value] | None:
        return _pick(list(self._entries.values()), amount, front=False)

    @overload
    def first_key(self) -> Key | None: ...

    @overload
    def first_key(
        self,
        amount: int,
    ) -> list[Key]: ...

    def first_key(
        self,
        amount: int | Missing = MISSING,
    ) -> Key | list[Key] | None:
        return _pick(list(self._entries), amount, front=True)

    @overload
    def last_key(self) -> Key | None: ...

    @overload
    def last_key(
        self,
        amount: int,
    ) -> list[Key]: ...

    def last_key(
        self,
        amount: int | Missing = MISSING,
    ) -> Key | list[Key] | None:
        return _pick(list(self._entries), amount, front=False)

    # conversions

    def to_list(self) -> list[Value]:
        return list(self._entries.values())

    def to_key_list(self) -> list[Key]:
        return list(self._entries)

    def to_dict(self) -> dict[Key, Value]:
        return dict(self._entries)

    def to_json(self) -> str:
        return json.dumps(self._entries)

    def unfreeze(self) -> Self:
        return self.__class__(self._entries)

    def __str__(self) -> str:
        return (
            f"Collection[{describe_kinds(self._entries)}, {describe_kinds(self._entries.values())}]"
        )

    def __repr__(self) -> str:
        state: str = "" if self.mutable else ", frozen"
        return f"Collection({self._entries!r}{state})"


def _pick[Element](
    elements: list[Element],
    amount: int | Missing,
    *,
    front: bool,
) -> Element | list[Element] | None:
    if amount is MISSING:
        if not elements:
            return None

        return elements[0] if front else elements[-1]

    count: int = cast(int, amount)
    if count < 0:
        return _pick(elements, -count, front=not front)

    if count == 0:
        return []

    return elements[:count] if front else elements[-count:]
