from collections.abc import Iterator
from typing import Self

from thawable.freezable import Freezable
from thawable.utils.deprecation import deprecated
from thawable.utils.kinds import kind_of

__all__ = ("Pair",)


class Pair[First, Second](Freezable):
    """
    Two-slot tuple which can be frozen.

    Slots are reassignable while the pair is mutable, a frozen pair rejects
    assignment with ``ImmutabilityError``. Pairs unpack like tuples.
    """

    __slots__ = (
        "_first",
        "_second",
    )

    _kind = "pair"

    def __init__(
        self,
        first: First,
        second: Second,
    ) -> None:
        super().__init__()
        self._first: First = first
        self._second: Second = second

    @property
    def first(self) -> First:
        return self._first

    @first.setter
    def first(
        self,
        value: First,
    ) -> None:
        self._ensure_mutable("first")
        self._first = value

    @property
    def second(self) -> Second:
        return self._second

    @second.setter
    def second(
        self,
        value: Second,
    ) -> None:
        self._ensure_mutable("second")
        self._second = value

    @deprecated("Pair.get_right", "Pair.first")
    def get_right(self) -> First:
        return self._first

    @deprecated("Pair.get_left", "Pair.second")
    def get_left(self) -> Second:
        return self._second

    def to_tuple(self) -> tuple[First, Second]:
        return (self._first, self._second)

    def __iter__(self) -> Iterator[First | Second]:
        return iter((self._first, self._second))

    def unfreeze(self) -> Self:
        return self.__class__(self._first, self._second)

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented

        return self.to_tuple() == other.to_tuple()  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __str__(self) -> str:
        return f"Pair[{kind_of(self._first)}, {kind_of(self._second)}]"

    def __repr__(self) -> str:
        state: str = "" if self.mutable else ", frozen"
        return f"Pair({self._first!r}, {self._second!r}{state})"
