from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Self

from thawable.collection import Collection
from thawable.freezable import Freezable
from thawable.utils.arrays import remove_item
from thawable.utils.checks import is_iterable_like, is_mapping_like
from thawable.utils.kinds import describe_kinds

__all__ = ("Queue",)


class Queue[Element](Freezable):
    """
    Ordered list of elements with FIFO and LIFO access.

    Duplicates are allowed and elements have no keys, positions are 0-based.
    Reads never raise for a missing position or an empty queue, they return
    ``None`` instead. Iteration works on a snapshot taken when it starts, so
    the queue can be iterated repeatedly and modified while iterating.

    Parameters
    ----------
    source : Iterable[Element] | Mapping[Any, Element] | None
        Seed elements, any iterable including another queue. Mappings
        contribute their values in enumeration order.

    Raises
    ------
    TypeError
        If ``source`` is not iterable, or is a string or bytes.
    """

    __slots__ = ("_elements",)

    _kind = "queue"

    def __init__(
        self,
        source: Iterable[Element] | Mapping[Any, Element] | None = None,
        /,
    ) -> None:
        super().__init__()
        self._elements: list[Element]
        if source is None:
            self._elements = []

        elif is_mapping_like(source):
            self._elements = list(source.values())

        elif is_iterable_like(source):
            self._elements = list(source)

        else:
            raise TypeError(
                f"Queue source must be an iterable or a mapping, received {type(source).__name__}"
            )

    def add(
        self,
        element: Element,
    ) -> Self:
        self._ensure_mutable("add")
        self._elements.append(element)
        return self

    def remove(
        self,
        element: Element | int,
    ) -> bool:
        """
        Remove the element at a position (``int``) or the first occurrence of a value.

        Returns
        -------
        bool
            False when the given value was not in the queue.

        Raises
        ------
        ImmutabilityError
            If the queue is frozen.
        IndexError
            If a position was given and there is no element at it.
        """
        self._ensure_mutable("remove")
        return remove_item(self._elements, element)

    def get(
        self,
        index: int,
    ) -> Element | None:
        if 0 <= index < len(self._elements):
            return self._elements[index]

        return None

    def first(self) -> Element | None:
        return self._elements[0] if self._elements else None

    def last(self) -> Element | None:
        return self._elements[-1] if self._elements else None

    def shift(self) -> Element | None:
        """Remove and return the element at the front."""
        self._ensure_mutable("shift")
        return self._elements.pop(0) if self._elements else None

    def unshift(self) -> Element | None:
        """Remove and return the element at the back."""
        self._ensure_mutable("unshift")
        return self._elements.pop() if self._elements else None

    def tick(
        self,
        callback: Callable[[Element], Any],
    ) -> None:
        """
        Drain the queue, passing every element to ``callback`` in order.

        The queue is empty afterwards. Elements added by the callback itself
        are dropped together with the rest.
        """
        self._ensure_mutable("tick")
        for element in tuple(self._elements):
            callback(element)

        self._elements.clear()

    def includes(
        self,
        element: Element,
    ) -> bool:
        return element in self._elements

    def __contains__(
        self,
        element: object,
    ) -> bool:
        return element in self._elements

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._elements))

    def __len__(self) -> int:
        return len(self._elements)

    @property
    def empty(self) -> bool:
        return not self._elements

    def to_list(self) -> list[Element]:
        return list(self._elements)

    def to_collection(self) -> Collection[int, Element]:
        return Collection(self._elements)

    def unfreeze(self) -> Self:
        return self.__class__(self._elements)

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented

        return self._elements == other._elements  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __str__(self) -> str:
        return f"Queue[{describe_kinds(self._elements)}]"

    def __repr__(self) -> str:
        state: str = "" if self.mutable else ", frozen"
        return f"Queue({self._elements!r}{state})"
