from abc import ABC, abstractmethod
from typing import ClassVar, Self

from thawable.errors import ContainerKind, ImmutabilityError

__all__ = ("Freezable",)


class Freezable(ABC):
    """
    Shared freeze/unfreeze contract of the containers.

    A fresh instance is mutable. ``freeze`` makes that single instance reject
    every mutation for the rest of its life, there is no way back. ``unfreeze``
    never touches the instance it is called on, it returns a new mutable
    instance holding a shallow copy of the current contents.
    """

    __slots__ = ("_mutable",)

    _kind: ClassVar[ContainerKind]

    def __init__(self) -> None:
        self._mutable: bool = True

    @property
    def mutable(self) -> bool:
        return self._mutable

    def freeze(self) -> Self:
        self._mutable = False
        return self

    @abstractmethod
    def unfreeze(self) -> Self: ...

    def _ensure_mutable(
        self,
        operation: str,
        /,
    ) -> None:
        if not self._mutable:
            raise ImmutabilityError(self._kind, operation)
