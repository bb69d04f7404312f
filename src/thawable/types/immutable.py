from collections.abc import Mapping, MutableMapping
from typing import (
    Any,
    ClassVar,
    NoReturn,
    Self,
    dataclass_transform,
    final,
    get_origin,
    get_type_hints,
)

from thawable.types.missing import MISSING

__all__ = ("Immutable",)


@dataclass_transform(
    kw_only_default=True,
    frozen_default=True,
)
class ImmutableMeta(type):
    __slots__: tuple[str, ...]

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> type:
        immutable_type = type.__new__(
            mcs,
            name,
            bases,
            namespace,
            **kwargs,
        )

        immutable_type.__FIELDS__ = _collect_fields(immutable_type)  # pyright: ignore[reportAttributeAccessIssue]
        immutable_type.__slots__ = tuple(immutable_type.__FIELDS__.keys())  # pyright: ignore[reportAttributeAccessIssue]
        immutable_type.__match_args__ = immutable_type.__slots__  # pyright: ignore[reportAttributeAccessIssue]

        if name != "Immutable":
            immutable_type = final(immutable_type)

        return immutable_type


def _collect_fields(
    cls: type[Any],
) -> Mapping[str, Any]:
    fields: MutableMapping[str, Any] = {}
    for key, annotation in get_type_hints(cls, localns={cls.__name__: cls}).items():
        if key.startswith("__") or get_origin(annotation) is ClassVar:
            continue

        # MISSING marks a required attribute
        fields[key] = getattr(cls, key, MISSING)

    return fields


class Immutable(metaclass=ImmutableMeta):
    """
    Keyword-constructed value object whose attributes can't be reassigned.

    Subclasses declare attributes as annotations, optionally with a default
    value. Defaults are shared between instances, so they should be immutable
    themselves. Changed copies are produced with ``updated``.
    """

    __FIELDS__: ClassVar[Mapping[str, Any]]

    def __init__(
        self,
        **kwargs: Any,
    ) -> None:
        unexpected: set[str] = kwargs.keys() - self.__FIELDS__.keys()
        if unexpected:
            raise TypeError(
                f"Unexpected attributes for {self.__class__.__qualname__}:"
                f" {', '.join(sorted(unexpected))}"
            )

        for name, default in self.__FIELDS__.items():
            if name in kwargs:
                object.__setattr__(
                    self,
                    name,
                    kwargs[name],
                )

            elif default is not MISSING:
                object.__setattr__(
                    self,
                    name,
                    default,
                )

            else:
                raise AttributeError(
                    f"Missing required attribute: {name}@{self.__class__.__qualname__}"
                )

    def updated(
        self,
        **changes: Any,
    ) -> Self:
        return self.__class__(
            **{
                **{name: getattr(self, name) for name in self.__slots__},
                **changes,
            }
        )

    def __setattr__(
        self,
        name: str,
        value: Any,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be modified"
        )

    def __delattr__(
        self,
        name: str,
    ) -> NoReturn:
        raise AttributeError(
            f"Can't modify immutable {self.__class__.__qualname__}"
            f" attribute - '{name}' cannot be deleted"
        )

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented

        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self) -> int:
        return hash((self.__class__, *(getattr(self, name) for name in self.__slots__)))

    def __str__(self) -> str:
        fields: str = ", ".join(f"{name}: {getattr(self, name)}" for name in self.__slots__)
        return f"{self.__class__.__name__}({fields})"

    def __repr__(self) -> str:
        return str(self)

    def __copy__(self) -> Self:
        return self  # Immutable, no need to provide an actual copy

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> Self:
        return self  # Immutable, no need to provide an actual copy
