from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeGuard

__all__ = (
    "is_iterable_like",
    "is_mapping_like",
    "is_sequence_like",
)

# text and binary values are single values, not seeds
_ATOMIC = (str, bytes, bytearray)


def is_mapping_like(
    value: Any,
    /,
) -> TypeGuard[Mapping[Any, Any]]:
    return isinstance(value, Mapping)


def is_sequence_like(
    value: Any,
    /,
) -> TypeGuard[Sequence[Any]]:
    return isinstance(value, Sequence) and not isinstance(value, _ATOMIC)


def is_iterable_like(
    value: Any,
    /,
) -> TypeGuard[Iterable[Any]]:
    return isinstance(value, Iterable) and not isinstance(value, _ATOMIC)
