from collections.abc import Iterable

__all__ = (
    "describe_kinds",
    "kind_of",
)


def kind_of(
    value: object,
    /,
) -> str:
    """
    Short name of the runtime type of a value, used in container descriptions.

    Classes are described by their own name, functions as ``function`` and
    ``None`` as ``None``.
    """
    if value is None:
        return "None"

    elif isinstance(value, type):
        return value.__qualname__

    elif callable(value) and hasattr(value, "__code__"):
        return "function"

    else:
        return type(value).__name__


def describe_kinds(
    values: Iterable[object],
    /,
) -> str:
    """
    Distinct kinds of the given values in order of appearance, joined with ``|``.

    Returns ``Any`` when there are no values to describe.
    """
    kinds: list[str] = []
    for value in values:
        kind: str = kind_of(value)
        if kind not in kinds:
            kinds.append(kind)

    return " | ".join(kinds) if kinds else "Any"
