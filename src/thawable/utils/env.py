from collections.abc import Callable
from os import getenv as os_getenv
from typing import Literal, overload

__all__ = (
    "getenv_float",
    "getenv_int",
)


def _getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
    *,
    kind: str,
    default: Value | None,
    required: bool,
) -> Value | None:
    if value := os_getenv(key=key):
        try:
            return mapping(value)

        except ValueError as exc:
            raise ValueError(f"Environment value `{key}` is not a valid {kind}!") from exc

    elif required and default is None:
        raise ValueError(f"Required environment value `{key}` is missing!")

    else:
        return default


@overload
def getenv_int(
    key: str,
    /,
) -> int | None: ...


@overload
def getenv_int(
    key: str,
    /,
    default: int,
) -> int: ...


@overload
def getenv_int(
    key: str,
    /,
    *,
    required: Literal[True],
) -> int: ...


def getenv_int(
    key: str,
    /,
    default: int | None = None,
    *,
    required: bool = False,
) -> int | None:
    """
    Read an integer environment variable.

    Raises
    ------
    ValueError
        If the value is set but is not an integer, or when ``required`` is set
        and neither the variable nor a default is available.
    """
    return _getenv(
        key,
        int,
        kind="int",
        default=default,
        required=required,
    )


@overload
def getenv_float(
    key: str,
    /,
) -> float | None: ...


@overload
def getenv_float(
    key: str,
    /,
    default: float,
) -> float: ...


@overload
def getenv_float(
    key: str,
    /,
    *,
    required: Literal[True],
) -> float: ...


def getenv_float(
    key: str,
    /,
    default: float | None = None,
    *,
    required: bool = False,
) -> float | None:
    """
    Read a float environment variable.

    Raises
    ------
    ValueError
        If the value is set but is not a number, or when ``required`` is set
        and neither the variable nor a default is available.
    """
    return _getenv(
        key,
        float,
        kind="float",
        default=default,
        required=required,
    )
