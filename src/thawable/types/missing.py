from typing import Any, Final, final

__all__ = (
    "MISSING",
    "Missing",
)


class MissingType(type):
    _instance: Any = None

    def __call__(cls) -> Any:
        if cls._instance is None:
            cls._instance = super().__call__()

        return cls._instance


@final
class Missing(metaclass=MissingType):
    """
    Marker for an argument which was not supplied at all.

    Containers use ``None`` as their not-found result, so ``None`` cannot double
    as the "nothing was passed" marker. ``MISSING`` is the only instance and
    should be compared by identity.
    """

    __slots__ = ()
    __match_args__ = ()

    def __bool__(self) -> bool:
        return False

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __eq__(
        self,
        value: object,
    ) -> bool:
        return value is MISSING

    def __str__(self) -> str:
        return "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __setattr__(
        self,
        __name: str,
        __value: Any,
    ) -> None:
        raise AttributeError("Missing can't be modified")

    def __delattr__(
        self,
        __name: str,
    ) -> None:
        raise AttributeError("Missing can't be modified")


MISSING: Final[Missing] = Missing()
