from typing import Final, Literal

__all__ = (
    "ContainerKind",
    "ImmutabilityError",
    "MergeConflictError",
)

type ContainerKind = Literal[
    "collection",
    "pair",
    "queue",
    "timed_queue",
]

_KIND_NAMES: Final[dict[str, str]] = {
    "collection": "Collection",
    "pair": "Pair",
    "queue": "Queue",
    "timed_queue": "TimedQueue",
}


class ImmutabilityError(RuntimeError):
    """Raised when a mutating operation is called on a frozen container.

    Attributes:
        kind: Kind of the container which rejected the operation.
        operation: Name of the rejected operation.

    Example:
        ```python
        queue = Queue(["a"]).freeze()
        try:
            queue.add("b")
        except ImmutabilityError as exc:
            queue = queue.unfreeze()  # exc.operation == "add"
        ```
    """

    __slots__ = (
        "kind",
        "operation",
    )

    def __init__(
        self,
        kind: ContainerKind,
        operation: str,
    ) -> None:
        name: str = _KIND_NAMES[kind]
        super().__init__(
            f"{name} is immutable, values cannot be changed. (Called by {name}.{operation})"
        )
        self.kind: ContainerKind = kind
        self.operation: str = operation


class MergeConflictError(ValueError):
    """Raised when merging collections while some of the arguments are frozen.

    Attributes:
        count: Number of frozen collections among the merge arguments.
    """

    __slots__ = ("count",)

    def __init__(
        self,
        count: int,
    ) -> None:
        super().__init__(f"{count} collections cannot be merged due to some being immutable")
        self.count: int = count
