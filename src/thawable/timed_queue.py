from asyncio import Task, current_task, get_running_loop, sleep
from asyncio import wait as wait_tasks
from collections.abc import Callable, Iterator
from datetime import timedelta
from logging import Logger, getLogger
from typing import Any, Final, Literal, Self, get_args

from thawable.freezable import Freezable
from thawable.types.immutable import Immutable
from thawable.types.missing import MISSING, Missing
from thawable.utils.arrays import remove_item
from thawable.utils.env import getenv_float, getenv_int
from thawable.utils.kinds import describe_kinds

__all__ = (
    "TimedQueue",
    "TimedQueueConfig",
    "TimedQueueEvent",
)

_logger: Final[Logger] = getLogger("thawable.timed_queue")

type TimedQueueEvent = Literal["start", "tick", "end"]

_EVENTS: Final[tuple[str, ...]] = get_args(TimedQueueEvent.__value__)


class TimedQueueConfig(Immutable):
    """
    Draining parameters of a ``TimedQueue``.

    Attributes
    ----------
    item_count : int
        Elements removed per tick. With 1 each tick carries a single element,
        otherwise a list of up to ``item_count`` elements.
    every : float
        Seconds to wait after ``start`` before the first tick.
    time : float
        Seconds to wait between consecutive ticks.
    """

    item_count: int = 1
    every: float = 30.0
    time: float = 5.0

    @classmethod
    def from_env(cls) -> "TimedQueueConfig":
        """
        Read the configuration from ``THAWABLE_TIMED_QUEUE_ITEM_COUNT``,
        ``THAWABLE_TIMED_QUEUE_EVERY`` and ``THAWABLE_TIMED_QUEUE_TIME``,
        using defaults for variables which are not set.
        """
        return cls(
            item_count=getenv_int("THAWABLE_TIMED_QUEUE_ITEM_COUNT", 1),
            every=getenv_float("THAWABLE_TIMED_QUEUE_EVERY", 30.0),
            time=getenv_float("THAWABLE_TIMED_QUEUE_TIME", 5.0),
        )


def _seconds(
    value: timedelta | float,
    /,
) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()

    return float(value)


class TimedQueue[Element](Freezable):
    """
    Queue drained in batches by a timer running on the asyncio event loop.

    ``start`` schedules a drain run: after ``every`` seconds it repeatedly
    removes elements from the front, notifies ``tick`` listeners and waits
    ``time`` seconds, until the queue is empty. Then ``end`` listeners are
    notified and the queue becomes idle again on its own. ``stop`` cancels
    the run immediately without notifying ``end``.

    Elements can be added while running or idle. Listeners are plain
    callables, ``start`` and ``end`` ones are called without arguments and
    ``tick`` ones with the removed element (or the list of removed elements
    when ``item_count`` is greater than 1).

    Parameters
    ----------
    config : TimedQueueConfig | None
        Base configuration, defaults are used when omitted.
    item_count : int
        Overrides ``config.item_count``.
    every : timedelta | float
        Overrides ``config.every``, in seconds when given as a number.
    time : timedelta | float
        Overrides ``config.time``, in seconds when given as a number.

    Notes
    -----
    - Not thread-safe, it should be used within a single event loop.
    - A listener raising during a run is logged and ends that run.
    """

    __slots__ = (
        "_config",
        "_elements",
        "_listeners",
        "_started",
        "_task",
    )

    _kind = "timed_queue"

    def __init__(
        self,
        config: TimedQueueConfig | None = None,
        /,
        *,
        item_count: int | Missing = MISSING,
        every: timedelta | float | Missing = MISSING,
        time: timedelta | float | Missing = MISSING,
    ) -> None:
        super().__init__()
        overrides: dict[str, Any] = {}
        if item_count is not MISSING:
            overrides["item_count"] = item_count

        if every is not MISSING:
            overrides["every"] = _seconds(every)  # pyright: ignore[reportArgumentType]

        if time is not MISSING:
            overrides["time"] = _seconds(time)  # pyright: ignore[reportArgumentType]

        resolved: TimedQueueConfig = (config or TimedQueueConfig()).updated(**overrides)
        if not isinstance(resolved.item_count, int) or isinstance(resolved.item_count, bool):
            raise TypeError(
                "TimedQueue item_count must be an int,"
                f" received {type(resolved.item_count).__name__}"
            )

        if resolved.item_count < 1:
            raise ValueError(
                f"TimedQueue item_count must be positive, received {resolved.item_count}"
            )

        if resolved.every < 0 or resolved.time < 0:
            raise ValueError("TimedQueue delays can't be negative")

        self._config: TimedQueueConfig = resolved
        self._elements: list[Element] = []
        self._listeners: dict[str, list[Callable[..., Any]]] = {event: [] for event in _EVENTS}
        self._started: bool = False
        self._task: Task[None] | None = None

    @property
    def config(self) -> TimedQueueConfig:
        return self._config

    @property
    def item_count(self) -> int:
        return self._config.item_count

    @property
    def every(self) -> float:
        return self._config.every

    @property
    def time(self) -> float:
        return self._config.time

    @property
    def started(self) -> bool:
        return self._started

    # listeners

    def on(
        self,
        event: TimedQueueEvent,
        listener: Callable[..., Any],
    ) -> Self:
        self._listeners_of(event).append(listener)
        return self

    def off(
        self,
        event: TimedQueueEvent,
        listener: Callable[..., Any],
    ) -> Self:
        listeners: list[Callable[..., Any]] = self._listeners_of(event)
        if listener in listeners:
            listeners.remove(listener)

        return self

    def _listeners_of(
        self,
        event: str,
    ) -> list[Callable[..., Any]]:
        try:
            return self._listeners[event]

        except KeyError as exc:
            raise ValueError(
                f"Unknown TimedQueue event '{event}', expected one of: {', '.join(_EVENTS)}"
            ) from exc

    def _emit(
        self,
        event: TimedQueueEvent,
        *args: Any,
    ) -> None:
        for listener in tuple(self._listeners[event]):
            listener(*args)

    # elements

    def add(
        self,
        element: Element | list[Element],
    ) -> Self:
        """Append an element, or every element of a list, to the back."""
        self._ensure_mutable("add")
        if isinstance(element, list):
            self._elements.extend(element)  # pyright: ignore[reportUnknownArgumentType]

        else:
            self._elements.append(element)

        return self

    def remove(
        self,
        element: Element | int,
    ) -> bool:
        self._ensure_mutable("remove")
        return remove_item(self._elements, element)

    def clear(self) -> None:
        self._ensure_mutable("clear")
        self._elements.clear()

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._elements))

    @property
    def empty(self) -> bool:
        return not self._elements

    def to_list(self) -> list[Element]:
        return list(self._elements)

    # draining

    def start(self) -> Self:
        """
        Schedule a drain run on the running event loop.

        Raises
        ------
        RuntimeError
            If the queue has already started or there is no running event loop.
        """
        if self._started:
            raise RuntimeError("TimedQueue has already started")

        loop = get_running_loop()
        self._started = True
        try:
            self._emit("start")

        except BaseException:
            self._started = False
            raise

        self._task = loop.create_task(self._drain())
        _logger.debug(
            "TimedQueue started with %d element(s), first tick in %.3fs",
            len(self._elements),
            self._config.every,
        )
        return self

    def stop(self) -> Self:
        """
        Cancel the current drain run without notifying ``end``.

        Raises
        ------
        RuntimeError
            If the queue has not started.
        """
        if not self._started:
            raise RuntimeError("TimedQueue has not started")

        self._started = False
        if self._task is not None:
            self._task.cancel()
            self._task = None

        _logger.debug("TimedQueue stopped with %d element(s) left", len(self._elements))
        return self

    async def wait(self) -> None:
        """Wait until the current drain run ends, is stopped or fails."""
        if self._task is not None:
            await wait_tasks((self._task,))

    async def _drain(self) -> None:
        try:
            await sleep(self._config.every)
            while self._started and self._elements:
                payload: Element | list[Element]
                if self._config.item_count == 1:
                    payload = self._elements.pop(0)

                else:
                    payload = self._elements[: self._config.item_count]
                    del self._elements[: self._config.item_count]

                self._emit("tick", payload)
                await sleep(self._config.time)

            self._finish()
            _logger.debug("TimedQueue drained")
            self._emit("end")

        except Exception as exc:
            self._finish()
            _logger.error(
                "TimedQueue listener failed, draining stopped with %d element(s) left",
                len(self._elements),
                exc_info=exc,
            )

    def _finish(self) -> None:
        # a listener may have restarted the queue, leave the newer run alone
        if self._task is current_task():
            self._started = False
            self._task = None

    # freezing

    def freeze(self) -> Self:
        """Freeze the queue, stopping the drain run first when there is one."""
        if self._started:
            self.stop()

        return super().freeze()

    def unfreeze(self) -> Self:
        """Idle copy with the same configuration and elements, without listeners."""
        unfrozen: Self = self.__class__(self._config)
        unfrozen._elements.extend(self._elements)
        return unfrozen

    def __str__(self) -> str:
        return f"TimedQueue[{describe_kinds(self._elements)}]"

    def __repr__(self) -> str:
        state: str = "started" if self._started else "idle"
        if not self.mutable:
            state += ", frozen"

        return f"TimedQueue({self._elements!r}, {state})"
