from thawable.collection import Collection
from thawable.dictionary import Dictionary
from thawable.errors import ContainerKind, ImmutabilityError, MergeConflictError
from thawable.freezable import Freezable
from thawable.pair import Pair
from thawable.queue import Queue
from thawable.timed_queue import TimedQueue, TimedQueueConfig, TimedQueueEvent
from thawable.types import MISSING, Immutable, Missing
from thawable.utils import (
    deprecate,
    deprecated,
    describe_kinds,
    getenv_float,
    getenv_int,
    is_iterable_like,
    is_mapping_like,
    is_sequence_like,
    kind_of,
    remove_item,
    set_deprecation_logger,
)

__all__ = (
    "MISSING",
    "Collection",
    "ContainerKind",
    "Dictionary",
    "Freezable",
    "Immutable",
    "ImmutabilityError",
    "MergeConflictError",
    "Missing",
    "Pair",
    "Queue",
    "TimedQueue",
    "TimedQueueConfig",
    "TimedQueueEvent",
    "deprecate",
    "deprecated",
    "describe_kinds",
    "getenv_float",
    "getenv_int",
    "is_iterable_like",
    "is_mapping_like",
    "is_sequence_like",
    "kind_of",
    "remove_item",
    "set_deprecation_logger",
)
