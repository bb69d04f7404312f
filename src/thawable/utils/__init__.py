from thawable.utils.arrays import remove_item
from thawable.utils.checks import is_iterable_like, is_mapping_like, is_sequence_like
from thawable.utils.deprecation import deprecate, deprecated, set_deprecation_logger
from thawable.utils.env import getenv_float, getenv_int
from thawable.utils.kinds import describe_kinds, kind_of

__all__ = (
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
