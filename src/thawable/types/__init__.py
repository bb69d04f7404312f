from thawable.types.immutable import Immutable
from thawable.types.missing import MISSING, Missing

__all__ = (
    "MISSING",
    "Immutable",
    "Missing",
)
