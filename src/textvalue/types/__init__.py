from textvalue.types.immutable import Immutable
from textvalue.types.missing import MISSING, Missing, is_missing, not_missing

__all__ = (
    "MISSING",
    "Immutable",
    "Missing",
    "is_missing",
    "not_missing",
)
