from textvalue.errors import IllegalState, InvalidArgument
from textvalue.types import MISSING, Immutable, Missing, is_missing, not_missing
from textvalue.utils import getenv_bool, getenv_str, setup_logging
from textvalue.value import ImmutableB, ImmutableBBuilder, Textual

__all__ = (
    "MISSING",
    "IllegalState",
    "Immutable",
    "ImmutableB",
    "ImmutableBBuilder",
    "InvalidArgument",
    "Missing",
    "Textual",
    "getenv_bool",
    "getenv_str",
    "is_missing",
    "not_missing",
    "setup_logging",
)
