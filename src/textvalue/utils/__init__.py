from textvalue.utils.env import getenv_bool, getenv_str
from textvalue.utils.hashing import int32, mix_hash, string_hash
from textvalue.utils.logs import setup_logging

__all__ = (
    "getenv_bool",
    "getenv_str",
    "int32",
    "mix_hash",
    "setup_logging",
    "string_hash",
)
