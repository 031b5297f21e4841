from typing import Any, Final

__all__ = (
    "HASH_SEED",
    "int32",
    "mix_hash",
    "string_hash",
    "value_hash",
)

HASH_SEED: Final[int] = 5381


def int32(value: int, /) -> int:
    """Wrap an arbitrary int to the signed 32-bit range."""
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def string_hash(text: str, /) -> int:
    """
    Compute the polynomial string hash `s[0]*31^(n-1) + ... + s[n-1]`.

    The sum runs over UTF-16 code units and wraps to signed 32 bits, which
    makes the result independent of PYTHONHASHSEED and of the interpreter run.
    """
    encoded: bytes = text.encode("utf-16-be", "surrogatepass")
    result: int = 0
    for idx in range(0, len(encoded), 2):
        result = (31 * result + ((encoded[idx] << 8) | encoded[idx + 1])) & 0xFFFFFFFF

    return int32(result)


def value_hash(value: Any, /) -> int:
    if isinstance(value, str):
        return string_hash(value)

    return int32(hash(value))


def mix_hash(
    current: int,
    value: int,
    /,
) -> int:
    return int32(current + (current << 5) + value)
