from textvalue.utils import int32, mix_hash, string_hash


def test_string_hash_matches_reference_values() -> None:
    assert string_hash("") == 0
    assert string_hash("a") == 97
    assert string_hash("hello") == 99162322


def test_string_hash_uses_utf16_code_units() -> None:
    # U+1F600 is encoded as the surrogate pair D83D DE00
    assert string_hash("😀") == 0xD83D * 31 + 0xDE00


def test_string_hash_wraps_to_32_bits() -> None:
    result = string_hash("a" * 100)

    assert -(2**31) <= result < 2**31
    assert string_hash("polygenelubricants") == -(2**31)


def test_int32_wraps_both_ways() -> None:
    assert int32(2**31) == -(2**31)
    assert int32(2**32 + 5) == 5
    assert int32(-(2**31) - 1) == 2**31 - 1


def test_mix_hash_multiplies_by_33() -> None:
    assert mix_hash(5381, 0) == 5381 * 33
    assert mix_hash(5381, 10) == 5381 * 33 + 10
