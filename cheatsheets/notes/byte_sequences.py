"""
Cheat sheet for `bytes`, `bytearray` and `memoryview`.
`bytes` is an immutable sequence of ints in range(256); `bytearray` is its mutable counterpart.
"""

from __future__ import annotations

from cheatsheets.notes.base import NoteCheck, expect_equal, expect_raises

TOPIC = "byte_sequences"


def utf8_round_trip(text: str) -> tuple[bytes, str]:
    encoded = text.encode("utf-8")
    return encoded, encoded.decode("utf-8")


def lenient_decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def to_hex(data: bytes) -> str:
    return data.hex()


def from_hex(text: str) -> bytes:
    return bytes.fromhex(text)


def pack_uint(value: int, length: int, byteorder: str = "big") -> bytes:
    return value.to_bytes(length, byteorder)  # type: ignore[arg-type]


def unpack_uint(data: bytes, byteorder: str = "big") -> int:
    return int.from_bytes(data, byteorder)  # type: ignore[arg-type]


def collect_checks() -> list[NoteCheck]:
    data = b"abc"

    buffer = bytearray(b"abc")
    buffer[0] = ord("z")
    buffer.extend(b"!")

    backing = bytearray(b"hello")
    view = memoryview(backing)
    view[0] = ord("j")

    encoded, decoded = utf8_round_trip("é")

    return [
        expect_equal(TOPIC, "indexing_bytes_yields_int", data[0], 97),
        expect_equal(TOPIC, "slicing_bytes_yields_bytes", data[:1], b"a"),
        expect_raises(TOPIC, "bytes_item_assignment_raises", lambda: _assign_first_byte(data), TypeError),
        expect_equal(TOPIC, "bytearray_is_mutable", bytes(buffer), b"zbc!"),
        expect_raises(TOPIC, "byte_values_limited_to_0_255", lambda: bytes([256]), ValueError),
        expect_equal(TOPIC, "bytes_from_int_is_zero_filled", bytes(3), b"\x00\x00\x00"),
        expect_equal(TOPIC, "utf8_encoding_is_multibyte", (encoded, len(encoded)), (b"\xc3\xa9", 2)),
        expect_equal(TOPIC, "utf8_decode_restores_text", decoded, "é"),
        expect_raises(TOPIC, "invalid_utf8_raises", lambda: b"\xff".decode("utf-8"), UnicodeDecodeError),
        expect_equal(TOPIC, "errors_replace_substitutes_marker", lenient_decode(b"a\xffb"), "a\ufffdb"),
        expect_raises(TOPIC, "bytes_and_str_do_not_concatenate", lambda: b"a" + "b", TypeError),  # type: ignore[operator]
        expect_equal(TOPIC, "bytes_never_equal_str", b"a" == "a", False),  # type: ignore[comparison-overlap]
        expect_equal(TOPIC, "hex_encoding", to_hex(b"\x00\xff\x10"), "00ff10"),
        expect_equal(TOPIC, "fromhex_ignores_spaces", from_hex("de ad be ef"), b"\xde\xad\xbe\xef"),
        expect_equal(TOPIC, "to_bytes_big_endian", pack_uint(1024, 2), b"\x04\x00"),
        expect_equal(TOPIC, "to_bytes_little_endian", pack_uint(1024, 2, "little"), b"\x00\x04"),
        expect_equal(TOPIC, "from_bytes_big_endian", unpack_uint(b"\x04\x00"), 1024),
        expect_raises(TOPIC, "to_bytes_overflow_raises", lambda: pack_uint(256, 1), OverflowError),
        expect_equal(TOPIC, "memoryview_writes_through", bytes(backing), b"jello"),
        expect_equal(TOPIC, "bytes_methods_mirror_str", (b"a,b".split(b","), b"  x ".strip(), b"ab".upper()), ([b"a", b"b"], b"x", b"AB")),
        expect_equal(TOPIC, "iterating_bytes_yields_ints", list(b"AB"), [65, 66]),
    ]


def _assign_first_byte(data: bytes) -> None:
    data[0] = 1  # type: ignore[index]
