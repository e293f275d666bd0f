"""Conversions between UTF-8 byte strings and other character encodings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from fsnotice.codepoints import Utf8, Utf16, Utf32

__all__ = [
    "utf8_from_ansi",
    "utf8_from_wide",
    "utf8_from_latin1",
    "utf8_to_ansi",
    "utf8_to_wide",
    "utf8_to_latin1",
    "utf8_to_utf8",
    "utf8_to_utf16",
    "utf8_to_utf32",
]


def _codepoints(data: Sequence[int]) -> Iterator[int]:
    """Yield the codepoints of a UTF-8 sequence.

    An incomplete trailing character yields 0 and ends the sequence.
    """
    index = 0
    end = len(data)
    while index < end:
        codepoint, index = Utf8.decode(data, index)
        yield codepoint


def utf8_from_ansi(data: Iterable[int], encoding: str | None = None) -> bytes:
    """Convert narrow characters in *encoding* (the locale's by default) to UTF-8.

    Bytes that are not characters by themselves are dropped.
    """
    return b"".join(Utf8.encode(Utf32.decode_ansi(char, encoding)) for char in data)


def utf8_from_wide(chars: Iterable[int | str]) -> bytes:
    """Convert wide characters (a ``str`` or codepoint ints) to UTF-8."""
    return b"".join(Utf8.encode(Utf32.decode_wide(char)) for char in chars)


def utf8_from_latin1(data: Iterable[int]) -> bytes:
    """Convert Latin-1 bytes to UTF-8."""
    return b"".join(Utf8.encode(byte) for byte in data)


def utf8_to_ansi(data: Sequence[int], replacement: int = 0, encoding: str | None = None) -> bytes:
    """Convert UTF-8 to narrow characters in *encoding*.

    Characters that have no single-byte form become *replacement*.
    """
    return b"".join(
        Utf32.encode_ansi(codepoint, replacement, encoding) for codepoint in _codepoints(data)
    )


def utf8_to_wide(data: Sequence[int], replacement: int = 0, wide_size: int = 4) -> list[int]:
    """Convert UTF-8 to wide characters of *wide_size* bytes (2 or 4).

    Characters a two-byte wide character cannot hold become *replacement*,
    or are dropped when it is 0.
    """
    out: list[int] = []
    for codepoint in _codepoints(data):
        out.extend(Utf32.encode_wide(codepoint, replacement, wide_size))
    return out


def utf8_to_latin1(data: Sequence[int], replacement: int = 0) -> bytes:
    """Convert UTF-8 to Latin-1; characters above 0xFF become *replacement*."""
    fallback = replacement & 0xFF
    return bytes(codepoint if codepoint < 256 else fallback for codepoint in _codepoints(data))


def utf8_to_utf8(data: Iterable[int]) -> bytes:
    """Return a copy of the UTF-8 units in *data*."""
    return bytes(data)


def utf8_to_utf16(data: Sequence[int]) -> list[int]:
    """Convert UTF-8 to a list of UTF-16 code units."""
    out: list[int] = []
    for codepoint in _codepoints(data):
        out.extend(Utf16.encode(codepoint))
    return out


def utf8_to_utf32(data: Sequence[int]) -> list[int]:
    """Convert UTF-8 to a list of codepoints."""
    return list(_codepoints(data))