"""Conversions from and to UTF-16 code units and UTF-32 codepoints."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from fsnotice.codepoints import Utf8, Utf16, Utf32

__all__ = [
    "utf16_from_ansi",
    "utf16_from_wide",
    "utf16_from_latin1",
    "utf16_to_ansi",
    "utf16_to_wide",
    "utf16_to_latin1",
    "utf16_to_utf8",
    "utf16_to_utf16",
    "utf16_to_utf32",
    "utf32_from_ansi",
    "utf32_from_wide",
    "utf32_from_latin1",
    "utf32_to_ansi",
    "utf32_to_wide",
    "utf32_to_latin1",
    "utf32_to_utf8",
    "utf32_to_utf16",
    "utf32_to_utf32",
]


def _utf16_codepoints(units: Sequence[int]) -> Iterator[int]:
    """Yield the codepoints of a UTF-16 sequence.

    A broken surrogate pair yields 0 in place of the character.
    """
    index = 0
    end = len(units)
    while index < end:
        codepoint, index = Utf16.decode(units, index)
        yield codepoint


def _to_utf16(codepoints: Iterable[int]) -> list[int]:
    out: list[int] = []
    for codepoint in codepoints:
        out.extend(Utf16.encode(codepoint))
    return out


def _to_wide(codepoints: Iterable[int], replacement: int, wide_size: int) -> list[int]:
    out: list[int] = []
    for codepoint in codepoints:
        out.extend(Utf32.encode_wide(codepoint, replacement, wide_size))
    return out


def _to_latin1(values: Iterable[int], replacement: int) -> bytes:
    fallback = replacement & 0xFF
    return bytes(value if value < 256 else fallback for value in values)


# UTF-16


def utf16_from_ansi(data: Iterable[int], encoding: str | None = None) -> list[int]:
    """Convert narrow characters in *encoding* (the locale's by default) to UTF-16."""
    return _to_utf16(Utf32.decode_ansi(char, encoding) for char in data)


def utf16_from_wide(chars: Iterable[int | str]) -> list[int]:
    """Convert wide characters (a ``str`` or codepoint ints) to UTF-16."""
    return _to_utf16(Utf32.decode_wide(char) for char in chars)


def utf16_from_latin1(data: Iterable[int]) -> list[int]:
    """Convert Latin-1 bytes to UTF-16 units; each byte becomes one unit."""
    return list(data)


def utf16_to_ansi(units: Sequence[int], replacement: int = 0, encoding: str | None = None) -> bytes:
    """Convert UTF-16 to narrow characters; unconvertible ones become *replacement*."""
    return b"".join(
        Utf32.encode_ansi(codepoint, replacement, encoding)
        for codepoint in _utf16_codepoints(units)
    )


def utf16_to_wide(units: Sequence[int], replacement: int = 0, wide_size: int = 4) -> list[int]:
    """Convert UTF-16 to wide characters of *wide_size* bytes (2 or 4)."""
    return _to_wide(_utf16_codepoints(units), replacement, wide_size)


def utf16_to_latin1(units: Iterable[int], replacement: int = 0) -> bytes:
    """Convert UTF-16 units to Latin-1 unit by unit; units above 0xFF become *replacement*."""
    return _to_latin1(units, replacement)


def utf16_to_utf8(units: Sequence[int]) -> bytes:
    """Convert UTF-16 units to UTF-8 bytes."""
    return b"".join(Utf8.encode(codepoint) for codepoint in _utf16_codepoints(units))


def utf16_to_utf16(units: Iterable[int]) -> list[int]:
    """Return a copy of the UTF-16 units."""
    return list(units)


def utf16_to_utf32(units: Sequence[int]) -> list[int]:
    """Convert UTF-16 units to codepoints."""
    return list(_utf16_codepoints(units))


# UTF-32


def utf32_from_ansi(data: Iterable[int], encoding: str | None = None) -> list[int]:
    """Convert narrow characters in *encoding* (the locale's by default) to codepoints."""
    return [Utf32.decode_ansi(char, encoding) for char in data]


def utf32_from_wide(chars: Iterable[int | str]) -> list[int]:
    """Convert wide characters (a ``str`` or codepoint ints) to codepoints."""
    return [Utf32.decode_wide(char) for char in chars]


def utf32_from_latin1(data: Iterable[int]) -> list[int]:
    """Convert Latin-1 bytes to codepoints."""
    return list(data)


def utf32_to_ansi(
    codepoints: Iterable[int], replacement: int = 0, encoding: str | None = None
) -> bytes:
    """Convert codepoints to narrow characters; unconvertible ones become *replacement*."""
    return b"".join(
        Utf32.encode_ansi(codepoint, replacement, encoding) for codepoint in codepoints
    )


def utf32_to_wide(codepoints: Iterable[int], replacement: int = 0, wide_size: int = 4) -> list[int]:
    """Convert codepoints to wide characters of *wide_size* bytes (2 or 4)."""
    return _to_wide(codepoints, replacement, wide_size)


def utf32_to_latin1(codepoints: Iterable[int], replacement: int = 0) -> bytes:
    """Convert codepoints to Latin-1; those above 0xFF become *replacement*."""
    return _to_latin1(codepoints, replacement)


def utf32_to_utf8(codepoints: Iterable[int]) -> bytes:
    """Convert codepoints to UTF-8; invalid codepoints are dropped."""
    return b"".join(Utf8.encode(codepoint) for codepoint in codepoints)


def utf32_to_utf16(codepoints: Iterable[int]) -> list[int]:
    """Convert codepoints to UTF-16 units; invalid codepoints are dropped."""
    return _to_utf16(codepoints)


def utf32_to_utf32(codepoints: Iterable[int]) -> list[int]:
    """Return a copy of the codepoints."""
    return list(codepoints)