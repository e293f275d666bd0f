"""Single-character decoding and encoding for UTF-8, UTF-16 and UTF-32.

Sequences are handled as indexable sequences of code units: ``bytes`` (or
any sequence of ints) for UTF-8, and sequences of ints for UTF-16 and
UTF-32. ``decode`` returns the decoded codepoint together with the index
just past the units it consumed.
"""

from __future__ import annotations

import locale
from collections.abc import Sequence

__all__ = ["INVALID_CODEPOINT", "Utf8", "Utf16", "Utf32"]

# Value produced when a narrow character cannot be widened (WEOF).
INVALID_CODEPOINT = 0xFFFFFFFF

_UINT32 = 0xFFFFFFFF

_UTF8_OFFSETS = (
    0x00000000,
    0x00003080,
    0x000E2080,
    0x03C82080,
    0xFA082080,
    0x82082080,
)

_UTF8_FIRST_BYTES = (0x00, 0x00, 0xC0, 0xE0, 0xF0, 0xF8, 0xFC)


def _check_start(data: Sequence[int], start: int) -> None:
    if not 0 <= start < len(data):
        raise IndexError(f"start index {start} outside a sequence of length {len(data)}")


def _trailing_bytes(lead: int) -> int:
    """Number of continuation bytes announced by a UTF-8 lead byte."""
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 1
    if lead < 0xF0:
        return 2
    if lead < 0xF8:
        return 3
    if lead < 0xFC:
        return 4
    return 5


def _default_encoding(encoding: str | None) -> str:
    return encoding if encoding is not None else locale.getpreferredencoding(False)


def _count(decoder, data: Sequence[int]) -> int:
    length = 0
    index = 0
    end = len(data)
    while index < end:
        index = decoder.next(data, index)
        length += 1
    return length


class Utf8:
    """Decoding and encoding of single UTF-8 characters."""

    @staticmethod
    def decode(data: Sequence[int], start: int = 0, replacement: int = 0) -> tuple[int, int]:
        """Decode the character at *start*; return ``(codepoint, next_index)``.

        An incomplete trailing sequence yields *replacement* and consumes the
        rest of the input.
        """
        _check_start(data, start)
        end = len(data)
        trailing = _trailing_bytes(data[start] & 0xFF)
        if start + trailing >= end:
            return replacement, end
        value = 0
        for unit in data[start:start + trailing + 1]:
            value = (value << 6) + (unit & 0xFF)
        return (value - _UTF8_OFFSETS[trailing]) & _UINT32, start + trailing + 1

    @staticmethod
    def encode(codepoint: int, replacement: int = 0) -> bytes:
        """Encode *codepoint*; invalid ones give *replacement* or nothing if it is 0."""
        if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDBFF:
            return bytes([replacement]) if replacement else b""
        if codepoint < 0x80:
            size = 1
        elif codepoint < 0x800:
            size = 2
        elif codepoint < 0x10000:
            size = 3
        else:
            size = 4
        out = bytearray(size)
        value = codepoint
        for pos in range(size - 1, 0, -1):
            out[pos] = (value | 0x80) & 0xBF
            value >>= 6
        out[0] = (value | _UTF8_FIRST_BYTES[size]) & 0xFF
        return bytes(out)

    @staticmethod
    def next(data: Sequence[int], start: int = 0) -> int:
        """Return the index of the character following the one at *start*."""
        return Utf8.decode(data, start)[1]

    @staticmethod
    def count(data: Sequence[int]) -> int:
        """Return the number of characters in *data*."""
        return _count(Utf8, data)


class Utf16:
    """Decoding and encoding of single UTF-16 characters."""

    @staticmethod
    def decode(data: Sequence[int], start: int = 0, replacement: int = 0) -> tuple[int, int]:
        """Decode the character at *start*; return ``(codepoint, next_index)``."""
        _check_start(data, start)
        first = data[start] & 0xFFFF
        index = start + 1
        if not 0xD800 <= first <= 0xDBFF:
            return first, index
        if index >= len(data):
            return replacement, len(data)
        second = data[index]
        index += 1
        if 0xDC00 <= second <= 0xDFFF:
            return ((first - 0xD800) << 10) + (second - 0xDC00) + 0x10000, index
        return replacement, index

    @staticmethod
    def encode(codepoint: int, replacement: int = 0) -> list[int]:
        """Encode *codepoint* as one or two units; invalid ones give *replacement*."""
        fallback = [replacement & 0xFFFF] if replacement else []
        if codepoint < 0x10000:
            if 0xD800 <= codepoint <= 0xDFFF:
                return fallback
            return [codepoint]
        if codepoint > 0x10FFFF:
            return fallback
        value = codepoint - 0x10000
        return [(value >> 10) + 0xD800, (value & 0x3FF) + 0xDC00]

    @staticmethod
    def next(data: Sequence[int], start: int = 0) -> int:
        """Return the index of the character following the one at *start*."""
        return Utf16.decode(data, start)[1]

    @staticmethod
    def count(data: Sequence[int]) -> int:
        """Return the number of characters in *data*."""
        return _count(Utf16, data)


class Utf32:
    """UTF-32 units, plus conversion of single narrow and wide characters."""

    @staticmethod
    def decode(data: Sequence[int], start: int = 0, replacement: int = 0) -> tuple[int, int]:
        """Return ``(data[start], start + 1)``; *replacement* is never needed."""
        _check_start(data, start)
        return data[start], start + 1

    @staticmethod
    def encode(codepoint: int, replacement: int = 0) -> list[int]:
        """Return the single unit holding *codepoint*."""
        return [codepoint]

    @staticmethod
    def next(data: Sequence[int], start: int = 0) -> int:
        """Return the index following *start*."""
        return start + 1

    @staticmethod
    def count(data: Sequence[int]) -> int:
        """Return the number of characters in *data*."""
        return len(data)

    @staticmethod
    def decode_ansi(char: int | bytes, encoding: str | None = None) -> int:
        """Widen one narrow character in *encoding* (the locale's by default).

        Returns INVALID_CODEPOINT when the byte is not a character by itself.
        """
        raw = bytes([char & 0xFF]) if isinstance(char, int) else bytes(char)
        if len(raw) != 1:
            raise ValueError("decode_ansi takes exactly one narrow character")
        try:
            text = raw.decode(_default_encoding(encoding))
        except UnicodeDecodeError:
            return INVALID_CODEPOINT
        return ord(text) if len(text) == 1 else INVALID_CODEPOINT

    @staticmethod
    def decode_wide(char: int | str) -> int:
        """Return the codepoint of one wide character."""
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError("decode_wide takes exactly one character")
            return ord(char)
        return char

    @staticmethod
    def encode_ansi(codepoint: int, replacement: int = 0, encoding: str | None = None) -> bytes:
        """Narrow *codepoint* to one byte in *encoding*, or to *replacement*."""
        fallback = bytes([replacement & 0xFF])
        if not 0 <= codepoint <= 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            return fallback
        try:
            encoded = chr(codepoint).encode(_default_encoding(encoding))
        except UnicodeEncodeError:
            return fallback
        return encoded if len(encoded) == 1 else fallback

    @staticmethod
    def encode_wide(codepoint: int, replacement: int = 0, wide_size: int = 4) -> list[int]:
        """Encode *codepoint* as a wide character of *wide_size* bytes (2 or 4).

        Two-byte wide characters cannot hold surrogates or codepoints above
        0xFFFF; those give *replacement*, or nothing if it is 0.
        """
        if wide_size == 4:
            return [codepoint]
        if wide_size != 2:
            raise ValueError(f"unsupported wide character size: {wide_size}")
        if codepoint <= 0xFFFF and not 0xD800 <= codepoint <= 0xDFFF:
            return [codepoint]
        return [replacement] if replacement else []