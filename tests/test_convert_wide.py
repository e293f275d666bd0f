import struct

import pytest

from fsnotice.convert_wide import (
    utf16_from_ansi,
    utf16_from_latin1,
    utf16_from_wide,
    utf16_to_ansi,
    utf16_to_latin1,
    utf16_to_utf8,
    utf16_to_utf16,
    utf16_to_utf32,
    utf16_to_wide,
    utf32_from_ansi,
    utf32_from_latin1,
    utf32_from_wide,
    utf32_to_ansi,
    utf32_to_latin1,
    utf32_to_utf8,
    utf32_to_utf16,
    utf32_to_utf32,
    utf32_to_wide,
)

SAMPLE = "héllo wörld \u20ac \U0001f600 \u4e2d"


def _utf16_units(text):
    raw = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def _codepoints(text):
    return [ord(c) for c in text]


def test_utf16_from_wide_matches_codec():
    assert utf16_from_wide(SAMPLE) == _utf16_units(SAMPLE)


def test_utf16_from_wide_accepts_ints():
    assert utf16_from_wide(_codepoints(SAMPLE)) == _utf16_units(SAMPLE)


def test_utf16_surrogate_pair_pinned():
    assert utf16_from_wide("\U0001f600") == [0xD83D, 0xDE00]


def test_utf16_from_ansi_latin1_encoding():
    data = "café".encode("latin-1")
    assert utf16_from_ansi(data, "latin-1") == _codepoints("café")


def test_utf16_from_latin1_copies_bytes():
    data = bytes(range(256))
    assert utf16_from_latin1(data) == list(range(256))


def test_utf16_to_utf8_matches_codec():
    assert utf16_to_utf8(_utf16_units(SAMPLE)) == SAMPLE.encode("utf-8")


def test_utf16_to_utf32_matches_codepoints():
    assert utf16_to_utf32(_utf16_units(SAMPLE)) == _codepoints(SAMPLE)


def test_utf16_to_utf16_is_copy():
    units = _utf16_units(SAMPLE)
    result = utf16_to_utf16(units)
    assert result == units
    result.append(1)
    assert len(units) == len(result) - 1


def test_utf16_incomplete_surrogate_at_end():
    assert utf16_to_utf32([0x41, 0xD800]) == [0x41, 0]


def test_utf16_invalid_low_surrogate_consumes_both():
    assert utf16_to_utf32([0xD800, 0x41, 0x42]) == [0, 0x42]


def test_utf16_to_wide_four_bytes():
    assert utf16_to_wide(_utf16_units(SAMPLE)) == _codepoints(SAMPLE)


def test_utf16_to_wide_two_bytes_replaces_astral():
    units = _utf16_units("a\U0001f600b")
    assert utf16_to_wide(units, ord("?"), 2) == _codepoints("a?b")
    assert utf16_to_wide(units, 0, 2) == _codepoints("ab")


def test_utf16_to_wide_bad_size():
    with pytest.raises(ValueError):
        utf16_to_wide([0x41], 0, 3)


def test_utf16_to_latin1_unit_by_unit():
    units = _utf16_units("Aé\u20ac")
    assert utf16_to_latin1(units, ord("?")) == "Aé?".encode("latin-1")


def test_utf16_to_ansi_ascii():
    units = _utf16_units("Ab\u00e9")
    assert utf16_to_ansi(units, ord("?"), "ascii") == b"Ab?"


def test_utf16_ansi_round_trip_latin1():
    text = "naïve café"
    units = utf16_from_ansi(text.encode("latin-1"), "latin-1")
    assert utf16_to_ansi(units, ord("?"), "latin-1") == text.encode("latin-1")


def test_utf32_from_wide_str_and_ints():
    assert utf32_from_wide(SAMPLE) == _codepoints(SAMPLE)
    assert utf32_from_wide(_codepoints(SAMPLE)) == _codepoints(SAMPLE)


def test_utf32_from_ansi_latin1_encoding():
    data = "ñandú".encode("latin-1")
    assert utf32_from_ansi(data, "latin-1") == _codepoints("ñandú")


def test_utf32_from_latin1_copies():
    data = "Grüße".encode("latin-1")
    assert utf32_from_latin1(data) == _codepoints("Grüße")


def test_utf32_to_utf8_matches_codec():
    assert utf32_to_utf8(_codepoints(SAMPLE)) == SAMPLE.encode("utf-8")


def test_utf32_to_utf8_drops_invalid():
    assert utf32_to_utf8([0x41, 0x110000, 0x42]) == b"AB"


def test_utf32_to_utf16_matches_codec():
    assert utf32_to_utf16(_codepoints(SAMPLE)) == _utf16_units(SAMPLE)


def test_utf32_to_utf16_drops_surrogates():
    assert utf32_to_utf16([0x41, 0xD800, 0xDFFF, 0x42]) == [0x41, 0x42]


def test_utf32_utf16_round_trip():
    cps = _codepoints(SAMPLE)
    assert utf16_to_utf32(utf32_to_utf16(cps)) == cps


def test_utf32_to_utf32_is_copy():
    cps = _codepoints(SAMPLE)
    assert utf32_to_utf32(cps) == cps
    assert utf32_to_utf32(cps) is not cps


def test_utf32_to_latin1():
    cps = _codepoints("Aé\u20ac")
    assert utf32_to_latin1(cps, ord("*")) == "Aé*".encode("latin-1")


def test_utf32_to_ansi_ascii():
    assert utf32_to_ansi(_codepoints("Aé"), ord("?"), "ascii") == b"A?"


def test_utf32_to_wide_two_bytes():
    cps = _codepoints("x\U0001f600y")
    assert utf32_to_wide(cps, ord("#"), 2) == _codepoints("x#y")
    assert utf32_to_wide(cps) == cps


def test_utf32_to_wide_bad_size():
    with pytest.raises(ValueError):
        utf32_to_wide([0x41], 0, 8)


def test_empty_inputs():
    assert utf16_to_utf32([]) == []
    assert utf16_to_utf8([]) == b""
    assert utf32_to_utf16([]) == []
    assert utf32_to_ansi([]) == b""