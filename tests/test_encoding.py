import pytest

from comment_parser.encoding import LATIN1_UMLAUTS, reencode, reencode_byte


def test_ascii_passes_through():
    assert reencode_byte(65) == b"\x41"
    assert reencode_byte(0x0A) == b"\n"


def test_latin1_umlaut_becomes_utf8():
    assert reencode_byte(228) == b"\xc3\xa4"
    assert reencode_byte(196) == b"\xc3\x84"
    assert reencode_byte(223) == b"\xc3\x9f"


def test_all_german_diacritics_match_real_utf8():
    for ch in LATIN1_UMLAUTS:
        assert reencode_byte(ch) == bytes([ch]).decode("latin-1").encode("utf-8")


def test_utf8_lead_byte_is_not_touched():
    assert reencode_byte(0xC3) == b"\xc3"


def test_other_latin1_letters_are_not_converted():
    # é (233) nie należy do heurystyki
    assert reencode_byte(233) == b"\xe9"


def test_reencode_keeps_existing_utf8():
    text = "Größe ändern".encode("utf-8")
    assert reencode(text) == text


def test_reencode_converts_latin1_text():
    assert reencode("Grüße".encode("latin-1")) == "Grüße".encode("utf-8")


def test_byte_value_out_of_range():
    with pytest.raises(ValueError):
        reencode_byte(256)
