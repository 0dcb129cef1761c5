"""Tests for the `sniffing` module."""

import codecs

import pytest

from CodeEncoding.sniffing import detect_encoding, sniff_encoding


# --- Byte order marks ---

@pytest.mark.parametrize(
    "data",
    [
        codecs.BOM_UTF8,
        codecs.BOM_UTF8 + b"plain ascii",
        codecs.BOM_UTF8 + b"\xe9\x20",  # Latin-1 after the mark is ignored
        codecs.BOM_UTF8 + b"\xff\xfe",
    ],
)
def test_utf8_bom_wins(data: bytes):
    assert sniff_encoding(data) == "utf-8"


def test_utf16le_bom():
    assert sniff_encoding(codecs.BOM_UTF16_LE) == "utf-16le"
    assert sniff_encoding(codecs.BOM_UTF16_LE + "héllo".encode("utf-16-le")) == "utf-16le"


def test_utf16be_bom():
    assert sniff_encoding(codecs.BOM_UTF16_BE + "hi".encode("utf-16-be")) == "utf-16be"


def test_partial_utf8_bom_is_not_a_bom():
    # EF BB without BF is a truncated three-byte sequence
    assert sniff_encoding(b"\xef\xbb") == "latin1"


# --- Structural UTF-8 scan ---

def test_empty_content_is_utf8():
    assert sniff_encoding(b"") == "utf-8"


@pytest.mark.parametrize("data", [b"hello world", bytes(range(0x80)), b"\x00\x01\x7f", b"line1\r\nline2\n"])
def test_ascii_only_is_utf8(data: bytes):
    assert sniff_encoding(data) == "utf-8"


@pytest.mark.parametrize(
    "text",
    [
        "é",          # two-byte sequence
        "café",
        "€ 100",      # three-byte sequence
        "日本語",
        "😀 smile",   # four-byte sequence
        "mixed é € 😀 text",
    ],
)
def test_well_formed_utf8_is_utf8(text: str):
    assert sniff_encoding(text.encode("utf-8")) == "utf-8"


def test_two_byte_sequence():
    assert sniff_encoding(bytes([0xC3, 0xA9])) == "utf-8"


def test_lone_latin1_e_acute_followed_by_space():
    assert sniff_encoding(bytes([0xE9, 0x20])) == "latin1"


@pytest.mark.parametrize(
    "data",
    [
        "héllo wörld".encode("latin-1"),
        b"caf\xe9",
        b"\xc3\x28",          # lead byte followed by ASCII
        b"\xe2\x28\xa1",      # second byte of a three-byte sequence is invalid
        b"\xe2\x82\x28",      # third byte of a three-byte sequence is invalid
        b"\xf0\x9f\x98\x28",  # last byte of a four-byte sequence is invalid
    ],
)
def test_invalid_sequences_are_latin1(data: bytes):
    assert sniff_encoding(data) == "latin1"


@pytest.mark.parametrize("data", [b"\x80", b"abc\xbfdef", "é".encode("utf-8")[1:] + b"x"])
def test_continuation_byte_without_lead_is_latin1(data: bytes):
    assert sniff_encoding(data) == "latin1"


@pytest.mark.parametrize("lead", [0xF8, 0xFB, 0xFC, 0xFE, 0xFF])
def test_lead_bytes_above_f7_are_latin1(lead: int):
    assert sniff_encoding(bytes([0x41, lead, 0x80, 0x80, 0x80, 0x80])) == "latin1"


@pytest.mark.parametrize(
    "data",
    [
        b"abc\xc3",          # two-byte lead at the end
        b"abc\xe2\x82",      # three-byte lead with one byte left
        b"abc\xf0\x9f\x98",  # four-byte lead with two bytes left
    ],
)
def test_sequence_running_past_the_end_is_latin1(data: bytes):
    assert sniff_encoding(data) == "latin1"


def test_c0_c1_leads_with_continuation_are_accepted():
    # Overlong forms are not rejected by the structural scan
    assert sniff_encoding(b"\xc0\x80") == "utf-8"
    assert sniff_encoding(b"\xc1\xbf") == "utf-8"


def test_multibyte_sequence_is_consumed_as_a_unit():
    # A9 would be a stray continuation byte if it were examined on its own
    assert sniff_encoding(b"\xc3\xa9\xc3\xa9") == "utf-8"


def test_invalid_sequence_after_valid_utf8_is_latin1():
    assert sniff_encoding("é".encode("utf-8") + b" and \xe9 ") == "latin1"


# --- Purity ---

def test_input_is_not_modified():
    data = bytearray(b"caf\xe9 \xc3\xa9")
    snapshot = bytes(data)
    first = sniff_encoding(data)
    second = sniff_encoding(data)
    assert first == second == "latin1"
    assert bytes(data) == snapshot


def test_detect_encoding_alias():
    assert detect_encoding is sniff_encoding
