# src/CodeEncoding/sniffing.py
"""Infer the encoding of raw content from byte order marks and UTF-8 structure."""

import codecs
import logging
from typing import Tuple

logger = logging.getLogger(__name__)

UTF8 = "utf-8"
UTF16_LE = "utf-16le"
UTF16_BE = "utf-16be"
LATIN1 = "latin1"


def _is_continuation(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def _scan_utf8_structure(data: bytes) -> Tuple[bool, bool]:
    """
    Walk `data` once, checking it against the structure of UTF-8.

    A well-formed multi-byte sequence is consumed as one unit. A lead byte
    whose continuation bytes would run past the end of `data` is treated like
    any other invalid lead byte. The scan stops at the first invalid sequence.

    Returns
    -------
    Tuple[bool, bool]
        Whether a byte above 0x7F was seen, and whether an invalid sequence was seen.
    """
    has_high_bit_chars = False
    length = len(data)
    i = 0
    while i < length:
        byte = data[i]
        if byte <= 0x7F:
            i += 1
            continue

        has_high_bit_chars = True
        if 0xC0 <= byte <= 0xDF and i + 1 < length:
            trailing = 1
        elif 0xE0 <= byte <= 0xEF and i + 2 < length:
            trailing = 2
        elif 0xF0 <= byte <= 0xF7 and i + 3 < length:
            trailing = 3
        else:
            # Stray continuation byte, 0xF8-0xFF, or a truncated sequence
            return has_high_bit_chars, True

        for offset in range(1, trailing + 1):
            if not _is_continuation(data[i + offset]):
                return has_high_bit_chars, True
        i += trailing + 1

    return has_high_bit_chars, False


def sniff_encoding(data: bytes) -> str:
    """
    Attempt to detect the encoding of content by examining its bytes.

    A byte order mark wins. Otherwise content with high-bit bytes that are not
    well-formed UTF-8 is taken to be Latin-1, and everything else is UTF-8.

    Parameters
    ----------
    data : bytes
        The raw content. It is never modified.

    Returns
    -------
    str
        One of ``"utf-8"``, ``"utf-16le"``, ``"utf-16be"`` or ``"latin1"``.
    """
    data = bytes(data)

    if data.startswith(codecs.BOM_UTF8):
        return UTF8
    if data.startswith(codecs.BOM_UTF16_LE):
        return UTF16_LE
    if data.startswith(codecs.BOM_UTF16_BE):
        return UTF16_BE

    has_high_bit_chars, has_invalid_sequences = _scan_utf8_structure(data)
    if has_high_bit_chars and has_invalid_sequences:
        logger.debug("Content of %d bytes is not valid UTF-8, assuming %s", len(data), LATIN1)
        return LATIN1

    return UTF8


# Name used by callers of the original helper
detect_encoding = sniff_encoding
