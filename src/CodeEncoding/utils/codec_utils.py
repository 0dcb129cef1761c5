"""Utility functions for turning bytes into text and back for a named encoding."""

import codecs
import logging
from typing import Dict, List

from CodeEncoding.config import SUPPORTED_ENCODINGS
from CodeEncoding.utils.exceptions import DecodeError, EncodeError, UnsupportedEncodingError

logger = logging.getLogger(__name__)

UTF8 = "utf-8"

# Alternative spellings, keyed after lowercasing and replacing "_" with "-"
_ENCODING_ALIASES: Dict[str, str] = {
    "utf8": "utf-8",
    "utf-16-le": "utf-16le",
    "utf16le": "utf-16le",
    "utf-16-be": "utf-16be",
    "utf16be": "utf-16be",
    "latin-1": "latin1",
    "l1": "latin1",
    "iso8859-1": "iso-8859-1",
    "iso88591": "iso-8859-1",
    "us-ascii": "ascii",
}

# Canonical name -> name understood by the Python codec registry.
# "binary" keeps every byte as the code point of the same value.
_PYTHON_CODECS: Dict[str, str] = {
    "utf-16le": "utf-16-le",
    "utf-16be": "utf-16-be",
    "latin1": "latin-1",
    "iso-8859-1": "iso-8859-1",
    "ascii": "ascii",
    "binary": "latin-1",
}

_UTF16_BOMS: Dict[str, bytes] = {
    "utf-16le": codecs.BOM_UTF16_LE,
    "utf-16be": codecs.BOM_UTF16_BE,
}


def get_supported_encodings() -> List[str]:
    """
    Return the encodings this package can decode and encode.

    Returns
    -------
    List[str]
        A new list with the canonical encoding names, always in the same order.
    """
    return list(SUPPORTED_ENCODINGS)


def normalize_encoding_name(encoding: str) -> str:
    """
    Map an encoding name to its canonical spelling.

    Parameters
    ----------
    encoding : str
        The encoding name, in any case and with either "-" or "_" separators.

    Returns
    -------
    str
        The canonical name, one of `get_supported_encodings()`.

    Raises
    ------
    UnsupportedEncodingError
        If the name is not a spelling of a supported encoding.
    """
    if not isinstance(encoding, str):
        raise UnsupportedEncodingError(repr(encoding))
    key = encoding.strip().lower().replace("_", "-")
    key = _ENCODING_ALIASES.get(key, key)
    if key not in SUPPORTED_ENCODINGS:
        raise UnsupportedEncodingError(encoding)
    return key


def is_utf8(encoding: str) -> bool:
    """Check whether a supported encoding name is a spelling of UTF-8."""
    return normalize_encoding_name(encoding) == UTF8


def decode_bytes(data: bytes, encoding: str) -> str:
    """
    Decode raw bytes with the given encoding.

    UTF-8 is decoded directly and a leading byte order mark is kept in the text.
    Every other encoding goes through the Python codec registry; for UTF-16 a
    leading byte order mark matching the byte order is dropped.

    Parameters
    ----------
    data : bytes
        The raw content.
    encoding : str
        Name of a supported encoding.

    Returns
    -------
    str
        The decoded text.

    Raises
    ------
    UnsupportedEncodingError
        If `encoding` is not supported. Raised before any decoding happens.
    DecodeError
        If `data` is not valid in `encoding`.
    """
    canonical = normalize_encoding_name(encoding)
    try:
        if canonical == UTF8:
            return bytes(data).decode("utf-8")
        bom = _UTF16_BOMS.get(canonical)
        if bom and data[:2] == bom:
            data = data[2:]
        return codecs.decode(bytes(data), _PYTHON_CODECS[canonical])
    except UnicodeDecodeError as exc:
        logger.debug("Decoding %d bytes as %s failed: %s", len(data), canonical, exc)
        raise DecodeError(canonical, exc.reason) from exc


def encode_text(text: str, encoding: str) -> bytes:
    """
    Encode text with the given encoding.

    Parameters
    ----------
    text : str
        The text to encode.
    encoding : str
        Name of a supported encoding.

    Returns
    -------
    bytes
        The encoded content, without a byte order mark.

    Raises
    ------
    UnsupportedEncodingError
        If `encoding` is not supported. Raised before any encoding happens.
    EncodeError
        If `text` contains characters `encoding` cannot represent.
    """
    canonical = normalize_encoding_name(encoding)
    try:
        if canonical == UTF8:
            return text.encode("utf-8")
        return codecs.encode(text, _PYTHON_CODECS[canonical])
    except UnicodeEncodeError as exc:
        logger.debug("Encoding %d characters as %s failed: %s", len(text), canonical, exc)
        raise EncodeError(canonical, exc.reason) from exc
