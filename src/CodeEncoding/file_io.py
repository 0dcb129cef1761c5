# src/CodeEncoding/file_io.py
"""Read and write text files in the encoding the settings call for."""

import asyncio
import logging
from pathlib import Path
from typing import Tuple, Union

from CodeEncoding.policy import decide_encoding
from CodeEncoding.resolution import resolve_encoding
from CodeEncoding.schemas import SettingsLike, merge_settings
from CodeEncoding.utils.codec_utils import decode_bytes, encode_text

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_bytes(file_path: PathLike) -> bytes:
    """Read the raw content of a file. Storage errors propagate unchanged."""
    return Path(file_path).read_bytes()


def write_bytes(file_path: PathLike, data: bytes) -> None:
    """Write raw content to a file, replacing anything already there."""
    Path(file_path).write_bytes(data)


async def read_bytes_async(file_path: PathLike) -> bytes:
    """Asynchronous version of `read_bytes`."""
    return await asyncio.to_thread(read_bytes, file_path)


async def write_bytes_async(file_path: PathLike, data: bytes) -> None:
    """Asynchronous version of `write_bytes`."""
    await asyncio.to_thread(write_bytes, file_path, data)


def _decode_content(file_path: PathLike, data: bytes, settings: SettingsLike) -> Tuple[str, str]:
    encoding = decide_encoding(file_path, data, settings)
    logger.debug("Decoding %d bytes from %s as %s", len(data), file_path, encoding)
    return decode_bytes(data, encoding), encoding


def _encode_content(file_path: PathLike, content: str, settings: SettingsLike) -> bytes:
    encoding = resolve_encoding(file_path, settings)
    data = encode_text(content, encoding)
    logger.debug("Encoded %d characters for %s as %s (%d bytes)", len(content), file_path, encoding, len(data))
    return data


def read_text_with_encoding(file_path: PathLike, settings: SettingsLike = None) -> Tuple[str, str]:
    """
    Read a file and decode it, reporting which encoding was used.

    Parameters
    ----------
    file_path : str or Path
        The file to read.
    settings : EncodingSettings or Mapping or None
        Caller overrides, overlaid on the default settings.

    Returns
    -------
    Tuple[str, str]
        The decoded text and the name of the encoding it was decoded with.

    Raises
    ------
    OSError
        If the file cannot be read.
    UnsupportedEncodingError
        If the chosen encoding is not supported.
    DecodeError
        If the content is not valid in the chosen encoding.
    """
    effective = merge_settings(settings)
    data = read_bytes(file_path)
    return _decode_content(file_path, data, effective)


def read_text(file_path: PathLike, settings: SettingsLike = None) -> str:
    """
    Read a file with the encoding from its settings, or auto-detect it if enabled.

    See `read_text_with_encoding` for the parameters and errors.
    """
    content, _ = read_text_with_encoding(file_path, settings)
    return content


async def read_text_async(file_path: PathLike, settings: SettingsLike = None) -> str:
    """Asynchronous version of `read_text`."""
    effective = merge_settings(settings)
    data = await read_bytes_async(file_path)
    content, _ = _decode_content(file_path, data, effective)
    return content


def write_text(file_path: PathLike, content: str, settings: SettingsLike = None) -> None:
    """
    Write text to a file in the encoding declared for its extension.

    The content is encoded before the file is opened, so an unsupported
    encoding or unencodable text leaves an existing file untouched.

    Parameters
    ----------
    file_path : str or Path
        The file to write. Existing content is replaced.
    content : str
        The text to write.
    settings : EncodingSettings or Mapping or None
        Caller overrides, overlaid on the default settings.

    Raises
    ------
    UnsupportedEncodingError
        If the declared encoding is not supported.
    EncodeError
        If `content` cannot be represented in the declared encoding.
    OSError
        If the file cannot be written.
    """
    effective = merge_settings(settings)
    data = _encode_content(file_path, content, effective)
    write_bytes(file_path, data)


async def write_text_async(file_path: PathLike, content: str, settings: SettingsLike = None) -> None:
    """Asynchronous version of `write_text`."""
    effective = merge_settings(settings)
    data = _encode_content(file_path, content, effective)
    await write_bytes_async(file_path, data)
