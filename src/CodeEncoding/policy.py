# src/CodeEncoding/policy.py
"""Choose between the declared encoding of a file and the one sniffed from its content."""

import logging
from pathlib import PurePath
from typing import Union

from CodeEncoding.resolution import resolve_encoding
from CodeEncoding.schemas import SettingsLike, merge_settings
from CodeEncoding.sniffing import sniff_encoding

logger = logging.getLogger(__name__)


def decide_encoding(file_path: Union[str, PurePath], data: bytes, settings: SettingsLike = None) -> str:
    """
    Decide which encoding to decode a file's content with.

    With auto-detection enabled only the content is inspected and the path is
    ignored; otherwise only the path is used and the content is not inspected.

    Parameters
    ----------
    file_path : str or PurePath
        The path the content was read from.
    data : bytes
        The raw content of the file.
    settings : EncodingSettings or Mapping or None
        Caller overrides, overlaid on the default settings.

    Returns
    -------
    str
        The encoding name to decode `data` with.
    """
    effective = merge_settings(settings)
    if effective.auto_detect_encoding:
        encoding = sniff_encoding(data)
        logger.debug("Auto-detected %s for %s", encoding, file_path)
        return encoding
    return resolve_encoding(file_path, effective)
