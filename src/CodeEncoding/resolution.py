# src/CodeEncoding/resolution.py
"""Resolve the declared encoding of a file from its extension and the settings."""

import logging
import os
from pathlib import PurePath
from typing import Union

from CodeEncoding.config import DEFAULT_ENCODING
from CodeEncoding.schemas import SettingsLike, merge_settings

logger = logging.getLogger(__name__)


def get_file_extension(file_path: Union[str, PurePath]) -> str:
    """
    Return the lowercased extension of a path, including the leading dot.

    Only the extension is lowercased. Dotfiles such as ``.bashrc`` and paths
    without a dot in their final component have the empty extension.
    """
    return os.path.splitext(os.fspath(file_path))[1].lower()


def resolve_encoding(file_path: Union[str, PurePath], settings: SettingsLike = None) -> str:
    """
    Determine the declared encoding for a file.

    No I/O is performed; the path does not need to exist.

    Parameters
    ----------
    file_path : str or PurePath
        The path of the file.
    settings : EncodingSettings or Mapping or None
        Caller overrides, overlaid on the default settings.

    Returns
    -------
    str
        The mapped encoding for the file's extension, or the default encoding.
    """
    effective = merge_settings(settings)
    extension = get_file_extension(file_path)

    mapped = (effective.extension_mappings or {}).get(extension)
    if mapped:
        logger.debug("Extension %r of %s maps to %s", extension, file_path, mapped)
        return mapped

    return effective.default_encoding or DEFAULT_ENCODING


# Name used by callers of the original helper
get_encoding_for_file = resolve_encoding
