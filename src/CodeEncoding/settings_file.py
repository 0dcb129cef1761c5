# src/CodeEncoding/settings_file.py
"""Load encoding settings from a `.codeencoding` TOML file in a directory."""

import logging
from pathlib import Path
from typing import Optional, Union

from CodeEncoding.config import SETTINGS_FILE_NAME, SETTINGS_FILE_SECTION
from CodeEncoding.schemas import EncodingSettings, SettingsLike, coerce_settings, merge_settings, overlay_settings

try:
    import tomllib  # type: ignore[import]
except ImportError:
    # For Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]

logger = logging.getLogger(__name__)


def load_settings_file(directory: Union[str, Path]) -> Optional[EncodingSettings]:
    """
    Read the encoding settings stored in a directory's settings file.

    The file is TOML with the settings under an ``[encoding]`` table, using the
    field names of `EncodingSettings`.

    Parameters
    ----------
    directory : str or Path
        The directory holding the settings file.

    Returns
    -------
    EncodingSettings, optional
        The settings from the file, or None if there is no usable file.

    Raises
    ------
    InvalidSettingsError
        If the ``[encoding]`` table holds unknown keys or values of the wrong type.
    """
    path_settings = Path(directory) / SETTINGS_FILE_NAME
    if not path_settings.is_file():
        logger.debug("No %s file at %s, skipping.", SETTINGS_FILE_NAME, path_settings)
        return None
    try:
        with path_settings.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        logger.warning("Invalid TOML in %s: %s", path_settings, exc)
        return None
    except PermissionError:
        logger.warning("Permission denied when trying to read %s.", path_settings)
        return None
    except OSError as exc:
        logger.warning("An OS error occurred while reading %s: %s", path_settings, exc)
        return None

    section = data.get(SETTINGS_FILE_SECTION)
    if section is None:
        logger.warning("No [%s] table in %s, skipping.", SETTINGS_FILE_SECTION, path_settings)
        return None
    if not isinstance(section, dict):
        logger.warning("Expected a table for '%s', got %s in %s. Skipping.", SETTINGS_FILE_SECTION, type(section), path_settings)
        return None

    return coerce_settings(section)


def settings_for_directory(directory: Union[str, Path], overrides: SettingsLike = None) -> EncodingSettings:
    """
    Build the effective settings for files in a directory.

    Layers, lowest first: the built-in defaults, the directory's settings file,
    and `overrides`. Each layer wins field by field, and extension mappings are
    merged entry by entry.
    """
    file_settings = load_settings_file(directory)
    return merge_settings(overlay_settings(file_settings, overrides))
