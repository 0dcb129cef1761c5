# src/CodeEncoding/config.py
"""Configuration for the CodeEncoding package."""

from typing import Dict, Tuple

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_AUTO_DETECT_ENCODING: bool = False

# Legacy source extensions that are still authored in Latin-1
DEFAULT_EXTENSION_MAPPINGS: Dict[str, str] = {
    ".prw": "latin1",
    ".tlpp": "latin1",
}

# Order is part of the public contract of `list_supported_encodings`
SUPPORTED_ENCODINGS: Tuple[str, ...] = (
    "utf-8",
    "utf-16le",
    "utf-16be",
    "latin1",
    "iso-8859-1",
    "ascii",
    "binary",
)

SETTINGS_FILE_NAME: str = ".codeencoding"
SETTINGS_FILE_SECTION: str = "encoding"
