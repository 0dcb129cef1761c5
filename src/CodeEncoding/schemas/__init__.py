"""This module contains the schemas for the CodeEncoding package."""

from CodeEncoding.schemas.settings_schema import (
    DEFAULT_ENCODING_SETTINGS,
    EncodingSettings,
    SettingsLike,
    coerce_settings,
    merge_settings,
    overlay_settings,
)

__all__ = [
    "DEFAULT_ENCODING_SETTINGS",
    "EncodingSettings",
    "SettingsLike",
    "coerce_settings",
    "merge_settings",
    "overlay_settings",
]
