# src/CodeEncoding/schemas/settings_schema.py
"""Define the schema for encoding settings and how they are layered."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from CodeEncoding.config import (
    DEFAULT_AUTO_DETECT_ENCODING,
    DEFAULT_ENCODING,
    DEFAULT_EXTENSION_MAPPINGS,
)
from CodeEncoding.utils.exceptions import InvalidSettingsError


class EncodingSettings(BaseModel):
    """
    Encoding configuration for a single read or write.

    Every field is optional so that the same model can describe a partial
    override supplied by a caller. `merge_settings` turns an override into
    the effective settings, with every field filled in.

    Attributes
    ----------
    default_encoding : str, optional
        Encoding used when no extension mapping matches.
    extension_mappings : Dict[str, str], optional
        Lowercase file extension, including the leading dot, to encoding name.
    auto_detect_encoding : bool, optional
        When true, the content of a file decides its encoding on read.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_encoding: Optional[str] = None
    extension_mappings: Optional[Dict[str, str]] = None
    auto_detect_encoding: Optional[bool] = None

    @field_validator("extension_mappings")
    @classmethod
    def _lowercase_extensions(cls, value: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if value is None:
            return None
        return {extension.lower(): encoding for extension, encoding in value.items()}


SettingsLike = Union[EncodingSettings, Mapping[str, Any], None]

DEFAULT_ENCODING_SETTINGS = EncodingSettings(
    default_encoding=DEFAULT_ENCODING,
    extension_mappings=dict(DEFAULT_EXTENSION_MAPPINGS),
    auto_detect_encoding=DEFAULT_AUTO_DETECT_ENCODING,
)


def coerce_settings(settings: SettingsLike) -> EncodingSettings:
    """
    Convert caller input into an `EncodingSettings` instance.

    Parameters
    ----------
    settings : EncodingSettings or Mapping or None
        The caller-supplied settings. A mapping uses the field names of
        `EncodingSettings`.

    Returns
    -------
    EncodingSettings
        The settings as a model; empty when `settings` is None.

    Raises
    ------
    InvalidSettingsError
        If the input is not a mapping or does not validate.
    """
    if settings is None:
        return EncodingSettings()
    if isinstance(settings, EncodingSettings):
        return settings
    if not isinstance(settings, Mapping):
        raise InvalidSettingsError(f"Expected a mapping of encoding settings, got {type(settings).__name__}")
    try:
        return EncodingSettings.model_validate(dict(settings))
    except ValidationError as exc:
        raise InvalidSettingsError(f"Invalid encoding settings: {exc}") from exc


def overlay_settings(base: SettingsLike, override: SettingsLike) -> EncodingSettings:
    """
    Overlay one settings layer onto another.

    Fields set in `override` win over `base`. The extension mapping tables are
    merged entry by entry, so an override only replaces the extensions it names.

    Parameters
    ----------
    base : EncodingSettings or Mapping or None
        The lower layer.
    override : EncodingSettings or Mapping or None
        The upper layer.

    Returns
    -------
    EncodingSettings
        A new settings value; neither input is modified.
    """
    lower = coerce_settings(base)
    upper = coerce_settings(override)

    mappings: Optional[Dict[str, str]] = None
    if lower.extension_mappings is not None or upper.extension_mappings is not None:
        mappings = dict(lower.extension_mappings or {})
        mappings.update(upper.extension_mappings or {})

    return EncodingSettings(
        default_encoding=upper.default_encoding if upper.default_encoding is not None else lower.default_encoding,
        extension_mappings=mappings,
        auto_detect_encoding=(
            upper.auto_detect_encoding if upper.auto_detect_encoding is not None else lower.auto_detect_encoding
        ),
    )


def merge_settings(settings: SettingsLike = None) -> EncodingSettings:
    """Return the effective settings: caller values overlaid on the built-in defaults."""
    return overlay_settings(DEFAULT_ENCODING_SETTINGS, settings)
