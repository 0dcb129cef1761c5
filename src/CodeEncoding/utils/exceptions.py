"""Custom exceptions for the CodeEncoding package."""

from typing import Optional


class EncodingError(Exception):
    """Base class for every error raised by CodeEncoding."""


class UnsupportedEncodingError(EncodingError, LookupError):
    """
    Exception raised when an encoding name is not in the supported set.

    Parameters
    ----------
    encoding : str
        The encoding name as it was supplied by the caller.
    """

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"Unsupported encoding: {encoding!r}")


class DecodeError(EncodingError, ValueError):
    """Exception raised when bytes cannot be decoded with the chosen encoding."""

    def __init__(self, encoding: str, reason: Optional[str] = None) -> None:
        self.encoding = encoding
        message = f"Could not decode content as {encoding}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EncodeError(EncodingError, ValueError):
    """Exception raised when text cannot be represented in the chosen encoding."""

    def __init__(self, encoding: str, reason: Optional[str] = None) -> None:
        self.encoding = encoding
        message = f"Could not encode content as {encoding}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidSettingsError(EncodingError, ValueError):
    """Exception raised when encoding settings have the wrong shape or types."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
