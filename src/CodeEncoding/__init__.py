"""CodeEncoding: read and write text files in the encoding each file calls for."""

from CodeEncoding.file_io import (
    read_text,
    read_text_async,
    read_text_with_encoding,
    write_text,
    write_text_async,
)
from CodeEncoding.policy import decide_encoding
from CodeEncoding.resolution import get_encoding_for_file, resolve_encoding
from CodeEncoding.schemas import DEFAULT_ENCODING_SETTINGS, EncodingSettings, merge_settings
from CodeEncoding.settings_file import load_settings_file, settings_for_directory
from CodeEncoding.sniffing import detect_encoding, sniff_encoding
from CodeEncoding.utils.codec_utils import (
    decode_bytes,
    encode_text,
    get_supported_encodings,
    normalize_encoding_name,
)
from CodeEncoding.utils.exceptions import (
    DecodeError,
    EncodeError,
    EncodingError,
    InvalidSettingsError,
    UnsupportedEncodingError,
)

list_supported_encodings = get_supported_encodings

__all__ = [
    "DEFAULT_ENCODING_SETTINGS",
    "DecodeError",
    "EncodeError",
    "EncodingError",
    "EncodingSettings",
    "InvalidSettingsError",
    "UnsupportedEncodingError",
    "decide_encoding",
    "decode_bytes",
    "detect_encoding",
    "encode_text",
    "get_encoding_for_file",
    "get_supported_encodings",
    "list_supported_encodings",
    "load_settings_file",
    "merge_settings",
    "normalize_encoding_name",
    "read_text",
    "read_text_async",
    "read_text_with_encoding",
    "resolve_encoding",
    "settings_for_directory",
    "sniff_encoding",
    "write_text",
    "write_text_async",
]
