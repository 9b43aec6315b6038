"""Protocol module for Wiiload header layout and encoding."""

from protocol.constants import (
    MAGIC,
    VERSION,
    WIILOAD_PORT,
    HEADER_SIZE,
    FILENAME_FIELD_SIZE,
    ARGS_FIELD_SIZE,
    SUPPORTED_EXTENSIONS,
)
from protocol.header import WiiloadHeader, encode_header, filename_field

__all__ = [
    'MAGIC',
    'VERSION',
    'WIILOAD_PORT',
    'HEADER_SIZE',
    'FILENAME_FIELD_SIZE',
    'ARGS_FIELD_SIZE',
    'SUPPORTED_EXTENSIONS',
    'WiiloadHeader',
    'encode_header',
    'filename_field',
]
