"""Wiiload header structure and encoding."""

from dataclasses import dataclass
from typing import Union
import os
import struct

from protocol.constants import (
    ARGS_FIELD_SIZE,
    ARGS_OFFSET,
    FILENAME_FIELD_SIZE,
    FILENAME_OFFSET,
    HEADER_SIZE,
    MAGIC,
    MAGIC_OFFSET,
    MAGIC_SIZE,
    MAX_PAYLOAD_SIZE,
    SIZE_OFFSET,
    VERSION,
    VERSION_OFFSET,
)
from utils.exceptions import PayloadTooLargeError

PathLike = Union[str, os.PathLike]


def filename_field(path: PathLike) -> bytes:
    """Return the base name of path as UTF-8 bytes, before truncation."""
    return os.path.basename(os.fspath(path)).encode('utf-8')


@dataclass(frozen=True)
class WiiloadHeader:
    """
    Fixed-size descriptor sent ahead of the payload.

    Binary format (524 bytes, big-endian):
        offset 0   : magic     4 bytes   'HAXX'
        offset 4   : version   u32       (major << 16) | minor
        offset 8   : size      u32       payload length
        offset 12  : filename  256 bytes zero padded, truncated
        offset 268 : args      256 bytes zero filled by this client
    """

    size: int
    filename: bytes
    args: bytes = b''
    magic: bytes = MAGIC
    version: int = VERSION

    @classmethod
    def for_payload(cls, payload: bytes, path: PathLike) -> 'WiiloadHeader':
        """
        Describe a payload read from path.

        Args:
            payload: Full payload bytes
            path: Path the payload was read from; only its base name is used

        Returns:
            Header whose size matches len(payload)

        Raises:
            PayloadTooLargeError: If the length does not fit in a u32
        """
        size = len(payload)
        if size > MAX_PAYLOAD_SIZE:
            raise PayloadTooLargeError(size)
        return cls(size=size, filename=filename_field(path))

    def to_bytes(self) -> bytes:
        """
        Serialize the header field by field at fixed offsets.

        Filename and args longer than their fields are cut at the field
        width; shorter values are zero filled.
        """
        buffer = bytearray(HEADER_SIZE)
        struct.pack_into(f'>{MAGIC_SIZE}s', buffer, MAGIC_OFFSET, self.magic)
        struct.pack_into('>I', buffer, VERSION_OFFSET, self.version)
        struct.pack_into('>I', buffer, SIZE_OFFSET, self.size)
        struct.pack_into(f'>{FILENAME_FIELD_SIZE}s', buffer, FILENAME_OFFSET, self.filename)
        struct.pack_into(f'>{ARGS_FIELD_SIZE}s', buffer, ARGS_OFFSET, self.args)
        return bytes(buffer)


def encode_header(payload: bytes, path: PathLike) -> bytes:
    """Build the 524-byte wire header for a payload read from path."""
    return WiiloadHeader.for_payload(payload, path).to_bytes()
