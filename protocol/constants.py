"""Wiiload protocol constants.

These are wire-level constants shared with the console-side loader and
must not change without a matching change on the receiver.
"""

# Magic bytes opening every header
MAGIC = b"HAXX"

# Protocol version sent to the loader, packed as (major << 16) | minor
VERSION_MAJOR = 0
VERSION_MINOR = 5
VERSION = (VERSION_MAJOR << 16) | VERSION_MINOR

# TCP port the loader listens on
WIILOAD_PORT = 4299

# Header layout: [Magic(4) | Version(4) | Size(4) | Filename(256) | Args(256)]
# All integers are big-endian uint32
MAGIC_OFFSET = 0
VERSION_OFFSET = 4
SIZE_OFFSET = 8
FILENAME_OFFSET = 12
ARGS_OFFSET = 268

MAGIC_SIZE = 4
FILENAME_FIELD_SIZE = 256
ARGS_FIELD_SIZE = 256

HEADER_SIZE = ARGS_OFFSET + ARGS_FIELD_SIZE  # 524

MAX_PAYLOAD_SIZE = 0xFFFFFFFF

# Payload formats the loaders accept
SUPPORTED_EXTENSIONS = frozenset({'.dol', '.elf', '.wuhb', '.rpx'})
