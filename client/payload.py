"""Payload validation and loading."""

from typing import Union
import os

from protocol.constants import SUPPORTED_EXTENSIONS
from utils.exceptions import PayloadReadError, UnsupportedFormatError
from utils.logging import get_logger

logger = get_logger(__name__)


def payload_extension(path: Union[str, os.PathLike]) -> str:
    """Return the lowercase extension of the last path segment, dot included."""
    name = os.path.basename(os.fspath(path))
    dot = name.rfind('.')
    if dot < 0:
        return ''
    return name[dot:].lower()


def load_payload(path: Union[str, os.PathLike]) -> bytes:
    """
    Read a payload file after checking its extension.

    The extension check happens before the filesystem is touched.

    Args:
        path: Path to a .dol, .elf, .rpx or .wuhb file

    Returns:
        Entire file contents

    Raises:
        UnsupportedFormatError: If the extension is not allowlisted
        PayloadReadError: If the file cannot be read
    """
    path = os.fspath(path)
    extension = payload_extension(path)
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(path, extension)

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Error reading payload {path}: {e}")
        raise PayloadReadError(path, str(e)) from e

    logger.debug(f"Loaded {len(data)} bytes from {path}")
    return data
