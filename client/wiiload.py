"""Send a homebrew executable to a console running a Wiiload receiver."""

from dataclasses import dataclass
from typing import Optional, Union
import os

from client.address import resolve_address
from client.payload import load_payload
from client.transport import transmit
from protocol.constants import FILENAME_FIELD_SIZE, HEADER_SIZE, WIILOAD_PORT
from protocol.header import WiiloadHeader
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class TransferReport:
    """Summary of a completed transfer."""

    address: str
    port: int
    filename: str
    header_size: int
    payload_size: int


def send_file(
    path: Union[str, os.PathLike],
    address: Optional[str] = None,
    *,
    fallback_address: Optional[str] = None,
    port: int = WIILOAD_PORT,
    timeout: Optional[float] = None,
) -> TransferReport:
    """
    Load, encode and deliver one payload.

    Success means both writes completed; whether the console actually
    ran the binary cannot be observed.

    Args:
        path: Payload file (.dol, .elf, .rpx or .wuhb)
        address: Console IPv4 address; falls back to fallback_address
        fallback_address: Value of the WII setting
        port: Loader port
        timeout: Seconds for connect and writes; None keeps the default

    Returns:
        TransferReport describing what was sent

    Raises:
        WiiloadError: Any subclass, from whichever stage failed
    """
    payload = load_payload(path)
    target = resolve_address(address, fallback_address)

    header = WiiloadHeader.for_payload(payload, path)
    if len(header.filename) > FILENAME_FIELD_SIZE:
        logger.warning(
            f"File name is {len(header.filename)} bytes; "
            f"truncated to {FILENAME_FIELD_SIZE} in header"
        )
    encoded = header.to_bytes()
    filename = header.filename[:FILENAME_FIELD_SIZE].decode('utf-8', errors='replace')

    logger.info(f"Sending {filename} ({len(payload)} bytes) to {target}:{port}")
    transmit(target, encoded, payload, port=port, timeout=timeout)
    logger.info(f"Sent {HEADER_SIZE + len(payload)} bytes to {target}:{port}")

    return TransferReport(
        address=target,
        port=port,
        filename=filename,
        header_size=len(encoded),
        payload_size=len(payload),
    )
