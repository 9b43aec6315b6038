"""TCP delivery of a Wiiload header and payload."""

from typing import Optional
import socket

from protocol.constants import WIILOAD_PORT
from utils.exceptions import TargetConnectionError, TransmissionError
from utils.logging import get_logger

logger = get_logger(__name__)


def open_connection(address: str, port: int = WIILOAD_PORT,
                    timeout: Optional[float] = None) -> socket.socket:
    """
    Open a TCP connection to the console.

    Args:
        address: IPv4 address of the console
        port: Loader port
        timeout: Seconds for connect and writes; None keeps the
                 interpreter's default socket timeout

    Returns:
        Connected socket, owned by the caller

    Raises:
        TargetConnectionError: If the connection cannot be established
    """
    logger.info(f"Connecting to {address}:{port}")
    try:
        if timeout is None:
            return socket.create_connection((address, port))
        return socket.create_connection((address, port), timeout=timeout)
    except OSError as e:
        logger.error(f"Failed to connect to {address}:{port}: {e}")
        raise TargetConnectionError(address, port, str(e)) from e


def _write(sock: socket.socket, data: bytes, stage: str) -> None:
    try:
        sock.sendall(data)
    except OSError as e:
        logger.error(f"{stage.capitalize()} failed to send: {e}")
        raise TransmissionError(stage, str(e)) from e
    logger.debug(f"Sent {stage}: {len(data)} bytes")


def transmit(address: str, header: bytes, payload: bytes,
             port: int = WIILOAD_PORT, timeout: Optional[float] = None) -> None:
    """
    Send header then payload over a single connection.

    The header is always the first write and the payload the second.
    The connection is closed on every exit path. Nothing is read back:
    the loader sends no acknowledgement.

    Args:
        address: IPv4 address of the console
        header: Encoded header bytes
        payload: Payload bytes
        port: Loader port
        timeout: Seconds for connect and writes; None keeps the default

    Raises:
        TargetConnectionError: If the connection cannot be established
        TransmissionError: If either write fails (stage 'header' or 'payload')
    """
    sock = open_connection(address, port, timeout)
    with sock:
        _write(sock, header, 'header')
        _write(sock, payload, 'payload')
    logger.debug(f"Connection to {address}:{port} closed")
