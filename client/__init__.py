"""Client side of the Wiiload protocol."""

from client.address import resolve_address
from client.payload import load_payload, payload_extension
from client.transport import open_connection, transmit
from client.wiiload import TransferReport, send_file

__all__ = [
    'resolve_address',
    'load_payload',
    'payload_extension',
    'open_connection',
    'transmit',
    'TransferReport',
    'send_file',
]
