"""Utility modules for logging and exception handling."""

from utils.logging import setup_logging, get_logger
from utils.exceptions import (
    WiiloadError,
    ConfigurationError,
    InvalidAddressError,
    UnsupportedFormatError,
    PayloadReadError,
    PayloadTooLargeError,
    TargetConnectionError,
    TransmissionError,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'WiiloadError',
    'ConfigurationError',
    'InvalidAddressError',
    'UnsupportedFormatError',
    'PayloadReadError',
    'PayloadTooLargeError',
    'TargetConnectionError',
    'TransmissionError',
]
