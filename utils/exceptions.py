"""Custom exception classes for the Wiiload client."""

from typing import Optional


class WiiloadError(Exception):
    """Base exception class for all Wiiload client errors."""
    pass


class ConfigurationError(WiiloadError):
    """Exception raised when configuration is invalid or missing."""
    pass


class InvalidAddressError(WiiloadError):
    """Exception raised when a destination is not a valid IPv4 address."""

    def __init__(self, address: str):
        super().__init__(f"Invalid address (only IPv4 is supported): {address!r}")
        self.address = address


class UnsupportedFormatError(WiiloadError):
    """Exception raised when a payload file has a non-allowlisted extension."""

    def __init__(self, path: str, extension: str):
        super().__init__(
            f"Unsupported payload format {extension or '(none)'!r} for {path!r}; "
            f"expected one of .dol, .elf, .rpx, .wuhb"
        )
        self.path = path
        self.extension = extension


class PayloadReadError(WiiloadError):
    """Exception raised when a payload file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Error reading payload {path!r}: {reason}")
        self.path = path


class PayloadTooLargeError(WiiloadError):
    """Exception raised when a payload is too large for the header size field."""

    def __init__(self, size: int):
        super().__init__(f"Payload of {size} bytes does not fit in a 32-bit size field")
        self.size = size


class TargetConnectionError(WiiloadError, ConnectionError):
    """Exception raised when the TCP connection to the console cannot be opened."""

    def __init__(self, address: str, port: int, reason: str):
        super().__init__(f"Failed to connect to {address}:{port}: {reason}")
        self.address = address
        self.port = port


class TransmissionError(WiiloadError):
    """Exception raised when a write fails on an established connection."""

    def __init__(self, stage: str, reason: Optional[str] = None):
        message = f"{stage.capitalize()} failed to send"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.stage = stage
