"""Destination address resolution."""

from typing import Optional
import ipaddress

from utils.exceptions import ConfigurationError, InvalidAddressError
from utils.logging import get_logger

logger = get_logger(__name__)


def resolve_address(address: Optional[str] = None, fallback: Optional[str] = None) -> str:
    """
    Pick and validate the console's IPv4 address.

    Args:
        address: Address given by the caller; used when non-empty
        fallback: Value of the WII environment setting, injected by the caller

    Returns:
        Canonical dotted-decimal IPv4 address

    Raises:
        ConfigurationError: If neither value is set
        InvalidAddressError: If the chosen value is not an IPv4 literal
    """
    candidate = address or fallback
    if not candidate:
        raise ConfigurationError("no destination configured: pass an address or set WII")

    try:
        parsed = ipaddress.IPv4Address(candidate)
    except ValueError as e:
        logger.error(f"Rejected destination {candidate!r}: {e}")
        raise InvalidAddressError(candidate) from e

    logger.debug(f"Resolved destination {candidate!r} to {parsed}")
    return str(parsed)
