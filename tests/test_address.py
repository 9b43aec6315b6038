import pytest

from client.address import resolve_address
from utils.exceptions import ConfigurationError, InvalidAddressError


def test_explicit_address_wins():
    assert resolve_address("192.168.1.10", fallback="10.0.0.2") == "192.168.1.10"


def test_fallback_used_when_no_address():
    assert resolve_address(None, fallback="10.0.0.2") == "10.0.0.2"
    assert resolve_address("", fallback="10.0.0.2") == "10.0.0.2"


@pytest.mark.parametrize("fallback", [None, ""])
def test_missing_destination_is_configuration_error(fallback):
    with pytest.raises(ConfigurationError, match="no destination configured"):
        resolve_address(None, fallback=fallback)


@pytest.mark.parametrize(
    "value",
    ["::1", "fe80::1", "::ffff:192.168.1.10", "wii.local", "192.168.1", "256.1.1.1", "1.2.3.4:4299"],
)
def test_non_ipv4_rejected(value):
    with pytest.raises(InvalidAddressError) as exc:
        resolve_address(value)
    assert exc.value.address == value


def test_invalid_fallback_rejected():
    with pytest.raises(InvalidAddressError):
        resolve_address(None, fallback="not-an-ip")


@pytest.mark.parametrize("value", ["010.0.0.1", "192.168.001.10"])
def test_leading_zero_octets_rejected(value):
    with pytest.raises(InvalidAddressError):
        resolve_address(value)
