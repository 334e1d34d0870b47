"""Input validation and parsing utilities.

Provides validation for interface names and lenient parsing of IP
addresses and CIDR prefixes. Parsers return None instead of raising so
callers decide whether a bad value is fatal.
"""

import ipaddress
import re

import config
from enums import AddressFamily

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
IPNetwork = ipaddress.IPv4Network | ipaddress.IPv6Network


def validate_interface_name(name: str) -> bool:
    """Validate interface name.

    Allowed characters: [a-zA-Z0-9._:@-]
    Max length: 64

    Args:
        name: Interface name to validate

    Returns:
        True if valid, False otherwise.
    """
    if not isinstance(name, str) or not name:
        return False

    if len(name) > 64:
        return False

    return re.fullmatch(r"[a-zA-Z0-9._:@-]+", name) is not None


def normalize_ip(address: IPAddress) -> IPAddress:
    """Collapse IPv4-mapped IPv6 addresses (::ffff:a.b.c.d) to IPv4.

    Args:
        address: Parsed address

    Returns:
        The embedded IPv4 address for mapped addresses, else the input.
    """
    if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped:
        return address.ipv4_mapped
    return address


def address_family(address: IPAddress) -> AddressFamily:
    """Bucket an address by the length of its packed form."""
    length = len(address.packed)
    if length == config.IPV4_LEN:
        return AddressFamily.V4
    if length == config.IPV6_LEN:
        return AddressFamily.V6
    raise ValueError(f"Unexpected address length {length}")


def parse_ip_address(value: object) -> IPAddress | None:
    """Parse an IP address leniently.

    Accepts address strings or ipaddress objects. Zone identifiers
    (fe80::1%eth0) are stripped.

    Args:
        value: Address text, address object or None

    Returns:
        Normalized address, or None if value is empty or unparsable.
    """
    if value is None or value == "":
        return None

    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return normalize_ip(value)

    if not isinstance(value, str):
        return None

    # Strip zone identifier (fe80::1%eth0 → fe80::1)
    text = value.strip().split("%")[0]

    try:
        return normalize_ip(ipaddress.ip_address(text))
    except ValueError:
        return None


def parse_prefix(value: object) -> IPNetwork | None:
    """Parse CIDR text ("address/prefix-length") into a network.

    Host bits are masked off (10.0.0.5/24 → 10.0.0.0/24). A bare address
    without a prefix length is rejected.

    Args:
        value: CIDR text or None

    Returns:
        Network, or None if value is empty or not valid CIDR.
    """
    if not isinstance(value, str) or "/" not in value:
        return None

    try:
        return ipaddress.ip_network(value.strip(), strict=False)
    except ValueError:
        return None

