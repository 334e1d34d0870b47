"""Utilities package for routecheck.

Provides address parsing, input validation, and text formatting.
"""

from .formatters import format_optional, sanitize_for_log, shorten_text
from .validators import (
    IPAddress,
    IPNetwork,
    address_family,
    normalize_ip,
    parse_ip_address,
    parse_prefix,
    validate_interface_name,
)

__all__ = [
    # Validators
    "IPAddress",
    "IPNetwork",
    "address_family",
    "validate_interface_name",
    "normalize_ip",
    "parse_ip_address",
    "parse_prefix",
    # Formatters
    "format_optional",
    "sanitize_for_log",
    "shorten_text",
]
