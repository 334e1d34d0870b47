"""Type-safe enumerations for routecheck.

All categorical values use enum types for type safety and consistency.
"""

from enum import Enum


class AddressFamily(str, Enum):
    """Address family of a table entry (decided by its destination)."""

    V4 = "v4"
    V6 = "v6"


class SelectorKind(str, Enum):
    """Interface address selection strategies.

    FIRST: First address of the interface (default, ignores source/target)
    FIT: First address whose own network contains the target IP
    """

    FIRST = "first"
    FIT = "fit"


class DataMarker(str, Enum):
    """Display markers for absent values.

    ANY: Prefix constraint absent (matches everything)
    NONE_VALUE: Explicitly no value (e.g., no next hop configured)
    NOT_AVAILABLE: Value could not be determined (e.g., no local address)
    """

    ANY = "*"
    NONE_VALUE = "NONE"
    NOT_AVAILABLE = "N/A"
