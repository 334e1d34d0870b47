"""Route table modules for routecheck.

Provides the longest-prefix-match router, address selection
strategies, table ordering and hot-reload support.
"""

from .handle import RouterHandle
from .router import Router
from .routing_utils import get_route_sort_key
from .selectors import (
    SELECTORS,
    AddressSelector,
    first_address_selector,
    fit_address_selector,
    get_selector,
    select_address,
)

__all__ = [
    # Route table
    "Router",
    "RouterHandle",
    # Address selection
    "AddressSelector",
    "SELECTORS",
    "first_address_selector",
    "fit_address_selector",
    "get_selector",
    "select_address",
    # Routing Utilities
    "get_route_sort_key",
]
