"""Exception hierarchy for routecheck.

Configuration-time errors derive from ConfigError, query-time errors from
RouteLookupError. DanglingInterfaceError is an invariant violation and is
deliberately not a RouteTableError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from models import Interface, Route

__all__ = [
    "RouteTableError",
    "ConfigError",
    "InvalidRouteError",
    "RouteLookupError",
    "UnsupportedAddressFamily",
    "NoRouteError",
    "NoMatchingAddress",
    "DanglingInterfaceError",
]


class RouteTableError(Exception):
    pass


class ConfigError(RouteTableError):
    pass


class InvalidRouteError(ConfigError):
    def __init__(self, route: Route, reason: str):
        super().__init__(f"Invalid route {route!r}: {reason}")
        self.route = route
        self.reason = reason


class RouteLookupError(RouteTableError):
    pass


class UnsupportedAddressFamily(RouteLookupError):
    def __init__(self, address: Any):
        super().__init__(f"IP {address!r} is not valid as IPv4 or IPv6")
        self.address = address


class NoRouteError(RouteLookupError):
    def __init__(self, dst: Any):
        super().__init__(f"no route found for {dst}")
        self.dst = dst


class NoMatchingAddress(RouteLookupError):
    def __init__(self, interface: Interface, target: Any):
        super().__init__(
            f"no address on interface {interface.name!r} can reach {target}"
        )
        self.interface = interface
        self.target = target


class DanglingInterfaceError(AssertionError):
    def __init__(self, iface_id: int):
        super().__init__(f"table entry references unknown interface id {iface_id}")
        self.iface_id = iface_id
