"""Longest-prefix-match route table.

Lifecycle:
    1. add_routes() once per batch (appends, no ordering)
    2. update() to sort each family list most-specific-first
    3. route_with_src() / route_with_next_hop() queries (read-only)

Lookups before update() scan insertion order and may pick a less
specific route.
"""

from types import MappingProxyType
from typing import Mapping

import config
from enums import AddressFamily, SelectorKind
from errors import (
    ConfigError,
    DanglingInterfaceError,
    InvalidRouteError,
    NoMatchingAddress,
    NoRouteError,
    UnsupportedAddressFamily,
)
from logging_config import get_logger
from models import Interface, InterfaceAddress, Route, RTInfo
from routing.routing_utils import get_route_sort_key
from routing.selectors import select_address
from utils import IPAddress, address_family, parse_ip_address, sanitize_for_log

logger = get_logger(__name__)


class Router:
    """Route table holding interfaces and two per-family entry lists."""

    def __init__(self) -> None:
        self._interfaces: dict[int, Interface] = {}
        self._v4: list[RTInfo] = []
        self._v6: list[RTInfo] = []
        self._finalized = True

    @property
    def interfaces(self) -> Mapping[int, Interface]:
        """Read-only view of registered interfaces by id."""
        return MappingProxyType(self._interfaces)

    @property
    def v4_routes(self) -> tuple[RTInfo, ...]:
        return tuple(self._v4)

    @property
    def v6_routes(self) -> tuple[RTInfo, ...]:
        return tuple(self._v6)

    @property
    def finalized(self) -> bool:
        """True when no entries were added since the last update()."""
        return self._finalized

    def __len__(self) -> int:
        return len(self._v4) + len(self._v6)

    def add_routes(self, priority_offset: int, *routes: Route) -> None:
        """Compile routes and append them to their family list.

        The whole batch is compiled before anything is stored, so a bad
        route leaves the table unchanged.

        Args:
            priority_offset: Added to every route priority in this batch
            *routes: Routes to compile

        Raises:
            ConfigError: priority_offset is negative.
            InvalidRouteError: A destination prefix does not parse or a
                priority is negative.
        """
        if priority_offset < 0:
            raise ConfigError(f"Priority offset must be non-negative, got {priority_offset}")

        compiled = [(route, self._compile(route, priority_offset)) for route in routes]

        for route, entry in compiled:
            # Last write wins for interface metadata
            self._interfaces[route.interface.id] = route.interface
            self._family_routes(entry.family).append(entry)
            logger.debug("Added %s entry: %s", entry.family.value, sanitize_for_log(entry))

        if compiled:
            self._finalized = False

    def update(self) -> None:
        """Sort both family lists into lookup order.

        Stable sort: calling it again on an unchanged table is a no-op.
        """
        self._v4.sort(key=get_route_sort_key)
        self._v6.sort(key=get_route_sort_key)
        self._finalized = True
        logger.debug(
            "Route table finalized: %d v4 entries, %d v6 entries",
            len(self._v4),
            len(self._v6),
        )

    def route_with_src(
        self, src: object, dst: object
    ) -> tuple[Interface, InterfaceAddress | None]:
        """Resolve outgoing interface and local address.

        Args:
            src: Source IP (text or ipaddress object)
            dst: Destination IP (text or ipaddress object)

        Returns:
            Tuple of (interface, address picked by the entry's selector).
            The address is None when the interface has no candidate.

        Raises:
            UnsupportedAddressFamily: dst is neither IPv4 nor IPv6.
            NoRouteError: No entry matches.
        """
        src_ip, dst_ip = self._parse_query(src, dst)
        entry = self._find_entry(src_ip, dst_ip)
        iface = self._interface_for(entry)

        address = select_address(entry.selector, iface.addresses, src_ip, dst_ip)
        return iface, address

    def route_with_next_hop(
        self, src: object, dst: object
    ) -> tuple[Interface, InterfaceAddress, IPAddress | None]:
        """Resolve interface, local address and next hop.

        The local address must reach the next hop when the entry has one,
        otherwise the destination. The entry's own selector is ignored:
        selection always uses the FIT strategy.

        Returns:
            Tuple of (interface, address, next hop or None).

        Raises:
            UnsupportedAddressFamily: dst is neither IPv4 nor IPv6.
            NoRouteError: No entry matches.
            NoMatchingAddress: No interface address contains the target.
        """
        src_ip, dst_ip = self._parse_query(src, dst)
        entry = self._find_entry(src_ip, dst_ip)
        iface = self._interface_for(entry)

        target = entry.next_hop if entry.next_hop is not None else dst_ip
        address = select_address(SelectorKind.FIT, iface.addresses, src_ip, target)
        if address is None:
            raise NoMatchingAddress(iface, target)

        return iface, address, entry.next_hop

    def _compile(self, route: Route, priority_offset: int) -> RTInfo:
        if route.priority < 0:
            raise InvalidRouteError(route, "priority must be non-negative")

        dst = route.dst_net()
        if dst is None:
            raise InvalidRouteError(route, f"malformed destination prefix {route.dst!r}")

        src = route.src_net()
        if src is None and route.src:
            logger.debug(
                "Unparsable source prefix %s, matching any source",
                sanitize_for_log(route.src),
            )

        return RTInfo(
            src=src,
            dst=dst,
            selector=route.selector_kind(),
            priority=route.priority + priority_offset,
            iface=route.interface.id,
            next_hop=route.next_hop_ip(),
        )

    def _family_routes(self, family: AddressFamily) -> list[RTInfo]:
        if family == AddressFamily.V6:
            return self._v6
        return self._v4

    def _parse_query(self, src: object, dst: object) -> tuple[IPAddress | None, IPAddress]:
        dst_ip = parse_ip_address(dst)
        if dst_ip is None:
            raise UnsupportedAddressFamily(dst)
        return parse_ip_address(src), dst_ip

    def _find_entry(self, src: IPAddress | None, dst: IPAddress) -> RTInfo:
        for entry in self._family_routes(address_family(dst)):
            if entry.matches(src, dst):
                return entry
        raise NoRouteError(dst)

    def _interface_for(self, entry: RTInfo) -> Interface:
        iface = self._interfaces.get(entry.iface)
        if iface is None:
            raise DanglingInterfaceError(entry.iface)
        return iface

    def __str__(self) -> str:
        lines = [config.DUMP_HEADER, config.DUMP_V4_HEADER]
        lines.extend(str(entry) for entry in self._v4)
        lines.append(config.DUMP_V6_HEADER)
        lines.extend(str(entry) for entry in self._v6)
        return "\n".join(lines)
