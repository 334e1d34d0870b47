"""Data models for interfaces, routes and compiled table entries.

Architecture:
- InterfaceAddress: one local address with its own netmask
- Interface: named attachment point owning an ordered address list
- Route: declarative routing intent (text prefixes, consumed once)
- RTInfo: compiled table entry (parsed prefixes, effective priority)

Interfaces, addresses and table entries are frozen: they are built once
during configuration and only read afterwards.
"""

import ipaddress
from dataclasses import dataclass, field

from enums import AddressFamily, DataMarker, SelectorKind
from utils import (
    IPAddress,
    IPNetwork,
    address_family,
    format_optional,
    parse_ip_address,
    parse_prefix,
)


@dataclass(frozen=True)
class InterfaceAddress:
    """Local address configured on an interface.

    netmask is a prefix length (24) or, for IPv4, a dotted mask
    ("255.255.255.0").
    """

    ip: IPAddress
    netmask: int | str
    broadcast: IPAddress | None = None
    gateway: IPAddress | None = None

    @property
    def network(self) -> IPNetwork:
        """Network formed by ip and its own netmask."""
        return ipaddress.ip_network((self.ip, self.netmask), strict=False)

    def contains(self, target: IPAddress | None) -> bool:
        """Check whether target falls inside this address's network."""
        if target is None:
            return False
        return target in self.network

    @classmethod
    def create(
        cls,
        ip: str,
        netmask: int | str,
        broadcast: str | None = None,
        gateway: str | None = None,
    ) -> "InterfaceAddress":
        """Build an address from text values.

        Args:
            ip: Local IP address
            netmask: Prefix length or dotted mask
            broadcast: Optional broadcast address
            gateway: Optional gateway address

        Returns:
            InterfaceAddress with parsed fields.

        Raises:
            ValueError: ip or netmask is not valid.
        """
        parsed = parse_ip_address(ip)
        if parsed is None:
            raise ValueError(f"Invalid interface address: {ip!r}")

        if not isinstance(netmask, (int, str)) or isinstance(netmask, bool):
            raise ValueError(f"Invalid netmask {netmask!r} for {ip!r}")

        # Fail on a bad netmask now rather than at lookup time
        try:
            ipaddress.ip_network((parsed, netmask), strict=False)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid netmask {netmask!r} for {ip!r}") from e

        return cls(
            ip=parsed,
            netmask=netmask,
            broadcast=parse_ip_address(broadcast),
            gateway=parse_ip_address(gateway),
        )


@dataclass(frozen=True)
class Interface:
    """Network attachment point.

    Address order is significant: it is the default selection order.
    """

    id: int
    name: str
    addresses: tuple[InterfaceAddress, ...] = field(default_factory=tuple)


@dataclass
class Route:
    """Declarative route, compiled into an RTInfo by Router.add_routes().

    src/dst use "address/prefix-length" notation. An empty or malformed
    src means "any source"; dst must parse.
    """

    interface: Interface
    dst: str
    src: str = ""
    priority: int = 0
    next_hop: str | None = None
    selector: SelectorKind | None = None

    def src_net(self) -> IPNetwork | None:
        return parse_prefix(self.src)

    def dst_net(self) -> IPNetwork | None:
        return parse_prefix(self.dst)

    def next_hop_ip(self) -> IPAddress | None:
        return parse_ip_address(self.next_hop)

    def selector_kind(self) -> SelectorKind:
        return self.selector if self.selector is not None else SelectorKind.FIRST


@dataclass(frozen=True)
class RTInfo:
    """Compiled route table entry.

    src/dst of None match any address. priority already includes the
    batch offset.
    """

    src: IPNetwork | None
    dst: IPNetwork | None
    selector: SelectorKind
    priority: int
    iface: int
    next_hop: IPAddress | None = None

    @property
    def prefix_len(self) -> int:
        """Destination prefix length (0 when unconstrained)."""
        return self.dst.prefixlen if self.dst is not None else 0

    @property
    def family(self) -> AddressFamily:
        if self.dst is None:
            return AddressFamily.V4
        return address_family(self.dst.network_address)

    def matches(self, src: IPAddress | None, dst: IPAddress) -> bool:
        """Check source and destination constraints.

        A source constraint never matches an unknown (None) source.
        """
        if self.src is not None and (src is None or src not in self.src):
            return False
        if self.dst is not None and dst not in self.dst:
            return False
        return True

    def __str__(self) -> str:
        return (
            f"{{Src:{format_optional(self.src, DataMarker.ANY)} "
            f"Dst:{format_optional(self.dst, DataMarker.ANY)} "
            f"Selector:{self.selector.value} "
            f"Priority:{self.priority} "
            f"Iface:{self.iface} "
            f"NextHop:{format_optional(self.next_hop)}}}"
        )


@dataclass
class LookupResult:
    """Outcome of one (source, destination) query.

    Exactly one of interface or error is set.
    """

    src: str
    dst: str
    interface: Interface | None = None
    address: InterfaceAddress | None = None
    next_hop: IPAddress | None = None
    error: Exception | None = None

    @property
    def resolved(self) -> bool:
        return self.error is None and self.interface is not None
