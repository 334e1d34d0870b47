"""Interface address selection strategies.

A strategy picks the local address to use on the outgoing interface.
Every strategy has the same signature:

    (addresses, src, target) -> InterfaceAddress | None

Strategies are pure functions. New ones are added by extending
SelectorKind and SELECTORS; the router never needs to change.
"""

from typing import Callable, Sequence

from enums import SelectorKind
from models import InterfaceAddress
from utils import IPAddress

AddressSelector = Callable[
    [Sequence[InterfaceAddress], IPAddress | None, IPAddress | None],
    InterfaceAddress | None,
]


def first_address_selector(
    addresses: Sequence[InterfaceAddress],
    src: IPAddress | None,
    target: IPAddress | None,
) -> InterfaceAddress | None:
    """Return the first candidate address (src/target ignored)."""
    if addresses:
        return addresses[0]
    return None


def fit_address_selector(
    addresses: Sequence[InterfaceAddress],
    src: IPAddress | None,
    target: IPAddress | None,
) -> InterfaceAddress | None:
    """Return the first address whose own network contains target.

    Used for next-hop resolution: the local address must be on the same
    network as the next hop it sends to.

    Args:
        addresses: Candidate addresses in interface order
        src: Original source IP (unused)
        target: Next hop, or destination when there is no next hop

    Returns:
        Matching address, or None if no candidate contains target.
    """
    for address in addresses:
        if address.contains(target):
            return address
    return None


SELECTORS: dict[SelectorKind, AddressSelector] = {
    SelectorKind.FIRST: first_address_selector,
    SelectorKind.FIT: fit_address_selector,
}


def get_selector(kind: SelectorKind | None) -> AddressSelector:
    """Resolve a strategy by kind (None → FIRST)."""
    if kind is None:
        return first_address_selector
    return SELECTORS[kind]


def select_address(
    kind: SelectorKind | None,
    addresses: Sequence[InterfaceAddress],
    src: IPAddress | None,
    target: IPAddress | None,
) -> InterfaceAddress | None:
    return get_selector(kind)(addresses, src, target)
