"""Table output formatting and display.

Formats the route table and lookup results as color-coded tables.
Display is observational only: the layout is not a stable format.
"""

import sys
from typing import Callable, TextIO

import config
from colors import Color
from enums import DataMarker
from errors import NoMatchingAddress, NoRouteError
from models import LookupResult, RTInfo
from routing import Router
from utils import format_optional, shorten_text


def _rule(columns: list[tuple[str, int]]) -> str:
    width = sum(w for _, w in columns) + len(config.COLUMN_SEPARATOR) * (len(columns) - 1)
    return "=" * width


def _format_row(columns: list[tuple[str, int]], values: list[str]) -> str:
    parts = []
    for (_, width), value in zip(columns, values):
        parts.append(shorten_text(value, width).ljust(width))
    return config.COLUMN_SEPARATOR.join(parts).rstrip()


def format_router(router: Router, file: TextIO | None = None) -> None:
    """Print the route table, one section per address family.

    Entries are listed in their current order, i.e. lookup order once
    the table has been finalized.

    Args:
        router: Route table to display
        file: Optional file handle (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    columns = config.TABLE_COLUMNS
    rule = _rule(columns)

    print(rule, file=file)
    print(f"{Color.BOLD}Route Table{Color.RESET}", file=file)
    if not router.finalized:
        print(f"{Color.YELLOW}(not finalized - insertion order){Color.RESET}", file=file)
    print(rule, file=file)
    print(_format_row(columns, [name for name, _ in columns]), file=file)

    sections = [
        (config.DUMP_V4_HEADER, router.v4_routes),
        (config.DUMP_V6_HEADER, router.v6_routes),
    ]
    for header, entries in sections:
        print(f"{Color.CYAN}{header}{Color.RESET}", file=file)
        for entry in entries:
            row = _format_row(columns, _entry_values(router, entry))
            if entry.src is None:
                print(f"{Color.DIM}{row}{Color.RESET}", file=file)
            else:
                print(row, file=file)

    print(rule, file=file)


def _entry_values(router: Router, entry: RTInfo) -> list[str]:
    iface = router.interfaces.get(entry.iface)
    iface_name = iface.name if iface is not None else f"#{entry.iface}"
    return [
        format_optional(entry.dst, DataMarker.ANY),
        format_optional(entry.src, DataMarker.ANY),
        str(entry.priority),
        iface_name,
        format_optional(entry.next_hop),
        entry.selector.value,
    ]


def format_lookup(results: list[LookupResult], file: TextIO | None = None) -> None:
    """Print lookup outcomes, one row per query.

    Failed lookups show the error text in place of the interface columns.

    Args:
        results: Query results in query order
        file: Optional file handle (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    columns = config.RESULT_COLUMNS
    rule = _rule(columns)

    print(rule, file=file)
    print(_format_row(columns, [name for name, _ in columns]), file=file)
    print(rule, file=file)

    for result in results:
        color = _get_result_color(result)
        if result.resolved:
            address = result.address
            row = _format_row(
                columns,
                [
                    result.src,
                    result.dst,
                    result.interface.name,
                    format_optional(address.ip if address else None, DataMarker.NOT_AVAILABLE),
                    format_optional(address.gateway if address else None),
                    format_optional(result.next_hop),
                ],
            )
        else:
            row = (
                _format_row(columns[:2], [result.src, result.dst])
                + config.COLUMN_SEPARATOR
                + f"ERROR: {result.error}"
            )
        print(f"{color}{row}{Color.RESET}" if color else row, file=file)

    print(rule, file=file)


# Type alias for color selection predicate
ColorPredicate = Callable[[LookupResult], bool]


def _get_result_color(result: LookupResult) -> str:
    """Determine row color (first matching rule wins).

    Priority:
        1. No local address for the next hop -> YELLOW
        2. No route -> RED
        3. Any other error -> MAGENTA
        4. Resolved -> GREEN
    """
    rules: list[tuple[ColorPredicate, str]] = [
        (lambda r: isinstance(r.error, NoMatchingAddress), Color.YELLOW),
        (lambda r: isinstance(r.error, NoRouteError), Color.RED),
        (lambda r: r.error is not None, Color.MAGENTA),
        (lambda r: r.resolved, Color.GREEN),
    ]

    for predicate, color in rules:
        if predicate(result):
            return color

    return ""
