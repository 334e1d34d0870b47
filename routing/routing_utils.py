"""Routing utilities for table ordering.

Provides the sort key that turns a per-family entry list into
longest-prefix-match order.

DESIGN DECISION: Why a sorted list instead of a trie

Lookups walk the list and stop at the first entry whose source and
destination constraints both match. That only implements
longest-prefix-match if the list is ordered most-specific-first:

1. PREFIX LENGTH FIRST: /26 sorts before /24 sorts before /0
   - The first destination match is therefore the longest one

2. PRIORITY SECOND: among equal prefix lengths, lower value wins
   - Priority already includes the batch offset

3. STABLE: entries that tie on both keep insertion order
   - list.sort() is stable, so repeated update() calls give the same order
   - Source prefixes are NOT part of the key; among tied entries the first
     inserted one whose source matches wins

A trie would answer destination-only queries faster, but source
constraints and priority tie-breaks make the linear scan over a sorted
list the simpler correct structure.
"""

from models import RTInfo


def get_route_sort_key(entry: RTInfo) -> tuple[int, int]:
    """Get sort key for a table entry.

    Args:
        entry: Compiled table entry

    Returns:
        Tuple of (-prefix_len, priority) for ascending sort.

    Examples:
        172.16.1.0/26 priority 5  -> (-26, 5)
        172.16.1.0/24 priority 0  -> (-24, 0)
        0.0.0.0/0 priority 0      -> (0, 0)

        Sorted ascending: /26 first, default route last.
    """
    return (-entry.prefix_len, entry.priority)
