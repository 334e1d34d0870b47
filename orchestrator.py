"""Orchestrator for route table construction and queries.

Coordinates config loading, table compilation and lookups.
"""

from pathlib import Path

from errors import RouteLookupError
from loader import load_config, parse_batches, parse_interfaces
from logging_config import get_logger
from models import LookupResult
from routing import Router

logger = get_logger(__name__)


def build_router(path: Path) -> Router:
    """Build a finalized router from a configuration file.

    Process:
        1. Load JSON document
        2. Build interfaces
        3. Build route batches
        4. Add each batch with its priority offset
        5. Finalize (sort)

    Args:
        path: Configuration file path

    Returns:
        Router ready for queries.

    Raises:
        ConfigError: Any problem with the document or a route in it.
    """
    data = load_config(path)

    interfaces = parse_interfaces(data)
    logger.info("Loaded %d interfaces", len(interfaces))

    batches = parse_batches(data, interfaces)

    router = Router()
    for offset, routes in batches:
        router.add_routes(offset, *routes)
        logger.debug("Added batch of %d routes (priority offset %d)", len(routes), offset)

    router.update()
    logger.info(
        "Route table ready: %d v4 entries, %d v6 entries",
        len(router.v4_routes),
        len(router.v6_routes),
    )
    return router


def run_queries(
    router: Router,
    queries: list[tuple[str, str]],
    next_hop: bool = False,
) -> list[LookupResult]:
    """Resolve each (source, destination) pair.

    Lookup failures are captured per query; they never abort the run.
    Internal invariant violations (DanglingInterfaceError) propagate.

    Args:
        router: Finalized route table
        queries: (source, destination) text pairs
        next_hop: Use next-hop resolution instead of plain lookup

    Returns:
        One LookupResult per query, in query order.
    """
    results = []
    for src, dst in queries:
        result = LookupResult(src=src, dst=dst)
        try:
            if next_hop:
                result.interface, result.address, result.next_hop = (
                    router.route_with_next_hop(src, dst)
                )
            else:
                result.interface, result.address = router.route_with_src(src, dst)
        except RouteLookupError as e:
            result.error = e
        results.append(result)

    return results
