#!/usr/bin/env python3
"""Routecheck - Longest-prefix-match route lookup tool.

Main entry point for the routecheck command-line tool.
"""

import argparse
import sys
import traceback
from pathlib import Path

from config import TOOL_NAME, VERSION, ExitCode
from display import format_lookup, format_router
from errors import ConfigError
from logging_config import get_logger, setup_logging
from orchestrator import build_router, run_queries
from utils import sanitize_for_log


def parse_arguments() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace.

    Exits:
        Code 4 if invalid argument combinations.
    """
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Resolve outgoing interface and local address from a route table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  routecheck routes.json                                # Display table
  routecheck routes.json -q 192.168.1.2 172.16.1.10     # Lookup
  routecheck routes.json -q 192.168.1.2 223.5.5.5 --next-hop
  routecheck routes.json --dump -q 10.0.0.2 10.1.2.3    # Table and lookup
  routecheck routes.json -v --log-file debug.log        # Log to file

Exit codes:
  0 - Success
  1 - General error
  2 - Configuration error
  3 - At least one query failed
  4 - Invalid arguments
        """,
    )

    parser.add_argument(
        "config",
        type=Path,
        metavar="CONFIG",
        help="JSON file with interfaces and routes",
    )

    parser.add_argument(
        "-q",
        "--query",
        nargs=2,
        action="append",
        metavar=("SRC", "DST"),
        default=[],
        help="Resolve a source/destination pair (repeatable)",
    )

    parser.add_argument(
        "--next-hop",
        action="store_true",
        help="Resolve local address against the route's next hop",
    )

    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the route table (default when no query is given)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )

    args = parser.parse_args()

    # Validation: --next-hop requires a query
    if args.next_hop and not args.query:
        print("Error: --next-hop requires --query", file=sys.stderr)
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    return args


def main() -> None:
    """Main execution flow.

    Exit codes:
        0: Success
        1: General error
        2: Configuration error
        3: At least one query failed
        4: Invalid arguments
    """
    args = parse_arguments()

    # Setup logging (must be called before any logger usage)
    setup_logging(
        verbose=args.verbose,
        log_file=args.log_file,
        use_colors=True,
    )

    logger = get_logger(__name__)

    try:
        router = build_router(args.config)

        if args.dump or not args.query:
            format_router(router)

        if not args.query:
            sys.exit(ExitCode.SUCCESS)

        queries = [(src, dst) for src, dst in args.query]
        results = run_queries(router, queries, next_hop=args.next_hop)
        format_lookup(results)

        failed = sum(1 for r in results if not r.resolved)
        if failed:
            logger.warning("%d of %d queries failed", failed, len(results))
            sys.exit(ExitCode.NO_ROUTE)

        sys.exit(ExitCode.SUCCESS)

    except ConfigError as e:
        logger.error("Configuration error: %s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.CONFIG_ERROR)
    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        sys.exit(ExitCode.GENERAL_ERROR)
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Error during execution: %s", sanitize_for_log(str(e)))
        if args.verbose:
            traceback.print_exc()
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
