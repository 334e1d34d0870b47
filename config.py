"""Configuration constants for routecheck.

All configurable values stored here for easy customization.
Single source of truth for all constants and configuration.
"""

from enum import IntEnum

# Address lengths in bytes (family bucketing)
IPV4_LEN: int = 4
IPV6_LEN: int = 16

# Priority offset applied when a batch does not specify one
DEFAULT_PRIORITY_OFFSET: int = 0

# Diagnostic dump headers (str(router))
DUMP_HEADER: str = "ROUTER"
DUMP_V4_HEADER: str = "--- V4 ---"
DUMP_V6_HEADER: str = "--- V6 ---"

# Configuration document keys
CONFIG_INTERFACES_KEY: str = "interfaces"
CONFIG_BATCHES_KEY: str = "batches"
CONFIG_ROUTES_KEY: str = "routes"

# Table Configuration
TABLE_COLUMNS: list[tuple[str, int]] = [
    ("DESTINATION", 30),
    ("SOURCE", 30),
    ("PRIORITY", 8),
    ("INTERFACE", 15),
    ("NEXT_HOP", 25),
    ("SELECTOR", 8),
]

RESULT_COLUMNS: list[tuple[str, int]] = [
    ("SOURCE", 25),
    ("DESTINATION", 25),
    ("INTERFACE", 15),
    ("LOCAL_ADDRESS", 25),
    ("GATEWAY", 25),
    ("NEXT_HOP", 25),
]

COLUMN_SEPARATOR: str = "   "  # 3 spaces


class ExitCode(IntEnum):
    """Standard exit codes for the routecheck tool."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2
    NO_ROUTE = 3
    INVALID_ARGUMENTS = 4


# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "routecheck"
