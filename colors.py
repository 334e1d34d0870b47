"""ANSI color codes for terminal output.

All colors optimized for dark terminal backgrounds.
"""

from enum import StrEnum


class AllColors(StrEnum):
    """ANSI palette the active colors below are picked from."""

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"

    BOLD = "\033[1m"
    DIM = "\033[2m"

    RESET = "\033[0m"


class Color(StrEnum):
    """Active colors used for table display and log levels.

    To change colors: Replace the value with any from AllColors above.
    """

    GREEN = AllColors.BRIGHT_GREEN      # Lookup resolved
    CYAN = AllColors.BRIGHT_CYAN        # Family section headers
    RED = AllColors.BRIGHT_RED          # No route
    YELLOW = AllColors.BRIGHT_YELLOW    # Route found, no usable local address
    MAGENTA = AllColors.BRIGHT_MAGENTA  # Critical
    DIM = AllColors.DIM                 # Entries with no source constraint
    BOLD = AllColors.BOLD               # Title
    RESET = AllColors.RESET             # Reset (don't change)
