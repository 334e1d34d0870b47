"""Text formatting utilities for DISPLAY and LOGGING only.

Nothing here touches table data; values are converted to text at the
edges (table dump, log records).
"""

import re
from typing import Any

from enums import DataMarker


def format_optional(value: Any, marker: DataMarker = DataMarker.NONE_VALUE) -> str:
    """Render a possibly-absent value for display.

    Args:
        value: Any value or None
        marker: Marker to show when value is None

    Returns:
        str(value), or the marker text for None.
    """
    if value is None:
        return marker.value
    return str(value)


def sanitize_for_log(value: Any) -> str:
    """Sanitize values before logging to prevent log injection.

    Configuration files are user input: interface names and CIDR text
    pass through here before reaching a log record.

    Removes:
        - Newlines
        - ANSI escape codes
        - Control characters

    Max length: 200 characters

    Args:
        value: Value to sanitize (any type, will be converted to string)

    Returns:
        Sanitized string safe for logging.
    """
    text = str(value)

    text = text.replace("\n", " ").replace("\r", " ")

    # Remove ANSI escape codes
    text = re.sub(r"\x1b\[[0-9;]*m", "", text)

    text = "".join(c for c in text if c.isprintable() or c.isspace())

    if len(text) > 200:
        text = text[:197] + "..."

    return text


def shorten_text(text: str, max_length: int) -> str:
    """Truncate text to fit column width.

    Adds "..." if truncated. Addresses have no spaces, so no attempt is
    made to break at a word boundary.

    Args:
        text: Text to truncate
        max_length: Maximum length (including "..." if truncated)

    Returns:
        Truncated text with "..." if needed.
    """
    if len(text) <= max_length:
        return text

    if max_length <= 3:
        return text[:max_length]

    return text[: max_length - 3] + "..."
