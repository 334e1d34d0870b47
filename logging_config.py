"""Logging configuration for routecheck.

Provides colored console output and optional file logging.
Uses % formatting (PEP 391) for security.
"""

import logging
from pathlib import Path

from colors import Color

CONSOLE_FORMAT: str = "%(levelname)s: %(message)s"
FILE_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Add ANSI colors to log levels."""

    COLORS = {
        "DEBUG": Color.CYAN,
        "INFO": Color.GREEN,
        "WARNING": Color.YELLOW,
        "ERROR": Color.RED,
        "CRITICAL": Color.MAGENTA,
    }
    RESET = Color.RESET

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors.

        The record is restored afterwards so other handlers (log file)
        do not receive escape codes.
        """
        levelname = record.levelname
        if levelname not in self.COLORS:
            return super().format(record)

        record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    use_colors: bool = True,
) -> None:
    """Configure logging.

    Handlers installed by an earlier call are replaced, so the CLI and the
    test session can both call this without duplicating output.

    Args:
        verbose: Enable DEBUG level (default: WARNING+ only)
        log_file: Optional file output path (always DEBUG)
        use_colors: Color console level names
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose or log_file else logging.WARNING)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_routecheck", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if use_colors:
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    console_handler._routecheck = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler._routecheck = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module.
    """
    return logging.getLogger(name)
