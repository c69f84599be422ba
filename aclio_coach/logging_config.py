"""
Logging configuration for aclio_coach.

All modules log through loguru's shared ``logger``; this module only decides
where the records go.
"""

import sys
from typing import Optional

from loguru import logger

from .config import get_cli_setting

VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(level: Optional[str] = None) -> str:
    """Pick the log level from the argument or config, defaulting to INFO."""
    candidate = (level or get_cli_setting("logging", "log_level", "INFO") or "INFO").upper()
    if candidate not in VALID_LEVELS:
        logger.warning(f"Unknown log level '{candidate}', using INFO")
        return "INFO"
    return candidate


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None, console: bool = True) -> str:
    """
    Configure loguru sinks. Call once at startup.

    Returns the level that was applied.
    """
    resolved = resolve_log_level(level)
    log_file = log_file if log_file is not None else get_cli_setting("logging", "log_file", "")

    logger.remove()  # Remove default handler
    if console:
        logger.add(
            sink=sys.stderr,
            level=resolved,
            colorize=True,
        )
    if log_file:
        logger.add(
            sink=log_file,
            level=resolved,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )

    logger.info(f"Logging configured: level={resolved}, file={log_file or 'none'}")
    return resolved
