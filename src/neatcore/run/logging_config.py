"""
Logging configuration for neatcore.

The package logs through loguru and is disabled on import, so nothing is
emitted unless the application calls 'configure_logging()'. Only the sinks
added here are ever removed; sinks installed by the application are left alone.
"""

import sys
from pathlib import Path
from typing  import Optional

from loguru import logger

from neatcore.run.config import Config

# IDs of the loguru handlers added by 'configure_logging()'
_handler_ids: list[int] = []


def configure_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    format_string: Optional[str] = None,
    config: Optional[Config] = None,
) -> None:
    """
    Enable and configure logging for neatcore.

    Args:
        log_level: Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   If None, 'config.log_level' is used, or WARNING without a config.
        log_file: Optional log file path
        rotation: Log rotation size/time
        format_string: Custom format string
        config: Configuration supplying the level when 'log_level' is None
    """
    if log_level is None:
        log_level = config.log_level if config is not None else "WARNING"
    log_level = log_level.upper()

    # Replace the handlers from a previous call
    _remove_handlers()

    if format_string is None:
        format_string = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )

    # Console handler
    _handler_ids.append(logger.add(sys.stderr, format=format_string, level=log_level))

    # File handler
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(logger.add(str(log_file), format=format_string, level=log_level, rotation=rotation))

    logger.enable("neatcore")


def disable_logging() -> None:
    """Silence neatcore again (the state it is in right after import) and drop its sinks."""
    _remove_handlers()
    logger.disable("neatcore")


def _remove_handlers() -> None:
    while _handler_ids:
        logger.remove(_handler_ids.pop())
