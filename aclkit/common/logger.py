"""Logging infrastructure for aclkit.

Every library module logs under the ``aclkit`` logger hierarchy. As a
library, aclkit installs only a NullHandler on import; applications opt
in to output with setup_logger, or through the logging section of a
policy file.
"""

import logging
import logging.handlers
import os
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .config import LoggingConfig

ROOT_LOGGER = "aclkit"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"  # ISO 8601

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def _parse_level(level: str) -> int:
    level_upper = level.upper()
    if level_upper not in LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(LEVELS)}"
        )
    return getattr(logging, level_upper)


def _build_handlers(
    name: str,
    log_dir: str,
    file_logging: bool,
    console_logging: bool,
    max_bytes: int,
    backup_count: int,
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if file_logging:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                os.path.join(log_dir, f"{name}.log"),
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
        )

    if console_logging:
        handlers.append(logging.StreamHandler())

    return handlers


def setup_logger(
    name: str = ROOT_LOGGER,
    log_dir: str = "/var/log/aclkit",
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    file_logging: bool = False,
    console_logging: bool = True,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Attach output handlers to an aclkit logger.

    Calling this again for the same logger only updates the level; output
    handlers are installed once.

    Args:
        name: Logger name, ``aclkit`` covers every library module
        log_dir: Directory for the rotating log file
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string
        date_format: Custom date format string
        file_logging: Write to ``<log_dir>/<name>.log``
        console_logging: Write to stderr
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated files to keep

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is not a known logging level
    """
    logger = logging.getLogger(name)
    logger.setLevel(_parse_level(level))

    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    formatter = logging.Formatter(
        log_format or DEFAULT_FORMAT, datefmt=date_format or DEFAULT_DATE_FORMAT
    )
    for handler in _build_handlers(
        name, log_dir, file_logging, console_logging, max_bytes, backup_count
    ):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def setup_from_config(config: "LoggingConfig", name: str = ROOT_LOGGER) -> logging.Logger:
    """Set up a logger from the logging section of a policy file."""
    return setup_logger(
        name,
        log_dir=config.log_dir,
        level=config.level,
        file_logging=config.file_logging,
        console_logging=config.console_logging,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger, e.g. ``get_logger("aclkit.acl")``."""
    return logging.getLogger(name)
