"""Root logging configuration for the command line.

Log records go to stderr so stdout carries only the rendered tree.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "DIRTREE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Resolve ``level`` (or the env var, or the default) to a numeric level.

    Unknown names fall back to ``WARNING``.
    """
    resolved = level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    numeric_level = getattr(logging, resolved.strip().upper(), None)
    if not isinstance(numeric_level, int):
        return logging.WARNING
    return numeric_level


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure root logging with a stderr handler and return the package logger."""
    numeric_level = resolve_log_level(level)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logger = logging.getLogger("dirtree")
    logger.setLevel(numeric_level)
    logger.debug("logging configured at level %s", logging.getLevelName(numeric_level))
    return logger
