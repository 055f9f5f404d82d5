"""Logging setup shared by the CLI and the HTTP server."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a stderr handler to the ``ecodamage`` logger.

    Calling it again replaces the handler installed by an earlier call, so the
    logger always writes to the current ``sys.stderr``.

    Args:
        level: Level name such as "INFO" or "DEBUG"

    Returns:
        The package logger
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("ecodamage")
    logger.setLevel(numeric_level)
    for handler in [h for h in logger.handlers if getattr(h, "_ecodamage", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ecodamage = True
    logger.addHandler(handler)
    return logger
