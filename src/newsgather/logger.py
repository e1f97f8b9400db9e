"""Logging configuration for newsgather."""

import logging
import sys

from newsgather.config import settings

# Single app logger shared by every module
logger = logging.getLogger("newsgather")


def setup_logging() -> None:
    """Configure application logging.

    Logs to stderr so stdout stays free for the MCP transport.
    The newsgather logger level follows NEWSGATHER_DEBUG.
    """
    # Drop handlers left over from a previous call
    logging.root.handlers = []

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    app_log_level = logging.DEBUG if settings.newsgather_debug else logging.INFO
    logger.setLevel(app_log_level)

    logger.info(
        "newsgather logging initialized at %s level", logging.getLevelName(app_log_level)
    )
