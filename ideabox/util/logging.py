"""Logging configuration for the application."""

import logging
import sys

from ideabox.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Route-level and startup messages go through stdlib logging; domain
    services log through logfire.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    for noisy in ("httpx", "httpcore", "redis", "tldextract"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # Our application loggers stay at the configured level
    logging.getLogger("ideabox").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
