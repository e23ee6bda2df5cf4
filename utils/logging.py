"""Centralized logging configuration for the Finnhub client."""

import logging
import os
import sys

# httpx logs full request URLs at INFO, which would include the API token
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure root logger from environment variables."""
    level = level or os.getenv("LOG_LEVEL", "INFO")
    fmt = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Always include console handler
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    # Add file handler if LOG_FILE is set
    log_file = os.getenv("LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level.upper(),
        format=fmt,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
