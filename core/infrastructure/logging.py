"""
Logging infrastructure.

Provides logging utilities for the infrastructure layer.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Output goes through the root logger only (see configure_logging), so
    loggers created at import time never print a line twice.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the API process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
