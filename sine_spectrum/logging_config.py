"""
Logging Configuration
Diagnostics go to stderr; stdout carries the program's own output lines.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configures the 'sine_spectrum' logger with a single stream handler.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        stream: Where records are written, stderr when omitted.
    """
    logger = logging.getLogger("sine_spectrum")
    logger.setLevel(level)

    # Calling again replaces the handler instead of adding a second one
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger
