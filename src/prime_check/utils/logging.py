"""Logger setup for command-line runs."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(
    name: str = "prime_check",
    verbose: bool = False,
    log_path: Path | None = None,
) -> logging.Logger:
    """Set up logger that writes to console and, optionally, a file.

    Args:
        name: Logger name. Child loggers of library modules propagate here.
        verbose: Emit DEBUG messages on the console instead of INFO.
        log_path: If given, also append everything at DEBUG level to this file.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Close and drop handlers from any earlier setup
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_path is not None:
        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger
