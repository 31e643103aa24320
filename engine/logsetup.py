"""Logging configuration for the host process."""

import logging
import sys


def setup_logging(level: str = "INFO", format_type: str = "structured") -> logging.Logger:
    """Install one stdout handler on the root logger and return the app logger."""

    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if format_type == "structured":
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        formatter = logging.Formatter('%(levelname)s - %(message)s')

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logger = logging.getLogger("sortvis")
    logger.setLevel(log_level)
    return logger
