"""
Library-wide constants and logging setup.
"""
import logging
from typing import Optional

from pymeshdecimator.utils.helpers import to_single


class Settings:
    """
    Constants shared by the vector types and the logging setup.
    """

    EPSILON: float = to_single(9.99999944e-11)
    """
    Magnitude at or below which a vector normalizes to zero, and the squared
    distance below which two vectors compare equal.
    """

    DEFAULT_FLOAT_FORMAT: str = "F1"
    """Component format used by str() on a vector."""

    LOGGER_NAME: str = "pymeshdecimator"
    """Name of the package logger."""

    LOG_LEVEL: int = logging.WARNING
    """Level applied by configure_logging() when none is given."""

    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Format of the handler attached by configure_logging()."""


class PackageStreamHandler(logging.StreamHandler):
    """Console handler attached to the package logger by configure_logging()."""


def configure_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Attaches a console handler to the package logger and sets its level.

    Calling this more than once only updates the level. The root logger is
    left alone.
    """
    pkg_logger = logging.getLogger(Settings.LOGGER_NAME)
    pkg_logger.setLevel(Settings.LOG_LEVEL if level is None else level)
    if not any(isinstance(h, PackageStreamHandler) for h in pkg_logger.handlers):
        console_handler = PackageStreamHandler()
        console_handler.setFormatter(logging.Formatter(Settings.LOG_FORMAT))
        pkg_logger.addHandler(console_handler)
    return pkg_logger
