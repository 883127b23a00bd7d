"""Logging setup for the SVG preview package.

All modules obtain the shared package logger through ``get_logger()`` and
only emit records; handlers are installed once by ``setup_logging()``.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "jsx_svg_preview"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get the package logger or one of its children.

    Args:
        name: Optional child logger suffix (e.g. ``"extraction"``).

    Returns:
        Logger instance under the ``jsx_svg_preview`` namespace.
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def setup_logging(
    debug: bool = False,
    verbose: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the package logger with a single stream handler.

    Calling this again replaces the previous handler instead of stacking
    a new one.

    Args:
        debug: Enable DEBUG level output (skip diagnostics included).
        verbose: Enable INFO level output.
        stream: Output stream (default: stderr).

    Returns:
        The configured package logger.
    """
    logger = get_logger()

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    for handler in list(logger.handlers):
        if getattr(handler, "_preview_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._preview_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger
