"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow optional verbose/debug modes for the command line.

Inputs/Outputs:
    - Inputs: module name and verbosity settings.
    - Outputs: `logging.Logger` instances under the ``regexcollection`` namespace.

Notes/Edge cases:
    - Library code only ever installs a ``NullHandler``; handlers are attached
      by :func:`configure_logging`, which the CLI calls.
    - Logging configuration is idempotent.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "regexcollection"
_HANDLER_NAME = "regexcollection-cli"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package namespace.

    ``name`` may be a dotted module name (``regexcollection.patterns``) or a
    short suffix (``patterns``); ``None`` returns the package logger itself.
    """

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Repeated calls swap the previous handler for one bound to the current
    ``sys.stderr``; the package logger never carries more than one.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    for old in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
