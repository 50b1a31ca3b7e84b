"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers under the ``moldova`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - :func:`configure_logging` is idempotent; calling it twice never attaches
      a second handler.
    - Records still propagate to the root logger so host applications (and
      pytest's ``caplog``) see them.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "moldova"

_HANDLER_ATTR = "_moldova_handler"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger nested under the package namespace.

    ``name`` may be a dotted module path (``moldova.cli``) or a bare suffix
    (``cli``); both resolve to ``moldova.cli``.
    """

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    The level is ``DEBUG`` when ``verbose`` is set and ``INFO`` otherwise.
    Repeated calls only adjust the level and replace the handler when
    ``sys.stderr`` has been swapped since the last call.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)),
        None,
    )
    if handler is not None and getattr(handler, "stream", None) is not sys.stderr:
        logger.removeHandler(handler)
        handler = None
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    handler.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
