from __future__ import annotations

import logging

from moldova.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def _own_handlers() -> list[logging.Handler]:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    return [h for h in logger.handlers if getattr(h, "_moldova_handler", False)]


def test_get_logger_namespaces() -> None:
    assert get_logger().name == "moldova"
    assert get_logger("cli").name == "moldova.cli"
    assert get_logger("moldova.cli").name == "moldova.cli"


def test_configure_logging_is_idempotent() -> None:
    configure_logging()
    configure_logging()
    assert len(_own_handlers()) == 1
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO


def test_verbose_enables_debug() -> None:
    logger = configure_logging(verbose=True)
    assert logger.level == logging.DEBUG
    assert _own_handlers()[0].level == logging.DEBUG
    configure_logging(verbose=False)
    assert logger.level == logging.INFO
