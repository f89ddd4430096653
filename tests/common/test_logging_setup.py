from __future__ import annotations

import io
import logging

from src.tutoring_center.tutoring_center.common.logging_setup import PACKAGE_LOGGER_NAME, configure_logging


def test_configure_logging_installs_one_handler_on_package_logger():
    stream = io.StringIO()

    configure_logging("debug")
    logger = configure_logging("warning", stream=stream)

    assert logger.name == PACKAGE_LOGGER_NAME == "src.tutoring_center.tutoring_center"
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING

    logging.getLogger(f"{PACKAGE_LOGGER_NAME}.holidays.calendar").warning("cache dropped")
    logging.getLogger(f"{PACKAGE_LOGGER_NAME}.holidays.calendar").info("ignored")

    output = stream.getvalue()
    assert "WARNING" in output and "cache dropped" in output
    assert "ignored" not in output
