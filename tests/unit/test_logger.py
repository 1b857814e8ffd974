"""Unit tests for root logger configuration."""

import logging

import pytest

from tg_search_web.core import logger as logger_module

pytestmark = [pytest.mark.unit]


def test_repeated_setup_adds_no_handlers():
    root = logging.getLogger()
    logger_module.setup_logger()
    before = list(root.handlers)

    logger_module.setup_logger()
    logger_module.setup_logger("tg_search_web.client.api")

    assert root.handlers == before
    assert before


def test_named_logger_and_notice_level():
    logger = logger_module.setup_logger("tg_search_web.tests")
    assert logger.name == "tg_search_web.tests"
    assert logging.getLevelName(logger_module.NOTICE) == "NOTICE"


def test_file_handler_is_attached_once_per_file(tmp_path):
    target = logging.getLogger("tg_search_web.tests.file_handler")
    log_file = tmp_path / "web.log"
    try:
        logger_module._attach_file_handler(target, str(log_file))
        logger_module._attach_file_handler(target, str(log_file))

        file_handlers = [h for h in target.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(log_file.resolve())
        assert file_handlers[0].level == logger_module.LOGGING2FILE_LEVEL
    finally:
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
