"""Tests for the structured logger."""

import importlib
import logging

from bizinsight.utils.logger import Logger, logger


def test_logger_module_imports_cleanly():
    module = importlib.import_module("bizinsight.utils.logger")

    assert isinstance(module.logger, Logger)
    assert module.logger is Logger()


def test_keyword_fields_become_record_attributes(caplog):
    with caplog.at_level(logging.INFO, logger="bizinsight"):
        logger.info("Chat reply received", message_id=4, log_level="INFO")

    record = caplog.records[-1]
    assert record.getMessage() == "Chat reply received"
    assert record.message_id == 4
    assert record.log_level == "INFO"


def test_error_records_caller_location(caplog):
    with caplog.at_level(logging.ERROR, logger="bizinsight"):
        logger.error("Chat failed", error="boom")

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.error == "boom"
    assert record.file.rsplit(":", 1)[0].endswith("test_logger.py")


def test_exception_attaches_traceback(caplog):
    with caplog.at_level(logging.ERROR, logger="bizinsight"):
        try:
            raise RuntimeError("connection reset")
        except RuntimeError:
            logger.exception("Chat request failed", error_type="RuntimeError")

    record = caplog.records[-1]
    assert record.exc_info is not None
    assert record.exc_info[0] is RuntimeError
    assert record.error_type == "RuntimeError"
    assert record.file.rsplit(":", 1)[0].endswith("test_logger.py")


def test_process_moves_fields_into_extra():
    msg, kwargs = logger.process("hello", {"foo": "bar", "stacklevel": 2})

    assert msg == "hello"
    assert kwargs == {"extra": {"foo": "bar"}, "stacklevel": 2}
