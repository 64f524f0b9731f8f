"""
Tests for logging configuration.
"""

import json
import logging
import sys

import pytest

from genai_audit.config import Settings
from genai_audit.logging_config import PACKAGE_LOGGER, JsonFormatter, setup_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, propagate = logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only(self):
        logger = setup_logging(
            config=Settings(log_console_enabled=True, log_file_enabled=False)
        )

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_level_from_settings(self):
        logger = setup_logging(config=Settings(log_level="debug"))

        assert logger.level == logging.DEBUG

    def test_file_handler_writes_context_log(self, tmp_path):
        config = Settings(
            log_console_enabled=False,
            log_file_enabled=True,
            log_dir=str(tmp_path),
        )
        logger = setup_logging(context="worker", config=config)

        logging.getLogger("genai_audit.services.base").info("created model 1")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "worker.log"
        assert log_file.exists()
        assert "created model 1" in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self):
        config = Settings(log_console_enabled=True, log_file_enabled=False)
        setup_logging(config=config)
        logger = setup_logging(config=config)

        assert len(logger.handlers) == 1

    def test_all_handlers_disabled(self):
        logger = setup_logging(
            config=Settings(log_console_enabled=False, log_file_enabled=False)
        )

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_json_format(self, tmp_path):
        config = Settings(
            log_console_enabled=False,
            log_file_enabled=True,
            log_dir=str(tmp_path),
            log_format="json",
        )
        logger = setup_logging(context="json", config=config)

        logger.warning("soft-deleted %s", "conversation")
        for handler in logger.handlers:
            handler.flush()

        line = (tmp_path / "json.log").read_text().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["level"] == "WARNING"
        assert payload["logger"] == PACKAGE_LOGGER
        assert payload["message"] == "soft-deleted conversation"


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_includes_exception(self):
        formatter = JsonFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "genai_audit",
                logging.ERROR,
                __file__,
                1,
                "failed",
                None,
                sys.exc_info(),
            )

        payload = json.loads(formatter.format(record))
        assert payload["message"] == "failed"
        assert "ValueError: boom" in payload["exception"]
