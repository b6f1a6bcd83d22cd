"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from mimic.core.observability.logging_config import parse_level, setup_logging


class TestParseLevel:
    def test_known(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("ERROR") == logging.ERROR

    def test_unknown_falls_back_to_warning(self):
        assert parse_level("chatty") == logging.WARNING
        assert parse_level(None) == logging.WARNING


class TestSetupLogging:
    def test_console_level(self):
        logger = setup_logging(level="INFO")
        root = logging.getLogger()
        assert logger.name == "mimic"
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_debug_format_has_location(self):
        setup_logging(level="DEBUG")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(lineno)d" in fmt

    def test_log_file(self, tmp_path: Path):
        log_file = tmp_path / "mimic.log"
        logger = setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        logger.debug("staged file x.yaml")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "staged file x.yaml" in log_file.read_text()

    def test_warning_format_is_bare_message(self):
        setup_logging(level="WARNING")
        assert logging.getLogger().handlers[0].formatter._fmt == "%(message)s"

    def test_info_format_has_time_without_logger_name(self):
        setup_logging(level="INFO")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(asctime)s" in fmt
        assert "%(name)s" not in fmt
