"""Unit tests for logging configuration."""

import logging

import pytest

from linemark.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_string_level(self):
        root = configure_logging("info")
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_unknown_level_uses_package_default(self):
        assert configure_logging("chatty").level == logging.WARNING

    def test_default_level(self):
        assert configure_logging().level == logging.WARNING
        assert resolve_log_level(None) == logging.WARNING

    def test_watchdog_quieted_below_trace(self):
        configure_logging("DEBUG")
        assert logging.getLogger("watchdog").level == logging.INFO

    def test_watchdog_verbose_in_trace_mode(self):
        configure_logging("DEBUG", trace_mode=True)
        assert logging.getLogger("watchdog").level == logging.DEBUG

    def test_trace_format(self):
        root = configure_logging(logging.DEBUG, trace_mode=True)
        assert "%(name)s" in root.handlers[0].formatter._fmt

    def test_log_file_tee(self, tmp_path):
        log_file = tmp_path / "linemark.log"
        root = configure_logging("DEBUG", log_file=str(log_file))
        assert len(root.handlers) == 2
        logging.getLogger("linemark.test").debug("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")
        root.handlers[1].close()

    def test_unwritable_log_file_is_a_warning(self, tmp_path):
        root = configure_logging("WARNING", log_file=str(tmp_path / "missing_dir" / "x.log"))
        assert len(root.handlers) == 1
