"""
Tests for logging setup.
"""
import logging
from logging.handlers import TimedRotatingFileHandler
from unittest.mock import patch

from showfinder.log_config import setup_logging


def test_setup_logging_adds_rotating_file_handler(tmp_path):
    log_dir = tmp_path / "log"
    handler = setup_logging(log_dir=str(log_dir), level=logging.INFO)
    try:
        assert isinstance(handler, TimedRotatingFileHandler)
        assert handler in logging.root.handlers
        assert (log_dir / "showfinder.log").exists()
        assert logging.getLogger("aiohttp.access").level == logging.WARN
    finally:
        logging.root.removeHandler(handler)
        handler.close()


def test_setup_logging_survives_unwritable_dir(tmp_path):
    with patch("showfinder.log_config.Path.mkdir", side_effect=PermissionError("read-only")):
        assert setup_logging(log_dir=str(tmp_path / "nope")) is None


def test_setup_logging_twice_keeps_one_file_handler(tmp_path):
    log_dir = tmp_path / "log"
    first = setup_logging(log_dir=str(log_dir), level=logging.INFO)
    try:
        second = setup_logging(log_dir=str(log_dir), level=logging.INFO)
        assert second is first
        file_handlers = [h for h in logging.root.handlers if getattr(h, "baseFilename", None) == first.baseFilename]
        assert len(file_handlers) == 1
    finally:
        logging.root.removeHandler(first)
        first.close()
