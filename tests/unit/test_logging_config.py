"""Unit tests for logging setup"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from littlesearch.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back afterwards"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:

    def test_console_only(self):
        setup_logging(log_file=None, console_level=logging.WARNING)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_session_file_created(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "logs" / "search.log"))

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert list((tmp_path / "logs").glob("search_*.log"))

    def test_old_sessions_cleaned_up(self, tmp_path):
        for i in range(7):
            (tmp_path / f"search_20240101_00000{i}.log").write_text("old\n")

        setup_logging(log_file=str(tmp_path / "search.log"))

        # 4 newest old sessions + the new one
        remaining = sorted(p.name for p in tmp_path.glob("search_*.log"))
        assert len(remaining) == 5
        assert "search_20240101_000000.log" not in remaining
