"""Logging configuration with console and rotating file handlers"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Session log files kept on disk (including the new one)
KEEP_SESSIONS = 5


def _cleanup_old_sessions(log_path: Path, keep: int = KEEP_SESSIONS) -> None:
    """Delete the oldest session logs so that `keep` remain after this session starts"""
    pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing_logs = sorted(glob.glob(pattern), reverse=True)  # Newest first
    for old_log in existing_logs[keep - 1:]:
        try:
            Path(old_log).unlink()
        except OSError:
            logging.getLogger(__name__).debug(f"Could not delete old log {old_log}")


def setup_logging(
    log_file: Optional[str] = "logs/littlesearch.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
):
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation

    Rotation policy:
    - New log file per process start (timestamp-based naming)
    - Keep last 5 session files (older ones deleted on startup)
    - Auto-rotate when file reaches 10MB

    Args:
        log_file: Base path to log file; None disables the file handler
        console_level: Console logging level (INFO = brief)
        file_level: File logging level (DEBUG = verbose)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Console handler - brief output
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    # uvicorn access lines are noise next to index build logs
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    if log_file is None:
        logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, no log file")
        return

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _cleanup_old_sessions(log_path)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    # Rotating file handler - detailed output
    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
