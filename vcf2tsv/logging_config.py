"""Logging setup for command line runs.

Messages go to the console at the requested level. With a log directory,
everything down to DEBUG (including per-cell soft gaps) also goes to a
rotating file.
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def setup_logging(
    log_dir: Path | None = None,
    job_name: str = "vcf2tsv",
    console_level: int = logging.WARNING,
) -> Path | None:
    """Install console (and optional file) handlers on the root logger.

    Handlers from a previous call are closed and replaced.

    Args:
        log_dir: Directory for a timestamped log file; console only if None
        job_name: Prefix of the log file name
        console_level: Level for console messages

    Returns:
        Path of the log file, or None when logging to the console only
    """
    reset_logging()
    root_logger = logging.getLogger()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_dir is None:
        root_logger.setLevel(console_level)
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{job_name}_{datetime.now():%Y%m%d_%H%M%S}.log"

    file_handler = RotatingFileHandler(
        log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG)
    return log_file


def reset_logging() -> None:
    """Close and remove all root logger handlers."""
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
