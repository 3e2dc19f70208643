"""
CLI Logging Configuration.

Errors and progress notes go to stderr; an optional rotating log file keeps a
history of sessions.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from cbct_preset_selector import APP_NAME


ROOT_LOGGER_NAME = "cbct_preset_selector"


def setup_logging(verbose: bool = False, log_dir: Optional[Path | str] = None) -> Optional[Path]:
    """
    Set up logging for the CLI.

    Parameters
    ----------
    verbose : bool
        Log DEBUG messages to stderr instead of INFO and above
    log_dir : Path or str, optional
        Directory for a rotating log file; no file is written when omitted

    Returns
    -------
    Path or None
        Path to the current log file, if file logging is enabled

    Notes
    -----
    - Calling this again replaces the handlers installed by a previous call
    - Log file rotates at 10 MB and keeps 5 backups
    - Log file format: timestamp | level | module | message
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    stream_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s %(levelname)-5s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(stream_handler)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = get_log_file_path(log_dir)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(file_handler)

    logger.debug("=" * 80)
    logger.debug("Session Started")
    logger.debug("=" * 80)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Parameters
    ----------
    name : str
        Module name (e.g., 'cbct_preset_selector.cli.resolver')
    """
    return logging.getLogger(name)


def get_log_file_path(log_dir: Path | str) -> Path:
    """Path to today's log file inside ``log_dir``."""
    return Path(log_dir) / f"{APP_NAME}_{datetime.now().strftime('%Y%m%d')}.log"
