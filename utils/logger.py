"""Logging for skill-sync.

Modules log through ``get_logger(__name__)``. Nothing is recorded unless
``--verbose`` calls :func:`setup_logger`, which writes a per-run file under
``~/.skill-sync/logs/``. Skipped and failed copies, missing install targets
and target auto-initialization are logged there; warnings such as a failed
per-file copy also reach stderr.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .runtime import get_log_dir

_logging_initialized = False
_log_file_path = None


def setup_logger(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
    log_to_console: bool = True,
) -> None:
    """Start the per-run log file for a verbose skill-sync invocation.

    Safe to call more than once; only the first call installs handlers.

    Args:
        log_dir: Directory for ``skill_sync_<timestamp>.log`` (default: ~/.skill-sync/logs/)
        log_level: Level for the log file; defaults to ``Config.LOG_LEVEL``
        log_to_console: Echo WARNING and above (failed copies, missing tools) to stderr
    """
    global _logging_initialized, _log_file_path

    if _logging_initialized:
        return

    if log_dir is None:
        log_dir = get_log_dir()

    if log_level is None:
        from config import Config

        log_level = Config.LOG_LEVEL

    level = getattr(logging, log_level.upper(), logging.DEBUG)
    logging.root.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True, parents=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_path / f"skill_sync_{timestamp}.log"
    _log_file_path = str(log_file)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logging.root.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        logging.root.addHandler(console_handler)

    _logging_initialized = True

    logging.info(f"skill-sync logging started. Level: {log_level}, File: {_log_file_path}")


def get_logger(name: str) -> logging.Logger:
    """Logger for a sync module; silent until setup_logger() has run."""
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    """Path of this run's log file, printed after a verbose command; None otherwise."""
    return _log_file_path
