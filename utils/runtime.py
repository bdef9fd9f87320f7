"""Runtime directory management for skill-sync.

All runtime data is stored under ~/.skill-sync/:
- config: Configuration file (created by config.py on first import)
- global-skills/: Global skill registry (location configurable)
- logs/: Log files (only created with --verbose)
"""

import os

RUNTIME_DIR_NAME = ".skill-sync"


def get_runtime_dir() -> str:
    """Get the runtime directory path.

    Resolved on every call so a changed HOME (tests) is honoured.

    Returns:
        Path to ~/.skill-sync directory
    """
    return os.path.join(os.path.expanduser("~"), RUNTIME_DIR_NAME)


def get_log_dir() -> str:
    """Get the log directory path.

    Returns:
        Path to ~/.skill-sync/logs/
    """
    return os.path.join(get_runtime_dir(), "logs")


def ensure_runtime_dirs(create_logs: bool = False) -> None:
    """Ensure runtime directories exist.

    Creates ~/.skill-sync/ and, with create_logs=True, ~/.skill-sync/logs/.
    The global registry directory is created lazily by the registry itself.

    Args:
        create_logs: Whether to create the logs directory (for --verbose mode)
    """
    os.makedirs(get_runtime_dir(), exist_ok=True)

    if create_logs:
        os.makedirs(get_log_dir(), exist_ok=True)
