"""Configuration management for skill-sync."""

import os

# Paths are defined here rather than imported from utils.runtime
# (utils.terminal_ui imports Config, and utils.runtime is in the utils package)
_RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".skill-sync")
_CONFIG_FILE = os.path.join(_RUNTIME_DIR, "config")

# Default configuration template
_DEFAULT_CONFIG = """\
# skill-sync Configuration

# Global skill registry location
GLOBAL_SKILLS_DIR=~/.skill-sync/global-skills

# Re-scan the working tree before each tool pair during `sync`
# (false: one scan per run)
SYNC_RESCAN_EACH_PAIR=false

# Logging (only active with --verbose)
LOG_LEVEL=DEBUG

# Terminal theme: dark or light
TUI_THEME=dark
"""


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            # Strip inline comments (# ...) from the value
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


def _ensure_config():
    """Ensure ~/.skill-sync/config exists, create with defaults if not.

    A read-only home directory leaves the defaults in effect.
    """
    if os.path.exists(_CONFIG_FILE):
        return
    try:
        os.makedirs(_RUNTIME_DIR, exist_ok=True)
        with open(_CONFIG_FILE, "w", encoding="utf-8") as f:
            f.write(_DEFAULT_CONFIG)
    except OSError:
        pass


# Ensure config exists and load it
_ensure_config()
_cfg = _load_config(_CONFIG_FILE)


class Config:
    """Configuration for skill-sync.

    All configuration is centralized here. Access config values directly via Config.XXX.
    """

    # Global skill registry root
    GLOBAL_SKILLS_DIR = os.path.expanduser(
        _cfg.get("GLOBAL_SKILLS_DIR") or os.path.join(_RUNTIME_DIR, "global-skills")
    )

    # Sync behaviour
    SYNC_RESCAN_EACH_PAIR = _cfg.get("SYNC_RESCAN_EACH_PAIR", "false").lower() == "true"

    # Logging Configuration
    # Note: Logging is controlled via --verbose flag; files go to ~/.skill-sync/logs/
    LOG_LEVEL = _cfg.get("LOG_LEVEL", "DEBUG").upper()

    # Terminal Configuration
    TUI_THEME = _cfg.get("TUI_THEME", "dark")  # "dark" or "light"

    @classmethod
    def validate(cls):
        """Validate configuration values.

        Raises:
            ValueError: If a configuration value is invalid
        """
        if cls.TUI_THEME not in ("dark", "light"):
            raise ValueError(
                f"TUI_THEME must be 'dark' or 'light', got '{cls.TUI_THEME}'. "
                "Please fix it in ~/.skill-sync/config."
            )
        if not cls.GLOBAL_SKILLS_DIR:
            raise ValueError("GLOBAL_SKILLS_DIR not set. Please set it in ~/.skill-sync/config.")
