"""Skill and subagent synchronization across AI tool directories."""

import logging

from .engine import build_transfer_ops, mirror
from .errors import (
    GlobalSkillNotFoundError,
    InvalidSkillNameError,
    InvalidSkillSourceError,
    NoToolsDetectedError,
    ScanError,
    SkillNotFoundError,
    SkillSyncError,
    SourceNotFoundError,
    UnknownToolError,
)
from .global_registry import GlobalSkillRegistry
from .orchestrator import sync_all
from .installed import detect_installed_tools
from .scaffold import init_tool
from .scanner import scan
from .tools import AI_TOOLS, DEFAULT_REGISTRY, ToolRegistry
from .types import Outcome, SyncFilter, SyncMode

__all__ = [
    "AI_TOOLS",
    "DEFAULT_REGISTRY",
    "GlobalSkillNotFoundError",
    "GlobalSkillRegistry",
    "InvalidSkillNameError",
    "InvalidSkillSourceError",
    "NoToolsDetectedError",
    "Outcome",
    "ScanError",
    "SkillNotFoundError",
    "SkillSyncError",
    "SourceNotFoundError",
    "SyncFilter",
    "SyncMode",
    "ToolRegistry",
    "UnknownToolError",
    "build_transfer_ops",
    "detect_installed_tools",
    "init_tool",
    "mirror",
    "scan",
    "sync_all",
]

# Records only reach a handler once --verbose calls setup_logger()
logging.getLogger(__name__).addHandler(logging.NullHandler())
