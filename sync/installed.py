"""Detect which AI tools are installed by looking for their CLI executables."""

from __future__ import annotations

import shutil

from utils import get_logger

from .tools import DEFAULT_REGISTRY, ToolRegistry

logger = get_logger(__name__)


def detect_installed_tools(registry: ToolRegistry = DEFAULT_REGISTRY) -> list[str]:
    """Return ids of tools with at least one command on PATH, in registry order."""
    installed: list[str] = []
    for descriptor in registry.descriptors():
        for command in descriptor.commands:
            if shutil.which(command):
                logger.debug(f"Found {descriptor.id} via {command}")
                installed.append(descriptor.id)
                break
    return installed
