"""Registry of supported AI tools and their on-disk layout."""

from __future__ import annotations

from typing import Iterable

from .errors import UnknownToolError
from .types import ToolDescriptor

AI_TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        id="cursor",
        root_dir_name=".cursor",
        skills_subdir="skills",
        subagents_subdir="subagents",
        config_file_name="settings.json",
        commands=("cursor", "cursor-nightly"),
    ),
    ToolDescriptor(
        id="claude",
        root_dir_name=".claude",
        skills_subdir="skills",
        subagents_subdir="subagents",
        config_file_name="claude.json",
        commands=("claude",),
    ),
    ToolDescriptor(
        id="codex",
        root_dir_name=".codex",
        skills_subdir="skills",
        subagents_subdir="subagents",
        config_file_name="config.json",
        commands=("codex",),
    ),
    ToolDescriptor(
        id="windsurf",
        root_dir_name=".windsurf",
        skills_subdir="skills",
        subagents_subdir="subagents",
        config_file_name="settings.json",
        commands=("windsurf",),
    ),
    ToolDescriptor(
        id="aider",
        root_dir_name=".aider",
        skills_subdir="skills",
        subagents_subdir="subagents",
        config_file_name="aider.conf.yml",
        commands=("aider",),
    ),
    ToolDescriptor(
        id="opencode",
        root_dir_name=".opencode",
        skills_subdir="skills",
        subagents_subdir="subagents",
        config_file_name="settings.json",
        commands=("opencode",),
    ),
)


class ToolRegistry:
    """Static lookup table from tool id to its descriptor.

    The table is fixed once constructed; pass a different iterable of
    descriptors to support other tools (tests use this with a reduced table).
    """

    def __init__(self, descriptors: Iterable[ToolDescriptor] = AI_TOOLS) -> None:
        self._tools: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.id in self._tools:
                raise ValueError(f"Duplicate tool id: {descriptor.id}")
            self._tools[descriptor.id] = descriptor

    def lookup(self, tool_id: str) -> ToolDescriptor:
        try:
            return self._tools[tool_id]
        except KeyError:
            raise UnknownToolError(tool_id, self.list_ids()) from None

    def list_ids(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[ToolDescriptor]:
        return list(self._tools.values())

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools


DEFAULT_REGISTRY = ToolRegistry()
