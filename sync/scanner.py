"""Detect AI tool directories and enumerate their skills and subagents."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import aiofiles.os

from utils import get_logger

from .errors import ScanError
from .tools import DEFAULT_REGISTRY, ToolRegistry
from .types import Category, DetectedTool, EntryKind, EntryRef, ToolDescriptor

logger = get_logger(__name__)

# File entries with any other extension are ignored; directories always count.
RECOGNIZED_EXTENSIONS = (".md", ".json")


def _classify(entry: os.DirEntry) -> EntryKind | None:
    if entry.is_dir():
        return EntryKind.DIRECTORY
    if entry.name.endswith(RECOGNIZED_EXTENSIONS):
        return EntryKind.FILE
    return None


async def list_entries(directory: Path) -> tuple[EntryRef, ...]:
    """List skill/subagent entries directly under ``directory``.

    A missing directory yields an empty tuple. Any other read failure is
    raised as ScanError. Order follows the filesystem listing.
    """

    def _collect() -> list[EntryRef]:
        results: list[EntryRef] = []
        with os.scandir(directory) as it:
            for entry in it:
                kind = _classify(entry)
                if kind is None:
                    continue
                results.append(EntryRef(path=directory / entry.name, name=entry.name, kind=kind))
        return results

    try:
        return tuple(await asyncio.to_thread(_collect))
    except FileNotFoundError:
        return ()
    except OSError as e:
        raise ScanError(directory, e) from e


async def detect_tool(root_path: Path, descriptor: ToolDescriptor) -> DetectedTool | None:
    """Scan a single tool under ``root_path``; None if its root directory is absent."""
    tool_path = Path(root_path).resolve() / descriptor.root_dir_name
    if not await aiofiles.os.path.isdir(tool_path):
        return None

    skills = await list_entries(tool_path / descriptor.subdir_for(Category.SKILL))
    subagents = await list_entries(tool_path / descriptor.subdir_for(Category.SUBAGENT))
    logger.debug(
        f"Detected {descriptor.id} at {tool_path}: "
        f"{len(skills)} skills, {len(subagents)} subagents"
    )
    return DetectedTool(
        descriptor=descriptor,
        root_path=tool_path,
        skills=skills,
        subagents=subagents,
    )


async def scan(
    root_path: Path, registry: ToolRegistry = DEFAULT_REGISTRY
) -> dict[str, DetectedTool]:
    """Detect every registered tool present under ``root_path``.

    The result is keyed by tool id in registry order. It is a fresh snapshot;
    callers must re-scan rather than keep it across operations.
    """
    detected: dict[str, DetectedTool] = {}
    for descriptor in registry.descriptors():
        tool = await detect_tool(root_path, descriptor)
        if tool is not None:
            detected[descriptor.id] = tool
    return detected
