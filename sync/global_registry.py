"""Global skill registry: add a skill once, install it into many tools.

Skills live flat under ``~/.skill-sync/global-skills/<name>`` as a single file
or a directory. The registry root is injected so tests can point it at a
temporary directory.
"""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path

import aiofiles.os

from utils import get_logger

from .copier import copy, entry_kind
from .errors import (
    GlobalSkillNotFoundError,
    InvalidSkillNameError,
    InvalidSkillSourceError,
    NoToolsDetectedError,
    SkillNotFoundError,
)
from .scanner import RECOGNIZED_EXTENSIONS, detect_tool, scan
from .tools import DEFAULT_REGISTRY, ToolRegistry
from .types import (
    AddOutcome,
    AddResult,
    Category,
    EntryKind,
    GlobalSkillEntry,
    InstallOutcome,
    InstallResult,
)

logger = get_logger(__name__)

# Tools whose skills directories ``add`` searches when no source is given.
FALLBACK_TOOLS = ("cursor", "claude")


def validate_name(name: str) -> str:
    """Return ``name`` if it is a single path component, else raise InvalidSkillNameError."""
    separators = {sep for sep in ("/", "\\", os.sep, os.altsep) if sep}
    if name in ("", ".", "..") or any(sep in name for sep in separators):
        raise InvalidSkillNameError(name)
    return name


async def remove_path(path: Path) -> None:
    if not await aiofiles.os.path.exists(path):
        return
    if await aiofiles.os.path.isdir(path):
        await asyncio.to_thread(shutil.rmtree, path)
    else:
        await aiofiles.os.remove(path)


class GlobalSkillRegistry:
    """Tool-independent store of skills keyed by name."""

    def __init__(self, root: Path, tool_registry: ToolRegistry = DEFAULT_REGISTRY) -> None:
        self.root = Path(root).expanduser()
        self.tool_registry = tool_registry

    async def ensure(self) -> Path:
        await aiofiles.os.makedirs(self.root, exist_ok=True)
        return self.root

    async def list(self) -> list[GlobalSkillEntry]:
        """List registry entries sorted by name. A missing root is empty."""

        def _collect() -> list[GlobalSkillEntry]:
            with os.scandir(self.root) as it:
                return [
                    GlobalSkillEntry(
                        name=entry.name,
                        kind=EntryKind.DIRECTORY if entry.is_dir() else EntryKind.FILE,
                        path=self.root / entry.name,
                    )
                    for entry in it
                ]

        try:
            entries = await asyncio.to_thread(_collect)
        except FileNotFoundError:
            return []
        return sorted(entries, key=lambda e: e.name)

    async def get(self, name: str) -> GlobalSkillEntry | None:
        """Find an entry by exact name, or by name plus a recognized extension."""
        validate_name(name)
        for candidate in (name, *(name + ext for ext in RECOGNIZED_EXTENSIONS)):
            path = self.root / candidate
            if await aiofiles.os.path.exists(path):
                return GlobalSkillEntry(name=candidate, kind=await entry_kind(path), path=path)
        return None

    def fallback_candidates(self, name: str, cwd: Path) -> list[Path]:
        candidates: list[Path] = []
        for tool_id in FALLBACK_TOOLS:
            descriptor = self.tool_registry.lookup(tool_id)
            skills_dir = Path(cwd) / descriptor.root_dir_name / descriptor.skills_subdir
            candidates.append(skills_dir / name)
            candidates.append(skills_dir / f"{name}.md")
        return candidates

    async def _resolve_source(self, name: str, source: Path | None, cwd: Path) -> Path:
        if source is not None:
            path = Path(source).expanduser()
            if not await aiofiles.os.path.exists(path):
                raise SkillNotFoundError(name, [path])
            return path

        candidates = self.fallback_candidates(name, cwd)
        for candidate in candidates:
            if await aiofiles.os.path.exists(candidate):
                return candidate
        raise SkillNotFoundError(name, candidates)

    async def add(
        self,
        name: str,
        source: Path | None = None,
        cwd: Path = Path("."),
        force: bool = False,
        dry_run: bool = False,
    ) -> AddResult:
        """Copy a skill into the registry under ``name``.

        When ``source`` is omitted the current directory's cursor and claude
        skills directories are searched. A single-file source keeps its
        extension if ``name`` has none, so installed copies stay visible to
        the scanner. A forced replace copies into a staging entry first and
        only then swaps it in, so a failed copy keeps the old entry.

        Raises:
            InvalidSkillNameError: If ``name`` is not a single path component
            SkillNotFoundError: If no source could be found
            InvalidSkillSourceError: If the source directory contains the registry
        """
        validate_name(name)
        source_path = await self._resolve_source(name, source, cwd)
        kind = await entry_kind(source_path)

        entry_name = name
        if kind is EntryKind.FILE and not Path(name).suffix and source_path.suffix:
            entry_name = name + source_path.suffix
        target = self.root / entry_name

        resolved_source = source_path.resolve()
        if resolved_source in target.resolve().parents:
            raise InvalidSkillSourceError(source_path, target)

        existing = await self.get(entry_name)
        if existing is not None:
            resolved_existing = existing.path.resolve()
            if resolved_source == resolved_existing or resolved_existing in resolved_source.parents:
                logger.info(f"Global skill {entry_name} is already the source {source_path}")
                return AddResult(entry_name, source_path, existing.path, AddOutcome.UNCHANGED)
            if not force:
                logger.warning(f"Global skill {entry_name} already exists at {existing.path}")
                return AddResult(entry_name, source_path, existing.path, AddOutcome.EXISTS)

        if dry_run:
            outcome = AddOutcome.WOULD_REPLACE if existing is not None else AddOutcome.WOULD_ADD
            return AddResult(entry_name, source_path, target, outcome)

        await self.ensure()
        staging = self.root / f".{entry_name}.partial"
        await remove_path(staging)
        try:
            await copy(source_path, staging, overwrite=True, kind=kind)
        except OSError:
            await remove_path(staging)
            raise
        if existing is not None:
            await remove_path(existing.path)
        await aiofiles.os.rename(staging, target)

        logger.info(f"Added global skill {entry_name} from {source_path}")
        outcome = AddOutcome.REPLACED if existing is not None else AddOutcome.ADDED
        return AddResult(entry_name, source_path, target, outcome)

    async def install(
        self,
        name: str,
        tool_id: str | None = None,
        root_path: Path = Path("."),
        dry_run: bool = False,
    ) -> list[InstallResult]:
        """Install a registry skill into one tool, or every detected tool.

        Installs never overwrite and never initialize missing tool directories.
        With ``dry_run`` each tool that would receive the skill is reported as
        WOULD_INSTALL and nothing is copied.

        Raises:
            InvalidSkillNameError: If ``name`` is not a single path component
            GlobalSkillNotFoundError: If ``name`` is not in the registry
            UnknownToolError: If ``tool_id`` is not registered
            NoToolsDetectedError: If no tool is given and none are detected
        """
        entry = await self.get(name)
        if entry is None:
            raise GlobalSkillNotFoundError(name)

        if tool_id is not None:
            descriptor = self.tool_registry.lookup(tool_id)
            targets = [(descriptor, await detect_tool(root_path, descriptor))]
        else:
            detected = await scan(root_path, self.tool_registry)
            if not detected:
                raise NoToolsDetectedError()
            targets = [(tool.descriptor, tool) for tool in detected.values()]

        results: list[InstallResult] = []
        for descriptor, tool in targets:
            if tool is None:
                missing = Path(root_path).resolve() / descriptor.root_dir_name
                logger.warning(f"Skipping {descriptor.id}: {missing} does not exist")
                results.append(InstallResult(descriptor.id, missing, InstallOutcome.TOOL_MISSING))
                continue

            target = tool.category_path(Category.SKILL) / entry.name
            if await aiofiles.os.path.exists(target):
                results.append(InstallResult(descriptor.id, target, InstallOutcome.SKIPPED_EXISTS))
                continue

            if dry_run:
                results.append(InstallResult(descriptor.id, target, InstallOutcome.WOULD_INSTALL))
                continue

            await copy(entry.path, target, overwrite=False, kind=entry.kind)
            logger.info(f"Installed global skill {entry.name} into {descriptor.id}")
            results.append(InstallResult(descriptor.id, target, InstallOutcome.INSTALLED))
        return results
