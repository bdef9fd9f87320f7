"""Data models for skill/subagent synchronization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Whether a skill or subagent is a single file or a directory tree."""

    FILE = "file"
    DIRECTORY = "directory"


class Category(Enum):
    SKILL = "skill"
    SUBAGENT = "subagent"


class Outcome(Enum):
    """Per-operation outcome of a mirror."""

    WOULD_CREATE = "would-create"
    WOULD_UPDATE = "would-update"
    SKIPPED_EXISTS = "skipped-exists"
    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass(frozen=True)
class ToolDescriptor:
    """On-disk layout of one supported AI tool."""

    id: str
    root_dir_name: str
    skills_subdir: str
    subagents_subdir: str
    config_file_name: str
    commands: tuple[str, ...] = ()

    def subdir_for(self, category: Category) -> str:
        if category is Category.SKILL:
            return self.skills_subdir
        return self.subagents_subdir


@dataclass(frozen=True)
class EntryRef:
    path: Path
    name: str
    kind: EntryKind


@dataclass(frozen=True)
class DetectedTool:
    """A tool whose root directory exists in the scanned tree."""

    descriptor: ToolDescriptor
    root_path: Path
    skills: tuple[EntryRef, ...] = ()
    subagents: tuple[EntryRef, ...] = ()

    @property
    def id(self) -> str:
        return self.descriptor.id

    def entries(self, category: Category) -> tuple[EntryRef, ...]:
        if category is Category.SKILL:
            return self.skills
        return self.subagents

    def category_path(self, category: Category) -> Path:
        return self.root_path / self.descriptor.subdir_for(category)


@dataclass(frozen=True)
class SyncFilter:
    skills_only: bool = False
    subagents_only: bool = False

    def includes(self, category: Category) -> bool:
        if category is Category.SKILL:
            return not self.subagents_only
        return not self.skills_only


@dataclass(frozen=True)
class SyncMode:
    dry_run: bool = False
    force: bool = False


@dataclass(frozen=True)
class TransferOp:
    source_path: Path
    target_path: Path
    category: Category
    name: str
    source_kind: EntryKind

    @property
    def label(self) -> str:
        """Display label such as ``skill/review.md``."""
        return f"{self.category.value}/{self.name}"


@dataclass(frozen=True)
class OpResult:
    """Result of one transfer operation. ``error`` is set only for FAILED."""

    op: TransferOp
    outcome: Outcome
    error: OSError | None = None
    files_written: int = 0


@dataclass
class MirrorResult:
    """Ordered results of mirroring one tool into another."""

    source_id: str
    target_id: str
    results: list[OpResult] = field(default_factory=list)
    target_initialized: bool = False
    dry_run: bool = False
    nothing_to_mirror: bool = False

    def count(self, outcome: Outcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def failures(self) -> list[OpResult]:
        return [r for r in self.results if r.outcome is Outcome.FAILED]


@dataclass
class SyncResult:
    """Results of a full-mesh sync run."""

    tool_ids: list[str]
    pairs: list[MirrorResult] = field(default_factory=list)
    insufficient_tools: bool = False

    @property
    def failures(self) -> list[OpResult]:
        return [failure for pair in self.pairs for failure in pair.failures]


@dataclass(frozen=True)
class InitResult:
    """Paths created (or, under dry-run, that would be created) for a tool."""

    tool_id: str
    root_path: Path
    created: tuple[Path, ...] = ()
    already_existed: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class GlobalSkillEntry:
    name: str
    kind: EntryKind
    path: Path


class AddOutcome(Enum):
    ADDED = "added"
    REPLACED = "replaced"
    EXISTS = "exists"
    UNCHANGED = "unchanged"
    WOULD_ADD = "would-add"
    WOULD_REPLACE = "would-replace"


@dataclass(frozen=True)
class AddResult:
    name: str
    source_path: Path
    target_path: Path
    outcome: AddOutcome


class InstallOutcome(Enum):
    INSTALLED = "installed"
    SKIPPED_EXISTS = "skipped-exists"
    TOOL_MISSING = "tool-missing"
    WOULD_INSTALL = "would-install"


@dataclass(frozen=True)
class InstallResult:
    tool_id: str
    target_path: Path
    outcome: InstallOutcome
