"""One-directional mirroring of skills and subagents between two tools."""

from __future__ import annotations

from pathlib import Path

import aiofiles.os

from utils import get_logger

from .copier import copy
from .errors import SourceNotFoundError
from .scaffold import init_descriptor
from .scanner import detect_tool, scan
from .tools import DEFAULT_REGISTRY, ToolRegistry
from .types import (
    Category,
    DetectedTool,
    EntryKind,
    MirrorResult,
    OpResult,
    Outcome,
    SyncFilter,
    SyncMode,
    TransferOp,
)

logger = get_logger(__name__)


def build_transfer_ops(
    source: DetectedTool, target: DetectedTool, sync_filter: SyncFilter
) -> list[TransferOp]:
    """Plan one TransferOp per source entry that passes the category filter.

    Skills come before subagents; within a category the scan order is kept.
    Target paths keep the entry name verbatim.
    """
    ops: list[TransferOp] = []
    for category in (Category.SKILL, Category.SUBAGENT):
        if not sync_filter.includes(category):
            continue
        target_dir = target.category_path(category)
        for entry in source.entries(category):
            ops.append(
                TransferOp(
                    source_path=entry.path,
                    target_path=target_dir / entry.name,
                    category=category,
                    name=entry.name,
                    source_kind=entry.kind,
                )
            )
    return ops


async def apply_op(op: TransferOp, mode: SyncMode) -> OpResult:
    """Apply (or simulate) a single transfer.

    An existing target is skipped unless ``force``, except that a directory
    source over an existing directory is merged: missing files are filled in
    and existing files kept; it counts as skipped when nothing was missing.
    Filesystem errors are returned as a FAILED result rather than raised.
    """
    exists = await aiofiles.os.path.exists(op.target_path)

    if mode.dry_run:
        return OpResult(op, Outcome.WOULD_UPDATE if exists else Outcome.WOULD_CREATE)

    merge = op.source_kind is EntryKind.DIRECTORY and await aiofiles.os.path.isdir(op.target_path)
    if exists and not mode.force and not merge:
        return OpResult(op, Outcome.SKIPPED_EXISTS)

    try:
        written = await copy(
            op.source_path, op.target_path, overwrite=mode.force, kind=op.source_kind
        )
    except OSError as e:
        logger.warning(f"Failed to copy {op.source_path} -> {op.target_path}: {e}")
        return OpResult(op, Outcome.FAILED, error=e)

    if exists and not mode.force and written == 0:
        return OpResult(op, Outcome.SKIPPED_EXISTS)

    outcome = Outcome.UPDATED if exists else Outcome.CREATED
    logger.debug(f"{outcome.value}: {op.label} ({written} files)")
    return OpResult(op, outcome, files_written=written)


async def _resolve_target(
    root_path: Path,
    target_id: str,
    registry: ToolRegistry,
    detected: dict[str, DetectedTool],
    mode: SyncMode,
) -> tuple[DetectedTool, bool]:
    """Return the target tool, initializing its directories if it is absent.

    In dry-run mode nothing is created; an empty stand-in is returned instead.
    """
    target = detected.get(target_id)
    if target is not None:
        return target, False

    descriptor = registry.lookup(target_id)
    if mode.dry_run:
        root = Path(root_path).resolve() / descriptor.root_dir_name
        return DetectedTool(descriptor=descriptor, root_path=root), True

    logger.info(f'Target tool "{target_id}" not found, initializing')
    init = await init_descriptor(root_path, descriptor)
    target = await detect_tool(root_path, descriptor)
    return target or DetectedTool(descriptor=descriptor, root_path=init.root_path), True


async def mirror(
    source_id: str,
    target_id: str,
    sync_filter: SyncFilter = SyncFilter(),
    mode: SyncMode = SyncMode(),
    root_path: Path = Path("."),
    registry: ToolRegistry = DEFAULT_REGISTRY,
    detected: dict[str, DetectedTool] | None = None,
) -> MirrorResult:
    """Mirror skills/subagents from one tool into another.

    Args:
        source_id: Tool to copy from
        target_id: Tool to copy into (initialized if absent); the same id as
            ``source_id`` mirrors nothing
        sync_filter: Category filter
        mode: Dry-run / force flags
        root_path: Working tree containing the tool directories
        registry: Tool descriptor table
        detected: Scan snapshot to reuse; scanned fresh when None

    Returns:
        MirrorResult with one OpResult per planned transfer, in order

    Raises:
        UnknownToolError: If either tool id is not registered
        SourceNotFoundError: If the source tool directory does not exist
        ScanError: If scanning the tree fails
    """
    registry.lookup(source_id)
    registry.lookup(target_id)

    if detected is None:
        detected = await scan(root_path, registry)

    source = detected.get(source_id)
    if source is None:
        raise SourceNotFoundError(source_id)

    if source_id == target_id:
        logger.info(f"Skipping mirror of {source_id} onto itself")
        return MirrorResult(
            source_id=source_id, target_id=target_id, dry_run=mode.dry_run, nothing_to_mirror=True
        )

    target, initialized = await _resolve_target(root_path, target_id, registry, detected, mode)
    result = MirrorResult(
        source_id=source_id,
        target_id=target_id,
        target_initialized=initialized,
        dry_run=mode.dry_run,
    )

    ops = build_transfer_ops(source, target, sync_filter)
    if not ops:
        result.nothing_to_mirror = True
        return result

    for op in ops:
        result.results.append(await apply_op(op, mode))
    return result
