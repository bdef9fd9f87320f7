"""Full-mesh synchronization across every detected tool."""

from __future__ import annotations

from pathlib import Path

from utils import get_logger

from .engine import mirror
from .scanner import scan
from .tools import DEFAULT_REGISTRY, ToolRegistry
from .types import SyncFilter, SyncMode, SyncResult

logger = get_logger(__name__)

MIN_TOOLS = 2


async def sync_all(
    sync_filter: SyncFilter = SyncFilter(),
    mode: SyncMode = SyncMode(),
    root_path: Path = Path("."),
    registry: ToolRegistry = DEFAULT_REGISTRY,
    rescan_each_pair: bool = False,
) -> SyncResult:
    """Mirror every detected tool into every other detected tool.

    Pairs run in registry order (outer source, inner target), N*(N-1) mirrors
    for N tools. By default one scan snapshot is shared by all pairs, so an
    entry copied into B by (A, B) is not a source entry for (B, C) in the same
    run; every tool still ends up with the union of the entries the tools had
    at the start when ``force`` is set. ``rescan_each_pair`` re-scans before
    each pair instead.

    Returns:
        SyncResult; ``insufficient_tools`` is set when fewer than two tools exist
    """
    detected = await scan(root_path, registry)
    tool_ids = list(detected)

    if len(tool_ids) < MIN_TOOLS:
        logger.info(f"Need at least {MIN_TOOLS} tools to sync, detected {len(tool_ids)}")
        return SyncResult(tool_ids=tool_ids, insufficient_tools=True)

    result = SyncResult(tool_ids=tool_ids)
    for source_id in tool_ids:
        for target_id in tool_ids:
            if source_id == target_id:
                continue
            snapshot = await scan(root_path, registry) if rescan_each_pair else detected
            logger.debug(f"Mirroring {source_id} -> {target_id}")
            result.pairs.append(
                await mirror(
                    source_id,
                    target_id,
                    sync_filter,
                    mode,
                    root_path=root_path,
                    registry=registry,
                    detected=snapshot,
                )
            )
    return result
