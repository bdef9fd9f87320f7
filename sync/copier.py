"""Recursive file/directory copy with an overwrite policy.

Directory copies are merges: sub-directories are always created and walked,
and ``overwrite`` only decides whether an existing leaf file is replaced.
With ``overwrite=False`` a directory copy therefore fills in missing files
and leaves existing ones untouched, which can leave a target tree mixing old
and new files. Repeated syncs rely on this fill-gaps behaviour.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import aiofiles
import aiofiles.os

from .types import EntryKind

CHUNK_SIZE = 1024 * 128


async def entry_kind(path: Path) -> EntryKind:
    if await aiofiles.os.path.isdir(path):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


async def copy_file(src: Path, dst: Path) -> None:
    async with aiofiles.open(src, "rb") as reader, aiofiles.open(dst, "wb") as writer:
        while True:
            chunk = await reader.read(CHUNK_SIZE)
            if not chunk:
                break
            await writer.write(chunk)


async def _copy_leaf(src: Path, dst: Path, overwrite: bool) -> int:
    await aiofiles.os.makedirs(dst.parent, exist_ok=True)
    if await aiofiles.os.path.exists(dst):
        # Writing a file onto itself would truncate it before it is read.
        if not overwrite or await aiofiles.os.path.samefile(src, dst):
            return 0
    await copy_file(src, dst)
    return 1


async def _copy_tree(src: Path, dst: Path, overwrite: bool) -> int:
    await aiofiles.os.makedirs(dst, exist_ok=True)

    def _children() -> list[tuple[str, bool]]:
        with os.scandir(src) as it:
            return [(entry.name, entry.is_dir()) for entry in it]

    written = 0
    for name, is_dir in await asyncio.to_thread(_children):
        if is_dir:
            written += await _copy_tree(src / name, dst / name, overwrite)
        else:
            written += await _copy_leaf(src / name, dst / name, overwrite)
    return written


async def copy(
    source: Path,
    target: Path,
    overwrite: bool,
    kind: EntryKind | None = None,
) -> int:
    """Copy a file or a directory tree from ``source`` to ``target``.

    Args:
        source: File or directory to copy
        target: Destination path (same name semantics as ``source``)
        overwrite: Replace existing leaf files when True
        kind: Source kind if already known from a scan

    Returns:
        Number of files written

    Raises:
        OSError: Any filesystem failure; nothing is retried
    """
    source = Path(source)
    target = Path(target)
    if kind is None:
        kind = await entry_kind(source)

    if kind is EntryKind.DIRECTORY:
        return await _copy_tree(source, target, overwrite)
    return await _copy_leaf(source, target, overwrite)
