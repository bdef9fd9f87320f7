"""Create a tool's directory structure and stub config file."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import aiofiles
import aiofiles.os
import yaml

from utils import get_logger

from .tools import DEFAULT_REGISTRY, ToolRegistry
from .types import Category, InitResult, ToolDescriptor

logger = get_logger(__name__)

CONFIG_VERSION = "1.0.0"


def default_config(tool_id: str) -> dict[str, str]:
    return {
        "name": tool_id,
        "version": CONFIG_VERSION,
        "created": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


def render_config(descriptor: ToolDescriptor) -> str:
    """Render the stub config in the format implied by the config filename."""
    data = default_config(descriptor.id)
    if descriptor.config_file_name.endswith((".yml", ".yaml")):
        return yaml.safe_dump(data, sort_keys=False)
    return json.dumps(data, indent=2)


async def init_descriptor(
    root_path: Path, descriptor: ToolDescriptor, dry_run: bool = False
) -> InitResult:
    tool_path = Path(root_path).resolve() / descriptor.root_dir_name
    created: list[Path] = []
    already_existed = await aiofiles.os.path.exists(tool_path)

    for path in (
        tool_path,
        tool_path / descriptor.subdir_for(Category.SKILL),
        tool_path / descriptor.subdir_for(Category.SUBAGENT),
    ):
        if not await aiofiles.os.path.exists(path):
            if not dry_run:
                await aiofiles.os.makedirs(path, exist_ok=True)
            created.append(path)

    config_path = tool_path / descriptor.config_file_name
    if not await aiofiles.os.path.exists(config_path):
        if not dry_run:
            async with aiofiles.open(config_path, "w", encoding="utf-8") as f:
                await f.write(render_config(descriptor))
        created.append(config_path)

    if created and not dry_run:
        logger.info(f"Initialized {descriptor.id} at {tool_path}: created {len(created)} paths")
    return InitResult(
        tool_id=descriptor.id,
        root_path=tool_path,
        created=tuple(created),
        already_existed=already_existed,
        dry_run=dry_run,
    )


async def init_tool(
    tool_id: str,
    root_path: Path,
    registry: ToolRegistry = DEFAULT_REGISTRY,
    dry_run: bool = False,
) -> InitResult:
    """Initialize ``<root>/.<tool>/`` with skills, subagents and config.

    Existing directories and an existing config file are left untouched.
    With ``dry_run`` nothing is written; ``created`` lists what would be.

    Raises:
        UnknownToolError: If ``tool_id`` is not registered
    """
    return await init_descriptor(root_path, registry.lookup(tool_id), dry_run=dry_run)
