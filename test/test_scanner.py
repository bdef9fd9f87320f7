import os

import pytest

from sync.errors import ScanError
from sync.scanner import scan
from sync.types import EntryKind


@pytest.mark.asyncio
async def test_scan_empty_tree(tmp_path) -> None:
    assert await scan(tmp_path) == {}


@pytest.mark.asyncio
async def test_scan_detects_tools_in_registry_order(tmp_path, make_tool) -> None:
    make_tool("claude")
    make_tool("cursor")

    detected = await scan(tmp_path)

    assert list(detected) == ["cursor", "claude"]
    assert detected["cursor"].root_path == (tmp_path / ".cursor").resolve()


@pytest.mark.asyncio
async def test_missing_subdirectories_yield_empty_entries(tmp_path) -> None:
    (tmp_path / ".codex").mkdir()

    detected = await scan(tmp_path)

    assert detected["codex"].skills == ()
    assert detected["codex"].subagents == ()


@pytest.mark.asyncio
async def test_scan_filters_by_extension_and_keeps_directories(tmp_path, make_tool) -> None:
    make_tool(
        "cursor",
        skills={
            "review.md": "review",
            "settings.json": "{}",
            "notes.txt": "ignored",
            "bundle/README": "no extension needed inside a directory",
        },
        subagents={"planner.md": "plan", "script.py": "ignored"},
    )

    tool = (await scan(tmp_path))["cursor"]

    skills = {entry.name: entry.kind for entry in tool.skills}
    assert skills == {
        "review.md": EntryKind.FILE,
        "settings.json": EntryKind.FILE,
        "bundle": EntryKind.DIRECTORY,
    }
    assert [entry.name for entry in tool.subagents] == ["planner.md"]
    assert tool.skills[0].path.parent == tool.root_path / "skills"


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX permissions")
@pytest.mark.asyncio
async def test_unreadable_skills_directory_is_fatal(tmp_path, make_tool) -> None:
    root = make_tool("claude", skills={"a.md": "A"})
    skills_dir = root / "skills"
    skills_dir.chmod(0)
    try:
        with pytest.raises(ScanError):
            await scan(tmp_path)
    finally:
        skills_dir.chmod(0o755)


@pytest.mark.asyncio
async def test_regular_file_named_like_a_tool_is_not_detected(tmp_path, make_tool) -> None:
    make_tool("cursor", skills={"a.md": "A"})
    (tmp_path / ".aider").write_text("history, not a tool directory")

    detected = await scan(tmp_path)

    assert list(detected) == ["cursor"]
