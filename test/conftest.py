"""Pytest fixtures for skill-sync tests."""

from pathlib import Path

import pytest

from sync.tools import DEFAULT_REGISTRY


def write_tool(root: Path, tool_id: str, skills=None, subagents=None) -> Path:
    """Create ``<root>/.<tool>/`` with the given skill/subagent files.

    ``skills`` and ``subagents`` map relative paths to file contents; a path
    containing "/" creates a directory entry.
    """
    descriptor = DEFAULT_REGISTRY.lookup(tool_id)
    tool_root = root / descriptor.root_dir_name
    tool_root.mkdir(parents=True, exist_ok=True)
    layout = ((descriptor.skills_subdir, skills), (descriptor.subagents_subdir, subagents))
    for subdir, files in layout:
        if files is None:
            continue
        base = tool_root / subdir
        base.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
    return tool_root


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every path under ``root`` to its bytes (None for directories)."""
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = str(path.relative_to(root))
        result[rel] = None if path.is_dir() else path.read_bytes()
    return result


@pytest.fixture
def make_tool(tmp_path):
    """Fixture returning a ``write_tool`` bound to the test's tmp_path.

    Usage:
        def test_something(make_tool, tmp_path):
            make_tool("cursor", skills={"a.md": "A"})
    """

    def _make(tool_id: str, skills=None, subagents=None) -> Path:
        return write_tool(tmp_path, tool_id, skills=skills, subagents=subagents)

    return _make


@pytest.fixture
def tree_snapshot():
    return snapshot
