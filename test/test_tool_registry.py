import pytest

from sync.errors import UnknownToolError
from sync.tools import AI_TOOLS, DEFAULT_REGISTRY, ToolRegistry
from sync.types import Category, ToolDescriptor


def test_list_ids_in_table_order() -> None:
    assert DEFAULT_REGISTRY.list_ids() == [
        "cursor",
        "claude",
        "codex",
        "windsurf",
        "aider",
        "opencode",
    ]


def test_lookup_returns_layout() -> None:
    claude = DEFAULT_REGISTRY.lookup("claude")
    assert claude.root_dir_name == ".claude"
    assert claude.config_file_name == "claude.json"
    assert claude.subdir_for(Category.SKILL) == "skills"
    assert claude.subdir_for(Category.SUBAGENT) == "subagents"


def test_lookup_unknown_tool() -> None:
    with pytest.raises(UnknownToolError) as exc_info:
        DEFAULT_REGISTRY.lookup("vim")
    assert exc_info.value.tool_id == "vim"
    assert "cursor" in str(exc_info.value)


def test_custom_table_and_duplicates() -> None:
    extra = ToolDescriptor("zed", ".zed", "skills", "agents", "zed.json")
    registry = ToolRegistry([*AI_TOOLS, extra])
    assert registry.list_ids()[-1] == "zed"
    assert "zed" in registry
    assert "zed" not in DEFAULT_REGISTRY

    with pytest.raises(ValueError):
        ToolRegistry([extra, extra])
