import pytest

from sync.orchestrator import sync_all
from sync.types import Outcome, SyncFilter, SyncMode


def _names(directory) -> set[str]:
    return {p.name for p in directory.iterdir()}


@pytest.mark.asyncio
async def test_insufficient_tools(tmp_path, make_tool) -> None:
    make_tool("cursor", skills={"a.md": "A"})

    result = await sync_all(root_path=tmp_path)

    assert result.insufficient_tools
    assert result.tool_ids == ["cursor"]
    assert result.pairs == []


@pytest.mark.asyncio
async def test_force_sync_converges_in_one_pass(tmp_path, make_tool) -> None:
    a = make_tool("cursor", skills={"a.md": "A"})
    b = make_tool("claude", skills={"b.md": "B"})

    result = await sync_all(mode=SyncMode(force=True), root_path=tmp_path)

    assert _names(a / "skills") == {"a.md", "b.md"}
    assert _names(b / "skills") == {"a.md", "b.md"}
    assert [(p.source_id, p.target_id) for p in result.pairs] == [
        ("cursor", "claude"),
        ("claude", "cursor"),
    ]


@pytest.mark.asyncio
async def test_pairs_follow_registry_order(tmp_path, make_tool) -> None:
    make_tool("aider", skills={"x.md": "X"})
    make_tool("cursor", skills={"c.md": "C"})
    make_tool("codex", skills={"d.md": "D"})

    result = await sync_all(root_path=tmp_path)

    assert result.tool_ids == ["cursor", "codex", "aider"]
    assert len(result.pairs) == 6
    assert [(p.source_id, p.target_id) for p in result.pairs][:2] == [
        ("cursor", "codex"),
        ("cursor", "aider"),
    ]
    for tool in (".aider", ".cursor", ".codex"):
        assert _names(tmp_path / tool / "skills") == {"x.md", "c.md", "d.md"}


@pytest.mark.asyncio
async def test_snapshot_reused_across_pairs(tmp_path, make_tool) -> None:
    make_tool("cursor", skills={"a.md": "A"})
    make_tool("claude", skills={})
    make_tool("codex", skills={})

    result = await sync_all(root_path=tmp_path)

    # claude received a.md from cursor, but claude's source entries come from
    # the snapshot taken before the run, so claude -> codex has nothing to do
    claude_to_codex = next(
        p for p in result.pairs if (p.source_id, p.target_id) == ("claude", "codex")
    )
    assert claude_to_codex.nothing_to_mirror


@pytest.mark.asyncio
async def test_rescan_each_pair_propagates_within_run(tmp_path, make_tool) -> None:
    make_tool("cursor", skills={"a.md": "A"})
    make_tool("claude", skills={})
    make_tool("codex", skills={})

    result = await sync_all(root_path=tmp_path, rescan_each_pair=True)

    claude_to_codex = next(
        p for p in result.pairs if (p.source_id, p.target_id) == ("claude", "codex")
    )
    assert [r.outcome for r in claude_to_codex.results] == [Outcome.SKIPPED_EXISTS]


@pytest.mark.asyncio
async def test_dry_run_sync_is_pure(tmp_path, make_tool, tree_snapshot) -> None:
    make_tool("cursor", skills={"a.md": "A"}, subagents={"s.md": "S"})
    make_tool("claude", skills={"b.md": "B"})
    before = tree_snapshot(tmp_path)

    result = await sync_all(SyncFilter(), SyncMode(dry_run=True), root_path=tmp_path)

    assert tree_snapshot(tmp_path) == before
    outcomes = {r.outcome for pair in result.pairs for r in pair.results}
    assert outcomes == {Outcome.WOULD_CREATE}
