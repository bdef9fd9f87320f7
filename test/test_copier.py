import pytest

from sync.copier import copy
from sync.types import EntryKind


@pytest.mark.asyncio
async def test_copy_file_creates_parent_directories(tmp_path) -> None:
    src = tmp_path / "src.md"
    src.write_bytes(b"# skill\n\x00binary")
    dst = tmp_path / "a" / "b" / "dst.md"

    written = await copy(src, dst, overwrite=False)

    assert written == 1
    assert dst.read_bytes() == b"# skill\n\x00binary"


@pytest.mark.asyncio
async def test_copy_file_respects_overwrite(tmp_path) -> None:
    src = tmp_path / "src.md"
    src.write_text("new")
    dst = tmp_path / "dst.md"
    dst.write_text("old")

    assert await copy(src, dst, overwrite=False) == 0
    assert dst.read_text() == "old"

    assert await copy(src, dst, overwrite=True) == 1
    assert dst.read_text() == "new"


@pytest.mark.asyncio
async def test_copy_directory_tree(tmp_path) -> None:
    src = tmp_path / "skill"
    (src / "refs" / "deep").mkdir(parents=True)
    (src / "SKILL.md").write_text("body")
    (src / "refs" / "deep" / "notes.txt").write_text("notes")
    (src / "empty").mkdir()

    written = await copy(src, tmp_path / "out" / "skill", overwrite=False, kind=EntryKind.DIRECTORY)

    out = tmp_path / "out" / "skill"
    assert written == 2
    assert (out / "SKILL.md").read_text() == "body"
    assert (out / "refs" / "deep" / "notes.txt").read_text() == "notes"
    assert (out / "empty").is_dir()


@pytest.mark.asyncio
async def test_directory_copy_without_overwrite_fills_gaps(tmp_path) -> None:
    src = tmp_path / "src" / "skill1"
    src.mkdir(parents=True)
    (src / "x.md").write_text("x new")
    (src / "y.md").write_text("y new")
    dst = tmp_path / "dst" / "skill1"
    dst.mkdir(parents=True)
    (dst / "x.md").write_text("x old")

    written = await copy(src, dst, overwrite=False)

    assert written == 1
    assert (dst / "x.md").read_text() == "x old"
    assert (dst / "y.md").read_text() == "y new"


@pytest.mark.asyncio
async def test_directory_copy_with_overwrite_replaces_leaves(tmp_path) -> None:
    src = tmp_path / "src"
    src.mkdir()
    (src / "x.md").write_text("x new")
    dst = tmp_path / "dst"
    dst.mkdir()
    (dst / "x.md").write_text("x old")
    (dst / "extra.md").write_text("kept")

    await copy(src, dst, overwrite=True)

    assert (dst / "x.md").read_text() == "x new"
    assert (dst / "extra.md").read_text() == "kept"


@pytest.mark.asyncio
async def test_copy_missing_source_raises(tmp_path) -> None:
    with pytest.raises(OSError):
        await copy(tmp_path / "missing.md", tmp_path / "out.md", overwrite=True)


@pytest.mark.asyncio
async def test_copy_onto_itself_keeps_contents(tmp_path) -> None:
    pack = tmp_path / "pack"
    (pack / "nested").mkdir(parents=True)
    (pack / "a.md").write_text("precious")
    (pack / "nested" / "b.md").write_text("B")

    assert await copy(pack / "a.md", pack / "a.md", overwrite=True) == 0
    assert await copy(pack, pack, overwrite=True) == 0

    assert (pack / "a.md").read_text() == "precious"
    assert (pack / "nested" / "b.md").read_text() == "B"
