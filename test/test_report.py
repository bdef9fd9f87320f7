from pathlib import Path

from sync import report
from sync.types import (
    AddOutcome,
    AddResult,
    Category,
    EntryKind,
    InitResult,
    MirrorResult,
    OpResult,
    Outcome,
    TransferOp,
)


def _op(name: str) -> TransferOp:
    return TransferOp(
        source_path=Path("/src") / name,
        target_path=Path("/dst") / name,
        category=Category.SKILL,
        name=name,
        source_kind=EntryKind.FILE,
    )


def _capture(monkeypatch) -> list[str]:
    lines: list[str] = []
    ui = report.terminal_ui
    monkeypatch.setattr(
        ui, "print_operation", lambda label, msg, style: lines.append(f"{label}: {msg}")
    )
    for name in ("print_info", "print_muted", "print_warning", "print_success", "print_section"):
        monkeypatch.setattr(ui, name, lambda msg, _name=name: lines.append(f"{_name} {msg}"))
    return lines


def test_dry_run_mirror_report(monkeypatch) -> None:
    lines = _capture(monkeypatch)
    result = MirrorResult(
        "cursor",
        "claude",
        results=[OpResult(_op("a.md"), Outcome.WOULD_CREATE)],
        target_initialized=True,
        dry_run=True,
    )

    report.report_mirror(result)

    assert 'print_info Target tool "claude" not found. Would initialize it.' in lines
    assert "[DRY RUN] Would create: skill/a.md" in lines


def test_failed_op_and_verbose_counts(monkeypatch) -> None:
    lines = _capture(monkeypatch)
    result = MirrorResult(
        "cursor",
        "claude",
        results=[
            OpResult(_op("a.md"), Outcome.CREATED, files_written=1),
            OpResult(_op("b.md"), Outcome.FAILED, error=PermissionError("denied")),
        ],
    )

    report.report_mirror(result, verbose=True)

    assert "Created: skill/a.md (1 files)" in lines
    assert "Failed: skill/b.md (denied)" in lines
    assert "print_muted   (created: 1, failed: 1)" in lines
    assert "print_warning Mirror finished with 1 failed operation(s)." in lines


def test_nothing_to_mirror(monkeypatch) -> None:
    lines = _capture(monkeypatch)

    report.report_mirror(MirrorResult("cursor", "claude", nothing_to_mirror=True))

    assert lines == ["print_muted No files to mirror from cursor to claude"]


def test_dry_run_init_report(monkeypatch) -> None:
    lines = _capture(monkeypatch)
    root = Path("/work/.codex")
    init = InitResult("codex", root, created=(root, root / "config.json"), dry_run=True)

    report.report_init(init)

    assert lines == [
        "print_muted [DRY RUN] Would create directory: .codex",
        "print_muted [DRY RUN] Would create: .codex/config.json",
        "print_info [DRY RUN] No changes made to codex.",
    ]


def test_global_add_reports(monkeypatch) -> None:
    lines = _capture(monkeypatch)
    source = Path("/work/lint.md")
    target = Path("/registry/lint.md")

    report.report_global_add(AddResult("lint.md", source, target, AddOutcome.WOULD_REPLACE))
    report.report_global_add(AddResult("lint.md", target, target, AddOutcome.UNCHANGED))

    assert lines == [
        '[DRY RUN] Would replace: global skill "lint.md" from /work/lint.md',
        'print_muted Global skill "lint.md" is already /registry/lint.md; nothing to do.',
    ]
