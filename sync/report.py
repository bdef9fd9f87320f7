"""Render synchronization results to the terminal."""

from __future__ import annotations

from typing import Iterable

from utils import terminal_ui

from .types import (
    AddOutcome,
    AddResult,
    DetectedTool,
    GlobalSkillEntry,
    InitResult,
    InstallOutcome,
    InstallResult,
    MirrorResult,
    OpResult,
    Outcome,
    SyncResult,
)

# label, theme color
_OUTCOME_LABELS = {
    Outcome.WOULD_CREATE: ("[DRY RUN] Would create", "dry_run"),
    Outcome.WOULD_UPDATE: ("[DRY RUN] Would update", "dry_run"),
    Outcome.SKIPPED_EXISTS: ("Skipping (exists)", "warning"),
    Outcome.CREATED: ("Created", "success"),
    Outcome.UPDATED: ("Updated", "updated"),
    Outcome.FAILED: ("Failed", "error"),
}


def _display_path(init: InitResult, path) -> str:
    return f"{init.root_path.name}/{path.relative_to(init.root_path)}"


def report_init(init: InitResult) -> None:
    if init.already_existed:
        terminal_ui.print_muted(f"Directory {init.root_path.name} already exists.")
    prefix = "[DRY RUN] Would create" if init.dry_run else "Created"
    for path in init.created:
        if path == init.root_path:
            terminal_ui.print_muted(f"{prefix} directory: {init.root_path.name}")
        else:
            terminal_ui.print_muted(f"{prefix}: {_display_path(init, path)}")
    if init.dry_run:
        terminal_ui.print_info(f"[DRY RUN] No changes made to {init.tool_id}.")
    else:
        terminal_ui.print_success(f"Initialized {init.tool_id} structure successfully!")


def report_op(result: OpResult, verbose: bool = False) -> None:
    label, style = _OUTCOME_LABELS[result.outcome]
    message = result.op.label
    if result.outcome is Outcome.FAILED:
        message = f"{message} ({result.error})"
    elif verbose and result.files_written:
        message = f"{message} ({result.files_written} files)"
    terminal_ui.print_operation(label, message, style)


def report_mirror(result: MirrorResult, verbose: bool = False) -> None:
    if result.target_initialized:
        action = "Would initialize it" if result.dry_run else "Initialized it"
        terminal_ui.print_info(f'Target tool "{result.target_id}" not found. {action}.')

    if result.nothing_to_mirror:
        terminal_ui.print_muted(f"No files to mirror from {result.source_id} to {result.target_id}")
        return

    terminal_ui.print_section(f"Mirroring from {result.source_id} to {result.target_id}:")
    for op_result in result.results:
        report_op(op_result, verbose=verbose)

    if verbose:
        counts = ", ".join(
            f"{outcome.value}: {result.count(outcome)}"
            for outcome in Outcome
            if result.count(outcome)
        )
        terminal_ui.print_muted(f"  ({counts})")

    if result.failures:
        terminal_ui.print_warning(
            f"Mirror finished with {len(result.failures)} failed operation(s)."
        )
    else:
        terminal_ui.print_success("Mirror complete!")


def report_sync(result: SyncResult, verbose: bool = False) -> None:
    if result.insufficient_tools:
        terminal_ui.print_warning(
            f"Need at least 2 AI tools to sync. Detected: {len(result.tool_ids)}"
        )
        return

    terminal_ui.print_header(
        f"Syncing {len(result.tool_ids)} tools", subtitle=", ".join(result.tool_ids)
    )
    for pair in result.pairs:
        report_mirror(pair, verbose=verbose)

    failures = result.failures
    if failures:
        terminal_ui.print_warning(f"Sync finished with {len(failures)} failed operation(s).")
    else:
        terminal_ui.print_success("Sync complete across all tools!")


def report_tools(detected: dict[str, DetectedTool]) -> None:
    if not detected:
        terminal_ui.print_warning("No AI tool directories found in current directory.")
        terminal_ui.print_muted('Run "skill-sync init <tool>" to create one.')
        return

    terminal_ui.print_table(
        ["Tool", "Path", "Skills", "Subagents"],
        (
            [tool.id, str(tool.root_path), str(len(tool.skills)), str(len(tool.subagents))]
            for tool in detected.values()
        ),
        title="Detected AI Tool Directories",
    )


def report_global_list(entries: Iterable[GlobalSkillEntry], root) -> None:
    entries = list(entries)
    if not entries:
        terminal_ui.print_muted(f"No global skills in {root}.")
        terminal_ui.print_muted('Run "skill-sync global add <name> [source]" to add one.')
        return
    terminal_ui.print_table(
        ["Name", "Kind"],
        ([entry.name, entry.kind.value] for entry in entries),
        title=f"Global Skills ({root})",
    )


def report_global_add(result: AddResult) -> None:
    if result.outcome is AddOutcome.EXISTS:
        terminal_ui.print_warning(
            f'Global skill "{result.name}" already exists. Use --force to replace it.'
        )
        return
    if result.outcome is AddOutcome.UNCHANGED:
        terminal_ui.print_muted(
            f'Global skill "{result.name}" is already {result.source_path}; nothing to do.'
        )
        return
    if result.outcome in (AddOutcome.WOULD_ADD, AddOutcome.WOULD_REPLACE):
        verb = "replace" if result.outcome is AddOutcome.WOULD_REPLACE else "add"
        message = f'global skill "{result.name}" from {result.source_path}'
        terminal_ui.print_operation(f"[DRY RUN] Would {verb}", message, "dry_run")
        return
    verb = "Replaced" if result.outcome is AddOutcome.REPLACED else "Added"
    terminal_ui.print_success(f'{verb} global skill "{result.name}" from {result.source_path}')


def report_global_install(results: Iterable[InstallResult]) -> None:
    for result in results:
        target = f"{result.tool_id}: skill/{result.target_path.name}"
        if result.outcome is InstallOutcome.INSTALLED:
            terminal_ui.print_operation("Installed", target, "success")
        elif result.outcome is InstallOutcome.WOULD_INSTALL:
            terminal_ui.print_operation("[DRY RUN] Would install", target, "dry_run")
        elif result.outcome is InstallOutcome.SKIPPED_EXISTS:
            terminal_ui.print_operation("Skipping (exists)", target, "warning")
        else:
            terminal_ui.print_warning(
                f'  Tool "{result.tool_id}" not found in current directory, skipping. '
                f'Run "skill-sync init {result.tool_id}" first.'
            )
