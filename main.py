"""Main entry point for skill-sync."""

import argparse
import asyncio
import importlib.metadata
from pathlib import Path
from typing import List, Optional

from config import Config
from sync import (
    DEFAULT_REGISTRY,
    GlobalSkillRegistry,
    SkillSyncError,
    SyncFilter,
    SyncMode,
    detect_installed_tools,
    init_tool,
    mirror,
    scan,
    sync_all,
)
from sync import report
from utils import get_log_file_path, get_logger, setup_logger, terminal_ui
from utils.runtime import ensure_runtime_dirs

logger = get_logger(__name__)

EPILOG = """\
Examples:
  skill-sync                          # Sync all detected tools
  skill-sync setup --dry-run          # Preview which tools would be set up
  skill-sync mirror cursor claude     # Mirror Cursor skills to Claude
  skill-sync sync --dry-run           # Preview sync across all tools
  skill-sync list                     # Show detected directories
  skill-sync init windsurf            # Create .windsurf structure
  skill-sync global add review        # Add ./.cursor/skills/review to the global registry
  skill-sync global install review    # Install it into every detected tool

Supported tools: """


def _add_common_flags(parser: argparse.ArgumentParser, suppress: bool) -> None:
    """Add the shared option flags.

    Sub-command copies use SUPPRESS defaults so a flag given before the
    command is not reset by the sub-parser.
    """

    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "--skills-only",
        action="store_true",
        default=default(False),
        help="Only sync skills (not subagents)",
    )
    parser.add_argument(
        "--subagents-only",
        action="store_true",
        default=default(False),
        help="Only sync subagents (not skills)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=default(False),
        help="Show what would be synced without making changes",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        default=default(False),
        help="Overwrite existing files",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=default(False),
        help="Show detailed output and log to ~/.skill-sync/logs/",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=default(Path(".")),
        help="Directory containing the tool directories (default: current directory)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skill-sync",
        description="Sync skills and subagents between AI tool directories",
        epilog=EPILOG + ", ".join(DEFAULT_REGISTRY.list_ids()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    try:
        version = importlib.metadata.version("skill-sync")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"skill-sync {version}")
    _add_common_flags(parser, suppress=False)

    common = argparse.ArgumentParser(add_help=False)
    _add_common_flags(common, suppress=True)

    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.add_parser("sync", parents=[common], help="Sync all tools with each other (default)")

    mirror_parser = commands.add_parser(
        "mirror", parents=[common], help="Mirror skills from source to target tool"
    )
    mirror_parser.add_argument("source", help="Tool to copy from")
    mirror_parser.add_argument("target", help="Tool to copy into (initialized if missing)")

    commands.add_parser("list", parents=[common], help="List detected AI tool directories")

    init_parser = commands.add_parser(
        "init", parents=[common], help="Initialize a new AI tool directory structure"
    )
    init_parser.add_argument("tool", help="Tool to initialize")

    commands.add_parser("setup", parents=[common], help="Auto-detect and set up installed AI tools")

    global_parser = commands.add_parser("global", parents=[common], help="Manage global skills")
    global_commands = global_parser.add_subparsers(
        dest="global_command", metavar="action", required=True
    )
    global_commands.add_parser("list", parents=[common], help="List global skills")
    add_parser = global_commands.add_parser(
        "add", parents=[common], help="Add a skill to the global registry"
    )
    add_parser.add_argument("name", help="Skill name")
    add_parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        help="Skill file or directory (default: search ./.cursor/skills and ./.claude/skills)",
    )
    install_parser = global_commands.add_parser(
        "install", parents=[common], help="Install a global skill into tools"
    )
    install_parser.add_argument("name", help="Global skill name")
    install_parser.add_argument("tool", nargs="?", help="Target tool (default: all detected tools)")

    commands.add_parser("help", help="Show this help message")
    return parser


async def _setup(root: Path, mode: SyncMode) -> None:
    terminal_ui.print_info("Detecting installed AI tools...")
    installed = detect_installed_tools(DEFAULT_REGISTRY)

    if not installed:
        terminal_ui.print_warning("No AI tools detected on your system.")
        terminal_ui.print_muted("Tools are detected by looking for these CLI commands:")
        for descriptor in DEFAULT_REGISTRY.descriptors():
            terminal_ui.print_muted(f"  - {', '.join(descriptor.commands)}")
        terminal_ui.print_muted('You can still initialize tools with "skill-sync init <tool>".')
        return

    terminal_ui.print_success(f"Found {len(installed)} installed tool(s): {', '.join(installed)}")

    if mode.dry_run:
        terminal_ui.print_section("[DRY RUN] Would initialize directories for:")
        for tool_id in installed:
            descriptor = DEFAULT_REGISTRY.lookup(tool_id)
            terminal_ui.print_muted(f"  - {tool_id} ({descriptor.root_dir_name}/)")
        return

    for tool_id in installed:
        terminal_ui.print_section(f"Setting up {tool_id}...")
        report.report_init(await init_tool(tool_id, root, DEFAULT_REGISTRY))

    terminal_ui.print_success("Setup complete!")
    terminal_ui.print_muted('Next: add skills to one tool, then run "skill-sync sync".')


async def _global(
    args: argparse.Namespace, registry: GlobalSkillRegistry, root: Path, mode: SyncMode
) -> None:
    if args.global_command == "list":
        report.report_global_list(await registry.list(), registry.root)
    elif args.global_command == "add":
        result = await registry.add(
            args.name, args.source, cwd=root, force=mode.force, dry_run=mode.dry_run
        )
        report.report_global_add(result)
    elif args.global_command == "install":
        results = await registry.install(args.name, args.tool, root_path=root, dry_run=mode.dry_run)
        report.report_global_install(results)


async def run_command(args: argparse.Namespace) -> None:
    """Dispatch a parsed command to the synchronization core."""
    root = args.root
    sync_filter = SyncFilter(skills_only=args.skills_only, subagents_only=args.subagents_only)
    mode = SyncMode(dry_run=args.dry_run, force=args.force)
    command = args.command or "sync"

    if command == "sync":
        result = await sync_all(
            sync_filter,
            mode,
            root_path=root,
            registry=DEFAULT_REGISTRY,
            rescan_each_pair=Config.SYNC_RESCAN_EACH_PAIR,
        )
        report.report_sync(result, verbose=args.verbose)
    elif command == "mirror":
        result = await mirror(
            args.source, args.target, sync_filter, mode, root_path=root, registry=DEFAULT_REGISTRY
        )
        report.report_mirror(result, verbose=args.verbose)
    elif command == "list":
        report.report_tools(await scan(root, DEFAULT_REGISTRY))
    elif command == "init":
        init = await init_tool(args.tool, root, DEFAULT_REGISTRY, dry_run=mode.dry_run)
        report.report_init(init)
    elif command == "setup":
        await _setup(root, mode)
    elif command == "global":
        registry = GlobalSkillRegistry(Path(Config.GLOBAL_SKILLS_DIR), DEFAULT_REGISTRY)
        await _global(args, registry, root, mode)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit status: 0 on success (including partial per-file
        failures), 1 on a fatal error. Usage errors exit with 2 via argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "help":
        parser.print_help()
        return 0

    # Initialize runtime directories (create logs dir only in verbose mode)
    ensure_runtime_dirs(create_logs=args.verbose)

    # Initialize logging only in verbose mode
    if args.verbose:
        setup_logger()

    try:
        Config.validate()
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Configuration Error")
        return 1

    try:
        asyncio.run(run_command(args))
    except SkillSyncError as e:
        logger.info(f"Command failed: {e}")
        terminal_ui.print_error(str(e), title=e.title)
        return 1
    except OSError as e:
        logger.warning(f"Filesystem error: {e}")
        terminal_ui.print_error(str(e), title="Filesystem Error")
        return 1

    if args.verbose and get_log_file_path():
        terminal_ui.print_log_location(get_log_file_path())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
