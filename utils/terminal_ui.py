"""Terminal UI utilities using Rich library for formatted output.

This module provides a unified interface for terminal output, integrating
with the theme palette for consistent styling.
"""

from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from config import Config
from utils.theme import Theme, set_theme

# Initialize theme from config
set_theme(Config.TUI_THEME)

# Global console instance with theme support
console = Console(theme=Theme.get_rich_theme(), highlight=False)


def _get_colors():
    """Get current theme colors."""
    return Theme.get_colors()


def print_header(title: str, subtitle: Optional[str] = None) -> None:
    """Print a formatted header panel.

    Args:
        title: Main title text
        subtitle: Optional subtitle text
    """
    colors = _get_colors()
    content = f"[bold {colors.primary}]{title}[/bold {colors.primary}]"
    if subtitle:
        content += f"\n[{colors.text_secondary}]{subtitle}[/{colors.text_secondary}]"

    console.print(Panel(content, border_style=colors.primary, box=box.ROUNDED, padding=(0, 2)))


def print_section(title: str) -> None:
    colors = _get_colors()
    console.print()
    console.print(f"[bold {colors.primary}]{title}[/bold {colors.primary}]")
    console.print()


def print_table(
    columns: Sequence[str],
    rows: Iterable[Sequence[str]],
    title: Optional[str] = None,
) -> None:
    """Print rows in a rounded table.

    Args:
        columns: Column headers
        rows: Row values, already formatted as strings
        title: Optional table title
    """
    colors = _get_colors()
    table = Table(
        title=title,
        show_header=True,
        header_style=f"bold {colors.primary}",
        box=box.ROUNDED,
        border_style=colors.text_muted,
        padding=(0, 1),
    )
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)

    console.print(table)


def print_operation(label: str, message: str, style: str) -> None:
    """Print one operation line, e.g. ``  Created: skill/review.md``.

    Args:
        label: Action label ("Created", "[DRY RUN] Would create", ...)
        message: What the action applies to
        style: Theme color attribute name for the label
    """
    color = getattr(_get_colors(), style)
    line = Text("  ")
    line.append(f"{label}:", style=color)
    line.append(f" {message}")
    console.print(line)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message.

    Args:
        message: Error message
        title: Error title (default: "Error")
    """
    colors = _get_colors()
    console.print(
        Panel(
            Text(message, style=colors.error),
            title=f"[bold {colors.error}]{title}[/bold {colors.error}]",
            border_style=colors.error,
            box=box.ROUNDED,
        )
    )


def print_warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: Warning message
    """
    colors = _get_colors()
    console.print(Text(message, style=colors.warning))


def print_success(message: str) -> None:
    """Print a success message.

    Args:
        message: Success message
    """
    colors = _get_colors()
    console.print(Text(f"✓ {message}", style=colors.success))


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Info message
    """
    colors = _get_colors()
    console.print(Text(f"ℹ {message}", style=colors.primary))


def print_muted(message: str) -> None:
    colors = _get_colors()
    console.print(Text(message, style=colors.text_secondary))


def print_log_location(log_file: str) -> None:
    """Print log file location.

    Args:
        log_file: Path to log file
    """
    colors = _get_colors()
    console.print()
    console.print(f"[{colors.text_muted}]Detailed logs: {log_file}[/{colors.text_muted}]")
