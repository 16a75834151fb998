"""Shared utility functions for viteforge.

Provides Rich-based console reporting, name helpers and small file-system
helpers used by the engine, the scaffolder and the CLI.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def sanitize_name(name: str) -> str:
    """Convert an arbitrary project name to a safe npm package name.

    * Lowercases the input.
    * Replaces spaces and characters other than letters, digits, hyphens,
      dots and underscores with hyphens.
    * Collapses consecutive hyphens and strips leading/trailing hyphens.

    Examples::

        sanitize_name("My Cool App") -> "my-cool-app"
        sanitize_name("  Demo (v2)  ") -> "demo-v2"
    """
    result = re.sub(r"[^a-z0-9._-]", "-", name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text_file(path: str | Path, content: str) -> Path:
    """Create parent directories and write *content* as UTF-8."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a dim informational message."""
    console.print(f"[dim]{message}[/dim]")
