"""Shared console helpers for ranchgen.

All user-facing output goes through a single Rich ``Console`` so tests can
swap it for a recording console.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


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
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def infer_app_name(path: str | Path) -> str:
    """Return the application name implied by a target path.

    This is the last component of the expanded, absolute path, so ``.`` and
    trailing slashes resolve to the real directory name::

        infer_app_name("~/src/hello_world/") -> "hello_world"
    """
    return Path(path).expanduser().absolute().resolve().name
