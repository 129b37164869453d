"""
Rendering functions for ghanalytics output.

This module handles all pretty-printing and table formatting.
Services return data, this module makes it human-readable.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from typing import List, Optional

from .services import Dimension, RankedEntry

console = Console()


def render_ranking_table(
    entries: List[RankedEntry],
    dimension: Dimension,
    title: Optional[str] = None,
    target: Optional[Console] = None,
) -> None:
    """
    Render ranked users or repositories as a pretty table.

    Args:
        entries: Ranked entries, most active first
        dimension: Whether the entries are users or repositories
        title: Optional table title
        target: Console to print to (module console by default)
    """
    out = target or console

    if not entries:
        out.print(f"[yellow]No {dimension.value} found.[/yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )

    table.add_column("Rank", justify="right", style="dim")
    table.add_column("ID", justify="right")
    table.add_column("Username" if dimension is Dimension.USERS else "Name", style="cyan")
    table.add_column("Events", justify="right", style="green")

    for position, entry in enumerate(entries, start=1):
        table.add_row(
            str(position),
            str(entry.entity.id),
            entry.entity.label,
            str(entry.count),
        )

    out.print(table)
