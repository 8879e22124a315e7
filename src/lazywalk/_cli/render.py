"""Rich rendering utilities for traversal commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from .walk import TraversalOrder

if TYPE_CHECKING:
    from rich.console import Console


def render_walk_table(nodes: list[str], order: TraversalOrder, console: Console) -> None:
    """Render traversal output as a Rich table.

    Args:
        nodes: Nodes in traversal order.
        order: The order the nodes were produced in, shown as the table title.
        console: Rich Console to output to.

    """
    if not nodes:
        console.print("[dim]No nodes reachable from the given roots[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan", title=f"{order.value} walk")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Node", style="bold")

    for index, node in enumerate(nodes, start=1):
        table.add_row(str(index), escape(node))

    console.print(table)


def render_lines(nodes: list[str], console: Console) -> None:
    """Print one node per line without markup."""
    for node in nodes:
        console.print(node, markup=False, highlight=False)
