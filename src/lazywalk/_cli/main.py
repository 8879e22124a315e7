import logging
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import ConfigError, LazywalkConfig, get_config
from .graph_file import GraphDocument, GraphFileError, load_graph_document
from .render import render_lines, render_walk_table
from .walk import TraversalOrder, UnknownNodeError, reachable_from, walk_graph

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


class OutputFormat(StrEnum):
    TABLE = "table"
    LINES = "lines"


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Lazy graph traversal CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> LazywalkConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _load_document(graph: Path | None, config: LazywalkConfig) -> GraphDocument:
    if graph is None:
        graph = config.graph
    if graph is None:
        err_console.print("[red]Error: No graph file given and no [tool.lazywalk].graph configured[/red]")
        raise typer.Exit(code=1)

    try:
        return load_graph_document(graph)
    except GraphFileError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def walk(
    graph: Annotated[
        Path | None,
        typer.Argument(help="Path to TOML graph file (defaults to [tool.lazywalk].graph)"),
    ] = None,
    *,
    root: Annotated[
        list[str] | None,
        typer.Option("-r", "--root", help="Start node (repeatable). Defaults to the file's roots"),
    ] = None,
    order: Annotated[
        TraversalOrder | None,
        typer.Option("--order", help="Traversal order"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("-n", "--limit", min=1, help="Stop after this many nodes"),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", help="Reverse the output (dependencies first for topological order)"),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format"),
    ] = OutputFormat.TABLE,
) -> None:
    """Traverse a graph file and print the visited nodes."""
    config = _load_config()
    document = _load_document(graph, config)

    if order is None:
        order = config.order or TraversalOrder.PREORDER
    if limit is None:
        limit = config.limit

    logger.debug(f"Walking in {order.value} order (limit: {limit}, reverse: {reverse})")
    try:
        nodes = walk_graph(document, roots=root, order=order, limit=limit, reverse=reverse)
    except UnknownNodeError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    match output_format:
        case OutputFormat.TABLE:
            render_walk_table(nodes, order, out_console)
        case OutputFormat.LINES:
            render_lines(nodes, out_console)


@app.command()
def reachable(
    graph: Annotated[
        Path,
        typer.Argument(help="Path to TOML graph file"),
    ],
    node: Annotated[
        str,
        typer.Argument(help="Node to start from"),
    ],
    *,
    list_nodes: Annotated[
        bool,
        typer.Option("--list", help="Also print the reachable nodes"),
    ] = False,
) -> None:
    """Count the nodes reachable from NODE, including NODE itself."""
    document = _load_document(graph, LazywalkConfig())

    try:
        nodes = reachable_from(document, node)
    except UnknownNodeError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    out_console.print(f"[bold]{len(nodes)}[/bold] nodes reachable from [cyan]{escape(node)}[/cyan]")
    if list_nodes:
        render_lines(nodes, out_console)


def main() -> None:
    app()
