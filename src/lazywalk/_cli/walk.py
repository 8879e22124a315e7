"""Traversal queries for CLI commands.

Pure functions over a GraphDocument. No I/O, no Rich rendering.
"""

from enum import StrEnum
from itertools import islice
from typing import Self

from lazywalk._depth_first import depth_first, depth_first_multi
from lazywalk._topological import topological_sort

from .graph_file import GraphDocument


class TraversalOrder(StrEnum):
    """Order in which the ``walk`` command yields nodes."""

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    PREORDER = "preorder", "Each node before its descendants (depth-first)."
    TOPOLOGICAL = "topological", "Each node after its descendants (post-order)."


class UnknownNodeError(Exception):
    """Raised when a requested node does not appear in the graph."""

    def __init__(self, node: str) -> None:
        self.node = node
        super().__init__(f"Node '{node}' does not appear in the graph")


def _check_nodes(document: GraphDocument, nodes: list[str]) -> None:
    for node in nodes:
        if not document.has_node(node):
            raise UnknownNodeError(node)


def walk_graph(
    document: GraphDocument,
    *,
    roots: list[str] | None = None,
    order: TraversalOrder = TraversalOrder.PREORDER,
    limit: int | None = None,
    reverse: bool = False,
) -> list[str]:
    """Traverse a graph document and collect the visited nodes.

    Args:
        document: The graph to traverse.
        roots: Starting nodes. Defaults to the document's default roots.
        order: Pre-order or topological (post-order) traversal.
        limit: Stop after this many nodes. None means no limit.
        reverse: Reverse the collected nodes. With ``limit`` the first
            ``limit`` nodes are taken before reversing.

    Returns:
        The nodes in traversal order.

    Raises:
        UnknownNodeError: If an explicitly given root is not in the graph.

    """
    if roots:
        _check_nodes(document, roots)
    else:
        roots = document.default_roots()

    match order:
        case TraversalOrder.PREORDER:
            walk = depth_first_multi(roots, document.adjacency())
        case TraversalOrder.TOPOLOGICAL:
            walk = topological_sort(roots, document.adjacency())

    nodes = list(islice(walk, limit))
    if reverse:
        nodes.reverse()
    return nodes


def reachable_from(document: GraphDocument, node: str) -> list[str]:
    """List the nodes reachable from ``node``, including itself, in pre-order.

    Raises:
        UnknownNodeError: If the node is not in the graph.

    """
    _check_nodes(document, [node])
    return list(depth_first(node, document.adjacency()))
