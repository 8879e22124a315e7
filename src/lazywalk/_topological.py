"""Lazy post-order (topological) traversal over an implicit graph."""

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from collections.abc import Set as AbstractSet
from typing import Self

logger = logging.getLogger(__name__)


class TopologicalIter[N: Hashable]:
    """Iterator yielding nodes in depth-first post-order.

    A node is yielded once all of the nodes discovered beneath it have been
    yielded. For an acyclic graph where an edge ``a -> b`` means "a depends on
    b", this puts every dependency before its dependents.

    Cycles do not raise. Each node is still expanded and yielded exactly once,
    but the order of nodes on or below a cycle carries no topological meaning.

    ``_node_stack`` and ``_adj_stack`` always have the same length: entry ``i``
    of ``_adj_stack`` iterates over the neighbors of entry ``i`` of
    ``_node_stack``.
    """

    __slots__ = ("_adj_stack", "_adjacent", "_exhausted", "_node_stack", "_roots", "_visited")

    def __init__(self, roots: Iterable[N], adjacent: Callable[[N], Iterable[N]]) -> None:
        if not callable(adjacent):
            msg = f"adjacent must be callable, got {type(adjacent).__name__}"
            raise TypeError(msg)
        self._adjacent = adjacent
        self._roots: Iterator[N] = iter(roots)
        self._node_stack: list[N] = []
        self._adj_stack: list[Iterator[N]] = []
        self._visited: set[N] = set()
        self._exhausted = False

    @property
    def visited(self) -> AbstractSet[N]:
        """Nodes discovered so far, including those not yet yielded."""
        return self._visited

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> N:
        if self._exhausted:
            raise StopIteration

        while not self._adj_stack:
            for root in self._roots:
                if root not in self._visited:
                    self._open(root)
                    break
            else:
                self._exhausted = True
                logger.debug(f"Topological traversal exhausted after {len(self._visited)} nodes")
                raise StopIteration

        while True:
            for neighbor in self._adj_stack[-1]:
                if neighbor not in self._visited:
                    self._open(neighbor)
                    break
            else:
                # Every neighbor of the top node is finished or on the stack.
                self._adj_stack.pop()
                return self._node_stack.pop()

    def _open(self, node: N) -> None:
        self._visited.add(node)
        self._adj_stack.append(iter(self._adjacent(node)))
        self._node_stack.append(node)


def topological_sort[N: Hashable](
    roots: Iterable[N],
    adjacent: Callable[[N], Iterable[N]],
) -> TopologicalIter[N]:
    """Lazily order the nodes reachable from ``roots`` so successors come first.

    Args:
        roots: Starting nodes, explored in order. May be empty and may contain
            duplicates.
        adjacent: Function returning the direct successors of a node.

    Returns:
        A lazy iterator yielding each reachable node after its successors.

    Example:
        >>> deps = {"app": ["lib"], "lib": ["core"], "core": []}
        >>> list(topological_sort(["app"], deps.__getitem__))
        ['core', 'lib', 'app']

    """
    return TopologicalIter(roots, adjacent)
