"""Lazy pre-order depth-first traversal over an implicit graph."""

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from collections.abc import Set as AbstractSet
from typing import Self

logger = logging.getLogger(__name__)


class DepthFirstIter[N: Hashable]:
    """Iterator yielding nodes in pre-order depth-first order.

    The graph is never materialized. Each node's neighbors come from the
    ``adjacent`` callable, which is invoked once per node at the moment the
    node is first discovered. Instead of recursing, the iterator keeps a stack
    with one partially consumed neighbor iterator per node on the current path.

    Roots are explored in order. A root that was already reached from an
    earlier root is skipped.

    Example:
        >>> list(depth_first_multi([0, 3], lambda n: [n + 1] if n < 4 else []))
        [0, 1, 2, 3, 4]

    """

    __slots__ = ("_adjacent", "_exhausted", "_roots", "_stack", "_visited")

    def __init__(self, roots: Iterable[N], adjacent: Callable[[N], Iterable[N]]) -> None:
        if not callable(adjacent):
            msg = f"adjacent must be callable, got {type(adjacent).__name__}"
            raise TypeError(msg)
        self._adjacent = adjacent
        self._roots: Iterator[N] = iter(roots)
        self._stack: list[Iterator[N]] = []
        self._visited: set[N] = set()
        self._exhausted = False

    @property
    def visited(self) -> AbstractSet[N]:
        """Nodes discovered so far. Every one of them has been yielded."""
        return self._visited

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> N:
        if self._exhausted:
            raise StopIteration

        while self._stack:
            for neighbor in self._stack[-1]:
                if neighbor not in self._visited:
                    return self._discover(neighbor)
            self._stack.pop()

        for root in self._roots:
            if root not in self._visited:
                return self._discover(root)

        self._exhausted = True
        logger.debug(f"Depth-first traversal exhausted after {len(self._visited)} nodes")
        raise StopIteration

    def _discover(self, node: N) -> N:
        self._visited.add(node)
        self._stack.append(iter(self._adjacent(node)))
        return node


def depth_first[N: Hashable](root: N, adjacent: Callable[[N], Iterable[N]]) -> DepthFirstIter[N]:
    """Walk the graph reachable from a single root in pre-order.

    Args:
        root: The node to start from.
        adjacent: Function returning the direct successors of a node. The
            returned iterable may be infinite; it is consumed lazily.

    Returns:
        A lazy iterator over the reachable nodes.

    Example:
        >>> from itertools import islice
        >>> list(islice(depth_first(0, lambda n: [n + 1]), 5))
        [0, 1, 2, 3, 4]

    """
    return DepthFirstIter((root,), adjacent)


def depth_first_multi[N: Hashable](
    roots: Iterable[N],
    adjacent: Callable[[N], Iterable[N]],
) -> DepthFirstIter[N]:
    """Walk the graph reachable from several roots in pre-order.

    Args:
        roots: Starting nodes, explored in order. May be empty and may contain
            duplicates or nodes reachable from earlier roots.
        adjacent: Function returning the direct successors of a node.

    Returns:
        A lazy iterator over the nodes reachable from any root.

    """
    return DepthFirstIter(roots, adjacent)
