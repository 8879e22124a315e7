"""Adapters from concrete graph representations to adjacency functions."""

from collections.abc import Callable, Hashable, Iterable, Mapping


def adjacency_from_mapping[N: Hashable](successors: Mapping[N, Iterable[N]]) -> Callable[[N], Iterable[N]]:
    """Build an adjacency function backed by a mapping.

    The mapping is read on every call and never copied, so later changes to it
    are visible to traversals that have not yet expanded the affected node.

    Args:
        successors: Mapping from node to its direct successors. Nodes that are
            not keys of the mapping have no successors.

    Returns:
        A function suitable as the ``adjacent`` argument of the traversals.

    Example:
        >>> adjacent = adjacency_from_mapping({"a": ["b"]})
        >>> list(adjacent("a")), list(adjacent("b"))
        (['b'], [])

    """

    def adjacent(node: N) -> Iterable[N]:
        return successors.get(node, ())

    return adjacent
