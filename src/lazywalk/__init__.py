"""Lazy, non-recursive graph traversals over adjacency functions."""

__all__ = [
    "DepthFirstIter",
    "TopologicalIter",
    "adjacency_from_mapping",
    "depth_first",
    "depth_first_multi",
    "topological_sort",
]

from ._adjacency import adjacency_from_mapping
from ._depth_first import DepthFirstIter, depth_first, depth_first_multi
from ._topological import TopologicalIter, topological_sort
