"""Loading graphs from TOML files."""

import logging
import tomllib
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from lazywalk._adjacency import adjacency_from_mapping

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error reading or validating a graph file."""


class GraphDocument(BaseModel):
    """Contents of a graph file.

    Attributes:
        roots: Default starting nodes for traversals.
        edges: Mapping from node to its direct successors. Nodes that only
            appear as successors need not be listed.

    """

    roots: list[str] = Field(default_factory=list)
    edges: dict[str, list[str]] = Field(default_factory=dict)

    def adjacency(self) -> Callable[[str], Iterable[str]]:
        """Adjacency function over the document's edges."""
        return adjacency_from_mapping(self.edges)

    def default_roots(self) -> list[str]:
        """Roots to use when none are given: ``roots`` if set, else every edge key in file order."""
        if self.roots:
            return list(self.roots)
        return list(self.edges)

    def has_node(self, node: str) -> bool:
        """Check whether a node is mentioned anywhere in the document."""
        if node in self.edges or node in self.roots:
            return True
        return any(node in targets for targets in self.edges.values())


def load_graph_document(path: Path) -> GraphDocument:
    """Read and validate a graph file.

    Args:
        path: Path to the TOML graph file.

    Returns:
        The parsed GraphDocument.

    Raises:
        GraphFileError: If the file is missing, is not valid TOML, or does not
            match the graph file schema.

    """
    logger.debug(f"Loading graph from {path}")
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {path}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise GraphFileError(msg) from e

    try:
        document = GraphDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph file {path}: {e}"
        raise GraphFileError(msg) from e

    logger.debug(f"Loaded {len(document.edges)} adjacency entries and {len(document.roots)} roots")
    return document
