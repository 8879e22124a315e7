"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from .walk import TraversalOrder


class ConfigError(Exception):
    """Error in lazywalk configuration."""


@dataclass(slots=True, frozen=True)
class LazywalkConfig:
    """Configuration loaded from the ``[tool.lazywalk]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    order: TraversalOrder | None = None
    limit: int | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_order(value: object) -> TraversalOrder:
    if not isinstance(value, str):
        msg = "Invalid [tool.lazywalk].order: expected string"
        raise ConfigError(msg)
    try:
        return TraversalOrder(value)
    except ValueError as e:
        choices = ", ".join(f"'{o.value}'" for o in TraversalOrder)
        msg = f"Invalid [tool.lazywalk].order '{value}'. Expected one of: {choices}"
        raise ConfigError(msg) from e


def _parse_limit(value: object) -> int:
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = "Invalid [tool.lazywalk].limit: expected positive integer"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> LazywalkConfig:
    """Load and validate [tool.lazywalk] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed LazywalkConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("lazywalk", {})

    if not section:
        return LazywalkConfig(project_root=project_root)

    graph_path: Path | None = None
    if "graph" in section:
        graph_value = section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.lazywalk].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    order = _parse_order(section["order"]) if "order" in section else None
    limit = _parse_limit(section["limit"]) if "limit" in section else None

    return LazywalkConfig(
        graph=graph_path,
        order=order,
        limit=limit,
        project_root=project_root,
    )


def get_config() -> LazywalkConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        LazywalkConfig (may be empty if no pyproject.toml or no [tool.lazywalk] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return LazywalkConfig()
    return load_config(pyproject_path)
