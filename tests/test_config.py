"""Tests for the configuration module."""

from pathlib import Path

import pytest

from lazywalk._cli.config import (
    ConfigError,
    LazywalkConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)
from lazywalk._cli.walk import TraversalOrder


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")
        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        assert find_pyproject_toml(tmp_path) is None


class TestLoadConfig:
    """Tests for loading the [tool.lazywalk] table."""

    def test_no_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == LazywalkConfig(project_root=tmp_path)

    def test_full_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.lazywalk]
graph = "graphs/deps.toml"
order = "topological"
limit = 5
""",
        )

        config = load_config(pyproject)

        assert config.graph == tmp_path / "graphs" / "deps.toml"
        assert config.order is TraversalOrder.TOPOLOGICAL
        assert config.limit == 5

    def test_absolute_graph_path(self, tmp_path: Path) -> None:
        graph = tmp_path / "elsewhere.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.lazywalk]\ngraph = '{graph.as_posix()}'\n")

        assert load_config(pyproject).graph == graph

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.lazywalk\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_graph_must_be_string(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.lazywalk]\ngraph = 3\n")

        with pytest.raises(ConfigError, match="graph: expected string path"):
            load_config(pyproject)

    def test_unknown_order(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.lazywalk]\norder = 'breadth'\n")

        with pytest.raises(ConfigError, match="order 'breadth'"):
            load_config(pyproject)

    @pytest.mark.parametrize("value", ["0", "-2", "true", "'ten'"])
    def test_invalid_limit(self, tmp_path: Path, value: str) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.lazywalk]\nlimit = {value}\n")

        with pytest.raises(ConfigError, match="limit: expected positive integer"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.lazywalk]\norder = 'preorder'\n")
        monkeypatch.chdir(tmp_path)

        assert get_config().order is TraversalOrder.PREORDER
