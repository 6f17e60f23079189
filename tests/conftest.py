"""
Pytest configuration and shared fixtures for nugetcpp tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from nugetcpp.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger after tests that run the CLI."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Resolved so it compares equal to Path.cwd() after a chdir.
    """
    return tmp_path.resolve()


@pytest.fixture
def solution_tree(tmp_test_dir: Path) -> Path:
    """
    Provide a minimal source tree with one packaged project.

    Layout:
        App.sln
        Lib/Lib.vcxproj
        Lib/nuget/Lib.nuspec
        Lib/nuget/VERSION  ("1.2.3")
    """
    root = tmp_test_dir
    (root / "App.sln").write_text("solution")
    lib = root / "Lib"
    (lib / "nuget").mkdir(parents=True)
    (lib / "Lib.vcxproj").write_text("<Project />")
    (lib / "nuget" / "Lib.nuspec").write_text("<package />")
    (lib / "nuget" / "VERSION").write_text("1.2.3\n")
    return root


@pytest.fixture
def add_project(solution_tree: Path):
    """
    Factory fixture for adding more packaged projects to solution_tree.

    Usage:
        project_dir = add_project("Core.Utils", version="2.0.0")
    """

    def _add(name: str, version: str = "1.0.0") -> Path:
        project_dir = solution_tree / name
        (project_dir / "nuget").mkdir(parents=True)
        (project_dir / f"{name}.vcxproj").write_text("<Project />")
        (project_dir / "nuget" / f"{name}.nuspec").write_text("<package />")
        (project_dir / "nuget" / "VERSION").write_text(version)
        return project_dir

    return _add


@pytest.fixture
def in_solution_dir(solution_tree: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with solution_tree as the working directory."""
    monkeypatch.chdir(solution_tree)
    return solution_tree


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("nugetcpp.yaml", {"timeout": 60})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def called_commands():
    """Return a helper listing the argument lists passed to a patched subprocess.run."""

    def _commands(mock_run) -> list[list[str]]:
        return [c.args[0] for c in mock_run.call_args_list]

    return _commands
