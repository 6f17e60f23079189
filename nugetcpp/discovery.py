# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Filesystem discovery for solutions, projects, and packaging files.

Expected source tree layout:

    <working dir>/
        App.sln                  exactly one solution
        nuget/                   optional top-level packaging directory
        Lib/
            Lib.vcxproj          exactly one project file
            nuget/               marks Lib as a packaged project
                Lib.nuspec       exactly one manifest
                VERSION          package version (plain text)

Every lookup that expects a single file fails hard when it finds none
(NotFoundError) or more than one (AmbiguousError). Only entries directly
inside the given directory are considered; nothing is searched recursively.

Example:
    ```python
    from pathlib import Path
    from nugetcpp.discovery import discover_projects, find_solution

    solution = find_solution(Path.cwd())
    for project in discover_projects(Path.cwd()):
        print(project.name, project.target)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nugetcpp.exceptions import AmbiguousError, DiscoveryError, NotFoundError
from nugetcpp.logging import get_global_logger

SOLUTION_SUFFIX = ".sln"
PROJECT_SUFFIX = ".vcxproj"
MANIFEST_SUFFIX = ".nuspec"
PACKAGING_DIR_NAME = "nuget"
VERSION_FILE_NAME = "VERSION"


@dataclass(frozen=True)
class Project:
    """A project directory that has a packaging directory.

    Attributes:
        directory: The project directory.
        project_file: The single .vcxproj inside directory.
        target: msbuild target name derived from project_file.
    """

    directory: Path
    project_file: Path
    target: str

    @property
    def name(self) -> str:
        return self.directory.name

    @property
    def packaging_dir(self) -> Path:
        return self.directory / PACKAGING_DIR_NAME


def _list_dir(directory: Path) -> list[Path]:
    """Return the entries of directory sorted by name."""
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name.lower())
    except OSError as err:
        raise DiscoveryError(f"Could not read directory {directory}: {err}") from err


def _find_single(directory: Path, suffix: str, kind: str) -> Path:
    """Find the one file in directory whose suffix matches (case-insensitive).

    Raises:
        NotFoundError: If no file matches.
        AmbiguousError: If more than one file matches.
    """
    matches = [
        p
        for p in _list_dir(directory)
        if p.is_file() and p.suffix.lower() == suffix
    ]

    if not matches:
        raise NotFoundError(f"No {kind} files found in {directory}!")
    if len(matches) > 1:
        names = ", ".join(p.name for p in matches)
        raise AmbiguousError(f"Too many {kind} files found in {directory}: {names}")

    get_global_logger().debug("DISCOVERY", f"Found {kind}: {matches[0]}")
    return matches[0]


def find_solution(working_dir: Path) -> Path:
    """Return the single .sln file directly under working_dir."""
    return _find_single(working_dir, SOLUTION_SUFFIX, "solution")


def find_project_dirs(working_dir: Path) -> list[Path]:
    """Return the subdirectories of working_dir that contain a nuget/ directory.

    Args:
        working_dir: Directory holding the solution.

    Returns:
        Project directories sorted by name. May be empty.
    """
    return [
        p
        for p in _list_dir(working_dir)
        if p.is_dir() and (p / PACKAGING_DIR_NAME).is_dir()
    ]


def find_project_file(project_dir: Path) -> Path:
    """Return the single .vcxproj file directly under project_dir."""
    return _find_single(project_dir, PROJECT_SUFFIX, "project")


def find_manifest(packaging_dir: Path) -> Path:
    """Return the single .nuspec file directly under packaging_dir."""
    return _find_single(packaging_dir, MANIFEST_SUFFIX, "nuspec")


def find_version(packaging_dir: Path) -> str:
    """Read the package version from packaging_dir/VERSION.

    Args:
        packaging_dir: A nuget/ packaging directory.

    Returns:
        The file content with surrounding whitespace removed.

    Raises:
        NotFoundError: If the VERSION file does not exist.
        DiscoveryError: If the file cannot be read or is blank.
    """
    version_path = packaging_dir / VERSION_FILE_NAME
    if not version_path.is_file():
        raise NotFoundError(f"No {VERSION_FILE_NAME} file found in {packaging_dir}!")

    try:
        version = version_path.read_text(encoding="utf-8-sig").strip()
    except (OSError, UnicodeDecodeError) as err:
        raise DiscoveryError(f"Could not read {version_path}: {err}") from err

    if not version:
        raise DiscoveryError(f"{version_path} is empty")

    return version


def build_target_name(project_file: Path) -> str:
    """Derive the msbuild /t: target from a project file name.

    msbuild does not accept periods in target names, so they become
    underscores: Foo.Bar.vcxproj -> Foo_Bar.
    """
    return project_file.stem.replace(".", "_")


def discover_projects(working_dir: Path) -> list[Project]:
    """Find every packaged project under working_dir.

    Args:
        working_dir: Directory holding the solution.

    Returns:
        One Project per directory returned by find_project_dirs().

    Raises:
        NotFoundError: If a project directory has no .vcxproj.
        AmbiguousError: If a project directory has several .vcxproj files.
    """
    projects = []
    for project_dir in find_project_dirs(working_dir):
        project_file = find_project_file(project_dir)
        projects.append(
            Project(
                directory=project_dir,
                project_file=project_file,
                target=build_target_name(project_file),
            )
        )

    get_global_logger().verbose(
        "DISCOVERY",
        f"Found {len(projects)} project(s): "
        + (", ".join(p.name for p in projects) or "none"),
    )
    return projects
