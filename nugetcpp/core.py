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

"""Core orchestration for nugetcpp.

This module sequences the three phases of a packaging run:

1. **Restore**: nuget restore for every packaged project, pointing
    -SolutionDirectory at the folder holding the solution.
2. **Build**: msbuild for every packaged project and every requested
    platform, always in the Release configuration. Projects are the outer
    loop, platforms the inner one, in the order they were requested.
3. **Pack**: nuget pack for a top-level nuget/ directory if one exists,
    otherwise for the nuget/ directory of every packaged project.

Design Principles:

- Everything is discovered fresh on each run; nothing is persisted
- Execution is strictly sequential and stops at the first failure
- The --dir override changes the process working directory for the rest
  of the run, before any discovery happens
- Error handling uses exceptions; the CLI layer formats them for display

Example:
    Programmatic usage:
        ```python
        from nugetcpp.core import run
        from nugetcpp.options import RunOptions

        result = run(RunOptions.resolve(all=True))
        for package in result.packed:
            print(package.manifest, package.version)
        ```
"""

from __future__ import annotations

import os
from pathlib import Path

from nugetcpp.commands import build_project, pack_manifest, restore_project
from nugetcpp.config import ToolConfig, load_tool_config
from nugetcpp.discovery import (
    PACKAGING_DIR_NAME,
    Project,
    discover_projects,
    find_manifest,
    find_solution,
    find_version,
)
from nugetcpp.exceptions import ConfigError, NotFoundError
from nugetcpp.logging import Logger, get_global_logger
from nugetcpp.options import RunOptions
from nugetcpp.results import BuildStep, PackResult, RunResult
from nugetcpp.tools import resolve_tool


def change_directory(directory: Path) -> Path:
    """Make directory the process working directory.

    Args:
        directory: Target directory, absolute or relative to the current one.

    Returns:
        The new working directory, resolved.

    Raises:
        ConfigError: If directory does not exist or cannot be entered.
    """
    if not directory.is_dir():
        raise ConfigError(f"Directory not found: {directory}")
    try:
        os.chdir(directory)
    except OSError as err:
        raise ConfigError(f"Failed to change directory to {directory}: {err}") from err
    return Path.cwd()


def packaging_dirs(working_dir: Path, projects: list[Project]) -> list[Path]:
    """Return the nuget/ directories to pack, in order.

    A nuget/ directory at the top of working_dir takes precedence over the
    per-project ones.

    Raises:
        NotFoundError: If there is nothing to pack.
    """
    top_level = working_dir / PACKAGING_DIR_NAME
    if top_level.is_dir():
        return [top_level]

    dirs = [project.packaging_dir for project in projects]
    if not dirs:
        raise NotFoundError(
            f"No {PACKAGING_DIR_NAME} directories found in {working_dir}!"
        )
    return dirs


def _restore(
    nuget: str,
    solution: Path,
    projects: list[Project],
    config: ToolConfig,
    logger: Logger,
) -> list[Path]:
    restored = []
    for project in projects:
        logger.verbose("RESTORE", f"Restoring {project.project_file.name}")
        restore_project(nuget, project.project_file, solution.parent, config.timeout)
        restored.append(project.project_file)
    return restored


def _build(
    msbuild: str,
    solution: Path,
    projects: list[Project],
    options: RunOptions,
    config: ToolConfig,
    logger: Logger,
) -> list[BuildStep]:
    built = []
    for project in projects:
        for platform in options.platforms:
            logger.verbose("BUILD", f"Building {project.target} for {platform}")
            build_project(
                msbuild,
                solution,
                project.target,
                platform,
                config.timeout,
                project_name=project.project_file.name,
            )
            built.append(BuildStep(target=project.target, platform=platform))
    return built


def _pack(
    nuget: str,
    dirs: list[Path],
    config: ToolConfig,
    logger: Logger,
) -> list[PackResult]:
    packed = []
    for packaging_dir in dirs:
        manifest = find_manifest(packaging_dir)
        version = find_version(packaging_dir)
        logger.verbose("PACK", f"Packing {manifest.name} v{version}")
        pack_manifest(nuget, manifest, version, config.timeout)
        packed.append(PackResult(manifest=manifest, version=version))
    return packed


def run(
    options: RunOptions,
    *,
    config_path: Path | None = None,
    config: ToolConfig | None = None,
    logger: Logger | None = None,
) -> RunResult:
    """Run the requested restore, build, and pack phases.

    Args:
        options: Resolved run options.
        config_path: Tool configuration file. Ignored when config is given.
        config: Already loaded tool configuration. Default is to load it
            with load_tool_config() after the working directory is set.
        logger: Logger for progress output. Default is the global logger.

    Returns:
        RunResult dataclass describing everything that ran.

    Raises:
        ConfigError: If the directory override or tool config is invalid.
        DiscoveryError: If a required file is missing or ambiguous.
        PackagingError: If a tool is missing or a command fails.
        NetworkError: If nuget.exe has to be downloaded and cannot be.

    Note:
        Changes the process working directory when options.directory is set.
        The change is not undone when the run finishes.
    """
    if logger is None:
        logger = get_global_logger()

    # --config is relative to where the user started, not to --dir
    if config_path is not None:
        config_path = config_path.resolve()

    if options.directory is not None:
        working_dir = change_directory(options.directory)
        logger.verbose("RUN", f"Working directory: {working_dir}")
    else:
        working_dir = Path.cwd()

    if config is None:
        config = load_tool_config(config_path, working_dir=working_dir)

    phases = [
        name
        for name, wanted in (
            ("restore", options.restore),
            ("build", options.build),
            ("pack", options.pack),
        )
        if wanted
    ]
    total = len(phases)

    solution: Path | None = None
    if options.restore or options.build:
        solution = find_solution(working_dir)
        logger.verbose("DISCOVERY", f"Solution: {solution.name}")

    projects: list[Project] = []
    needs_projects = options.restore or options.build or (
        options.pack and not (working_dir / PACKAGING_DIR_NAME).is_dir()
    )
    if needs_projects:
        projects = discover_projects(working_dir)

    if not projects and (options.restore or options.build):
        logger.verbose(
            "DISCOVERY",
            f"[WARNING] No projects with a {PACKAGING_DIR_NAME}/ directory found; "
            "restore and build will do nothing",
        )

    nuget = (
        resolve_tool("nuget", config) if options.restore or options.pack else None
    )
    msbuild = resolve_tool("msbuild", config) if options.build else None

    restored: list[Path] = []
    built: list[BuildStep] = []
    packed: list[PackResult] = []

    for index, phase in enumerate(phases, start=1):
        if phase == "restore":
            logger.step(index, total, f"Restoring {len(projects)} project(s)...")
            restored = _restore(nuget, solution, projects, config, logger)
        elif phase == "build":
            platforms = ", ".join(str(p) for p in options.platforms)
            logger.step(
                index, total, f"Building {len(projects)} project(s) for {platforms}..."
            )
            built = _build(msbuild, solution, projects, options, config, logger)
        else:
            dirs = packaging_dirs(working_dir, projects)
            logger.step(index, total, f"Packing {len(dirs)} package(s)...")
            packed = _pack(nuget, dirs, config, logger)

    return RunResult(
        working_dir=working_dir,
        solution=solution,
        restored=tuple(restored),
        built=tuple(built),
        packed=tuple(packed),
        status="success",
    )
