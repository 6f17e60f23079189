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

"""External command invocations for restore, build, and pack.

Each function builds the exact argument list for one tool call, runs it,
and raises CommandError if the process does not exit with status 0.
Output is not captured: nuget and msbuild write straight to the console,
and nothing here looks at what they print.

Command shapes:

    nuget restore <project> -SolutionDirectory <solution dir>
    msbuild <solution> /t:<target> /property:Configuration=Release /property:Platform=<arch>
    nuget pack <manifest> -version <version>
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import subprocess

from nugetcpp.exceptions import CommandError
from nugetcpp.logging import get_global_logger
from nugetcpp.platforms import Platform

BUILD_CONFIGURATION = "Release"


def run_command(
    cmd: Sequence[str], description: str, timeout: float | None = None
) -> None:
    """Run a command to completion and check its exit status.

    Args:
        cmd: Argument list; cmd[0] is the executable.
        description: What is being run, used in error messages
            (e.g., "msbuild for Lib (ARM)").
        timeout: Seconds to wait before giving up, or None to wait forever.

    Raises:
        CommandError: If the command cannot start, exits non-zero, or
            times out.
    """
    logger = get_global_logger()
    logger.verbose("RUN", " ".join(cmd))

    try:
        subprocess.run(list(cmd), check=True, timeout=timeout)
    except subprocess.CalledProcessError as err:
        raise CommandError(
            f"{description} failed (exit code {err.returncode})",
            command=cmd,
            returncode=err.returncode,
        ) from err
    except subprocess.TimeoutExpired as err:
        raise CommandError(
            f"{description} timed out after {err.timeout}s", command=cmd
        ) from err
    except OSError as err:
        raise CommandError(
            f"{description} could not be started: {err}", command=cmd
        ) from err


def restore_project(
    nuget: str,
    project_file: Path,
    solution_dir: Path,
    timeout: float | None = None,
) -> None:
    """Run nuget restore for one project."""
    cmd = [
        nuget,
        "restore",
        str(project_file),
        "-SolutionDirectory",
        str(solution_dir),
    ]
    run_command(cmd, f"nuget restore for {project_file.name}", timeout)


def build_project(
    msbuild: str,
    solution: Path,
    target: str,
    platform: Platform,
    timeout: float | None = None,
    project_name: str | None = None,
) -> None:
    """Build one solution target in Release for one platform.

    project_name (e.g., "Foo.Bar.vcxproj") is only used in error messages;
    the target alone is reported when it is not given.
    """
    cmd = [
        msbuild,
        str(solution),
        f"/t:{target}",
        f"/property:Configuration={BUILD_CONFIGURATION}",
        f"/property:Platform={platform}",
    ]
    subject = f"{project_name} /t:{target}" if project_name else target
    run_command(cmd, f"msbuild for {subject} ({platform})", timeout)


def pack_manifest(
    nuget: str,
    manifest: Path,
    version: str,
    timeout: float | None = None,
) -> None:
    """Run nuget pack for one manifest at the given version."""
    cmd = [
        nuget,
        "pack",
        str(manifest),
        "-version",
        version,
    ]
    run_command(cmd, f"nuget pack for {manifest.name} {version}", timeout)
