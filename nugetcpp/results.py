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

"""Public API return types for nugetcpp.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Note:
    Only public API return types belong in this module. Domain types
    (like discovery.Project) stay co-located with their related logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nugetcpp.platforms import Platform


@dataclass(frozen=True)
class BuildStep:
    """One successful msbuild invocation.

    Attributes:
        target: msbuild target that was built.
        platform: Platform it was built for.
    """

    target: str
    platform: Platform


@dataclass(frozen=True)
class PackResult:
    """One successful nuget pack invocation.

    Attributes:
        manifest: Path to the .nuspec that was packed.
        version: Version passed to nuget pack.
    """

    manifest: Path
    version: str


@dataclass(frozen=True)
class RunResult:
    """Result of a complete run.

    Attributes:
        working_dir: Directory the run operated in.
        solution: Solution used for restore/build, None if neither ran.
        restored: Project files that were restored, in order.
        built: Builds that ran, in order.
        packed: Packages that were created, in order.
        status: Always "success" for a completed run.
    """

    working_dir: Path
    solution: Path | None
    restored: tuple[Path, ...]
    built: tuple[BuildStep, ...]
    packed: tuple[PackResult, ...]
    status: str
