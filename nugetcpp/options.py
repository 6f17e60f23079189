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

"""Typed run configuration for nugetcpp.

RunOptions is built once from the command line and never mutated. The
resolution rules live in RunOptions.resolve():

- --all turns on restore and pack
- --all also builds every platform, unless platforms were given explicitly
- build is requested exactly when at least one platform is selected
- repeated platforms are built once, at their first position
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from nugetcpp.platforms import ALL_PLATFORMS, Platform


@dataclass(frozen=True)
class RunOptions:
    """What a single nugetcpp invocation should do.

    Attributes:
        directory: Working directory to switch to before discovery, or None
            to stay in the current directory.
        all: True when --all was given.
        restore: Run nuget restore for every project.
        platforms: Platforms to build, in build order. Empty means no build.
        pack: Run nuget pack.
    """

    directory: Path | None = None
    all: bool = False
    restore: bool = False
    platforms: tuple[Platform, ...] = ()
    pack: bool = False

    @property
    def build(self) -> bool:
        return bool(self.platforms)

    @property
    def has_work(self) -> bool:
        return self.restore or self.build or self.pack

    @classmethod
    def resolve(
        cls,
        *,
        directory: str | Path | None = None,
        all: bool = False,
        restore: bool = False,
        platforms: Iterable[Platform] | None = None,
        pack: bool = False,
    ) -> RunOptions:
        """Apply the --all rules and return the effective options.

        Args:
            directory: Value of --dir, if any.
            all: Value of --all.
            restore: Value of --restore.
            platforms: Platforms given with --build, in command-line order.
            pack: Value of --pack.

        Returns:
            Resolved RunOptions.
        """
        selected: list[Platform] = []
        for platform in platforms or ():
            if platform not in selected:
                selected.append(platform)

        if all and not selected:
            selected = list(ALL_PLATFORMS)

        return cls(
            directory=Path(directory) if directory is not None else None,
            all=all,
            restore=all or restore,
            platforms=tuple(selected),
            pack=all or pack,
        )
