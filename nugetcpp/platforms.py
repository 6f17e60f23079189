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

"""Target CPU architectures for msbuild.

The set of platforms is closed: x64, x86, ARM, and ARM64. Command-line
tokens are matched case-insensitively and always displayed in the casing
msbuild expects for the Platform property.

Example:
    Parse user input:
        ```python
        from nugetcpp.platforms import Platform

        Platform.parse("arm64")   # Platform.ARM64
        str(Platform.ARM64)       # "ARM64"
        ```
"""

from __future__ import annotations

from enum import Enum


class Platform(Enum):
    """A CPU architecture passed to msbuild as /property:Platform=<value>."""

    X64 = "x64"
    X86 = "x86"
    ARM = "ARM"
    ARM64 = "ARM64"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: str) -> Platform:
        """Parse a platform name, ignoring case.

        Args:
            token: User-provided platform name (e.g., "x64", "arm64").

        Returns:
            The matching Platform.

        Raises:
            ValueError: If token does not name a known platform.
        """
        wanted = token.strip().lower()
        for platform in cls:
            if platform.value.lower() == wanted:
                return platform
        raise ValueError(
            f"Invalid platform value {token!r}! Expecting: x86, x64, ARM or ARM64."
        )


# Build order used when --all is given without explicit platforms
ALL_PLATFORMS: tuple[Platform, ...] = (
    Platform.X64,
    Platform.X86,
    Platform.ARM64,
    Platform.ARM,
)
