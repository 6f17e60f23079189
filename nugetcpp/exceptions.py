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

"""Exception hierarchy for nugetcpp.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- ConfigError: Configuration-related errors (bad --dir, invalid tool config YAML)
- DiscoveryError: Required solution/project/packaging files missing or ambiguous
- PackagingError: Missing build tools or failing external commands
- NetworkError: nuget.exe download failures

All exceptions inherit from NugetCppError, allowing users to catch all
nugetcpp errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from nugetcpp.core import run
        from nugetcpp.exceptions import CommandError, DiscoveryError

        try:
            result = run(options)
        except DiscoveryError as e:
            print(f"Discovery error: {e}")
        except CommandError as e:
            print(f"{e.command[0]} exited with {e.returncode}")
        ```
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "NugetCppError",
    "ConfigError",
    "DiscoveryError",
    "NotFoundError",
    "AmbiguousError",
    "PackagingError",
    "CommandError",
    "NetworkError",
]


class NugetCppError(Exception):
    """Base exception for all nugetcpp errors.

    All nugetcpp-specific exceptions inherit from this class, allowing users
    to catch all nugetcpp errors with a single except clause if needed.
    """

    pass


class ConfigError(NugetCppError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - The --dir override (missing or not a directory)
    - Tool configuration YAML (syntax errors, invalid structure)
    - Configured tool paths that do not exist
    """

    pass


class DiscoveryError(NugetCppError):
    """Raised when a required file or directory cannot be resolved.

    Also raised directly when a directory or the VERSION file cannot be
    read, or when the VERSION file is empty.
    """

    pass


class NotFoundError(DiscoveryError):
    """Raised when no candidate matched a single-match lookup."""

    pass


class AmbiguousError(DiscoveryError):
    """Raised when more than one candidate matched a single-match lookup."""

    pass


class PackagingError(NugetCppError):
    """Raised for packaging/build-related errors.

    This exception is raised when there are problems with:

    - Missing build tools (msbuild not on PATH)
    - External command failures (see CommandError)
    """

    pass


class CommandError(PackagingError):
    """Raised when an external command fails, cannot start, or times out.

    Attributes:
        command: The argument list that was executed.
        returncode: Exit status of the process, or None if it never
            finished (failed to start or timed out).
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode


class NetworkError(NugetCppError):
    """Raised for network/download-related errors.

    Currently only raised when nuget.exe has to be downloaded and the
    download fails.
    """

    pass
