"""
nugetcpp - NuGet packaging for C++/WinRT components

A Python-based CLI tool that automates the restore, build, and pack cycle
for native library components distributed through NuGet.

nugetcpp provides:
  - Discovery of the solution, project, and .nuspec files in a source tree
  - nuget restore for every packaged project
  - msbuild Release builds for x64, x86, ARM64, and ARM
  - nuget pack using the version stored next to the .nuspec
  - Optional YAML configuration for tool locations
  - Automatic download of nuget.exe when it is not installed

Quick Start
-----------
Restore, build every platform, and pack:

    $ nuget-cpp --all

Build only x64 and ARM64 for a solution in another directory:

    $ nuget-cpp --dir C:/src/MyComponent --build x64 ARM64

For full CLI documentation:

    $ nuget-cpp --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    High-level orchestration of restore, build, and pack.
commands : module
    External tool invocations (nuget, msbuild).
discovery : module
    Filesystem lookups for solution, project, and packaging files.
config : package
    YAML tool configuration loading.
tools : module
    Locating and caching the external tools.
platforms : module
    Target CPU architectures.
options : module
    Typed run configuration resolved from the command line.

Public API
----------
The primary interface is the CLI, but key functions are exported for
programmatic use:

    from nugetcpp.core import run
    from nugetcpp.options import RunOptions
    from nugetcpp.platforms import Platform
    from nugetcpp.discovery import find_solution, discover_projects

For more details, see the individual module docstrings.
"""

__version__ = "0.3.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "NuGet packaging for C++/WinRT components"

# Re-export commonly used functions for convenience
from nugetcpp.core import run
from nugetcpp.discovery import discover_projects, find_solution
from nugetcpp.options import RunOptions
from nugetcpp.platforms import Platform

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "run",
    "discover_projects",
    "find_solution",
    "RunOptions",
    "Platform",
]
