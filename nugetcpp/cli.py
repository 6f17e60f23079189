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

"""Command-line interface for nugetcpp.

This module provides the main CLI entry point for the nuget-cpp tool.

Example:
    Restore, build all platforms, and pack:
        ```bash
        $ nuget-cpp --all
        ```

    Work on a solution in another directory:
        ```bash
        $ nuget-cpp --dir C:/src/MyComponent --restore --pack
        ```

    Build selected platforms (repeatable, case-insensitive):
        ```bash
        $ nuget-cpp -b x64 arm64 -b x86
        ```

    Enable verbose output:
        ```bash
        $ nuget-cpp --all --verbose
        ```

Exit Codes:

- 0: Success
- 1: Error (discovery, configuration, or external command failure)
- 2: Invalid command-line arguments

Note:
    Errors are printed to stderr. Verbose mode shows full tracebacks on
    errors for debugging. Debug mode implies verbose mode.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys

from nugetcpp.core import run
from nugetcpp.exceptions import NugetCppError
from nugetcpp.logging import get_logger, set_global_logger
from nugetcpp.options import RunOptions
from nugetcpp.platforms import Platform


def _program_version() -> str:
    try:
        return version("nugetcpp")
    except PackageNotFoundError:
        from nugetcpp import __version__

        return __version__


def _platform_arg(value: str) -> Platform:
    """argparse type for --build values."""
    try:
        return Platform.parse(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def build_parser() -> argparse.ArgumentParser:
    """Create the nuget-cpp argument parser."""
    parser = argparse.ArgumentParser(
        prog="nuget-cpp",
        description="A tool that assists in packaging C++/WinRT components for NuGet.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"nuget-cpp {_program_version()}",
    )
    parser.add_argument(
        "-d",
        "--dir",
        default=None,
        help="Sets the current directory when running the tool",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Restores projects, builds all platforms, and packs",
    )
    parser.add_argument(
        "-r",
        "--restore",
        action="store_true",
        help="Calls nuget restore for every packaged project",
    )
    parser.add_argument(
        "-b",
        "--build",
        action="extend",
        nargs="+",
        type=_platform_arg,
        default=[],
        metavar="PLATFORM",
        help="Builds the solution for Release (x64, x86, ARM, ARM64; repeatable)",
    )
    parser.add_argument(
        "-p",
        "--pack",
        action="store_true",
        help="Packs the resulting files. Uses the nuget/ directory",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Tool configuration file (default: ./nugetcpp.yaml if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> RunOptions:
    """Resolve parsed arguments into RunOptions."""
    return RunOptions.resolve(
        directory=args.dir,
        all=args.all,
        restore=args.restore,
        platforms=args.build,
        pack=args.pack,
    )


def cmd_run(args: argparse.Namespace) -> int:
    """Run the phases selected on the command line.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).

    Note:
        Prints progress and results to stdout, errors to stderr.
    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    options = options_from_args(args)

    if options.directory is not None:
        print(f"Using {options.directory}...")

    try:
        result = run(options, config_path=args.config, logger=logger)
    except NugetCppError as err:
        print(f"Error: {err}", file=sys.stderr)
        if args.verbose or args.debug:
            import traceback

            traceback.print_exc()
        return 1

    print()
    print("=" * 70)
    print("RESULTS")
    print("=" * 70)
    print(f"Directory:       {result.working_dir}")
    if result.solution is not None:
        print(f"Solution:        {result.solution.name}")
    if options.restore:
        print(f"Restored:        {len(result.restored)} project(s)")
    if options.build:
        print(f"Builds:          {len(result.built)}")
    for package in result.packed:
        print(f"Packed:          {package.manifest.name} v{package.version}")
    print(f"Status:          {result.status}")
    print("=" * 70)
    print()
    print("[SUCCESS] Done!")

    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the nuget-cpp CLI.

    This function is registered as the 'nuget-cpp' console script in
    pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not options_from_args(args).has_work:
        parser.print_help()
        sys.exit(0)

    sys.exit(cmd_run(args))


if __name__ == "__main__":
    main()
