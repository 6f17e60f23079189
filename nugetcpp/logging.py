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

"""Console output for nugetcpp runs.

Progress is reported on three channels:

- step: "[2/3] Building 1 project(s) for x64, ARM..." lines, always shown
- verbose: "[BUILD] Building Lib for x64" lines, shown with --verbose
- debug: "[TOOLS] msbuild from PATH: ..." lines, shown with --debug

The module-level logger starts out silent so that importing nugetcpp as a
library prints nothing. cli.cmd_run installs a DefaultLogger built from the
--verbose/--debug flags; core.run() also accepts a logger argument directly.
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """What core, discovery, config and tools need from a logger."""

    def step(self, step: int, total: int, message: str) -> None:
        """Report the start of run phase step out of total."""
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Report detail within a phase, tagged with prefix (e.g., "PACK")."""
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Report tool resolution and config internals."""
        ...


class DefaultLogger:
    """Prints to stdout; debug output implies verbose output."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self._verbose = verbose or debug
        self._debug = debug

    def step(self, step: int, total: int, message: str) -> None:
        print(f"[{step}/{total}] {message}", flush=True)

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}", flush=True)

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}", flush=True)


class SilentLogger:
    """Discards everything."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Build a console logger for the given --verbose/--debug flags."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger modules use when none is passed in."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install logger as the module-level default for the rest of the process."""
    global _global_logger
    _global_logger = logger
