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

"""Locating the external nuget and msbuild executables.

Resolution order for each tool:

    1. Location from the tool configuration (must exist if it is a path)
    2. shutil.which() on PATH
    3. nuget only: nuget.exe downloaded from dist.nuget.org into the cache

Design Principles:
    - nuget.exe is cached globally (cache_dir), not per solution
    - The cached copy is reused as-is; delete it to pick up a newer release
    - msbuild is never downloaded; it must come from a Visual Studio or
      Build Tools installation

Example:
    ```python
    from nugetcpp.config import load_tool_config
    from nugetcpp.tools import resolve_tool

    nuget = resolve_tool("nuget", load_tool_config())
    ```
"""

from __future__ import annotations

from pathlib import Path
import shutil

import requests

from nugetcpp.config import ToolConfig
from nugetcpp.exceptions import ConfigError, NetworkError, PackagingError
from nugetcpp.logging import get_global_logger

NUGET_EXE_URL = "https://dist.nuget.org/win-x86-commandline/latest/nuget.exe"

KNOWN_TOOLS = ("nuget", "msbuild")


def _download_nuget(cache_dir: Path) -> Path:
    """Download and cache nuget.exe.

    Args:
        cache_dir: Directory to cache the tool.

    Returns:
        Path to the cached nuget.exe.

    Raises:
        NetworkError: If download fails.
        PackagingError: If the cache directory cannot be written.
    """
    logger = get_global_logger()
    tool_path = cache_dir / "nuget.exe"

    if tool_path.exists():
        logger.verbose("TOOLS", f"Using cached nuget.exe: {tool_path}")
        return tool_path

    logger.verbose("TOOLS", f"Downloading nuget.exe from {NUGET_EXE_URL}...")

    try:
        response = requests.get(NUGET_EXE_URL, timeout=60)
        response.raise_for_status()
    except requests.RequestException as err:
        raise NetworkError(f"Failed to download nuget.exe: {err}") from err

    # Write next to the target first so an interrupted download is not reused
    partial = tool_path.with_suffix(".part")
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
        partial.write_bytes(response.content)
        partial.replace(tool_path)
    except OSError as err:
        if partial.exists():
            partial.unlink()
        raise PackagingError(f"Failed to cache nuget.exe in {cache_dir}: {err}") from err

    logger.verbose("TOOLS", f"[OK] nuget.exe cached: {tool_path}")
    return tool_path


def resolve_tool(name: str, config: ToolConfig) -> str:
    """Return the executable to run for a tool.

    Args:
        name: "nuget" or "msbuild".
        config: Effective tool configuration.

    Returns:
        A path or command name suitable as argv[0].

    Raises:
        ValueError: If name is not a known tool.
        ConfigError: If a configured path does not exist.
        PackagingError: If msbuild cannot be found, or the downloaded
            nuget.exe cannot be written to the cache.
        NetworkError: If nuget.exe has to be downloaded and the download fails.
    """
    if name not in KNOWN_TOOLS:
        raise ValueError(f"Unknown tool: {name!r}")

    logger = get_global_logger()
    configured = config.tool(name)

    if configured is not None:
        found = shutil.which(configured)
        if found is None and Path(configured).is_file():
            found = configured
        if found is None:
            raise ConfigError(f"Configured {name} not found: {configured}")
        logger.debug("TOOLS", f"{name} from config: {found}")
        return found

    found = shutil.which(name)
    if found is not None:
        logger.debug("TOOLS", f"{name} from PATH: {found}")
        return found

    if name == "nuget":
        return str(_download_nuget(config.cache_dir))

    raise PackagingError(
        f"{name} not found on PATH. Run from a Developer Command Prompt or set "
        f"tools.{name} in the config file."
    )
