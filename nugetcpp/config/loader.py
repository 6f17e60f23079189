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

"""
Tool configuration loading and merging for nugetcpp.

The configuration file is optional. When present it is deep-merged over the
built-in defaults, so a file only needs the keys it changes.

Lookup Order
------------
1. The path given with --config (must exist)
2. nugetcpp.yaml in the working directory (after --dir is applied)
3. Built-in defaults only

Merge Behavior
--------------
  - **Dicts**: Recursively merged (keys from the file override defaults)
  - **Lists and scalars**: Replaced

Path Resolution
---------------
Relative paths are resolved against the CONFIG FILE location:
  - tools.nuget and tools.msbuild, when they contain a path separator
    (a bare name like "msbuild" stays a PATH lookup)
  - cache_dir (after ~ expansion)

Error Handling
--------------
- ConfigError: missing explicit file, YAML parse errors, wrong value types
- All errors are chained with "from err" for better debugging
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from nugetcpp.exceptions import ConfigError
from nugetcpp.logging import get_global_logger

CONFIG_FILE_NAME = "nugetcpp.yaml"

DEFAULTS: dict[str, Any] = {
    "tools": {
        "nuget": None,
        "msbuild": None,
    },
    "timeout": None,
    "cache_dir": "~/.nugetcpp/cache",
}


# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class ToolConfig:
    """Effective tool configuration.

    Attributes:
        nuget: Configured nuget executable, or None to search PATH.
        msbuild: Configured msbuild executable, or None to search PATH.
        timeout: Per-command timeout in seconds, or None for no limit.
        cache_dir: Directory where a downloaded nuget.exe is kept.
        source: The file the configuration was read from, if any.
    """

    nuget: str | None = None
    msbuild: str | None = None
    timeout: float | None = None
    cache_dir: Path = Path("~/.nugetcpp/cache").expanduser()
    source: Path | None = None

    def tool(self, name: str) -> str | None:
        """Return the configured location for a tool name, if any."""
        return {"nuget": self.nuget, "msbuild": self.msbuild}.get(name)


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Load a YAML file and return the parsed Python object (None if empty)."""
    try:
        with p.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    except OSError as err:
        raise ConfigError(f"Could not read config file {p}: {err}") from err


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Value conversion
# -------------------------------


def _resolve_tool_path(value: Any, key: str, base_dir: Path | None) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"tools.{key} must be a non-empty string")

    value = value.strip()
    # Bare command names are looked up on PATH later
    if base_dir is None or ("/" not in value and "\\" not in value):
        return value

    p = Path(value).expanduser()
    if not p.is_absolute():
        p = (base_dir / p).resolve()
    return str(p)


def _to_timeout(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"timeout must be a positive number of seconds, got {value!r}")
    return float(value)


def _to_cache_dir(value: Any, base_dir: Path | None) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"cache_dir must be a non-empty string, got {value!r}")
    p = Path(value).expanduser()
    if not p.is_absolute() and base_dir is not None:
        p = (base_dir / p).resolve()
    return p


# -------------------------------
# Public API
# -------------------------------


def load_tool_config(
    config_path: Path | None = None,
    *,
    working_dir: Path | None = None,
) -> ToolConfig:
    """
    Load the effective tool configuration.

    Args:
        config_path: Explicit configuration file (from --config).
        working_dir: Directory searched for nugetcpp.yaml when config_path
            is not given. Defaults to the current directory.

    Returns:
        ToolConfig with file values merged over the defaults.

    Raises:
        ConfigError: If config_path does not exist, the YAML is invalid,
            or a value has the wrong type.
    """
    logger = get_global_logger()

    if config_path is not None:
        config_path = config_path.resolve()
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        candidate = (working_dir or Path.cwd()) / CONFIG_FILE_NAME
        if candidate.is_file():
            config_path = candidate.resolve()

    merged: dict[str, Any] = DEFAULTS
    base_dir: Path | None = None

    if config_path is not None:
        logger.verbose("CONFIG", f"Loading: {config_path}")
        data = _load_yaml_file(config_path)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Top-level YAML must be a mapping (dict): {config_path}"
            )
        if "tools" in data and not isinstance(data["tools"], dict):
            raise ConfigError(f"'tools' must be a mapping: {config_path}")
        merged = _deep_merge_dicts(DEFAULTS, data)
        base_dir = config_path.parent
    else:
        logger.debug("CONFIG", "No config file found, using defaults")

    tools = merged["tools"]
    config = ToolConfig(
        nuget=_resolve_tool_path(tools.get("nuget"), "nuget", base_dir),
        msbuild=_resolve_tool_path(tools.get("msbuild"), "msbuild", base_dir),
        timeout=_to_timeout(merged.get("timeout")),
        cache_dir=_to_cache_dir(merged.get("cache_dir"), base_dir),
        source=config_path,
    )

    logger.debug("CONFIG", f"Effective config: {config}")
    return config
