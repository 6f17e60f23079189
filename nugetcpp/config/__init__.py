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

"""Tool configuration loading for nugetcpp.

This module loads the optional YAML file that tells nugetcpp where the
external tools live and how long a single command may run:

    tools:
      nuget: C:/tools/nuget.exe
      msbuild: msbuild
    timeout: 3600
    cache_dir: ~/.nugetcpp/cache

Public API:

- load_tool_config: Load and merge the configuration over built-in defaults
- ToolConfig: Frozen result of loading

Example:
    Basic usage:

        from pathlib import Path
        from nugetcpp.config import load_tool_config

        config = load_tool_config(Path("nugetcpp.yaml"))
        print(config.timeout)

"""

from .loader import CONFIG_FILE_NAME, ToolConfig, load_tool_config

__all__ = ["CONFIG_FILE_NAME", "ToolConfig", "load_tool_config"]
