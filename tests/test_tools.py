"""
Tests for nugetcpp.tools module.

Tests tool resolution including:
- Configured tool locations
- PATH lookup
- nuget.exe download and caching
"""

from __future__ import annotations

import pytest

from nugetcpp.config import ToolConfig
from nugetcpp.exceptions import ConfigError, NetworkError, PackagingError
from nugetcpp.tools import NUGET_EXE_URL, resolve_tool

pytestmark = pytest.mark.unit


@pytest.fixture
def no_path_tools(monkeypatch):
    """Pretend nothing is installed on PATH."""
    monkeypatch.setattr("nugetcpp.tools.shutil.which", lambda name: None)


class TestResolveFromConfigAndPath:
    """Tests for configured and PATH-based resolution."""

    def test_configured_file_used(self, tmp_test_dir, no_path_tools):
        """Test a configured path that exists is returned."""
        exe = tmp_test_dir / "nuget.exe"
        exe.write_bytes(b"MZ")
        config = ToolConfig(nuget=str(exe))

        assert resolve_tool("nuget", config) == str(exe)

    def test_configured_missing_raises(self, tmp_test_dir, no_path_tools):
        """Test a configured path that does not exist is an error."""
        config = ToolConfig(msbuild=str(tmp_test_dir / "missing" / "msbuild.exe"))

        with pytest.raises(ConfigError, match="Configured msbuild not found"):
            resolve_tool("msbuild", config)

    def test_found_on_path(self, monkeypatch):
        """Test PATH lookup when nothing is configured."""
        monkeypatch.setattr(
            "nugetcpp.tools.shutil.which", lambda name: f"/usr/bin/{name}"
        )

        assert resolve_tool("msbuild", ToolConfig()) == "/usr/bin/msbuild"

    def test_msbuild_missing_raises(self, no_path_tools):
        """Test msbuild is never downloaded."""
        with pytest.raises(PackagingError, match="msbuild not found on PATH"):
            resolve_tool("msbuild", ToolConfig())

    def test_unknown_tool_raises(self):
        """Test only nuget and msbuild can be resolved."""
        with pytest.raises(ValueError, match="Unknown tool"):
            resolve_tool("cmake", ToolConfig())


class TestNugetDownload:
    """Tests for the nuget.exe download fallback."""

    def test_download_and_cache(self, tmp_test_dir, no_path_tools, requests_mock):
        """Test nuget.exe is downloaded into the cache directory."""
        requests_mock.get(NUGET_EXE_URL, content=b"MZ-nuget")
        cache_dir = tmp_test_dir / "cache"

        result = resolve_tool("nuget", ToolConfig(cache_dir=cache_dir))

        assert result == str(cache_dir / "nuget.exe")
        assert (cache_dir / "nuget.exe").read_bytes() == b"MZ-nuget"
        assert not (cache_dir / "nuget.part").exists()

    def test_cached_copy_reused(self, tmp_test_dir, no_path_tools, requests_mock):
        """Test an existing cached nuget.exe skips the download."""
        cache_dir = tmp_test_dir / "cache"
        cache_dir.mkdir()
        (cache_dir / "nuget.exe").write_bytes(b"cached")

        result = resolve_tool("nuget", ToolConfig(cache_dir=cache_dir))

        assert result == str(cache_dir / "nuget.exe")
        assert requests_mock.call_count == 0

    def test_download_failure_raises(self, tmp_test_dir, no_path_tools, requests_mock):
        """Test HTTP errors become NetworkError."""
        requests_mock.get(NUGET_EXE_URL, status_code=503)

        with pytest.raises(NetworkError, match="Failed to download nuget.exe"):
            resolve_tool("nuget", ToolConfig(cache_dir=tmp_test_dir / "cache"))

        assert not (tmp_test_dir / "cache" / "nuget.exe").exists()

    def test_unwritable_cache_raises(self, tmp_test_dir, no_path_tools, requests_mock):
        """Test a cache_dir that cannot be created becomes PackagingError."""
        requests_mock.get(NUGET_EXE_URL, content=b"MZ-nuget")
        blocker = tmp_test_dir / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(PackagingError, match="Failed to cache nuget.exe"):
            resolve_tool("nuget", ToolConfig(cache_dir=blocker / "cache"))

        assert blocker.read_text() == "not a directory"

    def test_failed_write_removes_partial(
        self, tmp_test_dir, no_path_tools, requests_mock, monkeypatch
    ):
        """Test a failed rename does not leave nuget.part behind."""
        requests_mock.get(NUGET_EXE_URL, content=b"MZ-nuget")
        cache_dir = tmp_test_dir / "cache"

        def fail_replace(self, target):
            raise PermissionError(13, "Access is denied", str(target))

        monkeypatch.setattr("nugetcpp.tools.Path.replace", fail_replace)

        with pytest.raises(PackagingError, match="Access is denied"):
            resolve_tool("nuget", ToolConfig(cache_dir=cache_dir))

        assert not (cache_dir / "nuget.part").exists()
        assert not (cache_dir / "nuget.exe").exists()
