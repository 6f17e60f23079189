"""
Tests for nugetcpp.options module.

Tests run option resolution including:
- --all implying restore, build, and pack
- Explicit platforms overriding the --all platform set
- Platform order and de-duplication
- Immutability
"""

from __future__ import annotations

from pathlib import Path

import pytest

from nugetcpp.options import RunOptions
from nugetcpp.platforms import ALL_PLATFORMS, Platform

pytestmark = pytest.mark.unit


class TestRunOptionsResolve:
    """Tests for RunOptions.resolve."""

    def test_all_implies_everything(self):
        """Test --all with no platforms builds the full set."""
        options = RunOptions.resolve(all=True)

        assert options.restore
        assert options.pack
        assert options.build
        assert options.platforms == ALL_PLATFORMS

    def test_all_keeps_explicit_platforms(self):
        """Test --all does not override platforms given with --build."""
        options = RunOptions.resolve(all=True, platforms=[Platform.ARM])

        assert options.platforms == (Platform.ARM,)
        assert options.restore and options.pack

    def test_build_order_follows_command_line(self):
        """Test platforms keep the order they were given in."""
        options = RunOptions.resolve(platforms=[Platform.ARM64, Platform.X86])

        assert options.platforms == (Platform.ARM64, Platform.X86)
        assert not options.restore
        assert not options.pack

    def test_duplicate_platforms_collapse(self):
        """Test repeated platforms are built once at the first position."""
        options = RunOptions.resolve(
            platforms=[Platform.X64, Platform.ARM, Platform.X64]
        )

        assert options.platforms == (Platform.X64, Platform.ARM)

    def test_no_flags_means_no_work(self):
        """Test an empty command line requests nothing."""
        options = RunOptions.resolve()

        assert not options.build
        assert not options.has_work

    def test_directory_becomes_path(self):
        """Test the --dir value is stored as a Path."""
        options = RunOptions.resolve(directory="some/dir", pack=True)

        assert options.directory == Path("some/dir")
        assert options.has_work

    def test_options_are_frozen(self):
        """Test RunOptions cannot be mutated after resolution."""
        options = RunOptions.resolve(restore=True)

        with pytest.raises(AttributeError):
            options.restore = False  # type: ignore[misc]
