"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including source tree builders, mock collaborators and common test objects.
"""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.file_io import MockFileReader
from core.models import DiscoveredFile
from ui.console import MockReporter
from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def project_root(tmp_path):
    """Create a temporary project root for testing."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def make_tree(project_root):
    """
    Factory that writes a source tree under project_root.

    Keys are POSIX-style relative paths, values are file contents (str is
    written as UTF-8 bytes without newline translation, bytes as-is).
    """

    def _factory(files: dict[str, str | bytes]) -> Path:
        for rel_path, content in files.items():
            target = project_root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            data = content.encode("utf-8") if isinstance(content, str) else content
            target.write_bytes(data)
        return project_root

    return _factory


@pytest.fixture
def discovered_file_factory():
    """Factory for creating DiscoveredFile instances from POSIX path strings."""

    def _factory(path: str) -> DiscoveredFile:
        return DiscoveredFile(Path(path))

    return _factory


@pytest.fixture
def reporter():
    """Reporter that records messages for testing."""
    return MockReporter()


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def tracking_progress_display():
    """Progress display that records its calls as (event, argument) tuples."""
    mock = MagicMock()
    mock.calls = []

    mock.on_start = lambda total: mock.calls.append(("start", total))
    mock.on_file = lambda relative_path: mock.calls.append(("file", relative_path))
    mock.on_complete = lambda count: mock.calls.append(("complete", count))
    mock.__enter__ = MagicMock(return_value=mock)
    mock.__exit__ = MagicMock(return_value=None)

    return mock


@pytest.fixture
def fixed_now():
    """A fixed local timestamp for bundle headers."""
    return datetime(2024, 1, 15, 14, 30, 0)


@pytest.fixture
def read_output():
    """Read a written bundle as text without any newline translation."""

    def _read(path: Path) -> str:
        return path.read_bytes().decode("utf-8")

    return _read


@pytest.fixture
def mock_file_reader_factory():
    """Factory for creating MockFileReader instances with file content mappings."""

    def _factory(file_contents: dict[str, str]):
        """
        Create a MockFileReader configured with file content mappings.

        Args:
            file_contents: Dictionary mapping file names to their content.

        Returns:
            MockFileReader instance configured to return content based on file name.
        """

        def read_file_side_effect(path: Path) -> str:
            return file_contents.get(path.name, "")

        return MockFileReader(read_file_fn=read_file_side_effect)

    return _factory
