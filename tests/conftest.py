"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional
from unittest.mock import MagicMock

import pytest

from file_agent.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_agent.ports.console.console_port import ConsolePort, MessageLevel
from file_agent.use_cases.session import Session


class RecordingConsole(ConsolePort):
    """Console fake: feeds scripted input lines and records every output line."""

    def __init__(self, inputs: Optional[list[str]] = None):
        self.inputs = list(inputs or [])
        self.lines: list[str] = []
        self.levels: list[MessageLevel] = []
        self.prompts: list[str] = []

    def write(self, message: str, level: MessageLevel = MessageLevel.INFO) -> None:
        self.lines.append(message)
        self.levels.append(level)

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        if not self.inputs:
            return None
        return self.inputs.pop(0)

    def clear(self) -> None:
        self.lines.clear()
        self.levels.clear()


def write_file(path: Path, size: int) -> Path:
    """Create a file holding exactly size bytes."""
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def console():
    """Recording console without scripted input."""
    return RecordingConsole()


@pytest.fixture
def sandbox_root(tmp_path: Path) -> Path:
    """
    An empty sandbox root named 'root' with an empty sibling 'root2'.

    The sibling shares the root's name as a prefix and must never be reachable.
    """
    root = tmp_path / "root"
    root.mkdir()
    (tmp_path / "root2").mkdir()
    return root


@pytest.fixture
def session(sandbox_root: Path, console: RecordingConsole, mock_logger) -> Session:
    """Session on an empty sandbox root backed by the local file system."""
    return Session(sandbox_root, LocalFileSystemAdapter(mock_logger), console, mock_logger)


@pytest.fixture
def make_file():
    """Factory creating a file of an exact size, optionally with a modification time."""

    def _make(path: Path, size: int = 0, mtime: Optional[float] = None) -> Path:
        write_file(path, size)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def scripted_console():
    """Factory for a recording console fed with the given input lines."""
    return RecordingConsole
