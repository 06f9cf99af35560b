"""
Tests for the LocalFileSystemAdapter.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from file_agent.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_agent.entities.file_entry import FileEntry
from file_agent.exceptions import FileRepositoryError


class TestLocalFileSystemAdapter:
    """Test cases for the LocalFileSystemAdapter."""

    def test_list_children_success(self, temp_directory, mock_logger):
        """Test listing returns files and directories, not recursively."""
        adapter = LocalFileSystemAdapter(mock_logger)
        entries = adapter.list_children(Path(temp_directory))

        assert sorted(e.name for e in entries) == ["subdir", "test1.txt", "test2.py"]
        assert all(isinstance(e, FileEntry) for e in entries)

    def test_list_children_nonexistent_directory(self, mock_logger):
        """Test listing a non-existent directory."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Directory does not exist"):
            adapter.list_children(Path("/nonexistent/directory"))

    def test_list_children_with_file_path(self, temp_directory, mock_logger):
        """Test listing with a file path instead of directory."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Path is not a directory"):
            adapter.list_children(Path(temp_directory) / "test1.txt")

    def test_list_children_os_error(self, temp_directory, mock_logger):
        """Test that scandir failures are wrapped."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with patch("os.scandir", side_effect=PermissionError("Permission denied")):
            with pytest.raises(FileRepositoryError, match="Failed to list files"):
                adapter.list_children(Path(temp_directory))

    def test_list_children_skips_broken_entries(self, tmp_path, mock_logger):
        """Test that entries which cannot be stat'ed are skipped with a warning."""
        (tmp_path / "good.txt").write_text("ok")
        os.symlink(tmp_path / "missing", tmp_path / "dangling")
        adapter = LocalFileSystemAdapter(mock_logger)

        entries = adapter.list_children(tmp_path)

        assert [e.name for e in entries] == ["good.txt"]
        mock_logger.warning.assert_called_once()

    def test_stat_existing_and_missing(self, temp_directory, mock_logger):
        """Test stat returns an entry or None."""
        adapter = LocalFileSystemAdapter(mock_logger)

        entry = adapter.stat(Path(temp_directory) / "test1.txt")
        assert entry is not None and entry.name == "test1.txt"
        assert adapter.stat(Path(temp_directory) / "nope.txt") is None

    def test_delete_file(self, temp_directory, mock_logger):
        """Test deleting a file."""
        adapter = LocalFileSystemAdapter(mock_logger)
        entry = FileEntry.from_path(os.path.join(temp_directory, "test1.txt"))

        assert adapter.delete(entry) is True
        assert not os.path.exists(entry.path)

    def test_delete_twice_fails_quietly(self, temp_directory, mock_logger):
        """Test deleting an already removed file returns False."""
        adapter = LocalFileSystemAdapter(mock_logger)
        entry = FileEntry.from_path(os.path.join(temp_directory, "test1.txt"))

        assert adapter.delete(entry) is True
        assert adapter.delete(entry) is False
        mock_logger.warning.assert_called_once()

    def test_delete_non_empty_directory_refused(self, temp_directory, mock_logger):
        """Test that a non-empty directory is not removed."""
        adapter = LocalFileSystemAdapter(mock_logger)
        entry = FileEntry.from_path(os.path.join(temp_directory, "subdir"))

        assert adapter.delete(entry) is False
        assert os.path.isdir(entry.path)

    def test_delete_empty_directory(self, tmp_path, mock_logger):
        """Test that an empty directory is removed."""
        (tmp_path / "empty").mkdir()
        adapter = LocalFileSystemAdapter(mock_logger)

        assert adapter.delete(FileEntry.from_path(tmp_path / "empty")) is True
        assert not (tmp_path / "empty").exists()

    def test_ensure_directory_creates_once(self, tmp_path, mock_logger):
        """Test that the root directory is created when missing and reused otherwise."""
        adapter = LocalFileSystemAdapter(mock_logger)
        target = tmp_path / "testDir"

        created = adapter.ensure_directory(target)
        again = adapter.ensure_directory(target)

        assert created == again == target.resolve()
        assert target.is_dir()

    def test_ensure_directory_is_not_recursive(self, tmp_path, mock_logger):
        """Test that missing parents are not created."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Cannot create directory"):
            adapter.ensure_directory(tmp_path / "a" / "b")

    def test_ensure_directory_rejects_file(self, temp_directory, mock_logger):
        """Test that an existing file cannot serve as a directory."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Path is not a directory"):
            adapter.ensure_directory(Path(temp_directory) / "test1.txt")

    def test_canonical_resolves_dots(self, temp_directory, mock_logger):
        """Test canonicalization of '.' and '..' segments."""
        adapter = LocalFileSystemAdapter(mock_logger)
        messy = Path(temp_directory) / "subdir" / ".." / "." / "subdir"

        assert adapter.canonical(messy) == (Path(temp_directory) / "subdir").resolve()
