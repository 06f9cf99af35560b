"""
Local file system adapter implementation for the agent's file operations.
"""

import logging
import os
from pathlib import Path

from typing_extensions import override

from file_agent.entities.file_entry import FileEntry
from file_agent.exceptions import FileRepositoryError
from file_agent.ports.files.file_system_port import FileSystemPort
from file_agent.utils import sandbox


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: Path) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not directory.exists():
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not directory.is_dir():
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    def _create_entries(self, paths: list[Path]) -> list[FileEntry]:
        """
        Create FileEntry snapshots, skipping entries that vanished or cannot be stat'ed.
        """
        entries: list[FileEntry] = []
        for path in paths:
            try:
                entries.append(FileEntry.from_path(path))
            except FileRepositoryError as e:
                # Log the error but continue with other entries
                self._logger.warning(f"Could not process entry {path}: {e}")
                continue

        return entries

    @override
    def list_children(self, directory: Path) -> list[FileEntry]:
        try:
            self._validate_directory(directory)

            with os.scandir(directory) as it:
                paths = [Path(directory) / item.name for item in it]
            return self._create_entries(paths)

        except FileRepositoryError:
            raise
        except OSError as e:
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")

    @override
    def stat(self, path: Path) -> FileEntry | None:
        if not os.path.lexists(path):
            return None
        try:
            return FileEntry.from_path(path)
        except FileRepositoryError as e:
            self._logger.warning(f"Could not stat {path}: {e}")
            return None

    @override
    def delete(self, entry: FileEntry) -> bool:
        try:
            if entry.is_dir:
                # Non-empty directories are refused, never removed recursively
                os.rmdir(entry.path)
            else:
                os.remove(entry.path)
        except OSError as e:
            self._logger.warning(f"Could not delete {entry.path}: {e}")
            return False
        self._logger.info(f"Deleted {entry.path}")
        return True

    @override
    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    @override
    def canonical(self, path: Path) -> Path:
        return sandbox.canonical(path)

    @override
    def ensure_directory(self, path: Path) -> Path:
        if not path.exists():
            try:
                path.mkdir()
            except OSError as e:
                raise FileRepositoryError(f"Cannot create directory {path}: {e}")
            self._logger.info(f"Created directory {path}")
        elif not path.is_dir():
            raise FileRepositoryError(f"Path is not a directory: {path}")
        return self.canonical(path)
