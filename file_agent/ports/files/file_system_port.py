"""
File system port interface defining the contract for the agent's file operations.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from file_agent.entities.file_entry import FileEntry


class FileSystemPort(ABC):
    """Port interface for the host file system."""

    @abstractmethod
    def list_children(self, directory: Path) -> list[FileEntry]:
        """
        List the direct children of a directory.

        Args:
            directory: Directory to enumerate

        Returns:
            FileEntry snapshots in enumeration order (not sorted)

        Raises:
            FileRepositoryError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def stat(self, path: Path) -> FileEntry | None:
        """
        Describe a single entry.

        Args:
            path: Path of the entry

        Returns:
            A FileEntry, or None if nothing exists at path
        """
        pass

    @abstractmethod
    def delete(self, entry: FileEntry) -> bool:
        """
        Delete a file or an empty directory.

        Args:
            entry: Entry to delete

        Returns:
            True on success, False on any failure
        """
        pass

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """Return True if path exists and is a directory."""
        pass

    @abstractmethod
    def canonical(self, path: Path) -> Path:
        """
        Resolve symlinks, '.' and '..' into an absolute path.

        Raises:
            NavigationError: If the path cannot be resolved
        """
        pass

    @abstractmethod
    def ensure_directory(self, path: Path) -> Path:
        """
        Create a single directory if it is missing (parents are not created).

        Args:
            path: Directory path to create

        Returns:
            The canonical path of the directory

        Raises:
            FileRepositoryError: If the directory cannot be created
        """
        pass
