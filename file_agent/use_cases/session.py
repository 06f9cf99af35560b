"""
Agent session: the sandbox root, the current directory and the file operations
commands are built from.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from file_agent.entities.file_entry import FileEntry
from file_agent.exceptions import ConfigurationError, FileRepositoryError, NavigationError
from file_agent.ports.console.console_port import ConsolePort, MessageLevel
from file_agent.ports.files.file_system_port import FileSystemPort
from file_agent.utils import sandbox

EntryPredicate = Callable[[FileEntry], bool]

ALLOWED_PROPERTIES = ("length", "path", "lastModified")


def _any_entry(_: FileEntry) -> bool:
    return True


class Session:
    """
    State of one agent run.

    The current directory is kept canonical and is always the root or one of
    its descendants; every navigation goes through change_directory, which
    enforces that.
    """

    def __init__(
        self,
        root: Path,
        file_system: FileSystemPort,
        console: ConsolePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the session at its root.

        Args:
            root: Existing sandbox root directory
            file_system: File system collaborator
            console: Where human-readable results are written
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._root = self._fs.canonical(Path(root))
        self._current = self._root

    @classmethod
    def open(
        cls,
        root: Path,
        file_system: FileSystemPort,
        console: ConsolePort,
        logger: Optional[logging.Logger] = None,
    ) -> "Session":
        """
        Create the root directory if it is missing and start a session there.

        Raises:
            ConfigurationError: If the root directory cannot be created
        """
        try:
            canonical_root = file_system.ensure_directory(Path(root))
        except FileRepositoryError as e:
            raise ConfigurationError(f"Cannot prepare root directory {root}: {e}")
        return cls(canonical_root, file_system, console, logger)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def current_directory(self) -> Path:
        return self._current

    def resolve(self, name: str) -> Path:
        """Join a user supplied name onto the current directory."""
        return self._current / name

    def is_within_root(self, path: Path) -> bool:
        """Path-segment containment check on canonical paths."""
        return sandbox.contains(self._root, self._fs.canonical(path))

    def _inside_root(self, path: Path) -> bool:
        try:
            return self.is_within_root(path)
        except NavigationError as e:
            self._logger.warning(f"Cannot resolve {path}: {e}")
            return False

    def is_deletable(self, path: Path) -> bool:
        """
        True if path lies strictly below the root and is not the current directory.

        Names such as "." or ".." collapse onto the working directories, which
        must never be removed.
        """
        if not self._inside_root(path):
            return False
        candidate = self._fs.canonical(path)
        return candidate != self._root and candidate != self._current

    def list_entries(self, predicate: EntryPredicate = _any_entry) -> list[FileEntry]:
        """
        List direct children of the current directory matching predicate.

        An unreadable directory yields an empty list.
        """
        try:
            entries = self._fs.list_children(self._current)
        except FileRepositoryError as e:
            self._logger.warning(f"Cannot list {self._current}: {e}")
            return []
        return [entry for entry in entries if predicate(entry)]

    def total_size(self, predicate: EntryPredicate = _any_entry) -> int:
        """Sum of sizes of the matching direct children, 0 if there are none."""
        return sum(entry.size for entry in self.list_entries(predicate))

    def stat(self, path: Path) -> Optional[FileEntry]:
        return self._fs.stat(path)

    def delete_entry(self, entry: FileEntry) -> bool:
        """Delete a file or empty directory; failures are reported as False."""
        return self._fs.delete(entry)

    def change_directory(self, target: Path) -> bool:
        """
        Move to target if it is an existing directory inside the sandbox.

        Prints a confirmation or an error line; on failure the current
        directory is left unchanged.
        """
        try:
            if self._fs.is_directory(target) and self.is_within_root(target):
                self._current = self._fs.canonical(target)
                self._logger.info(f"Current directory is now {self._current}")
                self._console.write(
                    f"Changed to directory: {self._current}", MessageLevel.SUCCESS
                )
                return True
            self._logger.info(f"Refused navigation to {target}")
            self._console.write(
                f"Error: {target} is not a valid directory or it is above the root directory.",
                MessageLevel.ERROR,
            )
            return False
        except (NavigationError, OSError) as e:
            self._console.write(f"Error changing directory: {e}", MessageLevel.ERROR)
            return False

    def print_entry_properties(
        self, target: Path, properties: Sequence[str], name: Optional[str] = None
    ) -> None:
        """
        Print the requested properties of the entry at target, one line each.

        Entries outside the sandbox are reported as not found. name is the
        text shown in that message and defaults to the final path component.

        Allowed properties: length, path, lastModified (case-insensitive,
        last_modified accepted as an alias).
        """
        entry = self._fs.stat(target) if self._inside_root(target) else None
        if entry is None:
            self._console.write(f"File not found: {name or target.name}", MessageLevel.ERROR)
            return

        for prop in properties:
            key = prop.lower()
            if key == "length":
                self._console.write(f"length: {entry.size} bytes")
            elif key == "path":
                self._console.write(f"path: {entry.path}")
            elif key in ("lastmodified", "last_modified"):
                self._console.write(f"lastModified: {entry.last_modified}")
            else:
                self._console.write(
                    f"Unknown property: {prop}. Allowed properties: {', '.join(ALLOWED_PROPERTIES)}",
                    MessageLevel.WARNING,
                )
