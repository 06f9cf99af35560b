"""
File entry domain entity.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from file_agent.exceptions import FileRepositoryError


@dataclass(frozen=True)
class FileEntry:
    """
    Snapshot of a file system entry (file or directory) taken at listing time.

    Attributes:
        path: Path of the entry as it was addressed
        name: Final path component
        size: Size in bytes as reported by the file system (directories included)
        last_modified: Modification time in milliseconds since the epoch
        is_dir: Whether the entry is a directory
    """

    path: Path
    name: str
    size: int
    last_modified: int
    is_dir: bool

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "FileEntry":
        """
        Build an entry by stat'ing the given path.

        Args:
            path: Path of the entry to describe

        Returns:
            A FileEntry reflecting the current state of the file system

        Raises:
            FileRepositoryError: If the path is empty or cannot be stat'ed
        """
        if not path or not str(path):
            raise FileRepositoryError("Path must be a non-empty string")

        p = Path(path)
        try:
            st = p.stat()
        except FileNotFoundError:
            raise FileRepositoryError(f"File does not exist: {p}")
        except OSError as e:
            raise FileRepositoryError(f"Cannot stat {p}: {e}")

        return cls(
            path=p,
            name=p.name,
            size=st.st_size,
            last_modified=st.st_mtime_ns // 1_000_000,
            is_dir=p.is_dir(),
        )

    @property
    def is_file(self) -> bool:
        """True for plain files (anything that is not a directory)."""
        return not self.is_dir
