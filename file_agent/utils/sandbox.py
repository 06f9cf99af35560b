"""Sandbox root utilities to constrain navigation.

Containment is decided on canonical paths (symlinks, '.' and '..' resolved)
and compared segment by segment, so a sibling such as 'root2' never passes
for a root named 'root'.
"""

from __future__ import annotations

import os
from pathlib import Path

from file_agent.exceptions import NavigationError


def canonical(path: str | os.PathLike[str]) -> Path:
    """Return the canonical absolute form of path, whether or not it exists."""
    try:
        return Path(os.path.expanduser(str(path))).resolve()
    except (OSError, RuntimeError) as e:
        # RuntimeError: symlink loop on older interpreters
        raise NavigationError(f"Cannot resolve {path}: {e}")


def contains(root: Path, candidate: Path) -> bool:
    """Segment-wise check on paths that are already canonical."""
    try:
        common = os.path.commonpath([str(root), str(candidate)])
    except ValueError:
        # different drives on Windows
        return False
    return common == str(root)
