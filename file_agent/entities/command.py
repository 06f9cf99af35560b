"""
Command variants understood by the agent.

The set is closed: every variant is a frozen dataclass tagged with the keyword
that selects it. Execution lives in the command executor, which dispatches on
the variant type.
"""

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class ListFiles:
    keyword: ClassVar[str] = "ls"
    usage: ClassVar[str] = "ls"


@dataclass(frozen=True)
class TotalSize:
    keyword: ClassVar[str] = "size"
    usage: ClassVar[str] = "size"


@dataclass(frozen=True)
class ChangeDirectory:
    path_arg: str
    keyword: ClassVar[str] = "cd"
    usage: ClassVar[str] = "cd <dir>"


@dataclass(frozen=True)
class DeleteFile:
    name: str
    keyword: ClassVar[str] = "delete"
    usage: ClassVar[str] = "delete <file>"


@dataclass(frozen=True)
class PrintFileProperties:
    name: str
    properties: tuple[str, ...]
    keyword: ClassVar[str] = "print"
    usage: ClassVar[str] = "print <file> <property...>"

    def __post_init__(self) -> None:
        if not self.properties:
            raise ValueError("print requires at least one property")
        # Lists are accepted but stored as a tuple to keep the value hashable.
        object.__setattr__(self, "properties", tuple(self.properties))


@dataclass(frozen=True)
class DeleteOldFiles:
    keyword: ClassVar[str] = "delete_old_files"
    usage: ClassVar[str] = "delete_old_files"


@dataclass(frozen=True)
class DeleteLargestFile:
    keyword: ClassVar[str] = "delete_largest_file"
    usage: ClassVar[str] = "delete_largest_file"


@dataclass(frozen=True)
class ChangeDirectoryRandom:
    keyword: ClassVar[str] = "random_cd"
    usage: ClassVar[str] = "random_cd"


@dataclass(frozen=True)
class ChangeDirectoryUp:
    keyword: ClassVar[str] = "cd_up"
    usage: ClassVar[str] = "cd_up"


@dataclass(frozen=True)
class Exit:
    keyword: ClassVar[str] = "exit"
    usage: ClassVar[str] = "exit"


Command = Union[
    ListFiles,
    TotalSize,
    ChangeDirectory,
    DeleteFile,
    PrintFileProperties,
    DeleteOldFiles,
    DeleteLargestFile,
    ChangeDirectoryRandom,
    ChangeDirectoryUp,
    Exit,
]

# Order used for the help banner.
ALL_COMMANDS: tuple[type, ...] = (
    ListFiles,
    TotalSize,
    ChangeDirectory,
    DeleteFile,
    PrintFileProperties,
    DeleteOldFiles,
    DeleteLargestFile,
    ChangeDirectoryRandom,
    ChangeDirectoryUp,
    Exit,
)


def available_commands_help() -> str:
    """Comma separated usage of every command, e.g. for a startup banner."""
    return ", ".join(cls.usage for cls in ALL_COMMANDS)
