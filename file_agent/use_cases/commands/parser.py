"""
Command factory turning operator tokens into command variants.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from file_agent.entities.command import (
    ChangeDirectory,
    ChangeDirectoryRandom,
    ChangeDirectoryUp,
    Command,
    DeleteFile,
    DeleteLargestFile,
    DeleteOldFiles,
    Exit,
    ListFiles,
    PrintFileProperties,
    TotalSize,
)


class ParseStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ParseResult:
    status: ParseStatus
    command: Optional[Command] = None


_ASCII_WHITESPACE = re.compile(r"[ \t\n\r\f\v]+")

_Builder = Callable[[Sequence[str]], Optional[Command]]


class CommandParser:
    """Builds one command per token sequence; never raises on bad input."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        # Each builder returns None when the argument count is insufficient.
        self._builders: dict[str, _Builder] = {
            ListFiles.keyword: lambda _: ListFiles(),
            TotalSize.keyword: lambda _: TotalSize(),
            ChangeDirectory.keyword: lambda t: ChangeDirectory(t[1]) if len(t) >= 2 else None,
            DeleteFile.keyword: lambda t: DeleteFile(t[1]) if len(t) >= 2 else None,
            PrintFileProperties.keyword: lambda t: (
                PrintFileProperties(t[1], tuple(t[2:])) if len(t) >= 3 else None
            ),
            DeleteOldFiles.keyword: lambda _: DeleteOldFiles(),
            DeleteLargestFile.keyword: lambda _: DeleteLargestFile(),
            ChangeDirectoryRandom.keyword: lambda _: ChangeDirectoryRandom(),
            ChangeDirectoryUp.keyword: lambda _: ChangeDirectoryUp(),
            Exit.keyword: lambda _: Exit(),
        }

    @staticmethod
    def tokenize(text: str) -> list[str]:
        """Split raw operator text on ASCII whitespace; other spaces stay inside tokens."""
        return [token for token in _ASCII_WHITESPACE.split(text) if token]

    def parse(self, tokens: Sequence[str]) -> ParseResult:
        """
        Parse a token sequence.

        Args:
            tokens: Whitespace separated words; the first one selects the
                command and is matched case-insensitively

        Returns:
            ParseResult with status OK and the command, EMPTY for no tokens,
            or UNRECOGNIZED for anything that is not a valid command
        """
        if not tokens:
            return ParseResult(ParseStatus.EMPTY)

        builder = self._builders.get(tokens[0].lower())
        command = builder(tokens) if builder else None
        if command is None:
            self._logger.info(f"Unrecognized command: {' '.join(tokens)}")
            return ParseResult(ParseStatus.UNRECOGNIZED)
        return ParseResult(ParseStatus.OK, command)
