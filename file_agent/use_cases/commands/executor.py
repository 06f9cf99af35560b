"""
Use case executing parsed commands against an agent session.
"""

import logging
import random
import time
from enum import Enum
from typing import Callable, Optional

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
from file_agent.ports.console.console_port import ConsolePort, MessageLevel
from file_agent.use_cases.session import Session

OLD_FILE_AGE_MS = 30 * 24 * 60 * 60 * 1000


class ExecutionSignal(str, Enum):
    """What the loop should do after a command ran."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


class CommandExecutor:
    """Executes each command variant through a dispatch table keyed by its type."""

    def __init__(
        self,
        session: Session,
        console: ConsolePort,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the executor.

        Args:
            session: Session the commands operate on
            console: Where results are written
            rng: Random source for random_cd (seed it for reproducible runs)
            clock: Returns the current time in seconds since the epoch
            logger: Logger instance to use for logging
        """
        self._session = session
        self._console = console
        self._rng = rng or random.Random()
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[type, Callable[..., Optional[ExecutionSignal]]] = {
            ListFiles: self._list_files,
            TotalSize: self._total_size,
            ChangeDirectory: self._change_directory,
            DeleteFile: self._delete_file,
            PrintFileProperties: self._print_file_properties,
            DeleteOldFiles: self._delete_old_files,
            DeleteLargestFile: self._delete_largest_file,
            ChangeDirectoryRandom: self._change_directory_random,
            ChangeDirectoryUp: self._change_directory_up,
            Exit: self._exit,
        }

    def execute(self, command: Command) -> ExecutionSignal:
        """
        Run one command.

        Returns:
            TERMINATE for the exit command, CONTINUE otherwise

        Raises:
            ValueError: If the object is not a known command variant
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise ValueError(f"Unknown command type: {type(command).__name__}")
        self._logger.info(f"Executing {command!r} in {self._session.current_directory}")
        return handler(command) or ExecutionSignal.CONTINUE

    def _list_files(self, _: ListFiles) -> None:
        entries = self._session.list_entries()
        if entries:
            self._console.write("Files in directory:")
            for entry in entries:
                self._console.write(entry.name)
        else:
            self._console.write("Directory is empty.")

    def _total_size(self, _: TotalSize) -> None:
        size = self._session.total_size()
        self._console.write(f"Total size of files: {size} bytes")

    def _change_directory(self, command: ChangeDirectory) -> None:
        self._session.change_directory(self._session.resolve(command.path_arg))

    def _delete_file(self, command: DeleteFile) -> None:
        target = self._session.resolve(command.name)
        entry = self._session.stat(target) if self._session.is_deletable(target) else None
        if entry is not None and self._session.delete_entry(entry):
            self._console.write(f"Deleted: {command.name}", MessageLevel.SUCCESS)
        else:
            self._console.write(f"Failed to delete: {command.name}", MessageLevel.ERROR)

    def _print_file_properties(self, command: PrintFileProperties) -> None:
        self._session.print_entry_properties(
            self._session.resolve(command.name), command.properties, command.name
        )

    def _delete_old_files(self, _: DeleteOldFiles) -> None:
        threshold = int(self._clock() * 1000) - OLD_FILE_AGE_MS
        old_entries = self._session.list_entries(lambda e: e.last_modified < threshold)
        if not old_entries:
            self._console.write("No old files found.")
            return
        for entry in old_entries:
            if self._session.delete_entry(entry):
                self._console.write(f"Deleted old file: {entry.name}", MessageLevel.SUCCESS)
            else:
                self._console.write(f"Failed to delete: {entry.name}", MessageLevel.ERROR)

    def _delete_largest_file(self, _: DeleteLargestFile) -> None:
        files = self._session.list_entries(lambda e: e.is_file)
        # max() keeps the first maximum in enumeration order
        largest = max(files, key=lambda e: e.size, default=None)
        if largest is not None and self._session.delete_entry(largest):
            self._console.write(
                f"Deleted largest file: {largest.name}", MessageLevel.SUCCESS
            )
        else:
            self._console.write("No files found or failed to delete.", MessageLevel.ERROR)

    def _change_directory_random(self, _: ChangeDirectoryRandom) -> None:
        directories = sorted(
            self._session.list_entries(lambda e: e.is_dir), key=lambda e: e.name
        )
        if not directories:
            self._console.write("No subdirectories found.")
            return
        chosen = self._rng.choice(directories)
        self._session.change_directory(chosen.path)

    def _change_directory_up(self, _: ChangeDirectoryUp) -> None:
        parent = self._session.current_directory.parent
        if self._session.stat(parent) is not None and self._session.is_within_root(parent):
            self._session.change_directory(parent)
        else:
            self._console.write("Cannot move up from root directory.", MessageLevel.WARNING)

    def _exit(self, _: Exit) -> ExecutionSignal:
        self._console.write("Exiting application...")
        return ExecutionSignal.TERMINATE
