"""
Dependency injection container for managing application dependencies.
"""

import logging
import random
from pathlib import Path
from typing import Any, Optional

from file_agent.adapters.console.rich_console_adapter import RichConsoleAdapter
from file_agent.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_agent.config.settings import Settings
from file_agent.ports.console.console_port import ConsolePort
from file_agent.ports.files.file_system_port import FileSystemPort
from file_agent.use_cases.agent_loop import AgentLoop
from file_agent.use_cases.commands.executor import CommandExecutor
from file_agent.use_cases.commands.parser import CommandParser
from file_agent.use_cases.session import Session


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        console: Optional[ConsolePort] = None,
    ):
        """
        Args:
            settings: Settings to use. Read from the environment on first access if None.
            console: Console to use. A rich stdout console is created if None.
        """
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        if settings is not None:
            self._instances["settings"] = settings
        if console is not None:
            self._instances["console"] = console

    def get_settings(self) -> Settings:
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = RichConsoleAdapter(logger=self._logger)
        return self._instances["console"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_random(self) -> random.Random:
        """Random source shared by the loop and random_cd, seeded from settings."""
        if "random" not in self._instances:
            self._instances["random"] = random.Random(self.get_settings().random_seed)
        return self._instances["random"]

    def get_session(self) -> Session:
        """
        Get the agent session, creating the root directory if needed.

        Raises:
            ConfigurationError: If the root directory cannot be created
        """
        if "session" not in self._instances:
            self._instances["session"] = Session.open(
                Path(self.get_settings().root_dir),
                self.get_file_system(),
                self.get_console(),
                self._logger,
            )
        return self._instances["session"]

    def get_command_parser(self) -> CommandParser:
        if "command_parser" not in self._instances:
            self._instances["command_parser"] = CommandParser(self._logger)
        return self._instances["command_parser"]

    def get_command_executor(self) -> CommandExecutor:
        """
        Get command executor with injected dependencies.

        Returns:
            Configured CommandExecutor
        """
        if "command_executor" not in self._instances:
            self._instances["command_executor"] = CommandExecutor(
                self.get_session(),
                self.get_console(),
                rng=self.get_random(),
                logger=self._logger,
            )
        return self._instances["command_executor"]

    def get_agent_loop(self) -> AgentLoop:
        """
        Get the agent loop with injected dependencies.

        Returns:
            Configured AgentLoop
        """
        if "agent_loop" not in self._instances:
            self._instances["agent_loop"] = AgentLoop(
                self.get_command_executor(),
                self.get_command_parser(),
                self.get_console(),
                rng=self.get_random(),
                logger=self._logger,
            )
        return self._instances["agent_loop"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
