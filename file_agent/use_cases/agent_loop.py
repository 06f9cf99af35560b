"""
Read-eval-print loop of the agent.

Each iteration asks the operator whether to type the next command. A "no"
lets the agent pick one of the autonomous commands at random.
"""

import logging
import random
from typing import Optional, Sequence

from file_agent.entities.command import (
    ChangeDirectoryRandom,
    ChangeDirectoryUp,
    DeleteLargestFile,
    DeleteOldFiles,
    available_commands_help,
)
from file_agent.ports.console.console_port import ConsolePort, MessageLevel
from file_agent.use_cases.commands.executor import CommandExecutor, ExecutionSignal
from file_agent.use_cases.commands.parser import CommandParser, ParseStatus

RANDOM_COMMANDS: tuple[str, ...] = (
    DeleteOldFiles.keyword,
    DeleteLargestFile.keyword,
    ChangeDirectoryRandom.keyword,
    ChangeDirectoryUp.keyword,
)

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})

CHOOSE_PROMPT = "Do you want to choose the next command yourself? (y/n) "
COMMAND_PROMPT = "Please enter your command (e.g., ls, cd <dir>, print <file> <property>): "


class EndOfInput(Exception):
    """Raised internally when the operator closes the input stream."""


class AgentLoop:
    """Drives parse/execute cycles until the exit command or end of input."""

    def __init__(
        self,
        executor: CommandExecutor,
        parser: CommandParser,
        console: ConsolePort,
        rng: Optional[random.Random] = None,
        random_commands: Sequence[str] = RANDOM_COMMANDS,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            executor: Executes parsed commands
            parser: Turns tokens into commands
            console: Operator input and output
            rng: Random source used to pick autonomous commands
            random_commands: Menu the agent picks from when not driven manually
            logger: Optional logger
        """
        if not random_commands:
            raise ValueError("random_commands must not be empty")
        self._executor = executor
        self._parser = parser
        self._console = console
        self._rng = rng or random.Random()
        self._random_commands = tuple(random_commands)
        self._logger = logger or logging.getLogger(__name__)

    def greet(self) -> None:
        self._console.write("Welcome to the Agent file system interaction!")
        self._console.write(f"Available commands: {available_commands_help()}")

    def _read(self, prompt: str) -> str:
        line = self._console.read_line(prompt)
        if line is None:
            raise EndOfInput()
        return line

    def choose_tokens(self) -> list[str]:
        """
        Obtain the tokens of the next command, typed or picked at random.

        Raises:
            EndOfInput: If input is closed while waiting for an answer
        """
        answer = self._read(CHOOSE_PROMPT).strip().lower()
        if answer in AFFIRMATIVE_ANSWERS:
            return self._parser.tokenize(self._read(COMMAND_PROMPT))

        choice = self._rng.choice(self._random_commands)
        self._console.write(f"Agent has chosen the command: {choice}", MessageLevel.PROMPT)
        return self._parser.tokenize(choice)

    def run_once(self) -> ExecutionSignal:
        """
        Perform a single loop iteration.

        Any error raised while executing a command is reported and swallowed
        so one bad command never ends the session.

        Raises:
            EndOfInput: If input is closed while waiting for an answer
        """
        tokens = self.choose_tokens()
        result = self._parser.parse(tokens)
        if result.status is ParseStatus.EMPTY:
            return ExecutionSignal.CONTINUE
        if result.command is None:
            self._console.write("Unknown command. Please try again.", MessageLevel.ERROR)
            return ExecutionSignal.CONTINUE

        try:
            return self._executor.execute(result.command)
        except Exception as e:
            self._logger.exception(f"Command {result.command!r} failed")
            self._console.write(f"An error occurred: {e}", MessageLevel.ERROR)
            return ExecutionSignal.CONTINUE

    def run(self) -> int:
        """
        Run until the exit command, end of input or Ctrl+C.

        Returns:
            Process exit status (0)
        """
        self.greet()
        while True:
            try:
                if self.run_once() is ExecutionSignal.TERMINATE:
                    break
            except (EndOfInput, KeyboardInterrupt):
                self._console.write("")
                self._logger.info("Input closed, stopping agent loop")
                break
        return 0
