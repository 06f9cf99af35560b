"""
Console port interface: how the agent talks to its operator.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class MessageLevel(str, Enum):
    """Severity of a line written to the operator."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    PROMPT = "prompt"


class ConsolePort(ABC):
    """Port interface for line-based operator input and output."""

    @abstractmethod
    def write(self, message: str, level: MessageLevel = MessageLevel.INFO) -> None:
        """
        Write one line of human-readable output.

        Args:
            message: Text to display, shown literally (no markup)
            level: Severity used for styling
        """
        pass

    @abstractmethod
    def read_line(self, prompt: str = "") -> Optional[str]:
        """
        Read one line of operator input.

        Args:
            prompt: Text displayed before reading

        Returns:
            The line without its trailing newline, or None at end of input
        """
        pass
