"""
Terminal console adapter rendering agent output with rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.text import Text
from typing_extensions import override

from file_agent.ports.console.console_port import ConsolePort, MessageLevel

_STYLES: dict[MessageLevel, str] = {
    MessageLevel.INFO: "",
    MessageLevel.SUCCESS: "green",
    MessageLevel.WARNING: "yellow",
    MessageLevel.ERROR: "red",
    MessageLevel.PROMPT: "cyan",
}


class RichConsoleAdapter(ConsolePort):
    """ConsolePort backed by a rich Console on stdout/stdin."""

    def __init__(
        self,
        console: Optional[Console] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            console: Console to render on. Defaults to a soft-wrapping stdout console.
            logger: Optional logger
        """
        # Soft wrap keeps long paths on a single line.
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._logger = logger or logging.getLogger(__name__)

    @override
    def write(self, message: str, level: MessageLevel = MessageLevel.INFO) -> None:
        # Text objects are never parsed for markup, so names like "[draft].txt" print as-is
        self._console.print(Text(message, style=_STYLES.get(level, "")), soft_wrap=True)

    @override
    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return self._console.input(Text(prompt, style=_STYLES[MessageLevel.PROMPT]))
        except EOFError:
            self._logger.info("End of input reached")
            return None
