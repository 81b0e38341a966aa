"""
Use case running the read-eval loop.
"""

import logging
from typing import Optional

from minish.exceptions import ExitRequested
from minish.ports.console.console_port import ConsolePort
from minish.use_cases.shell.dispatch_command import DispatchCommandUseCase
from minish.use_cases.shell.parse_command import ParseCommandUseCase

DEFAULT_PROMPT = "$ "


class InteractiveSessionUseCase:
    """Prompt, read, parse and dispatch until exit or end of input."""

    def __init__(
        self,
        console: ConsolePort,
        parser: ParseCommandUseCase,
        dispatcher: DispatchCommandUseCase,
        prompt: str = DEFAULT_PROMPT,
        logger: Optional[logging.Logger] = None,
    ):
        self._console = console
        self._parser = parser
        self._dispatcher = dispatcher
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> int:
        """
        Run the session.

        Returns:
            Status code for the interpreter process: the exit command's code,
            or 0 when input is exhausted
        """
        self._logger.info("Interactive session started")
        while True:
            line = self._console.read_line(self._prompt)
            if line is None:
                self._logger.info("Input exhausted, ending session")
                return 0

            command = self._parser.execute(line)
            if command is None:
                continue

            try:
                self._dispatcher.execute(command)
            except ExitRequested as e:
                self._logger.info(f"Session ended with status {e.code}")
                return e.code
