"""
Use case for turning a raw input line into a Command.
"""

import logging
import re
from typing import Optional

from minish.entities.Command import (
    CdCommand,
    Command,
    EchoCommand,
    ExitCommand,
    ExternalCommand,
    PwdCommand,
    TypeCommand,
    UnrecognizedCommand,
)

# Digits may be grouped with single underscores between them, e.g. "1_0".
_EXIT_CODE_RE = re.compile(r"\+?[0-9]+(?:_[0-9]+)*")
_MAX_EXIT_CODE = 255


def _parse_exit_code(token: Optional[str]) -> Optional[int]:
    if token is None or not _EXIT_CODE_RE.fullmatch(token):
        return None
    value = int(token.replace("_", ""))
    if value > _MAX_EXIT_CODE:
        return None
    return value


class ParseCommandUseCase:
    """Classify one line as a builtin or an external program invocation."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the use case.

        Args:
            logger: Logger instance to use for logging
        """
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, line: str) -> Optional[Command]:
        """
        Parse a raw input line.

        Args:
            line: Line as read from the console, surrounding whitespace allowed

        Returns:
            The Command for the line, or None for a blank line
        """
        trimmed = line.strip()
        if not trimmed:
            return None

        if "\0" in trimmed:
            self._logger.warning("Input line contains a NUL character")
            return UnrecognizedCommand(trimmed)

        keyword, _, rest = trimmed.partition(" ")
        tokens = [t for t in trimmed.split(" ") if t]
        argument = tokens[1] if len(tokens) > 1 else None

        if keyword == "exit":
            # Split on every single space: "exit  5" has an empty code token.
            fields = trimmed.split(" ")
            code_token = fields[1] if len(fields) > 1 else None
            command: Command = ExitCommand(_parse_exit_code(code_token))
        elif keyword == "echo":
            command = EchoCommand(rest)
        elif keyword == "type":
            command = TypeCommand(rest)
        elif keyword == "pwd":
            command = PwdCommand()
        elif keyword == "cd":
            command = CdCommand(argument)
        else:
            command = ExternalCommand(keyword, tokens)

        self._logger.debug(f"Parsed {trimmed!r} as {command}")
        return command
