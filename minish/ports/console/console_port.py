"""
Console port interface defining the contract for interactive input and output.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ConsolePort(ABC):
    """Port interface for the interactive session's terminal."""

    @abstractmethod
    def read_line(self, prompt: str) -> Optional[str]:
        """
        Write the prompt (no newline) and read one line of input.

        Args:
            prompt: Text shown before reading

        Returns:
            The line without its trailing newline, or None once input is exhausted
        """
        pass

    @abstractmethod
    def write_line(self, text: str) -> None:
        """
        Write text followed by a newline.

        Args:
            text: Text to write verbatim
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush pending output, e.g. before handing the terminal to a child process."""
        pass
