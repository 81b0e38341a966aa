"""
Working directory port interface.
"""

from abc import ABC, abstractmethod


class WorkingDirectoryPort(ABC):
    """Port interface for the interpreter's current working directory."""

    @abstractmethod
    def current(self) -> str:
        """
        Get the current working directory.

        Returns:
            Absolute path of the current directory

        Raises:
            OSError: If the directory cannot be determined (e.g. it was removed)
        """
        pass

    @abstractmethod
    def change(self, path: str) -> None:
        """
        Change the current working directory.

        Args:
            path: Absolute or relative target directory

        Raises:
            OSError: If the target does not exist or is not a directory
        """
        pass
