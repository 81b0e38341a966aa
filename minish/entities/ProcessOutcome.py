"""
Process termination outcome entity.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProcessOutcome:
    """
    How a child process ended.

    ``exit_code`` holds the status of a normal exit; ``signal`` is set instead
    when the child was killed.
    """

    exit_code: Optional[int] = None
    signal: Optional[int] = None

    @classmethod
    def from_returncode(cls, returncode: int) -> "ProcessOutcome":
        """
        Build an outcome from a ``subprocess`` return code.

        Args:
            returncode: Exit status, negative when the child died from a signal

        Returns:
            The matching ProcessOutcome
        """
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(exit_code=returncode)

    @property
    def exited_normally(self) -> bool:
        return self.signal is None and self.exit_code is not None

    def status_message(self) -> Optional[str]:
        """
        Text reported to the user once the child is gone.

        Returns:
            None for a clean exit, otherwise a single status line
        """
        if not self.exited_normally:
            return "Program terminated abnormally"
        if self.exit_code != 0:
            return f"Program exited with non-zero status code: {self.exit_code}"
        return None
