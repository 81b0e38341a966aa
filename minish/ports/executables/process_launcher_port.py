from abc import ABC, abstractmethod
from typing import Optional

from minish.entities.ProcessOutcome import ProcessOutcome


class ProcessLauncherPort(ABC):
    @abstractmethod
    def run(self, argv: list[str], cwd: Optional[str] = None) -> ProcessOutcome:
        """
        Spawn argv[0] with the full argument vector and wait for it to finish.

        Returns:
            How the child terminated

        Raises:
            ExecutableNotFoundError: If argv[0] no longer resolves
            ProcessLaunchError: If the OS refuses to start the process
        """
        pass
