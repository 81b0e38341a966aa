import logging
from typing import Optional

from minish.entities.ProcessOutcome import ProcessOutcome
from minish.exceptions import (
    ExecutableNotFoundError,
    ProcessLaunchError,
)
from minish.ports.executables.process_launcher_port import ProcessLauncherPort


class RunExternalProgramUseCase:
    def __init__(
        self,
        launcher: ProcessLauncherPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._launcher = launcher
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, argv: list[str], cwd: Optional[str] = None) -> ProcessOutcome:
        try:
            self._logger.info(f"Running external program: {argv[0]}")
            outcome = self._launcher.run(argv, cwd=cwd)
            self._logger.info(f"Program finished: {outcome}")
            return outcome
        except (ExecutableNotFoundError, ProcessLaunchError):
            raise
        except Exception as e:
            self._logger.error(f"Error running external program: {e}")
            raise ProcessLaunchError(str(e))
