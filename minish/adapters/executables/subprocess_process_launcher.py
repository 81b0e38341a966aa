"""
Process launcher adapter built on subprocess.
"""

import logging
import subprocess
from typing import Optional

from typing_extensions import override

from minish.entities.ProcessOutcome import ProcessOutcome
from minish.exceptions import ExecutableNotFoundError, ProcessLaunchError
from minish.ports.executables.executable_resolver_port import ExecutableResolverPort
from minish.ports.executables.process_launcher_port import ProcessLauncherPort


class SubprocessProcessLauncher(ProcessLauncherPort):
    """Run a child in the foreground, sharing the interpreter's stdio streams."""

    def __init__(
        self,
        resolver: ExecutableResolverPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run(self, argv: list[str], cwd: Optional[str] = None) -> ProcessOutcome:
        if not argv:
            raise ProcessLaunchError("Empty argument vector")

        # Re-resolved by name at spawn time, independent of any earlier lookup.
        path = self._resolver.resolve(argv[0])
        if path is None:
            raise ExecutableNotFoundError(argv[0])

        try:
            self._logger.info(f"Spawning {path} with argv {argv}")
            completed = subprocess.run(argv, executable=path, cwd=cwd, check=False)
        except OSError as e:
            self._logger.error(f"Failed to spawn {path}: {e}")
            raise ProcessLaunchError(e.strerror or str(e))

        outcome = ProcessOutcome.from_returncode(completed.returncode)
        self._logger.info(f"{argv[0]} finished: {outcome}")
        return outcome
