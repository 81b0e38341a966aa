"""
Search-path executable resolver.
"""

import logging
import os
import stat
from typing import Optional

from typing_extensions import override

from minish.ports.executables.executable_resolver_port import ExecutableResolverPort
from minish.ports.system.environment_port import EnvironmentPort

PATH_VARIABLE = "PATH"


class PathExecutableResolver(ExecutableResolverPort):
    """Resolve program names against the directories listed in ``PATH``."""

    def __init__(
        self,
        environment: EnvironmentPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._environment = environment
        self._logger = logger or logging.getLogger(__name__)

    def _search_directories(self) -> list[str]:
        raw = self._environment.get(PATH_VARIABLE) or ""
        return [d for d in raw.split(os.pathsep) if d]

    def _is_executable(self, candidate: str) -> bool:
        """
        Check a candidate path without reading its contents.

        Args:
            candidate: Path built from a search directory and the program name

        Returns:
            True if it opens as a regular file with the execute bit for "other" set
        """
        try:
            # Non-blocking so a FIFO on the search path cannot stall the open.
            fd = os.open(candidate, os.O_RDONLY | os.O_NONBLOCK)
        except OSError as e:
            self._logger.debug(f"Skipping {candidate}: {e}")
            return False
        try:
            mode = os.fstat(fd).st_mode
        finally:
            os.close(fd)

        if not stat.S_ISREG(mode):
            return False
        return bool(mode & stat.S_IXOTH)

    @override
    def resolve(self, name: str) -> Optional[str]:
        if not name:
            return None

        for directory in self._search_directories():
            candidate = os.path.join(directory, name)
            if self._is_executable(candidate):
                path = os.path.abspath(candidate)
                self._logger.debug(f"Resolved {name} to {path}")
                return path

        self._logger.debug(f"{name} not found on search path")
        return None
