"""
Working directory adapter bound to the interpreter process.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from minish.ports.system.working_directory_port import WorkingDirectoryPort


class ProcessWorkingDirectoryAdapter(WorkingDirectoryPort):
    """Reads and changes the real process-wide working directory."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def current(self) -> str:
        return os.getcwd()

    @override
    def change(self, path: str) -> None:
        os.chdir(path)
        self._logger.debug(f"Working directory changed to {os.getcwd()}")
