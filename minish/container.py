"""
Dependency injection container for the interpreter's adapters and use cases.
"""

import logging
from typing import Optional, TextIO

from minish.adapters.console.stream_console_adapter import StreamConsoleAdapter
from minish.adapters.executables.path_executable_resolver import (
    PathExecutableResolver,
)
from minish.adapters.executables.subprocess_process_launcher import (
    SubprocessProcessLauncher,
)
from minish.adapters.system.os_environment_adapter import OsEnvironmentAdapter
from minish.adapters.system.process_working_directory_adapter import (
    ProcessWorkingDirectoryAdapter,
)
from minish.config.settings import Settings
from minish.ports.console.console_port import ConsolePort
from minish.ports.executables.executable_resolver_port import ExecutableResolverPort
from minish.ports.executables.process_launcher_port import ProcessLauncherPort
from minish.ports.system.environment_port import EnvironmentPort
from minish.ports.system.working_directory_port import WorkingDirectoryPort
from minish.use_cases.shell.dispatch_command import DispatchCommandUseCase
from minish.use_cases.shell.interactive_session import InteractiveSessionUseCase
from minish.use_cases.shell.parse_command import ParseCommandUseCase
from minish.use_cases.shell.run_external_program import RunExternalProgramUseCase


class DependencyContainer:
    """
    Container for managing interpreter dependencies using dependency injection.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self._settings = settings
        self._stdin = stdin
        self._stdout = stdout
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = StreamConsoleAdapter(
                stdin=self._stdin, stdout=self._stdout, logger=self._logger
            )
        return self._instances["console"]

    def get_environment(self) -> EnvironmentPort:
        if "environment" not in self._instances:
            self._instances["environment"] = OsEnvironmentAdapter()
        return self._instances["environment"]

    def get_working_directory(self) -> WorkingDirectoryPort:
        if "working_directory" not in self._instances:
            self._instances["working_directory"] = ProcessWorkingDirectoryAdapter(
                self._logger
            )
        return self._instances["working_directory"]

    def get_executable_resolver(self) -> ExecutableResolverPort:
        """
        Get executable resolver instance.

        Returns:
            ExecutableResolverPort implementation
        """
        if "executable_resolver" not in self._instances:
            self._instances["executable_resolver"] = PathExecutableResolver(
                self.get_environment(), self._logger
            )
        return self._instances["executable_resolver"]

    def get_process_launcher(self) -> ProcessLauncherPort:
        """
        Get process launcher instance.

        Returns:
            ProcessLauncherPort implementation
        """
        if "process_launcher" not in self._instances:
            self._instances["process_launcher"] = SubprocessProcessLauncher(
                self.get_executable_resolver(), self._logger
            )
        return self._instances["process_launcher"]

    def get_run_external_program_use_case(self) -> RunExternalProgramUseCase:
        if "run_external_program_use_case" not in self._instances:
            self._instances["run_external_program_use_case"] = (
                RunExternalProgramUseCase(self.get_process_launcher(), self._logger)
            )
        return self._instances["run_external_program_use_case"]

    def get_parse_command_use_case(self) -> ParseCommandUseCase:
        if "parse_command_use_case" not in self._instances:
            self._instances["parse_command_use_case"] = ParseCommandUseCase(
                self._logger
            )
        return self._instances["parse_command_use_case"]

    def get_dispatch_command_use_case(self) -> DispatchCommandUseCase:
        """
        Get dispatch command use case with injected dependencies.

        Returns:
            Configured DispatchCommandUseCase
        """
        if "dispatch_command_use_case" not in self._instances:
            self._instances["dispatch_command_use_case"] = DispatchCommandUseCase(
                console=self.get_console(),
                resolver=self.get_executable_resolver(),
                working_directory=self.get_working_directory(),
                environment=self.get_environment(),
                run_program=self.get_run_external_program_use_case(),
                logger=self._logger,
            )
        return self._instances["dispatch_command_use_case"]

    def get_interactive_session_use_case(self) -> InteractiveSessionUseCase:
        """
        Get the read-eval loop with all of its collaborators wired.

        Returns:
            Configured InteractiveSessionUseCase
        """
        if "interactive_session_use_case" not in self._instances:
            self._instances["interactive_session_use_case"] = (
                InteractiveSessionUseCase(
                    console=self.get_console(),
                    parser=self.get_parse_command_use_case(),
                    dispatcher=self.get_dispatch_command_use_case(),
                    prompt=self.get_settings().prompt,
                    logger=self._logger,
                )
            )
        return self._instances["interactive_session_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
