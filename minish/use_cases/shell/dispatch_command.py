"""
Use case for executing a parsed Command.
"""

import logging
from typing import Callable, Optional

from minish.entities.Command import (
    BUILTIN_NAMES,
    CdCommand,
    Command,
    EchoCommand,
    ExitCommand,
    ExternalCommand,
    PwdCommand,
    TypeCommand,
    UnrecognizedCommand,
)
from minish.exceptions import (
    ExecutableNotFoundError,
    ExitRequested,
    ProcessLaunchError,
)
from minish.ports.console.console_port import ConsolePort
from minish.ports.executables.executable_resolver_port import ExecutableResolverPort
from minish.ports.system.environment_port import EnvironmentPort
from minish.ports.system.working_directory_port import WorkingDirectoryPort
from minish.use_cases.shell.run_external_program import RunExternalProgramUseCase

HOME_VARIABLE = "HOME"


class DispatchCommandUseCase:
    """
    Perform the action for each kind of Command and write its output.

    Every failure is reported as a single line on the console; only an exit
    command escapes, as ExitRequested.
    """

    def __init__(
        self,
        console: ConsolePort,
        resolver: ExecutableResolverPort,
        working_directory: WorkingDirectoryPort,
        environment: EnvironmentPort,
        run_program: RunExternalProgramUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            console: Where command output is written
            resolver: Search-path lookup for `type` and external programs
            working_directory: Interpreter working directory state
            environment: Source of HOME
            run_program: Bridge that spawns and waits for external programs
            logger: Logger instance to use for logging
        """
        self._console = console
        self._resolver = resolver
        self._working_directory = working_directory
        self._environment = environment
        self._run_program = run_program
        self._logger = logger or logging.getLogger(__name__)

        self._handlers: dict[type, Callable[..., None]] = {
            ExitCommand: self._exit,
            EchoCommand: self._echo,
            TypeCommand: self._type,
            PwdCommand: self._pwd,
            CdCommand: self._cd,
            ExternalCommand: self._external,
            UnrecognizedCommand: self._unrecognized,
        }

    def execute(self, command: Command) -> None:
        """
        Dispatch a command to its handler.

        Args:
            command: Parsed command

        Raises:
            ExitRequested: For an exit command
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {command!r}")
        handler(command)

    # --- builtin handlers ---
    def _exit(self, command: ExitCommand) -> None:
        self._logger.info(f"Exit requested with status {command.status}")
        raise ExitRequested(command.status)

    def _echo(self, command: EchoCommand) -> None:
        self._console.write_line(command.text)

    def _type(self, command: TypeCommand) -> None:
        name = command.target.strip()
        if not name:
            return
        # "help" is reported as a builtin although no handler implements it.
        if name in BUILTIN_NAMES:
            self._console.write_line(f"{name} is a shell builtin")
            return
        path = self._resolver.resolve(name)
        if path is None:
            self._console.write_line(f"{name}: not found")
        else:
            self._console.write_line(f"{name} is {path}")

    def _pwd(self, command: PwdCommand) -> None:
        try:
            self._console.write_line(self._working_directory.current())
        except OSError as e:
            self._logger.warning(f"Cannot read working directory: {e}")
            self._console.write_line("pwd: error retrieving current directory")

    def _cd(self, command: CdCommand) -> None:
        if command.targets_home():
            target = self._environment.get(HOME_VARIABLE)
            if not target:
                self._console.write_line("cd: HOME not set")
                return
        else:
            target = command.path

        try:
            self._working_directory.change(target)
        except OSError as e:
            self._logger.info(f"cd to {target} failed: {e}")
            self._console.write_line(f"cd: {target}: No such file or directory")

    # --- external programs ---
    def _external(self, command: ExternalCommand) -> None:
        if self._resolver.resolve(command.argv[0]) is None:
            self._console.write_line(f"{command.program}: command not found")
            return

        try:
            cwd = self._working_directory.current()
        except OSError:
            cwd = None

        self._console.flush()
        try:
            outcome = self._run_program.execute(command.argv, cwd=cwd)
        except ExecutableNotFoundError:
            self._console.write_line(f"{command.program}: command not found")
            return
        except ProcessLaunchError as e:
            self._console.write_line(f"{command.program}: {e}")
            return

        message = outcome.status_message()
        if message is not None:
            self._console.write_line(message)

    def _unrecognized(self, command: UnrecognizedCommand) -> None:
        self._console.write_line(f"{command.line}: command not found")
