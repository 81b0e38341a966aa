"""
Tests for the DispatchCommandUseCase.
"""

from unittest.mock import MagicMock, call

import pytest

from minish.entities.Command import (
    CdCommand,
    EchoCommand,
    ExitCommand,
    ExternalCommand,
    PwdCommand,
    TypeCommand,
    UnrecognizedCommand,
)
from minish.entities.ProcessOutcome import ProcessOutcome
from minish.exceptions import (
    ExecutableNotFoundError,
    ExitRequested,
    ProcessLaunchError,
)
from minish.ports.console.console_port import ConsolePort
from minish.ports.executables.executable_resolver_port import ExecutableResolverPort
from minish.ports.system.environment_port import EnvironmentPort
from minish.ports.system.working_directory_port import WorkingDirectoryPort
from minish.use_cases.shell.dispatch_command import DispatchCommandUseCase
from minish.use_cases.shell.run_external_program import RunExternalProgramUseCase


@pytest.fixture
def console():
    return MagicMock(spec=ConsolePort)


@pytest.fixture
def resolver():
    mock_resolver = MagicMock(spec=ExecutableResolverPort)
    mock_resolver.resolve.return_value = None
    return mock_resolver


@pytest.fixture
def working_directory():
    mock_cwd = MagicMock(spec=WorkingDirectoryPort)
    mock_cwd.current.return_value = "/home/user"
    return mock_cwd


@pytest.fixture
def environment():
    mock_env = MagicMock(spec=EnvironmentPort)
    mock_env.get.side_effect = {"HOME": "/home/user"}.get
    return mock_env


@pytest.fixture
def run_program():
    mock_run = MagicMock(spec=RunExternalProgramUseCase)
    mock_run.execute.return_value = ProcessOutcome(exit_code=0)
    return mock_run


@pytest.fixture
def dispatcher(console, resolver, working_directory, environment, run_program, mock_logger):
    return DispatchCommandUseCase(
        console=console,
        resolver=resolver,
        working_directory=working_directory,
        environment=environment,
        run_program=run_program,
        logger=mock_logger,
    )


def written(console) -> list[str]:
    return [c.args[0] for c in console.write_line.call_args_list]


class TestDispatchExit:
    """Test cases for the exit builtin."""

    def test_exit_raises_with_code(self, dispatcher, console):
        """Test that exit requests termination with its code."""
        with pytest.raises(ExitRequested) as exc_info:
            dispatcher.execute(ExitCommand(7))

        assert exc_info.value.code == 7
        console.write_line.assert_not_called()

    def test_exit_defaults_to_zero(self, dispatcher):
        """Test that exit without a code requests status 0."""
        with pytest.raises(ExitRequested) as exc_info:
            dispatcher.execute(ExitCommand(None))

        assert exc_info.value.code == 0


class TestDispatchEcho:
    """Test cases for the echo builtin."""

    def test_echo_writes_text_verbatim(self, dispatcher, console):
        """Test that echo writes its text unchanged."""
        dispatcher.execute(EchoCommand("hello   world"))

        console.write_line.assert_called_once_with("hello   world")

    def test_echo_empty(self, dispatcher, console):
        """Test that bare echo writes an empty line."""
        dispatcher.execute(EchoCommand(""))

        console.write_line.assert_called_once_with("")


class TestDispatchType:
    """Test cases for the type builtin."""

    @pytest.mark.parametrize("name", ["exit", "help", "echo", "type", "pwd", "cd"])
    def test_builtins(self, dispatcher, console, resolver, name):
        """Test that builtin names are reported without a path lookup."""
        dispatcher.execute(TypeCommand(name))

        console.write_line.assert_called_once_with(f"{name} is a shell builtin")
        resolver.resolve.assert_not_called()

    def test_target_is_trimmed(self, dispatcher, console):
        """Test that surrounding whitespace is ignored."""
        dispatcher.execute(TypeCommand("  exit "))

        console.write_line.assert_called_once_with("exit is a shell builtin")

    def test_resolved_program(self, dispatcher, console, resolver):
        """Test that a program on the search path is reported with its path."""
        resolver.resolve.return_value = "/usr/bin/ls"

        dispatcher.execute(TypeCommand("ls"))

        resolver.resolve.assert_called_once_with("ls")
        console.write_line.assert_called_once_with("ls is /usr/bin/ls")

    def test_not_found(self, dispatcher, console):
        """Test the message for an unknown name."""
        dispatcher.execute(TypeCommand("nonexistent_cmd_xyz"))

        console.write_line.assert_called_once_with("nonexistent_cmd_xyz: not found")

    def test_empty_target_writes_nothing(self, dispatcher, console, resolver):
        """Test that type without a target is silent."""
        dispatcher.execute(TypeCommand("   "))

        console.write_line.assert_not_called()
        resolver.resolve.assert_not_called()


class TestDispatchPwd:
    """Test cases for the pwd builtin."""

    def test_pwd(self, dispatcher, console):
        """Test that pwd writes the current directory."""
        dispatcher.execute(PwdCommand())

        console.write_line.assert_called_once_with("/home/user")

    def test_pwd_is_idempotent(self, dispatcher, console):
        """Test that repeated pwd calls give identical output."""
        dispatcher.execute(PwdCommand())
        dispatcher.execute(PwdCommand())

        assert written(console) == ["/home/user", "/home/user"]

    def test_pwd_failure(self, dispatcher, console, working_directory, mock_logger):
        """Test that an unreadable working directory is reported, not raised."""
        working_directory.current.side_effect = FileNotFoundError("gone")

        dispatcher.execute(PwdCommand())

        console.write_line.assert_called_once_with(
            "pwd: error retrieving current directory"
        )
        mock_logger.warning.assert_called_once()


class TestDispatchCd:
    """Test cases for the cd builtin."""

    def test_cd_to_path(self, dispatcher, console, working_directory):
        """Test changing to an explicit path."""
        dispatcher.execute(CdCommand("/tmp"))

        working_directory.change.assert_called_once_with("/tmp")
        console.write_line.assert_not_called()

    @pytest.mark.parametrize("path", [None, "~"])
    def test_cd_home(self, dispatcher, console, working_directory, path):
        """Test that no argument or ~ goes to HOME."""
        dispatcher.execute(CdCommand(path))

        working_directory.change.assert_called_once_with("/home/user")
        console.write_line.assert_not_called()

    def test_cd_home_not_set(self, dispatcher, console, working_directory, environment):
        """Test that an unset HOME abandons the change."""
        environment.get.side_effect = {}.get

        dispatcher.execute(CdCommand(None))

        console.write_line.assert_called_once_with("cd: HOME not set")
        working_directory.change.assert_not_called()

    def test_cd_missing_directory(self, dispatcher, console, working_directory):
        """Test that a failed change is reported and does not raise."""
        working_directory.change.side_effect = FileNotFoundError(
            "No such file or directory"
        )

        dispatcher.execute(CdCommand("/nonexistent/path"))

        console.write_line.assert_called_once_with(
            "cd: /nonexistent/path: No such file or directory"
        )

    def test_cd_not_a_directory(self, dispatcher, console, working_directory):
        """Test that any OSError from the change uses the same message."""
        working_directory.change.side_effect = NotADirectoryError("Not a directory")

        dispatcher.execute(CdCommand("/etc/hostname"))

        console.write_line.assert_called_once_with(
            "cd: /etc/hostname: No such file or directory"
        )


class TestDispatchExternal:
    """Test cases for external programs."""

    def test_command_not_found(self, dispatcher, console, run_program):
        """Test that an unresolved program is reported and not spawned."""
        dispatcher.execute(ExternalCommand("foobarbaz123", ["foobarbaz123"]))

        console.write_line.assert_called_once_with("foobarbaz123: command not found")
        run_program.execute.assert_not_called()

    def test_clean_exit_writes_nothing(self, dispatcher, console, resolver, run_program):
        """Test that exit status 0 adds no status line."""
        resolver.resolve.return_value = "/usr/bin/true"

        dispatcher.execute(ExternalCommand("true", ["true"]))

        run_program.execute.assert_called_once_with(["true"], cwd="/home/user")
        console.write_line.assert_not_called()
        console.flush.assert_called_once()

    def test_full_argv_is_passed(self, dispatcher, resolver, run_program):
        """Test that the whole argument vector reaches the bridge."""
        resolver.resolve.return_value = "/usr/bin/ls"

        dispatcher.execute(ExternalCommand("ls", ["ls", "-l", "/tmp"]))

        resolver.resolve.assert_called_once_with("ls")
        run_program.execute.assert_called_once_with(
            ["ls", "-l", "/tmp"], cwd="/home/user"
        )

    def test_nonzero_exit_status_line(self, dispatcher, console, resolver, run_program):
        """Test that a nonzero exit produces exactly one status line."""
        resolver.resolve.return_value = "/usr/bin/false"
        run_program.execute.return_value = ProcessOutcome(exit_code=1)

        dispatcher.execute(ExternalCommand("false", ["false"]))

        assert written(console) == ["Program exited with non-zero status code: 1"]

    def test_abnormal_termination(self, dispatcher, console, resolver, run_program):
        """Test the report for a child killed by a signal."""
        resolver.resolve.return_value = "/usr/bin/sleep"
        run_program.execute.return_value = ProcessOutcome(signal=9)

        dispatcher.execute(ExternalCommand("sleep", ["sleep", "10"]))

        assert written(console) == ["Program terminated abnormally"]

    def test_vanished_between_lookups(self, dispatcher, console, resolver, run_program):
        """Test a program that no longer resolves at spawn time."""
        resolver.resolve.return_value = "/usr/local/bin/tool"
        run_program.execute.side_effect = ExecutableNotFoundError("tool")

        dispatcher.execute(ExternalCommand("tool", ["tool"]))

        assert written(console) == ["tool: command not found"]

    def test_launch_error(self, dispatcher, console, resolver, run_program):
        """Test that an OS spawn failure is reported with its reason."""
        resolver.resolve.return_value = "/usr/local/bin/tool"
        run_program.execute.side_effect = ProcessLaunchError("Exec format error")

        dispatcher.execute(ExternalCommand("tool", ["tool"]))

        assert written(console) == ["tool: Exec format error"]

    def test_unreadable_cwd_still_spawns(
        self, dispatcher, resolver, working_directory, run_program
    ):
        """Test that the child inherits the cwd when it cannot be read."""
        resolver.resolve.return_value = "/usr/bin/true"
        working_directory.current.side_effect = FileNotFoundError("gone")

        dispatcher.execute(ExternalCommand("true", ["true"]))

        run_program.execute.assert_called_once_with(["true"], cwd=None)

    def test_output_flushed_before_spawn(self, console, resolver, run_program, dispatcher):
        """Test that console output is flushed before the child runs."""
        resolver.resolve.return_value = "/usr/bin/true"
        order = MagicMock()
        order.attach_mock(console.flush, "flush")
        order.attach_mock(run_program.execute, "execute")

        dispatcher.execute(ExternalCommand("true", ["true"]))

        assert order.mock_calls == [call.flush(), call.execute(["true"], cwd="/home/user")]


class TestDispatchUnrecognized:
    """Test cases for unrecognized input."""

    def test_unrecognized(self, dispatcher, console):
        """Test the message for an unrecognized line."""
        dispatcher.execute(UnrecognizedCommand("bad\0line"))

        console.write_line.assert_called_once_with("bad\0line: command not found")

    def test_unsupported_object(self, dispatcher):
        """Test that a non-command value is rejected."""
        with pytest.raises(TypeError, match="Unsupported command"):
            dispatcher.execute("echo hi")  # type: ignore[arg-type]
