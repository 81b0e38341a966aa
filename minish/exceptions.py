"""
Custom exceptions for the interpreter.
"""


class BaseShellError(Exception):
    """Base exception class for interpreter errors."""

    pass


class ConfigurationError(BaseShellError):
    """Exception raised for configuration errors."""

    pass


class ExecutableNotFoundError(BaseShellError):
    """Exception raised when a program name does not resolve on the search path."""

    def __init__(self, name: str):
        super().__init__(f"{name}: command not found")
        self.name = name


class ProcessLaunchError(BaseShellError):
    """Exception raised when the OS refuses to spawn a child process."""

    pass


class ExitRequested(BaseShellError):
    """Raised by the dispatcher to end the session with the given status code."""

    def __init__(self, code: int = 0):
        super().__init__(f"exit requested with status {code}")
        self.code = code
