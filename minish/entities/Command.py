"""
Command domain entities: one frozen dataclass per kind of input line.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

BUILTIN_NAMES: frozenset[str] = frozenset({"exit", "help", "echo", "type", "pwd", "cd"})


@dataclass(frozen=True)
class ExitCommand:
    """Terminate the interpreter. ``code`` is None when absent or unparsable."""

    code: Optional[int] = None

    @property
    def status(self) -> int:
        return self.code if self.code is not None else 0


@dataclass(frozen=True)
class EchoCommand:
    text: str


@dataclass(frozen=True)
class TypeCommand:
    """Describe whether ``target`` is a builtin or an executable on the search path."""

    target: str


@dataclass(frozen=True)
class PwdCommand:
    pass


@dataclass(frozen=True)
class CdCommand:
    """Change directory. ``path`` None or ``~`` means the home directory."""

    path: Optional[str] = None

    def targets_home(self) -> bool:
        return self.path is None or self.path == "~"


@dataclass(frozen=True)
class ExternalCommand:
    """Run a program found on the search path; ``argv[0]`` is the program name."""

    program: str
    argv: list[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.argv:
            object.__setattr__(self, "argv", [self.program])
        elif self.argv[0] != self.program:
            raise ValueError("argv[0] must be the program name")


@dataclass(frozen=True)
class UnrecognizedCommand:
    line: str


Command = Union[
    ExitCommand,
    EchoCommand,
    TypeCommand,
    PwdCommand,
    CdCommand,
    ExternalCommand,
    UnrecognizedCommand,
]
