"""
Pytest configuration and shared fixtures.
"""

import os
import stat
import tempfile
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from minish.adapters.system.os_environment_adapter import OsEnvironmentAdapter


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory with a nested subdirectory.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        os.makedirs(os.path.join(temp_dir, "subdir"))
        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def make_program() -> Callable[..., str]:
    """
    Factory writing a small shell script into a directory.

    Returns:
        Function (directory, name, body, mode) -> absolute path of the script
    """

    def _make(
        directory: str,
        name: str,
        body: str = "exit 0",
        mode: int = stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH,
    ) -> str:
        path = os.path.join(directory, name)
        with open(path, "w") as f:
            f.write(f"#!/bin/sh\n{body}\n")
        os.chmod(path, mode)
        return path

    return _make


@pytest.fixture
def fake_environment() -> Callable[..., OsEnvironmentAdapter]:
    """
    Factory for an environment adapter backed by a plain dict.

    Returns:
        Function (path=None, home=None) -> OsEnvironmentAdapter
    """

    def _make(path: Optional[str] = None, home: Optional[str] = None):
        environ: dict[str, str] = {}
        if path is not None:
            environ["PATH"] = path
        if home is not None:
            environ["HOME"] = home
        return OsEnvironmentAdapter(environ)

    return _make
