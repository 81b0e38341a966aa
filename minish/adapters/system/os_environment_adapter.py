import os
from typing import Mapping, Optional

from typing_extensions import override

from minish.ports.system.environment_port import EnvironmentPort


class OsEnvironmentAdapter(EnvironmentPort):
    """Environment lookups backed by ``os.environ`` (or any mapping, for tests)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ if environ is not None else os.environ

    @override
    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)
