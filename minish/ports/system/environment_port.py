from abc import ABC, abstractmethod
from typing import Optional


class EnvironmentPort(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value of an environment variable, or None when unset."""
        raise NotImplementedError
