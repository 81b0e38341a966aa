from abc import ABC, abstractmethod
from typing import Optional


class ExecutableResolverPort(ABC):
    @abstractmethod
    def resolve(self, name: str) -> Optional[str]:
        """Resolve a bare program name into the absolute path of the first executable match."""
        raise NotImplementedError
