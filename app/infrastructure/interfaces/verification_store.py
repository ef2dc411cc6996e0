from abc import ABC, abstractmethod
from typing import Any, Optional


class IVerificationStore(ABC):
    @abstractmethod
    def put(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Store value under key; ttl defaults to the configured lifetime."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass

    @abstractmethod
    def sweep(self) -> int:
        """Drop expired entries and return how many were removed."""
        pass
