from abc import ABC, abstractmethod
from typing import Optional


class CompletionUnavailableError(Exception):
    """The text-completion service could not produce a response."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error


class ICompletionClient(ABC):
    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Return the raw completion text or raise CompletionUnavailableError."""
        pass
