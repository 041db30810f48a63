## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMError(RuntimeError):
    """Transport-level failure talking to the model endpoint."""


class LLMClient(ABC):
    model: str

    @abstractmethod
    def generate_text(self, *, prompt: str) -> str:
        """Send one non-streaming prompt and return the raw completion text.

        Implementations raise LLMError for unreachable endpoints, non-success
        statuses and responses without a completion.
        """
        raise NotImplementedError
