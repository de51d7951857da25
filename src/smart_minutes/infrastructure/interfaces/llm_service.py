"""Abstract interface for the minutes-writing language model."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """
    Text generation backend that writes minutes from a template prompt.

    The system role is fixed by the implementation; callers only supply the
    template instructions with the transcript already embedded.
    """

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Returns the minutes text for one template prompt.

        Raises:
            LLMServiceError: If the model call fails or produces no text.
        """
        pass
