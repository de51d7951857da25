"""Abstract interface for the generated-summary cache."""

from abc import ABC, abstractmethod


class CacheService(ABC):
    """
    String key/value store for summaries that were already generated.

    Keys are derived from the template and a digest of its full prompt, so a
    hit always belongs to the exact same transcript and instructions.
    Implementations may expire entries at any time.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Returns the summary stored under ``key``, or None on a miss.

        Raises:
            CacheServiceError: If the backend cannot be reached.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Stores a generated summary.

        Raises:
            CacheServiceError: If the backend cannot be reached.
        """
        pass
