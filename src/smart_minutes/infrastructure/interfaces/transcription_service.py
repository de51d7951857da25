"""Abstract interface for speech recognition."""

from abc import ABC, abstractmethod

from smart_minutes.domain.models import RecognizedWord


class TranscriptionService(ABC):
    """Abstract base class for diarizing speech recognition backends."""

    @abstractmethod
    def transcribe(self, audio_url: str) -> list[RecognizedWord]:
        """
        Runs a recognition job for the audio behind a URL and waits for it.

        Args:
            audio_url: URL the recognizer can fetch the audio from.

        Returns:
            Recognized words in time order, each with its speaker tag. An
            empty list means the job succeeded but heard no speech.

        Raises:
            TranscriptionError: If the job is rejected, fails or times out.
        """
        pass
