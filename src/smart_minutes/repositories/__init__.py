"""Repository exports."""

from .minutes_repository import MinutesRepository
from .transcription_repository import TranscriptionRepository
from .user_repository import UserRepository

__all__ = ["MinutesRepository", "TranscriptionRepository", "UserRepository"]
