"""Handler exports."""

from .ingestion_handler import AUDIO_CONTENT_TYPE, AudioIngestionHandler
from .login_handler import LoginHandler
from .meeting_pipeline import MeetingPipeline
from .minutes_handler import MinutesHandler
from .transcription_handler import TranscriptionHandler

__all__ = [
    "AUDIO_CONTENT_TYPE",
    "AudioIngestionHandler",
    "LoginHandler",
    "MeetingPipeline",
    "MinutesHandler",
    "TranscriptionHandler",
]
