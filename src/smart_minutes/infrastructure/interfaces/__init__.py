"""Infrastructure interface exports."""

from .cache_service import CacheService
from .document_renderer import DocumentRenderer
from .file_publisher import FilePublisher
from .llm_service import LLMService
from .storage_client import StorageClient
from .transcription_service import TranscriptionService

__all__ = [
    "CacheService",
    "DocumentRenderer",
    "FilePublisher",
    "LLMService",
    "StorageClient",
    "TranscriptionService",
]
