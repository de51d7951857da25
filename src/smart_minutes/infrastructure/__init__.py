"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .docx_renderer import DOCX_MIME_TYPE, DocxRenderer
from .gemini_llm import GeminiLLMService
from .google_drive_publisher import GoogleDrivePublisher, build_drive_service
from .minio_storage import MinioStorageClient
from .redis_cache import RedisCacheService

__all__ = [
    "AssemblyAITranscriber",
    "DOCX_MIME_TYPE",
    "DocxRenderer",
    "GeminiLLMService",
    "GoogleDrivePublisher",
    "MinioStorageClient",
    "RedisCacheService",
    "build_drive_service",
]
