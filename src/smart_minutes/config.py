"""Application configuration loaded from environment variables."""

import os
from pathlib import Path

from pydantic import BaseModel, computed_field

from smart_minutes.domain.templates import SYSTEM_PROMPT


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "meeting-audio"
    secure: bool = False
    presigned_url_ttl_seconds: int = 3600


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    language_code: str = "en"
    fallback_language_codes: tuple[str, ...] = ()
    speaker_labels: bool = True
    speakers_expected: int | None = 2
    poll_interval_seconds: float = 3.0
    timeout_seconds: float = 1800.0


class GeminiConfig(BaseModel, frozen=True):
    """Gemini API configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"
    system_prompt: str = SYSTEM_PROMPT
    temperature: float = 0.4
    timeout_seconds: float = 120.0


class RedisConfig(BaseModel, frozen=True):
    """Redis connection configuration."""

    host: str
    port: int = 6379
    cache_ttl_seconds: int = 86400


class GoogleDriveConfig(BaseModel, frozen=True):
    """Google Drive publishing configuration."""

    service_account_file: str
    folder_id: str
    publish_timeout_seconds: float = 300.0


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str

    @computed_field
    @property
    def url(self) -> str:
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    redis: RedisConfig
    google_drive: GoogleDriveConfig
    database: DatabaseConfig
    corrections_path: Path | None = None
    log_level: str = "INFO"


def _split_codes(value: str) -> tuple[str, ...]:
    return tuple(code.strip() for code in value.split(",") if code.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    corrections_path = os.getenv("CORRECTIONS_PATH")
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "meeting-audio"),
            secure=os.getenv("MINIO_SECURE", "false").lower() == "true",
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            language_code=os.getenv("ASSEMBLYAI_LANGUAGE_CODE", "en"),
            fallback_language_codes=_split_codes(
                os.getenv("ASSEMBLYAI_FALLBACK_LANGUAGES", "")
            ),
            speakers_expected=int(os.getenv("ASSEMBLYAI_SPEAKERS_EXPECTED", "2")) or None,
            timeout_seconds=float(os.getenv("ASSEMBLYAI_TIMEOUT_SECONDS", "1800")),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
            timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "120")),
        ),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "redis"),
            port=int(os.getenv("REDIS_PORT", "6379")),
        ),
        google_drive=GoogleDriveConfig(
            service_account_file=os.getenv(
                "GOOGLE_SERVICE_ACCOUNT_FILE", "credentials.json"
            ),
            folder_id=os.getenv("GOOGLE_DRIVE_FOLDER_ID", ""),
        ),
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "minutes"),
        ),
        corrections_path=Path(corrections_path) if corrections_path else None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
