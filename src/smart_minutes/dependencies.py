"""Dependency injection configuration.

Clients are built on first use and cached for the life of the process, so
importing the application does not reach out to any external service.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timedelta
from functools import lru_cache

import assemblyai as aai
import redis
from google import genai
from google.genai import types
from minio import Minio
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from smart_minutes.config import AppConfig, AssemblyAIConfig, load_config
from smart_minutes.domain import (
    DEFAULT_TEMPLATES,
    CorrectionFilter,
    SummarizationOrchestrator,
    TranscriptBuilder,
    load_corrections,
)
from smart_minutes.handlers import (
    AudioIngestionHandler,
    LoginHandler,
    MeetingPipeline,
    MinutesHandler,
    TranscriptionHandler,
)
from smart_minutes.infrastructure import (
    AssemblyAITranscriber,
    DocxRenderer,
    GeminiLLMService,
    GoogleDrivePublisher,
    MinioStorageClient,
    RedisCacheService,
    build_drive_service,
)
from smart_minutes.repositories import (
    MinutesRepository,
    TranscriptionRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


@lru_cache
def get_config() -> AppConfig:
    return load_config()


@lru_cache
def get_engine() -> Engine:
    config = get_config()
    engine = create_engine(config.database.url)
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized", extra={"host": config.database.host})
    return engine


@contextmanager
def session_factory() -> Iterator[Session]:
    """Creates a database session context manager."""
    with Session(get_engine()) as session:
        yield session


@lru_cache
def get_storage() -> MinioStorageClient:
    config = get_config().minio
    client = Minio(
        endpoint=config.endpoint,
        access_key=config.user,
        secret_key=config.password,
        secure=config.secure,
    )
    storage = MinioStorageClient(client)
    storage.ensure_bucket_exists(config.bucket_name)
    return storage


def build_transcription_config(config: AssemblyAIConfig) -> aai.TranscriptionConfig:
    """
    Builds the recognition settings for every job.

    Without fallback languages the job runs in the primary language. With
    fallbacks, language detection picks among the primary and fallback codes
    and settles on the primary one when detection is inconclusive.
    """
    if config.fallback_language_codes:
        language_options = {
            "language_detection": True,
            "language_detection_options": aai.LanguageDetectionOptions(
                expected_languages=list(
                    dict.fromkeys([config.language_code, *config.fallback_language_codes])
                ),
                fallback_language=config.language_code,
            ),
        }
    else:
        language_options = {"language_code": config.language_code}

    return aai.TranscriptionConfig(
        speaker_labels=config.speaker_labels,
        speakers_expected=config.speakers_expected,
        **language_options,
    )


@lru_cache
def get_transcriber() -> AssemblyAITranscriber:
    config = get_config().assemblyai
    aai.settings.api_key = config.api_key
    return AssemblyAITranscriber(
        aai.Transcriber(config=build_transcription_config(config)),
        poll_interval_seconds=config.poll_interval_seconds,
        timeout_seconds=config.timeout_seconds,
    )


@lru_cache
def get_llm() -> GeminiLLMService:
    config = get_config().gemini
    client = genai.Client(
        api_key=config.api_key,
        http_options=types.HttpOptions(timeout=int(config.timeout_seconds * 1000)),
    )
    return GeminiLLMService(
        client, config.model_name, config.system_prompt, config.temperature
    )


@lru_cache
def get_cache() -> RedisCacheService:
    config = get_config().redis
    client = redis.Redis(host=config.host, port=config.port, decode_responses=True)
    if not client.ping():
        logger.error("Redis connection failed", extra={"host": config.host})
        raise ConnectionError("Redis connection failed")
    return RedisCacheService(client, config.cache_ttl_seconds)


@lru_cache
def get_publisher() -> GoogleDrivePublisher:
    config = get_config().google_drive
    publisher = GoogleDrivePublisher(
        lambda: build_drive_service(config.service_account_file),
        config.folder_id,
    )
    publisher.verify_folder_access()
    return publisher


@lru_cache
def get_transcription_repository() -> TranscriptionRepository:
    return TranscriptionRepository(session_factory)


@lru_cache
def get_minutes_repository() -> MinutesRepository:
    return MinutesRepository(
        session_factory, [template.db_field for template in DEFAULT_TEMPLATES]
    )


@lru_cache
def get_login_handler() -> LoginHandler:
    return LoginHandler(UserRepository(session_factory))


@lru_cache
def get_pipeline() -> MeetingPipeline:
    config = get_config()
    storage = get_storage()

    transcription = TranscriptionHandler(
        storage=storage,
        transcription_service=get_transcriber(),
        transcript_builder=TranscriptBuilder(),
        correction_filter=CorrectionFilter(load_corrections(config.corrections_path)),
        repository=get_transcription_repository(),
        audio_url_ttl=timedelta(seconds=config.minio.presigned_url_ttl_seconds),
    )
    minutes = MinutesHandler(
        orchestrator=SummarizationOrchestrator(
            get_llm(), get_cache(), config.gemini.timeout_seconds
        ),
        renderer=DocxRenderer(),
        publisher=get_publisher(),
        repository=get_minutes_repository(),
        templates=DEFAULT_TEMPLATES,
        publish_timeout_seconds=config.google_drive.publish_timeout_seconds,
    )
    return MeetingPipeline(
        ingestion=AudioIngestionHandler(storage, config.minio.bucket_name),
        transcription=transcription,
        minutes=minutes,
        transcriptions=get_transcription_repository(),
    )
