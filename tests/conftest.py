"""Shared fixtures: in-memory doubles for every external collaborator.

Provides:
- In-memory storage, recognizer, LLM, cache and publisher doubles
- SQLite in-memory session factory with all tables created
- A fully wired MeetingPipeline built from the doubles
"""

from __future__ import annotations

import itertools
import threading
from contextlib import contextmanager
from datetime import timedelta

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from smart_minutes import db_models  # noqa: F401  registers the tables
from smart_minutes.domain import (
    DEFAULT_CORRECTIONS,
    DEFAULT_TEMPLATES,
    CorrectionFilter,
    PublishedFile,
    RecognizedWord,
    StorageReference,
    SummarizationOrchestrator,
    TranscriptBuilder,
)
from smart_minutes.exceptions import LLMServiceError, PublishError, TranscriptionError
from smart_minutes.handlers import (
    AudioIngestionHandler,
    MeetingPipeline,
    MinutesHandler,
    TranscriptionHandler,
)
from smart_minutes.infrastructure import DocxRenderer
from smart_minutes.infrastructure.interfaces import (
    CacheService,
    FilePublisher,
    LLMService,
    StorageClient,
    TranscriptionService,
)
from smart_minutes.repositories import MinutesRepository, TranscriptionRepository

BUCKET = "meeting-audio"


# ── Doubles ───────────────────────────────────────────────────────────────────


class InMemoryStorage(StorageClient):
    def __init__(self):
        self.objects: dict[tuple[str, str], bytes] = {}
        self.content_types: dict[tuple[str, str], str] = {}

    def upload(self, bucket_name, object_name, data, size, content_type):
        self.objects[(bucket_name, object_name)] = data.read(size)
        self.content_types[(bucket_name, object_name)] = content_type
        return StorageReference(bucket_name=bucket_name, object_name=object_name)

    def presigned_url(self, reference, expires):
        return f"https://storage.test/{reference.bucket_name}/{reference.object_name}"

    def ensure_bucket_exists(self, bucket_name):
        pass


class FakeTranscriptionService(TranscriptionService):
    """Returns a fixed word list; raises when ``error`` is set."""

    def __init__(self, words: list[RecognizedWord] | None = None, error: Exception | None = None):
        self.words = words or []
        self.error = error
        self.urls: list[str] = []

    def transcribe(self, audio_url):
        self.urls.append(audio_url)
        if self.error is not None:
            raise TranscriptionError(audio_url, self.error)
        return list(self.words)


class FakeLLM(LLMService):
    """Echoes a summary of each prompt; fails for prompts containing a marker."""

    def __init__(self, fail_on: tuple[str, ...] = ()):
        self.fail_on = fail_on
        self.prompts: list[str] = []
        self._lock = threading.Lock()

    def generate(self, prompt):
        with self._lock:
            self.prompts.append(prompt)
        for marker in self.fail_on:
            if marker in prompt:
                raise LLMServiceError(f"model refused prompt containing '{marker}'")
        first_line = prompt.splitlines()[0]
        return f"MINUTES\n{first_line}\nEnd of minutes"


class InMemoryCache(CacheService):
    def __init__(self):
        self.values: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key):
        with self._lock:
            return self.values.get(key)

    def set(self, key, value):
        with self._lock:
            self.values[key] = value


class FakePublisher(FilePublisher):
    """Keeps published files in memory; raises for names containing a marker."""

    def __init__(self, fail_on: tuple[str, ...] = ()):
        self.fail_on = fail_on
        self.files: dict[str, tuple[str, bytes, str]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def publish(self, data, file_name, mime_type):
        for marker in self.fail_on:
            if marker in file_name:
                raise PublishError(file_name, RuntimeError("quota exceeded"))
        with self._lock:
            file_id = f"file-{next(self._ids)}"
            self.files[file_id] = (file_name, data, mime_type)
        return PublishedFile(
            file_id=file_id, url=f"https://drive.test/file/d/{file_id}/view"
        )


# ── Helpers ───────────────────────────────────────────────────────────────────


def _make_words(*pairs: tuple[str, str]) -> list[RecognizedWord]:
    """Builds recognized words from (speaker, sentence) pairs, one word each."""
    words = []
    start = 0
    for speaker, sentence in pairs:
        for token in sentence.split():
            words.append(RecognizedWord(text=token, speaker=speaker, start_ms=start))
            start += 300
    return words


def _make_minutes_handler(
    session_factory,
    llm: LLMService | None = None,
    cache: CacheService | None = None,
    publisher: FilePublisher | None = None,
) -> MinutesHandler:
    return MinutesHandler(
        orchestrator=SummarizationOrchestrator(
            llm or FakeLLM(), cache or InMemoryCache(), timeout_seconds=10
        ),
        renderer=DocxRenderer(),
        publisher=publisher or FakePublisher(),
        repository=_make_minutes_repository(session_factory),
        templates=DEFAULT_TEMPLATES,
        publish_timeout_seconds=10,
    )


def _make_minutes_repository(session_factory) -> MinutesRepository:
    return MinutesRepository(
        session_factory, [template.db_field for template in DEFAULT_TEMPLATES]
    )


# ── Fixtures ──────────────────────────────────────────────────────────────────


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    @contextmanager
    def factory():
        with Session(engine) as session:
            yield session

    yield factory
    engine.dispose()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def recognizer() -> FakeTranscriptionService:
    return FakeTranscriptionService(
        _make_words(
            ("A", "Good morning everyone, young people are here."),
            ("B", "Thanks, let us start the meeting."),
        )
    )


@pytest.fixture
def llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()


@pytest.fixture
def transcription_repository(session_factory) -> TranscriptionRepository:
    return TranscriptionRepository(session_factory)


@pytest.fixture
def minutes_repository(session_factory) -> MinutesRepository:
    return _make_minutes_repository(session_factory)


@pytest.fixture
def transcription_handler(storage, recognizer, transcription_repository) -> TranscriptionHandler:
    return TranscriptionHandler(
        storage=storage,
        transcription_service=recognizer,
        transcript_builder=TranscriptBuilder(),
        correction_filter=CorrectionFilter(DEFAULT_CORRECTIONS),
        repository=transcription_repository,
        audio_url_ttl=timedelta(minutes=5),
    )


@pytest.fixture
def minutes_handler(session_factory, llm, cache, publisher) -> MinutesHandler:
    return _make_minutes_handler(session_factory, llm, cache, publisher)


@pytest.fixture
def pipeline(storage, transcription_handler, minutes_handler, transcription_repository):
    return MeetingPipeline(
        ingestion=AudioIngestionHandler(storage, BUCKET),
        transcription=transcription_handler,
        minutes=minutes_handler,
        transcriptions=transcription_repository,
    )
