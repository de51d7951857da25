"""Repository for per-user transcription records."""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from uuid import UUID

from sqlmodel import Session, select

from smart_minutes.db_models import TranscriptionEntity
from smart_minutes.domain.models import StoredTranscription, Transcript, TranscriptionStatus
from smart_minutes.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class TranscriptionRepository:
    """Stores transcripts per owner so later requests can summarize them."""

    def __init__(self, session_factory: Callable[[], AbstractContextManager[Session]]):
        self._session_factory = session_factory

    def save(self, transcript: Transcript) -> StoredTranscription:
        """
        Persists the corrected transcript of one audio asset.

        Raises:
            PersistenceError: If the database write fails.
        """
        asset = transcript.source_asset
        try:
            with self._session_factory() as db_session:
                entity = TranscriptionEntity(
                    owner_id=asset.owner_id,
                    file_name=asset.original_file_name,
                    storage_uri=asset.storage_reference.uri,
                    text=transcript.corrected_text,
                    status=transcript.status.value,
                )
                db_session.add(entity)
                db_session.commit()
                db_session.refresh(entity)
                stored = self._to_model(entity)
        except Exception as e:
            logger.exception(
                "Failed to save transcription", extra={"owner_id": asset.owner_id}
            )
            raise PersistenceError(asset.owner_id, cause=e) from e

        logger.info(
            "Transcription saved",
            extra={"owner_id": asset.owner_id, "transcription_id": str(stored.id)},
        )
        return stored

    def get(self, owner_id: str, transcription_id: UUID) -> StoredTranscription | None:
        """Returns one of the owner's transcriptions, or None."""
        statement = select(TranscriptionEntity).where(
            TranscriptionEntity.id == transcription_id,
            TranscriptionEntity.owner_id == owner_id,
        )
        return self._first(owner_id, statement)

    def get_latest(self, owner_id: str) -> StoredTranscription | None:
        """Returns the owner's most recent transcription, or None."""
        statement = (
            select(TranscriptionEntity)
            .where(TranscriptionEntity.owner_id == owner_id)
            .order_by(TranscriptionEntity.created_at.desc())
            .limit(1)
        )
        return self._first(owner_id, statement)

    def _first(self, owner_id: str, statement) -> StoredTranscription | None:
        try:
            with self._session_factory() as db_session:
                entity = db_session.exec(statement).first()
                return self._to_model(entity) if entity else None
        except Exception as e:
            logger.exception("Failed to read transcription", extra={"owner_id": owner_id})
            raise PersistenceError(owner_id, cause=e) from e

    @staticmethod
    def _to_model(entity: TranscriptionEntity) -> StoredTranscription:
        return StoredTranscription(
            id=entity.id,
            owner_id=entity.owner_id,
            file_name=entity.file_name,
            storage_uri=entity.storage_uri,
            text=entity.text,
            status=TranscriptionStatus(entity.status),
            created_at=entity.created_at,
        )
