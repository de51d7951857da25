"""Repository recording completed minutes runs."""

import logging
from collections.abc import Callable, Mapping, Sequence
from contextlib import AbstractContextManager

from sqlmodel import Session, select

from smart_minutes.db_models import MeetingMinutes
from smart_minutes.domain.models import MeetingRecord
from smart_minutes.exceptions import InvalidInputError, PersistenceError

logger = logging.getLogger(__name__)


class MinutesRepository:
    """
    Writes and reads meeting minutes records, keyed by owner.

    A record is only written when every required template link is present;
    anything less is rejected before the database is touched, so readers never
    see a partially populated record.
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractContextManager[Session]],
        required_fields: Sequence[str],
    ):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
            required_fields: Template db fields every record must carry a link for.
        """
        self._session_factory = session_factory
        self._required_fields = tuple(required_fields)

    def record(
        self, owner_id: str, audio_file_name: str, links: Mapping[str, str]
    ) -> MeetingRecord:
        """
        Persists one completed run.

        Args:
            owner_id: The user owning the run.
            audio_file_name: Original name of the processed recording.
            links: Template db field -> share URL, for all required fields.

        Returns:
            The stored record with its generated run id and server timestamp.

        Raises:
            InvalidInputError: If the owner is blank or a required link is missing.
            PersistenceError: If the database write fails.
        """
        if not owner_id:
            raise InvalidInputError("owner_id", "owner identifier is required")

        missing = [field for field in self._required_fields if not links.get(field)]
        if missing:
            raise InvalidInputError("links", f"missing links for {', '.join(missing)}")

        try:
            with self._session_factory() as db_session:
                entity = MeetingMinutes(
                    owner_id=owner_id,
                    audio_file_name=audio_file_name,
                    links={field: links[field] for field in self._required_fields},
                )
                db_session.add(entity)
                db_session.commit()
                db_session.refresh(entity)
                record = self._to_record(entity)
        except Exception as e:
            logger.exception("Failed to record minutes", extra={"owner_id": owner_id})
            raise PersistenceError(owner_id, cause=e) from e

        logger.info(
            "Minutes recorded",
            extra={"owner_id": owner_id, "run_id": str(record.run_id)},
        )
        return record

    def list_for_owner(self, owner_id: str) -> list[MeetingRecord]:
        """
        Returns every record of a user, oldest first.

        Each record exposes all required link fields; a field missing from the
        stored data is None. A user without records gets an empty list.

        Raises:
            PersistenceError: If the database read fails.
        """
        statement = (
            select(MeetingMinutes)
            .where(MeetingMinutes.owner_id == owner_id)
            .order_by(MeetingMinutes.created_at)
        )
        try:
            with self._session_factory() as db_session:
                entities = db_session.exec(statement).all()
                return [self._to_record(entity) for entity in entities]
        except Exception as e:
            logger.exception("Failed to list minutes", extra={"owner_id": owner_id})
            raise PersistenceError(owner_id, cause=e) from e

    def _to_record(self, entity: MeetingMinutes) -> MeetingRecord:
        stored = entity.links or {}
        return MeetingRecord(
            run_id=entity.id,
            owner_id=entity.owner_id,
            audio_file_name=entity.audio_file_name,
            created_at=entity.created_at,
            links={field: stored.get(field) or None for field in self._required_fields},
        )
