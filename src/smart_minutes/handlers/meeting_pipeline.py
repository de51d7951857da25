"""Entry points tying ingestion, transcription and minutes together."""

import logging
from uuid import UUID

from smart_minutes.domain.models import MinutesRunResult, Transcript
from smart_minutes.exceptions import InvalidInputError, TranscriptNotFoundError
from smart_minutes.repositories import TranscriptionRepository

from .ingestion_handler import AudioIngestionHandler
from .minutes_handler import MinutesHandler
from .transcription_handler import TranscriptionHandler

logger = logging.getLogger(__name__)


class MeetingPipeline:
    """
    The three operations exposed to clients.

    Each call carries its own transcript from one stage to the next; nothing
    is shared between concurrent requests apart from the stored records.
    """

    def __init__(
        self,
        ingestion: AudioIngestionHandler,
        transcription: TranscriptionHandler,
        minutes: MinutesHandler,
        transcriptions: TranscriptionRepository,
    ):
        self._ingestion = ingestion
        self._transcription = transcription
        self._minutes = minutes
        self._transcriptions = transcriptions

    def transcribe(
        self, payload: bytes | None, file_name: str | None, owner_id: str | None
    ) -> Transcript:
        """Stores a recording and returns its corrected transcript."""
        asset = self._ingestion.ingest(payload, file_name, owner_id)
        return self._transcription.process(asset)

    def summarize(
        self,
        owner_id: str | None,
        transcription_id: UUID | None = None,
        audio_file_name: str | None = None,
    ) -> MinutesRunResult:
        """
        Produces minutes from a transcription stored earlier.

        Args:
            owner_id: The user requesting the minutes.
            transcription_id: Transcription to summarize; the user's latest
                one when omitted.
            audio_file_name: Overrides the recording name used for documents.

        Raises:
            InvalidInputError: If the owner is missing.
            TranscriptNotFoundError: If there is nothing to summarize.
        """
        if not owner_id or not owner_id.strip():
            raise InvalidInputError("user_id", "user identifier is missing")

        if transcription_id is not None:
            stored = self._transcriptions.get(owner_id, transcription_id)
        else:
            stored = self._transcriptions.get_latest(owner_id)

        if stored is None:
            raise TranscriptNotFoundError(
                owner_id, str(transcription_id) if transcription_id else None
            )

        logger.info(
            "Summarizing stored transcription",
            extra={"owner_id": owner_id, "transcription_id": str(stored.id)},
        )
        return self._minutes.process(
            owner_id, stored.text, audio_file_name or stored.file_name
        )

    def run(
        self, payload: bytes | None, file_name: str | None, owner_id: str | None
    ) -> MinutesRunResult:
        """Runs the whole pipeline on one upload."""
        transcript = self.transcribe(payload, file_name, owner_id)
        return self._minutes.process(
            transcript.source_asset.owner_id,
            transcript.corrected_text,
            transcript.source_asset.original_file_name,
        )
