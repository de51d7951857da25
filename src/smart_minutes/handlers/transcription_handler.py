"""Handler turning stored audio into a corrected, speaker-labeled transcript."""

import logging
from datetime import timedelta

from smart_minutes.domain.corrections import CorrectionFilter
from smart_minutes.domain.models import AudioAsset, Transcript, TranscriptionStatus
from smart_minutes.domain.transcript_builder import TranscriptBuilder
from smart_minutes.infrastructure.interfaces import StorageClient, TranscriptionService
from smart_minutes.repositories import TranscriptionRepository

logger = logging.getLogger(__name__)


class TranscriptionHandler:
    """Orchestrates audio-to-transcript operations."""

    def __init__(
        self,
        storage: StorageClient,
        transcription_service: TranscriptionService,
        transcript_builder: TranscriptBuilder,
        correction_filter: CorrectionFilter,
        repository: TranscriptionRepository,
        audio_url_ttl: timedelta,
    ):
        self._storage = storage
        self._transcription_service = transcription_service
        self._transcript_builder = transcript_builder
        self._correction_filter = correction_filter
        self._repository = repository
        self._audio_url_ttl = audio_url_ttl

    def process(self, asset: AudioAsset) -> Transcript:
        """
        Transcribes an audio asset, applies corrections and stores the result.

        A recording without recognizable speech is not an error: the returned
        transcript is empty and its status is NO_SPEECH.

        Args:
            asset: The stored recording.

        Returns:
            Transcript with its persisted transcription id.

        Raises:
            StorageDownloadError: If the audio URL cannot be created.
            TranscriptionError: If recognition fails or times out.
            PersistenceError: If the transcription record cannot be saved.
        """
        logger.info(
            "Transcribing audio",
            extra={"owner_id": asset.owner_id, "storage_uri": asset.storage_reference.uri},
        )

        audio_url = self._storage.presigned_url(asset.storage_reference, self._audio_url_ttl)
        words = self._transcription_service.transcribe(audio_url)
        raw_text, segments = self._transcript_builder.build(words)

        status = TranscriptionStatus.COMPLETED if segments else TranscriptionStatus.NO_SPEECH
        if status is TranscriptionStatus.NO_SPEECH:
            logger.warning(
                "No speech detected",
                extra={"owner_id": asset.owner_id, "file_name": asset.original_file_name},
            )

        transcript = Transcript(
            source_asset=asset,
            raw_text=raw_text,
            corrected_text=self._correction_filter.apply(raw_text),
            speaker_segments=tuple(segments),
            status=status,
        )

        stored = self._repository.save(transcript)

        logger.info(
            "Audio transcribed",
            extra={
                "owner_id": asset.owner_id,
                "transcription_id": str(stored.id),
                "segment_count": len(segments),
                "speakers": sorted({s.speaker for s in segments}),
            },
        )
        return transcript.model_copy(update={"transcription_id": stored.id})
