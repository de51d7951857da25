"""Domain models for the meeting minutes pipeline."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel


class StorageReference(BaseModel, frozen=True):
    """Location of an object in durable storage."""

    bucket_name: str
    object_name: str

    @property
    def uri(self) -> str:
        return f"s3://{self.bucket_name}/{self.object_name}"


class AudioAsset(BaseModel, frozen=True):
    """An uploaded meeting recording."""

    owner_id: str
    original_file_name: str
    storage_reference: StorageReference
    uploaded_at: datetime


class RecognizedWord(BaseModel, frozen=True):
    """A single word from the recognizer, in time order."""

    text: str
    speaker: str | None = None
    start_ms: int | None = None


class SpeakerSegment(BaseModel, frozen=True):
    """Consecutive words attributed to one speaker."""

    speaker: str
    text: str


class TranscriptionStatus(str, Enum):
    COMPLETED = "completed"
    NO_SPEECH = "no_speech"


class Transcript(BaseModel, frozen=True):
    """Speaker-labeled transcript of one audio asset."""

    source_asset: AudioAsset
    raw_text: str
    corrected_text: str
    speaker_segments: tuple[SpeakerSegment, ...] = ()
    status: TranscriptionStatus = TranscriptionStatus.COMPLETED
    transcription_id: UUID | None = None


class StoredTranscription(BaseModel, frozen=True):
    """A transcription record as persisted for its owner."""

    id: UUID
    owner_id: str
    file_name: str
    storage_uri: str
    text: str
    status: TranscriptionStatus
    created_at: datetime | None = None


class TemplateSpec(BaseModel, frozen=True):
    """
    One style of meeting minutes.

    ``instructions`` holds the prompt with a ``{transcript}`` placeholder;
    ``db_field`` names the link field the published document is stored under.
    """

    name: str
    db_field: str
    instructions: str

    def build_prompt(self, transcript: str) -> str:
        return self.instructions.replace("{transcript}", transcript)


class GeneratedSummary(BaseModel, frozen=True):
    """Text produced by the language model for one template."""

    template: TemplateSpec
    text: str


class SummaryArtifact(BaseModel, frozen=True):
    """A rendered summary document, ready to publish."""

    template_name: str
    generated_text: str
    document: bytes


class PublishedFile(BaseModel, frozen=True):
    file_id: str
    url: str


class PublishedLink(BaseModel, frozen=True):
    """Public share link of one template's document."""

    template_name: str
    template_db_field: str
    file_id: str
    url: str


class MeetingRecord(BaseModel, frozen=True):
    """One completed pipeline run as visible to its owner."""

    run_id: UUID
    owner_id: str
    audio_file_name: str
    created_at: datetime | None = None
    links: dict[str, str | None]


class MinutesRunResult(BaseModel, frozen=True):
    record: MeetingRecord
    published: list[PublishedLink]
