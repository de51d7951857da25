from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from smart_minutes.domain.models import (
    MeetingRecord,
    MinutesRunResult,
    Transcript,
    TranscriptionStatus,
)


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    uid: str


class TranscribeResponse(BaseModel):
    success: bool = True
    message: str
    transcription: str
    audio_file_name: str
    transcription_id: UUID | None
    status: TranscriptionStatus

    @classmethod
    def from_transcript(cls, transcript: Transcript) -> "TranscribeResponse":
        if transcript.status is TranscriptionStatus.NO_SPEECH:
            message = "No speech detected in audio"
        else:
            message = "Audio transcribed successfully"
        return cls(
            message=message,
            transcription=transcript.corrected_text,
            audio_file_name=transcript.source_asset.original_file_name,
            transcription_id=transcript.transcription_id,
            status=transcript.status,
        )


class TemplateLink(BaseModel):
    template: str
    link: str


class SummarizeResponse(BaseModel):
    success: bool = True
    message: str
    results: list[TemplateLink]
    table_record_id: UUID

    @classmethod
    def from_result(cls, result: MinutesRunResult) -> "SummarizeResponse":
        return cls(
            message="Minutes generated and uploaded to Google Drive",
            results=[
                TemplateLink(template=link.template_name, link=link.url)
                for link in result.published
            ],
            table_record_id=result.record.run_id,
        )


class MinutesEntry(BaseModel):
    """One recorded run with its share link per template, null when missing."""

    summary_id: UUID
    audio_file_name: str
    created_at: datetime | None
    formal_template: str | None = None
    simple_template: str | None = None
    detailed_template: str | None = None

    @classmethod
    def from_record(cls, record: MeetingRecord) -> "MinutesEntry":
        return cls(
            summary_id=record.run_id,
            audio_file_name=record.audio_file_name,
            created_at=record.created_at,
            formal_template=record.links.get("formal_template"),
            simple_template=record.links.get("simple_template"),
            detailed_template=record.links.get("detailed_template"),
        )


class MinutesListResponse(BaseModel):
    success: bool = True
    message: str
    minutes: list[MinutesEntry]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
