"""Domain layer exports."""

from .models import (
    AudioAsset,
    GeneratedSummary,
    MeetingRecord,
    MinutesRunResult,
    PublishedFile,
    PublishedLink,
    RecognizedWord,
    SpeakerSegment,
    StorageReference,
    StoredTranscription,
    SummaryArtifact,
    TemplateSpec,
    Transcript,
    TranscriptionStatus,
)
from .corrections import DEFAULT_CORRECTIONS, CorrectionFilter, load_corrections
from .templates import DEFAULT_TEMPLATES, SYSTEM_PROMPT
from .transcript_builder import TranscriptBuilder
from .summarizer import SummarizationOrchestrator

__all__ = [
    "AudioAsset",
    "CorrectionFilter",
    "DEFAULT_CORRECTIONS",
    "DEFAULT_TEMPLATES",
    "GeneratedSummary",
    "MeetingRecord",
    "MinutesRunResult",
    "PublishedFile",
    "PublishedLink",
    "RecognizedWord",
    "SYSTEM_PROMPT",
    "SpeakerSegment",
    "StorageReference",
    "StoredTranscription",
    "SummarizationOrchestrator",
    "SummaryArtifact",
    "TemplateSpec",
    "Transcript",
    "TranscriptBuilder",
    "TranscriptionStatus",
    "load_corrections",
]
