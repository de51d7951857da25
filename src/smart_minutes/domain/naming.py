"""Object keys and document file names derived from uploads."""

import os
import re
from datetime import datetime

DEFAULT_AUDIO_FILE_NAME = "recording.mp3"
DEFAULT_DOCUMENT_BASE_NAME = "Transcription"

_UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize(name: str) -> str:
    """Replaces runs of characters unsafe in object keys with '_'."""
    cleaned = _UNSAFE_CHARACTERS.sub("_", name.strip()).strip("._")
    return cleaned or "file"


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def build_storage_key(owner_id: str, file_name: str, uploaded_at: datetime) -> str:
    """
    Builds the storage key of an uploaded recording.

    Keys are timestamp based, so uploading the same file twice creates two
    objects.

    Example: audio/u1/1718000000000-meeting.mp3
    """
    return (
        f"audio/{sanitize(owner_id)}/"
        f"{epoch_millis(uploaded_at)}-{sanitize(os.path.basename(file_name))}"
    )


def audio_base_name(audio_file_name: str | None) -> str:
    """Strips the extension from the original audio name."""
    base = os.path.splitext(os.path.basename(audio_file_name or ""))[0]
    return base or DEFAULT_DOCUMENT_BASE_NAME


def build_document_name(
    audio_file_name: str | None,
    template_name: str,
    created_at: datetime,
    extension: str,
) -> str:
    """Example: meeting-Template-Formal-1718000000000.docx"""
    return (
        f"{audio_base_name(audio_file_name)}-{template_name}-"
        f"{epoch_millis(created_at)}{extension}"
    )
