from uuid import UUID

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class SummarizeRequest(BaseModel):
    """Summarizes the given transcription, or the user's latest one."""

    user_id: str = ""
    audio_file_name: str | None = None
    transcription_id: UUID | None = None
