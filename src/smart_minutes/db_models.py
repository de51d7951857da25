from datetime import datetime
from typing import Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, DateTime, Text, func
from sqlmodel import Field, SQLModel


def _user_id() -> str:
    return uuid4().hex


class UserAccount(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(default_factory=_user_id, primary_key=True, max_length=64)
    email: str = Field(index=True, unique=True, max_length=320)
    password_hash: str = Field(max_length=255)


class TranscriptionEntity(SQLModel, table=True):
    __tablename__ = "transcriptions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: str = Field(index=True, max_length=255)
    file_name: str = Field(max_length=1024)
    storage_uri: str = Field(max_length=2048)
    text: str = Field(sa_column=Column(Text, nullable=False))
    status: str = Field(max_length=32)
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        ),
    )


class MeetingMinutes(SQLModel, table=True):
    """One completed run; ``links`` maps template db fields to share URLs."""

    __tablename__ = "meeting_minutes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: str = Field(index=True, max_length=255)
    audio_file_name: str = Field(max_length=1024)
    links: Dict[str, str] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        ),
    )
