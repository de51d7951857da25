"""Audio upload and transcription endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile

from smart_minutes.dependencies import get_pipeline
from smart_minutes.handlers import MeetingPipeline
from smart_minutes.response_models import TranscribeResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transcriptions"])

PipelineDep = Annotated[MeetingPipeline, Depends(get_pipeline)]


@router.post("/transcribe", response_model=TranscribeResponse)
def transcribe(
    pipeline: PipelineDep,
    audio: UploadFile | None = File(None),
    uid: str = Form(""),
) -> TranscribeResponse:
    """Stores the uploaded recording and returns its corrected transcript."""
    payload = audio.file.read() if audio is not None else None
    file_name = audio.filename if audio is not None else None

    logger.info(
        "Received transcription request",
        extra={"owner_id": uid, "file_name": file_name},
    )

    transcript = pipeline.transcribe(payload, file_name, uid)
    return TranscribeResponse.from_transcript(transcript)
