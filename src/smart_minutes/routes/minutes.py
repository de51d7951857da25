"""Minutes generation and listing endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile

from smart_minutes.dependencies import get_minutes_repository, get_pipeline
from smart_minutes.handlers import MeetingPipeline
from smart_minutes.repositories import MinutesRepository
from smart_minutes.request_models import SummarizeRequest
from smart_minutes.response_models import (
    MinutesEntry,
    MinutesListResponse,
    SummarizeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["minutes"])

PipelineDep = Annotated[MeetingPipeline, Depends(get_pipeline)]
MinutesRepositoryDep = Annotated[MinutesRepository, Depends(get_minutes_repository)]


@router.post("/summarize", response_model=SummarizeResponse)
def summarize(request: SummarizeRequest, pipeline: PipelineDep) -> SummarizeResponse:
    """Generates, publishes and records minutes from a stored transcription."""
    result = pipeline.summarize(
        request.user_id, request.transcription_id, request.audio_file_name
    )
    return SummarizeResponse.from_result(result)


@router.post("/minutes", response_model=SummarizeResponse)
def create_minutes(
    pipeline: PipelineDep,
    audio: UploadFile | None = File(None),
    uid: str = Form(""),
) -> SummarizeResponse:
    """Runs the whole pipeline on one uploaded recording."""
    payload = audio.file.read() if audio is not None else None
    file_name = audio.filename if audio is not None else None

    logger.info(
        "Received minutes request",
        extra={"owner_id": uid, "file_name": file_name},
    )

    result = pipeline.run(payload, file_name, uid)
    return SummarizeResponse.from_result(result)


@router.get("/allminutes/{owner_id}", response_model=MinutesListResponse)
def list_minutes(owner_id: str, repository: MinutesRepositoryDep) -> MinutesListResponse:
    """Returns every recorded run of a user, oldest first."""
    records = repository.list_for_owner(owner_id)
    message = "Minutes retrieved" if records else "No minutes found"
    return MinutesListResponse(
        message=message,
        minutes=[MinutesEntry.from_record(record) for record in records],
    )
