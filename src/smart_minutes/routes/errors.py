"""Maps pipeline failures to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from smart_minutes.exceptions import (
    AuthenticationError,
    InvalidInputError,
    NoSpeechDetectedError,
    PipelineError,
    TranscriptNotFoundError,
)
from smart_minutes.response_models import ErrorResponse

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[PipelineError], int] = {
    InvalidInputError: 400,
    AuthenticationError: 401,
    TranscriptNotFoundError: 404,
    NoSpeechDetectedError: 422,
}


def status_code_for(error: PipelineError) -> int:
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return 500


async def _handle_pipeline_error(request: Request, exc: PipelineError) -> JSONResponse:
    status_code = status_code_for(exc)
    extra = {
        "path": request.url.path,
        "error_type": type(exc).__name__,
        "status_code": status_code,
    }
    if status_code >= 500:
        logger.error(f"Request failed: {exc}", extra=extra)
    else:
        logger.warning(f"Request rejected: {exc}", extra=extra)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=str(exc)).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PipelineError, _handle_pipeline_error)
