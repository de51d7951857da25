"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI

from smart_minutes.config import load_config
from smart_minutes.logging import setup_logging
from smart_minutes.routes import (
    auth_router,
    minutes_router,
    register_exception_handlers,
    transcriptions_router,
)

patch_all()

logger = setup_logging(load_config().log_level)


def create_app() -> FastAPI:
    application = FastAPI(title="Smart Minutes")
    application.include_router(auth_router)
    application.include_router(transcriptions_router)
    application.include_router(minutes_router)
    register_exception_handlers(application)
    return application


app = create_app()


def main() -> None:
    uvicorn.run(app, host="0.0.0.0", port=8000, log_config=None)
