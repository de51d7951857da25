"""Login endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from smart_minutes.dependencies import get_login_handler
from smart_minutes.handlers import LoginHandler
from smart_minutes.request_models import LoginRequest
from smart_minutes.response_models import LoginResponse

router = APIRouter(tags=["auth"])

LoginHandlerDep = Annotated[LoginHandler, Depends(get_login_handler)]


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, handler: LoginHandlerDep) -> LoginResponse:
    uid = handler.authenticate(request.email, request.password)
    return LoginResponse(message="Login successful", uid=uid)
