"""
FastAPI router for authentication endpoints.

Provides signup, login, logout and the current-user lookup.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from social.dependencies import get_auth_service, require_user
from social.schemas.auth import LoginRequest, SignupRequest
from social.services.auth_service import AuthResult, AuthService
from social.services.serializers import profile_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def to_response(result: AuthResult) -> JSONResponse:
    """Apply an auth result to an HTTP response."""
    response = JSONResponse(
        status_code=result.status_code,
        content=jsonable_encoder(result.body),
    )
    for cookie in result.cookies:
        cookie.apply(response)
    return response


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    body: SignupRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Create an account.

    Sets the session cookie and returns the new user's public fields.
    """
    result = await auth_service.signup(
        full_name=body.fullName,
        username=body.username,
        email=body.email,
        password=body.password,
    )
    return to_response(result)


@router.post("/login")
async def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Login with username and password.

    Sets the session cookie and returns the user's public fields.
    """
    result = await auth_service.login(username=body.username, password=body.password)
    return to_response(result)


@router.post("/logout")
async def logout(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Expire the session cookie."""
    result = await auth_service.logout()
    return to_response(result)


@router.get("/me")
async def get_me(
    user: Annotated[dict, Depends(require_user)],
):
    """Get the authenticated user's profile."""
    return profile_user(user)
