"""Authentication endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from clinic_portal.api import deps
from clinic_portal.core.config import Settings, get_settings
from clinic_portal.integrations.backend_client import BackendClient
from clinic_portal.schemas.auth import LoginRequest
from clinic_portal.schemas.common import SuccessResponse
from clinic_portal.services.auth_service import AuthenticationError, request_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=SuccessResponse, summary="Sign in")
async def login(
    payload: LoginRequest,
    client: Annotated[BackendClient, Depends(deps.get_backend_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Exchange credentials for a token and keep it in an httpOnly cookie."""
    if not payload.username or not payload.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required.",
        )
    try:
        token = await request_access_token(
            client, username=payload.username, password=payload.password
        )
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.detail
        ) from exc

    if not token.access_token:
        logger.error("Authentication server answered without an access token")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Invalid response from the authentication server.",
        )

    response = JSONResponse(SuccessResponse().model_dump())
    response.set_cookie(
        settings.token_cookie_name,
        token.access_token,
        max_age=settings.token_max_age_seconds,
        path="/",
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
    )
    return response


@router.post("/logout", response_model=SuccessResponse, summary="Sign out")
async def logout(settings: Annotated[Settings, Depends(get_settings)]) -> JSONResponse:
    """Invalidate the token cookie."""
    response = JSONResponse(SuccessResponse().model_dump())
    response.set_cookie(
        settings.token_cookie_name,
        "",
        max_age=0,
        path="/",
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
    )
    return response
