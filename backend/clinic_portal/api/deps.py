"""Common API dependencies."""

from __future__ import annotations

from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import Depends, HTTPException, Request, status

from clinic_portal.core.config import Settings, get_settings
from clinic_portal.integrations.backend_client import BackendClient

NOT_AUTHENTICATED = "Not authenticated. Sign in to continue."


def get_backend_client(request: Request) -> BackendClient:
    """Return the shared backend client created at startup."""
    client = getattr(request.app.state, "backend_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Backend client is not initialised",
        )
    return client


def get_access_token(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Read the bearer token stored in the httpOnly cookie."""
    token = request.cookies.get(settings.token_cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED,
        )
    return token


def get_clinic_timezone(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ZoneInfo:
    """Timezone used to read naive form date-times."""
    return ZoneInfo(settings.clinic_timezone)

