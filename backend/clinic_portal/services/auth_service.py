"""Login against the clinic backend."""

from __future__ import annotations

from clinic_portal.integrations.backend_client import BackendAPIError, BackendClient
from clinic_portal.schemas.auth import Token

DEFAULT_LOGIN_ERROR = "Invalid credentials. Check your details."


class AuthenticationError(Exception):
    """Raised when the backend refuses the credentials."""

    def __init__(self, detail: str = DEFAULT_LOGIN_ERROR) -> None:
        super().__init__(detail)
        self.detail = detail


async def request_access_token(
    client: BackendClient, *, username: str, password: str
) -> Token:
    """Exchange credentials for a bearer token using the OAuth2 password form."""
    try:
        payload = await client.post(
            "/auth/login",
            token=None,
            data={"username": username, "password": password},
            unavailable_detail=(
                "Could not reach the authentication server. Try again in a few moments."
            ),
        )
    except BackendAPIError as exc:
        detail = DEFAULT_LOGIN_ERROR
        if isinstance(exc.payload, dict) and isinstance(exc.payload.get("detail"), str):
            detail = exc.payload["detail"]
        raise AuthenticationError(detail) from exc
    return Token.model_validate(payload or {})
