"""Authentication schemas."""

from __future__ import annotations

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Credentials posted by the login form.

    Both fields default to empty so the route can answer 400 itself.
    """

    username: str = ""
    password: str = ""


class Token(BaseModel):
    """Access token issued by the backend."""

    access_token: str = ""
    token_type: str = "bearer"
