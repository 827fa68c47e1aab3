"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledgement returned when the backend has nothing to say."""

    success: bool = True
