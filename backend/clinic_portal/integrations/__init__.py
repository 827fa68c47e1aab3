"""Integration shortcuts."""

from .backend_client import (
    BackendAPIError,
    BackendClient,
    BackendClientError,
    BackendUnavailableError,
)

__all__ = [
    "BackendAPIError",
    "BackendClient",
    "BackendClientError",
    "BackendUnavailableError",
]
