"""Async client for the clinic REST backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

QueryParams = dict[str, str | int | float | bool | None]


class BackendClientError(RuntimeError):
    """Base error for backend interaction failures."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class BackendAPIError(BackendClientError):
    """Raised when the backend answers with a non-success status."""

    def __init__(self, status_code: int, payload: Any, *, detail: str) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.payload = payload

    def response_body(self) -> Any:
        """Return the upstream JSON body, or a ``detail`` object when there is none."""
        if self.payload is not None and not isinstance(self.payload, str):
            return self.payload
        return {"detail": self.detail}


class BackendUnavailableError(BackendClientError):
    """Raised when the backend cannot be reached."""


class BackendClient:
    """Thin wrapper around :class:`httpx.AsyncClient` adding bearer auth and error mapping."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    @classmethod
    def from_url(cls, base_url: str, *, timeout: float = 10.0) -> "BackendClient":
        return cls(
            httpx.AsyncClient(
                base_url=base_url.rstrip("/"),
                timeout=timeout,
                headers={"Accept": "application/json"},
            )
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _clean_params(params: QueryParams | None) -> dict[str, str] | None:
        if not params:
            return None
        cleaned = {
            key: str(value).lower() if isinstance(value, bool) else str(value)
            for key, value in params.items()
            if value is not None and value != ""
        }
        return cleaned or None

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            try:
                return response.json()
            except ValueError:
                return None
        return response.text or None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def request(
        self,
        method: str,
        path: str,
        *,
        token: str | None,
        json: Any = None,
        data: dict[str, str] | None = None,
        params: QueryParams | None = None,
        error_detail: str = "Could not communicate with the server.",
        unavailable_detail: str = "Could not connect to the server. Try again.",
    ) -> Any:
        """Send a request and return the decoded body, or ``None`` for empty replies.

        Raises :class:`BackendAPIError` for non-2xx answers and
        :class:`BackendUnavailableError` for transport failures.
        """
        headers: dict[str, str] = {}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        normalized_path = path if path.startswith("/") else f"/{path}"
        try:
            response = await self._http.request(
                method,
                normalized_path,
                headers=headers,
                json=json,
                data=data,
                params=self._clean_params(params),
            )
        except httpx.HTTPError as exc:
            logger.exception("Backend request %s %s failed", method, normalized_path)
            raise BackendUnavailableError(unavailable_detail) from exc

        if response.is_error:
            payload = self._decode(response)
            logger.warning(
                "Backend answered %s for %s %s",
                response.status_code,
                method,
                normalized_path,
            )
            raise BackendAPIError(response.status_code, payload, detail=error_detail)

        if response.status_code == 204 or not response.content:
            return None
        return self._decode(response)

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)


__all__ = [
    "BackendAPIError",
    "BackendClient",
    "BackendClientError",
    "BackendUnavailableError",
]
