"""FastAPI application entrypoint."""

import logging
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from secure import Secure

from clinic_portal.api import api_router
from clinic_portal.core.config import get_settings
from clinic_portal.integrations.backend_client import (
    BackendAPIError,
    BackendClient,
    BackendUnavailableError,
)
from clinic_portal.security.logging_filters import install_sensitive_filter

logger = logging.getLogger(__name__)

settings = get_settings()

_ALLOWED_ORIGINS = [origin for origin in settings.cors_allowlist if origin]
if not _ALLOWED_ORIGINS:
    _ALLOWED_ORIGINS = ["http://localhost:3000"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.backend_client = BackendClient.from_url(
        settings.backend_api_url, timeout=settings.backend_timeout_seconds
    )
    try:
        yield
    finally:
        try:
            await app.state.backend_client.aclose()
        except Exception:  # pragma: no cover - shutdown is best effort
            logger.exception("Failed to close backend client")


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_ALLOWED_ORIGINS,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)
app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")

_secure_headers = Secure.with_default_headers()


def auth_redirect_target(path: str, has_token: bool) -> str | None:
    """Where a page request should be sent, or ``None`` to let it through."""
    if (path == "/dashboard" or path.startswith("/dashboard/")) and not has_token:
        return "/login"
    if path == "/login" and has_token:
        return "/dashboard"
    return None


@app.middleware("http")
async def _auth_gate(request: Request, call_next):
    has_token = bool(request.cookies.get(settings.token_cookie_name))
    target = auth_redirect_target(request.url.path, has_token)
    if target is not None:
        return RedirectResponse(url=target, status_code=307)
    return await call_next(request)


@app.middleware("http")
async def _apply_security_headers(request, call_next):
    response = await call_next(request)
    _secure_headers.set_headers(response)
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id:
        response.headers.setdefault("X-Request-ID", str(correlation_id))
    return response


@app.exception_handler(BackendAPIError)
async def _relay_backend_error(_: Request, exc: BackendAPIError) -> JSONResponse:
    return JSONResponse(exc.response_body(), status_code=exc.status_code)


@app.exception_handler(BackendUnavailableError)
async def _backend_unavailable(_: Request, exc: BackendUnavailableError) -> JSONResponse:
    return JSONResponse({"detail": exc.detail}, status_code=500)


install_sensitive_filter(
    "uvicorn", "uvicorn.access", "uvicorn.error", "", cookie_name=settings.token_cookie_name
)

app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Return a simple welcome message."""
    return {"message": settings.app_name}
