"""Application configuration via pydantic settings."""

from functools import lru_cache
from pathlib import Path

from typing import Annotated, Any

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application configuration."""

    app_env: str = Field("local", alias="APP_ENV")
    app_name: str = Field("Clinic Portal", alias="APP_NAME")
    api_prefix: str = "/api"

    backend_api_url: str = Field("http://localhost:8000", alias="BACKEND_API_URL")
    backend_timeout_seconds: float = Field(10.0, alias="BACKEND_TIMEOUT_SECONDS")

    token_cookie_name: str = Field("ppe_access_token", alias="TOKEN_COOKIE_NAME")
    token_max_age_seconds: int = Field(60 * 60 * 24, alias="TOKEN_MAX_AGE_SECONDS")
    cookie_secure: bool | None = Field(default=None, alias="COOKIE_SECURE")

    clinic_timezone: str = Field("Europe/Lisbon", alias="CLINIC_TIMEZONE")

    cors_allowlist: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000"], alias="CORS_ALLOWLIST"
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[3] / ".env",
        case_sensitive=False,
    )

    def model_post_init(self, __context: Any) -> None:
        """Only send the token cookie over HTTPS in production unless overridden."""

        if self.cookie_secure is None:
            object.__setattr__(self, "cookie_secure", self.app_env == "production")

    @field_validator("backend_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("cors_allowlist", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()  # type: ignore[call-arg]
