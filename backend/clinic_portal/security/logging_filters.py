"""Logging filters that keep credentials out of log output."""

from __future__ import annotations

import logging
import re

REDACTED = "**REDACTED**"

_CREDENTIAL_PATTERNS = (
    r"Authorization: Bearer\s+[\w\.-]+",
    r"access_token\"\s*:\s*\"[^\"]+\"",
    r"password\"\s*:\s*\"[^\"]+\"",
)


def build_pattern(cookie_name: str) -> re.Pattern[str]:
    """Match bearer headers, token and password JSON fields and the token cookie."""
    cookie = rf"{re.escape(cookie_name)}=[^;\s]+"
    return re.compile("|".join((*_CREDENTIAL_PATTERNS, cookie)), re.IGNORECASE)


class SensitiveFilter(logging.Filter):
    """Redact credentials from the message and its string arguments."""

    def __init__(self, cookie_name: str = "ppe_access_token") -> None:
        super().__init__()
        self.cookie_name = cookie_name
        self.pattern = build_pattern(cookie_name)

    def scrub(self, message: str) -> str:
        return self.pattern.sub(REDACTED, message)

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self.scrub(record.msg)
        # uvicorn's access log carries the request line in ``args``.
        if isinstance(record.args, tuple):
            record.args = tuple(
                self.scrub(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        return True


def scrub(message: str, cookie_name: str = "ppe_access_token") -> str:
    """Return ``message`` with credentials replaced."""
    return build_pattern(cookie_name).sub(REDACTED, message)


def install_sensitive_filter(*logger_names: str, cookie_name: str) -> None:
    """Attach one :class:`SensitiveFilter` for ``cookie_name`` to each named logger."""
    for name in logger_names:
        target = logging.getLogger(name)
        if not any(
            isinstance(flt, SensitiveFilter) and flt.cookie_name == cookie_name
            for flt in target.filters
        ):
            target.addFilter(SensitiveFilter(cookie_name))


__all__ = ["REDACTED", "SensitiveFilter", "build_pattern", "install_sensitive_filter", "scrub"]
