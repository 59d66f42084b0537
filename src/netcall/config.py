# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for netcall."""

import base64
import os
from dataclasses import dataclass
from enum import Enum

from .version import __version__

DEFAULT_USER_AGENT = f"netcall/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_int_env(name: str, default: int | None) -> int | None:
    try:
        value = os.getenv(name)
        if value is None or not value.strip():
            return default
        return int(value)
    except ValueError:
        return default


class HttpScheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"


@dataclass(frozen=True)
class BasicAuth:
    """HTTP basic authentication credentials."""

    username: str
    password: str

    @property
    def authorization_header(self) -> str:
        token = base64.b64encode(f"{self.username}:{self.password}".encode("utf-8")).decode("ascii")
        return f"Basic {token}"


@dataclass(frozen=True)
class SessionConfig:
    """
    Where and as whom a session talks.

    Immutable so a single instance can be shared by concurrent requests.
    """

    host: str
    port: int | None = None
    scheme: HttpScheme = HttpScheme.HTTPS
    authentication: BasicAuth | None = None

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Create a session config from environment variables (evaluated at call time)."""
        try:
            scheme = HttpScheme(os.getenv("NETCALL_SCHEME", cls.scheme.value).strip().lower())
        except ValueError:
            scheme = cls.scheme
        username = os.getenv("NETCALL_USERNAME")
        authentication = None
        if username:
            authentication = BasicAuth(username, os.getenv("NETCALL_PASSWORD", ""))
        return cls(
            host=os.getenv("NETCALL_HOST", "localhost"),
            port=_optional_int_env("NETCALL_PORT", cls.port),
            scheme=scheme,
            authentication=authentication,
        )


@dataclass
class HttpSettings:
    """Defaults for the httpx-backed transport."""

    timeout: float = 10.0
    verify_ssl: bool = True
    allow_redirects: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    max_workers: int = 4
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_workers = _int_env("NETCALL_HTTP_MAX_WORKERS", cls.max_workers)
        if max_workers <= 0:
            max_workers = cls.max_workers
        max_body_bytes = _int_env("NETCALL_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            timeout=_float_env("NETCALL_HTTP_TIMEOUT", cls.timeout),
            verify_ssl=_bool_env("NETCALL_HTTP_VERIFY_SSL", cls.verify_ssl),
            allow_redirects=_bool_env("NETCALL_HTTP_REDIRECTS", cls.allow_redirects),
            user_agent=os.getenv("NETCALL_USER_AGENT", cls.user_agent),
            max_workers=max_workers,
            max_body_bytes=max_body_bytes,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_session_config() -> SessionConfig:
    """Load a session config from environment with sensible defaults."""
    return SessionConfig.from_env()
