# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire-level request and raw transport outcome models."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import ErrorCategory, categorize_exception

Headers = dict[str, str]


@dataclass(frozen=True)
class HttpRequest:
    """Compiled request handed to an HttpTransport."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class TransportError:
    """Transport-level failure (timeout, DNS, refused connection, cancellation)."""

    message: str
    error_type: str | None = None
    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR

    @classmethod
    def from_exception(cls, exc: BaseException) -> TransportError:
        return cls(
            message=str(exc) or type(exc).__name__,
            error_type=type(exc).__name__,
            category=categorize_exception(exc),
        )

    @classmethod
    def cancelled(cls) -> TransportError:
        return cls(message="cancelled", error_type="Cancelled", category=ErrorCategory.CANCELLED)


@dataclass(frozen=True)
class RawResponse:
    """
    What a transport reports back for one request.

    `status_code` is None when the transport failed or produced something that is not
    an HTTP response; `content` is None when no body bytes arrived.
    """

    content: bytes | None = None
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    error: TransportError | None = None


__all__ = ["Headers", "HttpRequest", "RawResponse", "TransportError"]
