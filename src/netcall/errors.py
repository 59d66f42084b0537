# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class NetcallError(Exception):
    """Base class for exceptions raised inside netcall."""


class InvalidURLError(NetcallError):
    """The endpoint and session configuration do not form a valid URL."""

    def __init__(self, message: str = "wrong url"):
        super().__init__(message)
        self.message = message


class EncodingError(NetcallError):
    """A request payload could not be serialized."""


class DecodingError(NetcallError):
    """A response payload could not be decoded into the requested type."""


class InvariantViolation(AssertionError):
    """An internal invariant was broken (double completion, leaked completion, misuse)."""


def ensure(condition: bool, message: str) -> None:
    """
    Raise InvariantViolation when `condition` is false.

    Only active when assertions are enabled; under `python -O` this is a no-op and
    callers must tolerate the broken state.
    """
    if __debug__ and not condition:
        raise InvariantViolation(message)


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    SSL_ERROR = "SSL_ERROR"
    CANCELLED = "CANCELLED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    # httpx wraps the underlying OSError; look through it for DNS/TLS failures first.
    cause = exc.__cause__ or exc.__context__
    if isinstance(exc, (socket.gaierror, socket.herror)) or isinstance(cause, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)) or isinstance(
        cause, (ssl_module.SSLError, ssl_module.CertificateError)
    ):
        return ErrorCategory.SSL_ERROR

    if isinstance(
        exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)
    ):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "DecodingError",
    "EncodingError",
    "ErrorCategory",
    "InvalidURLError",
    "InvariantViolation",
    "NetcallError",
    "categorize_exception",
    "ensure",
]
