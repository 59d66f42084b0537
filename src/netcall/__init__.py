# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
netcall package entrypoint.

Callers describe API calls as endpoint values, a session compiles them into wire
requests for an injectable transport, and every call reports one Outcome on a
designated executor.
"""

from .completion import (
    AsyncioExecutor,
    Completion,
    CompletionLeakedWarning,
    Executor,
    ImmediateExecutor,
    ThreadQueueExecutor,
)
from .config import BasicAuth, HttpScheme, HttpSettings, SessionConfig, load_http_settings, load_session_config
from .endpoint import Endpoint, HttpEndpoint, HttpMethod, JsonBody, RawBody, TextBody
from .errors import DecodingError, EncodingError, InvalidURLError, InvariantViolation, NetcallError
from .http import (
    HttpRequest,
    HttpTransport,
    HttpxTransport,
    RawResponse,
    StubHttpTransport,
    TransportError,
    compile_request,
    create_default_transport,
)
from .log import setup_logging
from .response import ErrorKind, Failure, HttpError, Outcome, Success, interpret
from .session import HttpSession, RequestToken
from .version import __version__

__all__ = [
    "AsyncioExecutor",
    "BasicAuth",
    "Completion",
    "CompletionLeakedWarning",
    "DecodingError",
    "EncodingError",
    "Endpoint",
    "ErrorKind",
    "Executor",
    "Failure",
    "HttpEndpoint",
    "HttpError",
    "HttpMethod",
    "HttpRequest",
    "HttpScheme",
    "HttpSession",
    "HttpSettings",
    "HttpTransport",
    "HttpxTransport",
    "ImmediateExecutor",
    "InvalidURLError",
    "InvariantViolation",
    "JsonBody",
    "NetcallError",
    "Outcome",
    "RawBody",
    "RawResponse",
    "RequestToken",
    "SessionConfig",
    "StubHttpTransport",
    "Success",
    "TextBody",
    "ThreadQueueExecutor",
    "TransportError",
    "compile_request",
    "create_default_transport",
    "interpret",
    "load_http_settings",
    "load_session_config",
    "setup_logging",
    "__version__",
]
