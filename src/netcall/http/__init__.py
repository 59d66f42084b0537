# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubHttpTransport, StubTask
from .compiler import build_url, compile_request
from .httpx_transport import HttpxTask, HttpxTransport
from .models import Headers, HttpRequest, RawResponse, TransportError
from .transport import Cancellable, HttpTransport, TransportCallback, create_default_transport

__all__ = [
    "Cancellable",
    "Headers",
    "HttpRequest",
    "HttpTransport",
    "HttpxTask",
    "HttpxTransport",
    "RawResponse",
    "StubHttpTransport",
    "StubTask",
    "TransportCallback",
    "TransportError",
    "build_url",
    "compile_request",
    "create_default_transport",
]
