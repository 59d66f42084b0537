# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory."""

from collections.abc import Callable
from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, RawResponse

TransportCallback = Callable[[RawResponse], None]


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class HttpTransport(Protocol):
    """
    Executes compiled requests.

    `then` must be called exactly once per `execute`, from any thread, including when
    the returned task is cancelled.
    """

    def execute(self, request: HttpRequest, then: TransportCallback) -> Cancellable: ...

    def close(self) -> None:  # pragma: no cover - optional for stubs
        ...


def create_default_transport(settings: HttpSettings | None = None) -> HttpTransport:
    """Factory for the default httpx-backed transport."""
    from .httpx_transport import HttpxTransport

    return HttpxTransport(settings or load_http_settings())
