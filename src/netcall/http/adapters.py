# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Test doubles for the HttpTransport protocol."""

from __future__ import annotations

import threading

from .models import HttpRequest, RawResponse, TransportError
from .transport import HttpTransport, TransportCallback


class StubTask:
    def __init__(self, request: HttpRequest):
        self.request = request
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class StubHttpTransport(HttpTransport):
    """
    Deterministic, programmable HttpTransport for tests.

    Responses are looked up by URL (query string included), then fall back to
    `default`. With `background=True` each answer is delivered from a fresh thread,
    which is how real transports behave.
    """

    def __init__(
        self,
        responses: dict[str, RawResponse] | None = None,
        *,
        default: RawResponse | None = None,
        background: bool = False,
    ):
        self._responses = responses or {}
        self.default = default
        self.background = background
        self.requests: list[HttpRequest] = []
        self.tasks: list[StubTask] = []
        self.threads: list[threading.Thread] = []
        self.closed = False

    @property
    def request(self) -> HttpRequest | None:
        """The most recently executed request."""
        return self.requests[-1] if self.requests else None

    def add(self, url: str, response: RawResponse) -> None:
        self._responses[url] = response

    def _answer(self, request: HttpRequest) -> RawResponse:
        if request.url in self._responses:
            return self._responses[request.url]
        if self.default is not None:
            return self.default
        return RawResponse(error=TransportError(message="No stubbed response configured"))

    def execute(self, request: HttpRequest, then: TransportCallback) -> StubTask:
        self.requests.append(request)
        task = StubTask(request)
        self.tasks.append(task)
        response = self._answer(request)
        if self.background:
            thread = threading.Thread(target=then, args=(response,), daemon=True)
            self.threads.append(thread)
            thread.start()
        else:
            then(response)
        return task

    def join(self, timeout: float | None = None) -> None:
        for thread in self.threads:
            thread.join(timeout)

    def close(self) -> None:
        self.closed = True
