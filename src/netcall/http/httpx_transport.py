# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpTransport implementation."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import httpx

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, RawResponse, TransportError
from .transport import HttpTransport, TransportCallback

logger = logging.getLogger(__name__)


class HttpxTask:
    """Handle for one in-flight request; cancellation is checked between body chunks."""

    def __init__(self, request: HttpRequest):
        self.request = request
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()


class HttpxTransport(HttpTransport):
    """Runs a synchronous httpx client on a small worker pool."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )
        self._pool = ThreadPoolExecutor(
            max_workers=max(1, self.settings.max_workers),
            thread_name_prefix="netcall-http",
        )

    def execute(self, request: HttpRequest, then: TransportCallback) -> HttpxTask:
        task = HttpxTask(request)
        try:
            self._pool.submit(self._run, task, then)
        except RuntimeError as exc:
            # Pool already shut down; report it like any other transport failure.
            logger.debug("%s %s not scheduled: %s", request.method, request.url, exc)
            then(RawResponse(error=TransportError.from_exception(exc)))
        return task

    def _run(self, task: HttpxTask, then: TransportCallback) -> None:
        try:
            response = self._send(task)
        except Exception as exc:  # noqa: BLE001
            logger.debug("%s %s failed: %s", task.request.method, task.request.url, exc)
            response = RawResponse(error=TransportError.from_exception(exc))
        then(response)

    def _send(self, task: HttpxTask) -> RawResponse:
        if task.cancelled:
            return RawResponse(error=TransportError.cancelled())

        request = task.request
        headers = dict(request.headers)
        headers.setdefault("User-Agent", self.settings.user_agent)
        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = 16 * 1024 * 1024

        with self._client.stream(
            request.method,
            request.url,
            headers=headers,
            content=request.body,
        ) as resp:
            content = bytearray()
            for chunk in resp.iter_bytes():
                if task.cancelled:
                    return RawResponse(error=TransportError.cancelled())
                if not chunk:
                    continue
                if len(content) + len(chunk) > max_body_bytes:
                    return RawResponse(
                        error=TransportError(
                            message=f"response body exceeds {max_body_bytes} bytes",
                            error_type="BodyTooLarge",
                        )
                    )
                content.extend(chunk)

        if task.cancelled:
            return RawResponse(error=TransportError.cancelled())
        return RawResponse(
            content=bytes(content) if content else None,
            status_code=resp.status_code,
            headers=dict(resp.headers),
        )

    def close(self) -> None:
        self._pool.shutdown(wait=True)
        self._client.close()
