# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Session: compile, send, interpret, complete."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from .completion import Completion, Executor, ThreadQueueExecutor
from .config import HttpSettings, SessionConfig
from .endpoint import HttpEndpoint
from .errors import InvalidURLError
from .http.compiler import compile_request
from .http.models import RawResponse
from .http.transport import Cancellable, HttpTransport, create_default_transport
from .response import Failure, HttpError, Outcome, interpret

logger = logging.getLogger(__name__)


class RequestToken:
    """Cancellation handle for one in-flight request."""

    def __init__(self, task: Cancellable):
        self._task = task

    def cancel(self) -> None:
        """
        Ask the transport to abort.

        Advisory only: a result that is already on its way is still delivered.
        """
        self._task.cancel()


class HttpSession:
    """
    Sends endpoints to one host and reports each result exactly once.

    Holds no per-call state, so one instance can serve any number of concurrent
    requests. Completions run on `executor`, which defaults to a ThreadQueueExecutor
    owned by the constructing thread; that thread must pump it.
    """

    def __init__(
        self,
        config: SessionConfig,
        *,
        transport: HttpTransport | None = None,
        executor: Executor | None = None,
        settings: HttpSettings | None = None,
    ):
        self.config = config
        self._owns_transport = transport is None
        self.transport = transport or create_default_transport(settings)
        self.executor = executor or ThreadQueueExecutor()

    def request(self, endpoint: HttpEndpoint, then: Callable[[Outcome], None]) -> RequestToken | None:
        """
        Send `endpoint` and deliver its Outcome to `then`.

        Returns None when the request could not be compiled or the transport refused
        to start it; `then` has already been given a client error in that case.
        """
        completion: Completion[Outcome] = Completion(then, self.executor)

        try:
            request = compile_request(endpoint, self.config)
        except InvalidURLError as exc:
            logger.debug("cannot build url for %r: %s", endpoint.path, exc)
            completion.complete(Failure(HttpError.client(exc.message)))
            return None

        responded = False

        def on_response(raw: RawResponse) -> None:
            nonlocal responded
            responded = True
            completion.complete(interpret(raw))

        try:
            task = self.transport.execute(request, on_response)
        except Exception as exc:  # noqa: BLE001
            logger.warning("transport failed to start %s %s: %s", request.method, request.url, exc)
            if not responded:
                completion.complete(Failure(HttpError.client(str(exc) or type(exc).__name__)))
            return None
        return RequestToken(task)

    def close(self) -> None:
        if self._owns_transport:
            with suppress(Exception):
                self.transport.close()

    def __enter__(self) -> HttpSession:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["HttpSession", "RequestToken"]
