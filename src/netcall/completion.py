# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Exactly-once completion delivery.

`Completion` wraps a callback and guarantees it runs once, on the context owned by an
`Executor`, no matter which thread produced the result:

    completion = Completion(then, executor)
    ...
    if failed:
        completion.complete(Failure(...))
        return
    completion.complete(Success(data))

A second `complete()` or a guard collected before it fired is a programming error.
Both are reported loudly while assertions are enabled and ignored under `python -O`.
"""

from __future__ import annotations

import asyncio
import logging
import queue
import threading
import time
import warnings
from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from .errors import ensure

logger = logging.getLogger(__name__)

R = TypeVar("R")


class CompletionLeakedWarning(ResourceWarning):
    """A Completion was garbage collected without ever firing."""


class Executor(Protocol):
    """The designated context completions are delivered on."""

    def is_current(self) -> bool: ...

    def submit(self, fn: Callable[[], None]) -> None: ...


class ImmediateExecutor(Executor):
    """Every thread counts as the designated one; work runs inline."""

    def is_current(self) -> bool:
        return True

    def submit(self, fn: Callable[[], None]) -> None:
        fn()


class ThreadQueueExecutor(Executor):
    """
    Executor owned by one thread, like a UI main loop.

    Other threads enqueue work; the owner drains it with `run_pending()` or
    `run_until()`.
    """

    def __init__(self, owner: threading.Thread | None = None):
        self.owner = owner or threading.current_thread()
        self._queue: queue.SimpleQueue[Callable[[], None]] = queue.SimpleQueue()

    def is_current(self) -> bool:
        return threading.current_thread() is self.owner

    def submit(self, fn: Callable[[], None]) -> None:
        self._queue.put(fn)

    def run_pending(self) -> int:
        """Run everything queued so far on the owner thread; returns the count run."""
        ensure(self.is_current(), "ThreadQueueExecutor pumped from a foreign thread")
        ran = 0
        while True:
            try:
                fn = self._queue.get_nowait()
            except queue.Empty:
                return ran
            fn()
            ran += 1

    def run_until(self, predicate: Callable[[], bool], timeout: float | None = None) -> bool:
        """Pump the queue until `predicate()` holds or `timeout` seconds pass."""
        ensure(self.is_current(), "ThreadQueueExecutor pumped from a foreign thread")
        deadline = None if timeout is None else time.monotonic() + timeout
        while not predicate():
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                return False
            try:
                fn = self._queue.get(timeout=remaining)
            except queue.Empty:
                return predicate()
            fn()
        return True


class AsyncioExecutor(Executor):
    """Delivers completions on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self.loop = loop or asyncio.get_running_loop()

    def is_current(self) -> bool:
        try:
            return asyncio.get_running_loop() is self.loop
        except RuntimeError:
            return False

    def submit(self, fn: Callable[[], None]) -> None:
        self.loop.call_soon_threadsafe(fn)


class Completion(Generic[R]):
    """Calls a completion handler exactly once on the executor's context."""

    def __init__(self, completion: Callable[[R], None], executor: Executor):
        self._completion = completion
        self._executor = executor
        self._lock = threading.Lock()
        self._called = False

    @property
    def called(self) -> bool:
        with self._lock:
            return self._called

    def complete(self, result: R = None, *, force_async: bool = False) -> None:  # type: ignore[assignment]
        if not force_async and self._executor.is_current():
            self._fire(result)
        else:
            self._executor.submit(lambda: self._fire(result))

    def _fire(self, result: R) -> None:
        with self._lock:
            already_called = self._called
            self._called = True
        ensure(not already_called, "completion has already been called")
        if already_called:
            return
        self._completion(result)

    def __del__(self) -> None:
        if __debug__ and not getattr(self, "_called", True):
            logger.error("completion leaked: %r was never called", self._completion)
            warnings.warn("completion leaked", CompletionLeakedWarning, stacklevel=2)


__all__ = [
    "AsyncioExecutor",
    "Completion",
    "CompletionLeakedWarning",
    "Executor",
    "ImmediateExecutor",
    "ThreadQueueExecutor",
]
