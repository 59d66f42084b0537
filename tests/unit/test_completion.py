# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
import gc
import threading

import pytest

from netcall.completion import (
    AsyncioExecutor,
    Completion,
    CompletionLeakedWarning,
    ImmediateExecutor,
    ThreadQueueExecutor,
)
from netcall.errors import InvariantViolation

requires_debug = pytest.mark.skipif(not __debug__, reason="invariant checks are disabled under -O")


def test_immediate_executor_fires_synchronously():
    results = []
    completion = Completion(results.append, ImmediateExecutor())
    completion.complete("done")
    assert results == ["done"]
    assert completion.called is True


def test_complete_without_result_passes_none():
    results = []
    Completion(results.append, ImmediateExecutor()).complete()
    assert results == [None]


@requires_debug
def test_second_completion_is_a_violation():
    results = []
    completion = Completion(results.append, ImmediateExecutor())
    completion.complete(1)
    with pytest.raises(InvariantViolation, match="already been called"):
        completion.complete(2)
    assert results == [1]


@requires_debug
def test_concurrent_completions_fire_once():
    results = []
    violations = []
    completion = Completion(results.append, ImmediateExecutor())
    start = threading.Barrier(8)

    def worker(value):
        start.wait()
        try:
            completion.complete(value)
        except InvariantViolation:
            violations.append(value)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 1
    assert len(violations) == 7


@requires_debug
def test_leaked_completion_warns():
    completion = Completion(lambda _result: None, ImmediateExecutor())
    with pytest.warns(CompletionLeakedWarning):
        del completion
        gc.collect()


def test_force_async_defers_to_the_queue():
    executor = ThreadQueueExecutor()
    results = []
    completion = Completion(results.append, executor)
    completion.complete("later", force_async=True)
    assert results == []
    assert executor.run_pending() == 1
    assert results == ["later"]


def test_results_from_worker_threads_run_on_owner_thread():
    executor = ThreadQueueExecutor()
    seen = []
    completion = Completion(lambda result: seen.append((result, threading.current_thread())), executor)

    worker = threading.Thread(target=completion.complete, args=("from worker",))
    worker.start()
    worker.join()

    assert seen == []
    assert executor.run_until(lambda: bool(seen), timeout=2) is True
    assert seen == [("from worker", threading.current_thread())]


def test_run_until_times_out():
    executor = ThreadQueueExecutor()
    assert executor.run_until(lambda: False, timeout=0.05) is False


@requires_debug
def test_pumping_from_a_foreign_thread_is_a_violation():
    executor = ThreadQueueExecutor()
    errors = []

    def pump():
        try:
            executor.run_pending()
        except InvariantViolation as exc:
            errors.append(exc)

    thread = threading.Thread(target=pump)
    thread.start()
    thread.join()
    assert len(errors) == 1


def test_asyncio_executor_delivers_on_the_loop():
    async def main():
        loop = asyncio.get_running_loop()
        executor = AsyncioExecutor()
        assert executor.is_current() is True
        future = loop.create_future()

        def deliver(result):
            assert asyncio.get_running_loop() is loop
            future.set_result(result)

        completion = Completion(deliver, executor)
        worker = threading.Thread(target=completion.complete, args=("async",))
        worker.start()
        result = await asyncio.wait_for(future, timeout=2)
        worker.join()
        return result

    assert asyncio.run(main()) == "async"


def test_asyncio_executor_is_not_current_off_loop():
    loop = asyncio.new_event_loop()
    try:
        assert AsyncioExecutor(loop).is_current() is False
    finally:
        loop.close()
