"""Order-preserving fail-fast gathering of independent tasks."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
import time
from typing import TypeVar

from .errors import EnrichmentDeadlineExceededError

T = TypeVar("T")


def enrichment_gather_fail_fast(
    tasks: Sequence[Callable[[], T]],
    max_concurrency: int = 1,
    deadline_seconds: float | None = None,
) -> list[T]:
    """Run independent tasks and return their results in input order.

    The first failing task in input-index order aborts the whole gather and
    its exception is re-raised unchanged; no partial results are returned.
    With `max_concurrency == 1` tasks run strictly one after another, in the
    calling thread when no deadline is set and on a single worker otherwise.

    Args:
        tasks: Zero-argument callables to run.
        max_concurrency: Maximum number of tasks in flight at once.
        deadline_seconds: Optional bound on the total gather duration.

    Returns:
        list[T]: One result per task, position-aligned with `tasks`.

    Raises:
        ValueError: Raised when concurrency or deadline values are invalid.
        EnrichmentDeadlineExceededError: Raised when the deadline expires first.
        Exception: Any exception raised by the first failing task.
    """

    if max_concurrency < 1:
        raise ValueError("max_concurrency must be >= 1")
    if deadline_seconds is not None and deadline_seconds <= 0:
        raise ValueError("deadline_seconds must be > 0")
    if not tasks:
        return []

    deadline_at = None if deadline_seconds is None else time.monotonic() + deadline_seconds
    if max_concurrency == 1 or len(tasks) == 1:
        return _gather_sequential(tasks=tasks, deadline_at=deadline_at, deadline_seconds=deadline_seconds)
    return _gather_concurrent(
        tasks=tasks,
        max_concurrency=max_concurrency,
        deadline_at=deadline_at,
        deadline_seconds=deadline_seconds,
    )


def _gather_sequential(
    tasks: Sequence[Callable[[], T]],
    deadline_at: float | None,
    deadline_seconds: float | None,
) -> list[T]:
    if deadline_at is None:
        return [task() for task in tasks]

    # One worker keeps lookups strictly ordered while letting the caller stop waiting.
    executor = ThreadPoolExecutor(max_workers=1)
    results: list[T] = []
    try:
        for task in tasks:
            if time.monotonic() >= deadline_at:
                raise EnrichmentDeadlineExceededError(deadline_seconds=float(deadline_seconds or 0.0))
            results.append(
                _await_before_deadline(
                    future=executor.submit(task),
                    deadline_at=deadline_at,
                    deadline_seconds=deadline_seconds,
                )
            )
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return results


def _gather_concurrent(
    tasks: Sequence[Callable[[], T]],
    max_concurrency: int,
    deadline_at: float | None,
    deadline_seconds: float | None,
) -> list[T]:
    executor = ThreadPoolExecutor(max_workers=min(max_concurrency, len(tasks)))
    futures: list[Future[T]] = [executor.submit(task) for task in tasks]
    results: list[T] = []
    try:
        # Collect in input order so the lowest-index failure always wins.
        for future in futures:
            results.append(
                _await_before_deadline(future=future, deadline_at=deadline_at, deadline_seconds=deadline_seconds)
            )
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return results


def _await_before_deadline(
    future: Future[T],
    deadline_at: float | None,
    deadline_seconds: float | None,
) -> T:
    """Wait for one task result, giving up once the gather deadline passes.

    Raises:
        EnrichmentDeadlineExceededError: Raised when the result is not ready in time.
        Exception: Any exception raised by the task.
    """

    remaining_seconds = None if deadline_at is None else max(deadline_at - time.monotonic(), 0.0)
    # Tasks may raise TimeoutError themselves, so completion is checked before reading the result.
    done, _ = wait([future], timeout=remaining_seconds)
    if not done:
        raise EnrichmentDeadlineExceededError(deadline_seconds=float(deadline_seconds or 0.0))
    return future.result()
