"""Conversions into Task

Anything synchronous can become a Task. The reverse (Task -> IO) is not
offered: a Task cannot produce its value now without blocking."""

from __future__ import annotations

import logging
import typing

from kungfu import LazyCoroResult

from ..containers.either import Either
from ..containers.io import IO
from ..containers.maybe import Maybe
from ..containers.task import Task

logger = logging.getLogger(__name__)


def io_to_task[T](io: IO[T]) -> Task[typing.Never, T]:
    """
    Run the IO now and resolve with its result.

    NOTE: The effect happens at conversion time, once. Executing the
          resulting task any number of times does not repeat it.
    """
    logger.debug("Running %r eagerly for io_to_task", io)
    value = io.run()
    return Task.of(value)


def either_to_task[E, T](e: Either[E, T]) -> Task[E, T]:
    """Left -> rejected, Right -> resolved."""

    async def settled() -> Either[E, T]:
        return e

    return Task(settled)


def maybe_to_task[T](m: Maybe[T]) -> Task[None, T]:
    """Empty -> rejected with None, has-value -> resolved."""
    if m.is_nothing:
        return Task.rejected(None)
    return Task.of(m.unwrap())


def lazy_coro_result_to_task[T, E](lazy: LazyCoroResult[T, E]) -> Task[E, T]:
    """kungfu LazyCoroResult -> Task. Inverse of task_to_lazy_coro_result."""
    return Task.from_lazy_coro_result(lazy)


def task_to_lazy_coro_result[E, T](task: Task[E, T]) -> LazyCoroResult[T, E]:
    """Task -> kungfu LazyCoroResult. Inverse of lazy_coro_result_to_task."""
    return task.to_lazy_coro_result()


__all__ = (
    "io_to_task",
    "either_to_task",
    "maybe_to_task",
    "lazy_coro_result_to_task",
    "task_to_lazy_coro_result",
)
