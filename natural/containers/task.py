"""Task Monad

Deferred asynchronous computation combining:
- Lazy (nothing runs until awaited)
- Coro (asynchronous)
- Either[E, T] (rejected/resolved)

Built the same way as kungfu's LazyCoroResult, settling to Either."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import LazyCoroResult, Result
from kungfu.library.caching import acache

from .._types import Computation, Settled
from .either import Either, Left, Right

logger = logging.getLogger(__name__)


class Task[E, T]:
    """Lazy asynchronous Either.

    Each execution runs the wrapped computation once and settles exactly
    once, either rejected (Left) or resolved (Right).

    Monadic laws:
    - Left identity: Task.of(a).chain(f) ≡ f(a)
    - Right identity: m.chain(Task.of) ≡ m
    - Associativity: m.chain(f).chain(g) ≡ m.chain(x => f(x).chain(g))
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Settled[E, T]],
        /,
    ) -> None:
        """Create Task from a fn returning coroutine."""
        self._value = value

    @staticmethod
    def of[V](value: V) -> Task[typing.Never, V]:
        """Lift a value into an immediately-resolved task."""

        async def wrapper() -> Either[typing.Never, V]:
            return Right(value)

        return Task(wrapper)

    @staticmethod
    def rejected[Err](error: Err) -> Task[Err, typing.Never]:
        """Immediately-rejected task."""

        async def wrapper() -> Either[Err, typing.Never]:
            return Left(error)

        return Task(wrapper)

    @staticmethod
    def from_callbacks[Err, V](computation: Computation[Err, V]) -> Task[Err, V]:
        """
        Build a task from a (reject, resolve) style computation.

        The first settlement wins; later calls to either channel are ignored.
        The computation may settle synchronously, later from the event loop
        (e.g. via loop.call_soon) or from another thread.

        Example:
            def compute(reject, resolve):
                asyncio.get_running_loop().call_soon(resolve, 42)

            await Task.from_callbacks(compute)  # Right(42)
        """

        async def wrapper() -> Either[Err, V]:
            loop = asyncio.get_running_loop()
            settled: asyncio.Future[Either[Err, V]] = loop.create_future()

            def settle(outcome: Either[Err, V]) -> None:
                if settled.done():
                    logger.debug("Ignoring repeated settlement %r", outcome)
                    return
                settled.set_result(outcome)

            # settle always runs on the loop, whichever thread calls reject/resolve
            def reject(err: Err) -> None:
                loop.call_soon_threadsafe(settle, Left(err))

            def resolve(value: V) -> None:
                loop.call_soon_threadsafe(settle, Right(value))

            computation(reject, resolve)
            return await settled

        return Task(wrapper)

    @staticmethod
    def from_lazy_coro_result[V, Err](lazy: LazyCoroResult[V, Err]) -> Task[Err, V]:
        """Convert kungfu LazyCoroResult to Task."""

        async def wrapper() -> Either[Err, V]:
            result = await lazy
            return Either.from_result(result)

        return Task(wrapper)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Task[E, U]:
        """Functor fmap - apply function to resolved value."""

        async def wrapper() -> Either[E, U]:
            settled = await self()
            return settled.map(f)

        return Task(wrapper)

    def map_rejected[F](self, f: Callable[[E], F], /) -> Task[F, T]:
        """Map over rejection payload."""

        async def wrapper() -> Either[F, T]:
            settled = await self()
            return settled.map_left(f)

        return Task(wrapper)

    # Monad operations

    def chain[U](self, f: Callable[[T], Task[E, U]], /) -> Task[E, U]:
        """
        Monadic bind (>>=).

        - On resolve: subscribes to the task returned by f
        - On reject: short-circuit, f is never called
        """

        async def wrapper() -> Either[E, U]:
            settled = await self()
            match settled:
                case Right(value):
                    return await f(value)()
                case Left(err):
                    return Left(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return Task(wrapper)

    # Utility operations

    async def fork[R](
        self,
        on_reject: Callable[[E], R],
        on_resolve: Callable[[T], R],
    ) -> R:
        """Run the task and hand the outcome to exactly one of the callbacks."""
        settled = await self()
        return settled.fold(on_reject, on_resolve)

    def cache(self) -> Task[E, T]:
        """Cache the settlement - only compute once."""
        return Task(acache(self))

    def to_lazy_coro_result(self) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult."""

        async def wrapper() -> Result[T, E]:
            settled = await self()
            return settled.to_result()

        return LazyCoroResult(wrapper)

    # Protocol methods

    def __call__(self) -> Settled[E, T]:
        """Execute the lazy computation, returning coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, Either[E, T]]:
        """Allow direct await on the task."""
        return self().__await__()

    def __repr__(self) -> str:
        return f"Task({self._value!r})"


__all__ = ("Task",)
