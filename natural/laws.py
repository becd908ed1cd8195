"""Law checkers

Functor and naturality laws as plain predicates. Value containers
(Identity, Maybe, Either, lists via a mapping function) are compared
with ==; IO is compared on run(); Task on its settled Either."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._helpers import compose, identity
from ._types import Functor, NaturalTransformation
from .containers.io import IO
from .containers.task import Task


def _observe(fa: typing.Any) -> typing.Any:
    if isinstance(fa, IO):
        return fa.run()
    return fa


def functor_identity_holds[T](fa: Functor[T]) -> bool:
    """fa.map(identity) == fa"""
    return _observe(fa.map(identity)) == _observe(fa)


def functor_composition_holds[A, B, C](
    fa: Functor[A],
    f: Callable[[A], B],
    g: Callable[[B], C],
) -> bool:
    """fa.map(f).map(g) == fa.map(compose(g, f))"""
    return _observe(fa.map(f).map(g)) == _observe(fa.map(compose(g, f)))


def naturality_holds[A, B](
    nt: NaturalTransformation[typing.Any, typing.Any],
    f: Callable[[A], B],
    fa: typing.Any,
    *,
    fmap_source: Callable[[Callable[[A], B], typing.Any], typing.Any] | None = None,
) -> bool:
    """
    nt(fa.map(f)) == nt(fa).map(f)

    fmap_source maps f over a source without a map method (e.g. a list).
    """
    if fmap_source is None:
        mapped_then_converted = nt(fa.map(f))
    else:
        mapped_then_converted = nt(fmap_source(f, fa))
    converted_then_mapped = nt(fa).map(f)
    return _observe(mapped_then_converted) == _observe(converted_then_mapped)


async def task_functor_identity_holds[E, T](task: Task[E, T]) -> bool:
    """Identity law for Task, compared on settlement."""
    return await task.map(identity) == await task


async def task_functor_composition_holds[E, A, B, C](
    task: Task[E, A],
    f: Callable[[A], B],
    g: Callable[[B], C],
) -> bool:
    """Composition law for Task, compared on settlement."""
    return await task.map(f).map(g) == await task.map(compose(g, f))


async def task_naturality_holds[A, B](
    nt: NaturalTransformation[typing.Any, Task[typing.Any, typing.Any]],
    f: Callable[[A], B],
    fa: typing.Any,
) -> bool:
    """nt(fa.map(f)) and nt(fa).map(f) settle to the same Either."""
    return await nt(fa.map(f)) == await nt(fa).map(f)


def list_fmap[A, B](f: Callable[[A], B], items: typing.Any) -> list[B]:
    """Map over a plain sequence, for use as fmap_source."""
    return [f(x) for x in items]


__all__ = (
    "functor_identity_holds",
    "functor_composition_holds",
    "naturality_holds",
    "task_functor_identity_holds",
    "task_functor_composition_holds",
    "task_naturality_holds",
    "list_fmap",
)
