"""Function helpers for point-free pipelines.

compose/pipe glue unary stages together; fmap/chain turn container
methods into stages so conversions can sit between them."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Mapping
from functools import reduce

from ._types import Functor, Monad, Transform


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def compose(*fns: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """
    Right-to-left composition of unary functions.

    compose(f, g, h)(x) == f(g(h(x)))

    Example:
        shout = compose(str.upper, str.strip)
        shout("  hi ")  # "HI"

    NOTE: compose() with no arguments is identity, so grouping never matters:
          compose(f, compose(g, h)) == compose(compose(f, g), h)
    """

    def composed(x: typing.Any) -> typing.Any:
        return reduce(lambda acc, fn: fn(acc), reversed(fns), x)

    return composed


def pipe(*fns: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """Left-to-right mirror of compose: pipe(h, g, f) == compose(f, g, h)."""
    return compose(*reversed(fns))


def fmap[T, U](f: Transform[T, U]) -> Callable[[Functor[T]], Functor[U]]:
    """Point-free map: fmap(f)(fa) == fa.map(f)."""

    def stage(fa: Functor[T]) -> Functor[U]:
        return fa.map(f)

    return stage


def chain[T, U](f: Callable[[T], typing.Any]) -> Callable[[Monad[T]], Monad[U]]:
    """Point-free chain: chain(f)(ma) == ma.chain(f)."""

    def stage(ma: Monad[T]) -> Monad[U]:
        return ma.chain(f)

    return stage


def sort_by[T](key: Callable[[T], typing.Any]) -> Callable[[Iterable[T]], list[T]]:
    """Unary sorting stage. Stable, returns a new list."""

    def stage(items: Iterable[T]) -> list[T]:
        return sorted(items, key=key)

    return stage


def prop(name: str) -> Callable[[typing.Any], typing.Any]:
    """Read an attribute, or a key when given a mapping."""

    def stage(obj: typing.Any) -> typing.Any:
        if isinstance(obj, Mapping):
            return obj[name]
        return getattr(obj, name)

    return stage


__all__ = (
    "identity",
    "compose",
    "pipe",
    "fmap",
    "chain",
    "sort_by",
    "prop",
)
