"""
Core type definitions for natural.

Shared capabilities and aliases used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

if typing.TYPE_CHECKING:
    from .containers.either import Either

# ============================================================================
# Capabilities
# ============================================================================


@typing.runtime_checkable
class Functor[T](typing.Protocol):
    """Anything with a lawful map."""

    def map[U](self, f: Callable[[T], U], /) -> Functor[U]: ...


@typing.runtime_checkable
class Monad[T](Functor[T], typing.Protocol):
    """Functor that can also flatten one level of nesting after mapping."""

    def chain[U](self, f: Callable[[T], typing.Any], /) -> Monad[U]: ...


# ============================================================================
# Type aliases
# ============================================================================

# Transform = plain unary function used with map
type Transform[A, B] = Callable[[A], B]

# NaturalTransformation = F[A] -> G[A], commutes with map
type NaturalTransformation[FA, GA] = Callable[[FA], GA]

# Settlement channels handed to callback-style task computations
type Reject[E] = Callable[[E], None]
type Resolve[T] = Callable[[T], None]
type Computation[E, T] = Callable[[Reject[E], Resolve[T]], None]

# Raw = what a Task produces when executed
type Settled[E, T] = Coroutine[typing.Any, typing.Any, Either[E, T]]

__all__ = (
    # Capabilities
    "Functor",
    "Monad",
    # Type aliases
    "Transform",
    "NaturalTransformation",
    "Reject",
    "Resolve",
    "Computation",
    "Settled",
)
