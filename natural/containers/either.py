"""
Either - failure or success
===========================

Left carries a failure payload, Right a success payload. The tag is fixed
at construction; map and chain only ever touch Right.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import UnwrapError


class Either[E, T](abc.ABC):
    """
    Disjoint container. Construct through Left, Right, Either.of or Either.left.

    Monadic laws:
    - Left identity: Either.of(a).chain(f) == f(a)
    - Right identity: m.chain(Either.of) == m
    - Associativity: m.chain(f).chain(g) == m.chain(lambda x: f(x).chain(g))
    """

    __slots__ = ("_value",)

    _value: typing.Any

    @staticmethod
    def of[V](value: V) -> Either[typing.Any, V]:
        """Lift a value into the success branch."""
        return Right(value)

    @staticmethod
    def left[Err](error: Err) -> Either[Err, typing.Any]:
        return Left(error)

    @staticmethod
    def from_result[V, Err](result: Result[V, Err]) -> Either[Err, V]:
        """Convert kungfu Result: Ok -> Right, Error -> Left."""
        match result:
            case Ok(value):
                return Right(value)
            case Error(err):
                return Left(err)
            case _ as unreachable:
                assert_never(unreachable)

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    @abc.abstractmethod
    def map[U](self, f: Callable[[T], U], /) -> Either[E, U]:
        ...

    @abc.abstractmethod
    def map_left[F](self, f: Callable[[E], F], /) -> Either[F, T]:
        ...

    @abc.abstractmethod
    def chain[U](self, f: Callable[[T], Either[E, U]], /) -> Either[E, U]:
        ...

    @abc.abstractmethod
    def fold[R](self, on_left: Callable[[E], R], on_right: Callable[[T], R], /) -> R:
        """Reduce both branches to a common type."""
        ...

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the success payload. Raises UnwrapError on Left."""
        ...

    def to_result(self) -> Result[T, E]:
        """Convert to kungfu Result: Right -> Ok, Left -> Error."""
        return self.fold(Error, Ok)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._value == typing.cast(Either[typing.Any, typing.Any], other)._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class Left[E](Either[E, typing.Any]):
    """Failure branch."""

    __slots__ = ()
    __match_args__ = ("value",)

    def __init__(self, value: E, /) -> None:
        self._value = value

    @property
    def value(self) -> E:
        return self._value

    def map[U](self, f: Callable[[typing.Any], U], /) -> Either[E, U]:
        return self

    def map_left[F](self, f: Callable[[E], F], /) -> Either[F, typing.Any]:
        return Left(f(self._value))

    def chain[U](self, f: Callable[[typing.Any], Either[E, U]], /) -> Either[E, U]:
        return self

    def fold[R](self, on_left: Callable[[E], R], on_right: Callable[[typing.Any], R], /) -> R:
        return on_left(self._value)

    def unwrap(self) -> typing.NoReturn:
        raise UnwrapError(self)


class Right[T](Either[typing.Any, T]):
    """Success branch."""

    __slots__ = ()
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def map[U](self, f: Callable[[T], U], /) -> Either[typing.Any, U]:
        return Right(f(self._value))

    def map_left[F](self, f: Callable[[typing.Any], F], /) -> Either[F, T]:
        return self

    def chain[U](self, f: Callable[[T], Either[typing.Any, U]], /) -> Either[typing.Any, U]:
        return f(self._value)

    def fold[R](self, on_left: Callable[[typing.Any], R], on_right: Callable[[T], R], /) -> R:
        return on_right(self._value)

    def unwrap(self) -> T:
        return self._value


def either[E, T, R](
    on_left: Callable[[E], R],
    on_right: Callable[[T], R],
) -> Callable[[Either[E, T]], R]:
    """
    Curried fold, usable as a pipeline stage.

    Example:
        describe = either(lambda e: f"error: {e}", lambda v: f"ok: {v}")
        describe(Left("boom"))  # "error: boom"
    """

    def stage(e: Either[E, T]) -> R:
        return e.fold(on_left, on_right)

    return stage


__all__ = ("Either", "Left", "Right", "either")
