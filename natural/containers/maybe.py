"""
Maybe - zero or one value
=========================

Empty is absorbing: map and chain over it hand back the same empty marker
and never call the function.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import UnwrapError


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: typing.Final = _Missing()


class Maybe[T]:
    """
    Optional container.

    Maybe.of(x) always holds x, even when x is None; use from_optional
    to treat None as absence.

    Functor laws:
    - Identity: m.map(identity) == m
    - Composition: m.map(f).map(g) == m.map(compose(g, f))
    """

    __slots__ = ("_value",)

    def __init__(self, value: T | _Missing = _MISSING, /) -> None:
        self._value = value

    @staticmethod
    def of[V](value: V) -> Maybe[V]:
        """Lift a value into the has-value shape."""
        return Maybe(value)

    @staticmethod
    def nothing() -> Maybe[typing.Any]:
        """The empty marker."""
        return NOTHING

    @staticmethod
    def from_optional[V](value: V | None) -> Maybe[V]:
        """None becomes empty, anything else is lifted."""
        if value is None:
            return NOTHING
        return Maybe(value)

    @property
    def is_nothing(self) -> bool:
        return self._value is _MISSING

    @property
    def is_just(self) -> bool:
        return self._value is not _MISSING

    # Functor / Monad

    def map[U](self, f: Callable[[T], U], /) -> Maybe[U]:
        if self._value is _MISSING:
            return typing.cast(Maybe[U], self)
        return Maybe(f(typing.cast(T, self._value)))

    def chain[U](self, f: Callable[[T], Maybe[U]], /) -> Maybe[U]:
        if self._value is _MISSING:
            return typing.cast(Maybe[U], self)
        return f(typing.cast(T, self._value))

    # Extraction

    def get_or(self, default: T, /) -> T:
        if self._value is _MISSING:
            return default
        return typing.cast(T, self._value)

    def unwrap(self) -> T:
        """Return the value. Raises UnwrapError when empty."""
        if self._value is _MISSING:
            raise UnwrapError(self)
        return typing.cast(T, self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value == typing.cast(Maybe[typing.Any], other)._value

    def __hash__(self) -> int:
        return hash(("Maybe", self._value))

    def __repr__(self) -> str:
        if self._value is _MISSING:
            return "Nothing"
        return f"Just({self._value!r})"


NOTHING: typing.Final[Maybe[typing.Any]] = Maybe()

__all__ = ("Maybe", "NOTHING")
