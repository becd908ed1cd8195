"""
Identity - the plainest container
=================================
"""

from __future__ import annotations

import typing
from collections.abc import Callable


class Identity[T]:
    """
    Holds exactly one value and does nothing else.

    Useful as the source of natural transformations: anything that can
    hold a value can receive one from Identity.
    """

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @staticmethod
    def of[V](value: V) -> Identity[V]:
        """Lift a value."""
        return Identity(value)

    @property
    def value(self) -> T:
        return self._value

    def map[U](self, f: Callable[[T], U], /) -> Identity[U]:
        return Identity(f(self._value))

    def chain[U](self, f: Callable[[T], Identity[U]], /) -> Identity[U]:
        return f(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self._value == typing.cast(Identity[typing.Any], other)._value

    def __hash__(self) -> int:
        return hash(("Identity", self._value))

    def __repr__(self) -> str:
        return f"Identity({self._value!r})"


__all__ = ("Identity",)
