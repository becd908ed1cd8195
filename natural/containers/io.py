"""
IO - deferred synchronous effect
================================
"""

from __future__ import annotations

from collections.abc import Callable


class IO[T]:
    """
    Synchronous effect that has not happened yet.

    Building an IO (including map and chain) never runs anything. Only
    run() executes the thunk, and it does so every time it is called.
    """

    __slots__ = ("_thunk",)

    def __init__(self, thunk: Callable[[], T], /) -> None:
        """Create IO from a zero-arg callable."""
        self._thunk = thunk

    @staticmethod
    def of[V](value: V) -> IO[V]:
        """Lift a value into an effect that just returns it."""
        return IO(lambda: value)

    def map[U](self, f: Callable[[T], U], /) -> IO[U]:
        """Compose f after the deferred computation."""

        def thunk() -> U:
            return f(self.run())

        return IO(thunk)

    def chain[U](self, f: Callable[[T], IO[U]], /) -> IO[U]:
        """Run the inner IO produced by f as part of the same deferred step."""

        def thunk() -> U:
            return f(self.run()).run()

        return IO(thunk)

    def run(self) -> T:
        """Perform the effect and return its value."""
        return self._thunk()

    def __call__(self) -> T:
        return self.run()

    def __repr__(self) -> str:
        return f"IO({self._thunk!r})"


__all__ = ("IO",)
