from __future__ import annotations

import typing


class UnwrapError(ValueError):
    """Tried to pull a value out of an empty or failed container."""

    container: typing.Any

    def __init__(self, container: typing.Any) -> None:
        self.container = container
        super().__init__(f"Cannot unwrap {container!r}")


__all__ = ("UnwrapError",)
