from __future__ import annotations

from ..containers.identity import Identity
from ..containers.io import IO


def identity_to_io[T](x: Identity[T]) -> IO[T]:
    """Wrap the held value in an effect that returns it."""
    return IO.of(x.value)


__all__ = ("identity_to_io",)
