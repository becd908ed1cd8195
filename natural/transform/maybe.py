"""Conversions into and out of Maybe

Every function here is a natural transformation: for any f,
nt(fa.map(f)) == nt(fa).map(f)."""

from __future__ import annotations

import typing
from collections.abc import Sequence

from ..containers.either import Either
from ..containers.identity import Identity
from ..containers.maybe import Maybe


def either_to_maybe[E, T](e: Either[E, T]) -> Maybe[T]:
    """
    Left -> empty, Right -> has-value.

    Lossy: the failure payload is dropped.
    """
    return e.fold(lambda _: Maybe.nothing(), Maybe.of)


def identity_to_maybe[T](x: Identity[T]) -> Maybe[T]:
    """Identity always has a value, so the result is never empty."""
    return Maybe.of(x.value)


def sequence_to_maybe[T](items: Sequence[T]) -> Maybe[T]:
    """
    First element, if any.

    Lossy for sequences longer than one: everything after the head is dropped,
    so maybe_to_list(sequence_to_maybe(xs)) == xs only when len(xs) <= 1.
    """
    if not items:
        return Maybe.nothing()
    return Maybe.of(items[0])


def maybe_to_list[T](m: Maybe[T]) -> list[T]:
    """Empty -> [], has-value -> [value]."""
    if m.is_nothing:
        return []
    return [m.unwrap()]


# Chapter name for the head conversion
array_to_maybe: typing.Final = sequence_to_maybe

__all__ = (
    "either_to_maybe",
    "identity_to_maybe",
    "sequence_to_maybe",
    "array_to_maybe",
    "maybe_to_list",
)
