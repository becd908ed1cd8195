"""
Isomorphisms
============

A pair of conversions that undo each other:
- iso.from_(iso.to(a)) == a
- iso.to(iso.from_(b)) == b
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import LazyCoroResult

from ..containers.task import Task
from .task import lazy_coro_result_to_task, task_to_lazy_coro_result


@dataclass(frozen=True, slots=True)
class Iso[A, B]:
    """Two-way conversion between A and B."""

    to: Callable[[A], B]
    from_: Callable[[B], A]

    def inverse(self) -> Iso[B, A]:
        return Iso(to=self.from_, from_=self.to)

    def round_trips(self, a: A) -> bool:
        """from_(to(a)) == a"""
        return self.from_(self.to(a)) == a

    def round_trips_back(self, b: B) -> bool:
        """to(from_(b)) == b"""
        return self.to(self.from_(b)) == b


def str_to_list(text: str) -> list[str]:
    """Split text into its characters."""
    return list(text)


def list_to_str(chars: list[str]) -> str:
    """Join characters back into text."""
    return "".join(chars)


text_iso: typing.Final[Iso[str, list[str]]] = Iso(to=str_to_list, from_=list_to_str)

# Task <-> LazyCoroResult. Both sides hold functions, so the laws are
# checked on settled values rather than with ==.
task_iso: typing.Final[Iso[Task[typing.Any, typing.Any], LazyCoroResult[typing.Any, typing.Any]]] = Iso(
    to=task_to_lazy_coro_result,
    from_=lazy_coro_result_to_task,
)

__all__ = (
    "Iso",
    "str_to_list",
    "list_to_str",
    "text_iso",
    "task_iso",
)
