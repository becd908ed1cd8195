"""
Natural transformations
=======================

Conversions between containers that commute with map:
nt(fa.map(f)) == nt(fa).map(f).
"""

from .io import identity_to_io
from .iso import Iso, list_to_str, str_to_list, task_iso, text_iso
from .maybe import (
    array_to_maybe,
    either_to_maybe,
    identity_to_maybe,
    maybe_to_list,
    sequence_to_maybe,
)
from .task import (
    either_to_task,
    io_to_task,
    lazy_coro_result_to_task,
    maybe_to_task,
    task_to_lazy_coro_result,
)

__all__ = (
    # -> Maybe
    "either_to_maybe",
    "identity_to_maybe",
    "sequence_to_maybe",
    "array_to_maybe",
    # Maybe -> list
    "maybe_to_list",
    # -> IO
    "identity_to_io",
    # -> Task
    "io_to_task",
    "either_to_task",
    "maybe_to_task",
    "lazy_coro_result_to_task",
    "task_to_lazy_coro_result",
    # Isomorphisms
    "Iso",
    "str_to_list",
    "list_to_str",
    "text_iso",
    "task_iso",
)
