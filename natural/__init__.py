"""
Natural transformations for small functional containers.

Containers (Identity, Maybe, Either, IO, Task) all support of, map and
chain. Natural transformations convert one container into another while
commuting with map:

    nt(fa.map(f)) == nt(fa).map(f)

Architecture:
- natural.containers - the container types
- natural.transform  - conversions and isomorphisms
- natural.laws       - functor and naturality law checkers
- natural.exercises  - the chapter exercises, runnable
"""

# Core types
from ._types import (
    Computation,
    Functor,
    Monad,
    NaturalTransformation,
    Reject,
    Resolve,
    Settled,
    Transform,
)

# Function helpers
from ._helpers import chain, compose, fmap, identity, pipe, prop, sort_by

# Containers
from . import containers
from .containers import IO, NOTHING, Either, Identity, Left, Maybe, Right, Task, either

# Natural transformations
from . import transform
from .transform import (
    Iso,
    array_to_maybe,
    either_to_maybe,
    either_to_task,
    identity_to_io,
    identity_to_maybe,
    io_to_task,
    lazy_coro_result_to_task,
    list_to_str,
    maybe_to_list,
    maybe_to_task,
    sequence_to_maybe,
    str_to_list,
    task_iso,
    task_to_lazy_coro_result,
    text_iso,
)

# Laws & exercises
from . import exercises, laws

# Errors
from ._errors import UnwrapError

__version__ = "0.1.0"

__all__ = (
    # Types
    "Computation",
    "Functor",
    "Monad",
    "NaturalTransformation",
    "Reject",
    "Resolve",
    "Settled",
    "Transform",
    # Helpers
    "chain",
    "compose",
    "fmap",
    "identity",
    "pipe",
    "prop",
    "sort_by",
    # Containers
    "containers",
    "Identity",
    "Maybe",
    "NOTHING",
    "Either",
    "Left",
    "Right",
    "either",
    "IO",
    "Task",
    # Transformations
    "transform",
    "either_to_maybe",
    "identity_to_maybe",
    "sequence_to_maybe",
    "array_to_maybe",
    "maybe_to_list",
    "identity_to_io",
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
    # Modules
    "laws",
    "exercises",
    # Errors
    "UnwrapError",
)
