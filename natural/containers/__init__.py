"""
Containers
==========

Identity, Maybe, Either, IO and Task. Each one has of, map and chain.
"""

from .identity import Identity
from .maybe import NOTHING, Maybe
from .either import Either, Left, Right, either
from .io import IO
from .task import Task

__all__ = (
    "Identity",
    "Maybe",
    "NOTHING",
    "Either",
    "Left",
    "Right",
    "either",
    "IO",
    "Task",
)
