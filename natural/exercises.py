"""
Chapter exercises
=================

1. either_to_maybe - drop the failure tag.
2. find_name_by_id - flatten Task[Either[...]] into a single Task.
3. text_iso / sort_letters - characters round trip through a list.
"""

from __future__ import annotations

import asyncio
import typing
from dataclasses import dataclass

from ._helpers import chain, compose, fmap, identity, prop, sort_by
from .containers.either import Either, Left, Right
from .containers.task import Task
from .transform.iso import list_to_str, str_to_list, text_iso
from .transform.maybe import either_to_maybe
from .transform.task import either_to_task


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


# Exercise 1 is either_to_maybe itself.


# Exercise 2
def find_user_by_id(user_id: int) -> Task[typing.Never, Either[str, User]]:
    """Pretend lookup: negative ids are missing."""

    async def lookup() -> Either[typing.Never, Either[str, User]]:
        await asyncio.sleep(0)
        if user_id < 0:
            return Right(Left("not found"))
        return Right(Right(User(id=user_id, name="userface")))

    return Task(lookup)


# int -> Task[str, str]: the Either is folded into the Task's own channels
find_name_by_id: typing.Final = compose(
    fmap(prop("name")),
    chain(either_to_task),
    find_user_by_id,
)


# Exercise 3
sort_letters: typing.Final = compose(list_to_str, sort_by(identity), str_to_list)

__all__ = (
    "User",
    "either_to_maybe",
    "find_user_by_id",
    "find_name_by_id",
    "str_to_list",
    "list_to_str",
    "text_iso",
    "sort_letters",
)
