from __future__ import annotations

from _infra import banner, run

from natural import Left, Right, either_to_maybe
from natural.exercises import find_name_by_id, sort_letters, text_iso


async def main() -> None:
    banner("02_exercises: the three chapter exercises")

    print(either_to_maybe(Left("nope")), either_to_maybe(Right(42)))

    print(await find_name_by_id(5))  # Right('userface')
    print(await find_name_by_id(-1))  # Left('not found')

    print(text_iso.to("dcba"), sort_letters("dcba"))


if __name__ == "__main__":
    run(main)
