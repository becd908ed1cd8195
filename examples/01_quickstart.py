from __future__ import annotations

from _infra import Account, FakeLedger, banner, run

from natural import Either, Left, Maybe, Right, compose, either_to_maybe, either_to_task, fmap, prop


def parse_amount(text: str) -> Either[str, int]:
    if text.isdigit():
        return Right(int(text))
    return Left(f"not an amount: {text!r}")


async def main() -> None:
    banner("01_quickstart: Either -> Maybe, Either -> Task")

    # Failure detail is dropped, absence remains
    print(either_to_maybe(parse_amount("120")))  # Just(120)
    print(either_to_maybe(parse_amount("abc")))  # Nothing
    print(Maybe.of(3).map(lambda x: x * 2))  # Just(6)

    ledger = FakeLedger(accounts={1: Account(id=1, owner="ana", balance=40)}, delay_seconds=0.01)

    owner_of = compose(fmap(prop("owner")), ledger.lookup)
    print(await owner_of(1))  # Right('ana')
    print(await owner_of(2))  # Left('ledger: no account 2')

    # A sync parse feeding an async pipeline: convert, then chain
    deposit = either_to_task(parse_amount("15")).chain(
        lambda amount: ledger.lookup(1).map(lambda acc: acc.balance + amount)
    )
    await deposit.fork(
        lambda err: print(f"error: {err}"),
        lambda balance: print(f"new balance: {balance}"),
    )


if __name__ == "__main__":
    run(main)
