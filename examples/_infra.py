from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field

from natural import Either, Left, Right, Task


@dataclass(frozen=True, slots=True)
class Account:
    id: int
    owner: str
    balance: int


def _empty_accounts() -> dict[int, Account]:
    return {}


@dataclass(slots=True)
class FakeLedger:
    accounts: dict[int, Account] = field(default_factory=_empty_accounts)
    delay_seconds: float = 0.0

    def lookup(self, account_id: int) -> Task[str, Account]:
        async def run() -> Either[str, Account]:
            await asyncio.sleep(self.delay_seconds)
            account = self.accounts.get(account_id)
            if account is None:
                return Left(f"ledger: no account {account_id}")
            return Right(account)

        return Task(run)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
