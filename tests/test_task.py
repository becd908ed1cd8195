"""Task tests: lazy asynchronous Either.

Invariants:
    - Nothing runs until the task is awaited
    - map/chain run the wrapped computation once per execution
    - rejected tasks short-circuit map and chain
    - callback tasks settle once; later reject/resolve calls are ignored
"""

import asyncio
import logging
import threading

import pytest
from kungfu import Error, LazyCoroResult, Ok

from natural import Left, Right, Task
from natural.laws import task_functor_composition_holds, task_functor_identity_holds


def _counting(value, calls):
    async def run():
        calls.append(value)
        return Right(value)

    return Task(run)


# -- Construction --------------------------------------------------------------

async def test_of_and_rejected():
    assert await Task.of(1) == Right(1)
    assert await Task.rejected("boom") == Left("boom")


async def test_task_is_lazy():
    calls = []
    task = _counting(1, calls).map(lambda x: x + 1)
    assert calls == []
    assert await task == Right(2)
    assert calls == [1]


# -- Functor / Monad -----------------------------------------------------------

async def test_map_and_chain():
    task = Task.of(2).map(lambda x: x * 3).chain(lambda x: Task.of(x + 1))
    assert await task == Right(7)


async def test_chain_collapses_nesting():
    """Task[Task[...]] is never exposed: chain subscribes to the inner task."""
    inner_calls = []
    task = Task.of(5).chain(lambda x: _counting(x * 2, inner_calls))
    assert await task == Right(10)
    assert inner_calls == [10]


async def test_chain_runs_outer_once():
    calls = []
    task = _counting(1, calls).chain(lambda x: Task.of(x)).map(str)
    assert await task == Right("1")
    assert calls == [1]


async def test_rejected_short_circuits(exploding):
    failed = Task.rejected("err")
    assert await failed.map(exploding) == Left("err")
    assert await failed.chain(exploding) == Left("err")
    assert exploding.calls == 0


async def test_map_rejected():
    assert await Task.rejected("e").map_rejected(str.upper) == Left("E")
    assert await Task.of(1).map_rejected(str.upper) == Right(1)


@pytest.mark.parametrize("task", [Task.of(3), Task.rejected("e")])
async def test_functor_identity_law(task):
    assert await task_functor_identity_holds(task)


@pytest.mark.parametrize("task", [Task.of(3), Task.rejected("e")])
async def test_functor_composition_law(task, f, g):
    assert await task_functor_composition_holds(task, f, g)


# -- fork ----------------------------------------------------------------------

async def test_fork_calls_exactly_one_callback():
    seen = []
    await Task.of(1).fork(lambda e: seen.append(("rej", e)), lambda v: seen.append(("res", v)))
    await Task.rejected("x").fork(lambda e: seen.append(("rej", e)), lambda v: seen.append(("res", v)))
    assert seen == [("res", 1), ("rej", "x")]


# -- Callback construction -----------------------------------------------------

async def test_from_callbacks_resolves_later():
    def compute(reject, resolve):
        asyncio.get_running_loop().call_soon(resolve, 42)

    assert await Task.from_callbacks(compute) == Right(42)


async def test_from_callbacks_settles_from_another_thread():
    """A worker thread resolving the task still wakes the loop."""
    def compute(reject, resolve):
        threading.Timer(0.01, resolve, args=(42,)).start()

    assert await asyncio.wait_for(Task.from_callbacks(compute)(), timeout=1.0) == Right(42)


async def test_from_callbacks_rejects_from_another_thread():
    def compute(reject, resolve):
        threading.Timer(0.01, reject, args=("late failure",)).start()

    assert await asyncio.wait_for(Task.from_callbacks(compute)(), timeout=1.0) == Left("late failure")


async def test_from_callbacks_rejects():
    def compute(reject, resolve):
        reject("nope")

    assert await Task.from_callbacks(compute).map(lambda x: x + 1) == Left("nope")


async def test_from_callbacks_first_settlement_wins(caplog):
    def compute(reject, resolve):
        resolve(1)
        resolve(2)
        reject("late")

    with caplog.at_level(logging.DEBUG, logger="natural.containers.task"):
        assert await Task.from_callbacks(compute) == Right(1)
    assert sum("Ignoring repeated settlement" in r.message for r in caplog.records) == 2


# -- cache ---------------------------------------------------------------------

async def test_cache_computes_once():
    calls = []
    cached = _counting(7, calls).cache()
    assert await cached == Right(7)
    assert await cached == Right(7)
    assert calls == [7]


# -- kungfu interop ------------------------------------------------------------

async def test_to_lazy_coro_result():
    match await Task.of(1).to_lazy_coro_result():
        case Ok(value):
            assert value == 1
        case _:
            pytest.fail("expected Ok")
    match await Task.rejected("bad").to_lazy_coro_result():
        case Error(err):
            assert err == "bad"
        case _:
            pytest.fail("expected Error")


async def test_from_lazy_coro_result():
    async def ok():
        return Ok(3)

    async def err():
        return Error("e")

    assert await Task.from_lazy_coro_result(LazyCoroResult(ok)) == Right(3)
    assert await Task.from_lazy_coro_result(LazyCoroResult(err)) == Left("e")
