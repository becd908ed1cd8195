"""Isomorphism tests: text_iso and task_iso round trips."""

import pytest
from kungfu import Error, LazyCoroResult, Ok

from natural import Iso, Left, Right, Task, task_iso, text_iso


@pytest.mark.parametrize("text", ["", "a", "dcba", "héllo wörld"])
def test_text_iso_round_trips(text):
    assert text_iso.round_trips(text)


@pytest.mark.parametrize("chars", [[], ["x"], ["d", "c", "b", "a"]])
def test_text_iso_round_trips_back(chars):
    assert text_iso.round_trips_back(chars)


def test_text_iso_to():
    assert text_iso.to("dcba") == ["d", "c", "b", "a"]
    assert text_iso.from_(["a", "b"]) == "ab"


def test_inverse_swaps_directions():
    flipped = text_iso.inverse()
    assert flipped.to(["o", "k"]) == "ok"
    assert flipped.from_("ok") == ["o", "k"]
    assert flipped.inverse() == text_iso


def test_non_isomorphic_pair_is_detected():
    head = Iso(to=lambda xs: xs[:1], from_=lambda xs: xs)
    assert not head.round_trips([1, 2, 3])


@pytest.mark.parametrize("task", [Task.of(1), Task.rejected("e")])
async def test_task_iso_round_trips(task):
    assert await task_iso.from_(task_iso.to(task)) == await task


async def test_task_iso_round_trips_back():
    async def ok():
        return Ok(2)

    async def err():
        return Error("e")

    for run, expected in ((ok, Right(2)), (err, Left("e"))):
        lazy = LazyCoroResult(run)
        back = await task_iso.to(task_iso.from_(lazy))
        match back:
            case Ok(value):
                assert Right(value) == expected
            case Error(e):
                assert Left(e) == expected
