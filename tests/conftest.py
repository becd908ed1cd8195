"""Shared fixtures for the natural test suite.

Guidelines
----------
* Every test is in-process; no I/O beyond the event loop.
* Async tests run under pytest-asyncio (asyncio_mode = "auto").
"""

from __future__ import annotations

import pytest


def add_one(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


@pytest.fixture
def f():
    """Value transform used by law checks."""
    return add_one


@pytest.fixture
def g():
    """Second value transform, composed after f."""
    return double


class Exploding:
    """Callable that fails the test if it is ever invoked."""

    def __init__(self):
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        raise AssertionError(f"should not be called, got {args!r}")


@pytest.fixture
def exploding():
    return Exploding()
