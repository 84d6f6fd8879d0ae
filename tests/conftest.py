"""Shared test fixtures for the dicer test suite.

fixed_rng
    Factory for a random source that replays a fixed sequence of draws, so
    tests can assert exact totals instead of just bounds.

client
    AsyncClient wired to the FastAPI app, using the real random source.

client_with_draws
    Factory that overrides ``get_random_source`` with a fixed sequence and
    returns the client. The override is removed after the test.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dicer.main import app
from dicer.random_source import get_random_source


class FixedRandomSource:
    """Random source that returns pre-set draws in order."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._draws:
            raise AssertionError(f"Unexpected draw randint({a}, {b}): sequence exhausted")
        value = self._draws.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"Fixed draw {value} outside randint({a}, {b})")
        return value


@pytest.fixture
def fixed_rng() -> Callable[..., FixedRandomSource]:
    def _make(*draws: int) -> FixedRandomSource:
        return FixedRandomSource(draws)

    return _make


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def client_with_draws():
    """Return a factory that installs a fixed random source and yields the client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:

        def _install(*draws: int) -> AsyncClient:
            source = FixedRandomSource(draws)
            app.dependency_overrides[get_random_source] = lambda: source
            return c

        yield _install

    app.dependency_overrides.pop(get_random_source, None)
