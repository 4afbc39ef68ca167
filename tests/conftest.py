"""Pytest fixtures for statistics registry tests."""

from collections.abc import AsyncIterator, Iterator
import os

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("STAT_KEY_LENGTH", "256")
os.environ.setdefault("LOG_LEVEL", "INFO")

from statreg.main import app as fastapi_app
from statreg.stats import STATS, RecordingSink, StatRegistry


@pytest.fixture(scope="session")
def app() -> FastAPI:
    """Return the FastAPI application instance."""
    return fastapi_app


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an `httpx.AsyncClient` bound to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_default_registry() -> Iterator[None]:
    """Start every test with an initialized, empty process-wide registry."""

    STATS.initialize()
    yield
    STATS.initialize()


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def registry(sink: RecordingSink) -> StatRegistry:
    """Return an independent registry writing to an in-memory sink."""

    return StatRegistry("test", sink=sink)
