"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

import idgen
from config import Config, IdConfig
from helpers import FrozenClock
from idgen.random_id import RandomSegmentGenerator
from idgen.sortable import SortableIdGenerator
from ui.app import create_app


@pytest.fixture
def clock():
    """Create a frozen test clock."""
    return FrozenClock()


@pytest.fixture
def random_generator():
    """Create a random segment generator on the OS source."""
    return RandomSegmentGenerator()


@pytest.fixture
def sortable(clock):
    """Create a sortable generator on a frozen clock."""
    return SortableIdGenerator(clock=clock)


@pytest.fixture
def id_config():
    """Create test id config."""
    return IdConfig(default_length=16, batch_size=40, timestamp_width=8, random_width=8)


@pytest.fixture(autouse=True)
def reset_default_generators():
    """Give every test fresh process-default generators."""
    idgen.configure()
    yield
    idgen.configure()


@pytest.fixture
async def app(id_config):
    """Create test FastAPI app."""
    return create_app(Config(ids=id_config))


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
