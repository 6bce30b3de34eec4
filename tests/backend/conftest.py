import datetime as dt

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from marketplace.config import Settings
from marketplace.core.bootstrap import ensure_template_catalog
from marketplace.core.db import init_db
from marketplace.core.sessions import SessionRegistry
from marketplace.main import create_app


TEST_DB_URL = "sqlite://:memory:"


class FakeClock:
    """Controllable stand-in for the session registry's clock."""

    def __init__(self, start: dt.datetime):
        self.now = start

    def __call__(self) -> dt.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += dt.timedelta(**kwargs)


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await init_db(TEST_DB_URL, generate_schemas=True)


@pytest.fixture
def clock():
    return FakeClock(dt.datetime(2026, 1, 1, 12, 0, tzinfo=dt.timezone.utc))


@pytest_asyncio.fixture
async def db():
    """Fresh, empty database without an HTTP app (store-level tests)."""
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def app(db, clock):
    """
    A freshly assembled application with its own stores and a session
    registry driven by the fake clock.
    """
    application = create_app(
        Settings(database_url=TEST_DB_URL, generate_schemas=True),
        sessions=SessionRegistry(ttl=dt.timedelta(hours=2), clock=clock),
    )
    await ensure_template_catalog(application.state.catalog)
    return application


@pytest_asyncio.fixture
async def client(app):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture: register (if needed) and log in, returning the
    Authorization header for the new session.
    """

    async def _get_headers(username: str, password: str = "pass1") -> dict[str, str]:
        await client.post("/register", json={"username": username, "password": password})
        resp = await client.post("/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Token {resp.json()['token']}"}

    return _get_headers
