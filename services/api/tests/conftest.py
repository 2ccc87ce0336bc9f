"""Shared fixtures: in-memory database, scripted LLM, HTTP client."""

from collections.abc import AsyncGenerator
import json
import os

from httpx import ASGITransport, AsyncClient
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

TEST_DATABASE_URL = "sqlite+aiosqlite://"

os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

from src.config import Settings, get_settings  # noqa: E402
from src.database import (  # noqa: E402
    create_engine,
    create_session_maker,
    get_async_session,
    init_models,
)
from src.dependencies import get_text_generator  # noqa: E402
from src.main import app  # noqa: E402
from src.repositories import UserRepository  # noqa: E402
from src.security import hash_password  # noqa: E402


def react_page(react: str = "export default function Page() {}", html: str = "<!DOCTYPE html>"):
    """Model output for the react profile."""
    return json.dumps({"reactComponent": react, "previewHtml": html})


class ScriptedGenerator:
    """TextGenerator returning canned answers in order; the last one repeats.

    An Exception instance in the script is raised instead of returned.
    """

    def __init__(self, *responses: str | Exception):
        self.responses = list(responses) or [react_page()]
        self.calls: list[tuple[str, str]] = []

    async def generate(self, instructions: str, message: str) -> str:
        self.calls.append((instructions, message))
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def generator() -> ScriptedGenerator:
    return ScriptedGenerator()


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url=TEST_DATABASE_URL, generation_profile="react", project_limit=5)


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(TEST_DATABASE_URL)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_session_maker(db_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def user(db_session):
    return await UserRepository(db_session).create(
        name="Ada", email="ada@example.com", password_hash=hash_password("secret", rounds=4)
    )


@pytest_asyncio.fixture
async def other_user(db_session):
    return await UserRepository(db_session).create(
        name="Grace", email="grace@example.com", password_hash=hash_password("secret", rounds=4)
    )


@pytest.fixture
def override_dependencies(db_engine, generator, settings):
    """Point the app at the test database, the scripted LLM and test settings."""
    session_maker = create_session_maker(db_engine)

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_text_generator] = lambda: generator
    app.dependency_overrides[get_settings] = lambda: settings
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(override_dependencies) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=override_dependencies), base_url="http://test"
    ) as ac:
        yield ac
