"""Pytest configuration for all tests."""

import uuid
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from moviebase.domain.entities.movie import Movie, new_movie
from moviebase.domain.entities.user import User
from moviebase.domain.services.string_generator import StringGenerator
from moviebase.infrastructure.auth.jwt_service import jwt_service
from moviebase.infrastructure.persistence import models  # noqa: F401
from moviebase.infrastructure.persistence.database import Base

STATIC_EXTERNAL_ID = "superRandomString"
TEST_RELEASE_DATE = "1996-12-19T16:39:57-08:00"


class StaticStringGenerator(StringGenerator):
    """String generator that always returns the same value."""

    def __init__(self, value: str = STATIC_EXTERNAL_ID) -> None:
        self.value = value

    def crypto_string(self, n: int) -> str:
        return self.value


def make_user(**overrides) -> User:
    """Build a valid user, with optional field overrides."""
    fields = {
        "email": "foo@bar.com",
        "last_name": "Bar",
        "first_name": "Foo",
        "full_name": "Foo Bar",
        "hosted_domain": "example.com",
        "picture_url": "example.com/profile.png",
        "profile_link": "example.com/FooBar",
    }
    fields.update(overrides)
    return User(**fields)


def make_movie(external_id: str = "extl-1", user: User | None = None, **overrides) -> Movie:
    """Build a valid movie, with optional attribute overrides."""
    movie = (
        new_movie(uuid.uuid4(), external_id, user or make_user())
        .set_title(overrides.get("title", "Repo Man"))
        .set_rated(overrides.get("rated", "R"))
        .set_released(overrides.get("release_date", "1984-03-02T00:00:00Z"))
        .set_run_time(overrides.get("run_time", 92))
        .set_director(overrides.get("director", "Alex Cox"))
        .set_writer(overrides.get("writer", "Alex Cox"))
    )
    if "create_time" in overrides:
        movie.create_time = overrides["create_time"]
        movie.update_time = overrides["create_time"]
    return movie


@pytest.fixture
def valid_user() -> User:
    """A user whose profile passes validation."""
    return make_user()


@pytest.fixture
def valid_movie(valid_user: User) -> Movie:
    """A movie that passes validation."""
    return make_movie(user=valid_user)


@pytest.fixture
def access_token(valid_user: User) -> str:
    """Access token for the valid user."""
    return jwt_service.create_access_token(valid_user)


@pytest.fixture
def auth_headers(access_token: str) -> dict[str, str]:
    """Authorization header carrying the valid user's token."""
    return {"Authorization": f"Bearer {access_token}"}


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database and string generator."""
    from moviebase.infrastructure.api.app import app
    from moviebase.infrastructure.api.dependencies import get_string_generator
    from moviebase.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session
    app.dependency_overrides[get_string_generator] = lambda: StaticStringGenerator()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}


@pytest.fixture
def user_factory():
    """Factory building valid users."""
    return make_user


@pytest.fixture
def movie_factory():
    """Factory building valid movies."""
    return make_movie


@pytest.fixture
def static_generator() -> StaticStringGenerator:
    """String generator returning a fixed external ID."""
    return StaticStringGenerator()
