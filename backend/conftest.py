"""Global pytest fixtures for testing."""

import contextlib
import os
from collections.abc import AsyncGenerator

import dotenv
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from jspace_api.dependencies import get_auto_translate, get_content_translator
from jspace_api.main import app
from jspace_core.services import ContentTranslator
from jspace_core.services.translation_providers import TranslationProvider
from jspace_database import Base
from jspace_database.session import get_session

with contextlib.suppress(OSError):
    dotenv.load_dotenv()


class FakeTranslationProvider(TranslationProvider):
    """Deterministic provider recording every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, str]] = []
        self.failing_targets: set[str] = set()

    def translate(self, text: str, source: str, target: str) -> str:
        self.calls.append((text, source, target))
        if target in self.failing_targets:
            raise RuntimeError(f"provider unavailable for {target}")
        return f"[{target}] {text}"

    def reset(self) -> None:
        """Forget recorded calls and failures."""
        self.calls.clear()
        self.failing_targets.clear()


# In-memory SQLite unless a test database is configured explicitly
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# Safety check: ensure tests only run on a test database
if (
    not TEST_DATABASE_URL.startswith("sqlite")
    and "_test" not in TEST_DATABASE_URL
    and "/test" not in TEST_DATABASE_URL
):
    raise RuntimeError(
        f"Safety check failed: TEST_DATABASE_URL must point to a test database "
        f"(name should contain 'test'). Current: {TEST_DATABASE_URL}"
    )


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with a fresh schema."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            echo=False,
            poolclass=StaticPool,  # Share the single in-memory database
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
def fake_provider() -> FakeTranslationProvider:
    """Provide a fresh fake translation provider."""
    return FakeTranslationProvider()


@pytest.fixture
def translator(fake_provider: FakeTranslationProvider) -> ContentTranslator:
    """Content translator backed by the fake provider."""
    return ContentTranslator(fake_provider)


@pytest_asyncio.fixture
async def client(
    db_session: AsyncSession, translator: ContentTranslator
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with database and translator overrides."""

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_content_translator] = lambda: translator
    app.dependency_overrides[get_auto_translate] = lambda: True

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
