"""
Test infrastructure for the Comments API.

Strategy
--------
- SQLite in-memory via aiosqlite replaces Postgres, keeping the suite
  self-contained.  StaticPool makes every session share the one
  connection, since an in-memory SQLite database lives and dies with its
  connection.
- The app's get_db dependency is overridden so requests use the test
  session factory.
- Tables are created before and dropped after each test.
- Redis is disabled by setting cache._redis = None; CacheManager treats
  that as "always miss, never write", so tests hit the real stores.
- The ``store`` fixture is parametrised over both backends so the same
  contract tests run against SqlCommentStore and InMemoryCommentStore.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from app.cache import cache
from app.database import Base, get_db
from app.dependencies import get_comment_store, use_comment_store
from app.main import app
from app.middleware import install_query_counter
from app.services.comment_service import CommentService
from app.stores import InMemoryCommentStore, SqlCommentStore

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory with aiosqlite
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine_test = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

install_query_counter(engine_test)

async_session_test = async_sessionmaker(
    engine_test,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Dependency override — replace production get_db with the test session factory
# ---------------------------------------------------------------------------

async def override_get_db():
    async with async_session_test() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(autouse=True)
def disable_cache():
    cache._redis = None
    yield
    cache._redis = None


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    async with async_session_test() as session:
        yield session


@pytest_asyncio.fixture(params=["sql", "memory"])
async def store(request, db_session: AsyncSession):
    """Yield a fresh store of each backend in turn."""
    if request.param == "sql":
        yield SqlCommentStore(db_session)
    else:
        yield InMemoryCommentStore()


@pytest_asyncio.fixture
async def service(store) -> CommentService:
    return CommentService(store)


@pytest_asyncio.fixture
async def async_client() -> AsyncClient:
    """Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def memory_backend():
    """Switch the app to a fresh in-memory store for the duration of a test."""
    memory_store = InMemoryCommentStore()
    use_comment_store(app, memory_store)
    yield memory_store
    app.dependency_overrides.pop(get_comment_store)
    del app.state.memory_store
