"""Service test fixtures: async DB, FastAPI test client, logged-in users.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe hits the test DB
    - user/admin fixtures own a live AuthSession; *_headers carry its sid as Bearer token

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - Sessions inserted directly instead of going through /api/callback:
      the login flow has its own tests with a mocked identity provider
"""

import secrets
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from ecoaware.db.base import Base
import ecoaware.models  # noqa: F401
from ecoaware.infrastructure.database import get_db, DatabaseSessionManager
from ecoaware.models.auth_session import AuthSession
from ecoaware.models.competition import Competition
from ecoaware.models.competition_question import CompetitionQuestion
from ecoaware.models.event import Event
from ecoaware.models.user import User
import ecoaware.infrastructure.database as db_module
from ecoaware.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def open_session(db, user: User, expires_in: timedelta = timedelta(days=1)) -> str:
    """Insert an AuthSession for user and return its sid."""
    sid = secrets.token_urlsafe(16)
    db.add(AuthSession(
        sid=sid,
        sess={"user_id": user.id, "claims": {"sub": user.id}},
        expire=datetime.now(timezone.utc) + expires_in,
    ))
    await db.commit()
    return sid


@pytest.fixture
def login_as(test_db):
    """Open a session for any user: `sid = await login_as(user)`."""
    async def _login(user: User, expires_in: timedelta = timedelta(days=1)) -> str:
        return await open_session(test_db, user, expires_in)
    return _login


@pytest.fixture
async def user(test_db):
    user = User(
        id="user-1", email="aysel@ecoaware.test",
        first_name="Aysel", last_name="Mammadova",
    )
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def other_user(test_db):
    user = User(id="user-2", email="rashad@ecoaware.test", first_name="Rashad")
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def admin(test_db):
    user = User(
        id="admin-1", email="admin@ecoaware.test", first_name="Admin",
        is_admin=True,
    )
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def auth_headers(test_db, user):
    sid = await open_session(test_db, user)
    return {"Authorization": f"Bearer {sid}"}


@pytest.fixture
async def other_headers(test_db, other_user):
    sid = await open_session(test_db, other_user)
    return {"Authorization": f"Bearer {sid}"}


@pytest.fixture
async def admin_headers(test_db, admin):
    sid = await open_session(test_db, admin)
    return {"Authorization": f"Bearer {sid}"}


@pytest.fixture
async def seed_event(test_db):
    event = Event(
        title="Caspian Beach Cleanup",
        description="Collect plastic along the shore.",
        location="Bilgah Beach, Baku",
        event_date=datetime(2030, 5, 1, 9, tzinfo=timezone.utc),
        category="Beach Cleanup",
    )
    test_db.add(event)
    await test_db.commit()
    await test_db.refresh(event)
    return event


@pytest.fixture
async def seed_competition(test_db):
    """Active competition with three questions worth 10, 20 and NULL (=10) points."""
    competition = Competition(
        title="Biodiversity Quiz",
        description="Flora and fauna of Azerbaijan.",
        difficulty="Easy",
        question_count=3,
        estimated_minutes=5,
    )
    test_db.add(competition)
    await test_db.flush()
    test_db.add_all([
        CompetitionQuestion(
            competition_id=competition.id, question="Q1",
            options=["a", "b", "c"], correct_answer=0, points=10,
        ),
        CompetitionQuestion(
            competition_id=competition.id, question="Q2",
            options=["a", "b", "c"], correct_answer=2, points=20,
        ),
        CompetitionQuestion(
            competition_id=competition.id, question="Q3",
            options=["a", "b"], correct_answer=1, points=None,
        ),
    ])
    await test_db.commit()
    await test_db.refresh(competition)
    return competition
