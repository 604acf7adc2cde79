from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from moodjournal.database import Base, get_db
from moodjournal.main import app
from moodjournal.models.user import User
from moodjournal.models.task import Task, TaskBoard
from moodjournal.core.security import create_access_token
from moodjournal.utils.password import hash_password


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'moodjournal-test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def _make_user(db, email: str, name: str) -> User:
    user = User(email=email, name=name, hashed_password=hash_password("correct-horse"))
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def user(db):
    return await _make_user(db, "ada@moodjournal.io", "Ada")


@pytest_asyncio.fixture
async def other_user(db):
    return await _make_user(db, "grace@moodjournal.io", "Grace")


def bearer(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest.fixture
def auth_headers(user):
    return bearer(user)


@pytest_asyncio.fixture
async def board(db, user):
    board = TaskBoard(user_id=user.id, week_start_date=date(2026, 10, 19), week_end_date=date(2026, 10, 25))
    db.add(board)
    await db.commit()
    await db.refresh(board)
    return board


async def column(db, board_id: int, status: str) -> list[tuple[str, int]]:
    """(title, order) pairs of one column, read straight from the table."""
    result = await db.execute(
        select(Task.title, Task.order)
        .where(Task.task_board_id == board_id)
        .where(Task.status == status)
        .order_by(Task.order)
    )
    return [(row.title, row.order) for row in result]


def assert_dense(pairs):
    assert sorted(order for _, order in pairs) == list(range(len(pairs)))
