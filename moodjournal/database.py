import logging
from typing import AsyncGenerator, Awaitable, Callable, TypeVar
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from moodjournal.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

engine = create_async_engine(settings.effective_database_url, echo=settings.SQL_ECHO)

AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
Base = declarative_base()

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


async def unit_of_work(db: AsyncSession, work: Callable[[AsyncSession], Awaitable[T]]) -> T:
    """Run ``work`` inside the session's transaction.

    Commits when ``work`` returns, rolls back every pending change and
    re-raises when it fails. Nothing is retried.
    """
    try:
        result = await work(db)
        await db.commit()
    except Exception:
        logger.warning("Rolling back transaction after failure in %s", getattr(work, "__name__", work))
        await db.rollback()
        raise
    return result
