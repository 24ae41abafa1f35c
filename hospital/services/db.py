from __future__ import annotations

from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from typing import Any, AsyncGenerator

from loguru import logger
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from hospital.core.config import get_settings
from hospital.models import Base
from hospital.services.seed import seed_database


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores FOREIGN KEY clauses (and so ON DELETE CASCADE) unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for(database_url: str) -> AsyncEngine:
    url = make_url(database_url)
    is_sqlite = url.drivername.startswith("sqlite")

    if is_sqlite and url.database and url.database != ":memory:":
        db_path = Path(url.database).expanduser()
        if db_path.parent:
            db_path.parent.mkdir(parents=True, exist_ok=True)
        url = url.set(database=str(db_path))

    engine = create_async_engine(url)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@lru_cache
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return create_engine_for(settings.database_url)


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return make_session_factory(get_engine())


async def init_db(engine: AsyncEngine | None = None, *, seed: bool | None = None) -> None:
    engine = engine or get_engine()
    if seed is None:
        seed = get_settings().seed_data

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready on {url}", url=engine.url.render_as_string(hide_password=True))

    if seed:
        async with make_session_factory(engine)() as session:
            await seed_database(session)


@asynccontextmanager
async def db_session(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    session: AsyncSession = (session_factory or get_session_factory())()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
