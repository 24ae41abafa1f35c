"""
Shared pytest fixtures.

Every test gets its own SQLite file under tmp_path, so tests never share rows.
`engine` is seeded with the fixed hospital data; `empty_engine` only has the schema.
"""
import pytest
import pytest_asyncio
from loguru import logger

from hospital.services.db import create_engine_for, init_db, make_session_factory


async def _build_engine(path, *, seed):
    engine = create_engine_for(f"sqlite+aiosqlite:///{path}")
    await init_db(engine, seed=seed)
    return engine


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = await _build_engine(tmp_path / "hospital.db", seed=True)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def empty_engine(tmp_path):
    engine = await _build_engine(tmp_path / "empty.db", seed=False)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def fresh_session(session_factory):
    """A second session, for checking what actually reached the database."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def error_logs():
    """Collect messages logged at ERROR or above while the test runs."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="ERROR")
    yield messages
    logger.remove(handler_id)
