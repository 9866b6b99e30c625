"""Shared fixtures — a throwaway SQLite roster per test."""
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from onboard import database
from onboard.models import Employee  # noqa: registers the table


@pytest_asyncio.fixture
async def db(tmp_path, monkeypatch):
    """Point the store at a fresh database file with the employee table created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'roster.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(database, "async_session_factory", factory)
    yield factory
    await engine.dispose()


def make_llm_client(content: str) -> AsyncMock:
    """Fake AsyncOpenAI client whose chat completion returns ``content``."""
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content

    mock_client = AsyncMock()
    mock_client.chat.completions.create = AsyncMock(return_value=mock_response)
    return mock_client


@pytest.fixture
def llm_client():
    return make_llm_client(
        '```json\n{"0": [], "1": [[9.0, 17.0]], "2": [], "3": [], "4": [], "5": [], "6": []}\n```'
    )


@pytest.fixture
def make_llm():
    return make_llm_client
