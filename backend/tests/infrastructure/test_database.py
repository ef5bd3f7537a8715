"""Database Session Manager — schema creation, health check and error mapping."""

import pytest
from sqlalchemy import text

from joboffer.core.errors import DatabaseError
from joboffer.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'manager.db'}")
    yield manager
    await manager.dispose()


async def test_create_schema_creates_tables(manager):
    await manager.create_schema()

    async with manager.session() as db:
        result = await db.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table'"),
        )
        tables = {row[0] for row in result}

    assert {
        "companies", "recruiters", "jobs", "studies", "recruiter_client_companies",
    } <= tables


async def test_create_schema_is_idempotent(manager):
    await manager.create_schema()
    await manager.create_schema()


async def test_health_check_passes(manager):
    assert await manager.health_check() is True


async def test_sqlalchemy_errors_become_database_errors(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc.value.code == "DATABASE_ERROR"
