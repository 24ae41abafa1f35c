"""
Tests for schema creation, seeding and configuration.
"""
from datetime import date

import pytest
from sqlalchemy import func, inspect, select

from hospital.core.config import AppConfig
from hospital.models import Appointment, Department, MedicalRecord, Patient, Staff
from hospital.repositories import get_repository
from hospital.services.db import db_session, init_db, make_session_factory
from hospital.services.seed import seed_database


@pytest.mark.asyncio
async def test_schema_has_five_tables(empty_engine):
    async with empty_engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert set(tables) == {"Patients", "Staffs", "Departments", "Appointments", "MedicalRecords"}


@pytest.mark.asyncio
async def test_foreign_keys_cascade_on_delete(empty_engine):
    async with empty_engine.connect() as conn:
        foreign_keys = await conn.run_sync(
            lambda sync_conn: {
                table: inspect(sync_conn).get_foreign_keys(table)
                for table in ("Staffs", "Appointments", "MedicalRecords")
            }
        )

    referred = {
        (table, fk["referred_table"], fk["options"].get("ondelete"))
        for table, fks in foreign_keys.items()
        for fk in fks
    }
    assert referred == {
        ("Staffs", "Departments", "CASCADE"),
        ("Appointments", "Patients", "CASCADE"),
        ("Appointments", "Staffs", "CASCADE"),
        ("MedicalRecords", "Patients", "CASCADE"),
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "model, ids",
    [
        (Patient, [1, 2, 3, 4, 5]),
        (Staff, [101, 102, 103, 104, 105]),
        (Department, [1, 2, 3, 4, 5]),
        (Appointment, [1, 2, 3, 4, 5]),
        (MedicalRecord, [1, 2, 3, 4, 5]),
    ],
    ids=lambda p: getattr(p, "__name__", None),
)
async def test_seed_ids(session, model, ids):
    rows = await get_repository(session, model).get_all(lambda q: q.order_by(model.id))

    assert [row.id for row in rows] == ids


@pytest.mark.asyncio
async def test_seed_values(session):
    patient = await get_repository(session, Patient).get_by_id(1)
    staff = await get_repository(session, Staff).get_by_id(104)
    record = await get_repository(session, MedicalRecord).get_by_id(4)
    appointment = await get_repository(session, Appointment).get_by_id(2)

    assert patient.full_name == "Mario Rossi"
    assert patient.birthdate == date(1980, 5, 15)
    assert (staff.role, staff.department_id) == ("Chirurgo", 4)
    assert record.notes == ["Controllo della funzionalità polmonare necessario."]
    assert appointment.is_canceled is False


@pytest.mark.asyncio
async def test_seed_runs_once(engine, session):
    await init_db(engine, seed=True)

    async with make_session_factory(engine)() as other:
        assert await seed_database(other) is False

    assert await session.scalar(select(func.count()).select_from(Patient)) == 5


@pytest.mark.asyncio
async def test_empty_store_has_no_rows(empty_engine):
    async with make_session_factory(empty_engine)() as session:
        assert await session.scalar(select(func.count()).select_from(Department)) == 0


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("SEED_DATA", "false")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppConfig()

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.seed_data is False
    assert settings.logging.level == "DEBUG"


@pytest.mark.asyncio
async def test_db_session_commits_on_success(session_factory, fresh_session):
    async with db_session(session_factory) as session:
        session.add(Department(id=10, name="Radiologia"))

    assert (await get_repository(fresh_session, Department).get_by_id(10)).name == "Radiologia"


@pytest.mark.asyncio
async def test_db_session_rolls_back_on_error(session_factory, fresh_session):
    with pytest.raises(RuntimeError):
        async with db_session(session_factory) as session:
            session.add(Department(id=11, name="Pediatria"))
            await session.flush()
            raise RuntimeError("abort")

    assert await get_repository(fresh_session, Department).get_by_id(11) is None
