from datetime import datetime

import pytest

from hospital.core.exceptions import PersistenceError
from hospital.models import Appointment, Patient, Staff
from hospital.services.unit_of_work import UnitOfWork


@pytest.mark.asyncio
async def test_commit_persists_across_repositories(session_factory):
    async with UnitOfWork(session_factory) as uow:
        await uow.patients.add(Patient(id=10, first_name="Ann", last_name="Lee", email="a@x.com"))
        await uow.appointments.add(
            Appointment(id=10, patient_id=10, staff_id=101, date=datetime(2025, 1, 1, 9, 0), reason="checkup")
        )
        await uow.commit()

    async with UnitOfWork(session_factory) as uow:
        appointment = await uow.appointments.get_by_id(10)
        patient = await uow.patients.get_by_id(10)

    assert appointment.reason == "checkup"
    assert patient.full_name == "Ann Lee"


@pytest.mark.asyncio
async def test_entities_read_inside_block_are_usable_after_it(session_factory):
    async with UnitOfWork(session_factory) as uow:
        patient = await uow.patients.get_by_id(1)
        record = await uow.medical_records.get_by_id(1)

    assert patient.full_name == "Mario Rossi"
    assert patient.email == "mario.rossi@example.com"
    assert record.notes == ["Inizio del trattamento con nuovi farmaci."]


@pytest.mark.asyncio
async def test_uncommitted_changes_are_discarded(session_factory):
    async with UnitOfWork(session_factory) as uow:
        await uow.patients.add(Patient(id=11, first_name="Bo", last_name="Park", email="b@x.com"))

    async with UnitOfWork(session_factory) as uow:
        assert await uow.patients.get_by_id(11) is None


@pytest.mark.asyncio
async def test_exception_inside_block_rolls_back(session_factory):
    with pytest.raises(RuntimeError):
        async with UnitOfWork(session_factory) as uow:
            staff = await uow.staff.get_by_id(101)
            staff.role = "Primario"
            await uow.staff.update(staff)
            raise RuntimeError("abort")

    async with UnitOfWork(session_factory) as uow:
        assert (await uow.staff.get_by_id(101)).role == "Medico"


@pytest.mark.asyncio
async def test_repository_is_cached_per_model(session_factory):
    async with UnitOfWork(session_factory) as uow:
        assert uow.repository(Staff) is uow.staff
        assert uow.departments.session is uow.medical_records.session is uow.session


@pytest.mark.asyncio
async def test_commit_failure_raises_persistence_error(session_factory, error_logs):
    async with UnitOfWork(session_factory) as uow:
        await uow.appointments.add(Appointment(patient_id=999, staff_id=101, date=datetime(2025, 1, 1)))

        with pytest.raises(PersistenceError) as exc_info:
            await uow.commit()

        assert exc_info.value.operation == "committing"
        assert exc_info.value.entity is None
        assert await uow.appointments.get_all() != []

    assert len(error_logs) == 1
    assert error_logs[0].startswith("An error occurred while committing: ")


@pytest.mark.asyncio
async def test_session_outside_block_is_an_error(session_factory):
    uow = UnitOfWork(session_factory)

    with pytest.raises(RuntimeError):
        uow.session
