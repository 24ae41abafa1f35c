from __future__ import annotations

from types import TracebackType

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hospital.core.exceptions import STORAGE_ERRORS, persistence_guard
from hospital.models import Appointment, Department, MedicalRecord, Patient, Staff
from hospital.models.base import Base
from hospital.repositories.base import T
from hospital.repositories.generic import GenericRepository, get_repository
from hospital.services.db import get_session_factory


class UnitOfWork:
    """One session shared by a repository per entity type.

    Usage:
        async with UnitOfWork() as uow:
            await uow.patients.add(patient)
            await uow.commit()

    Anything not committed when the block exits is discarded. Entities read
    inside the block stay usable, detached, after it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None = None) -> None:
        self._session_factory = session_factory or get_session_factory()
        self._session: AsyncSession | None = None
        self._repositories: dict[type[Base], GenericRepository] = {}

    async def __aenter__(self) -> UnitOfWork:
        self._session = self._session_factory()
        self._repositories = {}
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            # close() alone discards uncommitted work and keeps loaded entities readable
            if exc_type is not None:
                logger.debug("Unit of work exited with {error}; rolling back", error=exc_type.__name__)
                await session.rollback()
        finally:
            await session.close()
            self._session = None
            self._repositories = {}

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use 'async with UnitOfWork()'")
        return self._session

    def repository(self, model: type[T]) -> GenericRepository[T]:
        if model not in self._repositories:
            self._repositories[model] = get_repository(self.session, model)
        return self._repositories[model]

    @property
    def patients(self) -> GenericRepository[Patient]:
        return self.repository(Patient)

    @property
    def staff(self) -> GenericRepository[Staff]:
        return self.repository(Staff)

    @property
    def departments(self) -> GenericRepository[Department]:
        return self.repository(Department)

    @property
    def appointments(self) -> GenericRepository[Appointment]:
        return self.repository(Appointment)

    @property
    def medical_records(self) -> GenericRepository[MedicalRecord]:
        return self.repository(MedicalRecord)

    @persistence_guard("committing")
    async def commit(self) -> None:
        try:
            await self.session.commit()
        except STORAGE_ERRORS:
            await self.session.rollback()
            raise
