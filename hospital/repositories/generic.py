from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from hospital.core.exceptions import STORAGE_ERRORS, persistence_guard
from hospital.repositories.base import QueryShaper, Repository, T


class GenericRepository(Repository[T]):
    """SQLAlchemy-backed repository for one mapped entity type.

    Writes are staged on ``session``, which is the unit of work and may be
    shared by repositories of other entity types; nothing reaches the
    database until ``save_changes``. Reads always execute a fresh SELECT.
    """

    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        self.session = session
        self.model = model
        self.entity_name = model.__name__

    @persistence_guard("adding")
    async def add(self, entity: T) -> None:
        self.session.add(entity)

    @persistence_guard("updating")
    async def update(self, entity: T) -> None:
        if entity in self.session:
            return
        entity_id = getattr(entity, "id", None)
        if entity_id is None or await self.session.get(self.model, entity_id) is None:
            raise StaleDataError(f"{self.entity_name} with id {entity_id!r} has no row to update")
        await self.session.merge(entity)

    @persistence_guard("deleting")
    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)

    @persistence_guard("getting")
    async def get_by_id(self, id: int, shaper: QueryShaper | None = None) -> T | None:
        stmt = select(self.model)
        if shaper is not None:
            stmt = shaper(stmt)
        stmt = stmt.where(self.model.id == id)
        result = await self.session.scalars(stmt)
        return result.unique().first()

    @persistence_guard("listing")
    async def get_all(self, shaper: QueryShaper | None = None) -> list[T]:
        stmt = select(self.model)
        if shaper is not None:
            stmt = shaper(stmt)
        result = await self.session.scalars(stmt)
        return list(result.unique().all())

    @persistence_guard("saving changes to")
    async def save_changes(self) -> None:
        try:
            await self.session.commit()
        except STORAGE_ERRORS:
            await self.session.rollback()
            raise
        logger.debug("Committed unit of work for {entity}", entity=self.entity_name)


def get_repository(session: AsyncSession, model: type[T]) -> GenericRepository[T]:
    return GenericRepository(session=session, model=model)
