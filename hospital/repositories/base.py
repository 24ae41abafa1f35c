"""
Repository contract.

Callers depend on this interface rather than on a storage technology; any
backend honouring these semantics can stand in for ``GenericRepository``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Sequence, TypeVar

from sqlalchemy import Select

from hospital.models.base import Base

T = TypeVar("T", bound=Base)

# Transforms the base SELECT for one entity type: eager loads, filters, ordering, paging.
QueryShaper = Callable[[Select], Select]


class Repository(ABC, Generic[T]):
    """CRUD over a single entity type, staged in a unit of work until ``save_changes``."""

    @abstractmethod
    async def add(self, entity: T) -> None:
        """Stage ``entity`` for insertion."""

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Stage the current field values of ``entity`` over the row with its id."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Stage removal of the row with ``entity``'s id. Dependants go by cascade."""

    @abstractmethod
    async def get_by_id(self, id: int, shaper: QueryShaper | None = None) -> T | None:
        """Return the entity with ``id``, or None when no row matches."""

    @abstractmethod
    async def get_all(self, shaper: QueryShaper | None = None) -> Sequence[T]:
        """Return every matching entity; an empty sequence when nothing matches."""

    @abstractmethod
    async def save_changes(self) -> None:
        """Commit all staged changes as one unit."""
