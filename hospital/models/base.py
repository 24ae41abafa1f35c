from __future__ import annotations

from sqlalchemy import CheckConstraint, MetaData
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, declared_attr

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return f"{cls.__name__}s"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={getattr(self, 'id', None)}>"


class PersonNameMixin:
    """Derived, non-persisted display name for people tables."""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def text_checks(*, required: tuple[str, ...] = (), max_lengths: dict[str, int] | None = None) -> tuple[CheckConstraint, ...]:
    """CHECK constraints for non-empty and bounded text columns.

    SQLite accepts any length in a VARCHAR(n) column, so bounds are declared explicitly.
    """
    checks = [CheckConstraint(f"length({column}) > 0", name=f"{column}_not_empty") for column in required]
    for column, limit in (max_lengths or {}).items():
        checks.append(CheckConstraint(f"length({column}) <= {limit}", name=f"{column}_max_length"))
    return tuple(checks)
