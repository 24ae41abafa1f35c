from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, text_checks

if TYPE_CHECKING:
    from .staff import Staff


class Department(Base):
    __table_args__ = text_checks(required=("name",), max_lengths={"name": 100})

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    staffs: Mapped[list[Staff]] = relationship(
        back_populates="department",
        cascade="all, delete",
        passive_deletes=True,
    )
