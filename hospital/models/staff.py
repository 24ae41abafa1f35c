from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, PersonNameMixin, text_checks

if TYPE_CHECKING:
    from .appointment import Appointment
    from .department import Department


class Staff(PersonNameMixin, Base):
    __table_args__ = text_checks(
        required=("first_name", "last_name", "role", "email"),
        max_lengths={"first_name": 50, "last_name": 50, "role": 50, "phone_number": 15, "email": 100},
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(15), nullable=False, default="")
    department_id: Mapped[int] = mapped_column(
        ForeignKey("Departments.id", ondelete="CASCADE"), nullable=False, index=True
    )

    department: Mapped[Department] = relationship(back_populates="staffs")
    appointments: Mapped[list[Appointment]] = relationship(
        back_populates="staff",
        cascade="all, delete",
        passive_deletes=True,
    )
