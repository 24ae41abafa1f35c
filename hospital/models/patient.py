from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, PersonNameMixin, text_checks

if TYPE_CHECKING:
    from .appointment import Appointment
    from .medical_record import MedicalRecord


class Patient(PersonNameMixin, Base):
    __table_args__ = text_checks(
        required=("first_name", "last_name", "email"),
        max_lengths={"first_name": 50, "last_name": 50, "address": 200, "phone_number": 15, "email": 100},
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    birthdate: Mapped[date | None] = mapped_column(Date, nullable=True)
    address: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    phone_number: Mapped[str] = mapped_column(String(15), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(100), nullable=False)

    appointments: Mapped[list[Appointment]] = relationship(
        back_populates="patient",
        cascade="all, delete",
        passive_deletes=True,
    )
    medical_records: Mapped[list[MedicalRecord]] = relationship(
        back_populates="patient",
        cascade="all, delete",
        passive_deletes=True,
    )
