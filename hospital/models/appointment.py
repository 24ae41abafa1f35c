from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, text_checks

if TYPE_CHECKING:
    from .patient import Patient
    from .staff import Staff


class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    CANCELED = "canceled"


class Appointment(Base):
    __table_args__ = text_checks(max_lengths={"reason": 400})

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    patient_id: Mapped[int] = mapped_column(
        ForeignKey("Patients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    staff_id: Mapped[int] = mapped_column(
        ForeignKey("Staffs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    reason: Mapped[str] = mapped_column(String(400), nullable=False, default="")
    is_canceled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    patient: Mapped[Patient] = relationship(back_populates="appointments")
    staff: Mapped[Staff] = relationship(back_populates="appointments")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("is_canceled", False)
        super().__init__(**kwargs)

    @property
    def status(self) -> AppointmentStatus:
        return AppointmentStatus.CANCELED if self.is_canceled else AppointmentStatus.SCHEDULED

    # Neither transition checks patient/staff references; callers keep those consistent.
    def schedule(self) -> None:
        self.is_canceled = False

    def cancel(self) -> None:
        self.is_canceled = True
