from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, text_checks
from .types import TrackedNoteList

if TYPE_CHECKING:
    from .patient import Patient


class MedicalRecord(Base):
    __table_args__ = text_checks(max_lengths={"diagnosis": 400, "treatment": 400})

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    patient_id: Mapped[int] = mapped_column(
        ForeignKey("Patients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    record_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    diagnosis: Mapped[str] = mapped_column(String(400), nullable=False, default="")
    treatment: Mapped[str] = mapped_column(String(400), nullable=False, default="")
    notes: Mapped[list[str]] = mapped_column(TrackedNoteList, nullable=False, default=list)

    patient: Mapped[Patient] = relationship(back_populates="medical_records")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("notes", [])
        super().__init__(**kwargs)

    def add_note(self, note: str) -> None:
        self.notes.append(note)
