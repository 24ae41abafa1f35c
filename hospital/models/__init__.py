from .base import Base
from .department import Department
from .patient import Patient
from .staff import Staff
from .appointment import Appointment, AppointmentStatus
from .medical_record import MedicalRecord

__all__ = [
    "Base",
    "Department",
    "Patient",
    "Staff",
    "Appointment",
    "AppointmentStatus",
    "MedicalRecord",
]
