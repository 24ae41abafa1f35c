from __future__ import annotations

from datetime import date, datetime

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hospital.models import Appointment, Department, MedicalRecord, Patient, Staff

DEPARTMENTS = [
    {"id": 1, "name": "Cardiologia"},
    {"id": 2, "name": "Oncologia"},
    {"id": 3, "name": "Ortopedia"},
    {"id": 4, "name": "Chirurgia"},
    {"id": 5, "name": "Neurologia"},
]

PATIENTS = [
    {
        "id": 1,
        "first_name": "Mario",
        "last_name": "Rossi",
        "birthdate": date(1980, 5, 15),
        "address": "Via Roma 10, Milano",
        "phone_number": "+39 02 1234567",
        "email": "mario.rossi@example.com",
    },
    {
        "id": 2,
        "first_name": "Giulia",
        "last_name": "Bianchi",
        "birthdate": date(1992, 11, 22),
        "address": "Corso Venezia 20, Milano",
        "phone_number": "+39 02 2345678",
        "email": "giulia.bianchi@example.com",
    },
    {
        "id": 3,
        "first_name": "Luca",
        "last_name": "Verdi",
        "birthdate": date(1975, 7, 30),
        "address": "Via Torino 5, Torino",
        "phone_number": "+39 011 3456789",
        "email": "luca.verdi@example.com",
    },
    {
        "id": 4,
        "first_name": "Francesca",
        "last_name": "Neri",
        "birthdate": date(1988, 3, 12),
        "address": "Piazza Duomo 1, Firenze",
        "phone_number": "+39 055 4567890",
        "email": "francesca.neri@example.com",
    },
    {
        "id": 5,
        "first_name": "Alessandro",
        "last_name": "Russo",
        "birthdate": date(1990, 6, 8),
        "address": "Via San Giovanni 8, Napoli",
        "phone_number": "+39 081 5678901",
        "email": "alessandro.russo@example.com",
    },
]

STAFF = [
    {"id": 101, "first_name": "Dr. Carlo", "last_name": "Marini", "role": "Medico",
     "email": "carlo.marini@ospedale.com", "phone_number": "+39 02 3456789", "department_id": 1},
    {"id": 102, "first_name": "Dr. Lucia", "last_name": "Galli", "role": "Medico",
     "email": "lucia.galli@ospedale.com", "phone_number": "+39 02 4567890", "department_id": 2},
    {"id": 103, "first_name": "Dr. Andrea", "last_name": "Ferri", "role": "Medico",
     "email": "andrea.ferri@ospedale.com", "phone_number": "+39 011 2345678", "department_id": 3},
    {"id": 104, "first_name": "Dr. Marta", "last_name": "Morelli", "role": "Chirurgo",
     "email": "marta.morelli@ospedale.com", "phone_number": "+39 055 6789012", "department_id": 4},
    {"id": 105, "first_name": "Dr. Giovanni", "last_name": "Romano", "role": "Medico",
     "email": "giovanni.romano@ospedale.com", "phone_number": "+39 081 3456789", "department_id": 5},
]

APPOINTMENTS = [
    {"id": 1, "patient_id": 1, "staff_id": 101, "date": datetime(2024, 10, 1, 9, 0), "reason": "Controllo annuale"},
    {"id": 2, "patient_id": 2, "staff_id": 102, "date": datetime(2024, 10, 2, 14, 30), "reason": "Visita specialistica"},
    {"id": 3, "patient_id": 3, "staff_id": 103, "date": datetime(2024, 10, 3, 11, 0), "reason": "Controllo post-operatorio"},
    {"id": 4, "patient_id": 4, "staff_id": 104, "date": datetime(2024, 10, 4, 16, 0), "reason": "Consultazione iniziale"},
    {"id": 5, "patient_id": 5, "staff_id": 105, "date": datetime(2024, 10, 5, 10, 0), "reason": "Follow-up"},
]

MEDICAL_RECORDS = [
    {"id": 1, "patient_id": 1, "record_date": datetime(2024, 10, 1), "diagnosis": "Ipertensione",
     "treatment": "Farmaci per pressione alta",
     "notes": ["Inizio del trattamento con nuovi farmaci."]},
    {"id": 2, "patient_id": 2, "record_date": datetime(2024, 10, 2), "diagnosis": "Diabete di tipo 2",
     "treatment": "Dieta e insulina",
     "notes": ["Monitoraggio regolare dei livelli di zucchero."]},
    {"id": 3, "patient_id": 3, "record_date": datetime(2024, 10, 3), "diagnosis": "Frattura del femore",
     "treatment": "Intervento chirurgico e riabilitazione",
     "notes": ["Recupero post-operatorio in corso."]},
    {"id": 4, "patient_id": 4, "record_date": datetime(2024, 10, 4), "diagnosis": "Asma",
     "treatment": "Inalatori e farmaci antinfiammatori",
     "notes": ["Controllo della funzionalità polmonare necessario."]},
    {"id": 5, "patient_id": 5, "record_date": datetime(2024, 10, 5), "diagnosis": "Gastrite",
     "treatment": "Farmaci antiacidi e modifiche alla dieta",
     "notes": ["Monitoraggio dei sintomi e delle reazioni ai farmaci."]},
]


async def seed_database(session: AsyncSession) -> bool:
    """Insert the fixed seed rows once. Returns False when the store already holds data."""
    existing = await session.scalar(select(func.count()).select_from(Department))
    if existing:
        logger.info("Seed skipped: {count} departments already present", count=existing)
        return False

    # parents before children
    for model, rows in (
        (Department, DEPARTMENTS),
        (Patient, PATIENTS),
        (Staff, STAFF),
        (Appointment, APPOINTMENTS),
        (MedicalRecord, MEDICAL_RECORDS),
    ):
        session.add_all(model(**row) for row in rows)
        await session.flush()

    await session.commit()
    logger.info("Seeded hospital data store")
    return True
