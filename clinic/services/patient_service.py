"""
Patient service following SOLID principles.
"""

import logging
from typing import Any, List

from clinic.core.identifiers import IdentifierGenerator
from clinic.core.validation import PatientValidator
from clinic.domain.entities import Patient
from clinic.domain.interfaces import IRepository

logger = logging.getLogger(__name__)


class PatientService:
    """Application service for patient registration and lookup."""

    def __init__(self, patient_repo: IRepository[Patient], ids: IdentifierGenerator):
        self.patient_repo = patient_repo
        self.ids = ids
        self.validator = PatientValidator()

    def register_patient(self, name: Any, age: Any, gender: Any, contact: Any) -> int:
        """Register a patient and return the new patient id.

        Business Rules:
        - Name, age, gender and contact are all required
        - Age must be a positive integer
        """
        data = self.validator.clean(
            {"name": name, "age": age, "gender": gender, "contact": contact}
        )

        patient = Patient(
            id=self.ids.next_id(),
            name=data["name"],
            age=data["age"],
            gender=data["gender"],
            contact=data["contact"],
        )
        self.patient_repo.add(patient)

        logger.info(
            "Patient registered",
            extra={"context": {"patient_id": patient.id}},
        )
        return patient.id

    def get_patient(self, patient_id: int) -> Patient:
        return self.patient_repo.get(patient_id)

    def list_patients(self) -> List[Patient]:
        return self.patient_repo.list_all()
