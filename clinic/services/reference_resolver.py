"""
Resolution of patient references held by appointments, bills and health records.
"""

from typing import List, Optional, Tuple

from clinic.domain.entities import Patient
from clinic.domain.interfaces import IRepositoryReader

UNKNOWN_PATIENT = "Unknown"


class CrossReferenceResolver:
    """Looks up referenced patients for display; a missing patient is not an error."""

    def __init__(self, patient_repo: IRepositoryReader[Patient]):
        self.patient_repo = patient_repo

    def resolve_patient(self, patient_id: Optional[int]) -> Optional[Patient]:
        if patient_id is None:
            return None
        return self.patient_repo.get_by_id(patient_id)

    def resolve_patient_name(self, patient_id: Optional[int]) -> str:
        patient = self.resolve_patient(patient_id)
        return patient.name if patient is not None else UNKNOWN_PATIENT

    def patient_choices(self) -> List[Tuple[int, str]]:
        """Selectable patients as (id, label) pairs in registration order."""
        return [(patient.id, str(patient)) for patient in self.patient_repo.list_all()]
