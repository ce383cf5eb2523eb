from .appointment_service import AppointmentService
from .billing_service import BillingService
from .context import ClinicContext
from .ehr_service import EHRService
from .inventory_service import InventoryService
from .patient_service import PatientService
from .reference_resolver import UNKNOWN_PATIENT, CrossReferenceResolver
from .staff_service import StaffService

__all__ = [
    "ClinicContext",
    "CrossReferenceResolver",
    "UNKNOWN_PATIENT",
    "PatientService",
    "AppointmentService",
    "EHRService",
    "BillingService",
    "InventoryService",
    "StaffService",
]
