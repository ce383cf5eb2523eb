"""
Application context owning every repository, identifier generator and service.

One ClinicContext is one clinic's volatile state. The HTTP adapter holds a
single instance; tests build a fresh one per test for isolation.
"""

from datetime import datetime
from typing import Callable, Optional

from clinic.core.identifiers import IdentifierGenerator
from clinic.domain.entities import Appointment, Bill, InventoryItem, Patient, Staff
from clinic.repositories.in_memory_repository import (
    EHRRecordSetRepository,
    InMemoryRepository,
)
from clinic.services.appointment_service import AppointmentService
from clinic.services.billing_service import BillingService
from clinic.services.ehr_service import EHRService
from clinic.services.inventory_service import InventoryService
from clinic.services.patient_service import PatientService
from clinic.services.reference_resolver import CrossReferenceResolver
from clinic.services.staff_service import StaffService


class ClinicContext:
    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.patients: InMemoryRepository[Patient] = InMemoryRepository("Patient")
        self.appointments: InMemoryRepository[Appointment] = InMemoryRepository(
            "Appointment"
        )
        self.ehr_records = EHRRecordSetRepository()
        self.bills: InMemoryRepository[Bill] = InMemoryRepository("Bill")
        self.inventory: InMemoryRepository[InventoryItem] = InMemoryRepository(
            "Inventory item"
        )
        self.staff: InMemoryRepository[Staff] = InMemoryRepository("Staff member")

        self.resolver = CrossReferenceResolver(self.patients)

        self.patient_service = PatientService(
            self.patients, IdentifierGenerator("patient")
        )
        self.appointment_service = AppointmentService(
            self.appointments, IdentifierGenerator("appointment")
        )
        self.ehr_service = EHRService(self.ehr_records)
        self.billing_service = BillingService(
            self.bills, IdentifierGenerator("bill"), clock=clock
        )
        self.inventory_service = InventoryService(
            self.inventory, IdentifierGenerator("inventory_item")
        )
        self.staff_service = StaffService(self.staff, IdentifierGenerator("staff"))
