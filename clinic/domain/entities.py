"""
Domain entities - Pure business logic, no framework dependencies.

Following SOLID principles:
- Single Responsibility: Each entity represents one business concept
- Open/Closed: Entities can be extended without modification

Cross-entity links are held by identifier only (patient_id); an entity never
owns the Patient it points at.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from clinic.core.exceptions import InsufficientQuantityError

DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M"


@dataclass
class Patient:
    """Domain entity representing a registered patient."""

    id: int
    name: str
    age: int
    gender: str
    contact: str

    def __post_init__(self):
        """Validate domain rules."""
        if self.id <= 0:
            raise ValueError("Patient id must be positive")
        if not self.name:
            raise ValueError("Name is required")
        if self.age <= 0:
            raise ValueError("Age must be positive")

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"


@dataclass
class Appointment:
    """Domain entity for a scheduled appointment."""

    id: int
    patient_id: int
    doctor_name: str
    appointment_datetime: datetime

    def __post_init__(self):
        """Validate business rules."""
        if self.patient_id <= 0:
            raise ValueError("Valid patient_id is required")
        if not self.doctor_name:
            raise ValueError("Doctor name is required")

    def __str__(self) -> str:
        return (
            f"{self.id} - PatientID:{self.patient_id} Doctor:{self.doctor_name} "
            f"{self.appointment_datetime.strftime(DISPLAY_DATETIME_FORMAT)}"
        )


@dataclass
class EHRRecordSet:
    """
    Electronic health record entries for one patient.

    At most one set exists per patient; entries are append-only and keep
    insertion order.
    """

    patient_id: int
    records: List[str] = field(default_factory=list)

    def add_record(self, record: str) -> None:
        self.records.append(record)


@dataclass
class Bill:
    """Domain entity for a patient bill."""

    id: int
    patient_id: int
    amount: float
    billing_date: datetime
    paid: bool = False

    def __post_init__(self):
        """Validate business rules."""
        if self.amount <= 0:
            raise ValueError("Amount must be positive")

    def mark_paid(self) -> None:
        """Settle the bill. Paying twice is harmless; a paid bill never reopens."""
        self.paid = True

    def __str__(self) -> str:
        return (
            f"{self.id} - PatientID:{self.patient_id} Amount:{self.amount:.2f} "
            f"Date:{self.billing_date.strftime(DISPLAY_DATETIME_FORMAT)} "
            f"Paid:{'Yes' if self.paid else 'No'}"
        )


@dataclass
class InventoryItem:
    """Domain entity for inventory management."""

    id: int
    name: str
    quantity: int
    unit: str

    def __post_init__(self):
        """Validate business rules."""
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")

    def restock(self, amount: int) -> None:
        self.quantity += amount

    def consume(self, amount: int) -> None:
        """Remove stock; the item is left untouched when not enough is on hand."""
        if amount > self.quantity:
            raise InsufficientQuantityError(self.id, amount, self.quantity)
        self.quantity -= amount


@dataclass
class Staff:
    """Domain entity for a staff member."""

    id: int
    name: str
    role: str
    contact: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Name is required")

    def __str__(self) -> str:
        return f"{self.id} - {self.name} ({self.role})"
