"""
Display rows rendered from domain entities.

Following SOLID principles:
- Single Responsibility: Each row describes one table the front desk sees
- Open/Closed: Rows can be extended without modification

Foreign patient ids are replaced with the patient's name through the
CrossReferenceResolver; a missing patient shows as "Unknown".
"""

from dataclasses import asdict, dataclass
from typing import Iterable

from clinic.core.validation import format_datetime
from clinic.services.reference_resolver import CrossReferenceResolver


@dataclass
class PatientRow:
    id: int
    name: str
    age: int
    gender: str
    contact: str

    @classmethod
    def from_domain(cls, patient) -> "PatientRow":
        return cls(
            id=patient.id,
            name=patient.name,
            age=patient.age,
            gender=patient.gender,
            contact=patient.contact,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AppointmentRow:
    id: int
    patient: str
    doctor: str
    date_time: str

    @classmethod
    def from_domain(
        cls, appointment, resolver: CrossReferenceResolver
    ) -> "AppointmentRow":
        return cls(
            id=appointment.id,
            patient=resolver.resolve_patient_name(appointment.patient_id),
            doctor=appointment.doctor_name,
            date_time=format_datetime(appointment.appointment_datetime),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BillRow:
    """Bill as listed: amount to two decimals, paid as Yes/No."""

    bill_id: int
    patient: str
    amount: str
    date: str
    paid: str

    @classmethod
    def from_domain(cls, bill, resolver: CrossReferenceResolver) -> "BillRow":
        return cls(
            bill_id=bill.id,
            patient=resolver.resolve_patient_name(bill.patient_id),
            amount=f"{bill.amount:.2f}",
            date=format_datetime(bill.billing_date),
            paid="Yes" if bill.paid else "No",
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class InventoryRow:
    item_id: int
    name: str
    quantity: int
    unit: str

    @classmethod
    def from_domain(cls, item) -> "InventoryRow":
        return cls(
            item_id=item.id, name=item.name, quantity=item.quantity, unit=item.unit
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class StaffRow:
    staff_id: int
    name: str
    role: str
    contact: str

    @classmethod
    def from_domain(cls, staff) -> "StaffRow":
        return cls(
            staff_id=staff.id, name=staff.name, role=staff.role, contact=staff.contact
        )

    def to_dict(self) -> dict:
        return asdict(self)


def format_records(records: Iterable[str]) -> str:
    """Render health record entries as a bulleted block, one entry per line."""
    return "".join(f"- {record}\n" for record in records)
