from .dtos import (
    AppointmentRow,
    BillRow,
    InventoryRow,
    PatientRow,
    StaffRow,
    format_records,
)

__all__ = [
    "PatientRow",
    "AppointmentRow",
    "BillRow",
    "InventoryRow",
    "StaffRow",
    "format_records",
]
