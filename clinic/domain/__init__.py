"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities with business logic
- interfaces.py: Repository contracts
"""

from .entities import (
    Appointment,
    Bill,
    EHRRecordSet,
    InventoryItem,
    Patient,
    Staff,
)
from .interfaces import (
    IEHRRecordSetRepository,
    IRepository,
    IRepositoryReader,
    IRepositoryWriter,
)

__all__ = [
    # Domain entities
    "Patient",
    "Appointment",
    "EHRRecordSet",
    "Bill",
    "InventoryItem",
    "Staff",
    # Repository interfaces
    "IRepository",
    "IEHRRecordSetRepository",
    # Segregated interfaces
    "IRepositoryReader",
    "IRepositoryWriter",
]
