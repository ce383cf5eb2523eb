"""
Billing service following SOLID principles.
"""

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional

from clinic.core.config import get_app_timezone
from clinic.core.identifiers import IdentifierGenerator
from clinic.core.validation import BillValidator
from clinic.domain.entities import Bill
from clinic.domain.interfaces import IRepository

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(get_app_timezone())


class BillingService:
    """Application service for bills and their payment flag."""

    def __init__(
        self,
        bill_repo: IRepository[Bill],
        ids: IdentifierGenerator,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.bill_repo = bill_repo
        self.ids = ids
        self.clock = clock or _now
        self.validator = BillValidator()

    def add_bill(self, patient_id: Optional[Any], amount: Any) -> int:
        """Create an unpaid bill stamped with the current time and return its id.

        Business Rules:
        - A patient must be selected
        - Amount must be a finite number greater than zero
        """
        data = self.validator.clean({"patient_id": patient_id, "amount": amount})

        bill = Bill(
            id=self.ids.next_id(),
            patient_id=data["patient_id"],
            amount=data["amount"],
            billing_date=self.clock(),
        )
        self.bill_repo.add(bill)

        logger.info(
            "Bill created",
            extra={
                "context": {
                    "bill_id": bill.id,
                    "patient_id": bill.patient_id,
                    "amount": bill.amount,
                }
            },
        )
        return bill.id

    def mark_bill_paid(self, bill_id: int) -> Bill:
        """Mark a bill paid. Repeating the call on a paid bill changes nothing."""
        bill = self.bill_repo.update(bill_id, lambda b: b.mark_paid())
        logger.info("Bill marked paid", extra={"context": {"bill_id": bill_id}})
        return bill

    def get_bill(self, bill_id: int) -> Bill:
        return self.bill_repo.get(bill_id)

    def list_bills(self) -> List[Bill]:
        return self.bill_repo.list_all()
