import logging
from typing import Any, List

from clinic.core.identifiers import IdentifierGenerator
from clinic.core.validation import StaffValidator
from clinic.domain.entities import Staff
from clinic.domain.interfaces import IRepository

logger = logging.getLogger(__name__)


class StaffService:
    """Application service for the staff list."""

    def __init__(self, staff_repo: IRepository[Staff], ids: IdentifierGenerator):
        self.staff_repo = staff_repo
        self.ids = ids
        self.validator = StaffValidator()

    def add_staff(self, name: Any, role: Any, contact: Any) -> int:
        data = self.validator.clean({"name": name, "role": role, "contact": contact})

        staff = Staff(
            id=self.ids.next_id(),
            name=data["name"],
            role=data["role"],
            contact=data["contact"],
        )
        self.staff_repo.add(staff)

        logger.info("Staff member added", extra={"context": {"staff_id": staff.id}})
        return staff.id

    def get_staff(self, staff_id: int) -> Staff:
        return self.staff_repo.get(staff_id)

    def list_staff(self) -> List[Staff]:
        return self.staff_repo.list_all()
