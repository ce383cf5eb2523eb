"""
Appointment service following SOLID principles.
"""

import logging
from typing import Any, List, Optional

from clinic.core.identifiers import IdentifierGenerator
from clinic.core.validation import AppointmentValidator
from clinic.domain.entities import Appointment
from clinic.domain.interfaces import IRepository

logger = logging.getLogger(__name__)


class AppointmentService:
    """Application service for appointment scheduling.

    The selected patient id is checked for presence only. It is not looked up
    in the patient repository when the appointment is committed.
    """

    def __init__(
        self, appointment_repo: IRepository[Appointment], ids: IdentifierGenerator
    ):
        self.appointment_repo = appointment_repo
        self.ids = ids
        self.validator = AppointmentValidator()

    def schedule_appointment(
        self, patient_id: Optional[Any], doctor_name: Any, datetime_text: Any
    ) -> int:
        """Schedule an appointment and return its id.

        Business Rules:
        - A patient must be selected
        - Doctor name and date-time are required
        - Date-time must be written as yyyy-MM-dd HH:mm
        """
        data = self.validator.clean(
            {
                "patient_id": patient_id,
                "doctor_name": doctor_name,
                "appointment_datetime": datetime_text,
            }
        )

        appointment = Appointment(
            id=self.ids.next_id(),
            patient_id=data["patient_id"],
            doctor_name=data["doctor_name"],
            appointment_datetime=data["appointment_datetime"],
        )
        self.appointment_repo.add(appointment)

        logger.info(
            "Appointment scheduled",
            extra={
                "context": {
                    "appointment_id": appointment.id,
                    "patient_id": appointment.patient_id,
                }
            },
        )
        return appointment.id

    def get_appointment(self, appointment_id: int) -> Appointment:
        return self.appointment_repo.get(appointment_id)

    def list_appointments(self) -> List[Appointment]:
        return self.appointment_repo.list_all()
