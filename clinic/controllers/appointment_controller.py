from flask import Blueprint

from clinic.controllers import get_clinic
from clinic.core.api_utils import api_response, get_payload, require_credentials
from clinic.schemas.dtos import AppointmentRow

appointment_bp = Blueprint("appointments", __name__, url_prefix="/appointments")


@appointment_bp.route("/", methods=["GET"])
def list_appointments():
    """List appointments with the patient's name in place of the patient id."""
    clinic = get_clinic()
    rows = [
        AppointmentRow.from_domain(a, clinic.resolver).to_dict()
        for a in clinic.appointment_service.list_appointments()
    ]
    return api_response(True, f"{len(rows)} appointments", rows)


@appointment_bp.route("/", methods=["POST"])
@require_credentials
def schedule_appointment():
    data = get_payload()
    appointment_id = get_clinic().appointment_service.schedule_appointment(
        data.get("patient_id"), data.get("doctor_name"), data.get("date_time")
    )
    return api_response(
        True,
        f"Appointment scheduled with ID {appointment_id}",
        {"id": appointment_id},
        201,
    )
