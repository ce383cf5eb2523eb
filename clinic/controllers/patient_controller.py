"""
Patient controller for handling HTTP requests following SOLID principles.

This controller:
- Handles HTTP concerns only (Single Responsibility)
- Delegates validation and storage to PatientService
"""

from flask import Blueprint

from clinic.controllers import get_clinic
from clinic.core.api_utils import api_response, get_payload, require_credentials
from clinic.schemas.dtos import PatientRow

patient_bp = Blueprint("patients", __name__, url_prefix="/patients")


@patient_bp.route("/", methods=["GET"])
def list_patients():
    """List registered patients in registration order."""
    patients = get_clinic().patient_service.list_patients()
    rows = [PatientRow.from_domain(p).to_dict() for p in patients]
    return api_response(True, f"{len(rows)} patients", rows)


@patient_bp.route("/choices", methods=["GET"])
def patient_choices():
    """Patients offered for selection on the appointment, EHR and billing forms."""
    choices = get_clinic().resolver.patient_choices()
    return api_response(
        True,
        f"{len(choices)} patients",
        [{"id": patient_id, "label": label} for patient_id, label in choices],
    )


@patient_bp.route("/", methods=["POST"])
@require_credentials
def register_patient():
    data = get_payload()
    patient_id = get_clinic().patient_service.register_patient(
        data.get("name"), data.get("age"), data.get("gender"), data.get("contact")
    )
    return api_response(
        True, f"Patient registered with ID {patient_id}", {"id": patient_id}, 201
    )
