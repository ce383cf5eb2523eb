from flask import Blueprint

from clinic.controllers import get_clinic
from clinic.core.api_utils import api_response, get_payload, require_credentials
from clinic.schemas.dtos import format_records

ehr_bp = Blueprint("ehr", __name__, url_prefix="/ehr")


@ehr_bp.route("/<int:patient_id>", methods=["GET"])
def load_records(patient_id):
    records = get_clinic().ehr_service.load_records(patient_id)
    return api_response(
        True,
        f"{len(records)} records",
        {"patient_id": patient_id, "records": records, "text": format_records(records)},
    )


@ehr_bp.route("/<int:patient_id>", methods=["POST"])
@require_credentials
def append_record(patient_id):
    data = get_payload()
    clinic = get_clinic()
    clinic.ehr_service.append_record(patient_id, data.get("record"))
    records = clinic.ehr_service.load_records(patient_id)
    return api_response(
        True,
        "Record added successfully.",
        {"patient_id": patient_id, "records": records},
        201,
    )
