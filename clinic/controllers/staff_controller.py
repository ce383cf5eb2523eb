from flask import Blueprint

from clinic.controllers import get_clinic
from clinic.core.api_utils import api_response, get_payload, require_credentials
from clinic.schemas.dtos import StaffRow

staff_bp = Blueprint("staff", __name__, url_prefix="/staff")


@staff_bp.route("/", methods=["GET"])
def list_staff():
    members = get_clinic().staff_service.list_staff()
    rows = [StaffRow.from_domain(s).to_dict() for s in members]
    return api_response(True, f"{len(rows)} staff members", rows)


@staff_bp.route("/", methods=["POST"])
@require_credentials
def add_staff():
    data = get_payload()
    staff_id = get_clinic().staff_service.add_staff(
        data.get("name"), data.get("role"), data.get("contact")
    )
    return api_response(
        True, f"Staff member added with ID {staff_id}", {"id": staff_id}, 201
    )
