from flask import Blueprint

from clinic.controllers import get_clinic
from clinic.core.api_utils import api_response, get_payload, require_credentials
from clinic.schemas.dtos import BillRow

billing_bp = Blueprint("bills", __name__, url_prefix="/bills")


@billing_bp.route("/", methods=["GET"])
def list_bills():
    clinic = get_clinic()
    rows = [
        BillRow.from_domain(b, clinic.resolver).to_dict()
        for b in clinic.billing_service.list_bills()
    ]
    return api_response(True, f"{len(rows)} bills", rows)


@billing_bp.route("/", methods=["POST"])
@require_credentials
def add_bill():
    data = get_payload()
    bill_id = get_clinic().billing_service.add_bill(
        data.get("patient_id"), data.get("amount")
    )
    return api_response(
        True, f"Bill added successfully with ID {bill_id}", {"id": bill_id}, 201
    )


@billing_bp.route("/<int:bill_id>/pay", methods=["POST"])
@require_credentials
def pay_bill(bill_id):
    """Mark a bill paid; paying an already-paid bill succeeds again."""
    clinic = get_clinic()
    bill = clinic.billing_service.mark_bill_paid(bill_id)
    return api_response(
        True, "Bill marked as paid", BillRow.from_domain(bill, clinic.resolver).to_dict()
    )
