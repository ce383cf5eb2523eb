"""
Health controller - liveness endpoint for monitoring.
"""

import logging

from flask import Blueprint

from clinic.controllers import get_clinic
from clinic.core.api_utils import api_response

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.route("", methods=["GET"])
def health_check():
    """
    Report that the service is up, with the size of each store.

    No authentication required (monitoring endpoint).
    """
    clinic = get_clinic()
    counts = {
        "patients": len(clinic.patients),
        "appointments": len(clinic.appointments),
        "ehr_record_sets": len(clinic.ehr_records),
        "bills": len(clinic.bills),
        "inventory_items": len(clinic.inventory),
        "staff": len(clinic.staff),
    }
    logger.debug("Health check", extra={"context": counts})
    return api_response(True, "healthy", counts)
