"""
Inventory controller for handling HTTP requests following SOLID principles.

This controller:
- Handles HTTP concerns only (Single Responsibility)
- Depends on the InventoryService held by the ClinicContext
"""

from flask import Blueprint

from clinic.controllers import get_clinic
from clinic.core.api_utils import api_response, get_payload, require_credentials
from clinic.schemas.dtos import InventoryRow

inventory_bp = Blueprint("inventory", __name__, url_prefix="/inventory")


@inventory_bp.route("/", methods=["GET"])
def list_inventory():
    """List all inventory items."""
    items = get_clinic().inventory_service.list_items()
    rows = [InventoryRow.from_domain(item).to_dict() for item in items]
    return api_response(True, f"{len(rows)} items", rows)


@inventory_bp.route("/", methods=["POST"])
@require_credentials
def add_inventory():
    """Add a new inventory item."""
    data = get_payload()
    item_id = get_clinic().inventory_service.add_item(
        data.get("name"), data.get("quantity"), data.get("unit")
    )
    return api_response(
        True, f"Inventory item added with ID {item_id}", {"id": item_id}, 201
    )


@inventory_bp.route("/<int:item_id>/restock", methods=["POST"])
@require_credentials
def restock(item_id):
    data = get_payload()
    item = get_clinic().inventory_service.restock(item_id, data.get("amount"))
    return api_response(True, "Item restocked", InventoryRow.from_domain(item).to_dict())


@inventory_bp.route("/<int:item_id>/consume", methods=["POST"])
@require_credentials
def consume(item_id):
    data = get_payload()
    item = get_clinic().inventory_service.consume(item_id, data.get("amount"))
    return api_response(True, "Item consumed", InventoryRow.from_domain(item).to_dict())
