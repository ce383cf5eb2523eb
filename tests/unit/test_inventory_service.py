"""
Unit tests for InventoryService.
"""

import pytest

from clinic.core.exceptions import (
    InsufficientQuantityError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def service(clinic):
    return clinic.inventory_service


@pytest.fixture
def item_id(service):
    return service.add_item("Gauze", 10, "boxes")


def test_add_item_returns_id_and_stores_item(service, item_id):
    item = service.get_item(item_id)

    assert item_id == 1
    assert (item.name, item.quantity, item.unit) == ("Gauze", 10, "boxes")


@pytest.mark.parametrize(
    "args", [("", 5, "box"), ("Gloves", 0, "pairs"), ("Gloves", "x", "pairs"), ("Gloves", 5, " ")]
)
def test_add_item_validation(service, args):
    with pytest.raises(ValidationError):
        service.add_item(*args)

    assert service.list_items() == []


def test_restock_increases_quantity(service, item_id):
    assert service.restock(item_id, 5).quantity == 15


def test_consume_decreases_quantity(service, item_id):
    assert service.consume(item_id, 4).quantity == 6


def test_consume_exact_quantity_leaves_zero(service, item_id):
    assert service.consume(item_id, 10).quantity == 0


def test_consume_more_than_on_hand_fails_and_leaves_item(service, item_id):
    with pytest.raises(InsufficientQuantityError):
        service.consume(item_id, 11)

    assert service.get_item(item_id).quantity == 10


@pytest.mark.parametrize("operation", ["restock", "consume"])
@pytest.mark.parametrize("amount", [0, -3])
def test_non_positive_amounts_rejected(service, item_id, operation, amount):
    with pytest.raises(ValidationError):
        getattr(service, operation)(item_id, amount)

    assert service.get_item(item_id).quantity == 10


@pytest.mark.parametrize("operation", ["restock", "consume"])
def test_missing_item_reported_before_amount(service, operation):
    with pytest.raises(NotFoundError):
        getattr(service, operation)(99, 0)
