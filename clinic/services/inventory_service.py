import logging
from typing import Any, List

from clinic.core.identifiers import IdentifierGenerator
from clinic.core.validation import InventoryItemValidator, QuantityChangeValidator
from clinic.domain.entities import InventoryItem
from clinic.domain.interfaces import IRepository

logger = logging.getLogger(__name__)


class InventoryService:
    def __init__(self, repository: IRepository[InventoryItem], ids: IdentifierGenerator):
        self.repository = repository
        self.ids = ids
        self.item_validator = InventoryItemValidator()
        self.change_validator = QuantityChangeValidator()

    def add_item(self, name: Any, quantity: Any, unit: Any) -> int:
        data = self.item_validator.clean(
            {"name": name, "quantity": quantity, "unit": unit}
        )

        item = InventoryItem(
            id=self.ids.next_id(),
            name=data["name"],
            quantity=data["quantity"],
            unit=data["unit"],
        )
        self.repository.add(item)

        logger.info(
            "Inventory item added",
            extra={"context": {"item_id": item.id, "quantity": item.quantity}},
        )
        return item.id

    def restock(self, item_id: int, amount: Any) -> InventoryItem:
        self.repository.get(item_id)
        data = self.change_validator.clean({"amount": amount})

        item = self.repository.update(item_id, lambda i: i.restock(data["amount"]))
        self._log_change("restocked", item, data["amount"])
        return item

    def consume(self, item_id: int, amount: Any) -> InventoryItem:
        """Take stock out; fails without change when the request exceeds what is on hand."""
        self.repository.get(item_id)
        data = self.change_validator.clean({"amount": amount})

        item = self.repository.update(item_id, lambda i: i.consume(data["amount"]))
        self._log_change("consumed", item, data["amount"])
        return item

    def get_item(self, item_id: int) -> InventoryItem:
        return self.repository.get(item_id)

    def list_items(self) -> List[InventoryItem]:
        return self.repository.list_all()

    def _log_change(self, action: str, item: InventoryItem, amount: int) -> None:
        logger.info(
            f"Inventory item {action}",
            extra={
                "context": {
                    "item_id": item.id,
                    "amount": amount,
                    "quantity": item.quantity,
                }
            },
        )
