"""
Custom exceptions for the clinic core.
Following SOLID principles - centralized error handling.

Every domain operation validates before it mutates, so any of these
exceptions reaching the caller means nothing was written.
"""

from typing import List, Optional


class ClinicError(Exception):
    """Base class for failures surfaced by the clinic core."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(ClinicError):
    """Malformed or missing required input."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ):
        super().__init__(message, field)
        self.errors = errors if errors is not None else [message]


class NotFoundError(ClinicError):
    """A referenced identifier is absent from its repository."""

    def __init__(self, entity_name: str, key):
        super().__init__(f"{entity_name} with ID {key} not found")
        self.entity_name = entity_name
        self.key = key


class InsufficientQuantityError(ClinicError):
    """Inventory consumption would leave a negative quantity."""

    def __init__(self, item_id, requested: int, available: int):
        super().__init__(
            f"Cannot consume {requested} from item {item_id}: only {available} available",
            field="amount",
        )
        self.item_id = item_id
        self.requested = requested
        self.available = available


class DuplicateKeyError(ClinicError):
    """
    Raised when a repository already holds the key being inserted.

    Identifiers come from a monotonic generator, so this is an internal
    consistency failure and never an expected outcome.
    """

    def __init__(self, entity_name: str, key):
        super().__init__(f"{entity_name} with ID {key} already exists")
        self.entity_name = entity_name
        self.key = key
