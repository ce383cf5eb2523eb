"""
Common validation utilities for the clinic domain operations.

Validators turn raw caller input (strings from a form, numbers from JSON)
into cleaned values. A failed validation raises before any repository is
touched, so operations never partially apply.
"""

import logging
import math
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from clinic.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DATETIME_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}$")

NO_PATIENT_SELECTED = "No patient selected."
FILL_ALL_FIELDS = "Please fill all fields."


class ValidationResult:
    """Container for validation results."""

    def __init__(self):
        self.errors: List[str] = []
        self.fields: List[Optional[str]] = []
        self.is_valid: bool = True
        self.cleaned_data: Dict[str, Any] = {}

    def add_error(self, message: str, field: Optional[str] = None):
        """Add validation error."""
        self.errors.append(message)
        self.fields.append(field)
        self.is_valid = False
        logger.warning(
            f"Validation error: {message}",
            extra={"context": {"field": field}},
        )

    def raise_if_invalid(self) -> None:
        """Raise ValidationError carrying the first error as the user-facing message."""
        if self.is_valid:
            return
        raise ValidationError(self.errors[0], field=self.fields[0], errors=self.errors)


class BaseValidator:
    """Base validator with common validation methods."""

    def validate(
        self, data: Dict[str, Any]
    ) -> ValidationResult:  # pragma: no cover - interface definition
        """Validate data for a specific operation."""
        raise NotImplementedError("Subclasses must implement validate")

    def clean(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and return cleaned data, raising ValidationError on failure."""
        result = self.validate(data)
        result.raise_if_invalid()
        return result.cleaned_data

    @staticmethod
    def is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and value.strip() == "")

    @classmethod
    def validate_required_fields(
        cls,
        data: Dict[str, Any],
        field_names: Sequence[str],
        result: ValidationResult,
        message: str = FILL_ALL_FIELDS,
        text_fields: Sequence[str] = (),
    ) -> bool:
        """
        Report a single error naming the first blank field, if any.

        Fields listed in text_fields must also be strings.
        """
        for field_name in field_names:
            value = data.get(field_name)
            if cls.is_blank(value) or (
                field_name in text_fields and not isinstance(value, str)
            ):
                result.add_error(message, field_name)
                return False
        for field_name in field_names:
            value = data.get(field_name)
            result.cleaned_data[field_name] = (
                value.strip() if isinstance(value, str) else value
            )
        return True

    @staticmethod
    def validate_selected_patient(
        value: Any, result: ValidationResult, field_name: str = "patient_id"
    ) -> Optional[int]:
        """
        Check that a patient is selected.

        Only presence is checked; the patient repository is not consulted.
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            result.add_error(NO_PATIENT_SELECTED, field_name)
            return None
        patient_id = BaseValidator.parse_integer(value)
        if patient_id is None or patient_id <= 0:
            result.add_error(NO_PATIENT_SELECTED, field_name)
            return None
        result.cleaned_data[field_name] = patient_id
        return patient_id

    @staticmethod
    def parse_integer(value: Any) -> Optional[int]:
        """Parse an integer from int, integral float/Decimal or a decimal string."""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, (float, Decimal)):
            if not math.isfinite(value) or value != int(value):
                return None
            return int(value)
        if isinstance(value, str):
            text = value.strip()
            if not re.fullmatch(r"[+-]?\d+", text):
                return None
            return int(text)
        return None

    @classmethod
    def validate_positive_integer(
        cls, value: Any, field_name: str, result: ValidationResult, message: str
    ) -> Optional[int]:
        int_value = cls.parse_integer(value)
        if int_value is None or int_value <= 0:
            result.add_error(message, field_name)
            return None
        result.cleaned_data[field_name] = int_value
        return int_value

    @staticmethod
    def validate_positive_amount(
        value: Any, field_name: str, result: ValidationResult, message: str
    ) -> Optional[float]:
        """Validate a finite amount strictly greater than zero."""
        if isinstance(value, bool):
            result.add_error(message, field_name)
            return None
        try:
            amount = float(value.strip() if isinstance(value, str) else value)
        except (TypeError, ValueError):
            result.add_error(message, field_name)
            return None

        if not math.isfinite(amount) or amount <= 0:
            result.add_error(message, field_name)
            return None

        result.cleaned_data[field_name] = amount
        return amount

    @staticmethod
    def validate_datetime(
        value: Any, field_name: str, result: ValidationResult
    ) -> Optional[datetime]:
        """Parse a date-time written exactly as yyyy-MM-dd HH:mm."""
        if isinstance(value, datetime):
            result.cleaned_data[field_name] = value.replace(second=0, microsecond=0)
            return result.cleaned_data[field_name]

        text = value.strip() if isinstance(value, str) else ""
        try:
            if not DATETIME_PATTERN.match(text):
                raise ValueError(text)
            parsed = datetime.strptime(text, DATETIME_FORMAT)
        except ValueError:
            result.add_error(
                "DateTime format invalid. Use yyyy-MM-dd HH:mm", field_name
            )
            return None

        result.cleaned_data[field_name] = parsed
        return parsed


class PatientValidator(BaseValidator):
    """Validator for patient registration."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        if not self.validate_required_fields(
            data,
            ("name", "age", "gender", "contact"),
            result,
            text_fields=("name", "gender", "contact"),
        ):
            return result

        self.validate_positive_integer(
            data.get("age"), "age", result, "Age must be a positive integer."
        )
        return result


class AppointmentValidator(BaseValidator):
    """Validator for appointment scheduling."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        if self.validate_selected_patient(data.get("patient_id"), result) is None:
            return result

        if not self.validate_required_fields(
            data,
            ("doctor_name", "appointment_datetime"),
            result,
            message="Doctor and DateTime must be provided.",
            text_fields=("doctor_name",),
        ):
            return result

        self.validate_datetime(
            data.get("appointment_datetime"), "appointment_datetime", result
        )
        return result


class EHRRecordValidator(BaseValidator):
    """Validator for health record entries."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        if self.validate_selected_patient(data.get("patient_id"), result) is None:
            return result

        if "text" in data:
            self.validate_required_fields(
                data,
                ("text",),
                result,
                message="Record cannot be empty.",
                text_fields=("text",),
            )
        return result


class BillValidator(BaseValidator):
    """Validator for bill creation."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        if self.validate_selected_patient(data.get("patient_id"), result) is None:
            return result

        if self.is_blank(data.get("amount")):
            result.add_error("Amount must be provided.", "amount")
            return result

        self.validate_positive_amount(
            data.get("amount"), "amount", result, "Amount must be a positive number."
        )
        return result


class InventoryItemValidator(BaseValidator):
    """Validator for new inventory items."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()

        if not self.validate_required_fields(
            data,
            ("name", "quantity", "unit"),
            result,
            text_fields=("name", "unit"),
        ):
            return result

        self.validate_positive_integer(
            data.get("quantity"),
            "quantity",
            result,
            "Quantity must be a positive integer.",
        )
        return result


class QuantityChangeValidator(BaseValidator):
    """Validator for restock and consumption amounts."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()
        self.validate_positive_integer(
            data.get("amount"), "amount", result, "Amount must be a positive integer."
        )
        return result


class StaffValidator(BaseValidator):
    """Validator for staff records."""

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        result = ValidationResult()
        fields = ("name", "role", "contact")
        self.validate_required_fields(data, fields, result, text_fields=fields)
        return result


def format_datetime(value: datetime) -> str:
    """Render a date-time the way it is entered: yyyy-MM-dd HH:mm."""
    return value.strftime(DATETIME_FORMAT)
