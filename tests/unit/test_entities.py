"""
Unit tests for the domain entities: guards, mutators and string forms.
"""

from datetime import datetime

import pytest

from clinic.core.exceptions import InsufficientQuantityError
from clinic.domain.entities import (
    Appointment,
    Bill,
    EHRRecordSet,
    InventoryItem,
    Patient,
    Staff,
)


class TestPatient:
    def test_label_shows_id_and_name(self, patient):
        assert str(patient) == "1 - Asha"

    def test_non_positive_age_is_rejected(self):
        with pytest.raises(ValueError):
            Patient(id=1, name="Bob", age=0, gender="M", contact="x")


class TestAppointment:
    def test_summary_format(self, appointment):
        assert str(appointment) == "1 - PatientID:1 Doctor:Dr. Rao 2025-03-10 14:00"

    def test_doctor_name_required(self):
        with pytest.raises(ValueError):
            Appointment(
                id=1,
                patient_id=1,
                doctor_name="",
                appointment_datetime=datetime(2025, 1, 1, 8, 0),
            )


class TestEHRRecordSet:
    def test_starts_empty(self):
        assert EHRRecordSet(patient_id=4).records == []

    def test_records_keep_entry_order(self):
        record_set = EHRRecordSet(patient_id=1)

        record_set.add_record("x")
        record_set.add_record("y")

        assert record_set.records == ["x", "y"]

    def test_default_lists_are_not_shared(self):
        first = EHRRecordSet(patient_id=1)
        second = EHRRecordSet(patient_id=2)

        first.add_record("only mine")

        assert second.records == []


class TestBill:
    def test_new_bill_is_unpaid(self, bill):
        assert bill.paid is False

    def test_mark_paid_is_idempotent(self, bill):
        bill.mark_paid()
        bill.mark_paid()

        assert bill.paid is True

    def test_amount_must_be_positive(self):
        with pytest.raises(ValueError):
            Bill(id=1, patient_id=1, amount=0, billing_date=datetime(2025, 1, 1))

    def test_summary_format(self, bill):
        bill.mark_paid()

        assert (
            str(bill) == "1 - PatientID:1 Amount:250.00 Date:2025-03-07 09:30 Paid:Yes"
        )


class TestInventoryItem:
    def test_restock_adds(self, inventory_item):
        inventory_item.restock(5)

        assert inventory_item.quantity == 15

    def test_consume_exact_quantity_leaves_zero(self, inventory_item):
        inventory_item.consume(10)

        assert inventory_item.quantity == 0

    def test_consume_more_than_available_leaves_item_unchanged(self, inventory_item):
        with pytest.raises(InsufficientQuantityError) as exc_info:
            inventory_item.consume(11)

        assert inventory_item.quantity == 10
        assert exc_info.value.requested == 11
        assert exc_info.value.available == 10

    def test_negative_quantity_is_rejected(self):
        with pytest.raises(ValueError):
            InventoryItem(id=1, name="Gloves", quantity=-1, unit="pairs")


class TestStaff:
    def test_label_includes_role(self, staff_member):
        assert str(staff_member) == "1 - Meera (Nurse)"

    def test_name_required(self):
        with pytest.raises(ValueError):
            Staff(id=1, name="", role="Nurse", contact="x")
