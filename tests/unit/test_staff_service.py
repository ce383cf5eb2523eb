import pytest

from clinic.core.exceptions import ValidationError


def test_add_staff_returns_increasing_ids(clinic):
    service = clinic.staff_service

    first = service.add_staff("Meera", "Nurse", "555-2222")
    second = service.add_staff("Dr. Rao", "Physician", "555-3333")

    assert (first, second) == (1, 2)
    assert [str(s) for s in service.list_staff()] == [
        "1 - Meera (Nurse)",
        "2 - Dr. Rao (Physician)",
    ]


@pytest.mark.parametrize(
    "args", [("", "Nurse", "x"), ("Meera", "", "x"), ("Meera", "Nurse", "")]
)
def test_all_fields_required(clinic, args):
    with pytest.raises(ValidationError):
        clinic.staff_service.add_staff(*args)

    assert clinic.staff_service.list_staff() == []


def test_staff_ids_are_independent_of_patient_ids(clinic):
    clinic.patient_service.register_patient("Asha", 30, "F", "555-1111")
    clinic.patient_service.register_patient("Ravi", 45, "M", "555-3333")

    assert clinic.staff_service.add_staff("Meera", "Nurse", "x") == 1
