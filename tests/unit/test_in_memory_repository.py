import pytest

from clinic.core.exceptions import DuplicateKeyError, NotFoundError
from clinic.domain.entities import InventoryItem, Patient
from clinic.repositories.in_memory_repository import (
    EHRRecordSetRepository,
    InMemoryRepository,
)


def make_patient(patient_id, name="Test Patient"):
    return Patient(id=patient_id, name=name, age=40, gender="M", contact="555-0000")


@pytest.fixture
def repo():
    return InMemoryRepository("Patient")


def test_add_then_get_returns_same_entity(repo):
    patient = make_patient(1)

    repo.add(patient)

    assert repo.get(1) is patient
    assert 1 in repo
    assert len(repo) == 1


def test_add_duplicate_key_raises(repo):
    repo.add(make_patient(1))

    with pytest.raises(DuplicateKeyError):
        repo.add(make_patient(1, name="Other"))

    assert repo.get(1).name == "Test Patient"


def test_get_missing_raises_not_found(repo):
    with pytest.raises(NotFoundError) as exc_info:
        repo.get(99)

    assert exc_info.value.key == 99
    assert "Patient" in exc_info.value.message


def test_get_by_id_returns_none_when_missing(repo):
    assert repo.get_by_id(99) is None


def test_list_all_keeps_insertion_order_not_key_order(repo):
    for patient_id in (3, 1, 2):
        repo.add(make_patient(patient_id))

    assert [p.id for p in repo.list_all()] == [3, 1, 2]


def test_list_all_reflects_later_writes(repo):
    first = repo.list_all()
    repo.add(make_patient(1))

    assert first == []
    assert [p.id for p in repo.list_all()] == [1]


def test_update_mutates_stored_entity_in_place():
    repo = InMemoryRepository("Inventory item")
    item = InventoryItem(id=1, name="Gauze", quantity=3, unit="boxes")
    repo.add(item)

    updated = repo.update(1, lambda i: i.restock(2))

    assert updated is item
    assert repo.get(1).quantity == 5


def test_update_missing_raises_not_found(repo):
    mutator_calls = []

    with pytest.raises(NotFoundError):
        repo.update(5, mutator_calls.append)

    assert mutator_calls == []


class TestEHRRecordSetRepository:
    def test_get_or_create_creates_once(self):
        repo = EHRRecordSetRepository()

        first = repo.get_or_create(7)
        second = repo.get_or_create(7)

        assert first is second
        assert len(repo) == 1
        assert first.records == []

    def test_sets_are_keyed_by_patient(self):
        repo = EHRRecordSetRepository()

        repo.get_or_create(2)
        repo.get_or_create(1)

        assert [rs.patient_id for rs in repo.list_all()] == [2, 1]
        assert repo.get(1).patient_id == 1
