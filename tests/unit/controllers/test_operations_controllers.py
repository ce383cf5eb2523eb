"""
Controller tests for billing, inventory, staff and health endpoints.
"""

import pytest


@pytest.fixture
def patient_id(clinic):
    return clinic.patient_service.register_patient("Asha", 30, "F", "555-1111")


class TestBillingEndpoints:
    def test_add_bill_and_list(self, client, patient_id):
        response = client.post(
            "/bills/", json={"patient_id": patient_id, "amount": "250"}
        )

        assert response.status_code == 201
        rows = client.get("/bills/").get_json()["data"]
        assert rows == [
            {
                "bill_id": 1,
                "patient": "Asha",
                "amount": "250.00",
                "date": "2025-03-07 09:30",
                "paid": "No",
            }
        ]

    def test_pay_twice(self, client, patient_id):
        client.post("/bills/", json={"patient_id": patient_id, "amount": 40})

        first = client.post("/bills/1/pay")
        second = client.post("/bills/1/pay")

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.get_json()["data"]["paid"] == "Yes"

    def test_pay_missing_bill(self, client):
        response = client.post("/bills/7/pay")

        assert response.status_code == 404
        assert response.get_json()["success"] is False

    def test_negative_amount(self, client, patient_id):
        response = client.post("/bills/", json={"patient_id": patient_id, "amount": -1})

        assert response.status_code == 400
        assert response.get_json()["message"] == "Amount must be a positive number."


class TestInventoryEndpoints:
    def test_add_restock_consume(self, client):
        client.post("/inventory/", json={"name": "Gauze", "quantity": 10, "unit": "boxes"})

        restocked = client.post("/inventory/1/restock", json={"amount": 5})
        consumed = client.post("/inventory/1/consume", json={"amount": 15})

        assert restocked.get_json()["data"]["quantity"] == 15
        assert consumed.get_json()["data"]["quantity"] == 0

    def test_over_consumption_conflict(self, client, clinic):
        client.post("/inventory/", json={"name": "Gauze", "quantity": 2, "unit": "boxes"})

        response = client.post("/inventory/1/consume", json={"amount": 3})

        assert response.status_code == 409
        assert response.get_json()["data"] == {"requested": 3, "available": 2}
        assert clinic.inventory_service.get_item(1).quantity == 2

    def test_missing_item(self, client):
        response = client.post("/inventory/3/restock", json={"amount": 1})

        assert response.status_code == 404

    def test_list(self, client):
        client.post("/inventory/", json={"name": "Gloves", "quantity": "50", "unit": "pairs"})

        rows = client.get("/inventory/").get_json()["data"]

        assert rows == [{"item_id": 1, "name": "Gloves", "quantity": 50, "unit": "pairs"}]


class TestStaffEndpoints:
    def test_add_and_list(self, client):
        response = client.post(
            "/staff/", json={"name": "Meera", "role": "Nurse", "contact": "555-2222"}
        )

        assert response.status_code == 201
        assert response.get_json()["message"] == "Staff member added with ID 1"
        rows = client.get("/staff/").get_json()["data"]
        assert rows[0]["role"] == "Nurse"

    def test_missing_field(self, client):
        response = client.post("/staff/", json={"name": "Meera", "role": "Nurse"})

        assert response.status_code == 400
        assert response.get_json()["message"] == "Please fill all fields."


class TestHealthEndpoint:
    def test_reports_counts(self, client, patient_id):
        body = client.get("/health").get_json()

        assert body["message"] == "healthy"
        assert body["data"]["patients"] == 1
        assert body["data"]["bills"] == 0


def test_duplicate_key_maps_to_500(client, clinic):
    from clinic.domain.entities import Staff

    clinic.staff.add(Staff(id=1, name="Ghost", role="None", contact="x"))

    response = client.post(
        "/staff/", json={"name": "Meera", "role": "Nurse", "contact": "x"}
    )

    assert response.status_code == 500
    assert response.get_json()["message"] == "Internal error"


def test_non_string_staff_field_is_rejected(client, clinic):
    response = client.post(
        "/staff/", json={"name": 123, "role": "Nurse", "contact": "555-2222"}
    )

    assert response.status_code == 400
    assert response.get_json()["data"] == {"field": "name"}
    assert clinic.staff_service.list_staff() == []
