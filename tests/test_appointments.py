"""
Tests for the appointment endpoints
"""
from conftest import JANE, bearer


def create(client, **overrides):
    return client.post("/api/appointments", json={**JANE, **overrides})


def test_create_appointment_is_public(client):
    response = create(client, details="Two bedrooms")
    assert response.status_code == 201

    body = response.json()
    assert isinstance(body["id"], int)
    assert body["createdAt"]
    assert body["name"] == "Jane Doe"
    assert body["serviceType"] == "carpet"
    assert body["preferredDate"] == "2025-06-01"
    assert body["preferredTime"] is None
    assert body["details"] == "Two bedrooms"


def test_created_appointment_appears_in_list(client, auth_headers):
    created = create(client).json()

    response = client.get("/api/appointments", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [created]


def test_list_is_newest_first(client, auth_headers):
    first = create(client, name="First Customer").json()
    second = create(client, name="Second Customer").json()

    ids = [a["id"] for a in client.get("/api/appointments", headers=auth_headers).json()]
    assert ids == [second["id"], first["id"]]


def test_create_missing_field_is_rejected(client):
    payload = dict(JANE)
    del payload["email"]

    response = client.post("/api/appointments", json=payload)
    assert response.status_code == 400
    assert "email" in response.json()["message"]


def test_create_blank_name_is_rejected(client):
    response = create(client, name="   ")
    assert response.status_code == 400
    assert "name is required" in response.json()["message"]


def test_create_rejects_unknown_service_type(client):
    response = create(client, serviceType="windows")
    assert response.status_code == 400
    assert "Service type must be one of" in response.json()["message"]


def test_create_rejects_bad_email(client):
    response = create(client, email="not-an-email")
    assert response.status_code == 400
    assert "Invalid email format" in response.json()["message"]


def test_create_without_body_is_rejected(client):
    response = client.post("/api/appointments")
    assert response.status_code == 400
    assert response.json()["message"].startswith("Validation error")


def test_admin_routes_require_token(client):
    appointment_id = create(client).json()["id"]

    assert client.get("/api/appointments").status_code == 401
    assert client.get(f"/api/appointments/{appointment_id}").status_code == 401
    assert client.put(f"/api/appointments/{appointment_id}", json={}).status_code == 401
    assert client.delete(f"/api/appointments/{appointment_id}").status_code == 401

    response = client.get("/api/appointments", headers=bearer("not-the-token"))
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized."}


def test_get_appointment_by_id(client, auth_headers):
    created = create(client).json()

    response = client.get(f"/api/appointments/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == created

    assert client.get("/api/appointments/9999", headers=auth_headers).status_code == 404


def test_booking_scenario(client, auth_headers):
    created = create(client)
    assert created.status_code == 201
    created = created.json()

    response = client.put(
        f"/api/appointments/{created['id']}",
        json={"preferredTime": "2:00 PM"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["preferredTime"] == "2:00 PM"
    assert {k: v for k, v in updated.items() if k != "preferredTime"} == {
        k: v for k, v in created.items() if k != "preferredTime"
    }

    response = client.delete(f"/api/appointments/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Appointment deleted."}

    ids = [a["id"] for a in client.get("/api/appointments", headers=auth_headers).json()]
    assert created["id"] not in ids


def test_update_can_clear_optional_field(client, auth_headers):
    created = create(client, preferredTime="9:00 AM").json()

    response = client.put(
        f"/api/appointments/{created['id']}", json={"preferredTime": None}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["preferredTime"] is None


def test_update_cannot_clear_required_field(client, auth_headers):
    created = create(client).json()

    response = client.put(
        f"/api/appointments/{created['id']}", json={"phone": None}, headers=auth_headers
    )
    assert response.status_code == 400
    assert "phone is required" in response.json()["message"]


def test_update_missing_appointment(client, auth_headers):
    response = client.put("/api/appointments/9999", json={"name": "X Y"}, headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"message": "Appointment not found."}


def test_invalid_id_is_rejected(client, auth_headers):
    for method in ("put", "delete"):
        kwargs = {"json": {}} if method == "put" else {}
        response = getattr(client, method)("/api/appointments/abc", headers=auth_headers, **kwargs)
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid appointment ID."}

    # Integers the id column cannot hold are invalid too, not a database error
    for raw_id in ("99999999999999999999", "2147483648", "0", "-5"):
        response = client.get(f"/api/appointments/{raw_id}", headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid appointment ID."}

    assert client.get("/api/appointments/2147483647", headers=auth_headers).status_code == 404


def test_delete_twice(client, auth_headers):
    appointment_id = create(client).json()["id"]

    assert client.delete("/api/appointments/9999", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/appointments/{appointment_id}", headers=auth_headers).status_code == 200
    assert client.delete(f"/api/appointments/{appointment_id}", headers=auth_headers).status_code == 404
