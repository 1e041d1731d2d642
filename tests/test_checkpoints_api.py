# tests/test_checkpoints_api.py
import pytest

BASE = "/api/entry-exit"


def test_create_and_list_checkpoints(client, school, admin_headers, staff_headers):
    response = client.post(
        f"{BASE}/checkpoints",
        json={"school_id": school.id, "name": "Hostel Door", "mode": "entry", "description": "Back entrance"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["name"] == "Hostel Door"
    assert body["data"]["mode"] == "entry"
    assert body["data"]["is_active"] is True

    listing = client.get(f"{BASE}/checkpoints", params={"school_id": school.id}, headers=staff_headers)
    assert listing.status_code == 200
    assert [c["name"] for c in listing.json()["data"]] == ["Hostel Door"]


def test_school_id_is_required(client, staff_headers):
    response = client.get(f"{BASE}/checkpoints", headers=staff_headers)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "school_id is required"}


def test_other_school_is_forbidden(client, school, outsider_headers):
    response = client.get(f"{BASE}/checkpoints", params={"school_id": school.id}, headers=outsider_headers)
    assert response.status_code == 403
    assert response.json()["success"] is False


def test_missing_token_is_rejected(client, school):
    response = client.get(f"{BASE}/checkpoints", params={"school_id": school.id})
    assert response.status_code == 401
    assert response.json()["error"] == "Not authenticated"


def test_staff_cannot_create_checkpoints(client, school, staff_headers):
    response = client.post(
        f"{BASE}/checkpoints",
        json={"school_id": school.id, "name": "Side Gate"},
        headers=staff_headers,
    )
    assert response.status_code == 403


def test_invalid_mode_is_a_validation_error(client, school, admin_headers):
    response = client.post(
        f"{BASE}/checkpoints",
        json={"school_id": school.id, "name": "Side Gate", "mode": "sideways"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "mode" in response.json()["error"]


def test_update_only_touches_sent_fields(client, main_gate, admin_headers):
    response = client.put(
        f"{BASE}/checkpoints/{main_gate['id']}",
        json={"is_active": False},
        headers=admin_headers,
    )
    data = response.json()["data"]
    assert data["is_active"] is False
    assert data["name"] == "Main Gate"
    assert data["mode"] == "both"


@pytest.mark.parametrize("field", ["is_active", "name", "mode"])
def test_required_fields_cannot_be_cleared(client, main_gate, admin_headers, field):
    response = client.put(
        f"{BASE}/checkpoints/{main_gate['id']}",
        json={field: None},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert f"{field}: Value error, may not be null" in response.json()["error"]


def test_description_can_be_cleared(client, main_gate, admin_headers):
    url = f"{BASE}/checkpoints/{main_gate['id']}"
    client.put(url, json={"description": "North side"}, headers=admin_headers)
    response = client.put(url, json={"description": None}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["description"] is None

def test_authorized_times_are_replaced_as_a_set(client, main_gate, admin_headers, staff_headers):
    url = f"{BASE}/checkpoints/{main_gate['id']}/times"
    times = client.get(url, headers=staff_headers).json()["data"]
    assert [(t["day_of_week"], t["start_time"], t["end_time"]) for t in times] == [(1, "07:00:00", "18:00:00")]

    response = client.put(
        url,
        json={"times": [
            {"day_of_week": 5, "start_time": "08:00", "end_time": "12:00"},
            {"day_of_week": 2, "start_time": "07:00", "end_time": "09:00"},
        ]},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert [t["day_of_week"] for t in response.json()["data"]] == [2, 5]

    # alias path used by the admin screens
    detail = client.get(f"{BASE}/checkpoints/{main_gate['id']}/authorized-times", headers=staff_headers)
    assert len(detail.json()["data"]) == 2

    cleared = client.put(url, json={"times": []}, headers=admin_headers)
    assert cleared.json()["data"] == []


def test_window_must_open_before_it_closes(client, main_gate, admin_headers):
    response = client.put(
        f"{BASE}/checkpoints/{main_gate['id']}/times",
        json={"times": [{"day_of_week": 1, "start_time": "22:00", "end_time": "06:00"}]},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert "start_time must be before end_time" in response.json()["error"]


def test_day_of_week_out_of_range(client, main_gate, admin_headers):
    response = client.put(
        f"{BASE}/checkpoints/{main_gate['id']}/times",
        json={"times": [{"day_of_week": 7, "start_time": "07:00", "end_time": "08:00"}]},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_checkpoint_detail_includes_windows(client, main_gate, staff_headers):
    response = client.get(f"{BASE}/checkpoints/{main_gate['id']}", headers=staff_headers)
    data = response.json()["data"]
    assert data["name"] == "Main Gate"
    assert len(data["authorized_times"]) == 1


def test_other_schools_checkpoint_is_not_found(client, main_gate, outsider_headers):
    response = client.get(f"{BASE}/checkpoints/{main_gate['id']}", headers=outsider_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Checkpoint not found"}


def test_delete_checkpoint(client, school, main_gate, admin_headers, staff_headers):
    response = client.delete(f"{BASE}/checkpoints/{main_gate['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["success"] is True

    listing = client.get(f"{BASE}/checkpoints", params={"school_id": school.id}, headers=staff_headers)
    assert listing.json()["data"] == []
    assert client.get(f"{BASE}/checkpoints/{main_gate['id']}", headers=staff_headers).status_code == 404
