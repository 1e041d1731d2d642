# tests/test_packages_api.py
BASE = "/api/entry-exit"


def receive(client, school, student, headers, sender="Courier"):
    response = client.post(
        f"{BASE}/packages",
        json={"school_id": school.id, "student_id": student.id, "sender": sender, "description": "Box of books"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["data"]


def test_received_package_is_pending(client, school, students, staff_headers):
    package = receive(client, school, students[0], staff_headers)
    assert package["status"] == "pending"
    assert package["collected_at"] is None
    assert package["student_name"] == "Amina Khan"


def test_pickup_is_one_way(client, school, students, staff_headers):
    package = receive(client, school, students[0], staff_headers)

    picked = client.post(f"{BASE}/packages/{package['id']}/pickup", headers=staff_headers)
    assert picked.status_code == 200
    assert picked.json()["data"]["status"] == "collected"
    assert picked.json()["data"]["collected_at"] is not None

    again = client.post(f"{BASE}/packages/{package['id']}/pickup", headers=staff_headers)
    assert again.status_code == 409
    assert again.json() == {"success": False, "error": "Package already collected"}


def test_pending_and_filtered_lists(client, school, students, staff_headers):
    first = receive(client, school, students[0], staff_headers)
    receive(client, school, students[1], staff_headers)
    client.post(f"{BASE}/packages/{first['id']}/pickup", headers=staff_headers)

    pending = client.get(f"{BASE}/packages/pending", params={"school_id": school.id}, headers=staff_headers)
    assert [p["student_id"] for p in pending.json()["data"]] == [students[1].id]

    collected = client.get(
        f"{BASE}/packages", params={"school_id": school.id, "status": "collected"}, headers=staff_headers
    )
    assert [p["id"] for p in collected.json()["data"]] == [first["id"]]

    mine = client.get(
        f"{BASE}/packages", params={"school_id": school.id, "student_id": students[0].id}, headers=staff_headers
    )
    assert len(mine.json()["data"]) == 1


def test_unknown_package(client, staff_headers):
    response = client.post(f"{BASE}/packages/404/pickup", headers=staff_headers)
    assert response.status_code == 404


def test_package_for_unknown_student(client, school, staff_headers):
    response = client.post(
        f"{BASE}/packages",
        json={"school_id": school.id, "student_id": 999},
        headers=staff_headers,
    )
    assert response.status_code == 400


def test_student_notes_upsert(client, school, students, staff_headers):
    url = f"{BASE}/students/{students[0].id}/notes"
    empty = client.get(url, params={"school_id": school.id}, headers=staff_headers)
    assert empty.json() == {"success": True, "data": None, "error": None}

    first = client.put(url, json={"school_id": school.id, "notes": "Allergic to peanuts"}, headers=staff_headers)
    second = client.put(url, json={"school_id": school.id, "notes": "Needs inhaler"}, headers=staff_headers)
    assert first.json()["data"]["id"] == second.json()["data"]["id"]

    stored = client.get(url, params={"school_id": school.id}, headers=staff_headers).json()["data"]
    assert stored["notes"] == "Needs inhaler"


def test_student_search(client, school, students, staff_headers):
    def search(term):
        response = client.get(
            f"{BASE}/students/search", params={"school_id": school.id, "q": term}, headers=staff_headers
        )
        assert response.status_code == 200
        return [s["full_name"] for s in response.json()["data"]]

    assert search("amin") == ["Amina Khan"]
    assert search("S-10") == ["Bilal Ahmed", "Amina Khan"]
    assert search("zzz") == []
