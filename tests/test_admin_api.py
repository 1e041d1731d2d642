# tests/test_admin_api.py
def test_register_school_and_login(client):
    registered = client.post(
        "/api/auth/register",
        json={
            "email": "head@lakeside.test",
            "password": "pa55word",
            "full_name": "Head Teacher",
            "school_name": "Lakeside",
            "timezone": "Europe/London",
        },
    )
    assert registered.status_code == 201
    assert registered.json()["data"]["token_type"] == "bearer"

    login = client.post("/api/auth/login", json={"email": "head@lakeside.test", "password": "pa55word"})
    token = login.json()["data"]["access_token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"}).json()["data"]
    assert me["role"] == "admin"
    assert me["email"] == "head@lakeside.test"


def test_register_rejects_unknown_timezone(client):
    response = client.post(
        "/api/auth/register",
        json={
            "email": "head@olympus.test",
            "password": "pa55word",
            "full_name": "Head Teacher",
            "school_name": "Olympus",
            "timezone": "Mars/Olympus",
        },
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "Unknown timezone 'Mars/Olympus'" in response.json()["error"]

    login = client.post("/api/auth/login", json={"email": "head@olympus.test", "password": "pa55word"})
    assert login.status_code == 401


def test_stored_unknown_timezone_falls_back_to_default(client, db, school, staff_headers):
    school.timezone = "Mars/Olympus"
    db.commit()

    response = client.get("/api/entry-exit/records", params={"school_id": school.id}, headers=staff_headers)
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_duplicate_registration(client, admin):
    response = client.post(
        "/api/auth/register",
        json={"email": admin.email, "password": "x", "full_name": "Dup", "school_name": "Dup School"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Email already registered"


def test_wrong_password(client, admin):
    response = client.post("/api/auth/login", json={"email": admin.email, "password": "nope"})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_bad_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["error"] == "Could not validate credentials"


def test_admin_creates_desk_user(client, school, admin_headers):
    created = client.post(
        "/api/admin/users",
        json={"email": "gate@hillside.test", "password": "secret", "full_name": "Gate Keeper"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    assert created.json()["data"]["role"] == "staff"
    assert created.json()["data"]["school_id"] == school.id

    users = client.get("/api/admin/users", params={"school_id": school.id}, headers=admin_headers)
    assert "gate@hillside.test" in [u["email"] for u in users.json()["data"]]


def test_student_registry(client, school, admin_headers, staff_headers):
    created = client.post(
        "/api/admin/students",
        json={"school_id": school.id, "first_name": "Chen", "last_name": "Li", "student_number": "S-200"},
        headers=admin_headers,
    ).json()["data"]
    assert created["full_name"] == "Chen Li"

    updated = client.put(
        f"/api/admin/students/{created['id']}",
        json={"is_active": False},
        headers=admin_headers,
    ).json()["data"]
    assert updated["is_active"] is False

    cleared = client.put(
        f"/api/admin/students/{created['id']}",
        json={"first_name": None},
        headers=admin_headers,
    )
    assert cleared.status_code == 400
    assert "first_name: Value error, may not be null" in cleared.json()["error"]

    active = client.get("/api/admin/students", params={"school_id": school.id}, headers=admin_headers)
    assert active.json()["data"] == []
    everyone = client.get(
        "/api/admin/students", params={"school_id": school.id, "include_inactive": True}, headers=admin_headers
    )
    assert len(everyone.json()["data"]) == 1

    assert client.get("/api/admin/students", params={"school_id": school.id}, headers=staff_headers).status_code == 403

    deleted = client.delete(f"/api/admin/students/{created['id']}", headers=admin_headers)
    assert deleted.json()["success"] is True


def test_staff_registry(client, school, admin_headers):
    client.post(
        "/api/admin/staff",
        json={"school_id": school.id, "first_name": "Omar", "last_name": "Farooq", "designation": "Guard"},
        headers=admin_headers,
    )
    staff = client.get("/api/admin/staff", params={"school_id": school.id}, headers=admin_headers).json()["data"]
    assert [s["full_name"] for s in staff] == ["Omar Farooq"]


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
