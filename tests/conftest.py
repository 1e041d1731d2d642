# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from schoolgate.api.deps import get_db
from schoolgate.core.security import create_access_token, get_password_hash
from schoolgate.db import Base, School, StaffMember, Student, User
from schoolgate.main import app


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def school(db):
    school = School(name="Hillside Boarding School", timezone="UTC")
    db.add(school)
    db.commit()
    return school


@pytest.fixture
def other_school(db):
    school = School(name="Riverside Academy", timezone="UTC")
    db.add(school)
    db.commit()
    return school


def _make_user(db, school, email, role):
    user = User(
        email=email,
        hashed_password=get_password_hash("secret123"),
        full_name=email.split("@")[0].title(),
        role=role,
        school_id=school.id,
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def admin(db, school):
    return _make_user(db, school, "admin@hillside.test", "admin")


@pytest.fixture
def staff(db, school):
    return _make_user(db, school, "desk@hillside.test", "staff")


@pytest.fixture
def outsider(db, other_school):
    return _make_user(db, other_school, "admin@riverside.test", "admin")


def _headers(user):
    return {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}


@pytest.fixture
def admin_headers(admin):
    return _headers(admin)


@pytest.fixture
def staff_headers(staff):
    return _headers(staff)


@pytest.fixture
def outsider_headers(outsider):
    return _headers(outsider)


@pytest.fixture
def students(db, school):
    rows = [
        Student(school_id=school.id, first_name="Amina", last_name="Khan", student_number="S-101"),
        Student(school_id=school.id, first_name="Bilal", last_name="Ahmed", student_number="S-102"),
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def staff_member(db, school):
    member = StaffMember(school_id=school.id, first_name="Sara", last_name="Malik", designation="Warden")
    db.add(member)
    db.commit()
    return member


@pytest.fixture
def main_gate(client, school, admin_headers):
    """'Main Gate' open Mon 07:00-18:00."""
    response = client.post(
        "/api/entry-exit/checkpoints",
        json={"school_id": school.id, "name": "Main Gate", "mode": "both"},
        headers=admin_headers,
    )
    checkpoint = response.json()["data"]
    client.put(
        f"/api/entry-exit/checkpoints/{checkpoint['id']}/times",
        json={"times": [{"day_of_week": 1, "start_time": "07:00", "end_time": "18:00"}]},
        headers=admin_headers,
    )
    return checkpoint
