# /tests/test_routers.py

"""
End-to-end checks of the HTTP layer: each route reaches its service, and
service failures come back with the right status codes.
"""

import pytest
from fastapi.testclient import TestClient

from campus_admin.main import app
from campus_admin.db.database import get_db

API = "/api/v1"


@pytest.fixture
def client(db_session):
    """A TestClient whose requests all run against the test database session."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the lifespan hook (which touches the
    # real database) does not run.
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def alice_payload():
    return {
        "id": "S1001",
        "firstName": "Alice",
        "lastName": "Nguyen",
        "email": "alice@campus.edu",
        "password": "s3cret-pass",
        "program": "BSc",
        "year": 2,
        "dateOfBirth": "2004-03-15",
    }


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


def test_create_and_fetch_student_never_exposes_password(client, alice_payload):
    response = client.post(f"{API}/students", json=alice_payload)
    assert response.status_code == 201
    body = response.json()
    assert body["firstName"] == "Alice"
    assert body["dateOfBirth"] == "2004-03-15"
    assert "password" not in body

    response = client.get(f"{API}/students/S1001")
    assert response.status_code == 200
    assert "password" not in response.json()


def test_duplicate_student_id_conflicts(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    response = client.post(f"{API}/students", json={**alice_payload, "email": "other@campus.edu"})
    assert response.status_code == 409


def test_get_missing_student_is_404(client):
    response = client.get(f"{API}/students/S-missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Student not found with ID: S-missing"


def test_login_success_and_failure(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)

    ok = client.post(f"{API}/auth/login", json={"username": "alice@campus.edu", "password": "s3cret-pass"})
    assert ok.status_code == 200
    assert ok.json()["user"]["id"] == "S1001"

    wrong_password = client.post(f"{API}/auth/login", json={"username": "alice@campus.edu", "password": "nope"})
    unknown_user = client.post(f"{API}/auth/login", json={"username": "ghost@campus.edu", "password": "nope"})
    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_update_student_with_blank_password_keeps_login(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    update = {**alice_payload, "major": "Physics", "password": ""}
    update.pop("id")

    response = client.put(f"{API}/students/S1001", json=update)
    assert response.status_code == 200
    assert response.json()["major"] == "Physics"

    login = client.post(f"{API}/auth/login", json={"username": "alice@campus.edu", "password": "s3cret-pass"})
    assert login.status_code == 200


def test_delete_student_is_idempotent_but_course_is_not(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    assert client.delete(f"{API}/students/S1001").status_code == 204
    assert client.delete(f"{API}/students/S1001").status_code == 204

    client.post(f"{API}/courses", json={"courseCode": "CS101", "courseName": "Intro"})
    assert client.delete(f"{API}/courses/CS101").status_code == 204
    assert client.delete(f"{API}/courses/CS101").status_code == 404


def test_grade_update_enrolls_then_updates(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    client.post(f"{API}/courses", json={"courseCode": "CS101"})

    first = client.put(f"{API}/academics/grade", json={"studentId": "S1001", "courseCode": "CS101", "grade": "A"})
    second = client.put(f"{API}/academics/grade", json={"studentId": "S1001", "courseCode": "CS101", "grade": "B"})
    assert first.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    enrollments = client.get(f"{API}/enrollments/student/S1001").json()
    assert len(enrollments) == 1
    assert enrollments[0]["grade"] == "B"
    assert enrollments[0]["courseCode"] == "CS101"


def test_grade_update_for_unknown_course_is_404(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    response = client.put(f"{API}/academics/grade", json={"studentId": "S1001", "courseCode": "NOPE1", "grade": "A"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Course not found for code: NOPE1"


def test_fee_lifecycle(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    created = client.post(f"{API}/fees", json={"studentId": "S1001", "amount": 750.5, "dueDate": "2026-11-30", "description": "Tuition"})
    assert created.status_code == 201
    fee_id = created.json()["feeId"]
    assert created.json()["status"] == "Pending"

    summary = client.get(f"{API}/fees/student/S1001/summary").json()
    assert summary == {"totalPending": 750.5, "nextDueDate": "2026-11-30", "status": "OUTSTANDING"}

    paid = client.put(f"{API}/fees/{fee_id}/pay")
    assert paid.json()["status"] == "Paid"
    assert client.get(f"{API}/fees/student/S1001").json()[0]["status"] == "Paid"

    assert client.put(f"{API}/fees/9999/pay").status_code == 404


def test_parent_children_route(client, alice_payload, add_parent_link):
    client.post(f"{API}/students", json=alice_payload)
    add_parent_link("P1", "S1001")
    add_parent_link("P1", "S-deleted")

    response = client.get(f"{API}/parents/P1/children")
    assert response.status_code == 200
    assert response.json() == [
        {"id": "S1001", "firstName": "Alice", "lastName": "Nguyen", "email": "alice@campus.edu"}
    ]


def test_export_students_csv(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    response = client.get(f"{API}/students/export")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "S1001" in response.text


def test_academic_summary_route(client, alice_payload):
    client.post(f"{API}/students", json=alice_payload)
    client.post(f"{API}/courses", json={"courseCode": "CS101", "credits": 4})
    client.post(f"{API}/courses", json={"courseCode": "MA201", "credits": 2})
    client.put(f"{API}/academics/grade", json={"studentId": "S1001", "courseCode": "CS101", "grade": "A"})
    client.put(f"{API}/academics/grade", json={"studentId": "S1001", "courseCode": "MA201", "grade": "C"})

    enrollments = client.get(f"{API}/enrollments/student/S1001").json()
    assert sorted(e["courseCredits"] for e in enrollments) == [2, 4]

    summary = client.get(f"{API}/enrollments/student/S1001/summary").json()
    assert summary == {"gpa": pytest.approx(3.0), "creditsEarned": 6}
