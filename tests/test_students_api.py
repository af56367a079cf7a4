"""
HTTP tests for the /api/students endpoints
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from students_api.core.exceptions import QueryError, WriteError
from students_api.main import create_app
from students_api.storage.base import IStudentStorage


@pytest.fixture
def mock_storage():
    """Storage double for error paths"""
    return MagicMock(spec=IStudentStorage)


@pytest.fixture
def mock_client(mock_storage):
    return TestClient(create_app(mock_storage))


def _create(client, name="Ava", email="ava@x.com", age=21):
    return client.post("/api/students", json={"name": name, "email": email, "age": age})


class TestCreateStudent:
    """POST /api/students"""

    def test_create_returns_201_and_student(self, client):
        response = _create(client)

        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Ava", "email": "ava@x.com", "age": 21}

    def test_create_accepts_loose_email(self, client):
        """Email syntax is only checked on update"""
        response = _create(client, email="not-an-email")
        assert response.status_code == 201

    @pytest.mark.parametrize(
        "body",
        [
            {"email": "ava@x.com", "age": 21},
            {"name": "", "email": "ava@x.com", "age": 21},
            {"name": "Ava", "email": "", "age": 21},
            {"name": "Ava", "email": "ava@x.com", "age": -1},
            {"name": "Ava", "email": "ava@x.com", "age": "old"},
            {"name": "Ava", "email": "ava@x.com", "age": "21"},
            {"name": "Ava", "email": "ava@x.com", "age": True},
            {"name": "Ava", "email": "ava@x.com", "age": 21.5},
            {"name": "Ava", "email": "ava@x.com", "age": 10**20},
        ],
    )
    def test_invalid_body_returns_400(self, mock_client, mock_storage, body):
        response = mock_client.post("/api/students", json=body)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        mock_storage.create_student.assert_not_called()

    def test_malformed_json_returns_400(self, mock_client, mock_storage):
        response = mock_client.post(
            "/api/students",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        mock_storage.create_student.assert_not_called()

    def test_write_error_returns_500(self, mock_client, mock_storage):
        mock_storage.create_student.side_effect = WriteError("failed to insert student: disk I/O error")

        response = _create(mock_client)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "WRITE_ERROR"


class TestGetStudent:
    """GET /api/students/{id}"""

    def test_get_existing(self, client):
        _create(client)

        response = client.get("/api/students/1")

        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Ava", "email": "ava@x.com", "age": 21}

    def test_get_missing_returns_404(self, client):
        response = client.get("/api/students/5")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["message"] == "no student found with id 5"
        assert error["details"] == {"id": 5}

    @pytest.mark.parametrize("student_id", ["abc", "0", "-1", "99999999999999999999"])
    def test_invalid_id_returns_400(self, mock_client, mock_storage, student_id):
        response = mock_client.get(f"/api/students/{student_id}")

        assert response.status_code == 400
        mock_storage.get_student_by_id.assert_not_called()

    def test_query_error_returns_500(self, mock_client, mock_storage):
        mock_storage.get_student_by_id.side_effect = QueryError("query error: database is locked")

        response = mock_client.get("/api/students/1")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "QUERY_ERROR"


class TestListStudents:
    """GET /api/students"""

    def test_empty_list(self, client):
        response = client.get("/api/students")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_created_students(self, client):
        _create(client, name="Ava", email="ava@x.com")
        _create(client, name="Liam", email="liam@x.com", age=22)

        response = client.get("/api/students")

        assert response.status_code == 200
        assert sorted(s["name"] for s in response.json()) == ["Ava", "Liam"]

    def test_query_error_returns_500(self, mock_client, mock_storage):
        mock_storage.get_students.side_effect = QueryError("failed to list students")

        response = mock_client.get("/api/students")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "QUERY_ERROR"


class TestDeleteStudent:
    """DELETE /api/students/{id}"""

    def test_delete_then_delete_again(self, client):
        _create(client)

        response = client.delete("/api/students/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "status": "delete successfully"}

        assert client.get("/api/students/1").status_code == 404
        assert client.delete("/api/students/1").status_code == 404

    def test_delete_missing_returns_404(self, client):
        response = client.delete("/api/students/3")
        assert response.status_code == 404

    @pytest.mark.parametrize("student_id", ["abc", "99999999999999999999"])
    def test_invalid_id_returns_400(self, mock_client, mock_storage, student_id):
        response = mock_client.delete(f"/api/students/{student_id}")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        mock_storage.delete_student_by_id.assert_not_called()


class TestUpdateStudent:
    """PUT /api/students"""

    def test_update_existing(self, client):
        _create(client)

        response = client.put(
            "/api/students",
            json={"id": 1, "name": "Ava B", "email": "ava@x.com", "age": 22},
        )

        expected = {"id": 1, "name": "Ava B", "email": "ava@x.com", "age": 22}
        assert response.status_code == 200
        assert response.json() == expected
        assert client.get("/api/students/1").json() == expected

    def test_update_missing_returns_404(self, client):
        response = client.put(
            "/api/students",
            json={"id": 9, "name": "Nobody", "email": "nobody@x.com", "age": 1},
        )

        assert response.status_code == 404
        assert client.get("/api/students").json() == []

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "Ava", "email": "ava@x.com", "age": 21},
            {"id": 1, "name": "Ava", "email": "not-an-email", "age": 21},
            {"id": 1, "name": "", "email": "ava@x.com", "age": 21},
            {"id": 1, "name": "Ava", "email": "ava@x.com", "age": -3},
            {"id": 1, "name": "Ava", "email": "ava@x.com", "age": "21"},
            {"id": 1, "name": "Ava", "email": "ava@x.com", "age": True},
            {"id": "1", "name": "Ava", "email": "ava@x.com", "age": 21},
            {"id": 2**63, "name": "Ava", "email": "ava@x.com", "age": 21},
            {"id": 1, "name": "Ava", "email": "ava@x.com", "age": 10**20},
        ],
    )
    def test_invalid_body_returns_400(self, mock_client, mock_storage, body):
        response = mock_client.put("/api/students", json=body)

        assert response.status_code == 400
        mock_storage.update_student.assert_not_called()

    def test_write_error_returns_500(self, mock_client, mock_storage):
        mock_storage.update_student.side_effect = WriteError("failed to update student 1")

        response = mock_client.put(
            "/api/students",
            json={"id": 1, "name": "Ava", "email": "ava@x.com", "age": 21},
        )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "WRITE_ERROR"


class TestMisc:
    """Root endpoint and unknown routes"""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"

    def test_unknown_route_returns_404_envelope(self, client):
        response = client.get("/api/courses")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "HTTP_ERROR"
