"""
Integration tests for the workout template endpoints.

Tests cover:
- Listing (newest first) and creating templates
- Getting, updating and deleting one template
- User scoping
"""
import pytest
from fastapi.testclient import TestClient

from api.deps import get_current_user, get_template_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import SAMPLE_EXERCISES, SAMPLE_TEMPLATE_ID, FakeTemplateRepository

TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "other-user-456"


@pytest.fixture
def repo():
    repo = FakeTemplateRepository()
    repo.seed([{
        "id": SAMPLE_TEMPLATE_ID,
        "user_id": TEST_USER_ID,
        "name": "Strength Day",
        "exercises": SAMPLE_EXERCISES,
        "updated_at": "2020-01-01T00:00:00+00:00",
    }])
    return repo


@pytest.fixture
def app(repo):
    app = create_app(settings=Settings(environment="test", _env_file=None))

    async def mock_user():
        return TEST_USER_ID

    app.dependency_overrides[get_current_user] = mock_user
    app.dependency_overrides[get_template_repo] = lambda: repo

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.mark.integration
class TestListAndCreate:
    """Tests for GET and POST /templates."""

    def test_list_templates(self, client):
        response = client.get("/templates")

        assert response.status_code == 200
        data = response.json()
        assert [t["id"] for t in data] == [SAMPLE_TEMPLATE_ID]
        assert data[0]["exercises"][0]["name"] == "Squat"

    def test_create_template(self, client, repo):
        response = client.post("/templates", json={
            "name": "  Upper A ",
            "exercises": [
                {"name": "Bench Press", "sets": [{"weight": 150, "reps": 5}]},
                "Face Pulls",
            ],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Upper A"
        assert data["exercises"] == [
            {"name": "Bench Press", "sets": [{"weight": 150, "reps": 5}]},
            {"name": "Face Pulls", "sets": []},
        ]
        assert repo.count() == 2

    def test_new_template_listed_first(self, client):
        created = client.post("/templates", json={"name": "Upper A"}).json()

        ids = [t["id"] for t in client.get("/templates").json()]

        assert ids == [created["id"], SAMPLE_TEMPLATE_ID]

    def test_blank_name_rejected(self, client, repo):
        response = client.post("/templates", json={"name": "   ", "exercises": []})

        assert response.status_code == 422
        assert response.json()["detail"] == "Name is required"
        assert repo.count() == 1

    def test_missing_name_rejected(self, client):
        assert client.post("/templates", json={"exercises": []}).status_code == 422


@pytest.mark.integration
class TestSingleTemplate:
    """Tests for GET, PATCH and DELETE /templates/{id}."""

    def test_get_template(self, client):
        response = client.get(f"/templates/{SAMPLE_TEMPLATE_ID}")

        assert response.status_code == 200
        assert response.json()["name"] == "Strength Day"

    def test_get_missing_404(self, client):
        response = client.get("/templates/missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Template not found"

    def test_rename(self, client, repo):
        response = client.patch(f"/templates/{SAMPLE_TEMPLATE_ID}", json={"name": "Lower A"})

        assert response.status_code == 200
        assert response.json()["name"] == "Lower A"
        stored = repo.get_by_id(SAMPLE_TEMPLATE_ID, TEST_USER_ID)
        assert stored["name"] == "Lower A"
        assert stored["exercises"] == SAMPLE_EXERCISES

    def test_replace_exercises(self, client):
        response = client.patch(f"/templates/{SAMPLE_TEMPLATE_ID}", json={
            "exercises": [{"name": "Deadlift", "sets": [{"weight": 315, "reps": None}]}],
        })

        assert response.status_code == 200
        assert response.json()["exercises"] == [
            {"name": "Deadlift", "sets": [{"weight": 315, "reps": 0}]}
        ]

    def test_update_without_fields_rejected(self, client):
        response = client.patch(f"/templates/{SAMPLE_TEMPLATE_ID}", json={})

        assert response.status_code == 422
        assert response.json()["detail"] == "No valid fields to update"

    def test_update_missing_404(self, client):
        assert client.patch("/templates/missing", json={"name": "X"}).status_code == 404

    def test_delete_template(self, client, repo):
        response = client.delete(f"/templates/{SAMPLE_TEMPLATE_ID}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert repo.count() == 0
        assert client.get(f"/templates/{SAMPLE_TEMPLATE_ID}").status_code == 404

    def test_delete_missing_404(self, client):
        assert client.delete("/templates/missing").status_code == 404


@pytest.mark.integration
class TestTemplateScoping:
    """Another user's templates look exactly like missing ones."""

    @pytest.fixture
    def other_client(self, app):
        async def other_user():
            return OTHER_USER_ID

        app.dependency_overrides[get_current_user] = other_user
        return TestClient(app)

    def test_other_user_sees_no_templates(self, other_client):
        assert other_client.get("/templates").json() == []

    def test_other_user_cannot_get(self, other_client):
        assert other_client.get(f"/templates/{SAMPLE_TEMPLATE_ID}").status_code == 404

    def test_other_user_cannot_update(self, other_client, repo):
        response = other_client.patch(f"/templates/{SAMPLE_TEMPLATE_ID}", json={"name": "Mine"})

        assert response.status_code == 404
        assert repo.get_by_id(SAMPLE_TEMPLATE_ID, TEST_USER_ID)["name"] == "Strength Day"

    def test_other_user_cannot_delete(self, other_client, repo):
        assert other_client.delete(f"/templates/{SAMPLE_TEMPLATE_ID}").status_code == 404
        assert repo.count() == 1

    def test_unauthenticated_request_401(self, app):
        del app.dependency_overrides[get_current_user]
        client = TestClient(app)

        assert client.get("/templates").status_code == 401
