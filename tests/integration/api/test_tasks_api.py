"""
API tests for /api/tasks.
"""

import uuid

import pytest


@pytest.fixture
def alice(auth_headers):
    return auth_headers("alice@example.com")


@pytest.fixture
def bob(auth_headers):
    return auth_headers("bob@example.com")


@pytest.fixture
def project_id(client, alice):
    return client.post("/api/projects", json={"name": "Alpha"}, headers=alice).json()["project"]["id"]


class TestTasks:

    def test_create_defaults_to_todo(self, client, alice, project_id):
        response = client.post("/api/tasks", json={"projectId": project_id, "title": "Write docs"}, headers=alice)

        assert response.status_code == 201
        task = response.json()
        assert task["status"] == "TODO"
        assert task["projectId"] == project_id
        assert {"id", "title", "status", "projectId", "userId", "createdAt", "updatedAt"} == set(task)

    def test_create_in_foreign_project(self, client, bob, project_id):
        response = client.post("/api/tasks", json={"projectId": project_id, "title": "Sneaky"}, headers=bob)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Project not found"
        assert client.get("/api/tasks", headers=bob).json() == []

    def test_invalid_status_and_project_id(self, client, alice):
        response = client.post(
            "/api/tasks", json={"projectId": "nope", "title": "x", "status": "LATER"}, headers=alice
        )

        assert response.status_code == 400
        assert {d["path"] for d in response.json()["error"]["details"]} == {"projectId", "status"}

    def test_list_filters_and_order(self, client, alice, project_id):
        first = client.post("/api/tasks", json={"projectId": project_id, "title": "First"}, headers=alice).json()
        second = client.post(
            "/api/tasks", json={"projectId": project_id, "title": "Second", "status": "DONE"}, headers=alice
        ).json()

        everything = client.get("/api/tasks", headers=alice).json()
        done = client.get("/api/tasks", params={"status": "DONE"}, headers=alice).json()
        in_project = client.get("/api/tasks", params={"projectId": project_id}, headers=alice).json()

        assert [t["id"] for t in everything] == [second["id"], first["id"]]
        assert [t["id"] for t in done] == [second["id"]]
        assert len(in_project) == 2

    def test_update_get_delete(self, client, alice, project_id):
        task = client.post("/api/tasks", json={"projectId": project_id, "title": "First"}, headers=alice).json()
        url = f"/api/tasks/{task['id']}"

        updated = client.patch(url, json={"status": "DOING"}, headers=alice)
        assert updated.status_code == 200
        assert updated.json()["status"] == "DOING"
        assert updated.json()["title"] == "First"

        assert client.get(url, headers=alice).json()["status"] == "DOING"
        assert client.delete(url, headers=alice).json() == {"deleted": True}
        assert client.get(url, headers=alice).status_code == 404

    def test_empty_update_rejected(self, client, alice, project_id):
        task = client.post("/api/tasks", json={"projectId": project_id, "title": "First"}, headers=alice).json()

        response = client.patch(f"/api/tasks/{task['id']}", json={}, headers=alice)

        assert response.status_code == 400

    def test_other_user_gets_404(self, client, alice, bob, project_id):
        task = client.post("/api/tasks", json={"projectId": project_id, "title": "First"}, headers=alice).json()
        url = f"/api/tasks/{task['id']}"

        for response in (
            client.get(url, headers=bob),
            client.patch(url, json={"title": "Mine"}, headers=bob),
            client.delete(url, headers=bob),
        ):
            assert response.status_code == 404
            assert response.json()["error"]["message"] == "Task not found"

    def test_project_delete_removes_tasks(self, client, alice, project_id):
        client.post("/api/tasks", json={"projectId": project_id, "title": "First"}, headers=alice)

        client.delete(f"/api/projects/{project_id}", headers=alice)

        assert client.get("/api/tasks", headers=alice).json() == []

    def test_unknown_task(self, client, alice):
        assert client.get(f"/api/tasks/{uuid.uuid4()}", headers=alice).status_code == 404
