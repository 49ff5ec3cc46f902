"""Tests for the task endpoints."""


def create_task(client, headers, **fields):
    payload = {"title": "Write report", **fields}
    resp = client.post("/api/tasks", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_create_task_defaults(client, headers):
    task = create_task(client, headers, dueDate="2026-12-01T09:00:00Z")
    assert task["status"] == "pending"
    assert task["priority"] == "medium"
    assert task["dueDate"].startswith("2026-12-01T09:00:00")
    assert task["completedAt"] is None


def test_create_task_validation(client, headers):
    assert client.post("/api/tasks", json={"title": ""}, headers=headers).status_code == 400
    assert client.post("/api/tasks", json={"title": "x", "priority": "urgent"}, headers=headers).status_code == 400


def test_create_task_for_unknown_user(client):
    resp = client.post("/api/tasks", json={"title": "x"}, headers={"x-user-id": "ghost"})
    assert resp.status_code == 404


def test_list_and_filter_tasks(client, headers):
    create_task(client, headers, title="a", priority="high")
    create_task(client, headers, title="b", status="completed")
    create_task(client, headers, title="c")

    body = client.get("/api/tasks", headers=headers).json()
    assert body["count"] == 3

    body = client.get("/api/tasks", params={"status": "completed"}, headers=headers).json()
    assert [t["title"] for t in body["data"]] == ["b"]

    body = client.get("/api/tasks", params={"priority": "high"}, headers=headers).json()
    assert [t["title"] for t in body["data"]] == ["a"]


def test_completing_task_sets_completed_at(client, headers):
    task = create_task(client, headers)
    resp = client.put(f"/api/tasks/{task['id']}", json={"status": "completed"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["completedAt"] is not None

    resp = client.put(f"/api/tasks/{task['id']}", json={"status": "in-progress"}, headers=headers)
    assert resp.json()["data"]["completedAt"] is None


def test_update_task_without_fields(client, headers):
    task = create_task(client, headers)
    resp = client.put(f"/api/tasks/{task['id']}", json={}, headers=headers)
    assert resp.status_code == 400


def test_tasks_are_private(client, headers, other_headers):
    task = create_task(client, headers)
    assert client.get(f"/api/tasks/{task['id']}", headers=other_headers).status_code == 404
    assert client.get("/api/tasks", headers=other_headers).json()["count"] == 0


def test_delete_task(client, headers):
    task = create_task(client, headers)
    resp = client.delete(f"/api/tasks/{task['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["success"] is True
    resp = client.get(f"/api/tasks/{task['id']}", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Task not found"
