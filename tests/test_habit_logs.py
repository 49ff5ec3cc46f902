"""Tests for the habit log endpoints, including statistics."""

from datetime import datetime, time, timedelta, timezone


def day_at_noon(days_ago):
    today = datetime.now(timezone.utc).date()
    return datetime.combine(today - timedelta(days=days_ago), time(12)).isoformat()


def log_habit(client, headers, habit_id, days_ago=0, **extra):
    payload = {"habitId": habit_id, "completedDate": day_at_noon(days_ago), **extra}
    return client.post("/api/habit-logs", json=payload, headers=headers)


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

def test_log_completion(client, headers, habit):
    resp = log_habit(client, headers, habit["id"], completionCount=2, mood="good", difficulty=3, notes="10 min")
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Habit completion logged successfully"
    data = body["data"]
    assert data["habitId"] == habit["id"]
    assert data["completionCount"] == 2
    assert data["mood"] == "good"
    assert data["notes"] == "10 min"


def test_log_defaults_to_now_and_single_completion(client, headers, habit):
    resp = client.post("/api/habit-logs", json={"habitId": habit["id"]}, headers=headers)
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["completionCount"] == 1
    assert data["completedDate"].startswith(datetime.now(timezone.utc).date().isoformat())


def test_second_log_same_day_rejected(client, headers, habit):
    assert log_habit(client, headers, habit["id"]).status_code == 201
    resp = log_habit(client, headers, habit["id"])
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Habit already logged for this date"}


def test_log_unknown_habit(client, headers):
    resp = log_habit(client, headers, "does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Habit not found"


def test_log_someone_elses_habit(client, other_headers, habit):
    resp = log_habit(client, other_headers, habit["id"])
    assert resp.status_code == 404


def test_log_rejects_out_of_range_values(client, headers, habit):
    assert log_habit(client, headers, habit["id"], completionCount=0).status_code == 400
    assert log_habit(client, headers, habit["id"], difficulty=6).status_code == 400
    resp = log_habit(client, headers, habit["id"], mood="ecstatic")
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_requires_identity(client, habit):
    resp = client.get("/api/habit-logs")
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "User not authenticated"}


def test_list_logs_filters(client, headers, habit):
    for n in range(5):
        log_habit(client, headers, habit["id"], days_ago=n)

    resp = client.get("/api/habit-logs", headers=headers)
    body = resp.json()
    assert body["count"] == 5
    dates = [log["completedDate"] for log in body["data"]]
    assert dates == sorted(dates, reverse=True)

    today = datetime.now(timezone.utc).date()
    resp = client.get("/api/habit-logs", headers=headers, params={
        "habitId": habit["id"],
        "startDate": (today - timedelta(days=3)).isoformat(),
        "endDate": (today - timedelta(days=1)).isoformat(),
    })
    assert resp.json()["count"] == 3

    resp = client.get("/api/habit-logs", headers=headers, params={"limit": 2})
    assert resp.json()["count"] == 2


def test_list_only_own_logs(client, headers, other_headers, habit):
    log_habit(client, headers, habit["id"])
    resp = client.get("/api/habit-logs", headers=other_headers)
    assert resp.json()["count"] == 0


def test_get_update_delete_log(client, headers, habit):
    log_id = log_habit(client, headers, habit["id"]).json()["data"]["id"]

    resp = client.get(f"/api/habit-logs/{log_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == log_id

    resp = client.put(f"/api/habit-logs/{log_id}", json={"completionCount": 4, "mood": "difficult"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["completionCount"] == 4
    assert resp.json()["data"]["mood"] == "difficult"

    resp = client.delete(f"/api/habit-logs/{log_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Habit log deleted successfully"}

    assert client.get(f"/api/habit-logs/{log_id}", headers=headers).status_code == 404


def test_update_ignores_date_and_linkage(client, headers, habit):
    created = log_habit(client, headers, habit["id"]).json()["data"]
    resp = client.put(
        f"/api/habit-logs/{created['id']}",
        json={"completedDate": day_at_noon(10), "habitId": "other"},
        headers=headers,
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "No valid updates provided"


def test_other_user_cannot_touch_log(client, headers, other_headers, habit):
    log_id = log_habit(client, headers, habit["id"]).json()["data"]["id"]
    assert client.get(f"/api/habit-logs/{log_id}", headers=other_headers).status_code == 404
    assert client.delete(f"/api/habit-logs/{log_id}", headers=other_headers).status_code == 404


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------

def test_stats_streaks_and_rate(client, headers, habit):
    for n in (0, 1, 2):
        log_habit(client, headers, habit["id"], days_ago=n, completionCount=2, mood="excellent", difficulty=2)
    log_habit(client, headers, habit["id"], days_ago=10, mood="struggling", difficulty=4)

    resp = client.get(f"/api/habit-logs/stats/{habit['id']}", headers=headers)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["period"] == "30 days"
    assert data["habit"]["id"] == habit["id"]
    assert data["habit"]["name"] == "Meditate"
    assert data["stats"] == {
        "totalCompletions": 7,
        "totalDays": 30,
        "completionRate": "13.3%",
        "currentStreak": 3,
        "longestStreak": 3,
        "averageMood": 4.0,
        "averageDifficulty": 2.5,
    }


def test_stats_custom_window_excludes_older_logs(client, headers, habit):
    log_habit(client, headers, habit["id"], days_ago=0)
    log_habit(client, headers, habit["id"], days_ago=8)

    stats = client.get(f"/api/habit-logs/stats/{habit['id']}", params={"days": 7}, headers=headers).json()["data"]
    assert stats["period"] == "7 days"
    assert stats["stats"]["totalCompletions"] == 1
    assert stats["stats"]["totalDays"] == 7


def test_stats_without_logs(client, headers, habit):
    stats = client.get(f"/api/habit-logs/stats/{habit['id']}", headers=headers).json()["data"]["stats"]
    assert stats["totalCompletions"] == 0
    assert stats["completionRate"] == "0%"
    assert stats["currentStreak"] == 0
    assert stats["longestStreak"] == 0
    assert stats["averageMood"] is None
    assert stats["averageDifficulty"] is None


def test_stats_unknown_or_foreign_habit(client, headers, other_headers, habit):
    assert client.get("/api/habit-logs/stats/nope", headers=headers).status_code == 404
    resp = client.get(f"/api/habit-logs/stats/{habit['id']}", headers=other_headers)
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Habit not found"}


def test_stats_requires_identity(client, habit):
    resp = client.get(f"/api/habit-logs/stats/{habit['id']}")
    assert resp.status_code == 401


def test_stats_rejects_bad_window(client, headers, habit):
    assert client.get(f"/api/habit-logs/stats/{habit['id']}", params={"days": 0}, headers=headers).status_code == 400
    assert client.get(f"/api/habit-logs/stats/{habit['id']}", params={"days": "x"}, headers=headers).status_code == 400


def test_stats_store_failure_is_internal_error(session_factory, headers, habit):
    from fastapi.testclient import TestClient
    from sqlalchemy.exc import OperationalError

    from trackstar.database import get_db
    from trackstar.main import create_app
    from trackstar.services.store import HabitStore

    class BrokenStore(HabitStore):
        def list_logs(self, *args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

    app = create_app(store_factory=BrokenStore, init_database=False, generate_docs=False)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    resp = TestClient(app).get(f"/api/habit-logs/stats/{habit['id']}", headers=headers)
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}
