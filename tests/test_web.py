"""Tests for the JSON web API."""

import pytest
from fastapi.testclient import TestClient

from lift_log.web import create_app


@pytest.fixture
def client(temp_db_path):
    with TestClient(create_app(temp_db_path)) as client:
        yield client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_startup_seeds_presets(client):
    response = client.get("/programs")

    assert [p["id"] for p in response.json()] == ["push-pull-legs", "full-body"]


class TestWorkouts:
    """Logging, editing and deleting workouts."""

    def test_log_workout(self, client):
        response = client.post(
            "/workouts",
            json={"category": "legs", "exercise": "Squats", "reps": 8, "weight": 80},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["exercise"] == "Squats"
        assert data["reps"] == 8
        assert data["programId"] is None
        assert len(data["id"]) == 8

        assert [w["id"] for w in client.get("/workouts").json()] == [data["id"]]

    def test_invalid_workout(self, client):
        response = client.post(
            "/workouts", json={"category": "legs", "exercise": "", "reps": 8, "weight": 80}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Please enter an exercise"}
        assert client.get("/workouts").json() == []

    def test_edit_and_delete(self, client):
        entry_id = client.post(
            "/workouts",
            json={"category": "core", "exercise": "Plank", "reps": 1, "weight": 0},
        ).json()["id"]

        response = client.put(f"/workouts/{entry_id}", json={"reps": 3, "programId": "full-body"})
        assert response.status_code == 200
        assert response.json()["reps"] == 3
        assert response.json()["programTitle"] == "Full Body Blast"

        response = client.delete(f"/workouts/{entry_id}")
        assert response.json() == {"status": "deleted", "id": entry_id}
        assert client.get("/workouts").json() == []

    def test_edit_with_utc_date(self, client):
        entry_id = client.post(
            "/workouts",
            json={"category": "legs", "exercise": "Squats", "reps": 8, "weight": 80},
        ).json()["id"]

        response = client.put(f"/workouts/{entry_id}", json={"date": "2024-01-15T10:00:00Z"})
        assert response.status_code == 200
        assert not response.json()["date"].endswith("+00:00")

        response = client.get("/history")
        assert response.status_code == 200
        assert response.json()["workouts"] == []

    def test_unknown_workout(self, client):
        assert client.put("/workouts/nope", json={"reps": 3}).status_code == 404
        assert client.delete("/workouts/nope").status_code == 404


class TestHistory:
    """History filters."""

    def test_default_filters(self, client):
        data = client.get("/history").json()
        assert data["filters"] == {
            "category": "all",
            "timeframe": "lastWeek",
            "start": None,
            "end": None,
            "program": "all",
        }
        assert data["workouts"] == []

    def test_category_filter(self, client):
        client.post("/workouts", json={"category": "legs", "exercise": "Squats", "reps": 8, "weight": 80})
        client.post("/workouts", json={"category": "chest", "exercise": "Bench Press", "reps": 10, "weight": 40})

        response = client.put("/history/filters", json={"category": "chest"})
        assert response.json()["category"] == "chest"

        workouts = client.get("/history").json()["workouts"]
        assert [w["exercise"] for w in workouts] == ["Bench Press"]

    def test_match_category_or_program(self, client):
        client.post("/workouts", json={"category": "legs", "exercise": "Squats", "reps": 8, "weight": 80})
        client.post("/programs/full-body/apply")
        client.delete("/history/filters/program")

        workouts = client.get("/history", params={"match": "legs"}).json()["workouts"]
        assert [w["exercise"] for w in workouts] == ["Squats"]

        workouts = client.get("/history", params={"match": "full-body"}).json()["workouts"]
        assert len(workouts) == 3

    def test_custom_range(self, client):
        client.post("/workouts", json={"category": "legs", "exercise": "Squats", "reps": 8, "weight": 80})

        response = client.put(
            "/history/filters",
            json={"timeframe": "custom", "start": "2000-01-01", "end": "2000-01-31"},
        )
        assert response.json()["start"] == "2000-01-01"

        assert client.get("/history").json()["workouts"] == []

    def test_invalid_filter(self, client):
        response = client.put("/history/filters", json={"timeframe": "lastYear"})
        assert response.status_code == 400
        assert client.get("/history/filters").json()["timeframe"] == "lastWeek"


class TestPrograms:
    """Program routes."""

    def test_apply_filters_history_to_program(self, client):
        client.post("/workouts", json={"category": "legs", "exercise": "Lunges", "reps": 8, "weight": 20})

        response = client.post("/programs/full-body/apply")
        assert response.status_code == 200
        assert [w["exercise"] for w in response.json()] == ["Squats", "Pull-Ups", "Plank"]

        data = client.get("/history").json()
        assert data["filters"]["program"] == "full-body"
        assert len(data["workouts"]) == 3

        client.delete("/history/filters/program")
        assert len(client.get("/history").json()["workouts"]) == 4

    def test_delete_active_program_resets_filter(self, client):
        client.get("/programs/push-pull-legs/history")

        response = client.delete("/programs/push-pull-legs")

        assert response.json()["programFilter"] == "all"
        assert client.get("/programs/push-pull-legs").status_code == 404

    def test_create_program(self, client):
        response = client.post("/programs")

        assert response.status_code == 201
        assert response.json()["title"] == "New Program"
        assert response.json()["id"].startswith("program-")

    def test_update_program(self, client):
        response = client.put(
            "/programs/full-body",
            json={
                "title": " Full Body ",
                "exercises": [
                    {"name": "Front Squats", "substitutes": "Goblet Squats, Lunges", "defaultReps": 5, "defaultWeight": 60},
                    {"name": "  ", "defaultReps": 10},
                ],
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": "full-body",
            "title": "Full Body",
            "exercises": [
                {
                    "name": "Front Squats",
                    "substitutes": ["Goblet Squats", "Lunges"],
                    "defaultReps": 5,
                    "defaultWeight": 60,
                }
            ],
        }

    def test_blank_title_rejected(self, client):
        before = client.get("/programs/full-body").json()

        response = client.put("/programs/full-body", json={"title": "  ", "exercises": []})

        assert response.status_code == 400
        assert client.get("/programs/full-body").json() == before

    def test_unknown_program(self, client):
        assert client.post("/programs/nope/apply").status_code == 404
        assert client.put("/programs/nope", json={"title": "X"}).status_code == 404


def test_dark_mode(client):
    assert client.get("/settings/dark-mode").json() == {"enabled": False}

    client.put("/settings/dark-mode", json={"enabled": True})

    assert client.get("/settings/dark-mode").json() == {"enabled": True}
