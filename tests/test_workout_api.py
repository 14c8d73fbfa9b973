"""
HTTP tests for the /api/workouts and /api/exercises endpoints.
"""

URI = "/api/workouts"


def workout_payload(**overrides):
    payload = {
        "name": "Name",
        "description": "Description.",
        "exercises": [
            {"name": "Name 1", "description": "Description 1."},
            {"name": "Name 2", "description": "Description 2."},
        ],
    }
    payload.update(overrides)
    return payload


def test_create_assigns_ids(client):
    response = client.post(URI, json=workout_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["id"] > 0
    assert [e["name"] for e in body["exercises"]] == ["Name 1", "Name 2"]
    assert all(e["id"] > 0 for e in body["exercises"])


def test_create_with_empty_name_is_bad_request(client):
    response = client.post(URI, json=workout_payload(name=""))

    assert response.status_code == 400
    assert response.json()["message"] == "Object sent is not valid: [Workout name cannot be empty!]"


def test_update_with_empty_name_is_bad_request(client):
    created = client.post(URI, json=workout_payload()).json()

    response = client.put(URI, json={**created, "name": ""})

    assert response.status_code == 400
    assert response.json()["message"] == "Object sent is not valid: [Workout name cannot be empty!]"
    assert client.get(f"{URI}/{created['id']}").json()["name"] == "Name"


def test_create_with_nameless_exercise_is_bad_request(client):
    response = client.post(URI, json=workout_payload(exercises=[{"name": "", "description": ""}]))

    assert response.status_code == 400
    assert response.json()["message"] == "Object sent is not valid: [Exercise name cannot be empty!]"


def test_create_with_existing_id_conflicts(client):
    created = client.post(URI, json=workout_payload()).json()

    response = client.post(URI, json=created)

    assert response.status_code == 409
    assert response.json()["message"] == f"Workout with id '{created['id']}' already exists."


def test_get_by_id(client):
    created = client.post(URI, json=workout_payload()).json()

    response = client.get(f"{URI}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_workout_is_not_found(client):
    assert client.get(f"{URI}/5").status_code == 404


def test_non_numeric_id_is_bad_request(client):
    response = client.get(f"{URI}/abc")

    assert response.status_code == 400
    assert response.json()["message"].startswith("Object sent is not valid: [workout_id:")


def test_list_returns_bare_list(client):
    first = client.post(URI, json=workout_payload(name="Name 1")).json()
    second = client.post(URI, json=workout_payload(name="Name 2", exercises=[])).json()

    response = client.get(URI)

    assert response.status_code == 200
    assert response.json() == [first, second]


def test_update_replaces_exercises(client):
    created = client.post(URI, json=workout_payload()).json()
    kept = created["exercises"][1]
    changed = {**created, "name": "Renamed", "exercises": [kept, {"name": "New", "description": ""}]}

    response = client.put(URI, json=changed)

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Renamed"
    assert body["exercises"][0] == kept
    assert body["exercises"][1]["name"] == "New"
    assert client.get(f"{URI}/{created['id']}").json() == body


def test_update_with_repeated_exercise_gives_the_copy_a_new_id(client):
    created = client.post(URI, json=workout_payload(exercises=[{"name": "Squat", "description": ""}])).json()
    exercise = created["exercises"][0]

    response = client.put(URI, json={**created, "exercises": [exercise, exercise]})

    assert response.status_code == 200
    first, second = response.json()["exercises"]
    assert first == exercise
    assert second["name"] == "Squat"
    assert second["id"] not in (0, exercise["id"])
    assert client.get(f"{URI}/{created['id']}").json() == response.json()


def test_id_beyond_storage_range_is_bad_request(client):
    response = client.get(f"{URI}/{2 ** 63}")

    assert response.status_code == 400
    assert response.json()["message"].startswith("Object sent is not valid: [workout_id:")


def test_body_id_beyond_storage_range_is_bad_request(client):
    response = client.post(URI, json=workout_payload(id=2 ** 63))

    assert response.status_code == 400
    assert response.json()["message"].startswith("Object sent is not valid: [id:")
    assert client.get(URI).json() == []


def test_update_of_unknown_workout_is_not_found(client):
    response = client.put(URI, json=workout_payload(id=31))

    assert response.status_code == 404
    assert client.get(URI).json() == []


def test_delete_returns_no_content(client):
    created = client.post(URI, json=workout_payload()).json()

    response = client.delete(f"{URI}/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"{URI}/{created['id']}").status_code == 404


def test_delete_of_unknown_workout_succeeds(client):
    assert client.delete(f"{URI}/404").status_code == 204


class TestExercises:

    def test_lists_exercises_of_all_workouts(self, client):
        client.post(URI, json=workout_payload())
        client.post(URI, json=workout_payload(exercises=[{"name": "Plank", "description": "60s"}]))

        response = client.get("/api/exercises")

        assert response.status_code == 200
        assert [e["name"] for e in response.json()] == ["Name 1", "Name 2", "Plank"]

    def test_filter_by_name(self, client):
        client.post(URI, json=workout_payload())

        response = client.get("/api/exercises", params={"name": "name 2"})

        assert response.status_code == 200
        assert [e["description"] for e in response.json()] == ["Description 2."]

    def test_unknown_name_is_not_found(self, client):
        response = client.get("/api/exercises", params={"name": "Plank"})

        assert response.status_code == 404
        assert response.json()["message"] == "Exercise with name 'Plank' not found."

    def test_get_by_id(self, client):
        exercise = client.post(URI, json=workout_payload()).json()["exercises"][0]

        assert client.get(f"/api/exercises/{exercise['id']}").json() == exercise
        assert client.get("/api/exercises/999").status_code == 404

    def test_exercises_go_away_with_their_workout(self, client):
        created = client.post(URI, json=workout_payload()).json()
        client.delete(f"{URI}/{created['id']}")

        assert client.get("/api/exercises").json() == []
