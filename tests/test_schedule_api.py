"""
HTTP tests for the /api/schedule endpoints.
"""

URI = "/api/schedule"


def schedule_payload(**overrides):
    payload = {
        "name": "Name",
        "description": "Description",
        "trainings": [],
        "amountOfTrainingsPerWeek": 1,
    }
    payload.update(overrides)
    return payload


def test_create_returns_created_entity(client):
    response = client.post(URI, json=schedule_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["id"] > 0
    assert body == {**schedule_payload(), "id": body["id"]}


def test_create_with_empty_name_is_bad_request(client):
    response = client.post(URI, json=schedule_payload(name=""))

    assert response.status_code == 400
    assert response.json()["message"] == "Object sent is not valid: [Schedule name cannot be empty!]"


def test_create_with_empty_description_is_created(client):
    response = client.post(URI, json=schedule_payload(description=""))

    assert response.status_code == 201
    assert response.json()["description"] == ""


def test_create_without_trainings_per_week_is_bad_request(client):
    response = client.post(URI, json=schedule_payload(amountOfTrainingsPerWeek=0))

    assert response.status_code == 400
    assert response.json()["message"] == (
        "Object sent is not valid: [Schedule needs at least one training per week!]"
    )


def test_create_lists_every_violation(client):
    response = client.post(URI, json=schedule_payload(name="", amountOfTrainingsPerWeek=0))

    assert response.status_code == 400
    assert response.json()["message"] == (
        "Object sent is not valid: [Schedule name cannot be empty!, "
        "Schedule needs at least one training per week!]"
    )


def test_create_with_wrong_type_is_bad_request(client):
    response = client.post(URI, json=schedule_payload(amountOfTrainingsPerWeek="lots"))

    assert response.status_code == 400
    assert response.json()["message"].startswith("Object sent is not valid: [amountOfTrainingsPerWeek:")


def test_full_lifecycle(client):
    created = client.post(URI, json=schedule_payload()).json()
    schedule_id = created["id"]

    duplicate = client.post(URI, json=created)
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == "Resource already exists."

    fetched = client.get(f"{URI}/{schedule_id}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    deleted = client.delete(f"{URI}/{schedule_id}")
    assert deleted.status_code == 200
    assert deleted.content == b""

    missing = client.get(f"{URI}/{schedule_id}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Resource not found."


def test_duplicate_is_decided_by_id_not_content(client):
    first = client.post(URI, json=schedule_payload()).json()
    second = client.post(URI, json=schedule_payload())

    assert second.status_code == 201
    assert second.json()["id"] != first["id"]


def test_get_unknown_schedule_is_not_found(client):
    response = client.get(f"{URI}/1")

    assert response.status_code == 404
    assert response.json()["message"] == "Schedule with id '1' not found."


def test_list_returns_bare_list_in_insertion_order(client):
    first = client.post(URI, json=schedule_payload(name="Name")).json()
    second = client.post(URI, json=schedule_payload(name="Name2", description="Description2")).json()

    response = client.get(URI)

    assert response.status_code == 200
    assert response.json() == [first, second]


def test_list_of_empty_storage(client):
    assert client.get(URI).json() == []


def test_update_replaces_schedule(client):
    created = client.post(URI, json=schedule_payload()).json()
    changed = {**created, "name": "Renamed", "amountOfTrainingsPerWeek": 3}

    response = client.put(URI, json=changed)

    assert response.status_code == 200
    assert response.json() == changed
    assert client.get(f"{URI}/{created['id']}").json() == changed


def test_update_with_empty_name_is_bad_request(client):
    created = client.post(URI, json=schedule_payload()).json()

    response = client.put(URI, json={**created, "name": ""})

    assert response.status_code == 400
    assert "Schedule name cannot be empty!" in response.json()["message"]


def test_update_of_unknown_id_is_not_found_and_creates_nothing(client):
    response = client.put(URI, json=schedule_payload(id=77))

    assert response.status_code == 404
    assert client.get(URI).json() == []


def test_delete_of_unknown_id_succeeds(client):
    assert client.delete(f"{URI}/12345").status_code == 200


def test_trainings_reference_workouts(client):
    workout = client.post("/api/workouts", json={"name": "Leg day"}).json()

    created = client.post(URI, json=schedule_payload(trainings=[workout["id"]]))
    assert created.status_code == 201
    assert created.json()["trainings"] == [workout["id"]]

    client.delete(f"/api/workouts/{workout['id']}")
    assert client.get(f"{URI}/{created.json()['id']}").json()["trainings"] == []


def test_unknown_training_reference_is_not_found(client):
    response = client.post(URI, json=schedule_payload(trainings=[999]))

    assert response.status_code == 404
    assert response.json()["message"] == "Workout with id '999' not found."
    assert client.get(URI).json() == []


def test_id_beyond_storage_range_is_bad_request(client):
    response = client.get(f"{URI}/{2 ** 63}")

    assert response.status_code == 400
    assert response.json()["message"].startswith("Object sent is not valid: [schedule_id:")


def test_negative_unknown_id_is_not_found(client):
    assert client.get(f"{URI}/-1").status_code == 404


def test_trainings_per_week_beyond_storage_range_is_bad_request(client):
    response = client.post(URI, json=schedule_payload(amountOfTrainingsPerWeek=2 ** 63))

    assert response.status_code == 400
    assert response.json()["message"].startswith("Object sent is not valid: [amountOfTrainingsPerWeek:")
    assert client.get(URI).json() == []


def test_training_reference_beyond_storage_range_is_bad_request(client):
    response = client.post(URI, json=schedule_payload(trainings=[2 ** 63]))

    assert response.status_code == 400
    assert response.json()["message"].startswith("Object sent is not valid: [trainings.0:")


def test_body_id_beyond_storage_range_is_bad_request(client):
    response = client.put(URI, json=schedule_payload(id=2 ** 63))

    assert response.status_code == 400
    assert response.json()["detail"] == "Bad request."
