# tests/test_feeding_api.py
API_PREFIX = "/api/v1"


def _create_schedule(client, fish_id, time="08:00", food_type="flakes"):
    resp = client.post(
        f"{API_PREFIX}/feeding-schedules",
        json={"time": time, "foodType": food_type, "fishId": fish_id},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_schedule(client, nemo):
    resp = client.post(
        f"{API_PREFIX}/feeding-schedules",
        json={"time": "08:00", "foodType": "flakes", "fishId": nemo["id"]},
    )
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "time": "08:00", "foodType": "flakes", "fishId": nemo["id"]}


def test_get_schedule_includes_fish_name(client, nemo):
    schedule = _create_schedule(client, nemo["id"])
    resp = client.get(f"{API_PREFIX}/feeding-schedules/{schedule['id']}")
    assert resp.status_code == 200
    assert resp.json() == {
        "id": schedule["id"],
        "time": "08:00",
        "foodType": "flakes",
        "fishId": nemo["id"],
        "fishName": "Nemo",
    }


def test_list_schedules_includes_fish_name(client, nemo):
    _create_schedule(client, nemo["id"], time="08:00")
    _create_schedule(client, nemo["id"], time="18:00", food_type="pellets")

    resp = client.get(f"{API_PREFIX}/feeding-schedules")
    assert resp.status_code == 200
    rows = resp.json()
    assert sorted(r["time"] for r in rows) == ["08:00", "18:00"]
    assert all(r["fishName"] == "Nemo" for r in rows)


def test_list_schedules_empty(client):
    resp = client.get(f"{API_PREFIX}/feeding-schedules")
    assert resp.status_code == 200
    assert resp.json() == []


def test_schedules_for_fish_have_no_fish_name(client, nemo, fish_payload):
    dory = client.post(f"{API_PREFIX}/fish", json=dict(fish_payload, name="Dory")).json()
    _create_schedule(client, nemo["id"], time="08:00")
    _create_schedule(client, nemo["id"], time="12:00")
    _create_schedule(client, dory["id"], time="09:00")

    resp = client.get(f"{API_PREFIX}/feeding-schedules/fish/{nemo['id']}")
    assert resp.status_code == 200
    rows = resp.json()
    assert sorted(r["time"] for r in rows) == ["08:00", "12:00"]
    for row in rows:
        assert "fishName" not in row
        assert row["fishId"] == nemo["id"]


def test_schedules_for_unknown_fish_is_empty(client):
    resp = client.get(f"{API_PREFIX}/feeding-schedules/fish/404")
    assert resp.status_code == 200
    assert resp.json() == []


def test_get_unknown_schedule(client):
    resp = client.get(f"{API_PREFIX}/feeding-schedules/5")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Feeding schedule not found"}


def test_create_for_unknown_fish_is_rejected_by_store(client):
    resp = client.post(
        f"{API_PREFIX}/feeding-schedules",
        json={"time": "08:00", "foodType": "flakes", "fishId": 31337},
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to create feeding schedule"}
    assert client.get(f"{API_PREFIX}/feeding-schedules").json() == []


def test_update_schedule(client, nemo, fish_payload):
    dory = client.post(f"{API_PREFIX}/fish", json=dict(fish_payload, name="Dory")).json()
    schedule = _create_schedule(client, nemo["id"])

    body = {"time": "20:00", "foodType": "bloodworms", "fishId": dory["id"]}
    resp = client.put(f"{API_PREFIX}/feeding-schedules/{schedule['id']}", json=body)
    assert resp.status_code == 200
    assert resp.json() == {"id": schedule["id"], **body}

    fetched = client.get(f"{API_PREFIX}/feeding-schedules/{schedule['id']}").json()
    assert fetched["fishName"] == "Dory"
    assert fetched["time"] == "20:00"


def test_update_unknown_schedule(client, nemo):
    body = {"time": "20:00", "foodType": "flakes", "fishId": nemo["id"]}
    resp = client.put(f"{API_PREFIX}/feeding-schedules/12", json=body)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Feeding schedule not found"}
    assert client.get(f"{API_PREFIX}/feeding-schedules").json() == []


def test_update_to_unknown_fish_is_rejected_by_store(client, nemo):
    schedule = _create_schedule(client, nemo["id"])
    body = {"time": "20:00", "foodType": "flakes", "fishId": 999}
    resp = client.put(f"{API_PREFIX}/feeding-schedules/{schedule['id']}", json=body)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to update feeding schedule"}


def test_delete_schedule(client, nemo):
    schedule = _create_schedule(client, nemo["id"])
    resp = client.delete(f"{API_PREFIX}/feeding-schedules/{schedule['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Feeding schedule deleted successfully"}

    resp = client.delete(f"{API_PREFIX}/feeding-schedules/{schedule['id']}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Feeding schedule not found"}


def test_deleting_fish_cascades_to_schedules(client, nemo, fish_payload):
    dory = client.post(f"{API_PREFIX}/fish", json=dict(fish_payload, name="Dory")).json()
    first = _create_schedule(client, nemo["id"], time="08:00")
    second = _create_schedule(client, nemo["id"], time="18:00")
    kept = _create_schedule(client, dory["id"], time="09:00")

    assert client.delete(f"{API_PREFIX}/fish/{nemo['id']}").status_code == 200

    for schedule in (first, second):
        resp = client.get(f"{API_PREFIX}/feeding-schedules/{schedule['id']}")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Feeding schedule not found"}
    assert client.get(f"{API_PREFIX}/feeding-schedules/fish/{nemo['id']}").json() == []

    remaining = client.get(f"{API_PREFIX}/feeding-schedules").json()
    assert [r["id"] for r in remaining] == [kept["id"]]


def test_snake_case_fish_id_is_not_bound(client, nemo):
    # Only "fishId" binds; fish_id is ignored, leaving 0, which the store rejects.
    resp = client.post(
        f"{API_PREFIX}/feeding-schedules",
        json={"time": "08:00", "foodType": "flakes", "fish_id": nemo["id"]},
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to create feeding schedule"}
    assert client.get(f"{API_PREFIX}/feeding-schedules").json() == []
