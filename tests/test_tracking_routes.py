import pytest


def _post(client, url, headers, payload):
    resp = client.post(url, headers=headers, json=payload)
    return resp.status_code, resp.get_json()


@pytest.mark.parametrize("url", [
    "/api/v1/weight",
    "/api/v1/diary",
    "/api/v1/appointments",
    "/api/v1/kick-counter",
    "/api/v1/symptoms",
    "/api/v1/shopping-list",
])
def test_logs_require_token(client, url):
    assert client.get(url).status_code == 401


def test_weight_updates_current_weight_and_gain(client, auth_headers, pregnancy):
    status, body = _post(client, "/api/v1/weight", auth_headers, {"weight": 62, "date": "2024-03-01"})
    assert status == 201
    assert body["data"]["pregnancyId"] == pregnancy["id"]

    # An older entry must not overwrite the current weight
    _post(client, "/api/v1/weight", auth_headers, {"weight": 61, "date": "2024-02-01"})

    active = client.get("/api/v1/pregnancies/active", headers=auth_headers).get_json()["data"]
    assert active["currentWeight"] == 62

    listing = client.get("/api/v1/weight", headers=auth_headers).get_json()
    assert [e["date"] for e in listing["data"]] == ["2024-03-01", "2024-02-01"]
    assert listing["totalGain"] == 2.0


def test_weight_validation(client, auth_headers):
    status, _ = _post(client, "/api/v1/weight", auth_headers, {"weight": 62})
    assert status == 422
    status, _ = _post(client, "/api/v1/weight", auth_headers, {"weight": "heavy", "date": "2024-03-01"})
    assert status == 422


def test_weight_without_pregnancy_has_no_gain(client, auth_headers):
    status, body = _post(client, "/api/v1/weight", auth_headers, {"weight": 58, "date": "2024-03-01"})
    assert status == 201
    assert body["data"]["pregnancyId"] is None
    assert client.get("/api/v1/weight", headers=auth_headers).get_json()["totalGain"] is None


def test_delete_weight_entry_checks_owner(client, login, auth_headers):
    _, body = _post(client, "/api/v1/weight", auth_headers, {"weight": 58, "date": "2024-03-01"})
    other = login(email="bia@example.com")

    assert client.delete(f"/api/v1/weight/{body['data']['id']}", headers=other).status_code == 404
    assert client.delete(f"/api/v1/weight/{body['data']['id']}", headers=auth_headers).status_code == 200
    assert client.get("/api/v1/weight", headers=auth_headers).get_json()["data"] == []


def test_diary_entries_list_and_search(client, auth_headers, pregnancy):
    _post(client, "/api/v1/diary", auth_headers, {
        "date": "2024-03-01T09:00:00Z", "title": "First scan", "content": "Saw the heartbeat", "tags": ["scan"],
    })
    _post(client, "/api/v1/diary", auth_headers, {
        "date": "2024-03-05T09:00:00Z", "content": "Tired all day", "mood": "tired",
    })

    entries = client.get("/api/v1/diary", headers=auth_headers).get_json()["data"]
    assert [e["content"] for e in entries] == ["Tired all day", "Saw the heartbeat"]
    assert entries[1]["tags"] == ["scan"]

    limited = client.get("/api/v1/diary?limit=1", headers=auth_headers).get_json()["data"]
    assert len(limited) == 1

    found = client.get("/api/v1/diary/search?q=HEARTBEAT", headers=auth_headers).get_json()["data"]
    assert [e["title"] for e in found] == ["First scan"]

    assert client.get("/api/v1/diary/search", headers=auth_headers).status_code == 400


def test_diary_requires_content(client, auth_headers):
    status, _ = _post(client, "/api/v1/diary", auth_headers, {"title": "Empty"})
    assert status == 422


def test_diary_update_and_foreign_pregnancy(client, login, auth_headers, pregnancy):
    _, body = _post(client, "/api/v1/diary", auth_headers, {"content": "Draft"})
    entry_id = body["data"]["id"]

    resp = client.put(f"/api/v1/diary/{entry_id}", headers=auth_headers, json={"content": "Final", "tags": ["x"]})
    assert resp.get_json()["data"]["content"] == "Final"
    assert resp.get_json()["data"]["tags"] == ["x"]

    empty = client.put(f"/api/v1/diary/{entry_id}", headers=auth_headers, json={"content": "  "})
    assert empty.status_code == 422

    other = login(email="bia@example.com")
    status, _ = _post(client, "/api/v1/diary", other, {"content": "Mine", "pregnancyId": pregnancy["id"]})
    assert status == 404
    assert client.delete(f"/api/v1/diary/{entry_id}", headers=other).status_code == 404


def test_upcoming_appointments_are_pending_and_ascending(client, auth_headers):
    for date, time, done in (("2024-05-10", "14:00", False),
                             ("2024-04-02", "09:30", False),
                             ("2024-05-10", "08:15", False),
                             ("2024-03-01", "10:00", True)):
        status, _ = _post(client, "/api/v1/appointments", auth_headers, {
            "date": date, "time": time, "type": "prenatal", "isCompleted": done,
        })
        assert status == 201

    upcoming = client.get("/api/v1/appointments/upcoming", headers=auth_headers).get_json()["data"]
    assert [(a["date"], a["time"]) for a in upcoming] == [
        ("2024-04-02", "09:30"), ("2024-05-10", "08:15"), ("2024-05-10", "14:00"),
    ]

    everything = client.get("/api/v1/appointments", headers=auth_headers).get_json()["data"]
    assert len(everything) == 4
    assert everything[0]["time"] == "14:00"


def test_appointment_validation_and_completion(client, auth_headers):
    status, _ = _post(client, "/api/v1/appointments", auth_headers,
                      {"date": "2024-05-10", "time": "25:00", "type": "ultrasound"})
    assert status == 422

    _, body = _post(client, "/api/v1/appointments", auth_headers,
                    {"date": "2024-05-10", "time": "11:00", "type": "ultrasound"})
    appointment_id = body["data"]["id"]

    resp = client.put(f"/api/v1/appointments/{appointment_id}", headers=auth_headers, json={"isCompleted": True})
    assert resp.get_json()["data"]["isCompleted"] is True
    assert client.get("/api/v1/appointments/upcoming", headers=auth_headers).get_json()["data"] == []

    assert client.delete(f"/api/v1/appointments/{appointment_id}", headers=auth_headers).status_code == 200


def test_kick_session_duration(client, auth_headers, pregnancy):
    status, body = _post(client, "/api/v1/kick-counter", auth_headers, {
        "date": "2024-07-01",
        "kickCount": 10,
        "timeStarted": "2024-07-01T20:00:00",
        "timeEnded": "2024-07-01T20:45:00",
    })
    assert status == 201
    assert body["data"]["durationMinutes"] == 45
    assert body["data"]["kickCount"] == 10

    sessions = client.get("/api/v1/kick-counter", headers=auth_headers).get_json()["data"]
    assert len(sessions) == 1


def test_kick_session_must_end_after_start(client, auth_headers):
    status, _ = _post(client, "/api/v1/kick-counter", auth_headers, {
        "timeStarted": "2024-07-01T20:00:00",
        "timeEnded": "2024-07-01T19:00:00",
    })
    assert status == 422


def test_symptom_severity_range(client, auth_headers):
    status, _ = _post(client, "/api/v1/symptoms", auth_headers,
                      {"date": "2024-03-02", "symptomType": "nausea", "severity": 11})
    assert status == 422

    status, body = _post(client, "/api/v1/symptoms", auth_headers,
                         {"date": "2024-03-02", "symptomType": "nausea", "severity": 6, "duration": 3})
    assert status == 201

    resp = client.put(f"/api/v1/symptoms/{body['data']['id']}", headers=auth_headers, json={"severity": 2})
    assert resp.get_json()["data"]["severity"] == 2
    assert len(client.get("/api/v1/symptoms", headers=auth_headers).get_json()["data"]) == 1


def test_shopping_list(client, auth_headers):
    status, _ = _post(client, "/api/v1/shopping-list", auth_headers, {"name": "Stroller", "priority": "urgent"})
    assert status == 422

    status, body = _post(client, "/api/v1/shopping-list", auth_headers, {"name": "Crib", "price": 120})
    assert status == 201
    assert body["data"]["priority"] == "medium"
    assert body["data"]["isPurchased"] is False

    item_id = body["data"]["id"]
    resp = client.put(f"/api/v1/shopping-list/{item_id}", headers=auth_headers,
                      json={"isPurchased": True, "priority": "HIGH"})
    assert resp.get_json()["data"]["isPurchased"] is True
    assert resp.get_json()["data"]["priority"] == "high"

    assert client.delete(f"/api/v1/shopping-list/{item_id}", headers=auth_headers).status_code == 200
    assert client.get("/api/v1/shopping-list", headers=auth_headers).get_json()["data"] == []


def test_deleting_newest_weight_restores_previous(client, auth_headers, pregnancy):
    _post(client, "/api/v1/weight", auth_headers, {"weight": 62, "date": "2024-02-01"})
    _, newest = _post(client, "/api/v1/weight", auth_headers, {"weight": 70, "date": "2024-03-01"})

    client.delete(f"/api/v1/weight/{newest['data']['id']}", headers=auth_headers)
    active = client.get("/api/v1/pregnancies/active", headers=auth_headers).get_json()["data"]
    assert active["currentWeight"] == 62

    remaining = client.get("/api/v1/weight", headers=auth_headers).get_json()["data"]
    client.delete(f"/api/v1/weight/{remaining[0]['id']}", headers=auth_headers)
    active = client.get("/api/v1/pregnancies/active", headers=auth_headers).get_json()["data"]
    assert active["currentWeight"] is None


def test_flags_must_be_json_booleans(client, auth_headers):
    status, _ = _post(client, "/api/v1/appointments", auth_headers, {
        "date": "2024-05-10", "time": "11:00", "type": "ultrasound", "isCompleted": "false",
    })
    assert status == 422

    _, body = _post(client, "/api/v1/shopping-list", auth_headers, {"name": "Crib"})
    resp = client.put(f"/api/v1/shopping-list/{body['data']['id']}", headers=auth_headers,
                      json={"isPurchased": "yes"})
    assert resp.status_code == 422


def test_dates_with_trailing_text_are_rejected(client, auth_headers):
    status, _ = _post(client, "/api/v1/weight", auth_headers, {"weight": 62, "date": "2024-03-01T10:00"})
    assert status == 422
    status, _ = _post(client, "/api/v1/symptoms", auth_headers,
                      {"date": 20240302, "symptomType": "nausea", "severity": 3})
    assert status == 422
