def _medication(client, headers, **overrides):
    payload = {"name": "Folic acid", "type": "vitamin", "dosage": "400 mcg", "frequency": "daily"}
    payload.update(overrides)
    return client.post("/api/v1/medications", headers=headers, json=payload)


def test_medications_require_token(client):
    assert client.get("/api/v1/medications").status_code == 401
    assert client.get("/api/v1/birth-plan").status_code == 401


def test_create_and_list_medications(client, auth_headers, pregnancy):
    resp = _medication(client, auth_headers)
    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["pregnancyId"] == pregnancy["id"]
    assert data["isActive"] is True

    _medication(client, auth_headers, name="Iron", type="Supplement")
    names = [m["name"] for m in client.get("/api/v1/medications", headers=auth_headers).get_json()["data"]]
    assert names == ["Folic acid", "Iron"]


def test_medication_validation(client, auth_headers):
    assert _medication(client, auth_headers, type="potion").status_code == 422
    assert _medication(client, auth_headers, startDate="2024-05-01", endDate="2024-04-01").status_code == 422
    assert _medication(client, auth_headers, isActive="no").status_code == 422
    assert client.post("/api/v1/medications", headers=auth_headers, json={"type": "vitamin"}).status_code == 422


def test_update_and_delete_medication(client, login, auth_headers):
    med_id = _medication(client, auth_headers).get_json()["data"]["id"]

    resp = client.put(f"/api/v1/medications/{med_id}", headers=auth_headers,
                      json={"isActive": False, "endDate": "2024-06-30"})
    assert resp.get_json()["data"]["isActive"] is False
    assert resp.get_json()["data"]["endDate"] == "2024-06-30"

    other = login(email="bia@example.com")
    assert client.put(f"/api/v1/medications/{med_id}", headers=other, json={"name": "x"}).status_code == 404
    assert client.delete(f"/api/v1/medications/{med_id}", headers=other).status_code == 404
    assert client.delete(f"/api/v1/medications/{med_id}", headers=auth_headers).status_code == 200
    assert client.get("/api/v1/medications", headers=auth_headers).get_json()["data"] == []


def test_dose_log_per_medication_and_per_day(client, login, auth_headers):
    folic = _medication(client, auth_headers).get_json()["data"]["id"]
    iron = _medication(client, auth_headers, name="Iron", type="supplement").get_json()["data"]["id"]

    taken = client.post(f"/api/v1/medications/{folic}/log", headers=auth_headers,
                        json={"takenAt": "2024-07-01T08:00:00"})
    assert taken.status_code == 201
    assert taken.get_json()["data"]["skipped"] is False

    client.post(f"/api/v1/medications/{iron}/log", headers=auth_headers,
                json={"takenAt": "2024-07-01T21:00:00", "skipped": True})
    client.post(f"/api/v1/medications/{folic}/log", headers=auth_headers,
                json={"takenAt": "2024-07-02T08:05:00"})

    folic_log = client.get(f"/api/v1/medications/{folic}/log", headers=auth_headers).get_json()["data"]
    assert [entry["takenAt"][:10] for entry in folic_log] == ["2024-07-02", "2024-07-01"]

    day = client.get("/api/v1/medications/log?date=2024-07-01", headers=auth_headers).get_json()
    assert day["date"] == "2024-07-01"
    assert [(entry["medicationId"], entry["skipped"]) for entry in day["data"]] == [(folic, False), (iron, True)]

    other = login(email="bia@example.com")
    assert client.post(f"/api/v1/medications/{folic}/log", headers=other, json={}).status_code == 404
    assert client.get("/api/v1/medications/log?date=2024-07-01", headers=other).get_json()["data"] == []

    client.delete(f"/api/v1/medications/{folic}", headers=auth_headers)
    day = client.get("/api/v1/medications/log?date=2024-07-01", headers=auth_headers).get_json()["data"]
    assert [entry["medicationId"] for entry in day] == [iron]


def test_birth_plan_lifecycle(client, login, auth_headers, pregnancy):
    assert client.get("/api/v1/birth-plan", headers=auth_headers).get_json()["data"] is None

    resp = client.post("/api/v1/birth-plan", headers=auth_headers, json={
        "preferredHospital": "Maternidade Central",
        "birthType": "natural",
        "laborPreferences": ["Dim lights", " ", "Move freely"],
        "emergencyContacts": [{"name": "Rui", "phone": "912 000 000", "relation": "partner"}],
    })
    assert resp.status_code == 201
    plan = resp.get_json()["data"]
    assert plan["pregnancyId"] == pregnancy["id"]
    assert plan["laborPreferences"] == ["Dim lights", "Move freely"]
    assert plan["emergencyContacts"][0]["name"] == "Rui"

    again = client.post("/api/v1/birth-plan", headers=auth_headers, json={"birthType": "cesarean"})
    assert again.status_code == 409

    resp = client.put(f"/api/v1/birth-plan/{plan['id']}", headers=auth_headers,
                      json={"painManagement": "epidural", "birthingTools": ["birthing_ball"]})
    assert resp.get_json()["data"]["painManagement"] == "epidural"
    assert resp.get_json()["data"]["preferredHospital"] == "Maternidade Central"

    fetched = client.get("/api/v1/birth-plan", headers=auth_headers).get_json()["data"]
    assert fetched["birthingTools"] == ["birthing_ball"]

    other = login(email="bia@example.com")
    assert client.put(f"/api/v1/birth-plan/{plan['id']}", headers=other, json={}).status_code == 404


def test_birth_plan_validation(client, auth_headers):
    resp = client.post("/api/v1/birth-plan", headers=auth_headers, json={"emergencyContacts": [{"phone": "1"}]})
    assert resp.status_code == 422
    resp = client.post("/api/v1/birth-plan", headers=auth_headers, json={"musicPlaylist": "all of it"})
    assert resp.status_code == 422
