from bumptrack import create_app
from tests.conftest import TEST_CONFIG


def _register(client, **overrides):
    payload = {"first_name": "Ana", "last_name": "Silva", "email": "ana@example.com", "password": "secret123"}
    payload.update(overrides)
    return client.post("/api/v1/auth/register", json=payload)


def test_register_and_login(client):
    resp = _register(client, email="  ANA@Example.com ")
    assert resp.status_code == 201
    assert resp.get_json()["data"]["email"] == "ana@example.com"

    resp = client.post("/api/v1/auth/login", json={"email": "ana@example.com", "password": "secret123"})
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["access_token"]
    assert body["user"]["first_name"] == "Ana"


def test_register_rejects_duplicates_and_short_passwords(client):
    assert _register(client).status_code == 201
    assert _register(client).status_code == 409
    assert _register(client, email="bia@example.com", password="123").status_code == 400
    assert _register(client, email="").status_code == 400


def test_login_with_wrong_password(client):
    _register(client)
    resp = client.post("/api/v1/auth/login", json={"email": "ana@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_profile_requires_token(client):
    resp = client.get("/api/v1/auth/user")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_garbage_token_is_rejected(client):
    resp = client.get("/api/v1/auth/user", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 422


def test_update_profile(client, auth_headers):
    resp = client.put("/api/v1/auth/user", headers=auth_headers, json={
        "city": "Lisbon", "birthDate": "1993-06-14", "bloodType": "O+",
    })
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["city"] == "Lisbon"
    assert data["birthDate"] == "1993-06-14"

    fetched = client.get("/api/v1/auth/user", headers=auth_headers).get_json()["data"]
    assert fetched["bloodType"] == "O+"


def test_update_profile_rejects_blank_name(client, auth_headers):
    resp = client.put("/api/v1/auth/user", headers=auth_headers, json={"first_name": " "})
    assert resp.status_code == 422


def test_health(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["status"] == "connected"


def test_non_string_credentials_are_rejected(client):
    assert _register(client, password=1234567).status_code == 400
    assert _register(client, first_name=42).status_code == 400
    assert _register(client, email=["ana@example.com"]).status_code == 400

    _register(client)
    resp = client.post("/api/v1/auth/login", json={"email": "ana@example.com", "password": 123456})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_cors_origin_comes_from_config():
    app = create_app({**TEST_CONFIG, "FRONTEND_URL": "https://app.bumptrack.example"})
    client = app.test_client()

    allowed = client.get("/api/v1/health", headers={"Origin": "https://app.bumptrack.example"})
    assert allowed.headers.get("Access-Control-Allow-Origin") == "https://app.bumptrack.example"

    other = client.get("/api/v1/health", headers={"Origin": "https://elsewhere.example"})
    assert "Access-Control-Allow-Origin" not in other.headers
